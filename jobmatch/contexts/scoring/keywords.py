"""
Keyword tokenization and matching for ATS scoring.

Matching is deliberately crude: keywords are taken verbatim from the job
description (no case folding, no punctuation stripping) and a keyword counts
as present if it occurs anywhere in the resume text, including inside longer
words.
"""

from typing import Iterable, Set

KEYWORD_SEPARATOR = " "


def extract_keywords(job_description: str) -> Set[str]:
    """
    Split a job description on single spaces into a set of keywords.

    Empty tokens from leading, trailing, or repeated spaces are dropped.
    Other whitespace (tabs, newlines) is not a separator and stays inside
    the token.

    Example:
        >>> sorted(extract_keywords("Python cloud  Python engineer"))
        ['Python', 'cloud', 'engineer']
    """
    return {token for token in job_description.split(KEYWORD_SEPARATOR) if token}


def find_matches(keywords: Iterable[str], resume_text: str) -> Set[str]:
    """Return the keywords that occur as substrings of resume_text."""
    return {keyword for keyword in keywords if keyword in resume_text}
