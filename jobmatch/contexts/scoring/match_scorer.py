"""
ATS match scoring between resume text and a job description.

The score is the floor of the percentage of job-description keywords found in
the resume text, clamped to [0, 100].

Main entry points:
    score: Fail-soft integer score from already-extracted resume text.
    evaluate: Explicit MatchResult distinguishing OK, EXTRACTION_FAILED and
              EMPTY_INPUT.
    evaluate_document / score_document: Extract a resume PDF, then score it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Set

from jobmatch.contexts.intake.document_extractor import (
    DocumentSource,
    ExtractionResult,
    extract_document,
)
from jobmatch.contexts.scoring.keywords import extract_keywords, find_matches
from jobmatch.contexts.scoring.logger import (
    log_keywords_extracted,
    log_match_result,
    log_scoring_error,
)

MIN_SCORE = 0
MAX_SCORE = 100


class MatchStatus(Enum):
    OK = "ok"
    EXTRACTION_FAILED = "extraction_failed"
    EMPTY_INPUT = "empty_input"


@dataclass
class MatchResult:
    """
    Outcome of scoring a resume against a job description.

    Attributes:
        status: Whether a score was computed, and if not, why
        score: Integer percentage in [0, 100] (always 0 unless status is OK)
        keywords: Keywords taken from the job description
        matched_keywords: Keywords found in the resume text
        extraction: Extraction details when scoring started from a document
    """

    status: MatchStatus
    score: int = MIN_SCORE
    keywords: Set[str] = field(default_factory=set)
    matched_keywords: Set[str] = field(default_factory=set)
    extraction: Optional[ExtractionResult] = None

    @property
    def is_ok(self) -> bool:
        return self.status is MatchStatus.OK

    @property
    def missing_keywords(self) -> Set[str]:
        return self.keywords - self.matched_keywords


def compute_percentage(matched_count: int, total_keywords: int) -> int:
    """Floor percentage of matched keywords, clamped to [0, 100]; 0 when there are none."""
    if total_keywords <= 0:
        return MIN_SCORE
    percentage = matched_count * 100 // total_keywords
    return max(MIN_SCORE, min(MAX_SCORE, percentage))


def _is_blank(text: Optional[str]) -> bool:
    return not text or not text.strip()


def evaluate(resume_text: Optional[str], job_description: Optional[str]) -> MatchResult:
    """
    Score resume text against a job description with an explicit status.

    Args:
        resume_text: Text extracted from the resume ("" or None if extraction failed)
        job_description: Raw job description

    Returns:
        MatchResult with status:
        - EMPTY_INPUT if the job description is blank or yields no keywords
        - EXTRACTION_FAILED if the resume text is empty
        - OK otherwise, with score and matched keywords

    Example:
        >>> result = evaluate("Experienced Python developer with cloud skills",
        ...                   "Python cloud engineer")
        >>> result.score
        66
        >>> sorted(result.missing_keywords)
        ['engineer']
    """
    if _is_blank(job_description):
        result = MatchResult(status=MatchStatus.EMPTY_INPUT)
        log_match_result(result)
        return result

    keywords = extract_keywords(job_description)
    log_keywords_extracted(len(keywords))
    if not keywords:
        result = MatchResult(status=MatchStatus.EMPTY_INPUT)
    elif not resume_text:
        result = MatchResult(status=MatchStatus.EXTRACTION_FAILED, keywords=keywords)
    else:
        matched = find_matches(keywords, resume_text)
        result = MatchResult(
            status=MatchStatus.OK,
            score=compute_percentage(len(matched), len(keywords)),
            keywords=keywords,
            matched_keywords=matched,
        )

    log_match_result(result)
    return result


def score(resume_text: Optional[str], job_description: Optional[str]) -> int:
    """
    Integer ATS score in [0, 100]. Never raises; any failure scores 0.
    """
    try:
        return evaluate(resume_text, job_description).score
    except Exception as e:
        log_scoring_error(e)
        return MIN_SCORE


def evaluate_document(
    document: Optional[DocumentSource], job_description: Optional[str]
) -> MatchResult:
    """
    Extract text from a resume document and evaluate it.

    Missing documents and blank job descriptions short-circuit to EMPTY_INPUT
    without touching the document. A document that fails to parse, or parses
    to no text, yields EXTRACTION_FAILED.
    """
    if document is None or _is_blank(job_description):
        result = MatchResult(status=MatchStatus.EMPTY_INPUT)
        log_match_result(result)
        return result

    extraction = extract_document(document)
    result = evaluate(extraction.text, job_description)
    result.extraction = extraction
    return result


def score_document(document: Optional[DocumentSource], job_description: Optional[str]) -> int:
    """
    Integer ATS score for a resume document. Never raises; any failure scores 0.
    """
    try:
        return evaluate_document(document, job_description).score
    except Exception as e:
        log_scoring_error(e)
        return MIN_SCORE
