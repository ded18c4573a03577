"""
Scoring Context

Responsibilities:
- Tokenizes job descriptions into verbatim keywords
- Matches keywords against extracted resume text
- Computes the integer ATS match score

Owns: Keyword matching and score computation
Never: Parses documents directly (delegates to the intake context)
"""

from jobmatch.contexts.scoring.keywords import extract_keywords, find_matches
from jobmatch.contexts.scoring.match_scorer import (
    MatchResult,
    MatchStatus,
    compute_percentage,
    evaluate,
    evaluate_document,
    score,
    score_document,
)

__all__ = [
    # Keyword handling
    "extract_keywords",
    "find_matches",
    # Scoring
    "MatchResult",
    "MatchStatus",
    "compute_percentage",
    "evaluate",
    "evaluate_document",
    "score",
    "score_document",
]
