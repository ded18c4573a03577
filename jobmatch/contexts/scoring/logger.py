"""
Scoring context logger.

Provides logging interface for scoring context with automatic [score] prefix.
All scoring modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from jobmatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[score]"


def setup_scoring_logger(
    log_dir: Path, resume: Optional[str] = None, console_level: Optional[str] = None
) -> Path:
    """
    Setup logger for scoring context.

    Args:
        log_dir: Directory for this scoring session
        resume: Resume being scored, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file

    Example:
        from jobmatch.contexts.scoring.logger import setup_scoring_logger

        log_file = setup_scoring_logger(log_dir, resume="resume.pdf")
    """
    return _setup_logger(
        context_name="score",
        log_dir=log_dir,
        extra_provenance={"Resume": resume} if resume else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [score] prefix


def _log_info(message: str) -> None:
    """Log info message with [score] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [score] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [score] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [score] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [score] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level scoring-specific logging helpers


def log_keywords_extracted(num_keywords: int) -> None:
    _log_info(f"Extracted {num_keywords} keywords from job description")


def log_match_result(result) -> None:
    """
    Log outcome of an evaluation.

    Args:
        result: MatchResult from evaluate()
    """
    if result.is_ok:
        _log_success(
            f"Score {result.score}: matched {len(result.matched_keywords)}"
            f"/{len(result.keywords)} keywords"
        )
        _log_debug(f"  Matched: {sorted(result.matched_keywords)}")
        _log_debug(f"  Missing: {sorted(result.missing_keywords)}")
    else:
        _log_warning(f"No score computed ({result.status.value})")


def log_scoring_error(error: Exception) -> None:
    _log_error(f"Scoring failed, reporting 0: {type(error).__name__}: {error}")
