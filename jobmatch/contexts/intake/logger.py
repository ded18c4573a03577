"""
Intake context logger.

Provides logging interface for intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from jobmatch.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(
    log_dir: Path, document: Optional[str] = None, console_level: Optional[str] = None
) -> Path:
    """
    Setup logger for intake context.

    Args:
        log_dir: Directory for this intake session
        document: Document being ingested, recorded in the provenance header
        console_level: Minimum level echoed to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Document": document} if document else None,
        console_level=console_level,
    )


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_extraction_start(source_label: str) -> None:
    _log_debug(f"Extracting text from {source_label}")


def log_extraction_result(source_label: str, result) -> None:
    """
    Log extraction outcome.

    Args:
        source_label: Human-readable description of the document
        result: ExtractionResult from extract_document()
    """
    if result.success:
        _log_success(
            f"Extracted {len(result.text)} chars from {source_label} ({result.page_count} pages)"
        )
        if not result.text.strip():
            _log_warning(f"{source_label} has no text layer (scanned or image-only PDF?)")
    else:
        _log_warning(f"Extraction failed for {source_label}: {result.error}")


def log_upload_staged(staged_path: Path, num_bytes: int) -> None:
    _log_info(f"Staged upload at {staged_path} ({num_bytes} bytes)")


def log_upload_failed(error: Exception) -> None:
    _log_error(f"Failed to stage upload: {type(error).__name__}: {error}")
