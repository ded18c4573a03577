"""
PDF text extraction for uploaded resumes.

Two entry points share one extraction routine:
    extract_text: Fail-soft. Returns "" on any failure so callers always have
                  something to score.
    extract_document: Explicit. Returns an ExtractionResult carrying the
                      failure reason and page count.

Documents may be given as a filesystem path, raw bytes, or a readable binary
file object. Paths are opened and closed within the call; caller-owned file
objects are read but left open.
"""

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

from jobmatch.contexts.intake.logger import (
    _log_debug,
    log_extraction_result,
    log_extraction_start,
)

DocumentSource = Union[str, Path, bytes, bytearray, BinaryIO]


@dataclass
class ExtractionResult:
    """
    Result of extracting text from a resume document.

    Attributes:
        text: Extracted plain text ("" on failure)
        page_count: Number of pages parsed (0 on failure)
        error: Failure description, or None if the document parsed
    """

    text: str = ""
    page_count: int = 0
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


def describe_source(document: DocumentSource) -> str:
    """Short label for a document source, used in log messages."""
    if isinstance(document, (str, Path)):
        return str(document)
    if isinstance(document, (bytes, bytearray)):
        return f"<{len(document)} bytes>"
    return f"<stream {getattr(document, 'name', type(document).__name__)}>"


def _open_target(document: DocumentSource) -> Union[Path, BinaryIO]:
    """Normalize a document source into something pdfplumber/PyPDF2 can open."""
    if isinstance(document, (bytes, bytearray)):
        return io.BytesIO(bytes(document))
    if isinstance(document, (str, Path)):
        pdf_path = Path(document)
        if not pdf_path.exists():
            raise FileNotFoundError(f"PDF not found: {pdf_path}")
        return pdf_path
    if hasattr(document, "read"):
        return document
    raise TypeError(f"Unsupported document type: {type(document).__name__}")


def page_count(document: DocumentSource) -> Optional[int]:
    """Get page count from PDF, or None if unreadable."""
    try:
        target = _open_target(document)
        reader = PdfReader(str(target) if isinstance(target, Path) else target)
        return len(reader.pages)
    except Exception:
        return None


def _extract_pages(document: DocumentSource) -> ExtractionResult:
    """
    Extract text page by page with pdfplumber.

    Pages without a text layer contribute nothing. Raises whatever the
    parsing library raises; callers decide how to surface it.
    """
    target = _open_target(document)

    page_texts = []
    with pdfplumber.open(target) as pdf:
        num_pages = len(pdf.pages)
        for page_num, page in enumerate(pdf.pages, start=1):
            page_text = page.extract_text() or ""
            _log_debug(f"  Page {page_num}: {len(page_text)} chars")
            if page_text:
                page_texts.append(page_text)

    return ExtractionResult(text="\n".join(page_texts), page_count=num_pages)


def extract_document(document: DocumentSource) -> ExtractionResult:
    """
    Extract text from a resume PDF, reporting failures explicitly.

    Args:
        document: Path, bytes, or readable binary file object

    Returns:
        ExtractionResult. On failure (missing file, corrupt PDF, I/O error)
        text is "" and error holds "<ExceptionType>: <message>".

    Example:
        >>> result = extract_document(Path("resume.pdf"))
        >>> if result.success:
        ...     print(result.page_count, len(result.text))
    """
    source_label = describe_source(document)
    log_extraction_start(source_label)

    try:
        result = _extract_pages(document)
    except Exception as e:
        result = ExtractionResult(error=f"{type(e).__name__}: {e}")

    log_extraction_result(source_label, result)
    return result


def extract_text(document: DocumentSource) -> str:
    """
    Extract plain text from a resume PDF, returning "" on any failure.

    The failure itself is logged at warning level by extract_document().
    """
    return extract_document(document).text
