"""
Intake Context

Responsibilities:
- Stages uploaded resume documents into a local cache
- Extracts plain text from resume PDFs

Owns: Document ingestion and PDF parsing
Never: Interprets or scores the extracted text
"""

from jobmatch.contexts.intake.document_extractor import (
    DocumentSource,
    ExtractionResult,
    extract_document,
    extract_text,
    page_count,
)
from jobmatch.contexts.intake.upload import (
    UPLOAD_FAILED_NOTICE,
    stage_upload,
)

__all__ = [
    # Text extraction
    "DocumentSource",
    "ExtractionResult",
    "extract_document",
    "extract_text",
    "page_count",
    # Upload staging
    "UPLOAD_FAILED_NOTICE",
    "stage_upload",
]
