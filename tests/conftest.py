"""
Shared fixtures: minimal PDF generation and log capture.
"""

from pathlib import Path
from typing import List

import pytest
from loguru import logger


def build_pdf(pages: List[str]) -> bytes:
    """
    Build a minimal single-font PDF with one line of text per page.

    Object layout: 1 catalog, 2 page tree, 3 Helvetica font, then a
    (page, content stream) pair per page. The xref table carries real byte
    offsets so parsers need no repair pass.
    """
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, pages):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode() + stream + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_pos = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_pos}\n%%EOF\n"
    ).encode()
    return bytes(out)


@pytest.fixture
def pdf_builder():
    """Expose build_pdf to tests that need raw PDF bytes."""
    return build_pdf


@pytest.fixture
def make_pdf(tmp_path):
    """Factory writing a generated PDF to tmp_path and returning its path."""

    def _make_pdf(*pages: str, name: str = "resume.pdf") -> Path:
        pdf_path = tmp_path / name
        pdf_path.write_bytes(build_pdf(list(pages)))
        return pdf_path

    return _make_pdf


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: List[str] = []
    handler_id = logger.add(messages.append, format="{level} | {message}", level="DEBUG")
    yield messages
    logger.remove(handler_id)
