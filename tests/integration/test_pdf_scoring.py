"""
Integration tests for extraction and scoring against real PDF files.

PDFs are generated on the fly (see conftest.build_pdf) and parsed with the
real pdfplumber/PyPDF2 stack.
"""

import pytest

from jobmatch.contexts.intake import extract_document, extract_text, page_count, stage_upload
from jobmatch.contexts.scoring import MatchStatus, evaluate_document, score, score_document

RESUME_LINE = "Experienced Python developer with cloud skills"


@pytest.mark.integration
def test_extract_single_page(make_pdf):
    pdf_path = make_pdf(RESUME_LINE)

    result = extract_document(pdf_path)

    assert result.success, result.error
    assert result.page_count == 1
    assert "Python" in result.text
    assert "cloud" in result.text


@pytest.mark.integration
def test_extract_multi_page(make_pdf):
    pdf_path = make_pdf("Jane Doe", "Experience at MomCorp")

    result = extract_document(pdf_path)

    assert result.page_count == 2
    assert "Jane" in result.text
    assert "MomCorp" in result.text
    assert page_count(pdf_path) == 2


@pytest.mark.integration
def test_extract_from_bytes_and_stream(make_pdf):
    pdf_bytes = make_pdf(RESUME_LINE).read_bytes()

    assert "developer" in extract_text(pdf_bytes)
    with open(make_pdf(RESUME_LINE, name="again.pdf"), "rb") as f:
        assert "developer" in extract_text(f)
        assert not f.closed


@pytest.mark.integration
def test_corrupt_file_extracts_empty(tmp_path):
    corrupt = tmp_path / "corrupt.pdf"
    corrupt.write_bytes(b"this is not a pdf at all")

    assert extract_text(corrupt) == ""
    assert page_count(corrupt) is None
    assert score(extract_text(corrupt), "Python cloud engineer") == 0


@pytest.mark.integration
def test_truncated_pdf_fails_soft(tmp_path, pdf_builder):
    """Header only: everything after the version line is cut off."""
    truncated = tmp_path / "truncated.pdf"
    truncated.write_bytes(pdf_builder([RESUME_LINE])[:9])

    assert extract_text(truncated) == ""


@pytest.mark.integration
def test_score_document_end_to_end(make_pdf):
    """{Python, cloud, engineer} against the resume -> floor(200/3) = 66."""
    pdf_path = make_pdf(RESUME_LINE)

    assert score_document(pdf_path, "Python cloud engineer") == 66
    assert score_document(pdf_path, "Python cloud") == 100
    assert score_document(pdf_path, "Rust firmware") == 0
    assert score_document(pdf_path, "   ") == 0


@pytest.mark.integration
def test_corrupt_document_is_extraction_failed(tmp_path):
    corrupt = tmp_path / "corrupt.pdf"
    corrupt.write_bytes(b"%PDF-1.4\nnot really")

    result = evaluate_document(corrupt, "Python cloud engineer")

    assert result.status is MatchStatus.EXTRACTION_FAILED
    assert result.score == 0
    assert not result.extraction.success


@pytest.mark.integration
def test_image_only_pdf_is_extraction_failed(make_pdf):
    """A PDF with no text layer parses fine but yields nothing to score."""
    pdf_path = make_pdf("")

    result = evaluate_document(pdf_path, "Python")

    assert result.extraction.success
    assert result.status is MatchStatus.EXTRACTION_FAILED
    assert result.score == 0


@pytest.mark.integration
def test_stage_then_score(make_pdf, tmp_path):
    """Upload flow: stream from the picker -> staged copy -> score."""
    source = make_pdf(RESUME_LINE)

    with open(source, "rb") as picked:
        staged = stage_upload(picked, cache_dir=tmp_path / "cache")

    assert staged is not None
    assert score_document(staged, "Python cloud engineer") == 66
