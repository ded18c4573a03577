"""Unit tests for job description keyword tokenization and matching."""

import pytest

from jobmatch.contexts.scoring.keywords import extract_keywords, find_matches


@pytest.mark.unit
def test_extract_keywords_splits_on_spaces():
    assert extract_keywords("Python cloud engineer") == {"Python", "cloud", "engineer"}


@pytest.mark.unit
def test_extract_keywords_collapses_duplicates():
    assert extract_keywords("Python Python cloud") == {"Python", "cloud"}


@pytest.mark.unit
def test_extract_keywords_keeps_case_and_punctuation():
    """Tokens are used verbatim: no case folding, no punctuation stripping."""
    keywords = extract_keywords("Python, python AWS.")
    assert keywords == {"Python,", "python", "AWS."}


@pytest.mark.unit
def test_extract_keywords_drops_empty_tokens():
    """Leading, trailing, and repeated spaces do not produce empty keywords."""
    assert extract_keywords("  Python   cloud ") == {"Python", "cloud"}


@pytest.mark.unit
def test_extract_keywords_only_splits_on_space_character():
    """Tabs and newlines are not separators."""
    assert extract_keywords("Python\ncloud\tengineer") == {"Python\ncloud\tengineer"}


@pytest.mark.unit
@pytest.mark.parametrize("job_description", ["", " ", "     "])
def test_extract_keywords_blank(job_description):
    assert extract_keywords(job_description) == set()


@pytest.mark.unit
def test_find_matches_is_substring_based():
    """A keyword matches inside a longer word."""
    assert find_matches({"Java", "Go"}, "JavaScript and Golang") == {"Java", "Go"}


@pytest.mark.unit
def test_find_matches_is_case_sensitive():
    assert find_matches({"python"}, "Python developer") == set()


@pytest.mark.unit
def test_find_matches_no_false_positive_on_near_miss():
    """'happy' is not a substring of 'unhappiness' (happi != happy)."""
    assert find_matches({"happy"}, "unhappiness") == set()
    assert find_matches({"unhappiness"}, "unhappiness") == {"unhappiness"}
