import pytest

from proofline.core.config import MAX_UPLOAD_BYTES
from proofline.services.validation import sanitize, validate, validate_file


def test_empty_text_is_invalid():
    result = validate("")
    assert result.is_valid is False
    assert result.errors == ["Text cannot be empty"]


def test_over_max_length_is_invalid():
    result = validate("ab" * 25_500)  # 51,000 characters
    assert result.is_valid is False
    assert any("too long" in e for e in result.errors)
    assert "Large text may take longer to process" in result.warnings


def test_max_length_boundary_is_valid():
    result = validate("ab " * 16_666 + "ab")  # exactly 50,000 characters
    assert result.is_valid is True
    assert result.errors == []


def test_soft_limit_warns_without_blocking():
    result = validate("Some words here. " * 700)
    assert result.is_valid is True
    assert result.warnings == ["Large text may take longer to process"]


def test_repeated_character_run_warns():
    assert validate("a" * 19).warnings == []
    result = validate("a" * 20)
    assert result.is_valid is True
    assert result.warnings == ["Text contains long runs of a repeated character"]


def test_whitespace_run_warns():
    assert validate("a" + " " * 9 + "b").warnings == []
    assert validate("a" + " " * 10 + "b").warnings == ["Text contains excessive whitespace"]


def test_clean_text_has_no_warnings():
    result = validate("She dont like it.")
    assert result.is_valid is True
    assert result.errors == [] and result.warnings == []


# ============================================================================
# validate_file
# ============================================================================


@pytest.mark.parametrize("name,mime", [
    ("notes.txt", "text/plain"),
    ("paper.PDF", "application/pdf"),
    ("essay.docx", "application/zip"),
])
def test_allowed_files(name, mime):
    assert validate_file(name, 1024, mime).is_valid is True


def test_file_too_large():
    result = validate_file("notes.txt", MAX_UPLOAD_BYTES + 1)
    assert result.is_valid is False
    assert "too large" in result.errors[0]


def test_file_wrong_extension():
    result = validate_file("notes.rtf", 10)
    assert result.is_valid is False
    assert "supported" in result.errors[0]


def test_file_mime_mismatch():
    result = validate_file("paper.pdf", 10, "text/plain")
    assert result.is_valid is False
    assert "Unexpected MIME type" in result.errors[0]


# ============================================================================
# sanitize
# ============================================================================


def test_sanitize_strips_controls_and_normalizes_newlines():
    raw = "\x00Hello\x07\r\nWorld\r\x0b\x0c\x1f\x7f  "
    assert sanitize(raw) == "Hello\nWorld"


def test_sanitize_keeps_tabs_and_newlines():
    assert sanitize("a\tb\nc") == "a\tb\nc"


def test_sanitize_trims():
    assert sanitize("  \n padded \n ") == "padded"
