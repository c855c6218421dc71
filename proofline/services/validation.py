from __future__ import annotations
import os
import re
from typing import Optional

from proofline.core.config import (
    ALLOWED_EXTENSIONS,
    MAX_TEXT_LENGTH,
    MAX_UPLOAD_BYTES,
    MIME_ALLOW,
    REPEATED_CHAR_RUN,
    SOFT_TEXT_LENGTH,
    WHITESPACE_RUN,
)
from proofline.models.validation import ValidationResult

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
_REPEATED_CHAR = re.compile(r"(.)\1{%d,}" % (REPEATED_CHAR_RUN - 1), re.DOTALL)
_WHITESPACE_RUN = re.compile(r"\s{%d,}" % WHITESPACE_RUN)


def validate(
    text: str,
    max_length: int = MAX_TEXT_LENGTH,
    soft_length: int = SOFT_TEXT_LENGTH,
) -> ValidationResult:
    errors = []
    warnings = []

    if not text:
        errors.append("Text cannot be empty")
    if len(text) > max_length:
        errors.append(f"Text is too long. Maximum {max_length:,} characters allowed.")

    if len(text) > soft_length:
        warnings.append("Large text may take longer to process")
    if _REPEATED_CHAR.search(text):
        warnings.append("Text contains long runs of a repeated character")
    if _WHITESPACE_RUN.search(text):
        warnings.append("Text contains excessive whitespace")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def validate_file(filename: str, size: int, mime: Optional[str] = None) -> ValidationResult:
    errors = []
    if size > MAX_UPLOAD_BYTES:
        errors.append(f"File is too large. Maximum {MAX_UPLOAD_BYTES // (1024 * 1024)}MB allowed.")

    ext = os.path.splitext(filename or "")[1].lower()
    if ext not in ALLOWED_EXTENSIONS:
        allowed = ", ".join(sorted(ALLOWED_EXTENSIONS))
        errors.append(f"Only {allowed} files are supported")
    elif mime is not None and mime not in MIME_ALLOW[ext]:
        errors.append(f"Unexpected MIME type: {mime} for {ext}")

    return ValidationResult(is_valid=not errors, errors=errors)


def sanitize(text: str) -> str:
    text = _CONTROL_CHARS.sub("", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.strip()
