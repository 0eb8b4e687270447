"""Unit tests for the validation pipeline."""
from unittest.mock import patch

import pytest

from upload_validator.core.exceptions import UnsupportedType
from upload_validator.core.file_validation import format_size, validate
from upload_validator.core.signatures import FileType
from upload_validator.schemas.validation import ValidationOptions

JPEG = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00" + bytes(64)

CLEAN_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Type /Catalog /Pages 2 0 R >> endobj\n"
    b"trailer << /Root 1 0 R >>\n"
    b"%%EOF\n"
)

METADATA_PDF = (
    b"%PDF-1.4\n"
    b"1 0 obj << /Type /Catalog /Metadata 2 0 R >> endobj\n"
    b"trailer << /Root 1 0 R >>\n"
    b"%%EOF\n"
)

SVG = (
    b'<?xml version="1.0"?>'
    b'<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10">'
    b'<rect width="10" height="10" fill="red"/></svg>'
)


def test_validate_clean_jpeg_passes() -> None:
    verdict = validate(JPEG, "jpeg")
    assert verdict.passed is True
    assert verdict.message == "Content validation passed"


def test_validate_jpeg_with_script_fails() -> None:
    verdict = validate(b"\xff\xd8\xff\xe0<script>alert(1)</script>", "jpeg")
    assert verdict.passed is False
    assert "script" in verdict.message


def test_validate_pdf_metadata_whitelist() -> None:
    strict = validate(METADATA_PDF, "pdf")
    assert strict.passed is False
    assert "Metadata" in strict.message

    relaxed = validate(METADATA_PDF, "pdf", ValidationOptions(whitelist=["Metadata"]))
    assert relaxed.passed is True


def test_validate_whitelist_only_exempts_named_rule() -> None:
    contents = METADATA_PDF.replace(b"/Type /Catalog", b"/Type /Catalog /Launch 4 0 R")
    verdict = validate(contents, "pdf", ValidationOptions(whitelist=["Metadata"]))
    assert verdict.passed is False
    assert "Launch" in verdict.message

    verdict = validate(
        contents, "pdf", ValidationOptions(whitelist=["Metadata", "Launch"])
    )
    assert verdict.passed is True


def test_validate_clean_pdf_passes() -> None:
    assert validate(CLEAN_PDF, "pdf").passed is True


def test_validate_pdf_without_trailer_fails_signature() -> None:
    truncated = CLEAN_PDF.replace(b"%%EOF", b"")
    verdict = validate(truncated, "pdf")
    assert verdict.passed is False
    assert verdict.message == "Invalid file signature detected"


def test_validate_pdf_markers_without_magic_bytes_fails() -> None:
    verdict = validate(b"junk " + CLEAN_PDF, "pdf")
    assert verdict.passed is False
    assert verdict.message == "Invalid file signature detected"


def test_validate_svg_passes_and_onload_fails() -> None:
    assert validate(SVG, "svg").passed is True

    hostile = SVG.replace(b"<svg ", b'<svg onload="init()" ')
    verdict = validate(hostile, "svg")
    assert verdict.passed is False
    assert "onload" in verdict.message


def test_validate_svg_with_leading_whitespace_or_bom() -> None:
    body = b'<svg xmlns="http://www.w3.org/2000/svg"></svg>'
    assert validate(b"\n  " + body, "svg").passed is True
    assert validate(b"\xef\xbb\xbf" + body, "svg").passed is True


def test_validate_svg_without_svg_tag_fails() -> None:
    verdict = validate(b"  <html><body>hi</body></html>", "svg")
    assert verdict.passed is False
    assert verdict.message == "Invalid file signature detected"


def test_validate_other_types_by_signature_alone() -> None:
    assert validate(b"\x89PNG\r\n\x1a\n" + bytes(32), "png").passed is True
    assert validate(b"GIF89a" + bytes(32), "gif").passed is True
    assert validate(b"PK\x03\x04" + bytes(26), "zip").passed is True
    assert validate(b"GIF89a" + bytes(32), "png").passed is False


def test_validate_default_size_limit() -> None:
    verdict = validate(JPEG + bytes(6 * 1024 * 1024), "jpeg")
    assert verdict.passed is False
    assert "5MB" in verdict.message


def test_validate_size_boundary() -> None:
    options = ValidationOptions(max_size_bytes=len(JPEG))
    assert validate(JPEG, "jpeg", options).passed is True

    verdict = validate(JPEG + b"\x00", "jpeg", options)
    assert verdict.passed is False
    assert verdict.message.startswith("File size exceeds limit of")


def test_validate_size_checked_before_type() -> None:
    verdict = validate(bytes(10), "unknownformat", ValidationOptions(max_size_bytes=5))
    assert verdict.passed is False


def test_validate_unknown_type_raises() -> None:
    with pytest.raises(UnsupportedType):
        validate(JPEG, "unknownformat", ValidationOptions())


def test_validate_accepts_extension_and_enum() -> None:
    assert validate(JPEG, ".JPG").passed is True
    assert validate(JPEG, "image/jpeg").passed is True
    assert validate(JPEG, FileType.JPEG).passed is True


def test_validate_empty_buffer_fails_without_raising() -> None:
    for file_type in FileType:
        verdict = validate(b"", file_type)
        assert verdict.passed is False


def test_validate_skips_content_scan_when_disabled() -> None:
    contents = b"\xff\xd8\xff\xe0<script>alert(1)</script>"
    assert validate(contents, "jpeg", ValidationOptions(check_content=False)).passed is True


def test_validate_is_deterministic() -> None:
    hostile = b"\xff\xd8\xff\xe1 eval(payload)"
    assert validate(hostile, "jpeg") == validate(hostile, "jpeg")
    assert validate(METADATA_PDF, "pdf") == validate(METADATA_PDF, "pdf")


def test_validate_converts_internal_faults_to_verdict() -> None:
    with patch(
        "upload_validator.core.file_validation.scan_file_content",
        side_effect=RuntimeError("decoder exploded"),
    ):
        verdict = validate(JPEG, "jpeg")

    assert verdict.passed is False
    assert verdict.message == "Content validation failed: decoder exploded"


def test_format_size() -> None:
    assert format_size(5 * 1024 * 1024) == "5MB"
    assert format_size(1536 * 1024) == "1.5MB"
    assert format_size(2048) == "2KB"
    assert format_size(100) == "100 bytes"
