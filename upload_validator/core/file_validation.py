"""
Upload validation: size, magic bytes, type structure, suspicious content.
Rejects mislabeled or booby-trapped files before they are stored.
"""
import logging
from typing import Iterable, Optional

from upload_validator.core.patterns import GENERIC_RULES
from upload_validator.core.registry import REGISTRY, get_profile, resolve_file_type
from upload_validator.core.scanner import PASSED_MESSAGE, as_text, scan_content
from upload_validator.core.signatures import FileType, matches_any
from upload_validator.schemas.validation import ValidationOptions, Verdict

logger = logging.getLogger(__name__)

INVALID_SIGNATURE_MESSAGE = "Invalid file signature detected"


def format_size(num_bytes: int) -> str:
    """5242880 -> '5MB', 1572864 -> '1.5MB', 2048 -> '2KB'."""
    for unit, factor in (("MB", 1024 * 1024), ("KB", 1024)):
        if num_bytes >= factor:
            value = round(num_bytes / factor, 1)
            return f"{value:g}{unit}"
    return f"{num_bytes} bytes"


def list_supported_types() -> list[str]:
    return [file_type.value for file_type in REGISTRY]


def matches_signature(contents: bytes, declared_type: str | FileType) -> bool:
    """
    Return True if the first bytes of contents match any accepted
    signature for the declared type. Raises UnsupportedType for types
    the registry doesn't know.
    """
    profile = get_profile(declared_type)
    return matches_any(contents, profile.signatures)


def scan_file_content(
    contents: bytes,
    declared_type: Optional[str | FileType] = None,
    whitelist: Iterable[str] = (),
) -> Verdict:
    """
    Scan for suspicious content. Without a declared type only the
    generic corpus applies; with one, the type's own rules follow.
    """
    if declared_type is None:
        return scan_content(contents, GENERIC_RULES)
    profile = get_profile(declared_type)
    return scan_content(
        contents,
        GENERIC_RULES,
        profile.type_rules,
        whitelist,
        type_label=profile.file_type.name,
    )


def _type_check(contents: bytes, file_type: FileType) -> bool:
    profile = REGISTRY[file_type]
    signature_ok = matches_any(contents, profile.signatures)
    if profile.structural_check is None:
        return signature_ok
    return profile.structural_check(as_text(contents), signature_ok)


def validate(
    contents: bytes,
    declared_type: str | FileType,
    options: Optional[ValidationOptions] = None,
) -> Verdict:
    """
    Run the checks in a fixed order and stop at the first failure:

    1. Size against options.max_size_bytes
    2. Declared type must be known (raises UnsupportedType otherwise)
    3. Magic bytes plus the type's structural check
    4. Suspicious content scan, when options.check_content is set

    Content problems always come back as a failing Verdict; only a
    bad declared type raises.
    """
    options = options or ValidationOptions()

    # ── Size ──────────────────────────────────────────────
    if len(contents) > options.max_size_bytes:
        logger.info(
            f"Rejected upload of {len(contents)} bytes "
            f"(limit {options.max_size_bytes})"
        )
        return Verdict(
            passed=False,
            message=f"File size exceeds limit of {format_size(options.max_size_bytes)}",
        )

    # ── Type Support ──────────────────────────────────────
    file_type = resolve_file_type(declared_type)

    try:
        # ── Signature ─────────────────────────────────────
        if not _type_check(contents, file_type):
            logger.info(f"Signature check failed for declared type {file_type.value}")
            return Verdict(passed=False, message=INVALID_SIGNATURE_MESSAGE)

        # ── Content ───────────────────────────────────────
        if options.check_content:
            verdict = scan_file_content(contents, file_type, options.whitelist)
            if not verdict.passed:
                logger.info(f"Content scan rejected {file_type.value}: {verdict.message}")
                return verdict

    except Exception as e:
        # Hostile input must never unwind through the caller.
        logger.error(f"Validation fault for {file_type.value}: {e}", exc_info=True)
        return Verdict(passed=False, message=f"Content validation failed: {e}")

    return Verdict(passed=True, message=PASSED_MESSAGE)
