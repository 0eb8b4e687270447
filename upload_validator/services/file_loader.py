import asyncio
import logging
from pathlib import Path
from typing import Optional

from upload_validator.core.exceptions import UnsupportedType
from upload_validator.core.file_validation import format_size, validate
from upload_validator.core.registry import resolve_file_type
from upload_validator.schemas.validation import ValidationOptions, Verdict

logger = logging.getLogger(__name__)


async def validate_file(
    path: str | Path,
    options: Optional[ValidationOptions] = None,
) -> Verdict:
    """
    Validate a file on disk, inferring its type from the extension.

    WHY STAT BEFORE READ:
    An oversized file is rejected from its metadata alone, so we
    never pull a huge upload into memory just to refuse it.
    """
    options = options or ValidationOptions()
    path = Path(path)

    try:
        stats = await asyncio.to_thread(path.stat)
        if stats.st_size > options.max_size_bytes:
            return Verdict(
                passed=False,
                message=f"File size exceeds limit of {format_size(options.max_size_bytes)}",
            )

        try:
            file_type = resolve_file_type(path.suffix)
        except UnsupportedType:
            return Verdict(passed=False, message="Invalid file extension")

        contents: bytes = await asyncio.to_thread(path.read_bytes)
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return Verdict(passed=False, message=f"File validation failed: {e}")

    return validate(contents, file_type, options)
