from fastapi import UploadFile, HTTPException
from upload_validator.core.config import settings
from upload_validator.core.exceptions import UnsupportedType
from upload_validator.core.file_validation import list_supported_types, validate
from upload_validator.core.patterns import PDF_WHITELIST_IDENTIFIERS
from upload_validator.core.registry import resolve_file_type
from upload_validator.schemas.validation import (
    FileValidationResponse,
    SupportedTypesResponse,
    ValidationOptions,
)
from typing import Iterable, Optional
import asyncio
import logging

logger = logging.getLogger(__name__)


class ValidationService:
    """
    HTTP-facing wrapper around the validation core.

    The core only sees bytes and a declared type. Everything
    request-shaped (filenames, query params, configured defaults)
    is resolved here.
    """

    def build_options(
        self,
        whitelist: Optional[Iterable[str]] = None,
        check_content: Optional[bool] = None,
    ) -> ValidationOptions:
        requested = set(whitelist or [])
        unknown = requested - PDF_WHITELIST_IDENTIFIERS
        if unknown:
            logger.warning(f"Ignoring unknown whitelist identifiers: {sorted(unknown)}")

        return ValidationOptions(
            max_size_bytes=settings.MAX_UPLOAD_SIZE_BYTES,
            check_content=(
                settings.CHECK_CONTENT if check_content is None else check_content
            ),
            whitelist=settings.PDF_WHITELIST | requested,
        )

    async def validate_upload(
        self,
        file: UploadFile,
        file_type: Optional[str] = None,
        whitelist: Optional[Iterable[str]] = None,
        check_content: Optional[bool] = None,
    ) -> FileValidationResponse:
        if not file.filename:
            raise HTTPException(
                status_code=400,
                detail="No filename provided",
            )

        # An explicit type wins; otherwise fall back to the extension.
        declared = file_type or file.filename.rsplit(".", 1)[-1]
        try:
            resolved = resolve_file_type(declared)
        except UnsupportedType as e:
            raise HTTPException(
                status_code=415,
                detail=f"{e}. Supported: {list_supported_types()}",
            )

        contents: bytes = await file.read()
        options = self.build_options(whitelist, check_content)

        # Regex scans over a few MB are CPU-bound; keep them off the event loop.
        verdict = await asyncio.to_thread(validate, contents, resolved, options)
        logger.info(
            f"Validated {file.filename} as {resolved.value}: "
            f"{'passed' if verdict.passed else 'rejected'} ({verdict.message})"
        )

        return FileValidationResponse(
            passed=verdict.passed,
            message=verdict.message,
            filename=file.filename,
            file_type=resolved.value,
            size_bytes=len(contents),
        )

    def get_supported_types(self) -> SupportedTypesResponse:
        return SupportedTypesResponse(
            types=list_supported_types(),
            pdf_whitelist_identifiers=sorted(PDF_WHITELIST_IDENTIFIERS),
        )
