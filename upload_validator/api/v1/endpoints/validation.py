from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from upload_validator.core.dependencies import get_validation_service
from upload_validator.schemas.validation import (
    FileValidationResponse,
    SupportedTypesResponse,
)
from upload_validator.services.validation_service import ValidationService

router = APIRouter()


@router.post(
    "/validate",
    response_model=FileValidationResponse,
    summary="Validate an uploaded file",
)
async def validate_upload(
    file: UploadFile = File(...),
    service: ValidationService = Depends(get_validation_service),
    file_type: Optional[str] = Query(
        None,
        description="Declared type (name, extension or MIME). Defaults to the filename extension.",
    ),
    whitelist: list[str] = Query(
        [],
        description="PDF rule identifiers to exempt, e.g. Metadata",
    ),
    check_content: Optional[bool] = Query(
        None, description="Run the suspicious content scan (defaults to server setting)"
    ),
) -> FileValidationResponse:
    """
    Check an upload before accepting it:
    1. Size limit
    2. Magic bytes for the declared type
    3. PDF/SVG structural markers
    4. Suspicious script / action / active-content patterns

    A rejected file still returns 200 with `passed: false`;
    only an unsupported type is an HTTP error.
    """
    return await service.validate_upload(
        file,
        file_type=file_type,
        whitelist=whitelist,
        check_content=check_content,
    )


@router.get(
    "/types",
    response_model=SupportedTypesResponse,
    summary="List supported file types and PDF whitelist identifiers",
)
async def list_types(
    service: ValidationService = Depends(get_validation_service),
) -> SupportedTypesResponse:
    return service.get_supported_types()
