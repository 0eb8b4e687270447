from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional

DEFAULT_MAX_SIZE_BYTES = 5 * 1024 * 1024


class Verdict(BaseModel):
    """
    Outcome of a validation call. The message is diagnostic only;
    callers branch on `passed`.
    """
    model_config = ConfigDict(frozen=True)

    passed: bool
    message: str


class ValidationOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_size_bytes: int = Field(default=DEFAULT_MAX_SIZE_BYTES, gt=0)
    check_content: bool = True
    # PDF rule identifiers to skip, e.g. {"Metadata", "OpenAction"}
    whitelist: frozenset[str] = frozenset()

    @field_validator("whitelist", mode="before")
    @classmethod
    def coerce_whitelist(cls, v: Any) -> frozenset[str]:
        """Accept any iterable of names (list from JSON, set from settings)."""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset({v})
        return frozenset(v)


class FileValidationResponse(BaseModel):
    passed: bool
    message: str
    filename: str
    file_type: Optional[str] = None
    size_bytes: int = Field(ge=0)


class SupportedTypesResponse(BaseModel):
    types: list[str]
    pdf_whitelist_identifiers: list[str]
