"""
One table describing how each supported file type is validated:
which signatures it accepts, which structural check follows the
signature match and which extra pattern corpus the scanner applies.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from upload_validator.core.exceptions import UnsupportedType
from upload_validator.core.patterns import PDF_RULES, SVG_RULES, PatternRule
from upload_validator.core.signatures import SIGNATURES, FileType, SignatureSet
from upload_validator.core.type_checks import check_pdf, check_svg

StructuralCheck = Callable[[str, bool], bool]


@dataclass(frozen=True)
class FileTypeProfile:
    file_type: FileType
    signatures: SignatureSet
    extensions: tuple[str, ...]
    mime_types: tuple[str, ...] = ()
    structural_check: Optional[StructuralCheck] = None
    type_rules: Optional[tuple[PatternRule, ...]] = None


REGISTRY: Mapping[FileType, FileTypeProfile] = MappingProxyType({
    FileType.JPEG: FileTypeProfile(
        FileType.JPEG,
        SIGNATURES[FileType.JPEG],
        extensions=("jpg", "jpeg"),
        mime_types=("image/jpeg", "image/jpg"),
    ),
    FileType.PNG: FileTypeProfile(
        FileType.PNG,
        SIGNATURES[FileType.PNG],
        extensions=("png",),
        mime_types=("image/png",),
    ),
    FileType.GIF: FileTypeProfile(
        FileType.GIF,
        SIGNATURES[FileType.GIF],
        extensions=("gif",),
        mime_types=("image/gif",),
    ),
    FileType.PDF: FileTypeProfile(
        FileType.PDF,
        SIGNATURES[FileType.PDF],
        extensions=("pdf",),
        mime_types=("application/pdf",),
        structural_check=check_pdf,
        type_rules=PDF_RULES,
    ),
    FileType.SVG: FileTypeProfile(
        FileType.SVG,
        SIGNATURES[FileType.SVG],
        extensions=("svg",),
        mime_types=("image/svg+xml",),
        structural_check=check_svg,
        type_rules=SVG_RULES,
    ),
    FileType.ZIP: FileTypeProfile(
        FileType.ZIP,
        SIGNATURES[FileType.ZIP],
        extensions=("zip",),
        mime_types=("application/zip", "application/x-zip-compressed"),
    ),
})


def _build_aliases() -> Mapping[str, FileType]:
    aliases: dict[str, FileType] = {}
    for file_type, profile in REGISTRY.items():
        aliases[file_type.value] = file_type
        for ext in profile.extensions:
            aliases[ext] = file_type
        for mime in profile.mime_types:
            aliases[mime] = file_type
    return MappingProxyType(aliases)


_ALIASES = _build_aliases()


def resolve_file_type(declared_type: str | FileType) -> FileType:
    """
    Map a type name, extension (with or without the dot) or MIME type
    to a FileType. Raises UnsupportedType when nothing matches.
    """
    if isinstance(declared_type, FileType):
        return declared_type
    key = str(declared_type or "").strip().lower().lstrip(".")
    file_type = _ALIASES.get(key)
    if file_type is None:
        raise UnsupportedType(declared_type)
    return file_type


def get_profile(declared_type: str | FileType) -> FileTypeProfile:
    return REGISTRY[resolve_file_type(declared_type)]
