"""
Magic-byte signatures for every supported upload type.
Reference: https://en.wikipedia.org/wiki/List_of_file_signatures
"""
import enum
from types import MappingProxyType
from typing import Iterable, Mapping


class FileType(str, enum.Enum):
    """
    Logical file types the validator knows how to check.
    str Enum so values serialize cleanly in API responses.
    """
    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    PDF = "pdf"
    SVG = "svg"
    ZIP = "zip"


Signature = bytes
SignatureSet = tuple[Signature, ...]


SIGNATURES: Mapping[FileType, SignatureSet] = MappingProxyType({
    FileType.JPEG: (
        b"\xff\xd8\xff\xe0",  # JPEG/JFIF
        b"\xff\xd8\xff\xe1",  # JPEG/Exif
    ),
    FileType.PNG: (b"\x89PNG",),
    FileType.GIF: (b"GIF8",),  # GIF87a or GIF89a
    FileType.PDF: (b"%PDF",),
    FileType.SVG: (
        b"<?xml",
        b"<svg",
    ),
    FileType.ZIP: (
        b"PK\x03\x04",
        b"PK\x05\x06",  # empty archive
        b"PK\x07\x08",  # spanned archive
    ),
})


def matches_any(contents: bytes, signatures: Iterable[Signature]) -> bool:
    """
    Return True if the first bytes of contents equal any of the
    given signatures. A buffer shorter than a signature never matches it.
    """
    return any(
        len(contents) >= len(signature) and contents[: len(signature)] == signature
        for signature in signatures
    )
