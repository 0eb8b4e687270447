"""
Structural checks layered on top of the magic-byte match for text-ish
formats. Neither is a parser: they look for a handful of markers only.
"""
import re

_SVG_OPEN_TAG = re.compile(r"<svg[^>]*>", re.IGNORECASE)
# Whitespace plus a leading byte-order mark.
_TRIM_CHARS = " \t\n\r\f\v\ufeff"


def check_svg(text: str, signature_ok: bool) -> bool:
    """
    SVG is plain text and plenty of producers skip the XML prologue,
    so a missing magic prefix is forgiven when the document still opens
    with <?xml or <svg and contains an <svg> tag.
    """
    if signature_ok:
        return True
    trimmed = text.strip(_TRIM_CHARS)
    has_svg_tag = _SVG_OPEN_TAG.search(text) is not None
    has_valid_prologue = trimmed.startswith("<?xml") or trimmed.startswith("<svg")
    return has_svg_tag and has_valid_prologue


def check_pdf(text: str, signature_ok: bool) -> bool:
    """A PDF needs its magic bytes, a version header and a trailer."""
    return signature_ok and "%PDF-" in text and "%%EOF" in text
