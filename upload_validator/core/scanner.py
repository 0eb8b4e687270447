"""
Pattern scan over the textual views of an upload.
"""
import base64
from typing import Iterable, Optional

from upload_validator.core.patterns import PatternRule
from upload_validator.schemas.validation import Verdict

PASSED_MESSAGE = "Content validation passed"


def as_text(contents: bytes) -> str:
    """Decode raw bytes as UTF-8, substituting anything undecodable."""
    return contents.decode("utf-8", errors="replace")


def text_views(contents: bytes) -> tuple[str, str]:
    """
    Return (raw text, base64 round-tripped text) for the buffer.

    The round trip mirrors what a naive content-type sniffer does with
    an upload before rendering it.
    """
    raw = as_text(contents)
    round_tripped = base64.b64decode(base64.b64encode(contents))
    return raw, as_text(round_tripped)


def scan_content(
    contents: bytes,
    generic_rules: Iterable[PatternRule],
    type_rules: Optional[Iterable[PatternRule]] = None,
    whitelist: Iterable[str] = (),
    type_label: str = "",
) -> Verdict:
    """
    Test generic rules against both text views, then type rules
    against the raw view. Type rules named in the whitelist are
    skipped without being evaluated. First match fails the scan.
    """
    raw, decoded = text_views(contents)

    for rule in generic_rules:
        if rule.search(decoded) or rule.search(raw):
            return Verdict(
                passed=False,
                message=f"Suspicious pattern detected: {rule}",
            )

    if type_rules is None:
        return Verdict(passed=True, message=PASSED_MESSAGE)

    allowed = frozenset(whitelist)
    prefix = f"Suspicious {type_label} pattern" if type_label else "Suspicious pattern"
    for rule in type_rules:
        if rule.whitelistable and rule.name in allowed:
            continue
        if rule.search(raw):
            detail = f"{rule.name} ({rule})" if rule.name else str(rule)
            return Verdict(passed=False, message=f"{prefix} detected: {detail}")

    return Verdict(passed=True, message=PASSED_MESSAGE)
