"""
Suspicious-content corpora used by the content scanner.

Generic rules apply to every file type and can never be whitelisted.
SVG and PDF rules apply only to their own type; PDF rules carry a name
so callers can exempt them (e.g. legitimate PDFs with XMP metadata).
"""
import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PatternRule:
    pattern: re.Pattern
    name: Optional[str] = None

    @property
    def whitelistable(self) -> bool:
        return self.name is not None

    def search(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def __str__(self) -> str:
        return self.pattern.pattern


def _rule(expression: str, name: Optional[str] = None) -> PatternRule:
    return PatternRule(re.compile(expression, re.IGNORECASE), name)


GENERIC_RULES: tuple[PatternRule, ...] = (
    _rule(r"<script"),  # Scripting tags
    _rule(r"javascript:"),  # JavaScript protocol
    _rule(r"<\?php"),  # PHP code
    _rule(r"eval\("),
    _rule(r"exec\("),  # Command execution
    _rule(r"system\("),
    _rule(r"function\s*\("),
    _rule(r"setTimeout"),
    _rule(r"setInterval"),
    _rule(r"onload"),  # Event handlers
    _rule(r"onerror"),
    _rule(r"ActiveXObject"),
)

SVG_RULES: tuple[PatternRule, ...] = (
    _rule(r"xlink:href"),  # External references
    _rule(r"[^a-z]href="),  # Hyperlinks
    _rule(r"data:"),  # Data URLs
    _rule(r"import"),
    _rule(r"foreignObject"),
    _rule(r"onload"),
    _rule(r"onclick"),
    _rule(r"onmouseover"),
    _rule(r"<!ENTITY"),  # XML entities (billion laughs, XXE)
    _rule(r"<!DOCTYPE"),
)

# Order matters only for which name ends up in the message.
PDF_RULES: tuple[PatternRule, ...] = (
    _rule(r"OpenAction", "OpenAction"),  # Runs on document open
    _rule(r"JavaScript", "JavaScript"),
    _rule(r"JS", "JS"),
    _rule(r"Launch", "Launch"),
    _rule(r"EmbeddedFile", "EmbeddedFile"),
    _rule(r"XFA", "XFA"),  # XML Forms Architecture
    _rule(r"Annots", "Annots"),
    _rule(r"Metadata", "Metadata"),
)

PDF_WHITELIST_IDENTIFIERS: frozenset[str] = frozenset(
    rule.name for rule in PDF_RULES if rule.name
)
