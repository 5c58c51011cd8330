"""Value types shared by the translation modules.

All types are frozen dataclasses: a format string is never mutated in place,
every stage produces new values.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from datedialect.diagnostics import Diagnostic
from datedialect.enums import Dialect, SpanKind

__all__ = [
    "FormatSpan",
    "ShortPatterns",
    "TranslationDirection",
    "TranslationResult",
]


@dataclass(frozen=True, slots=True)
class FormatSpan:
    """One piece of a format string partition.

    Attributes:
        kind: LITERAL (quoted, copied verbatim) or CONVERTIBLE (rewritten)
        source: Exact slice of the original format, quotes included
        text: Content; the unquoted text for literals, the source otherwise
    """

    kind: SpanKind
    source: str
    text: str


@dataclass(frozen=True, slots=True)
class TranslationDirection:
    """Ordered (source, destination) dialect pair selecting a table."""

    source: Dialect
    destination: Dialect

    def __str__(self) -> str:
        return f"{self.source}->{self.destination}"

    @property
    def is_identity(self) -> bool:
        """True when source and destination dialects coincide."""
        return self.source is self.destination


@dataclass(frozen=True, slots=True)
class ShortPatterns:
    """Locale default short date and time fragments in one dialect.

    Used to resolve the percent dialect's %x and %X tokens.

    Attributes:
        date: Short date fragment (e.g., "M/d/yy" for ICU en_US)
        time: Short time fragment (e.g., "h:mm a" for ICU en_US)
    """

    date: str
    time: str


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of translating one format string.

    Attributes:
        source_format: Format as supplied by the caller
        format: Format in the destination dialect
        direction: Direction that was requested
        diagnostics: Notices explaining why a format was left unchanged
    """

    source_format: str
    format: str
    direction: TranslationDirection
    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def converted(self) -> bool:
        """True when the destination format differs from the caller's format."""
        return self.format != self.source_format
