"""Dialect, renderer and span kinds.

Members are StrEnum values, so they compare equal to their lowercase names
and can be read straight from configuration strings.

Python 3.13+.
"""

from enum import StrEnum


class Dialect(StrEnum):
    """Token vocabulary used to express a date/time layout.

    StrEnum provides automatic string conversion: str(Dialect.ICU) == "icu"
    """

    PERCENT = "percent"
    """POSIX strftime tokens: %Y-%m-%d"""

    ICU = "icu"
    """CLDR/LDML letter-repetition patterns: yyyy-MM-dd"""

    NATIVE = "native"
    """Legacy single-letter tokens (PHP date()): Y-m-d"""


class RendererKind(StrEnum):
    """Rendering engine available to a session.

    StrEnum provides automatic string conversion: str(RendererKind.POSIX) == "posix"
    """

    ICU = "icu"
    """Babel CLDR formatter (IntlDateFormatter analogue)"""

    POSIX = "posix"
    """datetime.strftime"""

    NATIVE = "native"
    """Built-in PHP date() compatible renderer"""

    @property
    def dialect(self) -> Dialect:
        """Dialect accepted by this renderer."""
        match self:
            case RendererKind.ICU:
                return Dialect.ICU
            case RendererKind.POSIX:
                return Dialect.PERCENT
            case RendererKind.NATIVE:
                return Dialect.NATIVE


class SpanKind(StrEnum):
    """Kind of span produced by the literal splitter.

    StrEnum provides automatic string conversion: str(SpanKind.LITERAL) == "literal"
    """

    LITERAL = "literal"
    """Quoted text copied verbatim: 'at'"""

    CONVERTIBLE = "convertible"
    """Text subject to token rewriting: yyyy-MM-dd"""


__all__ = [
    "Dialect",
    "RendererKind",
    "SpanKind",
]
