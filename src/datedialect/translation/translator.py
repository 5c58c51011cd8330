"""Whole-format translation between date dialects.

- translate() returns a TranslationResult and never raises for any string input
- Same-dialect requests are identity, byte for byte
- Quoted ICU literals are copied without rewriting
- Letters between strftime tokens are quoted when the destination is ICU
- %x/%X resolve to the caller's locale short patterns

Thread-safe. Tables are immutable; specialized tables are cached via lru_cache.

Python 3.13+.
"""

import logging
import re

from datedialect.diagnostics import ErrorTemplate
from datedialect.enums import Dialect, SpanKind

from .literals import split_literal_spans
from .rewriter import contains_reserved_code, rewrite
from .tables import IntermediateCodeTable, get_table
from .types import FormatSpan, ShortPatterns, TranslationDirection, TranslationResult

__all__ = [
    "detect_source_dialect",
    "looks_like_percent",
    "translate",
]

logger = logging.getLogger(__name__)

_PERCENT_HINT: re.Pattern[str] = re.compile(r"%\w")

# Splits a strftime format into text (even indexes) and tokens (odd indexes).
_PERCENT_SPLIT: re.Pattern[str] = re.compile(r"(%.)", re.DOTALL)

# Text that ICU would read as pattern letters or quote syntax.
_ICU_SENSITIVE_RUN: re.Pattern[str] = re.compile(r"[A-Za-z']+")


def looks_like_percent(format_string: str) -> bool:
    """Check whether a format uses percent (strftime) tokens.

    A format looks like the percent dialect when it contains "%" followed by
    a word character anywhere.

    Examples:
        >>> looks_like_percent("%Y-%m-%d")
        True
        >>> looks_like_percent("100% yyyy")
        False
    """
    return _PERCENT_HINT.search(format_string) is not None


def detect_source_dialect(format_string: str) -> Dialect:
    """Apparent dialect of a caller's format: PERCENT if it looks like it, else ICU."""
    return Dialect.PERCENT if looks_like_percent(format_string) else Dialect.ICU


def _escape_literal(text: str, destination: Dialect) -> str:
    if destination is Dialect.PERCENT:
        return text.replace("%", "%%")
    return text


def _quote_for_icu(match: re.Match[str]) -> str:
    run = match.group()
    escaped = run.replace("'", "''")
    if run.strip("'"):
        return f"'{escaped}'"
    return escaped


def _percent_to_icu(format_string: str, table: IntermediateCodeTable) -> str:
    """Rewrite strftime tokens and quote the text between them for ICU.

    ``"%d de %B"`` becomes ``"dd 'de' MMMM"`` so the ICU renderer prints
    "de" instead of reading it as day and timezone fields.
    """
    pieces = _PERCENT_SPLIT.split(format_string)
    for i, piece in enumerate(pieces):
        if i % 2:
            pieces[i] = rewrite(piece, table)
        else:
            pieces[i] = _ICU_SENSITIVE_RUN.sub(_quote_for_icu, piece)
    return "".join(pieces)


def translate(
    format_string: str,
    direction: TranslationDirection,
    short_patterns: ShortPatterns | None = None,
) -> TranslationResult:
    """Translate a format string from one dialect to another.

    Args:
        format_string: Format in ``direction.source``
        direction: Source and destination dialects
        short_patterns: Destination-dialect fragments for %x and %X; the
            destination's defaults when None

    Returns:
        TranslationResult. ``result.format`` equals ``format_string`` when
        the direction is identity, unsupported, or the format contains
        reserved code points (the latter two carry a diagnostic).

    Examples:
        >>> ICU_TO_NATIVE = TranslationDirection(Dialect.ICU, Dialect.NATIVE)
        >>> translate("EEEE, MMMM d, y", ICU_TO_NATIVE).format
        'l, F j, Y'
        >>> translate("'Year:' yyyy", ICU_TO_NATIVE).format
        'Year: Y'
        >>> PERCENT_TO_ICU = TranslationDirection(Dialect.PERCENT, Dialect.ICU)
        >>> translate("%Y-%m-%d %H:%M:%S", PERCENT_TO_ICU).format
        'y-MM-dd HH:mm:ss'
    """
    if direction.is_identity:
        return TranslationResult(format_string, format_string, direction)

    table = get_table(direction, short_patterns)
    if table is None:
        diagnostic = ErrorTemplate.direction_unsupported(
            direction.source, direction.destination
        )
        logger.debug("%s", diagnostic)
        return TranslationResult(format_string, format_string, direction, (diagnostic,))

    if contains_reserved_code(format_string):
        diagnostic = ErrorTemplate.reserved_code_in_format(format_string)
        logger.debug("%s", diagnostic)
        return TranslationResult(format_string, format_string, direction, (diagnostic,))

    if direction.source is Dialect.PERCENT and direction.destination is Dialect.ICU:
        return TranslationResult(format_string, _percent_to_icu(format_string, table), direction)

    spans: tuple[FormatSpan, ...]
    if direction.source is Dialect.ICU:
        spans = split_literal_spans(format_string)
    else:
        spans = (FormatSpan(SpanKind.CONVERTIBLE, format_string, format_string),)

    parts: list[str] = []
    for span in spans:
        if span.kind is SpanKind.LITERAL:
            parts.append(_escape_literal(span.text, direction.destination))
        else:
            parts.append(rewrite(span.text, table))

    return TranslationResult(format_string, "".join(parts), direction)
