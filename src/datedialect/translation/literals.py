"""Literal span splitting for quoted text in ICU patterns.

CLDR quote escaping rules:
- Single quotes delimit literal text: 'at' produces "at"
- Two consecutive single quotes '' produce a literal single quote
- '' inside quoted text also produces a literal single quote

Examples:
    "h 'o''clock' a" -> [CONVERTIBLE "h ", LITERAL "o'clock", CONVERTIBLE " a"]
    "'Year:' yyyy"   -> [LITERAL "Year:", CONVERTIBLE " yyyy"]
    "yyyy-MM-dd"     -> [CONVERTIBLE "yyyy-MM-dd"]

Unterminated quotes:
    An opening quote without a closing quote ends literal detection. The
    quote and everything after it stay in the trailing convertible span, so
    "yyyy 'at" splits into a single CONVERTIBLE span.

Python 3.13+. Zero external dependencies.
"""

from datedialect.enums import SpanKind

from .types import FormatSpan

__all__ = ["QUOTE", "split_literal_spans"]

QUOTE = "'"


def _append(spans: list[FormatSpan], kind: SpanKind, source: str, text: str) -> None:
    """Append a span, merging it into the previous one when kinds match."""
    if not source:
        return
    if spans and spans[-1].kind is kind:
        last = spans[-1]
        spans[-1] = FormatSpan(kind, last.source + source, last.text + text)
        return
    spans.append(FormatSpan(kind, source, text))


def split_literal_spans(pattern: str) -> tuple[FormatSpan, ...]:
    """Partition an ICU pattern into literal and convertible spans.

    The partition is gapless and ordered: joining every span's ``source``
    reconstructs ``pattern`` exactly. Kinds alternate because adjacent spans
    of the same kind are merged.

    Args:
        pattern: ICU date pattern (e.g., "EEEE 'the' d")

    Returns:
        Tuple of FormatSpan in source order (empty for an empty pattern)
    """
    spans: list[FormatSpan] = []
    n = len(pattern)
    i = 0
    pending = 0  # start of the convertible text not yet emitted

    while i < n:
        if pattern[i] != QUOTE:
            i += 1
            continue

        # '' outside a quoted section -> literal single quote
        if i + 1 < n and pattern[i + 1] == QUOTE:
            _append(spans, SpanKind.CONVERTIBLE, pattern[pending:i], pattern[pending:i])
            _append(spans, SpanKind.LITERAL, pattern[i : i + 2], QUOTE)
            i += 2
            pending = i
            continue

        j = i + 1
        literal_chars: list[str] = []
        closed = False
        while j < n:
            if pattern[j] == QUOTE:
                if j + 1 < n and pattern[j + 1] == QUOTE:
                    literal_chars.append(QUOTE)
                    j += 2
                    continue
                closed = True
                j += 1
                break
            literal_chars.append(pattern[j])
            j += 1

        if not closed:
            break

        _append(spans, SpanKind.CONVERTIBLE, pattern[pending:i], pattern[pending:i])
        _append(spans, SpanKind.LITERAL, pattern[i:j], "".join(literal_chars))
        i = j
        pending = i

    _append(spans, SpanKind.CONVERTIBLE, pattern[pending:], pattern[pending:])
    return tuple(spans)
