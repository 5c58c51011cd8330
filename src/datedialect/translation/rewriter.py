"""Two-phase pattern rewriting of one convertible span.

rewrite() runs a table's phase 1 (source patterns to intermediate codes) and
phase 2 (codes to destination fragments) over a span. Because codes cannot
occur in source text and phase 2 removes every code, no fragment produced
for one token is ever matched as another token.

Python 3.13+. Zero external dependencies.
"""

import logging

from .tables import RESERVED_CODE_PLANE, IntermediateCodeTable

__all__ = ["contains_reserved_code", "rewrite"]

logger = logging.getLogger(__name__)


def contains_reserved_code(text: str) -> bool:
    """Check whether text contains a character from the intermediate code plane."""
    return RESERVED_CODE_PLANE.search(text) is not None


def rewrite(text: str, table: IntermediateCodeTable) -> str:
    """Rewrite a convertible span from the table's source to destination dialect.

    Unmapped patterns pass through verbatim. Text that already contains an
    intermediate-plane character is returned unchanged, so no code can leak
    into the output.

    Args:
        text: Convertible span in the source dialect
        table: Compiled table for the direction

    Returns:
        Span in the destination dialect

    Examples:
        >>> from datedialect.translation.tables import TABLES
        >>> from datedialect.translation.types import TranslationDirection
        >>> from datedialect.enums import Dialect
        >>> table = TABLES[TranslationDirection(Dialect.ICU, Dialect.NATIVE)]
        >>> rewrite("yyyy-MM-dd", table)
        'Y-m-d'
        >>> rewrite("QQQ", table)
        'QQQ'
    """
    if not text:
        return text
    if contains_reserved_code(text):
        logger.debug("Span %r contains reserved code points; left unchanged", text)
        return text
    return table.decode(table.encode(text))
