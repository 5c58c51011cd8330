"""Interfaces consumed by DateSession.

Renderers turn a format in their own dialect plus an aware datetime into
text. Short pattern providers supply the locale default short date/time
fragments used for %x and %X.

Python 3.13+. Zero external dependencies.
"""

from datetime import datetime
from typing import Protocol

from datedialect.enums import Dialect, RendererKind
from datedialect.translation.types import ShortPatterns

__all__ = ["Renderer", "ShortPatternsProvider"]


# pylint: disable=unnecessary-ellipsis
class Renderer(Protocol):
    """Date rendering primitive for one dialect.

    Implementations raise RenderError when the pattern is rejected.
    """

    @property
    def kind(self) -> RendererKind:
        """Renderer kind (and therefore accepted dialect)."""
        ...

    def render(self, pattern: str, moment: datetime, locale_code: str) -> str:
        """Render ``moment`` using ``pattern``."""
        ...


class ShortPatternsProvider(Protocol):
    """Source of locale default short date/time fragments."""

    def short_patterns(self, locale_code: str, dialect: Dialect) -> ShortPatterns:
        """Short date/time fragments for a locale, in ``dialect``."""
        ...
# pylint: enable=unnecessary-ellipsis
