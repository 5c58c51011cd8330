"""Percent-dialect renderer using datetime.strftime.

Names (%a, %B, %p, ...) follow the process LC_TIME locale as configured by
setlocale(); the per-call locale code is not applied.
"""

from datetime import datetime

from datedialect.diagnostics import RenderError
from datedialect.enums import RendererKind

__all__ = ["PosixRenderer"]


class PosixRenderer:
    """Render strftime formats."""

    __slots__ = ()

    @property
    def kind(self) -> RendererKind:
        return RendererKind.POSIX

    def render(self, pattern: str, moment: datetime, locale_code: str) -> str:  # noqa: ARG002
        try:
            return moment.strftime(pattern)
        except (ValueError, OverflowError, UnicodeError) as e:
            raise RenderError(str(e), translated_format=pattern, renderer=self.kind) from e
