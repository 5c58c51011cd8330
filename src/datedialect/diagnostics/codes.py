"""Diagnostic codes and the Diagnostic record carried by RenderError.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Stable numeric identifiers, grouped by the layer that reports them.

        1xxx: translation left the format untouched
        2xxx: the renderer could not produce text
        3xxx: CLDR locale lookups
    """

    DIRECTION_UNSUPPORTED = 1001
    RESERVED_CODE_IN_FORMAT = 1002

    RENDER_FAILED = 2001
    TIMESTAMP_INVALID = 2002

    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """What went wrong, where, and what to try instead.

    Attributes:
        code: Identifier of the failure
        message: One-line description
        hint: Suggested fix
        help_url: Reference page for the pattern letters involved
        format_string: Format as the caller wrote it
        translated_format: Format after translation into the renderer's dialect
        renderer: Name of the renderer kind involved
        severity: "warning" for failures output() reports, "error" otherwise
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    format_string: str | None = None
    translated_format: str | None = None
    renderer: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        return self.message

    def format_error(self) -> str:
        """Multi-line report in DiagnosticFormatter's default layout.

        Example:
            warning[RENDER_FAILED]: Formatting error using 'yyyy-MM-dd qqqqqq': ...
              = renderer: icu
              = help: Check the format against the renderer's dialect
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
