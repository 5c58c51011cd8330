"""Render Diagnostic records as text for logs, terminals and tooling.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Text layouts a DiagnosticFormatter can produce."""

    RUST = "rust"  # headline plus "= label: value" notes
    SIMPLE = "simple"  # CODE: message
    JSON = "json"  # one object per diagnostic


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turn diagnostics into strings.

    Attributes:
        output_format: Layout to produce
        sanitize: Clip messages and formats longer than max_content_length
        max_content_length: Clip length used when sanitize is set

    Example:
        >>> diagnostic = ErrorTemplate.locale_unknown("xx_YY")
        >>> print(DiagnosticFormatter().format(diagnostic))
        warning[LOCALE_UNKNOWN]: Unknown locale 'xx_YY'
          = help: Use a BCP 47 or POSIX locale code such as 'en_US' or 'de-DE'
        >>> print(DiagnosticFormatter(output_format=OutputFormat.SIMPLE).format(diagnostic))
        LOCALE_UNKNOWN: Unknown locale 'xx_YY'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """One diagnostic in the configured layout."""
        if self.output_format is OutputFormat.JSON:
            return json.dumps(self._as_record(diagnostic), ensure_ascii=False)
        if self.output_format is OutputFormat.SIMPLE:
            return f"{diagnostic.code.name}: {self._clip(diagnostic.message)}"
        return "\n".join(self._rust_lines(diagnostic))

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Several diagnostics, blank line between each."""
        return "\n\n".join(map(self.format, diagnostics))

    def _rust_lines(self, diagnostic: Diagnostic) -> Iterator[str]:
        level = "warning" if diagnostic.severity == "warning" else "error"
        yield f"{level}[{diagnostic.code.name}]: {self._clip(diagnostic.message)}"

        translated = diagnostic.translated_format
        notes = (
            ("renderer", diagnostic.renderer or None),
            (
                "translated",
                self._clip(translated)
                if translated is not None and translated != diagnostic.format_string
                else None,
            ),
            ("help", diagnostic.hint or None),
            ("note", f"see {diagnostic.help_url}" if diagnostic.help_url else None),
        )
        for label, value in notes:
            if value is not None:
                yield f"  = {label}: {value}"

    def _as_record(self, diagnostic: Diagnostic) -> dict[str, str | int]:
        record: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clip(diagnostic.message),
            "severity": diagnostic.severity,
        }
        optional = {
            "format": diagnostic.format_string,
            "translated_format": diagnostic.translated_format,
            "renderer": diagnostic.renderer or None,
            "hint": diagnostic.hint or None,
            "help_url": diagnostic.help_url or None,
        }
        record.update({key: value for key, value in optional.items() if value is not None})
        return record

    def _clip(self, text: str) -> str:
        limit = self.max_content_length
        if not self.sanitize or len(text) <= limit:
            return text
        return f"{text[:limit]}..."
