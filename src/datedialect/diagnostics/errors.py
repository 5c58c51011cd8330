"""Exceptions raised by renderers and reported by DateSession.output().

An exception built from a Diagnostic keeps it on ``.diagnostic`` and uses
the diagnostic's formatted report as its message.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class DateDialectError(Exception):
    """Root of the datedialect exception tree.

    Attributes:
        diagnostic: The Diagnostic the error was built from, or None for a
            plain message
    """

    def __init__(self, message: str | Diagnostic) -> None:
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RenderError(DateDialectError):
    """The renderer could not produce text for a format and timestamp.

    Raised by renderers and caught by DateSession.output(), which returns it
    in the errors tuple instead of propagating it.

    Attributes:
        format_string: The format the caller supplied
        translated_format: The format handed to the renderer
        renderer: Renderer kind name

    Example:
        >>> text, errors = session.output("yyyy-MM-dd qqqqqq")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Render failed: {error.translated_format} ({error.renderer})")
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        format_string: str = "",
        translated_format: str = "",
        renderer: str = "",
    ) -> None:
        super().__init__(message)
        self.format_string = format_string
        self.translated_format = translated_format
        self.renderer = renderer
