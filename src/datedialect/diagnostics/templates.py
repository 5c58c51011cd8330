"""Builders for every Diagnostic datedialect reports.

Messages live here so tests can assert on them and call sites stay short.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Factory methods, one per DiagnosticCode."""

    # LDML date field reference
    _DOCS_BASE = "https://unicode.org/reports/tr35/tr35-dates.html"

    # Translation (1xxx)

    @staticmethod
    def direction_unsupported(source: str, destination: str) -> Diagnostic:
        """No translation table exists for a direction.

        Args:
            source: Source dialect name
            destination: Destination dialect name

        Returns:
            Diagnostic for DIRECTION_UNSUPPORTED
        """
        msg = f"No translation from '{source}' to '{destination}'; format left unchanged"
        return Diagnostic(
            code=DiagnosticCode.DIRECTION_UNSUPPORTED,
            message=msg,
            hint="Write the format in the percent or ICU dialect",
            severity="warning",
        )

    @staticmethod
    def reserved_code_in_format(format_string: str) -> Diagnostic:
        """Format contains characters from the intermediate code plane.

        Args:
            format_string: The offending format

        Returns:
            Diagnostic for RESERVED_CODE_IN_FORMAT
        """
        msg = "Format contains reserved private-use characters; format left unchanged"
        return Diagnostic(
            code=DiagnosticCode.RESERVED_CODE_IN_FORMAT,
            message=msg,
            format_string=format_string,
            severity="warning",
        )

    # Rendering (2xxx)

    @staticmethod
    def render_failed(
        format_string: str,
        translated_format: str,
        renderer: str,
        reason: str,
    ) -> Diagnostic:
        """Renderer rejected a format.

        Args:
            format_string: The format the caller supplied
            translated_format: The format handed to the renderer
            renderer: Renderer kind name
            reason: The reason rendering failed

        Returns:
            Diagnostic for RENDER_FAILED
        """
        msg = f"Formatting error using '{format_string}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.RENDER_FAILED,
            message=msg,
            hint="Check the format against the renderer's dialect",
            help_url=f"{ErrorTemplate._DOCS_BASE}#Date_Field_Symbol_Table",
            format_string=format_string,
            translated_format=translated_format,
            renderer=renderer,
            severity="warning",
        )

    @staticmethod
    def timestamp_invalid(value: object, reason: str) -> Diagnostic:
        """Timestamp could not be turned into a datetime.

        Args:
            value: The timestamp supplied by the caller
            reason: The reason conversion failed

        Returns:
            Diagnostic for TIMESTAMP_INVALID
        """
        msg = f"Invalid timestamp {value!r}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.TIMESTAMP_INVALID,
            message=msg,
            hint="Pass epoch seconds (int or float), a datetime, or None for now",
            severity="warning",
        )

    # Locale (3xxx)

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale not recognized by CLDR.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP 47 or POSIX locale code such as 'en_US' or 'de-DE'",
            severity="warning",
        )
