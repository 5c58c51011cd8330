"""DateSession - dialect selection, translation and rendering in one call.

A session resolves its renderer once at construction. Each output() call:
    1. Detects the apparent source dialect of the caller's format (or uses
       the explicit ``dialect`` override)
    2. Translates it into the renderer's dialect when they differ
    3. Renders the timestamp in the requested calendar locale

Rendering failures never raise out of output(); they are returned in the
errors tuple as RenderError instances carrying a Diagnostic.

Architecture:
    - Renderer: IcuRenderer (Babel), PosixRenderer (strftime) or
      NativeRenderer (PHP date()), chosen by SessionConfig.renderer or
      detect_renderer_kind()
    - ShortPatternsProvider: %x / %X expansions, cached per session by
      (locale, dialect)
    - Debug flag: per session, toggled by enable_debug() / disable_debug()

Thread Safety:
    Sessions hold mutable state (debug flag, short-pattern cache) and are
    meant to be owned by one logical session. Translation tables are
    immutable and shared.

Python 3.13+.
"""

import logging
from datetime import datetime, tzinfo
from typing import TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from datedialect.config import SessionConfig
from datedialect.core.babel_compat import is_babel_available
from datedialect.diagnostics import ErrorTemplate, RenderError
from datedialect.enums import Dialect, RendererKind
from datedialect.locale_utils import normalize_locale
from datedialect.rendering import (
    BabelShortPatterns,
    Renderer,
    ShortPatternsProvider,
    StaticShortPatterns,
    create_renderer,
)
from datedialect.translation import (
    ShortPatterns,
    TranslationDirection,
    TranslationResult,
    detect_source_dialect,
    translate,
)
from datedialect.translation.tables import DEFAULT_SHORT_PATTERNS

__all__ = ["DateSession", "Timestamp", "detect_renderer_kind"]

logger = logging.getLogger(__name__)

Timestamp: TypeAlias = int | float | datetime | None


def detect_renderer_kind() -> RendererKind:
    """Best renderer available in this process: ICU with Babel, else Native.

    Example:
        >>> detect_renderer_kind() in (RendererKind.ICU, RendererKind.NATIVE)
        True
    """
    return RendererKind.ICU if is_babel_available() else RendererKind.NATIVE


def _load_timezone(name: str | None) -> tzinfo | None:
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        msg = f"Unknown timezone '{name}'"
        raise ValueError(msg) from e


def _default_provider(config: SessionConfig, dialect: Dialect) -> ShortPatternsProvider:
    if config.has_short_overrides:
        defaults = DEFAULT_SHORT_PATTERNS[dialect]
        fixed = ShortPatterns(
            date=config.short_date if config.short_date is not None else defaults.date,
            time=config.short_time if config.short_time is not None else defaults.time,
        )
        return StaticShortPatterns({dialect: fixed})
    if is_babel_available():
        return BabelShortPatterns()
    return StaticShortPatterns()


def _mentions_short_tokens(format_string: str) -> bool:
    return "%x" in format_string or "%X" in format_string


class DateSession:
    """Format dates with a format string written in any supported dialect.

    Args:
        config: Session settings; ``SessionConfig()`` when None
        renderer: Renderer to use instead of the one ``config`` selects
        short_patterns: Provider for %x / %X expansions; when None, fixed
            config overrides, then Babel CLDR data, then built-in defaults

    Raises:
        BabelImportError: The ICU renderer is requested and Babel is missing
        ValueError: ``config.timezone`` is not a known IANA timezone

    Examples:
        >>> from datetime import datetime, UTC
        >>> session = DateSession(SessionConfig(renderer=RendererKind.NATIVE))
        >>> session.output("EEEE, MMMM d, y", datetime(2025, 10, 27, tzinfo=UTC))
        ('Monday, October 27, 2025', ())
        >>> session.translate("%Y-%m-%d").format
        'Y-m-d'
    """

    __slots__ = ("_config", "_debug", "_renderer", "_short_cache", "_short_provider", "_tz")

    def __init__(
        self,
        config: SessionConfig | None = None,
        *,
        renderer: Renderer | None = None,
        short_patterns: ShortPatternsProvider | None = None,
    ) -> None:
        self._config = config if config is not None else SessionConfig()
        self._tz = _load_timezone(self._config.timezone)
        if renderer is None:
            renderer = create_renderer(self._config.renderer or detect_renderer_kind())
        self._renderer: Renderer = renderer
        self._short_provider: ShortPatternsProvider = (
            short_patterns
            if short_patterns is not None
            else _default_provider(self._config, renderer.kind.dialect)
        )
        self._short_cache: dict[tuple[str, Dialect], ShortPatterns] = {}
        self._debug = self._config.debug

    def __repr__(self) -> str:
        return (
            f"DateSession(renderer={self.renderer_kind.value!r}, "
            f"locale={self.locale_code!r}, debug={self._debug})"
        )

    @property
    def config(self) -> SessionConfig:
        """Configuration the session was built from."""
        return self._config

    @property
    def renderer_kind(self) -> RendererKind:
        """Kind of the renderer resolved at construction."""
        return self._renderer.kind

    @property
    def dialect(self) -> Dialect:
        """Dialect every format is translated into before rendering."""
        return self._renderer.kind.dialect

    @property
    def locale_code(self) -> str:
        """Default calendar locale."""
        return self._config.locale_code

    @property
    def debug(self) -> bool:
        """Whether output() logs one line per call."""
        return self._debug

    def enable_debug(self) -> None:
        """Log input format, translated format, timestamp and result of each output()."""
        self._debug = True

    def disable_debug(self) -> None:
        """Stop per-call output() logging."""
        self._debug = False

    def short_patterns(self, dialect: Dialect, locale_code: str | None = None) -> ShortPatterns:
        """Short date/time patterns for ``dialect`` in a locale.

        Args:
            dialect: Dialect the patterns must be written in
            locale_code: Locale to look up; the session locale when None

        Returns:
            ShortPatterns, cached on the session per (locale, dialect)
        """
        locale = normalize_locale(locale_code) if locale_code else self.locale_code
        key = (locale, dialect)
        cached = self._short_cache.get(key)
        if cached is None:
            cached = self._short_provider.short_patterns(locale, dialect)
            self._short_cache[key] = cached
        return cached

    def translate(
        self,
        format_string: str,
        *,
        dialect: Dialect | None = None,
        calendar_locale: str | None = None,
    ) -> TranslationResult:
        """Translate a format into the renderer's dialect without rendering.

        Args:
            format_string: Format in any dialect
            dialect: Source dialect; detected from the format when None
            calendar_locale: Locale whose short patterns expand %x / %X

        Returns:
            TranslationResult; ``converted`` is False when no rewriting applied
        """
        source = dialect if dialect is not None else detect_source_dialect(format_string)
        direction = TranslationDirection(source, self.dialect)

        short: ShortPatterns | None = None
        if (
            source is Dialect.PERCENT
            and not direction.is_identity
            and _mentions_short_tokens(format_string)
        ):
            short = self.short_patterns(self.dialect, calendar_locale)

        return translate(format_string, direction, short)

    def output(
        self,
        format_string: str,
        timestamp: Timestamp = None,
        calendar_locale: str | None = None,
        *,
        dialect: Dialect | None = None,
    ) -> tuple[str | None, tuple[RenderError, ...]]:
        """Render a timestamp with a format written in any dialect.

        Args:
            format_string: Format in the percent, ICU or native dialect
            timestamp: Epoch seconds, a datetime (naive values are taken in
                the session timezone), or None for now
            calendar_locale: Locale for names and short patterns; the session
                locale when None
            dialect: Source dialect; detected from the format when None

        Returns:
            Tuple of (text, errors). ``text`` is None when rendering failed,
            in which case ``errors`` holds one RenderError with a Diagnostic.
            Never raises for a failed render.
        """
        locale = normalize_locale(calendar_locale) if calendar_locale else self.locale_code
        result = self.translate(format_string, dialect=dialect, calendar_locale=locale)

        try:
            moment = self._to_datetime(timestamp)
            text = self._renderer.render(result.format, moment, locale)
        except RenderError as e:
            error = self._contextualize(e, result)
            logger.warning("%s", error)
            self._log_output(result, timestamp, None)
            return None, (error,)

        self._log_output(result, moment, text)
        return text, ()

    def _to_datetime(self, timestamp: object) -> datetime:
        if timestamp is None:
            return datetime.now(self._tz) if self._tz is not None else datetime.now().astimezone()

        if isinstance(timestamp, datetime):
            if timestamp.tzinfo is not None:
                return timestamp
            if self._tz is not None:
                return timestamp.replace(tzinfo=self._tz)
            try:
                return timestamp.astimezone()
            except (OverflowError, OSError, ValueError) as e:
                raise RenderError(ErrorTemplate.timestamp_invalid(timestamp, str(e))) from e

        # bool is an int subclass but never a meaningful epoch value
        if isinstance(timestamp, (int, float)) and not isinstance(timestamp, bool):
            try:
                moment = datetime.fromtimestamp(timestamp, self._tz)
                return moment if self._tz is not None else moment.astimezone()
            except (OverflowError, OSError, ValueError) as e:
                raise RenderError(ErrorTemplate.timestamp_invalid(timestamp, str(e))) from e

        reason = f"unsupported type {type(timestamp).__name__}"
        raise RenderError(ErrorTemplate.timestamp_invalid(timestamp, reason))

    def _contextualize(self, error: RenderError, result: TranslationResult) -> RenderError:
        diagnostic = error.diagnostic
        if diagnostic is None:
            diagnostic = ErrorTemplate.render_failed(
                format_string=result.source_format,
                translated_format=result.format,
                renderer=self.renderer_kind,
                reason=str(error),
            )
        contextual = RenderError(
            diagnostic,
            format_string=result.source_format,
            translated_format=result.format,
            renderer=self.renderer_kind,
        )
        contextual.__cause__ = error
        return contextual

    def _log_output(self, result: TranslationResult, moment: object, text: str | None) -> None:
        if not self._debug:
            return
        shown = moment.isoformat() if isinstance(moment, datetime) else repr(moment)
        logger.info(
            "output(%r) as %r [%s] at %s -> %r",
            result.source_format,
            result.format,
            self.renderer_kind,
            shown,
            text,
        )
