"""Session configuration.

Provides a single frozen dataclass holding every DateSession setting, plus
an environment loader. All fields have defaults; ``SessionConfig()`` is a
usable configuration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from datedialect.constants import DEFAULT_LOCALE, ENV_PREFIX
from datedialect.enums import RendererKind
from datedialect.locale_utils import get_system_locale, normalize_locale

__all__ = ["SessionConfig"]

_TRUE_VALUES: frozenset[str] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"", "0", "false", "no", "off"})


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"{name} must be one of {sorted(_TRUE_VALUES | (_FALSE_VALUES - {''}))}, got {value!r}"
    raise ValueError(msg)


def _parse_renderer(name: str, value: str) -> RendererKind | None:
    normalized = value.strip().lower()
    if not normalized or normalized == "auto":
        return None
    try:
        return RendererKind(normalized)
    except ValueError:
        choices = ", ".join(kind.value for kind in RendererKind)
        msg = f"{name} must be one of auto, {choices}; got {value!r}"
        raise ValueError(msg) from None


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable configuration for DateSession.

    Attributes:
        renderer: Rendering engine; None detects one at session construction
            (ICU when Babel is installed, Native otherwise).
        locale_code: Default calendar locale (BCP-47 or POSIX).
        timezone: IANA timezone name used for epoch timestamps and naive
            datetimes; None uses the host's local time.
        debug: Start the session with debug logging enabled.
        short_date: Fixed %x expansion in the renderer's dialect. Overrides
            locale data when set.
        short_time: Fixed %X expansion in the renderer's dialect. Overrides
            locale data when set.

    Example:
        >>> config = SessionConfig(renderer=RendererKind.NATIVE, short_date="d.m.Y")
        >>> config.locale_code
        'en_US'
    """

    renderer: RendererKind | None = None
    locale_code: str = DEFAULT_LOCALE
    timezone: str | None = None
    debug: bool = False
    short_date: str | None = None
    short_time: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If locale_code is empty or timezone is an empty string.
        """
        if not self.locale_code:
            msg = "locale_code must not be empty"
            raise ValueError(msg)
        if self.timezone == "":
            msg = "timezone must be an IANA name or None"
            raise ValueError(msg)

    @property
    def has_short_overrides(self) -> bool:
        """True when either short pattern is fixed by configuration."""
        return self.short_date is not None or self.short_time is not None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SessionConfig:
        """Build a configuration from DATEDIALECT_* environment variables.

        Variables:
            DATEDIALECT_RENDERER: auto, icu, posix or native
            DATEDIALECT_LOCALE: locale code (default: system LC_TIME locale)
            DATEDIALECT_TIMEZONE: IANA timezone name
            DATEDIALECT_DEBUG: 1/true/yes/on or 0/false/no/off
            DATEDIALECT_SHORT_DATE / DATEDIALECT_SHORT_TIME: %x / %X overrides

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            ValueError: If DATEDIALECT_RENDERER or DATEDIALECT_DEBUG holds an
                unrecognized value.

        Example:
            >>> config = SessionConfig.from_env({"DATEDIALECT_RENDERER": "posix",
            ...                                  "DATEDIALECT_LOCALE": "de-DE"})
            >>> config.renderer, config.locale_code
            (<RendererKind.POSIX: 'posix'>, 'de_DE')
        """
        env = os.environ if environ is None else environ

        def read(key: str) -> str | None:
            value = env.get(f"{ENV_PREFIX}{key}")
            return value if value else None

        renderer_name = f"{ENV_PREFIX}RENDERER"
        debug_name = f"{ENV_PREFIX}DEBUG"
        locale_code = read("LOCALE")

        return cls(
            renderer=_parse_renderer(renderer_name, env.get(renderer_name, "")),
            locale_code=(
                normalize_locale(locale_code) if locale_code else get_system_locale()
            ),
            timezone=read("TIMEZONE"),
            debug=_parse_bool(debug_name, env.get(debug_name, "")),
            short_date=read("SHORT_DATE"),
            short_time=read("SHORT_TIME"),
        )
