"""Locale default short date/time patterns for %x and %X.

- BabelShortPatterns reads CLDR "short" date and time patterns and translates
  them from ICU into the requested dialect
- StaticShortPatterns returns configured fragments (no locale data needed)

Results are cached per (locale, dialect).

Python 3.13+. Uses Babel CLDR patterns when installed.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from datedialect.constants import DEFAULT_LOCALE
from datedialect.core.babel_compat import load_babel, require_babel
from datedialect.enums import Dialect
from datedialect.locale_utils import get_babel_locale, normalize_locale
from datedialect.translation.tables import DEFAULT_SHORT_PATTERNS
from datedialect.translation.translator import translate
from datedialect.translation.types import ShortPatterns, TranslationDirection

__all__ = ["BabelShortPatterns", "StaticShortPatterns"]

logger = logging.getLogger(__name__)

# CLDR format style used for %x / %X.
_SHORT_STYLE: str = "short"


@dataclass(frozen=True, slots=True)
class StaticShortPatterns:
    """Fixed short date/time fragments per dialect.

    Dialects missing from ``patterns`` use DEFAULT_SHORT_PATTERNS.

    Examples:
        >>> provider = StaticShortPatterns({Dialect.NATIVE: ShortPatterns("d.m.Y", "H:i")})
        >>> provider.short_patterns("de_DE", Dialect.NATIVE)
        ShortPatterns(date='d.m.Y', time='H:i')
    """

    patterns: Mapping[Dialect, ShortPatterns] = field(default_factory=dict)

    def short_patterns(self, locale_code: str, dialect: Dialect) -> ShortPatterns:  # noqa: ARG002
        return self.patterns.get(dialect, DEFAULT_SHORT_PATTERNS[dialect])


class BabelShortPatterns:
    """CLDR short date/time patterns for the requested locale.

    Unknown locales log a warning and use DEFAULT_LOCALE.

    Examples:
        >>> provider = BabelShortPatterns()
        >>> provider.short_patterns("de_DE", Dialect.ICU)
        ShortPatterns(date='dd.MM.yy', time='HH:mm')
        >>> provider.short_patterns("de_DE", Dialect.NATIVE)
        ShortPatterns(date='d.m.y', time='H:i')
    """

    __slots__ = ()

    def __init__(self) -> None:
        require_babel("BabelShortPatterns")

    def short_patterns(self, locale_code: str, dialect: Dialect) -> ShortPatterns:
        return _cldr_short_patterns(normalize_locale(locale_code), dialect)


@lru_cache(maxsize=128)
def _cldr_short_icu(locale_code: str) -> ShortPatterns:
    unknown_locale_error = load_babel("BabelShortPatterns").unknown_locale_error
    try:
        locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError) as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE)
        locale = get_babel_locale(DEFAULT_LOCALE)

    return ShortPatterns(
        date=str(locale.date_formats[_SHORT_STYLE].pattern),
        time=str(locale.time_formats[_SHORT_STYLE].pattern),
    )


@lru_cache(maxsize=128)
def _cldr_short_patterns(locale_code: str, dialect: Dialect) -> ShortPatterns:
    icu = _cldr_short_icu(locale_code)
    if dialect is Dialect.ICU:
        return icu

    direction = TranslationDirection(Dialect.ICU, dialect)
    return ShortPatterns(
        date=translate(icu.date, direction).format,
        time=translate(icu.time, direction).format,
    )
