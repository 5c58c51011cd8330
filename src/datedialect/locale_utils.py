"""Locale code handling shared by configuration and the Babel-backed renderers.

Locale codes arrive in several spellings: BCP-47 from callers ("de-DE"),
POSIX with an encoding from the environment ("de_DE.UTF-8"), or with a
calendar modifier ("th_TH@calendar=buddhist"). normalize_locale() gives them
one spelling so caches keyed by locale code see one entry per locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
import locale as locale_module
import os
from typing import TYPE_CHECKING

from datedialect.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]

# Values that name no real locale.
_PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX", "C.UTF-8"})

# Environment variables consulted for the time locale, highest priority first.
_LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_TIME", "LANG")


def normalize_locale(locale_code: str) -> str:
    """Spell a locale code the way Babel parses it.

    Hyphens become underscores and an encoding suffix is dropped. Case is
    kept, and so is an ``@`` modifier.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("th_TH@calendar=buddhist")
        'th_TH@calendar=buddhist'
    """
    base, sep, modifier = locale_code.partition("@")
    base = base.split(".", 1)[0].replace("-", "_")
    return f"{base}{sep}{modifier}"


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse a locale code into a Babel Locale, cached per code.

    Raises:
        babel.core.UnknownLocaleError: CLDR has no such locale
        ValueError: The code is malformed
        BabelImportError: Babel is not installed
    """
    from datedialect.core.babel_compat import load_babel  # noqa: PLC0415

    return load_babel("get_babel_locale").locale_class.parse(normalize_locale(locale_code))


def _usable(value: str | None) -> bool:
    return bool(value) and value not in _PSEUDO_LOCALES


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale the host uses for dates, normalized.

    Looks at what setlocale() configured for LC_TIME, then at LC_ALL,
    LC_TIME and LANG in that order. "C" and "POSIX" are skipped.

    Args:
        raise_on_failure: Raise instead of returning DEFAULT_LOCALE when
            nothing usable is found

    Raises:
        RuntimeError: ``raise_on_failure`` is set and no locale was found
    """
    try:
        configured = locale_module.getlocale(locale_module.LC_TIME)[0]
    except (ValueError, AttributeError):
        configured = None
    if _usable(configured):
        return normalize_locale(configured)  # type: ignore[arg-type]

    for var in _LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if _usable(value):
            return normalize_locale(value)  # type: ignore[arg-type]

    if raise_on_failure:
        msg = "No usable LC_TIME locale; set LC_ALL, LC_TIME or LANG"
        raise RuntimeError(msg)
    return DEFAULT_LOCALE
