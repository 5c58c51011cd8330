"""Optional Babel support.

datedialect installs without dependencies: translation and the Posix and
Native renderers never touch Babel. The ICU renderer and CLDR short
date/time patterns need it and come with the ``babel`` extra:

    pip install datedialect[babel]

Babel is imported lazily, once, by load_babel(). Babel-backed components
call require_babel() in their constructor so a missing install fails when
the session is built, not inside a render call.

Python 3.13+.
"""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass
from datetime import datetime, tzinfo
from functools import cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "BabelApi",
    "BabelImportError",
    "FormatDatetime",
    "is_babel_available",
    "load_babel",
    "require_babel",
]


class FormatDatetime(Protocol):
    """Signature of babel.dates.format_datetime as called by IcuRenderer."""

    def __call__(
        self,
        datetime: datetime | None = None,  # noqa: A002
        format: str = "medium",  # noqa: A002
        tzinfo: tzinfo | None = None,
        locale: Locale | str | None = None,
    ) -> str: ...


@dataclass(frozen=True, slots=True)
class BabelApi:
    """Babel entry points used by datedialect.

    Attributes:
        locale_class: babel.Locale (parse() resolves locale codes)
        unknown_locale_error: babel.core.UnknownLocaleError
        format_datetime: babel.dates.format_datetime
    """

    locale_class: type[Locale]
    unknown_locale_error: type[Exception]
    format_datetime: FormatDatetime


class BabelImportError(ImportError):
    """A Babel-backed component was used without Babel installed.

    Attributes:
        feature: Component that needs Babel (e.g. "IcuRenderer")
    """

    def __init__(self, feature: str) -> None:
        super().__init__(
            f"{feature} needs Babel for CLDR date data. "
            "Install with: pip install datedialect[babel]"
        )
        self.feature = feature


@cache
def _probe() -> bool:
    return importlib.util.find_spec("babel") is not None


def is_babel_available() -> bool:
    """True when Babel can be imported. Probed once per process.

    detect_renderer_kind() prefers the ICU renderer when this is True.
    """
    return _probe()


def require_babel(feature: str) -> None:
    """Fail fast when Babel is missing.

    Raises:
        BabelImportError: Babel is not installed; the message names ``feature``
    """
    if not _probe():
        raise BabelImportError(feature)


@cache
def _import_babel() -> BabelApi:
    from babel import Locale, UnknownLocaleError  # noqa: PLC0415
    from babel.dates import format_datetime  # noqa: PLC0415

    return BabelApi(
        locale_class=Locale,
        unknown_locale_error=UnknownLocaleError,
        format_datetime=format_datetime,
    )


def load_babel(feature: str) -> BabelApi:
    """Import Babel on first use and return the entry points datedialect calls.

    Args:
        feature: Component asking for Babel, named in the error if it is missing

    Raises:
        BabelImportError: Babel is not installed
    """
    require_babel(feature)
    return _import_babel()
