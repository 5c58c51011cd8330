"""ICU pattern renderer backed by Babel's CLDR formatter.

Requires the optional Babel dependency; construction fails fast with
BabelImportError when it is missing.

Python 3.13+. Uses Babel for i18n.
"""

import logging
from datetime import datetime

from datedialect.core.babel_compat import load_babel, require_babel
from datedialect.diagnostics import ErrorTemplate, RenderError
from datedialect.enums import RendererKind
from datedialect.locale_utils import get_babel_locale

__all__ = ["IcuRenderer"]

logger = logging.getLogger(__name__)


class IcuRenderer:
    """Render CLDR/LDML patterns with babel.dates.format_datetime().

    Examples:
        >>> from datetime import datetime, UTC
        >>> IcuRenderer().render("yyyy-MM-dd", datetime(2025, 10, 27, tzinfo=UTC), "en_US")
        '2025-10-27'
        >>> IcuRenderer().render("EEEE d MMMM", datetime(2025, 10, 27, tzinfo=UTC), "de_DE")
        'Montag 27 Oktober'
    """

    __slots__ = ()

    def __init__(self) -> None:
        require_babel("IcuRenderer")

    @property
    def kind(self) -> RendererKind:
        return RendererKind.ICU

    def render(self, pattern: str, moment: datetime, locale_code: str) -> str:
        """Render ``moment`` with an ICU pattern in ``locale_code``.

        Raises:
            RenderError: Unknown locale, or a pattern Babel rejects
        """
        babel = load_babel("IcuRenderer")
        try:
            locale = get_babel_locale(locale_code)
        except (babel.unknown_locale_error, ValueError) as e:
            logger.debug("Babel rejected locale '%s': %s", locale_code, e)
            raise RenderError(
                ErrorTemplate.locale_unknown(locale_code),
                translated_format=pattern,
                renderer=self.kind,
            ) from e

        try:
            return str(
                babel.format_datetime(moment, format=pattern, tzinfo=moment.tzinfo, locale=locale)
            )
        except (ValueError, KeyError, AttributeError, OverflowError, TypeError) as e:
            raise RenderError(str(e), translated_format=pattern, renderer=self.kind) from e
