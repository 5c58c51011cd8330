"""Native-dialect renderer compatible with PHP's date().

Every format character is either a field letter from the table below or a
literal. A backslash makes the next character literal. Names are English,
as in date(); the per-call locale code is not applied.

Supported letters:
    Day:      d D j l N S w z
    Week:     W
    Month:    F m M n t
    Year:     L o Y y
    Time:     a A B g G h H i s u v
    Timezone: e I O P p T Z
    Full:     c r U

Python 3.13+. Zero external dependencies.
"""

import calendar
from collections.abc import Callable, Mapping
from datetime import datetime, timedelta
from types import MappingProxyType

from datedialect.diagnostics import RenderError
from datedialect.enums import RendererKind

__all__ = ["NativeRenderer", "render_native"]

_DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _ordinal_suffix(day: int) -> str:
    if day in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _offset(moment: datetime) -> timedelta:
    return moment.utcoffset() or timedelta(0)


def _format_offset(moment: datetime, separator: str) -> str:
    seconds = int(_offset(moment).total_seconds())
    sign = "+" if seconds >= 0 else "-"
    hours, rest = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}{separator}{rest // 60:02d}"


def _timezone_identifier(moment: datetime) -> str:
    key = getattr(moment.tzinfo, "key", None)
    if key:
        return str(key)
    return moment.tzname() or "UTC"


def _swatch_beat(moment: datetime) -> str:
    utc_plus_one = moment - _offset(moment) + timedelta(hours=1)
    seconds = utc_plus_one.hour * 3600 + utc_plus_one.minute * 60 + utc_plus_one.second
    return f"{int(seconds / 86.4) % 1000:03d}"


def _twelve_hour(moment: datetime) -> int:
    return moment.hour % 12 or 12


_FIELDS: Mapping[str, Callable[[datetime], str]] = MappingProxyType(
    {
        # Day
        "d": lambda m: f"{m.day:02d}",
        "D": lambda m: _DAY_NAMES[m.weekday()][:3],
        "j": lambda m: str(m.day),
        "l": lambda m: _DAY_NAMES[m.weekday()],
        "N": lambda m: str(m.isoweekday()),
        "S": lambda m: _ordinal_suffix(m.day),
        "w": lambda m: str(m.isoweekday() % 7),
        "z": lambda m: str(m.timetuple().tm_yday - 1),
        # Week
        "W": lambda m: f"{m.isocalendar().week:02d}",
        # Month
        "F": lambda m: _MONTH_NAMES[m.month - 1],
        "m": lambda m: f"{m.month:02d}",
        "M": lambda m: _MONTH_NAMES[m.month - 1][:3],
        "n": lambda m: str(m.month),
        "t": lambda m: str(calendar.monthrange(m.year, m.month)[1]),
        # Year
        "L": lambda m: "1" if calendar.isleap(m.year) else "0",
        "o": lambda m: str(m.isocalendar().year),
        "Y": lambda m: f"{m.year:04d}",
        "y": lambda m: f"{m.year % 100:02d}",
        # Time
        "a": lambda m: "am" if m.hour < 12 else "pm",
        "A": lambda m: "AM" if m.hour < 12 else "PM",
        "B": _swatch_beat,
        "g": lambda m: str(_twelve_hour(m)),
        "G": lambda m: str(m.hour),
        "h": lambda m: f"{_twelve_hour(m):02d}",
        "H": lambda m: f"{m.hour:02d}",
        "i": lambda m: f"{m.minute:02d}",
        "s": lambda m: f"{m.second:02d}",
        "u": lambda m: f"{m.microsecond:06d}",
        "v": lambda m: f"{m.microsecond // 1000:03d}",
        # Timezone
        "e": _timezone_identifier,
        "I": lambda m: "1" if m.dst() else "0",
        "O": lambda m: _format_offset(m, ""),
        "P": lambda m: _format_offset(m, ":"),
        "p": lambda m: "Z" if not _offset(m) else _format_offset(m, ":"),
        "T": lambda m: m.tzname() or "UTC",
        "Z": lambda m: str(int(_offset(m).total_seconds())),
        # Full date/time
        "c": lambda m: render_native("Y-m-d\\TH:i:sP", m),
        "r": lambda m: render_native("D, d M Y H:i:s O", m),
        "U": lambda m: str(int(m.timestamp())),
    }
)


def render_native(pattern: str, moment: datetime) -> str:
    """Format ``moment`` the way PHP's date() formats ``pattern``.

    Examples:
        >>> from datetime import datetime, UTC
        >>> render_native("l, F jS, Y", datetime(2025, 10, 27, tzinfo=UTC))
        'Monday, October 27th, 2025'
        >>> render_native("\\\\Y\\\\e\\\\a\\\\r: Y", datetime(2025, 10, 27, tzinfo=UTC))
        'Year: 2025'
    """
    result: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        char = pattern[i]
        if char == "\\" and i + 1 < n:
            result.append(pattern[i + 1])
            i += 2
            continue
        field = _FIELDS.get(char)
        result.append(field(moment) if field is not None else char)
        i += 1
    return "".join(result)


class NativeRenderer:
    """Render native (date()-style) formats.

    Every pattern is accepted; only arithmetic at the edges of the datetime
    range (B, U) can fail, which surfaces as RenderError.
    """

    __slots__ = ()

    @property
    def kind(self) -> RendererKind:
        return RendererKind.NATIVE

    def render(self, pattern: str, moment: datetime, locale_code: str) -> str:  # noqa: ARG002
        try:
            return render_native(pattern, moment)
        except (OverflowError, ValueError, OSError) as e:
            raise RenderError(str(e), translated_format=pattern, renderer=self.kind) from e
