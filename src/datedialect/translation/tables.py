"""Intermediate code tables, one per translation direction.

Python 3.13+. Zero external dependencies.
"""

# ==============================================================================
# TWO-PHASE TRANSLATION TABLES
# ==============================================================================
# ruff: noqa: ERA001 - Documentation table is not commented-out code
#
# Dialects share letters: ICU and Native both give meaning to y, m, M, d,
# D, h, H, s, a. A single-pass substitution (MM -> m, then m -> i) would
# re-match the letters it just produced. Each table therefore maps:
#
#   phase 1: source token pattern -> intermediate code
#   phase 2: intermediate code    -> destination fragment
#
# Every (pattern, fragment) entry receives its own code when the table is
# compiled. Codes are single characters from Supplementary Private Use
# Area-A (see constants.INTERMEDIATE_CODE_BASE), so no code is a dialect
# token, no code contains another, and phase 2 removes all of them.
#
# TOKEN SYNTAX:
#   LETTER_RUN  ICU sources. A token is a maximal run of one letter, so
#               "yyyy", "yyy", "yy" and "y" are four distinct patterns.
#   PERCENT     Percent sources. A token is "%" plus one character,
#               consumed left to right ("%%Y" is "%%" then "Y").
#
# LOSSY MAPPINGS:
#   Tables are not symmetric. ICU "mm" and "m" both become "%M"; ICU "d"
#   becomes "%d" (zero padded) because strftime has no portable unpadded
#   day. Reverse translation does not restore the original pattern.
#
# ==============================================================================

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import StrEnum
from functools import lru_cache
from types import MappingProxyType
from typing import TypeAlias

from datedialect.constants import (
    DEFAULT_ICU_SHORT_DATE,
    DEFAULT_ICU_SHORT_TIME,
    DEFAULT_NATIVE_SHORT_DATE,
    DEFAULT_NATIVE_SHORT_TIME,
    DEFAULT_PERCENT_SHORT_DATE,
    DEFAULT_PERCENT_SHORT_TIME,
    INTERMEDIATE_CODE_BASE,
    INTERMEDIATE_CODE_LIMIT,
    MAX_SHORT_PATTERN_TABLES,
)
from datedialect.enums import Dialect

from .types import ShortPatterns, TranslationDirection

__all__ = [
    "DEFAULT_SHORT_PATTERNS",
    "RESERVED_CODE_PLANE",
    "TABLES",
    "IntermediateCodeTable",
    "ShortPatternSlot",
    "TokenSyntax",
    "get_table",
]


class TokenSyntax(StrEnum):
    """How source tokens are recognized."""

    LETTER_RUN = "letter_run"
    PERCENT = "percent"


class ShortPatternSlot(StrEnum):
    """Destination placeholder for a locale short pattern."""

    DATE = "short_date"
    TIME = "short_time"


# Matches any character of the intermediate code plane.
RESERVED_CODE_PLANE: re.Pattern[str] = re.compile(
    f"[{chr(INTERMEDIATE_CODE_BASE)}-{chr(INTERMEDIATE_CODE_LIMIT)}]"
)

_PERCENT_TOKEN: re.Pattern[str] = re.compile(r"%.", re.DOTALL)

DEFAULT_SHORT_PATTERNS: Mapping[Dialect, ShortPatterns] = MappingProxyType(
    {
        Dialect.PERCENT: ShortPatterns(DEFAULT_PERCENT_SHORT_DATE, DEFAULT_PERCENT_SHORT_TIME),
        Dialect.ICU: ShortPatterns(DEFAULT_ICU_SHORT_DATE, DEFAULT_ICU_SHORT_TIME),
        Dialect.NATIVE: ShortPatterns(DEFAULT_NATIVE_SHORT_DATE, DEFAULT_NATIVE_SHORT_TIME),
    }
)

Replacement: TypeAlias = str | ShortPatternSlot


@dataclass(frozen=True, slots=True)
class IntermediateCodeTable:
    """Compiled two-phase substitution table for one direction.

    Use IntermediateCodeTable.compile() to build instances; it assigns codes
    and precompiles the matchers.

    Attributes:
        direction: Direction this table translates
        syntax: Source token syntax
        to_code: Phase 1 map, source pattern -> code
        from_code: Phase 2 map, code -> destination fragment
        escapes: Source characters that need escaping in the destination,
            mapped to their code (e.g. "%" when translating into PERCENT)
        markers: Marker letters in priority order (LETTER_RUN only)
        slots: Codes standing in for locale short patterns
    """

    direction: TranslationDirection
    syntax: TokenSyntax
    to_code: Mapping[str, str]
    from_code: Mapping[str, str]
    escapes: Mapping[str, str] = field(default_factory=dict)
    markers: tuple[str, ...] = ()
    slots: Mapping[str, ShortPatternSlot] = field(default_factory=dict)
    _run_finders: tuple[re.Pattern[str], ...] = ()
    _code_finder: re.Pattern[str] | None = None

    @classmethod
    def compile(
        cls,
        direction: TranslationDirection,
        syntax: TokenSyntax,
        entries: Sequence[tuple[str, Replacement]],
        *,
        escapes: Mapping[str, str] | None = None,
    ) -> IntermediateCodeTable:
        """Assign intermediate codes and precompile matchers.

        Args:
            direction: Direction the table translates
            syntax: How source tokens are recognized
            entries: Ordered (source pattern, destination fragment) pairs.
                A ShortPatternSlot fragment is resolved per locale.
            escapes: Source characters rewritten for the destination
                (e.g., {"%": "%%"})

        Returns:
            Compiled table

        Raises:
            ValueError: If an entry is malformed, duplicated, or the code
                plane is exhausted
        """
        to_code: dict[str, str] = {}
        from_code: dict[str, str] = {}
        slots: dict[str, ShortPatternSlot] = {}
        markers: list[str] = []
        escape_codes: dict[str, str] = {}
        defaults = DEFAULT_SHORT_PATTERNS[direction.destination]

        def next_code() -> str:
            point = INTERMEDIATE_CODE_BASE + len(from_code)
            if point > INTERMEDIATE_CODE_LIMIT:
                msg = f"Intermediate code plane exhausted for {direction}"
                raise ValueError(msg)
            return chr(point)

        for pattern, fragment in entries:
            if pattern in to_code:
                msg = f"Duplicate pattern '{pattern}' in table {direction}"
                raise ValueError(msg)
            _check_pattern(pattern, syntax)
            code = next_code()
            to_code[pattern] = code
            if isinstance(fragment, ShortPatternSlot):
                slots[code] = fragment
                fragment = defaults.date if fragment is ShortPatternSlot.DATE else defaults.time
            from_code[code] = fragment
            if syntax is TokenSyntax.LETTER_RUN and pattern[0] not in markers:
                markers.append(pattern[0])

        for char, escaped in (escapes or {}).items():
            code = next_code()
            escape_codes[char] = code
            from_code[code] = escaped

        run_finders = tuple(
            re.compile(f"(?<!{re.escape(m)}){re.escape(m)}+(?!{re.escape(m)})") for m in markers
        )
        code_finder = re.compile("[" + "".join(from_code) + "]") if from_code else None

        return cls(
            direction=direction,
            syntax=syntax,
            to_code=MappingProxyType(to_code),
            from_code=MappingProxyType(from_code),
            escapes=MappingProxyType(escape_codes),
            markers=tuple(markers),
            slots=MappingProxyType(slots),
            _run_finders=run_finders,
            _code_finder=code_finder,
        )

    @property
    def needs_short_patterns(self) -> bool:
        """True when the table resolves locale short date/time tokens."""
        return bool(self.slots)

    @property
    def codes(self) -> frozenset[str]:
        """Every intermediate code this table can emit in phase 1."""
        return frozenset(self.from_code)

    def with_short_patterns(self, patterns: ShortPatterns) -> IntermediateCodeTable:
        """Return a copy whose short date/time slots resolve to ``patterns``."""
        if not self.slots:
            return self
        from_code = dict(self.from_code)
        for code, slot in self.slots.items():
            from_code[code] = patterns.date if slot is ShortPatternSlot.DATE else patterns.time
        return replace(self, from_code=MappingProxyType(from_code))

    def encode(self, text: str) -> str:
        """Phase 1: replace every mapped source pattern by its code."""
        for char, code in self.escapes.items():
            text = text.replace(char, code)

        to_code = self.to_code

        def substitute(match: re.Match[str]) -> str:
            token = match.group(0)
            return to_code.get(token, token)

        if self.syntax is TokenSyntax.PERCENT:
            return _PERCENT_TOKEN.sub(substitute, text)

        # Each finder matches maximal runs of its letter only, so every
        # occurrence of one run shape gets the same code.
        for finder in self._run_finders:
            text = finder.sub(substitute, text)
        return text

    def decode(self, text: str) -> str:
        """Phase 2: replace every code by its destination fragment."""
        if self._code_finder is None:
            return text
        from_code = self.from_code
        return self._code_finder.sub(lambda m: from_code[m.group(0)], text)


def _check_pattern(pattern: str, syntax: TokenSyntax) -> None:
    if syntax is TokenSyntax.PERCENT:
        if len(pattern) != 2 or pattern[0] != "%":
            msg = f"Percent pattern must be '%' plus one character, got '{pattern}'"
            raise ValueError(msg)
        return
    if not pattern or not pattern.isalpha() or pattern != pattern[0] * len(pattern):
        msg = f"Letter-run pattern must repeat one letter, got '{pattern}'"
        raise ValueError(msg)


# ==============================================================================
# TABLE DEFINITIONS
# ==============================================================================
#
# Entries are ordered; for LETTER_RUN tables the first appearance of a letter
# fixes its priority among marker letters.
#
# ==============================================================================

_PERCENT_TO_ICU: tuple[tuple[str, Replacement], ...] = (
    ("%a", "E"),  # Abbreviated weekday
    ("%A", "EEEE"),  # Full weekday
    ("%b", "MMM"),  # Abbreviated month
    ("%h", "MMM"),  # Same as %b
    ("%B", "MMMM"),  # Full month
    ("%d", "dd"),  # Day of month, 01-31
    ("%e", "d"),  # Day of month, 1-31
    ("%j", "DDD"),  # Day of year, 001-366
    ("%H", "HH"),  # Hour 00-23
    ("%k", "H"),  # Hour 0-23
    ("%I", "hh"),  # Hour 01-12
    ("%l", "h"),  # Hour 1-12
    ("%p", "a"),  # AM/PM
    ("%m", "MM"),  # Month 01-12
    ("%M", "mm"),  # Minute 00-59
    ("%S", "ss"),  # Second 00-59
    ("%f", "SSSSSS"),  # Microseconds
    ("%T", "HH:mm:ss"),
    ("%R", "HH:mm"),
    ("%D", "MM/dd/yy"),
    ("%F", "y-MM-dd"),
    ("%x", ShortPatternSlot.DATE),  # Locale short date
    ("%X", ShortPatternSlot.TIME),  # Locale short time
    ("%y", "yy"),  # 2-digit year
    ("%Y", "y"),  # Full year
    ("%G", "Y"),  # ISO week-numbering year
    ("%V", "ww"),  # ISO week number
    ("%Z", "z"),  # Timezone abbreviation
    ("%z", "xx"),  # UTC offset +HHMM
    ("%n", "\n"),
    ("%t", "\t"),
    ("%%", "%"),
)

_PERCENT_TO_NATIVE: tuple[tuple[str, Replacement], ...] = (
    ("%a", "D"),
    ("%A", "l"),
    ("%b", "M"),
    ("%h", "M"),
    ("%B", "F"),
    ("%d", "d"),
    ("%e", "j"),
    ("%H", "H"),
    ("%k", "G"),
    ("%I", "h"),
    ("%l", "g"),
    ("%p", "A"),
    ("%P", "a"),
    ("%m", "m"),
    ("%M", "i"),
    ("%S", "s"),
    ("%f", "u"),
    ("%T", "H:i:s"),
    ("%R", "H:i"),
    ("%D", "m/d/y"),
    ("%F", "Y-m-d"),
    ("%x", ShortPatternSlot.DATE),
    ("%X", ShortPatternSlot.TIME),
    ("%y", "y"),
    ("%Y", "Y"),
    ("%G", "o"),
    ("%V", "W"),
    ("%u", "N"),
    ("%w", "w"),
    ("%s", "U"),
    ("%Z", "T"),
    ("%z", "O"),
    ("%n", "\n"),
    ("%t", "\t"),
    ("%%", "%"),
)

_ICU_TO_NATIVE: tuple[tuple[str, Replacement], ...] = (
    ("EEEE", "l"),  # Full weekday
    ("EEE", "D"),
    ("EE", "D"),
    ("E", "D"),  # Abbreviated weekday
    ("MMMM", "F"),  # Full month
    ("MMM", "M"),  # Abbreviated month
    ("MM", "m"),  # Month 01-12
    ("M", "n"),  # Month 1-12
    ("LLLL", "F"),  # Stand-alone month forms
    ("LLL", "M"),
    ("LL", "m"),
    ("L", "n"),
    ("cccc", "l"),  # Stand-alone weekday forms
    ("ccc", "D"),
    ("w", "W"),  # Week of year
    ("ww", "W"),
    ("dd", "d"),  # Day 01-31
    ("d", "j"),  # Day 1-31
    ("D", "z"),  # Day of year
    ("hh", "h"),  # Hour 01-12
    ("h", "g"),  # Hour 1-12
    ("HH", "H"),  # Hour 00-23
    ("H", "G"),  # Hour 0-23
    ("mm", "i"),  # Minute
    ("m", "i"),
    ("ss", "s"),  # Second
    ("s", "s"),
    ("SSS", "v"),  # Milliseconds
    ("SSSSSS", "u"),  # Microseconds
    ("a", "A"),  # AM/PM
    ("yyyy", "Y"),
    ("yyy", "Y"),
    ("yy", "y"),
    ("y", "Y"),
    ("Y", "o"),  # Week-numbering year
    ("YYYY", "o"),
    ("zzzz", "e"),  # Timezone identifier
    ("zzz", "T"),  # Timezone abbreviation
    ("zz", "T"),
    ("z", "T"),
    ("ZZZZZ", "P"),  # Offset +HH:MM
    ("ZZZZ", "P"),
    ("ZZZ", "O"),  # Offset +HHMM
    ("ZZ", "O"),
    ("Z", "O"),
    ("xxx", "P"),
    ("xx", "O"),
    ("XXX", "P"),
)

_ICU_TO_PERCENT: tuple[tuple[str, Replacement], ...] = (
    ("EEEE", "%A"),
    ("EEE", "%a"),
    ("EE", "%a"),
    ("E", "%a"),
    ("MMMM", "%B"),
    ("MMM", "%b"),
    ("MM", "%m"),
    ("M", "%m"),
    ("LLLL", "%B"),
    ("LLL", "%b"),
    ("LL", "%m"),
    ("L", "%m"),
    ("cccc", "%A"),
    ("ccc", "%a"),
    ("w", "%V"),
    ("ww", "%V"),
    ("dd", "%d"),
    ("d", "%d"),
    ("DDD", "%j"),
    ("DD", "%j"),
    ("D", "%j"),
    ("hh", "%I"),
    ("h", "%I"),
    ("HH", "%H"),
    ("H", "%H"),
    ("mm", "%M"),
    ("m", "%M"),
    ("ss", "%S"),
    ("s", "%S"),
    ("SSSSSS", "%f"),
    ("a", "%p"),
    ("yyyy", "%Y"),
    ("yyy", "%Y"),
    ("yy", "%y"),
    ("y", "%Y"),
    ("Y", "%G"),
    ("YYYY", "%G"),
    ("zzzz", "%Z"),
    ("zzz", "%Z"),
    ("zz", "%Z"),
    ("z", "%Z"),
    ("ZZZ", "%z"),
    ("ZZ", "%z"),
    ("Z", "%z"),
    ("xxxx", "%z"),
    ("xx", "%z"),
)

_PERCENT_ESCAPES: Mapping[str, str] = MappingProxyType({"%": "%%"})


def _direction(source: Dialect, destination: Dialect) -> TranslationDirection:
    return TranslationDirection(source, destination)


TABLES: Mapping[TranslationDirection, IntermediateCodeTable] = MappingProxyType(
    {
        table.direction: table
        for table in (
            IntermediateCodeTable.compile(
                _direction(Dialect.PERCENT, Dialect.ICU), TokenSyntax.PERCENT, _PERCENT_TO_ICU
            ),
            IntermediateCodeTable.compile(
                _direction(Dialect.PERCENT, Dialect.NATIVE), TokenSyntax.PERCENT, _PERCENT_TO_NATIVE
            ),
            IntermediateCodeTable.compile(
                _direction(Dialect.ICU, Dialect.NATIVE), TokenSyntax.LETTER_RUN, _ICU_TO_NATIVE
            ),
            IntermediateCodeTable.compile(
                _direction(Dialect.ICU, Dialect.PERCENT),
                TokenSyntax.LETTER_RUN,
                _ICU_TO_PERCENT,
                escapes=_PERCENT_ESCAPES,
            ),
        )
    }
)


@lru_cache(maxsize=MAX_SHORT_PATTERN_TABLES)
def _table_for_patterns(
    direction: TranslationDirection, patterns: ShortPatterns
) -> IntermediateCodeTable:
    return TABLES[direction].with_short_patterns(patterns)


def get_table(
    direction: TranslationDirection,
    short_patterns: ShortPatterns | None = None,
) -> IntermediateCodeTable | None:
    """Resolve the compiled table for a direction.

    Tables needing locale short patterns are specialized once per distinct
    ShortPatterns and cached.

    Args:
        direction: Requested translation direction
        short_patterns: Destination-dialect short date/time fragments;
            the destination's DEFAULT_SHORT_PATTERNS when None

    Returns:
        Compiled table, or None when no table exists for the direction
    """
    table = TABLES.get(direction)
    if table is None or not table.needs_short_patterns or short_patterns is None:
        return table
    return _table_for_patterns(direction, short_patterns)
