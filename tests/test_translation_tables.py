"""Tests for compiled intermediate-code tables.

Every entry of every table is rewritten on its own and embedded in text to
check that no intermediate code ever reaches the output.

Python 3.13+.
"""

import pytest

from datedialect.constants import INTERMEDIATE_CODE_BASE, INTERMEDIATE_CODE_LIMIT
from datedialect.enums import Dialect
from datedialect.translation import (
    TABLES,
    IntermediateCodeTable,
    ShortPatterns,
    TranslationDirection,
    get_table,
)
from datedialect.translation.rewriter import contains_reserved_code, rewrite
from datedialect.translation.tables import (
    DEFAULT_SHORT_PATTERNS,
    ShortPatternSlot,
    TokenSyntax,
)

PERCENT_TO_ICU = TranslationDirection(Dialect.PERCENT, Dialect.ICU)
PERCENT_TO_NATIVE = TranslationDirection(Dialect.PERCENT, Dialect.NATIVE)
ICU_TO_NATIVE = TranslationDirection(Dialect.ICU, Dialect.NATIVE)
ICU_TO_PERCENT = TranslationDirection(Dialect.ICU, Dialect.PERCENT)

ALL_ENTRIES = [
    pytest.param(direction, pattern, id=f"{direction}:{pattern!r}")
    for direction, table in TABLES.items()
    for pattern in table.to_code
]


class TestTableRegistry:
    """Supported directions and lookup."""

    def test_supported_directions(self) -> None:
        """Exactly the four documented directions have tables."""
        assert set(TABLES) == {PERCENT_TO_ICU, PERCENT_TO_NATIVE, ICU_TO_NATIVE, ICU_TO_PERCENT}

    def test_tables_keyed_by_own_direction(self) -> None:
        """Each table is registered under the direction it translates."""
        for direction, table in TABLES.items():
            assert table.direction == direction

    @pytest.mark.parametrize(
        "direction",
        [
            TranslationDirection(Dialect.NATIVE, Dialect.ICU),
            TranslationDirection(Dialect.NATIVE, Dialect.PERCENT),
            TranslationDirection(Dialect.ICU, Dialect.ICU),
        ],
    )
    def test_unsupported_direction_returns_none(self, direction: TranslationDirection) -> None:
        """Directions without a table resolve to None."""
        assert get_table(direction) is None

    def test_tables_are_read_only(self) -> None:
        """The registry cannot be mutated."""
        with pytest.raises(TypeError):
            TABLES[PERCENT_TO_ICU] = TABLES[ICU_TO_NATIVE]  # type: ignore[index]

    def test_syntax_per_source(self) -> None:
        """Percent sources use percent tokens, ICU sources letter runs."""
        assert TABLES[PERCENT_TO_ICU].syntax is TokenSyntax.PERCENT
        assert TABLES[PERCENT_TO_NATIVE].syntax is TokenSyntax.PERCENT
        assert TABLES[ICU_TO_NATIVE].syntax is TokenSyntax.LETTER_RUN
        assert TABLES[ICU_TO_PERCENT].syntax is TokenSyntax.LETTER_RUN


class TestIntermediateCodes:
    """Code assignment."""

    def test_codes_are_unique_per_table(self) -> None:
        """No two source patterns share a code."""
        for table in TABLES.values():
            assert len(set(table.to_code.values())) == len(table.to_code)

    def test_codes_live_in_reserved_plane(self) -> None:
        """Every code is a single private-use character."""
        for table in TABLES.values():
            for code in table.codes:
                assert len(code) == 1
                assert INTERMEDIATE_CODE_BASE <= ord(code) <= INTERMEDIATE_CODE_LIMIT
                assert contains_reserved_code(code)

    def test_reserved_plane_bounds_are_inclusive(self) -> None:
        """The plane covers Private Use Area-A and stops before its noncharacters."""
        assert INTERMEDIATE_CODE_LIMIT == 0xFFFFD
        assert contains_reserved_code(chr(INTERMEDIATE_CODE_BASE))
        assert contains_reserved_code(chr(INTERMEDIATE_CODE_LIMIT))
        assert not contains_reserved_code(chr(INTERMEDIATE_CODE_BASE - 1))
        assert not contains_reserved_code(chr(INTERMEDIATE_CODE_LIMIT + 1))

    def test_destination_fragments_contain_no_codes(self) -> None:
        """Phase 2 fragments are plain destination text."""
        for table in TABLES.values():
            for fragment in table.from_code.values():
                assert not contains_reserved_code(fragment)

    @pytest.mark.parametrize(("direction", "pattern"), ALL_ENTRIES)
    def test_no_code_leaks_for_entry(self, direction: TranslationDirection, pattern: str) -> None:
        """Each entry rewrites to its fragment with no leftover code."""
        table = TABLES[direction]
        alone = rewrite(pattern, table)
        embedded = rewrite(f"[{pattern}] ({pattern})", table)
        assert not contains_reserved_code(alone)
        assert not contains_reserved_code(embedded)
        assert alone == table.from_code[table.to_code[pattern]]
        assert embedded == f"[{alone}] ({alone})"


class TestShortPatternSlots:
    """%x / %X resolution."""

    def test_percent_tables_need_short_patterns(self) -> None:
        """Only percent-source tables carry short pattern slots."""
        assert TABLES[PERCENT_TO_ICU].needs_short_patterns
        assert TABLES[PERCENT_TO_NATIVE].needs_short_patterns
        assert not TABLES[ICU_TO_NATIVE].needs_short_patterns
        assert not TABLES[ICU_TO_PERCENT].needs_short_patterns

    def test_defaults_fill_slots(self) -> None:
        """Without locale data slots resolve to the destination defaults."""
        table = TABLES[PERCENT_TO_NATIVE]
        defaults = DEFAULT_SHORT_PATTERNS[Dialect.NATIVE]
        assert rewrite("%x %X", table) == f"{defaults.date} {defaults.time}"

    def test_with_short_patterns_substitutes(self) -> None:
        """Specialized table uses the supplied fragments."""
        table = TABLES[PERCENT_TO_ICU].with_short_patterns(ShortPatterns("dd.MM.yy", "HH:mm"))
        assert rewrite("%x, %X", table) == "dd.MM.yy, HH:mm"
        assert rewrite("%Y", table) == "y"

    def test_with_short_patterns_is_identity_without_slots(self) -> None:
        """Tables without slots are returned as-is."""
        table = TABLES[ICU_TO_NATIVE]
        assert table.with_short_patterns(ShortPatterns("a", "b")) is table

    def test_specialized_tables_are_cached(self) -> None:
        """Equal ShortPatterns resolve to the same compiled table."""
        first = get_table(PERCENT_TO_ICU, ShortPatterns("d/M/yy", "H:mm"))
        second = get_table(PERCENT_TO_ICU, ShortPatterns("d/M/yy", "H:mm"))
        assert first is second
        assert first is not TABLES[PERCENT_TO_ICU]

    def test_short_patterns_ignored_for_tables_without_slots(self) -> None:
        """ICU-source tables ignore short patterns."""
        assert get_table(ICU_TO_NATIVE, ShortPatterns("a", "b")) is TABLES[ICU_TO_NATIVE]

    def test_slot_enum_values(self) -> None:
        """Slots identify date and time."""
        assert set(ShortPatternSlot) == {ShortPatternSlot.DATE, ShortPatternSlot.TIME}


class TestCompileValidation:
    """IntermediateCodeTable.compile() rejects malformed entries."""

    def test_duplicate_pattern_rejected(self) -> None:
        """The same source pattern may appear only once."""
        with pytest.raises(ValueError, match="Duplicate"):
            IntermediateCodeTable.compile(
                ICU_TO_NATIVE, TokenSyntax.LETTER_RUN, [("yy", "y"), ("yy", "Y")]
            )

    @pytest.mark.parametrize("pattern", ["%", "%ab", "Y"])
    def test_malformed_percent_pattern_rejected(self, pattern: str) -> None:
        """Percent patterns are '%' plus exactly one character."""
        with pytest.raises(ValueError, match="Percent pattern"):
            IntermediateCodeTable.compile(PERCENT_TO_ICU, TokenSyntax.PERCENT, [(pattern, "y")])

    @pytest.mark.parametrize("pattern", ["", "yM", "y-", "12"])
    def test_malformed_letter_run_rejected(self, pattern: str) -> None:
        """Letter-run patterns repeat a single letter."""
        with pytest.raises(ValueError, match="Letter-run pattern"):
            IntermediateCodeTable.compile(ICU_TO_NATIVE, TokenSyntax.LETTER_RUN, [(pattern, "Y")])

    def test_markers_follow_first_appearance(self) -> None:
        """Marker priority is the order letters first appear."""
        table = IntermediateCodeTable.compile(
            ICU_TO_NATIVE,
            TokenSyntax.LETTER_RUN,
            [("MM", "m"), ("d", "j"), ("M", "n"), ("yyyy", "Y")],
        )
        assert table.markers == ("M", "d", "y")

    def test_escape_codes_assigned_after_entries(self) -> None:
        """Escapes get their own codes decoding to the escaped form."""
        table = IntermediateCodeTable.compile(
            ICU_TO_PERCENT, TokenSyntax.LETTER_RUN, [("yyyy", "%Y")], escapes={"%": "%%"}
        )
        code = table.escapes["%"]
        assert table.from_code[code] == "%%"
        assert rewrite("yyyy 100%", table) == "%Y 100%%"

    def test_empty_table_passes_text_through(self) -> None:
        """A table with no entries leaves text untouched."""
        table = IntermediateCodeTable.compile(ICU_TO_NATIVE, TokenSyntax.LETTER_RUN, [])
        assert rewrite("yyyy-MM-dd", table) == "yyyy-MM-dd"
