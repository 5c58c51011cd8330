"""Tests for whole-format translation.

Python 3.13+.
"""

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from datedialect.diagnostics import DiagnosticCode
from datedialect.enums import Dialect
from datedialect.translation import (
    ShortPatterns,
    TranslationDirection,
    detect_source_dialect,
    looks_like_percent,
    split_literal_spans,
    translate,
)
from datedialect.translation.rewriter import contains_reserved_code

PERCENT_TO_ICU = TranslationDirection(Dialect.PERCENT, Dialect.ICU)
PERCENT_TO_NATIVE = TranslationDirection(Dialect.PERCENT, Dialect.NATIVE)
ICU_TO_NATIVE = TranslationDirection(Dialect.ICU, Dialect.NATIVE)
ICU_TO_PERCENT = TranslationDirection(Dialect.ICU, Dialect.PERCENT)


class TestScenarios:
    """Reference conversions."""

    @pytest.mark.parametrize(
        ("format_string", "direction", "expected"),
        [
            ("yyyy-MM-dd", ICU_TO_NATIVE, "Y-m-d"),
            ("EEEE, MMMM d, y", ICU_TO_NATIVE, "l, F j, Y"),
            ("'Year:' yyyy", ICU_TO_NATIVE, "Year: Y"),
            ("HH:mm:ss", ICU_TO_NATIVE, "H:i:s"),
            ("%Y-%m-%d %H:%M:%S", PERCENT_TO_ICU, "y-MM-dd HH:mm:ss"),
            ("QQQ", ICU_TO_NATIVE, "QQQ"),
        ],
    )
    def test_scenario(
        self, format_string: str, direction: TranslationDirection, expected: str
    ) -> None:
        """Each reference input converts to its documented output."""
        assert translate(format_string, direction).format == expected


class TestTranslate:
    """translate() behavior."""

    def test_result_fields(self) -> None:
        """Result carries source, output and direction."""
        result = translate("yyyy", ICU_TO_NATIVE)
        assert result.source_format == "yyyy"
        assert result.format == "Y"
        assert result.direction == ICU_TO_NATIVE
        assert result.converted
        assert result.diagnostics == ()

    @pytest.mark.parametrize("dialect", list(Dialect))
    def test_identity_direction(self, dialect: Dialect) -> None:
        """Same source and destination returns the format byte for byte."""
        result = translate("yyyy-%m 'x' d", TranslationDirection(dialect, dialect))
        assert result.format == "yyyy-%m 'x' d"
        assert not result.converted
        assert result.diagnostics == ()

    def test_unsupported_direction_is_identity_with_notice(self) -> None:
        """Native sources are left untouched with a diagnostic."""
        result = translate("Y-m-d", TranslationDirection(Dialect.NATIVE, Dialect.ICU))
        assert result.format == "Y-m-d"
        assert not result.converted
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.DIRECTION_UNSUPPORTED]

    def test_reserved_code_input_is_identity_with_notice(self) -> None:
        """Formats containing code-plane characters are never rewritten."""
        text = "yyyy \U000f0001"
        result = translate(text, ICU_TO_NATIVE)
        assert result.format == text
        assert [d.code for d in result.diagnostics] == [DiagnosticCode.RESERVED_CODE_IN_FORMAT]

    def test_literals_are_not_rewritten(self) -> None:
        """Quoted ICU text survives even when it spells tokens."""
        assert translate("'yyyy' yyyy", ICU_TO_NATIVE).format == "yyyy Y"

    def test_escaped_quote_literal(self) -> None:
        """'' becomes a single quote in the output."""
        assert translate("h 'o''clock' a", ICU_TO_NATIVE).format == "g o'clock A"

    def test_unterminated_quote_converts_remainder(self) -> None:
        """An unclosed quote leaves the quote in place and converts the rest."""
        assert translate("yyyy 'MM", ICU_TO_NATIVE).format == "Y 'm"

    def test_percent_literal_escaped_for_percent_destination(self) -> None:
        """Literal '%' becomes '%%' when the destination is strftime."""
        assert translate("yyyy '100%'", ICU_TO_PERCENT).format == "%Y 100%%"

    def test_percent_in_convertible_text_escaped(self) -> None:
        """Unquoted '%' in ICU text is escaped too."""
        assert translate("d%", ICU_TO_PERCENT).format == "%d%%"

    def test_literal_not_escaped_for_native(self) -> None:
        """Only the percent destination escapes literals."""
        assert translate("'50%' yyyy", ICU_TO_NATIVE).format == "50% Y"

    def test_percent_source_is_not_split_on_quotes(self) -> None:
        """Quotes in strftime formats are ordinary characters."""
        assert translate("'%Y'", PERCENT_TO_NATIVE).format == "'Y'"

    def test_empty_format(self) -> None:
        """Empty input yields empty output."""
        assert translate("", ICU_TO_NATIVE).format == ""

    def test_run_length_sensitivity(self) -> None:
        """yyyy, yy and y are different tokens."""
        assert translate("yyyy yy y", ICU_TO_NATIVE).format == "Y y Y"
        assert translate("yyyy yy y", ICU_TO_PERCENT).format == "%Y %y %Y"


class TestPercentTextForIcu:
    """Text between strftime tokens stays text in ICU output."""

    @pytest.mark.parametrize(
        ("format_string", "expected"),
        [
            ("%d de %B", "dd 'de' MMMM"),
            ("%Hh%M", "HH'h'mm"),
            ("it's %Y", "'it''s' y"),
            ("%H ' %M", "HH '' mm"),
            ("%Y's", "y'''s'"),
            ("100%% %Y", "100% y"),
        ],
    )
    def test_letters_are_quoted(self, format_string: str, expected: str) -> None:
        """Letters and quotes outside tokens are escaped for ICU."""
        assert translate(format_string, PERCENT_TO_ICU).format == expected

    def test_native_destination_untouched(self) -> None:
        """Only the ICU destination quotes text."""
        assert "'" not in translate("%d de %B", PERCENT_TO_NATIVE).format

    @given(st.text(alphabet="abdeyzMQ' ", max_size=20))
    def test_quoted_text_reads_back(self, text: str) -> None:
        """Splitting the ICU output recovers the original text."""
        spans = split_literal_spans(translate(text, PERCENT_TO_ICU).format)
        assert "".join(span.text for span in spans) == text


class TestShortPatterns:
    """%x / %X expansion."""

    def test_default_short_patterns(self) -> None:
        """Without locale data the destination defaults are used."""
        assert translate("%x", PERCENT_TO_NATIVE).format == "m/d/Y"
        assert translate("%X", PERCENT_TO_ICU).format == "h:mm a"

    def test_locale_short_patterns(self) -> None:
        """Supplied fragments replace %x and %X."""
        patterns = ShortPatterns("d.m.y", "H:i")
        assert translate("%x %X", PERCENT_TO_NATIVE, patterns).format == "d.m.y H:i"

    def test_fragments_are_not_rewritten_again(self) -> None:
        """Short pattern text is inserted after token rewriting."""
        patterns = ShortPatterns("%Y", "yyyy")
        assert translate("%x|%X|%Y", PERCENT_TO_ICU, patterns).format == "%Y|yyyy|y"


class TestDialectDetection:
    """looks_like_percent / detect_source_dialect."""

    @pytest.mark.parametrize(
        ("format_string", "expected"),
        [
            ("%Y-%m-%d", True),
            ("%%", False),
            ("100% yyyy", False),
            ("yyyy-MM-dd", False),
            ("Y-m-d", False),
            ("%_d", True),
        ],
    )
    def test_looks_like_percent(self, format_string: str, expected: bool) -> None:
        """Percent dialect is '%' followed by a word character."""
        assert looks_like_percent(format_string) is expected

    def test_detect_source_dialect(self) -> None:
        """Detection chooses PERCENT or ICU."""
        assert detect_source_dialect("%d/%m") is Dialect.PERCENT
        assert detect_source_dialect("dd/MM") is Dialect.ICU


class TestTranslateProperties:
    """Invariants over arbitrary input."""

    @given(
        st.text(alphabet="yMdEHhmsaQz'%-/: x", max_size=30),
        st.sampled_from([PERCENT_TO_ICU, PERCENT_TO_NATIVE, ICU_TO_NATIVE, ICU_TO_PERCENT]),
    )
    def test_no_intermediate_code_in_output(
        self, format_string: str, direction: TranslationDirection
    ) -> None:
        """Output never contains a code-plane character."""
        result = translate(format_string, direction)
        event(f"direction={direction}")
        assert not contains_reserved_code(result.format)

    @given(st.text(max_size=30))
    def test_never_raises(self, format_string: str) -> None:
        """Any string input produces a result."""
        for direction in (PERCENT_TO_ICU, ICU_TO_NATIVE, ICU_TO_PERCENT):
            assert isinstance(translate(format_string, direction).format, str)

    @given(st.text(alphabet="-/:., ", max_size=20))
    def test_separators_unchanged(self, format_string: str) -> None:
        """Text with no tokens is returned unchanged."""
        for direction in (PERCENT_TO_ICU, PERCENT_TO_NATIVE, ICU_TO_NATIVE):
            assert translate(format_string, direction).format == format_string
