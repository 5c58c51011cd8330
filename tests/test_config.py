"""Tests for SessionConfig and its environment loader.

Python 3.13+.
"""

from dataclasses import FrozenInstanceError

import pytest

from datedialect import RendererKind, SessionConfig
from datedialect.locale_utils import get_system_locale


class TestSessionConfig:
    """Construction and validation."""

    def test_defaults(self) -> None:
        """SessionConfig() is usable as-is."""
        config = SessionConfig()
        assert config.renderer is None
        assert config.locale_code == "en_US"
        assert config.timezone is None
        assert config.debug is False
        assert not config.has_short_overrides

    def test_frozen(self) -> None:
        """Configuration is immutable."""
        config = SessionConfig()
        with pytest.raises(FrozenInstanceError):
            config.debug = True  # type: ignore[misc]

    def test_empty_locale_rejected(self) -> None:
        """An empty locale code is invalid."""
        with pytest.raises(ValueError, match="locale_code"):
            SessionConfig(locale_code="")

    def test_empty_timezone_rejected(self) -> None:
        """An empty timezone must be spelled None."""
        with pytest.raises(ValueError, match="timezone"):
            SessionConfig(timezone="")

    @pytest.mark.parametrize(
        ("short_date", "short_time"), [("d.m.Y", None), (None, "H:i"), ("d.m.Y", "H:i")]
    )
    def test_short_overrides(self, short_date: str | None, short_time: str | None) -> None:
        """Either override marks the config as overriding short patterns."""
        config = SessionConfig(short_date=short_date, short_time=short_time)
        assert config.has_short_overrides


class TestFromEnv:
    """SessionConfig.from_env()."""

    def test_empty_environment(self) -> None:
        """No variables yields defaults and the system locale."""
        config = SessionConfig.from_env({})
        assert config.renderer is None
        assert config.locale_code == get_system_locale()
        assert config.timezone is None
        assert config.debug is False
        assert config.short_date is None
        assert config.short_time is None

    def test_all_variables(self) -> None:
        """Every variable maps to its field."""
        config = SessionConfig.from_env(
            {
                "DATEDIALECT_RENDERER": "native",
                "DATEDIALECT_LOCALE": "de-DE",
                "DATEDIALECT_TIMEZONE": "Europe/Berlin",
                "DATEDIALECT_DEBUG": "1",
                "DATEDIALECT_SHORT_DATE": "d.m.Y",
                "DATEDIALECT_SHORT_TIME": "H:i",
            }
        )
        assert config == SessionConfig(
            renderer=RendererKind.NATIVE,
            locale_code="de_DE",
            timezone="Europe/Berlin",
            debug=True,
            short_date="d.m.Y",
            short_time="H:i",
        )

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("auto", None),
            ("", None),
            ("icu", RendererKind.ICU),
            ("POSIX", RendererKind.POSIX),
            (" native ", RendererKind.NATIVE),
        ],
    )
    def test_renderer_values(self, value: str, expected: RendererKind | None) -> None:
        """Renderer names are case-insensitive; auto means detect."""
        assert SessionConfig.from_env({"DATEDIALECT_RENDERER": value}).renderer is expected

    def test_unknown_renderer_rejected(self) -> None:
        """Unknown renderer names raise ValueError naming the choices."""
        with pytest.raises(ValueError, match="DATEDIALECT_RENDERER must be one of"):
            SessionConfig.from_env({"DATEDIALECT_RENDERER": "gpu"})

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("1", True), ("true", True), ("YES", True), ("on", True), ("0", False), ("off", False)],
    )
    def test_debug_values(self, value: str, expected: bool) -> None:
        """Common boolean spellings are accepted."""
        assert SessionConfig.from_env({"DATEDIALECT_DEBUG": value}).debug is expected

    def test_invalid_debug_rejected(self) -> None:
        """Unrecognized booleans raise ValueError."""
        with pytest.raises(ValueError, match="DATEDIALECT_DEBUG"):
            SessionConfig.from_env({"DATEDIALECT_DEBUG": "maybe"})

    def test_empty_values_are_unset(self) -> None:
        """Empty strings count as missing."""
        config = SessionConfig.from_env({"DATEDIALECT_TIMEZONE": "", "DATEDIALECT_SHORT_DATE": ""})
        assert config.timezone is None
        assert config.short_date is None

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a mapping os.environ is used."""
        monkeypatch.setenv("DATEDIALECT_RENDERER", "posix")
        monkeypatch.setenv("DATEDIALECT_LOCALE", "fr_FR.UTF-8")
        config = SessionConfig.from_env()
        assert config.renderer is RendererKind.POSIX
        assert config.locale_code == "fr_FR"
