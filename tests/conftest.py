"""Shared pytest setup for datedialect.

Hypothesis profiles (HYPOTHESIS_PROFILE picks one; CI=true selects "ci"):
    dev      300 examples, random seed
    ci       40 examples, derandomized, prints reproduction blobs
    verbose  80 examples with per-example output

Property tests marked ``fuzz`` only run under ``pytest -m fuzz``.
"""

import os
from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, Verbosity, settings

from datedialect.locale_utils import get_babel_locale
from datedialect.rendering.locale_patterns import _cldr_short_icu, _cldr_short_patterns
from datedialect.translation.tables import _table_for_patterns

_PROFILES = {
    "dev": {"max_examples": 300},
    "ci": {"max_examples": 40, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 80, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(
        _name, suppress_health_check=[HealthCheck.too_slow], **_options
    )


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_profile_name())

_LRU_CACHES = (get_babel_locale, _cldr_short_icu, _cldr_short_patterns, _table_for_patterns)


@pytest.fixture
def clear_caches() -> Iterator[None]:
    """Empty the locale and pattern-table caches around a test."""
    for cached in _LRU_CACHES:
        cached.cache_clear()
    yield
    for cached in _LRU_CACHES:
        cached.cache_clear()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: long-running property tests, opt in with -m fuzz")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip ``fuzz`` tests unless the marker expression asks for them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with pytest -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)
