"""Shared constants for datedialect.

This module provides centralized configuration constants used across the
translation, rendering and session layers. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallbacks when no locale or CLDR data is available
- Intermediate codes: Placeholder plane used during two-phase rewriting
- Cache limits: Memory bounds for compiled tables
- Environment: Variable names read by SessionConfig.from_env()

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_NATIVE_SHORT_DATE",
    "DEFAULT_NATIVE_SHORT_TIME",
    "DEFAULT_ICU_SHORT_DATE",
    "DEFAULT_ICU_SHORT_TIME",
    "DEFAULT_PERCENT_SHORT_DATE",
    "DEFAULT_PERCENT_SHORT_TIME",
    # Intermediate codes
    "INTERMEDIATE_CODE_BASE",
    "INTERMEDIATE_CODE_LIMIT",
    # Cache limits
    "MAX_SHORT_PATTERN_TABLES",
    # Environment
    "ENV_PREFIX",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when neither configuration nor the environment names one.
DEFAULT_LOCALE: str = "en_US"

# Short date/time fragments used when CLDR data is unavailable.
# The Native pair mirrors the legacy DATE_FORMAT default ("m/d/Y").
DEFAULT_NATIVE_SHORT_DATE: str = "m/d/Y"
DEFAULT_NATIVE_SHORT_TIME: str = "H:i:s"
DEFAULT_ICU_SHORT_DATE: str = "M/d/yy"
DEFAULT_ICU_SHORT_TIME: str = "h:mm a"
DEFAULT_PERCENT_SHORT_DATE: str = "%m/%d/%y"
DEFAULT_PERCENT_SHORT_TIME: str = "%H:%M:%S"

# ============================================================================
# INTERMEDIATE CODES
# ============================================================================
#
# Intermediate codes are single characters from Supplementary Private Use
# Area-A (plane 15). No date dialect assigns meaning to these code points and
# no real-world format string contains them, so a code can never be matched
# as (part of) a source or destination token.
#
# ============================================================================

INTERMEDIATE_CODE_BASE: int = 0xF0000

# Last code point handed out, inclusive. Private Use Area-A ends at U+FFFFD;
# U+FFFFE and U+FFFFF are noncharacters.
INTERMEDIATE_CODE_LIMIT: int = 0xFFFFD

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum compiled tables kept per distinct ShortPatterns substitution.
# One entry per (direction, locale short patterns) pair; 64 covers the
# locales a single process realistically renders with.
MAX_SHORT_PATTERN_TABLES: int = 64

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Prefix of environment variables read by SessionConfig.from_env().
ENV_PREFIX: str = "DATEDIALECT_"
