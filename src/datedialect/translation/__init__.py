"""Format-string translation between the percent, ICU and native dialects.

Functions:
    translate: Translate a whole format string for a direction
    split_literal_spans: Partition an ICU pattern into literal/convertible spans
    rewrite: Two-phase rewrite of one convertible span
    looks_like_percent / detect_source_dialect: Source dialect detection
    get_table: Compiled table lookup

Python 3.13+. Zero external dependencies.
"""

from .literals import split_literal_spans
from .rewriter import rewrite
from .tables import TABLES, IntermediateCodeTable, get_table
from .translator import detect_source_dialect, looks_like_percent, translate
from .types import FormatSpan, ShortPatterns, TranslationDirection, TranslationResult

__all__ = [
    "TABLES",
    "FormatSpan",
    "IntermediateCodeTable",
    "ShortPatterns",
    "TranslationDirection",
    "TranslationResult",
    "detect_source_dialect",
    "get_table",
    "looks_like_percent",
    "rewrite",
    "split_literal_spans",
    "translate",
]
