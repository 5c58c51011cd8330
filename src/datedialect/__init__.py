"""datedialect - date format strings across strftime, ICU and PHP date() dialects.

Accepts a date/time format written in any of three dialects, translates it
into the dialect of the available rendering engine, and renders a timestamp
with it.

Public API:
    DateSession - Detect, translate and render in one call
    SessionConfig - Immutable session settings (with from_env())
    translate - Translate a format string for a TranslationDirection
    split_literal_spans - Partition an ICU pattern into literal/convertible spans
    Dialect / RendererKind - Dialect and renderer enumerations
    TranslationDirection / TranslationResult / ShortPatterns - Translation types

Exceptions:
    DateDialectError - Base exception class
    RenderError - Rendering failures (returned, never raised, by DateSession.output)
    BabelImportError - ICU rendering requested without Babel installed

Submodules:
    datedialect.translation - Tables, rewriter and translator
    datedialect.rendering - ICU, Posix and Native renderers; short-pattern providers
    datedialect.diagnostics - Diagnostic codes, templates and formatter
"""

# Essential Public API - Minimal exports for clean namespace
from .config import SessionConfig
from .core.babel_compat import BabelImportError
from .diagnostics import DateDialectError, RenderError
from .enums import Dialect, RendererKind
from .session import DateSession, detect_renderer_kind
from .translation import (
    ShortPatterns,
    TranslationDirection,
    TranslationResult,
    split_literal_spans,
    translate,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("datedialect")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "DateDialectError",
    "DateSession",
    "Dialect",
    "RenderError",
    "RendererKind",
    "SessionConfig",
    "ShortPatterns",
    "TranslationDirection",
    "TranslationResult",
    "__version__",
    "detect_renderer_kind",
    "split_literal_spans",
    "translate",
]
