"""Helpers shared by the translation and rendering layers.

Exports:
    BabelImportError: Raised when a Babel-backed feature is used without Babel
    is_babel_available: Cached probe for the optional Babel dependency
    load_babel: Lazy import of the Babel entry points
    require_babel: Construction-time guard for Babel-backed components

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, load_babel, require_babel

__all__ = ["BabelImportError", "is_babel_available", "load_babel", "require_babel"]
