"""Renderers and locale short-pattern providers.

Exports:
    Renderer / ShortPatternsProvider: Protocols consumed by DateSession
    IcuRenderer: Babel CLDR formatter (requires the babel extra)
    PosixRenderer: datetime.strftime
    NativeRenderer: PHP date() compatible formatter
    BabelShortPatterns / StaticShortPatterns: %x / %X sources
    create_renderer: Renderer for a RendererKind

Python 3.13+.
"""

from datedialect.enums import RendererKind

from .icu import IcuRenderer
from .locale_patterns import BabelShortPatterns, StaticShortPatterns
from .native import NativeRenderer, render_native
from .posix import PosixRenderer
from .protocols import Renderer, ShortPatternsProvider

__all__ = [
    "BabelShortPatterns",
    "IcuRenderer",
    "NativeRenderer",
    "PosixRenderer",
    "Renderer",
    "ShortPatternsProvider",
    "StaticShortPatterns",
    "create_renderer",
    "render_native",
]


def create_renderer(kind: RendererKind) -> Renderer:
    """Build the renderer for ``kind``.

    Raises:
        BabelImportError: ``kind`` is ICU and Babel is not installed
    """
    match kind:
        case RendererKind.ICU:
            return IcuRenderer()
        case RendererKind.POSIX:
            return PosixRenderer()
        case RendererKind.NATIVE:
            return NativeRenderer()
