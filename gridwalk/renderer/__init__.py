"""Rendering subpackage.

Turns a :class:`gridwalk.state.GridState` into a Pillow image: one solid
square per cell, coloured by symbol, optionally shading visited cells so the
progress of a traversal can be inspected.

See :mod:`gridwalk.renderer.image` for the palette and composition routines.
"""

from gridwalk.renderer.image import (
    DEFAULT_PALETTE,
    DEFAULT_RESOLUTION,
    ImageRenderer,
    Palette,
    render,
    symbol_to_color,
)

__all__ = [
    "DEFAULT_PALETTE",
    "DEFAULT_RESOLUTION",
    "ImageRenderer",
    "Palette",
    "render",
    "symbol_to_color",
]
