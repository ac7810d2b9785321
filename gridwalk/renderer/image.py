import colorsys
import random
from functools import lru_cache
from typing import Dict, Optional, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from gridwalk.state import GridState
from gridwalk.types import Symbol

DEFAULT_RESOLUTION = 640
VISITED_SHADE = 0.5

RGB = Tuple[int, int, int]
Palette = Dict[Symbol, RGB]

DEFAULT_PALETTE: Palette = {
    "#": (64, 64, 64),
    ".": (230, 230, 230),
    " ": (255, 255, 255),
}


@lru_cache(maxsize=2048)
def symbol_to_color(symbol: Symbol) -> RGB:
    """
    Deterministically map a symbol to an RGB color.
    """
    rng = random.Random(symbol)
    h = rng.random()
    s = 0.6 + 0.3 * rng.random()
    v = 0.7 + 0.25 * rng.random()
    r, g, b = colorsys.hsv_to_rgb(h, s, v)
    return int(r * 255), int(g * 255), int(b * 255)


def render(
    grid: GridState,
    resolution: int = DEFAULT_RESOLUTION,
    palette: Optional[Palette] = None,
    highlight_visited: bool = False,
) -> Image.Image:
    """
    Renders a grid as an RGBA PIL Image with square cells.

    The cell size is ``resolution // max(width, height)`` (at least 1 pixel).
    Visited cells are darkened when ``highlight_visited`` is set.
    """
    if palette is None:
        palette = DEFAULT_PALETTE

    cell_size: int = max(1, resolution // max(grid.width, grid.height))

    symbols, inverse = np.unique(grid.cells, return_inverse=True)
    colors: npt.NDArray[np.float32] = np.array(
        [palette.get(str(s)) or symbol_to_color(str(s)) for s in symbols],
        dtype=np.float32,
    )
    rgb = colors[inverse.reshape(grid.cells.shape)]
    if highlight_visited:
        rgb[grid.visited] *= VISITED_SHADE

    alpha = np.full(rgb.shape[:2] + (1,), 255, dtype=np.float32)
    rgba = np.concatenate([rgb, alpha], axis=2).astype(np.uint8)
    rgba = np.repeat(np.repeat(rgba, cell_size, axis=0), cell_size, axis=1)
    return Image.fromarray(rgba)


class ImageRenderer:
    resolution: int
    palette: Palette
    highlight_visited: bool

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        palette: Optional[Palette] = None,
        highlight_visited: bool = False,
    ):
        self.resolution = resolution
        self.palette = palette or DEFAULT_PALETTE
        self.highlight_visited = highlight_visited

    def render(self, grid: GridState) -> Image.Image:
        return render(
            grid,
            resolution=self.resolution,
            palette=self.palette,
            highlight_visited=self.highlight_visited,
        )
