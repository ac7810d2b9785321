# tests/unit/test_renderer.py

from gridwalk.coordinate import Coordinate
from gridwalk.engine import connected_area
from gridwalk.renderer import ImageRenderer, render, symbol_to_color
from tests.test_utils import make_grid


def test_render_size_and_mode() -> None:
    img = render(make_grid(["AAB", "ABB"]), resolution=30)
    assert img.mode == "RGBA"
    assert img.size == (30, 20)


def test_render_uses_palette_and_fallback_colors() -> None:
    grid = make_grid(["#Q"])
    img = render(grid, resolution=20, palette={"#": (1, 2, 3)})
    assert img.getpixel((0, 0)) == (1, 2, 3, 255)
    assert img.getpixel((15, 5)) == symbol_to_color("Q") + (255,)


def test_symbol_to_color_is_deterministic() -> None:
    assert symbol_to_color("x") == symbol_to_color("x")


def test_highlight_visited_darkens_cells() -> None:
    grid = make_grid(["AB"])
    connected_area(grid, Coordinate(0, 0))
    plain = render(grid, resolution=2, palette={"A": (200, 100, 50), "B": (10, 10, 10)})
    shaded = ImageRenderer(
        resolution=2, palette={"A": (200, 100, 50), "B": (10, 10, 10)}, highlight_visited=True
    ).render(grid)
    assert plain.getpixel((0, 0)) == (200, 100, 50, 255)
    assert shaded.getpixel((0, 0)) == (100, 50, 25, 255)
    assert shaded.getpixel((1, 0)) == (10, 10, 10, 255)
