# tests/integration/test_component_analysis_integration.py

import io
import pytest

from gridwalk import (
    INVALID,
    Coordinate,
    GridConfig,
    GridState,
    connected_area,
    count_symbol,
    dumps,
    find_next,
    read_int,
)
from tests.test_utils import ISLANDS_ROWS, make_grid


def partition_areas(grid: GridState, symbol: str) -> list:  # type: ignore[type-arg]
    grid.refresh()
    areas = []
    while True:
        start = find_next(grid, symbol)
        if not start.is_valid(grid):
            break
        areas.append(connected_area(grid, start))
    return areas


@pytest.mark.parametrize("symbol", ["#", "."])
def test_components_partition_count(symbol: str) -> None:
    grid = make_grid(ISLANDS_ROWS)
    assert sum(partition_areas(grid, symbol)) == count_symbol(grid, symbol)


def test_island_sizes() -> None:
    grid = make_grid(ISLANDS_ROWS)
    assert sorted(partition_areas(grid, "#"), reverse=True) == [3, 3, 2, 1]
    assert find_next(grid, "#") == INVALID


def test_problem_input_session() -> None:
    # Typical usage: dimensions then the map on one stream.
    stream = io.StringIO("4 3\nA.A.\nAAA.\n..A.\n")
    width, height = read_int(stream), read_int(stream)
    grid = GridState(config=GridConfig(max_width=16, max_height=16))
    grid.configure(width, height)
    grid.load(stream)
    assert dumps(grid) == "A.A.\nAAA.\n..A.\n"
    assert connected_area(grid, Coordinate(0, 0)) == 6
    assert partition_areas(grid, ".") == [1, 3, 2]


def test_reload_starts_fresh_epoch() -> None:
    grid = make_grid(["AA", "AA"])
    assert connected_area(grid, Coordinate(0, 0)) == 4
    grid.load("AAAA")
    assert connected_area(grid, Coordinate(1, 1)) == 4
