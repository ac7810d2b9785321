from typing import List, Sequence

from gridwalk.config import GridConfig
from gridwalk.coordinate import Coordinate
from gridwalk.state import GridState
from gridwalk.textio import from_rows


SCENARIO_ROWS: List[str] = ["AAB", "ABB", "BBB"]

# Two '#' islands separated by water, plus a lone '#' in the corner.
ISLANDS_ROWS: List[str] = [
    "##..#",
    "#...#",
    ".....",
    "..##.",
    "#..#.",
]


def make_grid(rows: Sequence[str] = SCENARIO_ROWS, checked: bool = False) -> GridState:
    """Loaded grid built from ``rows`` with a small maximum extent."""
    config = GridConfig(max_width=64, max_height=64, checked=checked)
    return from_rows(list(rows), config=config)


def all_coordinates(grid: GridState) -> List[Coordinate]:
    return [Coordinate(x, y) for y in range(grid.height) for x in range(grid.width)]
