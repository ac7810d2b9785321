"""gridwalk: helpers for grid-based combinatorial search.

Parse a 2D character map into a :class:`GridState`, explore it with
:func:`walk`, and answer connectivity / counting queries::

    grid = GridState(3, 3)
    grid.load("AAB ABB BBB")
    connected_area(grid, Coordinate(0, 0))  # 3
"""

from gridwalk.config import GridConfig
from gridwalk.coordinate import INVALID, Coordinate
from gridwalk.engine import (
    components,
    connected_area,
    connected_region,
    count_symbol,
    find_next,
    walk,
)
from gridwalk.errors import GridConfigError
from gridwalk.state import GridState
from gridwalk.textio import debug, dumps, from_rows, output
from gridwalk.types import Action, Condition, Phase, Symbol
from gridwalk.utils.combinatorics import BaseN, Permut, base_n, fact
from gridwalk.utils.integers import format_int, read_int
from gridwalk.utils.panic import panic
from gridwalk.utils.ranges import rng

__all__ = [
    "Action",
    "BaseN",
    "Condition",
    "Coordinate",
    "GridConfig",
    "GridConfigError",
    "GridState",
    "INVALID",
    "Permut",
    "Phase",
    "Symbol",
    "base_n",
    "components",
    "connected_area",
    "connected_region",
    "count_symbol",
    "debug",
    "dumps",
    "fact",
    "find_next",
    "format_int",
    "from_rows",
    "output",
    "panic",
    "read_int",
    "rng",
    "walk",
]
