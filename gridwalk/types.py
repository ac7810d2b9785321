"""Common type aliases and enumerations.

``Condition`` and ``Action`` are the extension points of
:func:`gridwalk.engine.walk`: the condition decides whether a cell is entered
and the action runs once the cell's reachable region has been explored.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


if TYPE_CHECKING:
    from gridwalk.coordinate import Coordinate

# A single character stored in one cell.
Symbol = str

Condition = Callable[["Coordinate"], bool]
Action = Callable[["Coordinate"], None]


class Phase(StrEnum):
    """Lifecycle of a grid session."""

    UNCONFIGURED = auto()
    CONFIGURED = auto()
    LOADED = auto()
