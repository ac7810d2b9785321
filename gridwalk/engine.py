"""Traversal and query operations over a :class:`GridState`.

:func:`walk` is the single traversal primitive: a depth-first flood fill
which enters a cell when it is valid, unvisited and accepted by ``condition``,
marks it visited, explores its neighbours (down, right, left, up) and finally
calls ``action`` on it. Every cell is entered, and has ``action`` applied, at
most once per epoch (until :meth:`GridState.refresh`).

The walk keeps its own stack of pending frames instead of recursing, so
regions as large as the whole grid do not hit the interpreter's recursion
limit. Entry order and action order are those of the recursive formulation.

Everything else here is built from :func:`walk` or delegates to a scan on the
state.
"""

from typing import Iterator, List, Tuple

from pyrsistent import pset
from pyrsistent.typing import PSet

from gridwalk.coordinate import Coordinate
from gridwalk.state import GridState
from gridwalk.types import Action, Condition, Symbol


def _enter(grid: GridState, cell: Coordinate, condition: Condition) -> bool:
    if not cell.is_valid(grid):
        return False
    if grid.visited_at(cell):
        return False
    if not condition(cell):
        return False
    grid.mark_visited(cell)
    return True


def walk(
    grid: GridState, start: Coordinate, condition: Condition, action: Action
) -> None:
    """Traverse the cells reachable from ``start`` that satisfy ``condition``.

    Arguments:
        grid: Grid whose visited overlay is read and updated.
        start: First cell to try. Invalid, visited or rejected starts are no-ops.
        condition: Predicate deciding whether a cell is entered. Rejected
            cells stay unvisited.
        action: Called on a cell after all of its reachable neighbours have
            been explored (post-order).
    """
    if not _enter(grid, start, condition):
        return
    stack: List[Tuple[Coordinate, Iterator[Coordinate]]] = [
        (start, iter(start.neighbors(grid)))
    ]
    while stack:
        cell, pending = stack[-1]
        for neighbor in pending:
            if _enter(grid, neighbor, condition):
                stack.append((neighbor, iter(neighbor.neighbors(grid))))
                break
        else:
            stack.pop()
            action(cell)


def connected_area(grid: GridState, start: Coordinate) -> int:
    """Size of the unvisited same-symbol component containing ``start``.

    Returns 0 for an invalid or already visited ``start``. The walked cells
    stay visited, so a second call within the same epoch returns 0.
    """
    if not start.is_valid(grid):
        return 0
    symbol = grid.at(start)
    count = 0

    def increment(_: Coordinate) -> None:
        nonlocal count
        count += 1

    walk(grid, start, lambda cell: grid.at(cell) == symbol, increment)
    return count


def connected_region(grid: GridState, start: Coordinate) -> PSet[Coordinate]:
    """Cells of the unvisited same-symbol component containing ``start``."""
    if not start.is_valid(grid):
        return pset()
    symbol = grid.at(start)
    cells: List[Coordinate] = []
    walk(grid, start, lambda cell: grid.at(cell) == symbol, cells.append)
    return pset(cells)


def count_symbol(grid: GridState, symbol: Symbol) -> int:
    """Number of cells holding ``symbol``."""
    return grid.count_matching(symbol)


def find_next(grid: GridState, symbol: Symbol) -> Coordinate:
    """First unvisited cell holding ``symbol``; the ``INVALID`` sentinel if none."""
    return grid.find_unvisited_matching(symbol)


def components(grid: GridState, symbol: Symbol) -> Iterator[Tuple[Coordinate, int]]:
    """Yield ``(first_cell, area)`` for each unvisited component of ``symbol``.

    Components are discovered in scan order. The visited overlay is not
    refreshed first; call :meth:`GridState.refresh` to cover the whole grid.
    """
    while True:
        start = find_next(grid, symbol)
        if not start.is_valid(grid):
            return
        yield start, connected_area(grid, start)
