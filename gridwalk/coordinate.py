"""Coordinate value type.

Immutable integer cell address. A coordinate may lie outside any grid (or be
negative); :meth:`Coordinate.is_valid` decides membership against a concrete
grid's current extent. ``INVALID`` is the sentinel returned by searches that
find nothing.
"""

from dataclasses import dataclass
from typing import List, Protocol


class Extent(Protocol):
    width: int
    height: int


@dataclass(frozen=True)
class Coordinate:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    @classmethod
    def invalid(cls) -> "Coordinate":
        """Return the "not found" sentinel."""
        return INVALID

    def dx(self, dx: int) -> "Coordinate":
        """Return the coordinate translated by ``dx`` columns."""
        return Coordinate(self.x + dx, self.y)

    def dy(self, dy: int) -> "Coordinate":
        """Return the coordinate translated by ``dy`` rows."""
        return Coordinate(self.x, self.y + dy)

    translate_x = dx
    translate_y = dy

    def is_valid(self, grid: Extent) -> bool:
        """Return True if the coordinate lies within ``grid``'s extent."""
        return 0 <= self.x < grid.width and 0 <= self.y < grid.height

    def neighbors(self, grid: Extent) -> List["Coordinate"]:
        """Valid 4-neighbours in the order down, right, left, up.

        Traversal order depends on this exact sequence.
        """
        return [
            cell
            for cell in (self.dy(1), self.dx(1), self.dx(-1), self.dy(-1))
            if cell.is_valid(grid)
        ]

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


INVALID = Coordinate(-1, -1)
