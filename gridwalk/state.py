"""Owned, mutable grid state.

A :class:`GridState` holds the cell symbols of a 2D map together with a
parallel *visited* overlay used by traversals. Unlike a process-wide table,
every grid is an explicitly constructed value; independent grids never share
storage.

Design notes:

* ``cells`` is a NumPy ``<U1`` array and ``visited`` a NumPy bool array, both
  shaped ``(height, width)`` and indexed ``[y, x]``. They are reallocated
  together, so their extents always match the configured width and height.
* Visited flags accumulate monotonically during an *epoch* and are cleared
  by :meth:`GridState.refresh`. :meth:`GridState.load` refreshes implicitly.
* ``at`` / ``visited_at`` / ``mark_visited`` are unchecked: callers validate
  coordinates with :meth:`Coordinate.is_valid` first. With
  ``GridConfig.checked`` enabled an invalid coordinate aborts via
  :func:`gridwalk.utils.panic.panic`. :meth:`GridState.at_checked` is the
  always-checked variant and raises ``IndexError``.
* Not safe for concurrent mutation; one traversal owns a grid at a time.
"""

import io
import logging
from typing import Iterator, Optional, TextIO, Tuple, Union

import numpy as np
import numpy.typing as npt

from gridwalk.config import DEFAULT_CONFIG, GridConfig
from gridwalk.coordinate import INVALID, Coordinate
from gridwalk.errors import GridConfigError
from gridwalk.types import Phase, Symbol
from gridwalk.utils.panic import panic
from gridwalk.utils.ranges import rng

logger = logging.getLogger(__name__)

CellArray = npt.NDArray[np.str_]
BoolArray = npt.NDArray[np.bool_]

EMPTY_SYMBOL: Symbol = " "

Source = Union[str, TextIO]


def _symbols(source: Source) -> Iterator[str]:
    """Yield non-whitespace characters of ``source`` one at a time.

    Streams are read lazily so that only the consumed characters are taken.
    """
    stream = io.StringIO(source) if isinstance(source, str) else source
    while True:
        ch = stream.read(1)
        if not ch:
            return
        if not ch.isspace():
            yield ch


class GridState:
    """A 2D symbol map with a visited overlay.

    Attributes:
        config (GridConfig): Maximum extent and checked-mode switch.
        width (int): Current number of columns.
        height (int): Current number of rows.
        cells (CellArray): Symbols, shape ``(height, width)``.
        visited (BoolArray): Visited flags, same shape as ``cells``.
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        config: GridConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self.width = config.max_width
        self.height = config.max_height
        self._phase = Phase.UNCONFIGURED
        if width is None and height is None:
            self._allocate()
        else:
            self.configure(
                config.max_width if width is None else width,
                config.max_height if height is None else height,
            )

    def __repr__(self) -> str:
        return f"GridState(width={self.width}, height={self.height}, phase={self._phase})"

    @property
    def phase(self) -> Phase:
        return self._phase

    # -------- Lifecycle --------

    def _allocate(self) -> None:
        self.cells: CellArray = np.full(
            (self.height, self.width), EMPTY_SYMBOL, dtype="<U1"
        )
        self.visited: BoolArray = np.zeros((self.height, self.width), dtype=np.bool_)

    def configure(self, width: int, height: int, discard: bool = False) -> None:
        """Set the logical extent of the grid.

        Arguments:
            width: Number of columns, ``1 <= width <= config.max_width``.
            height: Number of rows, ``1 <= height <= config.max_height``.
            discard: Drop the contents of a loaded grid, even when the extent
                is unchanged. Without it a loaded grid keeps its contents for
                the same extent and rejects a different one.

        Raises:
            GridConfigError: If the extent is out of range, or the grid is
                loaded, the extent differs and ``discard`` is False.
        """
        if not (0 < width <= self.config.max_width and 0 < height <= self.config.max_height):
            raise GridConfigError(
                f"Extent {width}x{height} outside 1x1..{self.config.max_width}x{self.config.max_height}"
            )
        same_extent = (width, height) == (self.width, self.height)
        if same_extent and self._phase is Phase.CONFIGURED:
            return
        if self._phase is Phase.LOADED and not discard:
            if same_extent:
                return
            raise GridConfigError(
                f"Cannot change extent of a loaded {self.width}x{self.height} grid "
                f"to {width}x{height}; pass discard=True to drop its contents"
            )
        logger.debug("configure %dx%d -> %dx%d", self.width, self.height, width, height)
        self.width = width
        self.height = height
        self._allocate()
        self._phase = Phase.CONFIGURED

    def load(self, source: Source) -> None:
        """Fill every cell from ``source``, row by row.

        ``source`` is a string or text stream of single-character symbols.
        Whitespace between symbols is skipped, so ``"AB\\nCD"`` and
        ``"A B C D"`` load the same 2x2 grid. Cells are filled for ``y`` from
        0 to ``height - 1`` and, within a row, ``x`` from 0 to ``width - 1``.
        From a stream only the ``width * height`` symbols needed are consumed.
        Loading before :meth:`configure` is accepted and fills the default
        ``config.max_width x config.max_height`` extent; a warning is logged.
        The visited overlay is cleared afterwards.

        Raises:
            GridConfigError: If ``source`` holds fewer symbols than cells.
        """
        if self._phase is Phase.UNCONFIGURED:
            logger.warning(
                "Loading into an unconfigured grid; using default extent %dx%d",
                self.width,
                self.height,
            )
        symbols = _symbols(source)
        cells = np.full((self.height, self.width), EMPTY_SYMBOL, dtype="<U1")
        for y in rng(self.height):
            for x in rng(self.width):
                symbol = next(symbols, None)
                if symbol is None:
                    raise GridConfigError(
                        f"Source ran out of symbols at {Coordinate(x, y)}: expected "
                        f"{self.width * self.height}, got {y * self.width + x}"
                    )
                cells[y, x] = symbol
        self.cells = cells
        self._phase = Phase.LOADED
        self.refresh()
        logger.debug("loaded %dx%d grid", self.width, self.height)

    def refresh(self) -> None:
        """Reset every visited flag, starting a new epoch."""
        self.visited.fill(False)

    # -------- Cell access --------

    def _guard(self, coord: Coordinate) -> None:
        if self.config.checked and not coord.is_valid(self):
            panic(f"Coordinate {coord} outside {self.width}x{self.height} grid")

    def at(self, coord: Coordinate) -> Symbol:
        """Symbol at ``coord``. Unchecked: ``coord`` must be valid."""
        self._guard(coord)
        return str(self.cells[coord.y, coord.x])

    def at_checked(self, coord: Coordinate) -> Symbol:
        """Symbol at ``coord``.

        Raises:
            IndexError: If ``coord`` is outside the grid.
        """
        if not coord.is_valid(self):
            raise IndexError(
                f"Out of bounds: {coord} for grid {self.width}x{self.height}"
            )
        return str(self.cells[coord.y, coord.x])

    def set(self, coord: Coordinate, symbol: Symbol) -> None:
        """Overwrite the symbol at ``coord``. Unchecked: ``coord`` must be valid."""
        if len(symbol) != 1 or symbol.isspace():
            raise ValueError(
                f"A cell holds exactly one non-whitespace character, got {symbol!r}"
            )
        self._guard(coord)
        self.cells[coord.y, coord.x] = symbol

    def visited_at(self, coord: Coordinate) -> bool:
        """Visited flag at ``coord``. Unchecked: ``coord`` must be valid."""
        self._guard(coord)
        return bool(self.visited[coord.y, coord.x])

    def mark_visited(self, coord: Coordinate) -> None:
        """Set the visited flag at ``coord``. Unchecked: ``coord`` must be valid."""
        self._guard(coord)
        self.visited[coord.y, coord.x] = True

    # -------- Scans --------

    def count_matching(self, symbol: Symbol) -> int:
        """Number of cells holding ``symbol``, regardless of visited state."""
        return int(np.count_nonzero(self.cells == symbol))

    def find_unvisited_matching(self, symbol: Symbol) -> Coordinate:
        """First unvisited cell holding ``symbol``, or the ``INVALID`` sentinel.

        Cells are scanned row by row from the top, left to right within a row.
        """
        matches = np.flatnonzero((self.cells == symbol) & ~self.visited)
        if matches.size == 0:
            return INVALID
        y, x = divmod(int(matches[0]), self.width)
        return Coordinate(x, y)

    # -------- Views --------

    def rows(self) -> Tuple[str, ...]:
        """The grid as one string per row."""
        return tuple("".join(row) for row in self.cells.tolist())

    def to_array(self) -> CellArray:
        """Copy of the cell array, indexed ``[y, x]``."""
        return self.cells.copy()
