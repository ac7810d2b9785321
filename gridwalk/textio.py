"""Text output formats for grids.

``output`` / ``dumps`` write the plain row format read back by
:meth:`GridState.load`. ``debug`` draws a bordered box for human inspection
only.
"""

import sys
from typing import Optional, Sequence, TextIO

from gridwalk.config import DEFAULT_CONFIG, GridConfig
from gridwalk.state import GridState


def dumps(grid: GridState) -> str:
    """Return ``height`` lines of ``width`` symbols, each newline-terminated."""
    return "".join(f"{row}\n" for row in grid.rows())


def output(grid: GridState, stream: Optional[TextIO] = None) -> None:
    """Write the grid to ``stream`` (stdout by default) in load format."""
    (stream or sys.stdout).write(dumps(grid))


def debug(grid: GridState, stream: Optional[TextIO] = None) -> None:
    """Draw the grid in a box on ``stream`` (stderr by default).

    The top border is followed by the width, the last line by the height.
    """
    out = stream or sys.stderr
    out.write("\n┌" + "─" * grid.width + f"{grid.width}\n")
    for row in grid.rows():
        out.write(f"│{row}\n")
    out.write(f"{grid.height}\n\n")


def from_rows(rows: Sequence[str], config: GridConfig = DEFAULT_CONFIG) -> GridState:
    """Build a loaded grid from equal-length row strings.

    Raises:
        ValueError: If ``rows`` is empty or the rows differ in length.
    """
    if not rows:
        raise ValueError("At least one row is required")
    width = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != width]
    if mismatched:
        raise ValueError(
            f"Inconsistent row lengths: expected {width}, got "
            + ", ".join(f"row {i}: {n}" for i, n in mismatched)
        )
    if any(ch.isspace() for row in rows for ch in row):
        raise ValueError("Rows may not contain whitespace symbols")
    grid = GridState(width, len(rows), config=config)
    grid.load("\n".join(rows))
    return grid
