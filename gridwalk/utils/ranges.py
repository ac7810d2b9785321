"""Integer range helpers used to drive grid scans."""

from typing import Optional


def rng(left: int, right: Optional[int] = None) -> range:
    """Return the integers of ``[left, right)`` in ascending order.

    With a single argument the range is ``[0, left)``. The result is lazy and
    may be iterated any number of times.
    """
    if right is None:
        return range(left)
    return range(left, right)
