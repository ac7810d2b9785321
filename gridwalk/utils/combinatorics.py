"""Small combinatorics helpers: factorial, base-n digits and permutations."""

import itertools
from dataclasses import dataclass
from typing import Generic, Iterator, List, Sequence, Tuple, TypeVar

from gridwalk.utils.ranges import rng

T = TypeVar("T")


def fact(n: int) -> int:
    """Return ``n!`` for ``n >= 0``."""
    if n < 0:
        raise ValueError(f"Factorial is undefined for negative numbers: {n}")
    result = 1
    for i in rng(2, n + 1):
        result *= i
    return result


@dataclass(frozen=True)
class BaseN:
    """Digits of ``num`` in base ``base``, least significant first.

    Iterating ``BaseN(1234, 10)`` yields ``4, 3, 2, 1``. Zero has no digits.
    """

    num: int
    base: int = 10

    def __post_init__(self) -> None:
        if self.base < 2:
            raise ValueError(f"Base must be at least 2, got {self.base}")
        if self.num < 0:
            raise ValueError(f"Only non-negative numbers are supported, got {self.num}")

    def __iter__(self) -> Iterator[int]:
        curr = self.num
        while curr != 0:
            yield curr % self.base
            curr //= self.base

    def to_list(self) -> List[int]:
        return list(self)


def base_n(num: int, base: int) -> List[int]:
    """Return the base-``base`` digits of ``num``, least significant first."""
    return BaseN(num, base).to_list()


class Permut(Generic[T]):
    """All orderings of ``elements``.

    Permutations are generated over element positions, so the given order is
    produced first and duplicates are treated as distinct::

        >>> ["".join(map(str, p)) for p in Permut([5, 1, 4])]
        ['514', '541', '154', '145', '451', '415']
    """

    def __init__(self, elements: Sequence[T]) -> None:
        self.elements: Tuple[T, ...] = tuple(elements)

    def cnt(self) -> int:
        """Number of permutations produced."""
        return fact(len(self.elements))

    def __len__(self) -> int:
        return self.cnt()

    def __iter__(self) -> Iterator[Tuple[T, ...]]:
        for indices in itertools.permutations(rng(len(self.elements))):
            yield tuple(self.elements[i] for i in indices)
