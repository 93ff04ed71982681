"""Immutable DP tables with their domains enforced on every lookup."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterator, Tuple

__all__ = ["MergeCostTable", "PartitionTable"]


def _check_index(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True)
class MergeCostTable:
    """Upper-triangular table ``M``; row ``i`` stores columns ``i..n-1``.

    ``M[i, j]`` is the cost of collapsing steps ``i..j`` into one step and is
    only defined for ``0 <= i <= j < n``.
    """

    rows: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        n = len(self.rows)
        if n == 0:
            raise ValueError("merge-cost table must have at least one row")
        for i, row in enumerate(self.rows):
            if len(row) != n - i:
                raise ValueError(f"row {i} must hold {n - i} entries, got {len(row)}")
            if row[0] != 0:
                raise ValueError(f"diagonal entry M[{i}, {i}] must be zero")

    @property
    def n(self) -> int:
        return len(self.rows)

    def defined(self, i: int, j: int) -> bool:
        return 0 <= i <= j < self.n

    def cost(self, i: int, j: int) -> int:
        i = _check_index(i, "row")
        j = _check_index(j, "column")
        if not self.defined(i, j):
            raise IndexError(f"M[{i}, {j}] outside domain 0 <= i <= j < {self.n}")
        return self.rows[i][j - i]

    def __getitem__(self, key: Tuple[int, int]) -> int:
        i, j = key
        return self.cost(i, j)

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(i, j, cost)`` for every defined entry, row by row."""
        for i, row in enumerate(self.rows):
            for offset, value in enumerate(row):
                yield i, i + offset, value


@dataclass(frozen=True)
class PartitionTable:
    """Lower-triangular ``n x m`` table used for both ``T`` and ``S``.

    Entry ``(i, j)`` describes the first ``i + 1`` steps merged into ``j + 1``
    steps and exists only for ``0 <= j <= i < n`` and ``j < m``.
    """

    m: int
    rows: Tuple[Tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.m < 1:
            raise ValueError("partition table needs at least one column")
        if len(self.rows) < self.m:
            raise ValueError("partition table needs at least m rows")
        for i, row in enumerate(self.rows):
            expected = min(i + 1, self.m)
            if len(row) != expected:
                raise ValueError(f"row {i} must hold {expected} entries, got {len(row)}")

    @property
    def n(self) -> int:
        return len(self.rows)

    def defined(self, i: int, j: int) -> bool:
        return 0 <= j <= i < self.n and j < self.m

    def value(self, i: int, j: int) -> int:
        i = _check_index(i, "row")
        j = _check_index(j, "column")
        if not self.defined(i, j):
            raise IndexError(
                f"entry ({i}, {j}) outside domain 0 <= j <= i < {self.n}, j < {self.m}"
            )
        return self.rows[i][j]

    def __getitem__(self, key: Tuple[int, int]) -> int:
        i, j = key
        return self.value(i, j)

    def final(self) -> int:
        """Entry for the whole staircase merged into ``m`` steps."""
        return self.rows[self.n - 1][self.m - 1]
