"""Back-pointer walk turning the choice table ``S`` into merged steps."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from golden_staircase.algs.steps import (
    InvalidInputError,
    Step,
    aggregate_steps,
    log,
    validate_steps,
)
from golden_staircase.algs.tables import PartitionTable

__all__ = ["reconstruct_groups", "reconstruct"]


def reconstruct_groups(choices: PartitionTable) -> List[Tuple[int, int]]:
    """Return the inclusive ``(start, end)`` ranges of the ``m`` merged steps.

    The walk starts at ``(i, j) = (n-1, m-1)``; group ``j`` covers
    ``S[i, j]..i`` and the walk continues at ``(S[i, j] - 1, j - 1)``.
    Ranges are returned in ascending order.
    """
    groups: List[Tuple[int, int]] = []
    i = choices.n - 1
    j = choices.m - 1
    while j >= 0:
        start = choices.value(i, j)
        if not (j <= start <= i):
            raise RuntimeError(f"choice S[{i}, {j}] = {start} leaves no room for {j} groups")
        groups.append((start, i))
        i = start - 1
        j -= 1

    if i != -1:
        raise RuntimeError("Choice table reconstruction did not terminate at step 0")

    groups.reverse()
    return groups


def reconstruct(
    steps: Sequence[Sequence[int]],
    choices: PartitionTable,
) -> List[Step]:
    """Materialise the merged staircase described by ``choices``.

    Each merged step sums the widths and heights of the original steps in
    its group.
    """
    validated = validate_steps(steps)
    if len(validated) != choices.n:
        raise InvalidInputError(
            f"choice table covers {choices.n} steps but {len(validated)} were given"
        )
    groups = reconstruct_groups(choices)
    merged = [aggregate_steps(validated, start, end) for start, end in groups]
    log(f"[reconstruct] groups={groups}")
    return merged
