"""Reference builder for the triangular merge-cost table ``M``."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from golden_staircase.algs.steps import Step, log, validate_steps
from golden_staircase.algs.tables import MergeCostTable

__all__ = ["build_merge_costs"]


def _merge_cost_rows(steps: Sequence[Step]) -> List[List[int]]:
    n = len(steps)
    rows: List[List[int]] = []
    for i in range(n):
        row = [0]
        footprint = 0
        for j in range(i + 1, n):
            # Raising the block i..j-1 by the height of step j.
            footprint += steps[j - 1][0]
            row.append(row[-1] + steps[j][1] * footprint)
        rows.append(row)
    return rows


def build_merge_costs(
    steps: Sequence[Sequence[int]],
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> MergeCostTable:
    """Compute ``M[i, j]``, the cost of collapsing steps ``i..j`` into one.

    ``M[i, i] = 0`` and, for ``i < j``,
    ``M[i, j] = M[i, j-1] + height[j] * (width[i] + ... + width[j-1])``.

    Raises
    ------
    InvalidInputError
        If the staircase is empty or any dimension is not a positive integer.
    """
    validated = validate_steps(steps)
    rows = _merge_cost_rows(validated)
    table = MergeCostTable(rows=tuple(tuple(row) for row in rows))

    log(f"[merge_costs] n={table.n} M[0, n-1]={table.cost(0, table.n - 1)}")
    if debug is not None:
        debug.clear()
        debug.update(
            {
                "n": table.n,
                "cells": sum(len(row) for row in rows),
            }
        )
    return table
