"""Reference DP for merging a staircase into exactly ``m`` contiguous groups."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional, Tuple

from golden_staircase.algs.steps import log, validate_target_count
from golden_staircase.algs.tables import MergeCostTable, PartitionTable

__all__ = ["optimal_partition", "Observer"]

Observer = Callable[[Dict[str, Any]], None]


def _freeze(m: int, rows: List[List[Optional[int]]]) -> PartitionTable:
    for i, row in enumerate(rows):
        if any(value is None for value in row):
            raise RuntimeError(f"partition row {i} left incomplete")
    return PartitionTable(m=m, rows=tuple(tuple(row) for row in rows))


def optimal_partition(
    merge_costs: MergeCostTable,
    m: int,
    *,
    debug: Optional[Dict[str, Any]] = None,
    observer: Optional[Observer] = None,
) -> Tuple[PartitionTable, PartitionTable]:
    """Fill the optimal-cost table ``T`` and the choice table ``S``.

    ``T[i, j]`` is the cheapest way of replacing steps ``0..i`` by ``j + 1``
    merged steps and ``S[i, j]`` is the index where the last of those merged
    steps begins. The recurrence is

        T[i, j] = min_{k = j..i} T[k-1, j-1] + M[k, i]

    evaluated for ``j`` ascending and then ``i`` ascending, so every
    ``T[k-1, j-1]`` is final before it is read. ``k`` is scanned upwards and
    only a strictly cheaper candidate replaces the current choice, so the
    smallest minimising ``k`` is kept.

    Parameters
    ----------
    merge_costs:
        Table produced by :func:`build_merge_costs`; ``n`` is taken from it.
    m:
        Number of merged steps, ``1 <= m <= n``.
    debug:
        Optional dict filled with table sizes and transition counts.
    observer:
        Optional callable receiving ``dp_try`` / ``dp_pick`` event dicts.

    Returns
    -------
    (T, S)
        ``T.final()`` is the minimum restructuring cost.
    """
    n = merge_costs.n
    m = validate_target_count(n, m)
    M = merge_costs.rows

    T: List[List[Optional[int]]] = [[None] * min(i + 1, m) for i in range(n)]
    S: List[List[Optional[int]]] = [[None] * min(i + 1, m) for i in range(n)]

    # Keeping every step as it is costs nothing.
    for i in range(m):
        T[i][i] = 0
        S[i][i] = i
        if observer is not None:
            observer({"type": "dp_pick", "i": i, "j": i, "k": i, "cost": 0, "case": "identity"})

    # A single merged step covering steps 0..i.
    for i in range(1, n):
        T[i][0] = M[0][i]
        S[i][0] = 0
        if observer is not None:
            observer({"type": "dp_pick", "i": i, "j": 0, "k": 0, "cost": M[0][i], "case": "single"})

    transitions = 0
    for j in range(1, m):
        for i in range(j + 1, n):
            best_cost = math.inf
            best_k: Optional[int] = None
            for k in range(j, i + 1):
                # Steps k..i form the last group; 0..k-1 fill the first j groups.
                cost = T[k - 1][j - 1] + M[k][i - k]
                transitions += 1
                if observer is not None:
                    observer({"type": "dp_try", "i": i, "j": j, "k": k, "cost": cost})
                if cost < best_cost:
                    best_cost = cost
                    best_k = k
            T[i][j] = int(best_cost)
            S[i][j] = best_k
            if observer is not None:
                observer(
                    {"type": "dp_pick", "i": i, "j": j, "k": best_k, "cost": T[i][j], "case": "split"}
                )

    optimal_costs = _freeze(m, T)
    choices = _freeze(m, S)

    log(f"[partition] n={n} m={m} transitions={transitions} cost={optimal_costs.final()}")
    if debug is not None:
        debug.clear()
        debug.update(
            {
                "n": n,
                "m": m,
                "cells": sum(len(row) for row in T),
                "transitions": transitions,
                "optimal_cost": optimal_costs.final(),
            }
        )
    return optimal_costs, choices
