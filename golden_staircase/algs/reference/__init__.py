"""Exact reference solvers for the staircase merge problem."""

from __future__ import annotations

from golden_staircase.algs.reference.merge_costs_ref import build_merge_costs
from golden_staircase.algs.reference.partition_ref import Observer, optimal_partition
from golden_staircase.algs.reference.reconstruct_ref import (
    reconstruct,
    reconstruct_groups,
)

__all__ = [
    "build_merge_costs",
    "optimal_partition",
    "reconstruct",
    "reconstruct_groups",
    "Observer",
]
