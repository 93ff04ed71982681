"""Algorithm package entry points."""

from __future__ import annotations

import golden_staircase.algs.reference as reference
from golden_staircase.algs.pipeline import StaircaseSolution, merge_staircase
from golden_staircase.algs.reference import (
    build_merge_costs,
    optimal_partition,
    reconstruct,
    reconstruct_groups,
)
from golden_staircase.algs.steps import InvalidInputError, Step
from golden_staircase.algs.tables import MergeCostTable, PartitionTable

__all__ = [
    "build_merge_costs",
    "optimal_partition",
    "reconstruct",
    "reconstruct_groups",
    "merge_staircase",
    "StaircaseSolution",
    "MergeCostTable",
    "PartitionTable",
    "InvalidInputError",
    "Step",
    "reference",
]
