"""End-to-end solver: merge costs -> optimal partition -> merged steps."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from golden_staircase.algs.reference.merge_costs_ref import build_merge_costs
from golden_staircase.algs.reference.partition_ref import Observer, optimal_partition
from golden_staircase.algs.reference.reconstruct_ref import reconstruct_groups
from golden_staircase.algs.steps import (
    Step,
    aggregate_steps,
    log,
    validate_steps,
    validate_target_count,
)
from golden_staircase.algs.tables import MergeCostTable, PartitionTable

__all__ = ["StaircaseSolution", "merge_staircase"]


@dataclass(frozen=True)
class StaircaseSolution:
    """Optimal merge of ``steps`` into ``m`` steps together with its DP tables."""

    steps: Tuple[Step, ...]
    merged_steps: Tuple[Step, ...]
    groups: Tuple[Tuple[int, int], ...]
    cost: int
    merge_costs: MergeCostTable
    optimal_costs: PartitionTable
    choices: PartitionTable

    def __post_init__(self) -> None:
        if len(self.merged_steps) != len(self.groups):
            raise ValueError("merged steps and groups must share identical length")

    @property
    def n(self) -> int:
        return len(self.steps)

    @property
    def m(self) -> int:
        return len(self.merged_steps)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "n": self.n,
            "m": self.m,
            "cost": self.cost,
            "steps": [list(step) for step in self.steps],
            "merged_steps": [list(step) for step in self.merged_steps],
            "groups": [list(group) for group in self.groups],
        }


def merge_staircase(
    steps: Sequence[Sequence[int]],
    m: int,
    *,
    debug: Optional[Dict[str, Any]] = None,
    observer: Optional[Observer] = None,
) -> StaircaseSolution:
    """Merge ``steps`` into exactly ``m`` contiguous steps at minimum cost.

    Both the staircase and ``m`` are validated before any table is built.
    """
    validated = validate_steps(steps)
    m = validate_target_count(len(validated), m)

    cost_debug: Dict[str, Any] = {}
    partition_debug: Dict[str, Any] = {}
    merge_costs = build_merge_costs(validated, debug=cost_debug)
    optimal_costs, choices = optimal_partition(
        merge_costs, m, debug=partition_debug, observer=observer
    )
    groups: List[Tuple[int, int]] = reconstruct_groups(choices)
    merged = [aggregate_steps(validated, start, end) for start, end in groups]

    log(f"[merge_staircase] n={len(validated)} m={m} cost={optimal_costs.final()}")
    if debug is not None:
        debug.clear()
        debug.update({"merge_costs": cost_debug, "partition": partition_debug})

    return StaircaseSolution(
        steps=tuple(validated),
        merged_steps=tuple(merged),
        groups=tuple(groups),
        cost=optimal_costs.final(),
        merge_costs=merge_costs,
        optimal_costs=optimal_costs,
        choices=choices,
    )
