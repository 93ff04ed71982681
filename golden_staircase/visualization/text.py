"""Plain-text diagnostics: DP table dumps and ASCII staircases."""

from __future__ import annotations

from typing import List, Sequence

from golden_staircase.algs.steps import Step, staircase_extent
from golden_staircase.algs.tables import MergeCostTable, PartitionTable

CELL_WIDTH = 5
BLANK_CELL = " " * CELL_WIDTH


def format_merge_costs(merge_costs: MergeCostTable) -> str:
    lines = ["+++ Array of merging costs:"]
    n = merge_costs.n
    for i in range(n):
        cells = [
            f"{merge_costs.cost(i, j):{CELL_WIDTH}d}" if merge_costs.defined(i, j) else BLANK_CELL
            for j in range(n)
        ]
        lines.append("".join(cells))
    return "\n".join(lines)


def _format_partition(title: str, table: PartitionTable) -> str:
    lines = [title]
    for i in range(table.n):
        cells = [
            f"{table.value(i, j):{CELL_WIDTH}d}" if table.defined(i, j) else BLANK_CELL
            for j in range(table.m)
        ]
        lines.append("".join(cells))
    return "\n".join(lines)


def format_optimal_costs(optimal_costs: PartitionTable) -> str:
    return _format_partition("+++ Array of optimal costs:", optimal_costs)


def format_choices(choices: PartitionTable) -> str:
    return _format_partition("+++ Array of optimal solutions:", choices)


def draw_steps(steps: Sequence[Step]) -> str:
    """Draw a staircase with ``|`` risers and ``-`` treads.

    The drawing assumes integer dimensions: one character per unit.
    """
    lines = [
        "--- Widths : " + "".join(f"{w:3d}" for w, _ in steps),
        "--- Heights: " + "".join(f"{h:3d}" for _, h in steps),
    ]
    total_width, total_height = staircase_extent(steps)

    grid: List[List[str]] = [[" "] * total_width + ["|"] for _ in range(total_height + 1)]
    row = col = 0
    for width, height in steps:
        for _ in range(height):
            grid[row][col] = "|"
            row += 1
        for _ in range(width):
            grid[row][col] = "-"
            col += 1

    for cells in reversed(grid):
        lines.append("".join(cells))
    lines.append("-" * (total_width + 1))
    return "\n".join(lines)


__all__ = [
    "format_merge_costs",
    "format_optimal_costs",
    "format_choices",
    "draw_steps",
]
