#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for the staircase merge pipeline.

Run this file directly, or execute `python -m examples.run_all` from the project
root.  It prints small, illustrative outputs and timings for:

  1. The hand-sized four-step staircase merged into two steps
  2. A tie between equally cheap splits (first split point wins)
  3. A random staircase with the default sizes (n=20, m=10)
"""

from __future__ import annotations

import time

import golden_staircase.algs.steps as steps_module
from golden_staircase import DEFAULT_M, DEFAULT_N, RNG_SEEDS, generate_steps, merge_staircase
from golden_staircase.visualization.text import (
    draw_steps,
    format_choices,
    format_merge_costs,
    format_optimal_costs,
)

# Activate verbose internal logging so the user can see the algorithmic traces.
steps_module.VERBOSE = True

SEP = "=" * 80


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")


def _run(steps, m: int, *, tables: bool) -> None:
    print(f"Input steps (w, h)       : {steps}")
    print(f"Target step count (m)    : {m}\n")

    t0 = time.perf_counter()
    solution = merge_staircase(steps, m)
    dt = time.perf_counter() - t0

    if tables:
        print(format_merge_costs(solution.merge_costs))
        print(format_optimal_costs(solution.optimal_costs))
        print(format_choices(solution.choices))
    print(f"Minimum restructuring cost = {solution.cost}")
    for slot, ((start, end), (w, h)) in enumerate(zip(solution.groups, solution.merged_steps)):
        print(f"  Step {slot:2d}: merges {start}..{end} -> width {w}, height {h}")
    print("+++ New steps:")
    print(draw_steps(solution.merged_steps))
    print(f"Elapsed: {dt:.6f} s")


def run_four_step_example() -> None:
    _hdr("1 – Four steps into two")
    _run([(2, 3), (3, 2), (2, 4), (4, 2)], 2, tables=True)


def run_tie_example() -> None:
    _hdr("2 – Equal-cost splits")
    _run([(1, 1), (1, 1), (1, 1)], 2, tables=True)


def run_random_example() -> None:
    _hdr(f"3 – Random staircase (n={DEFAULT_N}, m={DEFAULT_M})")
    steps = generate_steps(DEFAULT_N, seed=RNG_SEEDS["demo"])
    print("+++ Old steps:")
    print(draw_steps(steps))
    _run(steps, DEFAULT_M, tables=False)


if __name__ == "__main__":
    run_four_step_example()
    run_tie_example()
    run_random_example()
