"""Benchmark harness for the staircase merge pipeline."""

from __future__ import annotations

import argparse
import statistics
import time
from typing import List

import sys
from pathlib import Path

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from golden_staircase.algs.pipeline import merge_staircase
from golden_staircase.common.constants import DEFAULT_SEED, RNG_SEEDS
from golden_staircase.data.gen_steps import generate_steps

BENCH_SEED = RNG_SEEDS.get("bench", DEFAULT_SEED)


def run_benchmark(args: argparse.Namespace) -> None:
    rng = np.random.default_rng(args.seed)
    m = args.m if args.m is not None else max(1, args.steps // 2)

    durations: List[float] = []
    transitions: List[int] = []
    costs: List[int] = []

    total_runs = args.warmup + args.n
    for iteration in range(total_runs):
        steps = generate_steps(args.steps, rng)
        debug: dict = {}
        start = time.perf_counter()
        solution = merge_staircase(steps, m, debug=debug)
        elapsed = time.perf_counter() - start

        if iteration >= args.warmup:
            durations.append(elapsed)
            transitions.append(debug["partition"]["transitions"])
            costs.append(solution.cost)

    if not durations:
        print("no timed iterations")
        return

    arr = np.array(durations, dtype=float)
    summary = (
        f"n={args.steps},m={m},runs={arr.size},total_time={arr.sum():.6f},"
        f"mean={arr.mean():.6f},median={np.median(arr):.6f},"
        f"p90={np.percentile(arr, 90):.6f},p99={np.percentile(arr, 99):.6f},"
        f"min={arr.min():.6f},max={arr.max():.6f}"
    )
    print(summary)
    print(
        f"transitions={transitions[0]},cost_mean={statistics.fmean(costs):.3f},"
        f"cost_p90={np.percentile(np.array(costs, dtype=float), 90):.3f}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the staircase merge DP.")
    parser.add_argument("--n", type=int, default=200, help="Number of timed iterations.")
    parser.add_argument("--warmup", type=int, default=10, help="Number of warmup iterations.")
    parser.add_argument("--seed", type=int, default=BENCH_SEED, help="Deterministic RNG seed.")
    parser.add_argument("--steps", type=int, default=60, help="Steps per instance.")
    parser.add_argument("--m", type=int, default=None, help="Merged steps (default: steps // 2).")
    args = parser.parse_args()
    run_benchmark(args)


if __name__ == "__main__":
    main()
