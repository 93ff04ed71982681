"""Command-line entry point: random staircase -> optimal merge -> drawings."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Iterable, Optional

import golden_staircase.algs.steps as steps_module
from golden_staircase.algs.pipeline import merge_staircase
from golden_staircase.algs.steps import InvalidInputError
from golden_staircase.common.constants import DEFAULT_M, DEFAULT_N
from golden_staircase.data.gen_steps import generate_steps
from golden_staircase.visualization.text import (
    draw_steps,
    format_choices,
    format_merge_costs,
    format_optimal_costs,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Merge a random staircase of n steps into m steps at minimum cost",
    )
    parser.add_argument("n", type=int, nargs="?", default=DEFAULT_N, help="number of input steps")
    parser.add_argument("m", type=int, nargs="?", default=DEFAULT_M, help="number of merged steps")
    parser.add_argument("--seed", type=int, default=None, help="seed for the step generator")
    parser.add_argument("--tables", action="store_true", help="print the M, T and S tables")
    parser.add_argument("--json", action="store_true", help="print the solution as JSON")
    parser.add_argument("--verbose", action="store_true", help="trace the solver stages")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    steps_module.VERBOSE = args.verbose

    try:
        steps = generate_steps(args.n, seed=args.seed)
        solution = merge_staircase(steps, args.m)
    except InvalidInputError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(solution.to_dict(), sort_keys=True))
        return 0

    if args.tables:
        print(format_merge_costs(solution.merge_costs))
        print(format_optimal_costs(solution.optimal_costs))
        print(format_choices(solution.choices))

    print(f"Minimum restructuring cost = {solution.cost}")
    print("+++ Old steps:")
    print(draw_steps(solution.steps))
    print("+++ New steps:")
    print(draw_steps(solution.merged_steps))
    return 0


if __name__ == "__main__":
    sys.exit(main())
