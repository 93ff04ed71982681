from __future__ import annotations

import argparse
import json
from typing import Iterable, List, Tuple

from golden_staircase.algs.steps import Step
from golden_staircase.common.constants import RNG_SEEDS
from golden_staircase.data.gen_steps import generate_steps
from golden_staircase.visualization.adapters import build_merge_events
from golden_staircase.visualization.render import PygameRenderer

PRESETS = {
    "four_steps": {
        "steps": [(2, 3), (3, 2), (2, 4), (4, 2)],
        "m": 2,
    },
    "flat_ties": {
        "steps": [(1, 1), (1, 1), (1, 1), (1, 1), (1, 1)],
        "m": 3,
    },
}


def parse_steps(value: str) -> List[Step]:
    data = json.loads(value)
    steps = []
    for entry in data:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError("steps must be [[width, height], ...]")
        steps.append((int(entry[0]), int(entry[1])))
    return steps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Staircase merge DP visualization demo")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="four_steps")
    parser.add_argument("--steps", type=str, help="JSON list of [width, height]")
    parser.add_argument("--random", type=int, metavar="N", help="Draw N random steps instead")
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["demo"])
    parser.add_argument("--m", type=int)
    parser.add_argument("--no-tries", action="store_true", help="Only show picked transitions")
    parser.add_argument("--manual", action="store_true", help="Start with autoplay disabled")
    return parser


def resolve_instance(args: argparse.Namespace) -> Tuple[List[Step], int]:
    """Pick the staircase and target count from parsed demo arguments."""
    if args.steps:
        steps = parse_steps(args.steps)
        m = args.m if args.m is not None else max(1, len(steps) // 2)
    elif args.random:
        steps = generate_steps(args.random, seed=args.seed)
        m = args.m if args.m is not None else max(1, args.random // 2)
    else:
        preset = PRESETS[args.preset]
        steps = list(preset["steps"])
        m = args.m if args.m is not None else preset["m"]
    return steps, m


def main(argv: Iterable[str] | None = None) -> None:
    args = build_parser().parse_args(list(argv) if argv is not None else None)
    steps, m = resolve_instance(args)
    events = build_merge_events(steps, m, include_tries=not args.no_tries)
    renderer = PygameRenderer()
    renderer.load_events(events)
    renderer.run(autoplay=not args.manual)


if __name__ == "__main__":
    main()
