"""
Step primitives shared by every stage of the merge pipeline.

A step is a ``(width, height)`` pair of positive integers; a staircase is an
ordered sequence of steps whose positions matter, since only contiguous runs
of steps are ever merged.
"""

from __future__ import annotations

import numbers
from typing import List, Sequence, Tuple

# Global debug switch
VERBOSE: bool = False

Step = Tuple[int, int]


class InvalidInputError(ValueError):
    """Raised when a staircase or target step count cannot be solved."""


def log(*args, **kwargs) -> None:  # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


def _as_dimension(value: object, what: str, idx: int) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInputError(f"step #{idx} {what} must be an integer, got {value!r}")
    value = int(value)
    if value <= 0:
        raise InvalidInputError(f"step #{idx} {what} must be positive, got {value}")
    return value


def validate_steps(steps: Sequence[Sequence[int]]) -> List[Step]:
    """Return ``steps`` as a list of ``(int, int)`` tuples or raise."""
    try:
        count = len(steps)
    except TypeError as exc:
        raise InvalidInputError("staircase must be a sequence of (width, height) pairs") from exc
    if count == 0:
        raise InvalidInputError("staircase must contain at least one step")

    validated: List[Step] = []
    for idx, step in enumerate(steps):
        try:
            size = len(step)
        except TypeError as exc:
            raise InvalidInputError(f"step #{idx} must be a (width, height) pair") from exc
        if size != 2:
            raise InvalidInputError(f"step #{idx} must be a (width, height) pair")
        width = _as_dimension(step[0], "width", idx)
        height = _as_dimension(step[1], "height", idx)
        validated.append((width, height))
    return validated


def validate_target_count(n: int, m: int) -> int:
    if isinstance(m, bool) or not isinstance(m, numbers.Integral):
        raise InvalidInputError(f"target step count must be an integer, got {m!r}")
    if n < 1:
        raise InvalidInputError("staircase must contain at least one step")
    if not (1 <= m <= n):
        raise InvalidInputError(f"target step count must satisfy 1 <= m <= n (m={m}, n={n})")
    return int(m)


def aggregate_steps(steps: Sequence[Step], start: int, end: int) -> Step:
    """Collapse ``steps[start..end]`` (inclusive) into a single step."""
    if not (0 <= start <= end < len(steps)):
        raise IndexError(f"step range [{start}, {end}] out of bounds for {len(steps)} steps")
    width = sum(w for w, _ in steps[start : end + 1])
    height = sum(h for _, h in steps[start : end + 1])
    return width, height


def staircase_extent(steps: Sequence[Step]) -> Tuple[int, int]:
    """Return the total ``(width, height)`` covered by a staircase."""
    return sum(w for w, _ in steps), sum(h for _, h in steps)


__all__ = [
    "VERBOSE",
    "Step",
    "InvalidInputError",
    "log",
    "validate_steps",
    "validate_target_count",
    "aggregate_steps",
    "staircase_extent",
]
