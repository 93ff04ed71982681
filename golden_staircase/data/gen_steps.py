"""Random staircase generation.

``StepConfig`` declares the inclusive width/height ranges and
``generate_steps`` samples a staircase from a ``numpy.random.Generator``, so
the same seed always reproduces the same staircase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from golden_staircase.algs.steps import InvalidInputError, Step
from golden_staircase.common.constants import MAX_HEIGHT, MAX_WIDTH, MIN_DIMENSION


@dataclass(frozen=True)
class StepConfig:
    """Inclusive dimension ranges for generated steps."""

    min_width: int = MIN_DIMENSION
    max_width: int = MAX_WIDTH
    min_height: int = MIN_DIMENSION
    max_height: int = MAX_HEIGHT

    def __post_init__(self) -> None:
        if self.min_width <= 0 or self.max_width < self.min_width:
            raise ValueError("width range must contain positive ascending bounds")
        if self.min_height <= 0 or self.max_height < self.min_height:
            raise ValueError("height range must contain positive ascending bounds")


def generate_steps(
    n: int,
    rng: Optional[np.random.Generator] = None,
    *,
    config: StepConfig = StepConfig(),
    seed: Optional[int] = None,
) -> List[Step]:
    """Draw ``n`` steps with dimensions uniform in the configured ranges.

    When ``rng`` is omitted a fresh generator is created from ``seed``
    (unseeded if ``seed`` is ``None``).
    """
    if n < 1:
        raise InvalidInputError("number of steps must be at least 1")
    if rng is None:
        rng = np.random.default_rng(seed)

    widths = rng.integers(config.min_width, config.max_width, size=n, endpoint=True)
    heights = rng.integers(config.min_height, config.max_height, size=n, endpoint=True)
    return [(int(w), int(h)) for w, h in zip(widths, heights)]


__all__ = ["StepConfig", "generate_steps"]
