from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

# Entry-point defaults: number of input steps and merged steps.
DEFAULT_N: int = 20
DEFAULT_M: int = 10

# Generator bounds (inclusive) for random staircases.
MIN_DIMENSION: int = 2
MAX_WIDTH: int = 5
MAX_HEIGHT: int = 5

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
    "demo": 5150,
}


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "DEFAULT_N",
    "DEFAULT_M",
    "MIN_DIMENSION",
    "MAX_WIDTH",
    "MAX_HEIGHT",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
