# Exact solver APIs – default exports
from .algs import (
    StaircaseSolution,
    build_merge_costs,
    merge_staircase,
    optimal_partition,
    reconstruct,
    reconstruct_groups,
)
from .algs.steps import VERBOSE, InvalidInputError, Step
from .algs.tables import MergeCostTable, PartitionTable

# Constants & generation
from .common.constants import (
    DEFAULT_M,
    DEFAULT_N,
    DEFAULT_SEED,
    RNG_SEEDS,
    seed_everywhere,
)
from .data.gen_steps import StepConfig, generate_steps

__all__ = [
    # core pipeline
    "build_merge_costs",
    "optimal_partition",
    "reconstruct",
    "reconstruct_groups",
    "merge_staircase",
    "StaircaseSolution",
    # types
    "Step",
    "MergeCostTable",
    "PartitionTable",
    "InvalidInputError",
    "VERBOSE",
    # generation & constants
    "StepConfig",
    "generate_steps",
    "DEFAULT_N",
    "DEFAULT_M",
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "seed_everywhere",
]
