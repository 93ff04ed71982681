from __future__ import annotations

from typing import Dict

import pytest

from golden_staircase.algs.pipeline import merge_staircase
from golden_staircase.common.constants import RNG_SEEDS, seed_everywhere
from golden_staircase.data.gen_steps import generate_steps

seed_everywhere(RNG_SEEDS["tests"])


@pytest.mark.parametrize("n,m", [(5, 2), (10, 5), (20, 10), (40, 7), (40, 40)])
def test_transition_count_is_cubic_envelope(n: int, m: int) -> None:
    steps = generate_steps(n, seed=n * 100 + m)
    debug: Dict[str, Dict[str, int]] = {}
    merge_staircase(steps, m, debug=debug)

    partition = debug["partition"]
    expected = sum(i - j + 1 for j in range(1, m) for i in range(j + 1, n))
    assert partition["transitions"] == expected
    assert partition["transitions"] <= n * n * m
    assert partition["cells"] == sum(min(i + 1, m) for i in range(n))
    assert debug["merge_costs"]["cells"] == n * (n + 1) // 2


@pytest.mark.slow
def test_large_instance_costs_stay_exact() -> None:
    steps = [(10**9, 10**9)] * 120
    solution = merge_staircase(steps, 3)
    # three groups of 40 identical steps, each costing 10**18 * (39 * 40 // 2)
    assert solution.cost == 3 * 780 * 10**18
    assert solution.cost > 2**63
    assert solution.cost == sum(
        solution.merge_costs[start, end] for start, end in solution.groups
    )
