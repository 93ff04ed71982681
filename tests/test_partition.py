from __future__ import annotations

from typing import Any, Dict, List

import numpy as np
import pytest

try:
    from hypothesis import given, strategies as st

    HAVE_HYPOTHESIS = True
except ImportError:  # pragma: no cover
    HAVE_HYPOTHESIS = False
    given = None  # type: ignore[assignment]
    st = None  # type: ignore[assignment]

from golden_staircase.algs.reference import build_merge_costs, optimal_partition
from golden_staircase.algs.steps import InvalidInputError
from tests.test_utils import gen_steps, oracle_min_merge_cost, rng


def _expected_transitions(n: int, m: int) -> int:
    return sum(i - j + 1 for j in range(1, m) for i in range(j + 1, n))


# ---------------------------------------------------------------------------
#  Unit tests
# ---------------------------------------------------------------------------
def test_hand_traced_tables(four_steps) -> None:
    M = build_merge_costs(four_steps)
    T, S = optimal_partition(M, 2)

    assert [T[i, 0] for i in range(4)] == [0, 4, 24, 38]
    assert [S[i, 0] for i in range(4)] == [0, 0, 0, 0]
    assert T[1, 1] == 0 and S[1, 1] == 1
    # k=1 costs 0 + 12, k=2 costs 4 + 0
    assert T[2, 1] == 4 and S[2, 1] == 2
    # k=1 costs 22, k=2 costs 4 + 4, k=3 costs 24
    assert T[3, 1] == 8 and S[3, 1] == 2
    assert T.final() == 8


def test_identity_base_cases() -> None:
    steps = gen_steps(rng(3), 6)
    M = build_merge_costs(steps)
    T, S = optimal_partition(M, 4)
    for i in range(4):
        assert T[i, i] == 0
        assert S[i, i] == i


def test_single_group_column_equals_merge_costs() -> None:
    steps = gen_steps(rng(5), 7)
    M = build_merge_costs(steps)
    T, S = optimal_partition(M, 3)
    for i in range(M.n):
        assert T[i, 0] == M[0, i]
        assert S[i, 0] == 0


def test_first_minimiser_wins_ties() -> None:
    M = build_merge_costs([(1, 1), (1, 1), (1, 1)])
    T, S = optimal_partition(M, 2)
    # k=1: T[0,0] + M[1,2] = 0 + 1 ; k=2: T[1,0] + M[2,2] = 1 + 0
    assert T[2, 1] == 1
    assert S[2, 1] == 1


def test_m_equals_n_costs_nothing() -> None:
    steps = gen_steps(rng(11), 5)
    T, _ = optimal_partition(build_merge_costs(steps), 5)
    assert T.final() == 0


@pytest.mark.parametrize("i,j", [(0, 1), (1, 2), (4, 2), (2, -1), (5, 0)])
def test_out_of_domain_lookup_raises(i: int, j: int) -> None:
    M = build_merge_costs(gen_steps(rng(1), 5))
    T, S = optimal_partition(M, 2)
    for table in (T, S):
        assert not table.defined(i, j)
        with pytest.raises(IndexError):
            table[i, j]


@pytest.mark.parametrize("m", [0, -1, 5, 1.5, True])
def test_invalid_target_count(four_steps, m) -> None:
    M = build_merge_costs(four_steps)
    with pytest.raises(InvalidInputError):
        optimal_partition(M, m)


def test_debug_counts_transitions(four_steps) -> None:
    debug: Dict[str, Any] = {}
    optimal_partition(build_merge_costs(four_steps), 2, debug=debug)
    assert debug["n"] == 4
    assert debug["m"] == 2
    assert debug["cells"] == 1 + 2 + 2 + 2
    assert debug["transitions"] == _expected_transitions(4, 2) == 5
    assert debug["optimal_cost"] == 8


def test_observer_sees_every_transition_without_changing_result() -> None:
    steps = gen_steps(rng(21), 8)
    M = build_merge_costs(steps)
    events: List[Dict[str, Any]] = []
    T_obs, S_obs = optimal_partition(M, 4, observer=events.append)
    T, S = optimal_partition(M, 4)

    assert T_obs == T and S_obs == S
    tries = [ev for ev in events if ev["type"] == "dp_try"]
    picks = [ev for ev in events if ev["type"] == "dp_pick"]
    assert len(tries) == _expected_transitions(8, 4)
    assert len(picks) == sum(min(i + 1, 4) for i in range(8))
    for ev in picks:
        assert T[ev["i"], ev["j"]] == ev["cost"]
        assert S[ev["i"], ev["j"]] == ev["k"]


@pytest.mark.parametrize("seed", list(range(12)))
def test_matches_exhaustive_oracle(seed: int) -> None:
    rnd = rng(seed)
    n = rnd.randint(1, 8)
    m = rnd.randint(1, n)
    steps = gen_steps(rnd, n)
    T, _ = optimal_partition(build_merge_costs(steps), m)
    assert T.final() == oracle_min_merge_cost(steps, m)


def test_deterministic_tables() -> None:
    steps = gen_steps(rng(8), 9)
    first = optimal_partition(build_merge_costs(steps), 4)
    second = optimal_partition(build_merge_costs(steps), 4)
    assert first == second


# ---------------------------------------------------------------------------
#  Property tests
# ---------------------------------------------------------------------------
if HAVE_HYPOTHESIS:

    step_lists = st.lists(
        st.tuples(st.integers(min_value=1, max_value=9), st.integers(min_value=1, max_value=9)),
        min_size=1,
        max_size=9,
    )

    @given(step_lists, st.data())
    def test_every_prefix_matches_oracle(steps, data) -> None:
        m = data.draw(st.integers(min_value=1, max_value=len(steps)))
        T, _ = optimal_partition(build_merge_costs(steps), m)
        for i in range(len(steps)):
            for j in range(min(i + 1, m)):
                assert T[i, j] == oracle_min_merge_cost(steps[: i + 1], j + 1)

    @given(step_lists)
    def test_cost_non_increasing_in_m(steps) -> None:
        M = build_merge_costs(steps)
        costs = [optimal_partition(M, m)[0].final() for m in range(1, len(steps) + 1)]
        assert all(a >= b for a, b in zip(costs, costs[1:]))
        assert costs[-1] == 0


def test_numpy_indices_on_partition_tables(four_steps) -> None:
    T, S = optimal_partition(build_merge_costs(four_steps), 2)
    assert T[np.int64(3), np.int64(1)] == 8
    assert S.value(np.int64(3), np.int64(1)) == 2
