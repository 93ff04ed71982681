from __future__ import annotations

import json
from typing import Any, Dict, List

import pytest

try:
    from hypothesis import given, strategies as st

    HAVE_HYPOTHESIS = True
except ImportError:  # pragma: no cover
    HAVE_HYPOTHESIS = False
    given = None  # type: ignore[assignment]
    st = None  # type: ignore[assignment]

from golden_staircase import InvalidInputError, merge_staircase
from tests.test_utils import check_partition, oracle_min_merge_cost


def test_hand_traced_solution(four_steps) -> None:
    solution = merge_staircase(four_steps, 2)
    assert solution.cost == 8
    assert solution.groups == ((0, 1), (2, 3))
    assert solution.merged_steps == ((5, 5), (6, 6))
    assert solution.n == 4 and solution.m == 2
    assert solution.optimal_costs[3, 1] == 8
    assert solution.choices[3, 1] == 2


def test_single_step_boundary() -> None:
    solution = merge_staircase([(3, 4)], 1)
    assert solution.cost == 0
    assert solution.merged_steps == ((3, 4),)
    assert solution.groups == ((0, 0),)


def test_repeated_runs_identical(four_steps) -> None:
    first = merge_staircase(four_steps, 3)
    second = merge_staircase(list(four_steps), 3)
    assert first == second


def test_to_dict_is_json_ready(four_steps) -> None:
    payload = merge_staircase(four_steps, 2).to_dict()
    assert json.loads(json.dumps(payload)) == {
        "n": 4,
        "m": 2,
        "cost": 8,
        "steps": [[2, 3], [3, 2], [2, 4], [4, 2]],
        "merged_steps": [[5, 5], [6, 6]],
        "groups": [[0, 1], [2, 3]],
    }


def test_debug_collects_both_stages(four_steps) -> None:
    debug: Dict[str, Any] = {}
    merge_staircase(four_steps, 2, debug=debug)
    assert debug["merge_costs"]["n"] == 4
    assert debug["partition"]["transitions"] == 5
    assert debug["partition"]["optimal_cost"] == 8


@pytest.mark.parametrize(
    "steps,m",
    [
        ([(2, 3), (3, 2)], 3),
        ([(2, 3), (3, 2)], 0),
        ([], 1),
        ([(2, 3), (0, 2)], 1),
    ],
)
def test_invalid_input_rejected_before_solving(steps, m) -> None:
    events: List[Dict[str, Any]] = []
    with pytest.raises(InvalidInputError):
        merge_staircase(steps, m, observer=events.append)
    assert events == []


if HAVE_HYPOTHESIS:

    step_lists = st.lists(
        st.tuples(st.integers(min_value=1, max_value=9), st.integers(min_value=1, max_value=9)),
        min_size=1,
        max_size=10,
    )

    @given(step_lists, st.data())
    def test_solution_properties(steps, data) -> None:
        m = data.draw(st.integers(min_value=1, max_value=len(steps)))
        solution = merge_staircase(steps, m)
        check_partition(solution.groups, len(steps), m)
        assert solution.cost == oracle_min_merge_cost(steps, m)
        assert solution.cost == sum(
            solution.merge_costs[start, end] for start, end in solution.groups
        )
        for (start, end), (width, height) in zip(solution.groups, solution.merged_steps):
            assert width == sum(w for w, _ in steps[start : end + 1])
            assert height == sum(h for _, h in steps[start : end + 1])

    @given(step_lists)
    def test_extreme_target_counts(steps) -> None:
        n = len(steps)
        identity = merge_staircase(steps, n)
        assert identity.cost == 0
        assert list(identity.merged_steps) == [tuple(s) for s in steps]

        single = merge_staircase(steps, 1)
        assert single.cost == single.merge_costs[0, n - 1]
        assert single.merged_steps == (
            (sum(w for w, _ in steps), sum(h for _, h in steps)),
        )


def test_non_pair_step_rejected() -> None:
    with pytest.raises(InvalidInputError):
        merge_staircase([(2, 3), 5], 1)
