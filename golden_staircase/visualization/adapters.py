"""Adapter converting a staircase merge run into renderer-friendly events."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence

from golden_staircase.algs.pipeline import merge_staircase
from golden_staircase.algs.steps import staircase_extent, validate_steps
from golden_staircase.visualization.events import (
    AddStepEvent,
    AlgoInfoEvent,
    DPDoneEvent,
    DPStartEvent,
    DoneEvent,
    MergeGroupEvent,
    SetSceneEvent,
    step_corners,
)


def build_scene_events(steps: Sequence[Sequence[int]], m: int) -> List[dict]:
    validated = validate_steps(steps)
    total_width, total_height = staircase_extent(validated)
    events: List[dict] = [
        SetSceneEvent(
            type="set_scene",
            n=len(validated),
            m=int(m),
            total_width=total_width,
            total_height=total_height,
        )
    ]
    for idx, ((width, height), (x, y)) in enumerate(zip(validated, step_corners(validated))):
        events.append(
            AddStepEvent(type="add_step", idx=idx, x=x, y=y, width=width, height=height)
        )
    return events


def build_merge_events(
    steps: Sequence[Sequence[int]],
    m: int,
    *,
    include_tries: bool = True,
) -> List[dict]:
    """Run the merge pipeline and return its trace as a list of events.

    ``include_tries=False`` drops the per-candidate ``dp_try`` events, which
    dominate the stream for large staircases.
    """
    trace: List[Dict[str, Any]] = []

    def _observe(event: Dict[str, Any]) -> None:
        if include_tries or event["type"] != "dp_try":
            trace.append(dict(event))

    solution = merge_staircase(steps, m, observer=_observe)

    events = build_scene_events(solution.steps, solution.m)
    events.append(AlgoInfoEvent(type="algo_info", name="golden_staircase"))
    events.append(DPStartEvent(type="dp_start", n=solution.n, m=solution.m))
    events.extend(trace)
    events.append(DPDoneEvent(type="dp_done", cost=solution.cost))

    for slot, ((start, end), (width, height)) in enumerate(
        zip(solution.groups, solution.merged_steps)
    ):
        events.append(
            MergeGroupEvent(
                type="merge_group",
                slot=slot,
                start=start,
                end=end,
                width=width,
                height=height,
            )
        )
    events.append(DoneEvent(type="done"))
    return events


__all__ = ["build_scene_events", "build_merge_events"]
