"""Shared event schema for staircase-merge visualizations."""

from __future__ import annotations

from typing import List, Literal, Sequence, Tuple, TypedDict

from golden_staircase.algs.steps import Step


class SetSceneEvent(TypedDict):
    type: Literal["set_scene"]
    n: int
    m: int
    total_width: int
    total_height: int


class AddStepEvent(TypedDict):
    type: Literal["add_step"]
    idx: int
    x: int
    y: int
    width: int
    height: int


class AlgoInfoEvent(TypedDict):
    type: Literal["algo_info"]
    name: str


class DPStartEvent(TypedDict):
    type: Literal["dp_start"]
    n: int
    m: int


class DPTryEvent(TypedDict):
    type: Literal["dp_try"]
    i: int
    j: int
    k: int
    cost: int


class DPPickEvent(TypedDict):
    type: Literal["dp_pick"]
    i: int
    j: int
    k: int
    cost: int
    case: Literal["identity", "single", "split"]


class DPDoneEvent(TypedDict):
    type: Literal["dp_done"]
    cost: int


class MergeGroupEvent(TypedDict):
    type: Literal["merge_group"]
    slot: int
    start: int
    end: int
    width: int
    height: int


class DoneEvent(TypedDict):
    type: Literal["done"]


def step_corners(steps: Sequence[Step]) -> List[Tuple[int, int]]:
    """Return the lower-left corner ``(x, y)`` of each step's riser."""
    corners: List[Tuple[int, int]] = []
    x = y = 0
    for width, height in steps:
        corners.append((x, y))
        x += width
        y += height
    return corners


__all__ = [
    "SetSceneEvent",
    "AddStepEvent",
    "AlgoInfoEvent",
    "DPStartEvent",
    "DPTryEvent",
    "DPPickEvent",
    "DPDoneEvent",
    "MergeGroupEvent",
    "DoneEvent",
    "step_corners",
]
