"""Utility primitives for pygame staircase scenes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - pygame should be installed by demos
    raise ImportError("pygame is required for the visualization renderer") from exc

BACKGROUND_COLOR = (18, 18, 24)
AXIS_COLOR = (120, 120, 140)
ORIGINAL_COLOR = (150, 150, 170)
MERGED_COLOR = (90, 200, 255)
DP_TRY_COLOR = (200, 120, 40)
DP_PICK_COLOR = (70, 200, 110)

GROUND_RATIO = 0.9
VERTICAL_FRACTION = 0.8
HORIZONTAL_MARGIN_RATIO = 0.05


@dataclass
class StepState:
    idx: int
    x: int
    y: int
    width: int
    height: int


@dataclass
class RangeHighlight:
    start: int
    end: int
    color: Tuple[int, int, int]
    width: int


def staircase_outline(
    origin: Tuple[float, float], dims: Iterable[Tuple[int, int]]
) -> List[Tuple[float, float]]:
    """World-space polyline: rise by each height, then run by each width."""
    x, y = origin
    points = [(x, y)]
    for width, height in dims:
        y += height
        points.append((x, y))
        x += width
        points.append((x, y))
    return points


class BaseScene:
    """Coordinate transforms and basic draw helpers for the pygame renderer."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.total_width = 1
        self.total_height = 1
        self.margin_x = int(self.width * HORIZONTAL_MARGIN_RATIO)
        self.floor_y = int(self.height * GROUND_RATIO)
        self.x_scale = 1.0
        self.y_scale = 1.0
        self.steps: Dict[int, StepState] = {}
        self.merged: List[Tuple[int, int]] = []

    # ------------------------------------------------------------------ transforms
    def set_scene(self, *, total_width: int, total_height: int) -> None:
        self.total_width = max(1, total_width)
        self.total_height = max(1, total_height)
        scene_width = self.width - 2 * self.margin_x
        self.x_scale = scene_width / self.total_width
        self.y_scale = (self.height * VERTICAL_FRACTION) / self.total_height

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        px = self.margin_x + int(x * self.x_scale)
        py = self.floor_y - int(y * self.y_scale)
        px = max(0, min(self.width - 1, px))
        py = max(0, min(self.height - 1, py))
        return px, py

    # ------------------------------------------------------------------ scene content
    def add_step(self, idx: int, x: int, y: int, width: int, height: int) -> None:
        self.steps[idx] = StepState(idx=idx, x=x, y=y, width=width, height=height)

    def add_merged(self, width: int, height: int) -> None:
        self.merged.append((width, height))

    def reset(self) -> None:
        self.steps.clear()
        self.merged.clear()

    def ordered_steps(self) -> List[StepState]:
        return [self.steps[idx] for idx in sorted(self.steps)]

    # ------------------------------------------------------------------ drawing helpers
    def draw_background(self, surface: "pygame.Surface") -> None:
        surface.fill(BACKGROUND_COLOR)

    def draw_axes(self, surface: "pygame.Surface") -> None:
        pygame.draw.line(surface, AXIS_COLOR, (0, self.floor_y), (self.width, self.floor_y), 2)

    def draw_outline(
        self,
        surface: "pygame.Surface",
        points: Sequence[Tuple[float, float]],
        color: Tuple[int, int, int],
        width: int = 2,
    ) -> None:
        if len(points) < 2:
            return
        screen_points = [self.world_to_screen(x, y) for x, y in points]
        pygame.draw.lines(surface, color, False, screen_points, width)

    def draw_original(self, surface: "pygame.Surface") -> None:
        dims = [(step.width, step.height) for step in self.ordered_steps()]
        self.draw_outline(surface, staircase_outline((0, 0), dims), ORIGINAL_COLOR, 2)

    def draw_merged(self, surface: "pygame.Surface") -> None:
        self.draw_outline(surface, staircase_outline((0, 0), self.merged), MERGED_COLOR, 3)

    def draw_highlights(
        self,
        surface: "pygame.Surface",
        highlights: Iterable[RangeHighlight],
    ) -> None:
        """Underline the treads of every highlighted step range."""
        for highlight in highlights:
            first = self.steps.get(highlight.start)
            last = self.steps.get(highlight.end)
            if first is None or last is None:
                continue
            tread_y = last.y + last.height
            sx1, sy = self.world_to_screen(first.x, tread_y)
            sx2, _ = self.world_to_screen(last.x + last.width, tread_y)
            pygame.draw.line(surface, highlight.color, (sx1, sy), (sx2, sy), highlight.width)
