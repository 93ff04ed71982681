"""Pygame renderer that consumes staircase-merge events."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

try:
    import pygame
except ImportError as exc:  # pragma: no cover - ensure pygame is available
    raise ImportError("pygame is required for the visualization renderer") from exc

from golden_staircase.visualization.render.base_scene import (
    DP_PICK_COLOR,
    DP_TRY_COLOR,
    BaseScene,
    RangeHighlight,
)


class PygameRenderer:
    """Render staircase-merge event streams."""

    SPEED_LEVELS = [0.5, 1.0, 2.0, 4.0, 8.0]

    def __init__(self, width: int = 1200, height: int = 600, fps: int = 60) -> None:
        self.width = width
        self.height = height
        self.fps = fps
        pygame.font.init()
        self.font = pygame.font.SysFont("consolas", 18)
        self.scene = BaseScene(width, height)
        self.events: List[Dict[str, object]] = []
        self.cursor = 0
        self.total_events = 0
        self.autoplay = True
        self.speed_index = 1
        self.autoplay_accumulator = 0.0
        self.clock: Optional["pygame.time.Clock"] = None
        self.screen: Optional["pygame.Surface"] = None
        self.running = False
        self.algorithm_name = "unknown"
        self.n_value = 0
        self.m_value = 0
        self.current_cell: Optional[Tuple[int, int]] = None
        self.best_costs: Dict[Tuple[int, int], int] = {}
        self.final_cost: Optional[int] = None
        self.dp_highlights: List[Dict[str, object]] = []
        self.scene_initialized = False
        self.completed = False
        self.last_event_type: Optional[str] = None

    # ------------------------------------------------------------------ public API
    def load_events(self, events: List[Dict[str, object]]) -> None:
        self.events = list(events)
        self.total_events = len(self.events)
        self.cursor = 0
        self.autoplay_accumulator = 0.0
        self.scene.reset()
        self.scene_initialized = False
        self.algorithm_name = "unknown"
        self.current_cell = None
        self.best_costs.clear()
        self.final_cost = None
        self.dp_highlights.clear()
        self.completed = False
        self.last_event_type = None
        if self.events:
            self._bootstrap_scene()

    def run(self, autoplay: bool = True) -> None:
        if not self.events:
            raise RuntimeError("No events loaded. Call load_events() first.")

        self.autoplay = autoplay
        if not self.scene_initialized:
            self._bootstrap_scene()

        pygame.display.init()
        pygame.display.set_caption("Golden Staircase Merge")
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.clock = pygame.time.Clock()
        self.running = True

        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_input()
            self._update_highlights(dt)

            if self.autoplay and not self.completed:
                self._autoplay_advance(dt)

            self._draw_frame()

        pygame.display.quit()

    def process_all_events(self) -> None:
        """Advance through all events without opening a window (testing helper)."""
        while self.cursor < self.total_events:
            self._advance_event()

    def step_once(self) -> None:
        self._advance_event()

    # ------------------------------------------------------------------ internals
    def _bootstrap_scene(self) -> None:
        """Consume scene setup events (scene + steps + algo info)."""
        while self.cursor < self.total_events:
            event_type = self.events[self.cursor].get("type")
            if event_type in {"set_scene", "add_step", "algo_info"}:
                self._advance_event()
                self.scene_initialized = True
                continue
            break

    def _handle_input(self) -> None:
        for py_event in pygame.event.get():
            if py_event.type == pygame.QUIT:
                self.running = False
                return
            if py_event.type == pygame.KEYDOWN:
                if py_event.key in (pygame.K_ESCAPE, pygame.K_q):
                    self.running = False
                    return
                if py_event.key == pygame.K_SPACE:
                    self.autoplay = not self.autoplay
                elif py_event.key == pygame.K_RIGHT:
                    self.autoplay = False
                    self._advance_event()
                elif py_event.key == pygame.K_LEFT:
                    self.autoplay = False
                    self._rewind_event()
                elif py_event.key == pygame.K_UP:
                    self.speed_index = min(len(self.SPEED_LEVELS) - 1, self.speed_index + 1)
                elif py_event.key == pygame.K_DOWN:
                    self.speed_index = max(0, self.speed_index - 1)
                elif py_event.key == pygame.K_r:
                    current_autoplay = self.autoplay
                    self.load_events(self.events)
                    self.autoplay = current_autoplay

    def _autoplay_advance(self, dt: float) -> None:
        interval = 1.0 / self.fps
        interval /= max(0.1, self.SPEED_LEVELS[self.speed_index])
        self.autoplay_accumulator += dt
        while self.autoplay_accumulator >= interval and self.cursor < self.total_events:
            self.autoplay_accumulator -= interval
            self._advance_event()

    def _advance_event(self) -> None:
        if self.cursor >= self.total_events:
            self.completed = True
            return
        event = self.events[self.cursor]
        self.cursor += 1
        self.last_event_type = event.get("type")
        self._apply_event(event)
        if self.cursor >= self.total_events:
            self.completed = True

    def _rewind_event(self) -> None:
        if self.cursor == 0:
            return
        target = self.cursor - 1
        self.load_events(list(self.events))
        while self.cursor < target:
            self._advance_event()

    # ------------------------------------------------------------------ event application
    def _apply_event(self, event: Dict[str, object]) -> None:
        event_type = event.get("type")
        if event_type == "set_scene":
            self.n_value = int(event.get("n", 0))
            self.m_value = int(event.get("m", 0))
            self.scene.set_scene(
                total_width=int(event.get("total_width", 1)),
                total_height=int(event.get("total_height", 1)),
            )
            self.scene_initialized = True
        elif event_type == "add_step":
            self.scene.add_step(
                int(event.get("idx", 0)),
                int(event.get("x", 0)),
                int(event.get("y", 0)),
                int(event.get("width", 0)),
                int(event.get("height", 0)),
            )
        elif event_type == "algo_info":
            self.algorithm_name = str(event.get("name", "unknown"))
        elif event_type == "dp_start":
            self.best_costs.clear()
        elif event_type == "dp_try":
            self.current_cell = (int(event.get("i", 0)), int(event.get("j", 0)))
            self._add_range_highlight(event, DP_TRY_COLOR, ttl=0.4, width=2)
        elif event_type == "dp_pick":
            cell = (int(event.get("i", 0)), int(event.get("j", 0)))
            self.current_cell = cell
            self.best_costs[cell] = int(event.get("cost", 0))
            self._add_range_highlight(event, DP_PICK_COLOR, ttl=0.8, width=4)
        elif event_type == "dp_done":
            self.final_cost = int(event.get("cost", 0))
            self.current_cell = None
        elif event_type == "merge_group":
            self.scene.add_merged(int(event.get("width", 0)), int(event.get("height", 0)))
        elif event_type == "done":
            self.completed = True
        else:
            print(f"[Renderer] Unhandled event type: {event_type}")

    def _add_range_highlight(
        self,
        event: Dict[str, object],
        color: Tuple[int, int, int],
        ttl: float,
        width: int,
    ) -> None:
        self.dp_highlights.append(
            {
                "start": int(event.get("k", 0)),
                "end": int(event.get("i", 0)),
                "color": color,
                "ttl": ttl,
                "width": width,
            }
        )

    def _update_highlights(self, dt: float) -> None:
        remaining: List[Dict[str, object]] = []
        for item in self.dp_highlights:
            item["ttl"] = float(item.get("ttl", 0.0)) - dt
            if item["ttl"] > 0.0:
                remaining.append(item)
        self.dp_highlights = remaining

    # ------------------------------------------------------------------ drawing
    def _collect_highlights(self) -> List[RangeHighlight]:
        return [
            RangeHighlight(
                start=int(item["start"]),
                end=int(item["end"]),
                color=item["color"],
                width=int(item["width"]),
            )
            for item in self.dp_highlights
        ]

    def _draw_frame(self) -> None:
        assert self.screen is not None
        self.scene.draw_background(self.screen)
        self.scene.draw_axes(self.screen)
        self.scene.draw_original(self.screen)
        self.scene.draw_highlights(self.screen, self._collect_highlights())
        self.scene.draw_merged(self.screen)
        self._draw_hud(self.screen)
        pygame.display.flip()

    def _draw_hud(self, surface: "pygame.Surface") -> None:
        lines = [
            f"Algo: {self.algorithm_name}",
            f"n={self.n_value} m={self.m_value}",
            f"Event: {self.cursor}/{self.total_events}",
            f"Autoplay: {'on' if self.autoplay else 'off'} x{self.SPEED_LEVELS[self.speed_index]:.1f}",
        ]
        if self.current_cell is not None:
            i, j = self.current_cell
            best = self.best_costs.get(self.current_cell)
            lines.append(f"T[{i}, {j}] = {best if best is not None else '...'}")
        if self.final_cost is not None:
            lines.append(f"Minimum restructuring cost = {self.final_cost}")
        if self.last_event_type:
            lines.append(f"Last: {self.last_event_type}")

        x = 10
        y = 10
        for line in lines:
            text_surface = self.font.render(line, True, (230, 230, 230))
            surface.blit(text_surface, (x, y))
            y += text_surface.get_height() + 2


__all__ = ["PygameRenderer"]
