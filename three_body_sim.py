#!/usr/bin/env python3
"""
Three-body simulator application entry point and UI/renderer coordination.

What this module does
- Starts two event loops: a Pygame rendering thread (viewport) and the Dear PyGui UI
  (running on the main thread).
- The rendering thread owns the Simulation outright. It steps it at a fixed rate, draws
  it, and hands finished runs to the statistics store.
- The UI only talks to a small AppState (guarded by a lock): it queues reset requests
  and color changes, and reads back the numbers it displays.

Threading model
- PygameRenderer runs in a background thread and performs: input handling, applying
  queued UI requests, stepping physics and drawing, in that order. Requests are applied
  between steps so the renderer never sees a half-reset simulation.
- The UI class runs in the main thread via Dear PyGui. It refreshes its readouts on a
  periodic frame callback.

Running
1) Install: `pip install -e .`
2) Run: `python three_body_sim.py [--config overrides.json] [--stats stats.json]`

Controls
- R in the viewport, or the Reset button, ends the current run and starts a new one.
- Closing either window shuts down the application cleanly.
"""

import argparse
import logging
import threading
import time
from typing import List, Optional, Tuple

# GUI and Rendering libs
import pygame
from pygame import gfxdraw
import dearpygui.dearpygui as dpg

from tribody.config import SimConfig, load_config
from tribody.constants import (
    BACKGROUND_COLOR,
    GLOW_SCALE,
    HUD_COLOR,
    MIN_BODY_PIXELS,
    SAFE_COORD_LIMIT,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from tribody.logging_config import setup_logging
from tribody.simulation import RunEnded, Simulation
from tribody.stats import DEFAULT_STATS_PATH, JsonStatsStore
from tribody.utils import coerce_color, format_duration
from tribody.vector_utils import clamp

logger = logging.getLogger("tribody.app")

# ============================================================
# Shared state between the UI and the renderer
# ============================================================


class AppState:
    """
    Requests from the UI thread and readouts for it, guarded by a lock.

    The renderer drains the requests once per frame before stepping.
    """

    def __init__(self, palette):
        self.lock = threading.RLock()
        self.running = True
        self.palette: List[Tuple[int, int, int]] = list(palette)
        self._reset_requested = False
        self._palette_dirty = False

    def request_reset(self):
        with self.lock:
            self._reset_requested = True

    def set_color(self, index: int, color):
        with self.lock:
            if 0 <= index < len(self.palette):
                self.palette[index] = coerce_color(color, self.palette[index])
                self._palette_dirty = True

    def take_requests(self) -> Tuple[bool, Optional[List[Tuple[int, int, int]]]]:
        """Return (reset requested, new palette or None) and clear both."""
        with self.lock:
            reset, self._reset_requested = self._reset_requested, False
            palette = list(self.palette) if self._palette_dirty else None
            self._palette_dirty = False
            return reset, palette


# ============================================================
# Pygame Renderer Thread
# ============================================================


class PygameRenderer(threading.Thread):
    """
    Pygame loop: steps the simulation and draws trails, bodies and a small HUD.
    """

    def __init__(self, state: AppState, stats: JsonStatsStore, config: SimConfig,
                 size: Tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT)):
        super().__init__(daemon=True)
        self.state = state
        self.stats = stats
        self.config = config
        self.size = size
        # one clock and one start time for the HUD and the stats panel
        self.sim = Simulation(size[0], size[1], config=config, clock=stats.clock)
        self.sim.set_palette(state.palette)
        self.stats.start_run(self.sim.run_started)
        self.surface = None
        self.clock = None
        self.running = True
        self._accumulator = 0.0

    def run(self):
        pygame.init()
        pygame.display.set_caption("Three-Body Simulator - Viewport")
        self.surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()

        last_time = time.perf_counter()
        while self.running and self.state.running:
            now = time.perf_counter()
            real_dt = now - last_time
            last_time = now

            self.handle_events()
            self.apply_requests()
            self.step_simulation(real_dt)
            self.draw()

            # Limit FPS
            self.clock.tick(self.config.step_rate)

        pygame.quit()

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.state.running = False
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.surface = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)
                self.sim.set_bounds(event.w, event.h)

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                self.state.request_reset()

    def apply_requests(self):
        reset, palette = self.state.take_requests()
        if palette is not None:
            self.sim.set_palette(palette)
        if reset:
            self.on_run_ended(self.sim.request_reset())

    def step_simulation(self, real_dt: float):
        """
        Run whole fixed-rate steps for the time that has passed.

        The camera ease is tuned per step at step_rate, so the step size never varies.
        A backlog larger than max_substeps (window dragged, debugger pause) is dropped.
        """
        interval = self.config.step_interval
        self._accumulator += real_dt
        steps = 0
        while self._accumulator >= interval and steps < self.config.max_substeps:
            event = self.sim.step()
            if event is not None:
                self.on_run_ended(event)
            self._accumulator -= interval
            steps += 1
        if steps == self.config.max_substeps:
            self._accumulator = 0.0

    def on_run_ended(self, event: RunEnded):
        # the simulation has already reinitialized, so run_started is the new run's
        self.stats.record(event, run_started=self.sim.run_started)

    def draw(self):
        surf = self.surface
        surf.fill(BACKGROUND_COLOR)
        camera = self.sim.camera

        for b in self.sim.bodies:
            self.draw_trail(surf, b)

        for b in self.sim.bodies:
            screen_pos = _safe_point(camera.world_to_screen(b.position))
            if screen_pos is None:
                continue
            core_r = max(1, int(b.visual_radius(camera.zoom, MIN_BODY_PIXELS) * camera.zoom))
            draw_glow(surf, screen_pos, core_r, b.color)
            try:
                gfxdraw.filled_circle(surf, screen_pos[0], screen_pos[1], core_r, b.color)
                gfxdraw.aacircle(surf, screen_pos[0], screen_pos[1], core_r, b.color)
            except (pygame.error, OverflowError):
                pass

        draw_text(surf, f"Run time: {format_duration(self.sim.elapsed())}", 10, 10, HUD_COLOR)
        draw_text(surf, "R: reset", 10, 30, HUD_COLOR)

        pygame.display.flip()

    def draw_trail(self, surf, body):
        """Line segments from the body back through its trail, fading into the background."""
        camera = self.sim.camera
        pts = [body.position] + list(body.trail)
        n = len(pts)
        if n < 2:
            return
        prev = _safe_point(camera.world_to_screen(pts[0]))
        for i in range(1, n):
            cur = _safe_point(camera.world_to_screen(pts[i]))
            if prev is not None and cur is not None:
                color = blend(body.color, BACKGROUND_COLOR, i / n)
                try:
                    pygame.draw.aaline(surf, color, prev, cur)
                except (pygame.error, TypeError):
                    pass
            prev = cur


def blend(a, b, t):
    """Mix color a towards b by t in [0, 1]."""
    t = clamp(t, 0.0, 1.0)
    return tuple(int(a[k] + (b[k] - a[k]) * t) for k in range(3))


def draw_glow(surface, center, core_r, color):
    """Radial glow: stacked translucent circles, faint at the rim, brighter inward."""
    glow_r = int(core_r * GLOW_SCALE)
    rings = 8
    for k in range(rings, 0, -1):
        r = core_r + (glow_r - core_r) * k // rings
        alpha = int(40 * (1.0 - k / (rings + 1)) ** 2) + 4
        try:
            gfxdraw.filled_circle(surface, center[0], center[1], r, (color[0], color[1], color[2], alpha))
        except (pygame.error, OverflowError):
            return


_cached_font = None


def draw_text(surface, text, x, y, color):
    global _cached_font
    if not pygame.font.get_init():
        pygame.font.init()
    if _cached_font is None:
        try:
            _cached_font = pygame.font.SysFont("consolas", 16)
        except (pygame.error, OSError):
            _cached_font = pygame.font.Font(None, 16)
    img = _cached_font.render(text, True, color)
    surface.blit(img, (x, y))


def _safe_point(pt):
    try:
        x, y = int(pt[0]), int(pt[1])
    except (TypeError, ValueError, OverflowError):
        return None
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


# ============================================================
# Dear PyGui UI
# ============================================================


class UI:
    """
    Dear PyGui interface: body color pickers, reset button and run statistics.
    """

    def __init__(self, state: AppState, stats: JsonStatsStore):
        self.state = state
        self.stats = stats
        self.color_ids = []
        self.runs_id = None
        self.longest_id = None
        self.current_id = None
        self.status_msg_id = None
        self._build_ui()
        self._schedule_sync()

    def _schedule_sync(self):
        """Reschedule the periodic sync callback (~10Hz at 60 FPS)."""
        dpg.set_frame_callback(dpg.get_frame_count() + 6, self._sync_ui)

    def _build_ui(self):
        dpg.create_context()
        dpg.create_viewport(title="Three-Body Simulator - Controls", width=360, height=360)

        with dpg.window(label="Controls", width=340, height=340, pos=(10, 10), tag="main_window"):
            dpg.add_text("Body colors")
            with self.state.lock:
                palette = list(self.state.palette)
            for i, color in enumerate(palette):
                self.color_ids.append(dpg.add_color_edit(
                    default_value=(color[0], color[1], color[2], 255),
                    label=f"Body {i + 1}",
                    no_alpha=True,
                    width=220,
                    user_data=i,
                    callback=self._on_color_changed,
                ))

            dpg.add_separator()
            dpg.add_button(label="Reset", callback=self._on_reset_clicked)
            self.status_msg_id = dpg.add_text("")

            dpg.add_separator()
            dpg.add_text("Statistics")
            self.runs_id = dpg.add_text("Runs: 0")
            self.longest_id = dpg.add_text("Longest run: 0:00.0")
            self.current_id = dpg.add_text("Current run: 0:00.0")

        dpg.setup_dearpygui()
        dpg.show_viewport()

    def _on_color_changed(self, sender, app_data, user_data):
        # app_data is normalized; the widget value is RGBA in 0..255
        self.state.set_color(user_data, dpg.get_value(sender))

    def _on_reset_clicked(self):
        self.state.request_reset()
        dpg.set_value(self.status_msg_id, "Reset requested.")

    def _sync_ui(self):
        snap = self.stats.snapshot()
        dpg.set_value(self.runs_id, f"Runs: {snap.total_runs}")
        dpg.set_value(self.longest_id, f"Longest run: {format_duration(snap.longest_run)}")
        dpg.set_value(self.current_id, f"Current run: {format_duration(self.stats.current_run_elapsed())}")
        if not self.state.running:
            dpg.stop_dearpygui()
            return
        self._schedule_sync()


# ============================================================
# Application Entry
# ============================================================


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Real-time three-body gravity toy.")
    parser.add_argument("--config", help="JSON file overriding simulation defaults")
    parser.add_argument("--stats", default=DEFAULT_STATS_PATH, help="where run statistics are kept")
    parser.add_argument("--width", type=int, default=VIEW_WIDTH)
    parser.add_argument("--height", type=int, default=VIEW_HEIGHT)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    config = load_config(args.config)
    stats = JsonStatsStore(args.stats)
    state = AppState(config.palette)
    size = (max(1, args.width), max(1, args.height))
    logger.info("Starting %dx%d viewport; stats in %s", size[0], size[1], args.stats)

    renderer = PygameRenderer(state, stats, config, size=size)

    # Start Pygame renderer thread
    renderer.start()

    UI(state, stats)

    # Run Dear PyGui event loop
    try:
        dpg.start_dearpygui()
    finally:
        state.running = False
        renderer.running = False
        renderer.join(timeout=2.0)
        dpg.destroy_context()
        stats.save()


if __name__ == "__main__":
    main()
