#!/usr/bin/env python3
"""
The three-body simulation state machine.

A Simulation owns exactly three bodies and a tracking camera. Each call to step()
runs one frame:

1) force phase over every live pair (positions from the start of the step)
2) advance every body once
3) divergence check: if the live bodies' bounding box outgrows the viewport-derived
   limit, the run ends and the simulation reinitializes on the spot
4) camera follow towards the bounding-box center (skipped right after a reset)

Runs never end with an error. A run ends either by divergence or by an explicit
request_reset(); both produce a RunEnded event carrying the run's duration, measured
from the last (re)initialization with the injected clock.

Threading
- Not thread-safe. A single driver owns the instance and only reads body state for
  drawing after step() returns, so a half-reset state is never observable.
"""
import logging
import math
import random
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .bounding_box import BoundingBox, compute_bounding_box
from .camera import Camera2D
from .config import SimConfig
from .data_models import Body
from .physics import PairwiseGravity
from .vector_utils import vec_from_polar, vec_random, vec_scale, vec_sub

logger = logging.getLogger(__name__)

REASON_DIVERGED = "diverged"
REASON_USER = "user"


@dataclass(frozen=True)
class RunEnded:
    duration_seconds: float
    reason: str = REASON_DIVERGED


class Simulation:
    def __init__(self, width: float, height: float, config: Optional[SimConfig] = None,
                 rng: Optional[random.Random] = None, clock: Callable[[], float] = time.monotonic,
                 on_run_ended: Optional[Callable[[RunEnded], None]] = None):
        self.config = config or SimConfig()
        self.rng = rng or random.Random()
        self.clock = clock
        self.on_run_ended = on_run_ended
        self.physics = PairwiseGravity(
            gravity=self.config.gravity,
            min_distance=self.config.min_distance,
            force_cap=self.config.force_cap,
            damping=self.config.force_damping,
        )
        self.palette = list(self.config.palette)
        self.bodies: List[Body] = []
        self.camera = Camera2D()
        self.width = self.height = 0.0
        self.run_started = 0.0
        self.initialize(width, height)

    @property
    def divergence_limit(self) -> float:
        return min(self.width, self.height) * self.config.divergence_multiplier

    def initialize(self, width: float, height: float) -> None:
        """Replace all bodies with a fresh random set and reset the camera."""
        cfg = self.config
        self.width = max(float(width), cfg.min_viewport_size)
        self.height = max(float(height), cfg.min_viewport_size)
        self.bodies = [self._spawn_body(self.palette[i % len(self.palette)]) for i in range(cfg.body_count)]
        self.camera = Camera2D(position=(0.0, 0.0), zoom=cfg.initial_zoom, ease=cfg.camera_ease)
        self.camera.set_viewport_size(int(self.width), int(self.height))
        self.run_started = self.clock()
        logger.debug("Initialized %d bodies in %.0fx%.0f viewport",
                     len(self.bodies), self.width, self.height)

    def set_bounds(self, width: float, height: float) -> None:
        """Change the viewport size used for the divergence limit and later spawns."""
        self.width = max(float(width), self.config.min_viewport_size)
        self.height = max(float(height), self.config.min_viewport_size)
        self.camera.set_viewport_size(int(self.width), int(self.height))

    def _spawn_body(self, color) -> Body:
        cfg = self.config
        rng = self.rng
        position = vec_scale(vec_sub(vec_random(rng), (0.5, 0.5)), (self.width, self.height))
        lo, hi = cfg.mass_range
        mass = lo + rng.random() * (hi - lo)
        lo, hi = cfg.speed_range
        speed = (lo + rng.random() * (hi - lo)) * cfg.speed_scale
        theta = rng.random() * 2.0 * math.pi
        return Body(mass=mass, position=position, velocity=vec_from_polar(speed, theta),
                    color=color, trail=deque(maxlen=cfg.trail_capacity))

    def live_bodies(self) -> List[Body]:
        return [b for b in self.bodies if not b.dead]

    def bounding_box(self) -> Optional[BoundingBox]:
        live = self.live_bodies()
        if not live:
            return None
        return compute_bounding_box(b.position for b in live)

    def elapsed(self) -> float:
        return self.clock() - self.run_started

    def step(self) -> Optional[RunEnded]:
        """Advance one frame. Returns the RunEnded event if this step reset the run."""
        self.physics.apply_forces(self.bodies)
        for body in self.bodies:
            body.advance()

        box = self.bounding_box()
        if box is None:
            return None
        limit = self.divergence_limit
        if box.width > limit or box.height > limit:
            return self._end_run(REASON_DIVERGED)

        self.camera.follow(box.center)
        return None

    def request_reset(self) -> RunEnded:
        """End the current run on user request and start a new one immediately."""
        return self._end_run(REASON_USER)

    def set_palette(self, colors: Sequence) -> None:
        """Recolor the bodies; the new colors also apply to every later run."""
        for i, color in enumerate(colors[:len(self.palette)]):
            self.palette[i] = tuple(color)
        for i, body in enumerate(self.bodies):
            body.color = self.palette[i % len(self.palette)]

    def _end_run(self, reason: str) -> RunEnded:
        """
        Capture the duration, reinitialize, then notify on_run_ended.

        Listeners therefore run with the next run already in place.
        """
        event = RunEnded(duration_seconds=self.elapsed(), reason=reason)
        logger.info("Run ended (%s) after %.2fs", reason, event.duration_seconds)
        self.initialize(self.width, self.height)
        if self.on_run_ended is not None:
            self.on_run_ended(event)
        return event
