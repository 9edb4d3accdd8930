#!/usr/bin/env python3
"""
Data models for the three-body simulator.

This module defines the Body dataclass shared between physics and rendering.

Units and usage
- position and velocity are in world units (per step for velocity); mass is unitless.
- trail stores past positions for motion streaks, newest first. It is a bounded deque,
  so appending past capacity silently drops the oldest sample.
- Bodies are owned by a Simulation and only mutated from the thread that steps it.
"""
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple

from .constants import MIN_BODY_PIXELS, TRAIL_CAPACITY, WHITE
from .vector_utils import Vec2, vec_add


@dataclass
class Body:
    """
    A point mass in the simulation.

    Fields:
    - mass: fixed at creation
    - position: 2D position (x, y)
    - velocity: 2D displacement applied per step
    - color: RGB tuple; assigned by whoever draws the body
    - trail: deque of past positions, most recent at index 0
    - dead: dead bodies stay in the list but stop moving and recording trail
    """
    mass: float
    position: Vec2
    velocity: Vec2
    color: Tuple[int, int, int] = WHITE
    trail: Deque[Vec2] = field(default_factory=lambda: deque(maxlen=TRAIL_CAPACITY))
    dead: bool = False

    def apply_force(self, force: Vec2) -> None:
        self.velocity = vec_add(self.velocity, force)

    def advance(self) -> None:
        """Record the current position in the trail, then move by one velocity step."""
        if self.dead:
            return
        self.trail.appendleft(self.position)
        self.position = vec_add(self.position, self.velocity)

    def visual_radius(self, zoom: float, min_pixels: float = MIN_BODY_PIXELS) -> float:
        """Radius in world units, never smaller than min_pixels on screen."""
        return max(math.sqrt(self.mass), min_pixels / zoom)

    def trail_oldest_first(self) -> List[Vec2]:
        return list(reversed(self.trail))
