#!/usr/bin/env python3
"""
Camera utilities: eased tracking and 2D world-to-screen transforms.
"""
from typing import Tuple

from .constants import CAMERA_EASE, INITIAL_ZOOM, VIEW_HEIGHT, VIEW_WIDTH
from .vector_utils import Vec2, vec_add, vec_scale


def ease_for_interval(ease: float, dt: float, reference_dt: float) -> float:
    """
    Convert a per-step ease factor tuned for reference_dt to one for dt.

    Applying the result once over dt settles exactly as much as applying
    `ease` repeatedly over the same span of reference steps.
    """
    if reference_dt <= 0:
        return ease
    return ease ** (dt / reference_dt)


class Camera2D:
    """
    2D camera that follows a target with exponential smoothing.

    position is the world point shown at the viewport center; zoom is pixels per
    world unit.
    """

    def __init__(self, position=(0.0, 0.0), zoom=INITIAL_ZOOM, ease=CAMERA_EASE):
        self.position: Vec2 = (float(position[0]), float(position[1]))
        self.zoom = zoom
        self.ease = ease
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    def follow(self, target: Vec2) -> None:
        """Move a (1 - ease) fraction of the way towards target."""
        self.position = vec_add(vec_scale(self.position, self.ease), vec_scale(target, 1.0 - self.ease))

    def world_to_screen(self, pos: Vec2) -> Tuple[int, int]:
        cx, cy = self.position
        px = (pos[0] - cx) * self.zoom + self.viewport_size[0] / 2
        py = (pos[1] - cy) * self.zoom + self.viewport_size[1] / 2
        return (int(px), int(py))

    def screen_to_world(self, screen: Tuple[int, int]) -> Vec2:
        cx, cy = self.position
        wx = (screen[0] - self.viewport_size[0] / 2) / self.zoom + cx
        wy = (screen[1] - self.viewport_size[1] / 2) / self.zoom + cy
        return (wx, wy)
