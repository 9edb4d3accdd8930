#!/usr/bin/env python3
"""
Axis-aligned bounding box over a set of positions.

Used by the simulation for divergence detection and camera targeting.
"""
from dataclasses import dataclass
from typing import Iterable

from .vector_utils import Vec2


@dataclass(frozen=True)
class BoundingBox:
    left: float
    right: float
    top: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Vec2:
        return ((self.left + self.right) / 2, (self.top + self.bottom) / 2)


def compute_bounding_box(positions: Iterable[Vec2]) -> BoundingBox:
    """
    Return the extent of the given positions.

    Raises ValueError for an empty input; there is no meaningful box to return.
    """
    pts = list(positions)
    if not pts:
        raise ValueError("cannot compute a bounding box of no positions")
    xs = [p[0] for p in pts]
    ys = [p[1] for p in pts]
    return BoundingBox(left=min(xs), right=max(xs), top=min(ys), bottom=max(ys))
