#!/usr/bin/env python3
"""
Vector helper functions for 2D operations.

Vectors are plain (x, y) tuples; every function returns a new tuple.
"""
import math
import random
from typing import Optional, Tuple, Union

Vec2 = Tuple[float, float]


def clamp(x: float, a: float, b: float) -> float:
    """Clamp x to the inclusive range [a, b]."""
    return max(a, min(b, x))


def vec_zero() -> Vec2:
    return (0.0, 0.0)


def vec_add(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] + b[0], a[1] + b[1])


def vec_sub(a: Vec2, b: Vec2) -> Vec2:
    return (a[0] - b[0], a[1] - b[1])


def vec_scale(a: Vec2, s: Union[float, Vec2]) -> Vec2:
    """Multiply by a scalar, or componentwise when s is itself a vector."""
    if isinstance(s, (tuple, list)):
        return (a[0] * s[0], a[1] * s[1])
    return (a[0] * s, a[1] * s)


def vec_len(a: Vec2) -> float:
    return math.hypot(a[0], a[1])


def vec_from_polar(r: float, theta: float) -> Vec2:
    return (r * math.cos(theta), r * math.sin(theta))


def vec_random(rng: Optional[random.Random] = None) -> Vec2:
    """Uniform sample in [0, 1) x [0, 1)."""
    rng = rng or random
    return (rng.random(), rng.random())
