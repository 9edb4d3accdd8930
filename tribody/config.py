#!/usr/bin/env python3
"""
Simulation configuration.

SimConfig collects every tuning value the simulation and driver use. Defaults come
from constants.py; a JSON file may override any subset of them:

{
  "trail_capacity": 120,
  "gravity": 0.5,
  "camera_ease": 0.99,
  "palette": ["#ffb000", [0, 220, 255], "#ffffff"]
}

Degenerate values are clamped rather than rejected so a bad file can't stop the
simulation from running.
"""
import logging
from dataclasses import dataclass, field, fields, replace
from typing import Optional, Tuple

from . import constants as C
from .utils import coerce_color, read_json
from .vector_utils import clamp

logger = logging.getLogger(__name__)


@dataclass
class SimConfig:
    body_count: int = C.BODY_COUNT
    trail_capacity: int = C.TRAIL_CAPACITY
    gravity: float = C.G
    min_distance: float = C.MIN_DISTANCE
    force_cap: float = C.FORCE_CAP
    force_damping: float = C.FORCE_DAMPING
    divergence_multiplier: float = C.DIVERGENCE_MULTIPLIER
    camera_ease: float = C.CAMERA_EASE
    initial_zoom: float = C.INITIAL_ZOOM
    mass_range: Tuple[float, float] = C.MASS_RANGE
    speed_range: Tuple[float, float] = C.SPEED_RANGE
    speed_scale: float = C.SPEED_SCALE
    min_viewport_size: float = C.MIN_VIEWPORT_SIZE
    step_rate: int = C.STEP_RATE
    max_substeps: int = C.MAX_SUBSTEPS
    palette: Tuple[Tuple[int, int, int], ...] = field(default_factory=lambda: C.DEFAULT_PALETTE)

    def __post_init__(self):
        if self.body_count != C.BODY_COUNT:
            logger.warning("body_count is fixed at %d; ignoring %r", C.BODY_COUNT, self.body_count)
            self.body_count = C.BODY_COUNT
        self.trail_capacity = max(1, int(self.trail_capacity))
        self.min_distance = max(1e-6, float(self.min_distance))
        self.force_cap = max(0.0, float(self.force_cap))
        self.camera_ease = clamp(float(self.camera_ease), 0.0, 1.0)
        self.initial_zoom = max(1e-3, float(self.initial_zoom))
        self.min_viewport_size = max(1e-6, float(self.min_viewport_size))
        self.divergence_multiplier = max(1e-6, float(self.divergence_multiplier))
        self.step_rate = max(1, int(self.step_rate))
        self.max_substeps = max(1, int(self.max_substeps))
        self.mass_range = _ordered_pair(self.mass_range, C.MASS_RANGE)
        if self.mass_range[0] <= 0:
            self.mass_range = C.MASS_RANGE
        self.speed_range = _ordered_pair(self.speed_range, C.SPEED_RANGE)
        palette = tuple(coerce_color(c) for c in self.palette)
        self.palette = palette or C.DEFAULT_PALETTE

    @property
    def step_interval(self) -> float:
        return 1.0 / self.step_rate


def _ordered_pair(value, default):
    try:
        lo, hi = float(value[0]), float(value[1])
    except (TypeError, ValueError, IndexError):
        return default
    return (lo, hi) if lo <= hi else (hi, lo)


def config_from_dict(data: dict, base: Optional[SimConfig] = None) -> SimConfig:
    """Return base (or the defaults) with the known keys in data overriding it."""
    base = base or SimConfig()
    known = {f.name for f in fields(SimConfig)}
    overrides = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Unknown config key %r ignored", key)
            continue
        overrides[key] = value
    try:
        return replace(base, **overrides)
    except (TypeError, ValueError, OverflowError) as exc:
        logger.warning("Invalid config values %r: %s; using defaults", overrides, exc)
        return base


def load_config(path: Optional[str]) -> SimConfig:
    """Load overrides from a JSON file; missing or unreadable files give the defaults."""
    if not path:
        return SimConfig()
    data = read_json(path)
    if data is None:
        return SimConfig()
    logger.info("Loaded config from %s", path)
    return config_from_dict(data)
