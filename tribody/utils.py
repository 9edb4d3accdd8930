#!/usr/bin/env python3
"""
General utilities for the three-body simulator.
"""
import json
import logging
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def try_float(val) -> Optional[float]:
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def read_json(path: str) -> Optional[dict]:
    """Load a JSON object from path, or None (with a warning) if that fails."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("No file at %s", path)
        return None
    except (OSError, ValueError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object, got %s", path, type(data).__name__)
        return None
    return data


def coerce_color(c: Union[str, Sequence[float]], default: Color = (255, 255, 255)) -> Color:
    """
    Accept "#rrggbb" strings or RGB(A) sequences, clamped to 0..255.

    Dear PyGui color pickers hand back RGBA lists; config files may use either form.
    """
    try:
        if isinstance(c, str):
            s = c.lstrip("#")
            if len(s) != 6:
                raise ValueError(c)
            return (int(s[0:2], 16), int(s[2:4], 16), int(s[4:6], 16))
        r, g, b = int(c[0]), int(c[1]), int(c[2])
    except (TypeError, ValueError, IndexError):
        return default
    return (max(0, min(255, r)), max(0, min(255, g)), max(0, min(255, b)))


def format_duration(seconds: float) -> str:
    """Render seconds as m:ss.s for the HUD and stats panel."""
    seconds = max(0.0, seconds)
    minutes, rest = divmod(seconds, 60.0)
    return f"{int(minutes)}:{rest:04.1f}"
