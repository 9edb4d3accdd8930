#!/usr/bin/env python3
"""
Shared constants for the three-body simulator (arbitrary world units).

Keeping constants in one place helps ensure values are consistent across the
codebase and makes tuning easier. SimConfig copies these as its defaults.
"""
# Physics controls
BODY_COUNT = 3
G = 0.4  # scaled gravitational constant
MIN_DISTANCE = 10.0  # separation floor used in force computation
FORCE_CAP = 10000.0  # applied before damping
FORCE_DAMPING = 0.25

# Initial conditions
MASS_RANGE = (20.0, 60.0)
SPEED_RANGE = (0.1, 1.1)
SPEED_SCALE = 0.25

# Divergence: reset once the bodies span more than this times the short viewport side
DIVERGENCE_MULTIPLIER = 1.6
MIN_VIEWPORT_SIZE = 1.0

# Camera
CAMERA_EASE = 0.995  # per step, tuned for STEP_RATE
INITIAL_ZOOM = 0.875

# Stepping
STEP_RATE = 60  # simulation steps per second
MAX_SUBSTEPS = 5  # cap per frame so a stalled window doesn't fast-forward

# Trails
TRAIL_CAPACITY = 60

# Rendering (viewport)
VIEW_WIDTH = 1100
VIEW_HEIGHT = 800
BACKGROUND_COLOR = (8, 8, 12)
HUD_COLOR = (200, 200, 200)
MIN_BODY_PIXELS = 2.0
GLOW_SCALE = 4.0  # glow radius as a multiple of the core radius

# Default palette: amber, cyan, white
AMBER = (255, 176, 0)
CYAN = (0, 220, 255)
WHITE = (255, 255, 255)
DEFAULT_PALETTE = (AMBER, CYAN, WHITE)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
