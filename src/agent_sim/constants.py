# MIT License (see LICENSE)
"""
Tuning constants for the agent simulation.

Units are simulation-space units per frame; there is no wall-clock dt.
"""
from __future__ import annotations

# Fraction of velocity kept after each frame. Acts as drag: with no input
# the speed decays as VELOCITY_DAMPING**n.
VELOCITY_DAMPING: float = 0.9925

# Fraction of acceleration kept after each frame. Much smaller than the
# velocity damping so a key press is a short nudge, not constant thrust.
ACCELERATION_DAMPING: float = 0.75

# Per-axis velocity cap (a box, not a circle).
MAX_SPEED: tuple[float, float] = (2.0, 2.0)

# Acceleration added to one axis by a single arrow-key press.
KEY_IMPULSE: float = 0.045

# Length multiplier for the velocity probe/ray: a point |v| * PROBE_SCALE
# ahead of the apex. Used for orientation and for drawing the velocity ray.
PROBE_SCALE: float = 100.0

# Starting triangle: apex at the origin pointing +y, base 80 wide, 100 tall.
DEFAULT_VERTICES: tuple[tuple[float, float], ...] = (
    (0.0, 0.0),
    (40.0, -100.0),
    (-40.0, -100.0),
)
