# MIT License (see LICENSE)
"""
Core type definitions for the agent simulation.

Defines the fundamental data structures:
- Triangle: the agent's shape, an apex plus two base vertices.
- Agent: the controllable body with velocity, acceleration and damping.

Per-frame motion follows a damped semi-implicit Euler scheme:
  v ← v + a
  x ← x + v        (every vertex)
  v ← clamp(v) · k_v
  a ← a · k_a
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .constants import (
    ACCELERATION_DAMPING,
    DEFAULT_VERTICES,
    MAX_SPEED,
    VELOCITY_DAMPING,
)
from .util import add, angle_to_axis, f64, magnitude, midpoint, subtract


# =============================================================================
# Shape
# =============================================================================

@dataclass(frozen=True)
class Triangle:
    """
    Three-vertex agent shape in simulation space.

    Attributes:
        vertices: Read-only array [3, 2] ordered (apex, base_left, base_right).
                  The apex is the leading point; the base vertices trail it
                  and start symmetric about the apex→base-midpoint axis.

    Only position and orientation change from frame to frame; side lengths
    are preserved by translation and by rotation about the apex.
    """
    vertices: np.ndarray

    def __post_init__(self) -> None:
        """Store vertices as a read-only float64 [3, 2] array."""
        verts = f64(self.vertices)
        if verts.shape != (3, 2):
            raise ValueError(f"Triangle needs exactly 3 2D vertices, got shape {verts.shape}")
        object.__setattr__(self, "vertices", verts)

    @property
    def apex(self) -> np.ndarray:
        return self.vertices[0]

    @property
    def base(self) -> tuple[np.ndarray, np.ndarray]:
        return self.vertices[1], self.vertices[2]

    @property
    def base_mid(self) -> np.ndarray:
        """Midpoint of the two base vertices."""
        return midpoint(self.vertices[1], self.vertices[2])

    @property
    def side_lengths(self) -> tuple[float, float, float]:
        """Lengths of edges (apex→left, left→right, right→apex)."""
        a, b, c = self.vertices
        return (
            magnitude(subtract(b, a)),
            magnitude(subtract(c, b)),
            magnitude(subtract(a, c)),
        )

    def translated(self, d: np.ndarray) -> "Triangle":
        """Return a copy with every vertex moved by d."""
        return Triangle(np.array([add(p, d) for p in self.vertices]))

    def with_base(self, left: np.ndarray, right: np.ndarray) -> "Triangle":
        """Return a copy with the same apex and new base vertices."""
        return Triangle(np.array([self.apex, left, right]))


# =============================================================================
# Agent
# =============================================================================

@dataclass
class Agent:
    """
    The controllable triangle with its kinematic state.

    Attributes:
        shape: Current Triangle in simulation space.
        velocity: Per-frame displacement [vx, vy].
        acceleration: Per-frame change in velocity [ax, ay].
        velocity_damping: Fraction of velocity kept each frame, in (0, 1].
        acceleration_damping: Fraction of acceleration kept each frame, in (0, 1].
        max_speed: Per-axis velocity cap [sx, sy], both > 0.

    Note:
        velocity, acceleration and max_speed are read-only arrays. Updates
        replace them, so arrays handed out earlier stay valid snapshots.
    """
    shape: Triangle = field(default_factory=lambda: Triangle(DEFAULT_VERTICES))
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    acceleration: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity_damping: float = VELOCITY_DAMPING
    acceleration_damping: float = ACCELERATION_DAMPING
    max_speed: np.ndarray | tuple[float, float] = MAX_SPEED

    def __post_init__(self) -> None:
        """Validate coefficients and convert vectors to float64 arrays."""
        if not isinstance(self.shape, Triangle):
            self.shape = Triangle(self.shape)
        self.velocity = f64(self.velocity)
        self.acceleration = f64(self.acceleration)
        self.max_speed = f64(self.max_speed)

        for name in ("velocity_damping", "acceleration_damping"):
            k = getattr(self, name)
            if not 0.0 < k <= 1.0:
                raise ValueError(f"{name} must be in (0, 1], got {k}")
        if self.max_speed.shape != (2,) or np.any(self.max_speed <= 0):
            raise ValueError(f"max_speed must be two positive numbers, got {self.max_speed}")

    @property
    def vertices(self) -> np.ndarray:
        return self.shape.vertices

    @property
    def apex(self) -> np.ndarray:
        return self.shape.apex

    @property
    def speed(self) -> float:
        return magnitude(self.velocity)

    @property
    def heading(self) -> float:
        """Direction of travel in [0, 2π); 0 when stationary."""
        return angle_to_axis(self.velocity)

    def apply_impulse(self, delta: np.ndarray | tuple[float, float]) -> None:
        """Add delta to the current acceleration."""
        self.acceleration = add(self.acceleration, f64(delta))
