# MIT License (see LICENSE)
"""
Reorientation of the agent triangle toward its direction of travel.

After each translation the two base vertices are swung about the apex so
that the apex→base-midpoint axis points directly away from the velocity,
i.e. the apex leads.

The measurement uses a probe point far ahead of the apex along the
velocity:
    probe = apex + scale·|v|·(cos φ, sin φ),   φ = angle_to_axis(v)
    α     = angle_between_points(apex, base_mid, probe)
    rot   = α + π   (or 0 when α == 0)

Rotating the base by α would point it at the probe; the extra π turns it
to the opposite side. α == 0 is treated as "no rotation" so a stationary
agent keeps its orientation instead of flipping by π every frame. The same
rule also holds the shape still when v points exactly from the apex toward
the base midpoint.
"""
from __future__ import annotations

import numpy as np

from ..constants import PROBE_SCALE
from ..types import Triangle
from ..util import angle_between_points, angle_to_axis, magnitude, polar_point, rotate_about_point


def heading_probe(apex: np.ndarray, velocity: np.ndarray, scale: float = PROBE_SCALE) -> np.ndarray:
    """
    Point `scale·|v|` ahead of the apex along the velocity direction.

    Only used to measure orientation; it is never drawn.
    """
    return polar_point(apex, scale * magnitude(velocity), angle_to_axis(velocity))


def reorientation_angle(triangle: Triangle, velocity: np.ndarray, scale: float = PROBE_SCALE) -> float:
    """
    Rotation (radians, CCW) to apply to the base so the apex faces `velocity`.

    Returns 0 when the velocity is zero.
    """
    probe = heading_probe(triangle.apex, velocity, scale)
    angle = angle_between_points(triangle.apex, triangle.base_mid, probe)
    if angle == 0.0:
        return 0.0
    return angle + np.pi


def reorient(triangle: Triangle, velocity: np.ndarray, scale: float = PROBE_SCALE) -> Triangle:
    """
    Return a new triangle with its base rotated about the apex to trail `velocity`.

    The apex does not move, and side lengths are preserved.
    """
    theta = reorientation_angle(triangle, velocity, scale)
    if theta == 0.0:
        return triangle
    apex = triangle.apex
    left, right = triangle.base
    return triangle.with_base(
        rotate_about_point(apex, left, theta),
        rotate_about_point(apex, right, theta),
    )
