# MIT License (see LICENSE)
"""
Vector math for the 2D agent simulation.

All functions operate on 2D vectors represented as float64 numpy arrays of
shape (2,). They are pure: every operation returns a new array and never
writes to its inputs, so rotation and translation chains compose safely.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

TWO_PI: float = 2.0 * np.pi


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a read-only float64 numpy array.

    Allows tuple/list inputs anywhere a vector is expected. The result is
    always a fresh copy, so freezing it never affects the caller's array.
    """
    v = np.array(x, dtype=np.float64)
    v.setflags(write=False)
    return v


def vec2(x: float, y: float) -> np.ndarray:
    """Build a read-only 2D vector."""
    return f64([x, y])


def magnitude(v: np.ndarray) -> float:
    """Euclidean length of a 2D vector."""
    return float(np.sqrt(v[0] * v[0] + v[1] * v[1]))


def normalize(v: np.ndarray) -> np.ndarray:
    """
    Return a unit vector in the same direction as v.

    Raises:
        ZeroDivisionError: If v has zero length. Unlike the angle helpers,
            there is no sensible direction to fall back to here.
    """
    n = magnitude(v)
    if n == 0.0:
        raise ZeroDivisionError("Cannot normalize a zero-length vector")
    return f64([v[0] / n, v[1] / n])


def dot(v1: np.ndarray, v2: np.ndarray) -> float:
    """Dot product of two 2D vectors."""
    return float(v1[0] * v2[0] + v1[1] * v2[1])


def angle_to_axis(v: np.ndarray) -> float:
    """
    Angle of v measured counterclockwise from the +x axis, in [0, 2π).

    The zero vector has no direction; it maps to 0 so that a stationary
    agent never produces NaN downstream.
    """
    n = magnitude(v)
    if n == 0.0:
        return 0.0
    # acos is only defined on [-1, 1]; x/|v| can overshoot by an ulp
    theta = float(np.arccos(np.clip(v[0] / n, -1.0, 1.0)))
    if v[1] < 0:
        theta = TWO_PI - theta
    return theta


def angle_between(v1: np.ndarray, v2: np.ndarray) -> float:
    """
    Signed angle from v1 to v2, in (-π, π].

    Positive means v2 is counterclockwise from v1. Returns 0 if either
    vector has zero length.
    """
    if magnitude(v1) == 0.0 or magnitude(v2) == 0.0:
        return 0.0
    angle = float(np.arctan2(v2[1], v2[0]) - np.arctan2(v1[1], v1[0]))
    if angle > np.pi:
        angle -= TWO_PI
    elif angle <= -np.pi:
        angle += TWO_PI
    return angle


def angle_between_points(origin: np.ndarray, p2: np.ndarray, p3: np.ndarray) -> float:
    """Signed angle at `origin` from the ray origin→p2 to the ray origin→p3."""
    return angle_between(subtract(p2, origin), subtract(p3, origin))


def add(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    return f64([v1[0] + v2[0], v1[1] + v2[1]])


def subtract(v1: np.ndarray, v2: np.ndarray) -> np.ndarray:
    return f64([v1[0] - v2[0], v1[1] - v2[1]])


def scale(v: np.ndarray, k: float) -> np.ndarray:
    return f64([k * v[0], k * v[1]])


def midpoint(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return f64([(a[0] + b[0]) / 2, (a[1] + b[1]) / 2])


def clamp(v: np.ndarray, limit: np.ndarray | Sequence[float]) -> np.ndarray:
    """
    Clip each axis of v independently to [-limit, limit].

    This is a per-axis box, not a circular cap: (3, 3) clamped to (2, 2)
    becomes (2, 2), whose length exceeds 2. Values exactly on the bound
    pass through unchanged.
    """
    lx, ly = float(limit[0]), float(limit[1])
    return f64([min(max(v[0], -lx), lx), min(max(v[1], -ly), ly)])


def rotation_matrix(theta: float) -> np.ndarray:
    """2×2 counterclockwise rotation matrix."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]], dtype=np.float64)


def apply_linear_transform(p: np.ndarray, matrix) -> np.ndarray:
    """
    Apply a 2×2 linear map to a point.

    Args:
        p: Point [x, y].
        matrix: Either a (2, 2) array or a flat (a11, a12, a21, a22) sequence.
    """
    a11, a12, a21, a22 = np.asarray(matrix, dtype=np.float64).reshape(4)
    x, y = p[0], p[1]
    return f64([a11 * x + a12 * y, a21 * x + a22 * y])


def rotate(p: np.ndarray, theta: float) -> np.ndarray:
    """Rotate a point about the origin by theta radians (CCW)."""
    return apply_linear_transform(p, rotation_matrix(theta))


def translate(p: np.ndarray, t: np.ndarray) -> np.ndarray:
    return add(p, t)


def rotate_about_point(center: np.ndarray, p: np.ndarray, theta: float) -> np.ndarray:
    """
    Rotate p about `center` by theta radians (CCW).

    p_rot = center + R(θ)·(p - center)
    """
    return translate(rotate(subtract(p, center), theta), center)


def polar_point(origin: np.ndarray, length: float, theta: float) -> np.ndarray:
    """End point of a ray of `length` leaving `origin` at angle theta."""
    return translate(rotate(f64([length, 0.0]), theta), origin)


def polar_triangle(
    centroid: np.ndarray,
    base_length: float,
    height: float,
    theta: float = 0.0,
) -> np.ndarray:
    """
    Vertices of an isosceles triangle placed around its centroid.

    At theta = 0 the apex points along +y, 2/3 of the height above the
    centroid, and the base sits 1/3 of the height below it. The whole
    shape is then rotated by theta about the centroid.

    Returns:
        Array [3, 2] ordered (apex, base_right, base_left).
    """
    local = (
        (0.0, (2.0 / 3.0) * height),
        (base_length / 2.0, -(1.0 / 3.0) * height),
        (-base_length / 2.0, -(1.0 / 3.0) * height),
    )
    return np.array(
        [translate(rotate(f64(p), theta), centroid) for p in local],
        dtype=np.float64,
    )
