import numpy as np
import pytest
from agent_sim.util import (
    vec2, f64, magnitude, normalize, dot, angle_to_axis, angle_between,
    angle_between_points, add, scale, clamp, rotate_about_point,
    apply_linear_transform, rotation_matrix, polar_point, polar_triangle,
)

SAMPLES = [(3.0, 4.0), (-1.5, 2.0), (0.0, -7.0), (1e-3, 1e-3), (-250.0, -80.0)]


def test_magnitude():
    assert magnitude(vec2(0, 0)) == 0.0
    assert magnitude(vec2(3, 4)) == pytest.approx(5.0)
    for v in SAMPLES:
        assert magnitude(f64(v)) >= 0.0


def test_normalize_unit_length():
    for v in SAMPLES:
        assert magnitude(normalize(f64(v))) == pytest.approx(1.0, abs=1e-12)
    assert normalize(vec2(0, 5)) == pytest.approx([0.0, 1.0])


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(vec2(0, 0))


def test_dot():
    assert dot(vec2(1, 2), vec2(3, 4)) == pytest.approx(11.0)
    assert dot(vec2(1, 0), vec2(0, 1)) == 0.0


def test_angle_to_axis():
    assert angle_to_axis(vec2(0, 0)) == 0.0
    assert angle_to_axis(vec2(1, 0)) == 0.0
    assert angle_to_axis(vec2(0, 1)) == pytest.approx(0.5 * np.pi)
    assert angle_to_axis(vec2(-1, 0)) == pytest.approx(np.pi)
    assert angle_to_axis(vec2(0, -1)) == pytest.approx(1.5 * np.pi)
    assert angle_to_axis(vec2(1, -1)) == pytest.approx(1.75 * np.pi)


def test_angle_to_axis_range():
    for v in SAMPLES:
        theta = angle_to_axis(f64(v))
        assert 0.0 <= theta < 2 * np.pi


def test_angle_between_self_and_zero():
    for v in SAMPLES:
        assert angle_between(f64(v), f64(v)) == 0.0
    assert angle_between(vec2(0, 0), vec2(1, 0)) == 0.0
    assert angle_between(vec2(1, 0), vec2(0, 0)) == 0.0


def test_angle_between_signed_and_wrapped():
    assert angle_between(vec2(1, 0), vec2(0, 1)) == pytest.approx(0.5 * np.pi)
    assert angle_between(vec2(0, 1), vec2(1, 0)) == pytest.approx(-0.5 * np.pi)
    # Raw atan2 difference here is about -1.5π; wrapped it is +π/2
    assert angle_between(vec2(-1, 0.01), vec2(-0.01, -1)) == pytest.approx(0.5 * np.pi, abs=0.03)
    # Straight opposite lands on +π, never -π
    assert angle_between(vec2(0, -1), vec2(0, 1)) == pytest.approx(np.pi)


def test_angle_between_antisymmetric():
    vs = [f64(v) for v in SAMPLES]
    for a in vs:
        for b in vs:
            ab = angle_between(a, b)
            if abs(abs(ab) - np.pi) < 1e-9:
                continue
            assert ab == pytest.approx(-angle_between(b, a), abs=1e-12)
            assert -np.pi < ab <= np.pi


def test_angle_between_points():
    origin = vec2(10, 10)
    assert angle_between_points(origin, vec2(11, 10), vec2(10, 11)) == pytest.approx(0.5 * np.pi)
    assert angle_between_points(origin, origin, vec2(10, 11)) == 0.0


def test_add_and_scale_do_not_mutate():
    a = f64([1.0, 2.0])
    b = f64([3.0, -1.0])
    assert add(a, b) == pytest.approx([4.0, 1.0])
    assert scale(a, 0.5) == pytest.approx([0.5, 1.0])
    assert a.tolist() == [1.0, 2.0]
    assert b.tolist() == [3.0, -1.0]


def test_vec2_is_read_only():
    v = vec2(1, 2)
    with pytest.raises(ValueError):
        v[0] = 5.0


def test_clamp():
    limit = (2.0, 2.0)
    assert clamp(vec2(1.0, -1.5), limit) == pytest.approx([1.0, -1.5])
    assert clamp(vec2(2.0, -2.0), limit) == pytest.approx([2.0, -2.0])
    assert clamp(vec2(3.0, -5.0), limit) == pytest.approx([2.0, -2.0])
    # per-axis, not scaled
    assert clamp(vec2(10.0, 0.5), limit) == pytest.approx([2.0, 0.5])
    assert clamp(vec2(-3.0, 9.0), (1.0, 4.0)) == pytest.approx([-1.0, 4.0])


def test_clamp_idempotent():
    for v in SAMPLES:
        once = clamp(f64(v), (2.0, 3.0))
        assert np.array_equal(clamp(once, (2.0, 3.0)), once)


def test_rotate_about_point_quarter_turn():
    p = rotate_about_point(vec2(1, 1), vec2(2, 1), 0.5 * np.pi)
    assert p == pytest.approx([1.0, 2.0])


def test_rotate_about_point_preserves_distance():
    c = vec2(-3.0, 7.5)
    for v in SAMPLES:
        p = f64(v)
        for theta in (0.1, 1.0, np.pi, -2.3, 7.0):
            r = rotate_about_point(c, p, theta)
            assert magnitude(r - c) == pytest.approx(magnitude(p - c), rel=1e-12, abs=1e-9)


def test_apply_linear_transform_forms():
    p = vec2(2, 3)
    assert apply_linear_transform(p, (1, 0, 0, 1)) == pytest.approx([2.0, 3.0])
    assert apply_linear_transform(p, [[0, -1], [1, 0]]) == pytest.approx([-3.0, 2.0])
    assert apply_linear_transform(p, rotation_matrix(np.pi)) == pytest.approx([-2.0, -3.0])


def test_polar_point():
    assert polar_point(vec2(1, 1), 2.0, 0.0) == pytest.approx([3.0, 1.0])
    assert polar_point(vec2(1, 1), 2.0, 0.5 * np.pi) == pytest.approx([1.0, 3.0])


def test_polar_triangle():
    verts = polar_triangle(vec2(0, 0), base_length=80.0, height=90.0)
    assert verts[0] == pytest.approx([0.0, 60.0])
    assert verts[1] == pytest.approx([40.0, -30.0])
    assert verts[2] == pytest.approx([-40.0, -30.0])
    # Centroid stays put when rotated
    rotated = polar_triangle(vec2(5, -5), 80.0, 90.0, theta=1.2)
    assert rotated.mean(axis=0) == pytest.approx([5.0, -5.0])
