"""Tests for the rotation quaternion."""

from __future__ import annotations

import math

import numpy as np
import pytest

from orrery_ephemeris.quaternion import Quaternion, nlerp, slerp


def test_rotate_x_quarter_turn() -> None:
    """A quarter turn about +X takes +Y to +Z."""
    v = Quaternion.rotate_x(0.5 * math.pi).rotate((0.0, 1.0, 0.0))
    assert np.allclose(v, [0.0, 0.0, 1.0], atol=1e-12)


def test_product_applies_right_operand_first() -> None:
    """(a * b).rotate(v) equals a.rotate(b.rotate(v))."""
    a = Quaternion.rotate_y(0.7)
    b = Quaternion.rotate_x(-1.1)
    v = (0.3, -0.2, 0.9)
    assert np.allclose((a * b).rotate(v), a.rotate(b.rotate(v)), atol=1e-12)


def test_rotation_order_matters() -> None:
    """Pole orientation and spin do not commute."""
    a = Quaternion.rotate_y(0.7)
    b = Quaternion.rotate_x(-1.1)
    assert not np.allclose((a * b).as_tuple(), (b * a).as_tuple())


def test_from_axis_angle_matches_rotate_z() -> None:
    q = Quaternion.from_axis_angle((0.0, 0.0, 1.0), 0.4)
    assert np.allclose(q.as_tuple(), Quaternion.rotate_z(0.4).as_tuple())


def test_from_to() -> None:
    """from_to rotates the source direction onto the target direction."""
    source = (1.0, 2.0, -0.5)
    target = (-0.3, 0.1, 2.0)
    q = Quaternion.from_to(source, target)
    rotated = q.rotate(source)
    expected = np.asarray(target) / np.linalg.norm(target) * np.linalg.norm(source)
    assert np.allclose(rotated, expected, atol=1e-12)
    assert q.norm() == pytest.approx(1.0)


def test_inverse_and_conjugate() -> None:
    q = Quaternion.rotate_y(0.3) * Quaternion.rotate_x(1.2)
    v = (0.5, 0.25, -1.0)
    assert np.allclose(q.inverse().rotate(q.rotate(v)), v, atol=1e-12)
    assert np.allclose(q.inverse().as_tuple(), q.conjugate().as_tuple(), atol=1e-12)


def test_to_matrix_matches_rotate() -> None:
    q = Quaternion.from_axis_angle((0.0, 0.6, 0.8), 2.1)
    v = np.array([0.1, -0.7, 0.4])
    assert np.allclose(q.to_matrix() @ v, q.rotate(v), atol=1e-12)


def test_slerp_endpoints_and_midpoint() -> None:
    q1 = Quaternion.rotate_y(0.0)
    q2 = Quaternion.rotate_y(1.0)
    assert np.allclose(slerp(q1, q2, 0.0).as_tuple(), q1.as_tuple())
    assert np.allclose(slerp(q1, q2, 1.0).as_tuple(), q2.as_tuple())
    assert np.allclose(slerp(q1, q2, 0.5).as_tuple(), Quaternion.rotate_y(0.5).as_tuple())


def test_nlerp_is_normalized_and_takes_short_arc() -> None:
    q1 = Quaternion.rotate_z(0.2)
    q2 = -Quaternion.rotate_z(0.4)
    q = nlerp(q1, q2, 0.5)
    assert q.norm() == pytest.approx(1.0)
    assert abs(q.dot(Quaternion.rotate_z(0.3))) == pytest.approx(1.0, abs=1e-9)
