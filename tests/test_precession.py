"""Tests for the P03 and long-period precession models."""

from __future__ import annotations

import math

import numpy as np
import pytest

from orrery_ephemeris.precession import (
    EPS0_ARCSEC,
    ecliptic_pole_p03,
    ecliptic_pole_p03lp,
    ecliptic_precession_angles_p03,
    equatorial_precession_p03,
    mean_equator_rotation_p03lp,
    obliquity_p03,
    obliquity_p03lp,
    precession_matrix_p03lp,
)
from orrery_ephemeris.quaternion import Quaternion

ARCSEC = math.pi / (180.0 * 3600.0)


def test_long_period_values_at_j2000() -> None:
    """At J2000 the ecliptic pole offset and precession vanish and eps_A is 84381.406 arcsec."""
    p_a, eps_a = obliquity_p03lp(0.0)
    pole_p, pole_q = ecliptic_pole_p03lp(0.0)
    assert p_a == pytest.approx(0.0, abs=1e-3)
    assert eps_a == pytest.approx(84381.406, abs=1e-3)
    assert pole_p == pytest.approx(0.0, abs=1e-3)
    assert pole_q == pytest.approx(0.0, abs=1e-3)


def test_long_period_obliquity_agrees_with_p03() -> None:
    assert obliquity_p03(0.0) == (0.0, EPS0_ARCSEC)
    assert obliquity_p03lp(0.0)[1] == pytest.approx(obliquity_p03(0.0)[1], abs=0.1)


def test_equatorial_angles_at_j2000() -> None:
    zeta, z, theta = equatorial_precession_p03(0.0)
    assert zeta == pytest.approx(2.650545)
    assert z == pytest.approx(-2.650545)
    assert theta == 0.0


@pytest.mark.parametrize('t', [-1.0, 0.5, 1.0])
def test_ecliptic_pole_matches_angles(t: float) -> None:
    """P_A = pi_A sin(Pi_A) and Q_A = pi_A cos(Pi_A) for the small inclination pi_A."""
    pi_a, big_pi_a = ecliptic_precession_angles_p03(t)
    pole_p, pole_q = ecliptic_pole_p03(t)
    node = big_pi_a * ARCSEC
    assert pole_p == pytest.approx(pi_a * math.sin(node), abs=5e-3)
    assert pole_q == pytest.approx(pi_a * math.cos(node), abs=5e-3)


@pytest.mark.parametrize('t', [-50.0, -1.0, 0.0, 0.25, 10.0, 3000.0])
def test_precession_matrix_is_a_rotation(t: float) -> None:
    m = precession_matrix_p03lp(t)
    assert np.allclose(m @ m.T, np.eye(3), atol=1e-12)
    assert np.linalg.det(m) == pytest.approx(1.0)


def test_matrix_at_j2000_is_obliquity_rotation() -> None:
    """With no precession the mean equator is the ecliptic tilted by eps_A about X."""
    expected = Quaternion.rotate_x(84381.406 * ARCSEC).to_matrix()
    assert np.allclose(precession_matrix_p03lp(0.0), expected, atol=1e-9)


def test_equinox_moves_westward() -> None:
    """A century after J2000 the X axis of date has moved by about 5029 arcsec."""
    q = mean_equator_rotation_p03lp(1.0)
    x_of_date = q.inverse().rotate((1.0, 0.0, 0.0))
    shift = math.degrees(math.atan2(x_of_date[1], x_of_date[0])) * 3600.0
    assert abs(shift) == pytest.approx(5029.0, abs=20.0)
