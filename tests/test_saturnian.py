"""Reference values for Dourneau's Titan theory (Meeus, Astronomical Algorithms ch. 46)."""

from __future__ import annotations

import numpy as np
import pytest

from orrery_ephemeris.angle_utils import km_from_au
from orrery_ephemeris.orbits.saturnian import (
    SATURN_ASCENDING_NODE_DEG,
    SATURN_TILT_DEG,
    TITAN_SEMI_MAJOR_AXIS,
    TitanOrbit,
    outer_moon_params,
    saturn_moon_position,
    saturnian_elements,
)

# 1999 Sep 18, 0h TD: the worked example of ch. 46.
JD = 2451439.50074


def test_saturnian_angles() -> None:
    el = saturnian_elements(JD)
    expected = (
        679.2723780227,
        3652.2868144246,
        10365.3551636928,
        -14.1494704414,
        332.7394704414,
        1485.8471320209,
        1393.4993555975,
        2.4915279667,
        113.0910501207,
    )
    got = (el.w0, el.w1, el.w2, el.w3, el.w4, el.w5, el.w6, el.w7, el.w8)
    np.testing.assert_allclose(got, expected, rtol=0.0, atol=1e-6)


def test_outer_moon_params_values() -> None:
    lam, gam, r, w = outer_moon_params(
        TITAN_SEMI_MAJOR_AXIS,
        0.029339410336,
        27.7333423485,
        168.5439232838,
        904621.8098975128,
        904954.5544601572,
    )
    assert lam == pytest.approx(904951.6734512763, abs=1e-6)
    assert gam == pytest.approx(0.3701376968, abs=1e-6)
    assert r == pytest.approx(19.9164112841, abs=1e-6)
    assert w == pytest.approx(8.4467438254, abs=1e-6)


def test_orbit_in_saturn_equator_is_unchanged() -> None:
    """A circular orbit in Saturn's equator keeps its radius and has no inclination."""
    lam, gam, r, _w = outer_moon_params(
        10.0, 0.0, SATURN_TILT_DEG, SATURN_ASCENDING_NODE_DEG, 40.0, 250.0
    )
    assert gam == pytest.approx(0.0, abs=1e-6)
    assert r == pytest.approx(10.0)


def test_saturn_moon_position_radius() -> None:
    pos = saturn_moon_position(123.0, 0.4, 170.0, 20.0)
    assert np.linalg.norm(pos) == pytest.approx(np.linalg.norm(saturn_moon_position(10.0, 0.0, 0.0, 20.0)))


def test_titan_position() -> None:
    """Saturnicentric engine-axis position at a fixed date, to a metre."""
    pos = km_from_au(TitanOrbit().position_at_time(JD))
    np.testing.assert_allclose(pos, (-267467.682383, -7707.975596, 1171384.255137), rtol=0.0, atol=1e-3)
