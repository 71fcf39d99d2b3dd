"""Tests for the two-body Kepler orbit."""

from __future__ import annotations

import math

import numpy as np
import pytest

from orrery_ephemeris.orbits.kepler import (
    KeplerElements,
    KeplerOrbit,
    orbital_plane_position,
    solve_kepler,
)


@pytest.mark.parametrize('e', [0.0, 0.01673, 0.1, 0.2, 0.3])
@pytest.mark.parametrize('m', [-2.5, 0.0, 0.3, 1.0, 3.0, 5.9])
def test_solve_kepler_satisfies_equation(m: float, e: float) -> None:
    """E - e sin E reproduces M within 1e-9 radians."""
    ecc_anomaly = solve_kepler(m, e)
    assert ecc_anomaly - e * math.sin(ecc_anomaly) == pytest.approx(m, abs=1e-9)


def test_solve_kepler_high_eccentricity() -> None:
    """Substitution converges slowly near apoapsis at e = 0.9; more rounds close the gap."""
    e = 0.9
    ecc_anomaly = solve_kepler(3.0, e)
    assert 1e-3 < abs(ecc_anomaly - e * math.sin(ecc_anomaly) - 3.0) < 0.05
    for m in (0.05, 0.3, 1.0, 2.0, 3.0):
        ecc_anomaly = solve_kepler(m, e, iterations=300)
        assert ecc_anomaly - e * math.sin(ecc_anomaly) == pytest.approx(m, abs=1e-9)


def test_circular_orbit_radius() -> None:
    """With e = 0 the radius equals the semi-major axis at every phase."""
    for m in np.linspace(0.0, 2.0 * math.pi, 13):
        assert np.linalg.norm(orbital_plane_position(2.5, 0.0, m)) == pytest.approx(2.5)


def test_periapsis_and_apoapsis() -> None:
    """Radius is a(1 - e) at M = 0 and a(1 + e) at M = pi."""
    a, e = 1.5, 0.2
    peri = orbital_plane_position(a, e, 0.0)
    apo = orbital_plane_position(a, e, math.pi - 1e-12)
    assert peri[0] == pytest.approx(a * (1 - e))
    assert np.linalg.norm(apo) == pytest.approx(a * (1 + e), rel=1e-9)
    assert peri[1] == 0.0


@pytest.mark.parametrize('phase', [0.0, 0.13, 0.5, 0.77, 3.4])
def test_position_is_periodic_in_phase(phase: float) -> None:
    """Position at phase and phase + 1 coincide."""
    orbit = KeplerOrbit(KeplerElements(semi_major_axis=5.2, eccentricity=0.25, inclination=10.0))
    p0 = orbit.world_position_at_phase(phase)
    p1 = orbit.world_position_at_phase(phase + 1.0)
    assert np.allclose(p0, p1, atol=1e-9)


def test_orientation_preserves_radius() -> None:
    """Rotating into the reference plane keeps the distance."""
    orbit = KeplerOrbit(
        KeplerElements(eccentricity=0.1, inclination=30.0, ascending_node=40.0, periapsis_longitude=100.0)
    )
    local = orbit.position_at_phase(0.3)
    world = orbit.world_position_at_phase(0.3)
    assert np.linalg.norm(world) == pytest.approx(np.linalg.norm(local))
    assert orbit.orientation().norm() == pytest.approx(1.0)


def test_inclined_orbit_leaves_plane() -> None:
    """An inclined orbit has non-zero height somewhere; a flat one never does."""
    flat = KeplerOrbit(KeplerElements(inclination=0.0))
    tilted = KeplerOrbit(KeplerElements(inclination=20.0))
    phases = np.linspace(0.0, 1.0, 17)
    assert max(abs(flat.world_position_at_phase(p)[1]) for p in phases) < 1e-12
    assert max(abs(tilted.world_position_at_phase(p)[1]) for p in phases) > 0.1


def test_speed_is_highest_at_periapsis() -> None:
    orbit = KeplerOrbit(KeplerElements(eccentricity=0.3, mean_longitude_at_epoch=102.93))
    assert orbit.speed_at_phase(0.0) > orbit.speed_at_phase(0.5)


def test_orbit_line_clamps_eccentricity() -> None:
    """Sampling works for e >= 1 by clamping to 0.999."""
    orbit = KeplerOrbit(KeplerElements(eccentricity=1.2))
    line = orbit.orbit_line(samples=50)
    assert line.shape == (50, 3)
    assert np.all(np.isfinite(line))


def test_position_at_time_uses_period() -> None:
    """One period later the body is back at the same place."""
    orbit = KeplerOrbit(KeplerElements(period=365.25))
    jd = 2451545.0
    assert np.allclose(orbit.position_at_time(jd), orbit.position_at_time(jd + 365.25), atol=1e-9)
