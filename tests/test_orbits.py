"""Tests for the planetary, solar and satellite orbit theories."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from orrery_ephemeris.angle_utils import km_from_au
from orrery_ephemeris.constants import JUPITER_RADIUS_KM, J2000
from orrery_ephemeris.orbits import ORBITAL_PERIODS, OrbitType, create_orbit
from orrery_ephemeris.orbits.galilean import CallistoOrbit, EuropaOrbit, GanymedeOrbit, IoOrbit
from orrery_ephemeris.orbits.lunar import LunarOrbit, lunar_ecliptic
from orrery_ephemeris.orbits.saturnian import TitanOrbit
from orrery_ephemeris.orbits.vsop87 import Vsop87Orbit
from orrery_ephemeris.precession import ecliptic_precession_angles_p03, obliquity_p03
from orrery_ephemeris.quaternion import Quaternion
from orrery_ephemeris.series import PowerSeries, evaluate_series, rectangular_to_engine, spherical_to_engine
from orrery_ephemeris.time_utils import julian_millennium

DATES = [2415020.0, 2440000.5, J2000, 2455197.5, 2460310.25, 2470000.0]


def test_evaluate_series_horner() -> None:
    """Groups are multiplied by ascending powers of t."""
    groups = [
        np.array([[1.0, 0.0, 0.0], [0.5, 0.0, 2.0]]),
        np.array([[3.0, math.pi, 0.0]]),
        np.array([[2.0, 0.0, 0.0]]),
    ]
    t = 0.25
    expected = (1.0 + 0.5 * math.cos(0.5)) + (-3.0) * t + 2.0 * t * t
    assert evaluate_series(groups, t) == pytest.approx(expected)


def test_power_series_handles_empty_group() -> None:
    series = PowerSeries.from_terms([[], [(1.0, 0.0, 0.0)]])
    assert series(2.0) == pytest.approx(2.0)
    assert series.term_count == 1


def test_engine_axes() -> None:
    """Longitude 0 lies on +X, 90 degrees on +Z, and the pole on +Y."""
    assert np.allclose(spherical_to_engine(0.0, 0.0, 2.0), [2.0, 0.0, 0.0], atol=1e-12)
    assert np.allclose(spherical_to_engine(0.5 * math.pi, 0.0, 1.0), [0.0, 0.0, 1.0], atol=1e-12)
    assert np.allclose(spherical_to_engine(1.0, 0.5 * math.pi, 1.0), [0.0, 1.0, 0.0], atol=1e-12)
    assert np.array_equal(rectangular_to_engine(1.0, 2.0, 3.0), [1.0, 3.0, 2.0])


def test_earth_at_j2000() -> None:
    """Earth is 0.9833 AU from the Sun near perihelion, at longitude 100.38 degrees."""
    earth = create_orbit(OrbitType.EARTH)
    assert isinstance(earth, Vsop87Orbit)
    lon, lat, radius = earth.spherical_at_time(J2000)
    assert radius == pytest.approx(0.9833, abs=1e-3)
    assert math.degrees(lon) % 360.0 == pytest.approx(100.378, abs=0.05)
    assert abs(lat) < 1e-5
    assert np.linalg.norm(earth.position_at_time(J2000)) == pytest.approx(radius)


def test_venus_heliocentric() -> None:
    """Venus on 1992 Dec 20 0h TD: L 26.11428, B -2.62070 degrees, R 0.724603 AU."""
    venus = create_orbit(OrbitType.VENUS)
    lon, lat, radius = venus.spherical_at_time(2448976.5)
    assert math.degrees(lon) % 360.0 == pytest.approx(26.11428, abs=1e-3)
    assert math.degrees(lat) == pytest.approx(-2.62070, abs=1e-3)
    assert radius == pytest.approx(0.724603, abs=1e-5)


@pytest.mark.parametrize(
    'orbit_type, low, high',
    [
        (OrbitType.MERCURY, 0.30, 0.47),
        (OrbitType.VENUS, 0.71, 0.73),
        (OrbitType.MARS, 1.37, 1.68),
        (OrbitType.JUPITER, 4.9, 5.5),
        (OrbitType.SATURN, 8.9, 10.2),
        (OrbitType.URANUS, 18.2, 20.2),
        (OrbitType.NEPTUNE, 29.7, 30.5),
    ],
)
def test_planet_distances(orbit_type: OrbitType, low: float, high: float) -> None:
    """Heliocentric distances stay between perihelion and aphelion."""
    orbit = create_orbit(orbit_type)
    for jd in DATES:
        assert low < np.linalg.norm(orbit.position_at_time(jd)) < high


def test_sun_barycentric_offset_is_small() -> None:
    """The Sun's reflex motion keeps it within about two solar radii of the barycentre."""
    sun = create_orbit(OrbitType.SUN)
    for jd in DATES:
        assert 0.0 < np.linalg.norm(sun.position_at_time(jd)) < 0.012


# Barycentric Sun from DE405 at J2000, J2000 ecliptic (AU)
DE405_SUN_J2000 = (-0.007137, -0.002795, 0.000206)

# M_sun / m
PLANET_MASS_RATIOS = {
    OrbitType.MERCURY: 6023600.0,
    OrbitType.VENUS: 408523.71,
    OrbitType.EARTH: 328900.56,
    OrbitType.MARS: 3098708.0,
    OrbitType.JUPITER: 1047.3486,
    OrbitType.SATURN: 3497.898,
    OrbitType.URANUS: 22902.98,
    OrbitType.NEPTUNE: 19412.24,
}


def _ecliptic_sun(jd: float) -> np.ndarray:
    x, z, y = create_orbit(OrbitType.SUN).position_at_time(jd)
    return np.array([x, y, z])


def _sun_from_planets(jd: float) -> np.ndarray:
    """Sun about the barycentre implied by the planet series, J2000 ecliptic."""
    t = 10.0 * julian_millennium(jd)
    pi_a, big_pi_a = (math.radians(v / 3600.0) for v in ecliptic_precession_angles_p03(t))
    p_a = math.radians(obliquity_p03(t)[0] / 3600.0)
    total = np.zeros(3)
    mass_sum = 0.0
    for orbit_type, ratio in PLANET_MASS_RATIOS.items():
        lon, lat, rad = create_orbit(orbit_type).spherical_at_time(jd)
        vec = Quaternion.rotate_z(-big_pi_a - p_a).rotate(
            (rad * math.cos(lat) * math.cos(lon), rad * math.cos(lat) * math.sin(lon), rad * math.sin(lat))
        )
        vec = Quaternion.rotate_z(big_pi_a).rotate(Quaternion.rotate_x(pi_a).rotate(vec))
        total += np.asarray(vec) / ratio
        mass_sum += 1.0 / ratio
    return -total / (1.0 + mass_sum)


def test_sun_matches_de405_at_j2000() -> None:
    assert np.linalg.norm(_ecliptic_sun(J2000) - DE405_SUN_J2000) < 1e-5


@pytest.mark.parametrize('years', [-250, -100, 0, 100, 250])
def test_sun_follows_planet_barycentre(years: int) -> None:
    jd = J2000 + years * 365.25
    assert np.linalg.norm(_ecliptic_sun(jd) - _sun_from_planets(jd)) < 1e-5


def test_moon_distance_range() -> None:
    """Geocentric distance stays between perigee and apogee."""
    for jd in np.linspace(J2000, J2000 + 60.0, 25):
        _lon, _lat, distance = lunar_ecliptic(float(jd))
        assert 355000.0 < distance < 408000.0


def test_moon_ecliptic_position() -> None:
    """Moon on 1992 Apr 12 0h TD: longitude 133.1627, latitude -3.2291 degrees, 368410 km."""
    lon, lat, distance = lunar_ecliptic(2448724.5)
    assert math.degrees(lon) == pytest.approx(133.1627, abs=0.02)
    assert math.degrees(lat) == pytest.approx(-3.2291, abs=0.02)
    assert distance == pytest.approx(368409.7, abs=200.0)


def test_moon_orbit_keeps_distance() -> None:
    """Rotating out of the Earth's equatorial frame does not change the distance."""
    moon = create_orbit(OrbitType.LUNAR)
    assert isinstance(moon, LunarOrbit)
    jd = 2448724.5
    assert km_from_au(np.linalg.norm(moon.position_at_time(jd))) == pytest.approx(
        lunar_ecliptic(jd)[2], rel=1e-9
    )


@pytest.mark.parametrize('orbit_class', [IoOrbit, EuropaOrbit, GanymedeOrbit, CallistoOrbit])
def test_galilean_distances(orbit_class: type) -> None:
    """Each moon stays within 1% of its mean distance and close to Jupiter's equator."""
    orbit = orbit_class()
    expected_km = orbit.semi_major_axis * JUPITER_RADIUS_KM
    for jd in DATES:
        pos = orbit.position_at_time(jd)
        r = np.linalg.norm(pos)
        assert km_from_au(r) == pytest.approx(expected_km, rel=0.01)
        assert abs(pos[1]) / r < 0.02


def test_io_returns_after_one_period() -> None:
    """After one orbital period Io is back within two degrees of where it started."""
    io = IoOrbit()
    p0 = io.position_at_time(J2000)
    p1 = io.position_at_time(J2000 + io.period)
    cos_angle = np.dot(p0, p1) / (np.linalg.norm(p0) * np.linalg.norm(p1))
    assert math.degrees(math.acos(min(1.0, cos_angle))) < 2.0


def test_titan_distance() -> None:
    """Titan orbits about 1.22 million km from Saturn."""
    titan = TitanOrbit()
    for jd in DATES:
        km = km_from_au(np.linalg.norm(titan.position_at_time(jd)))
        assert 1.17e6 < km < 1.27e6


def test_velocity_is_symmetric_difference() -> None:
    """Earth moves roughly 0.0172 AU per day."""
    earth = create_orbit(OrbitType.EARTH)
    speed = np.linalg.norm(earth.velocity_at_time(J2000))
    assert speed == pytest.approx(0.0172, rel=0.03)


def test_create_orbit_is_cached() -> None:
    assert create_orbit(OrbitType.MARS) is create_orbit(OrbitType.MARS)
    assert create_orbit(int(OrbitType.TITAN)) is create_orbit(OrbitType.TITAN)


def test_create_orbit_without_model(caplog: pytest.LogCaptureFixture) -> None:
    """NONE and unknown tags yield no orbit and a warning."""
    with caplog.at_level(logging.WARNING, logger='orrery_ephemeris.orbits'):
        assert create_orbit(OrbitType.NONE) is None
        assert create_orbit(917) is None
    assert 'Unknown orbit type' in caplog.text


def test_orbital_periods() -> None:
    assert ORBITAL_PERIODS[OrbitType.EARTH] == pytest.approx(365.25)
    assert create_orbit(OrbitType.IO).period == pytest.approx(1.769138)
    assert create_orbit(OrbitType.LUNAR).period == pytest.approx(27.321661)
