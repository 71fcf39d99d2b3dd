"""Tests for obliquity, nutation, ecliptic/equatorial conversion and epoch precession."""

from __future__ import annotations

import math

import pytest

from orrery_ephemeris.constants import J2000
from orrery_ephemeris.coordinates import (
    centuries_since_1900,
    ecliptic_to_equatorial,
    epoch_convert,
    nutation,
    obliquity,
)

ARCSEC = math.pi / (180.0 * 3600.0)


def test_obliquity_1900() -> None:
    assert math.degrees(obliquity(0.0)) == pytest.approx(23.45229444)
    assert obliquity(1.0) < obliquity(0.0)


@pytest.mark.parametrize('t', [-1.0, 0.0, 0.5, 1.0, 1.24])
def test_nutation_is_bounded(t: float) -> None:
    """Nutation in longitude stays under 20 arcsec and in obliquity under 10."""
    deps, dpsi = nutation(t)
    assert abs(dpsi) < 20.0 * ARCSEC
    assert abs(deps) < 10.0 * ARCSEC


def test_centuries_since_1900() -> None:
    assert centuries_since_1900(J2000) == pytest.approx(1.0, abs=1e-4)


def test_ecliptic_origin_is_equatorial_origin() -> None:
    ra, dec = ecliptic_to_equatorial(0.0, 0.0)
    assert ra == pytest.approx(0.0)
    assert dec == pytest.approx(0.0)


def test_summer_solstice_point() -> None:
    """Ecliptic longitude 90 degrees lies at RA 6h and declination equal to the obliquity."""
    t = 0.5
    ra, dec = ecliptic_to_equatorial(0.0, 0.5 * math.pi, t)
    assert ra == pytest.approx(0.5 * math.pi)
    assert dec == pytest.approx(obliquity(t) + nutation(t)[0])


def test_ecliptic_pole_declination() -> None:
    """The north ecliptic pole sits at RA 18h."""
    ra, dec = ecliptic_to_equatorial(0.5 * math.pi - 1e-9, 0.0)
    assert math.degrees(ra) == pytest.approx(270.0, abs=1e-4)
    assert math.degrees(dec) == pytest.approx(90.0 - math.degrees(obliquity(0.0) + nutation(0.0)[0]), abs=1e-4)


def test_epoch_convert_identity() -> None:
    ra, dec = epoch_convert(J2000, J2000, 1.2, -0.4)
    assert ra == pytest.approx(1.2)
    assert dec == pytest.approx(-0.4)


def test_epoch_convert_theta_persei() -> None:
    """Theta Persei from J2000 to 2028 Nov 13.19 TD (rigorous method)."""
    ra, dec = epoch_convert(J2000, 2462088.69, math.radians(41.054063), math.radians(49.227750))
    assert math.degrees(ra) == pytest.approx(41.547214, abs=1e-4)
    assert math.degrees(dec) == pytest.approx(49.348483, abs=1e-4)


def test_epoch_convert_round_trip() -> None:
    ra, dec = epoch_convert(J2000, 2470000.0, 3.0, 0.7)
    back_ra, back_dec = epoch_convert(2470000.0, J2000, ra, dec)
    assert back_ra % (2.0 * math.pi) == pytest.approx(3.0, abs=1e-7)
    assert back_dec == pytest.approx(0.7, abs=1e-7)
