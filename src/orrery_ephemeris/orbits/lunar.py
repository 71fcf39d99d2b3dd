"""Geocentric Moon from the truncated Brown lunar theory (Meeus, 1st ed.).

Arguments are days and Julian centuries since 1900 Jan 0.5. The result is
rotated out of the Earth's equatorial frame with the inverse of the Earth
rotation model's equator orientation.
"""

from __future__ import annotations

import math

import numpy as np

from orrery_ephemeris.angle_utils import au_from_km, pfmod
from orrery_ephemeris.constants import EARTH_EQUATORIAL_RADIUS_KM, J1900, J2000
from orrery_ephemeris.coordinates import centuries_since_1900, ecliptic_to_equatorial, epoch_convert
from orrery_ephemeris.orbits.base import Orbit, OrbitType
from orrery_ephemeris.rotation import EarthRotationModel, RotationModel


def _cycle_degrees(days: float, period: float) -> float:
    """Fraction of a cycle elapsed in days, as degrees (truncated toward zero)."""
    m = days / period
    return 360.0 * (m - math.trunc(m))


def lunar_ecliptic(jd: float) -> tuple[float, float, float]:
    """Ecliptic longitude, latitude (radians, of date) and distance (km) of the Moon.

    Parameters:
        jd: Julian Day.

    Returns:
        (longitude, latitude, distance_km); longitude in [0, 2*pi).
    """
    jd19 = jd - J1900
    t = jd19 / 36525.0
    t2 = t * t

    ld = 270.434164 + _cycle_degrees(jd19, 27.32158213) - (0.001133 - 0.0000019 * t) * t2
    ms = 358.475833 + _cycle_degrees(jd19, 365.2596407) - (0.00015 + 0.0000033 * t) * t2
    md = 296.104608 + _cycle_degrees(jd19, 27.55455094) + (0.009192 + 0.0000144 * t) * t2
    de = 350.737486 + _cycle_degrees(jd19, 29.53058868) - (0.001436 - 0.0000019 * t) * t2
    f = 11.250889 + _cycle_degrees(jd19, 27.21222039) - (0.003211 + 0.0000003 * t) * t2
    n = 259.183275 - _cycle_degrees(jd19, 6798.363307) + (0.002078 + 0.000022 * t) * t2

    # Additive long-period corrections
    sa = math.sin(math.radians(51.2 + 20.2 * t))
    sn = math.sin(math.radians(n))
    b = 346.56 + (132.87 - 0.0091731 * t) * t
    sb = 0.003964 * math.sin(math.radians(b))
    c = math.radians(n + 275.05 - 2.3 * t)
    sc = math.sin(c)
    ld = ld + 0.000233 * sa + sb + 0.001964 * sn
    ms = ms - 0.001778 * sa
    md = md + 0.000817 * sa + sb + 0.002541 * sn
    f = f + sb - 0.024691 * sn - 0.004328 * sc
    de = de + 0.002011 * sa + sb + 0.001964 * sn
    e = 1.0 - (0.002495 + 7.52e-06 * t) * t
    e2 = e * e

    ld = math.radians(ld)
    ms = math.radians(ms)
    n = math.radians(n)
    de = math.radians(de)
    f = math.radians(f)
    md = math.radians(md)
    sin = math.sin
    cos = math.cos

    # Longitude (degrees)
    lon = (
        6.28875 * sin(md) + 1.27402 * sin(2 * de - md) + 0.658309 * sin(2 * de)
        + 0.213616 * sin(2 * md) - e * 0.185596 * sin(ms) - 0.114336 * sin(2 * f)
        + 0.058793 * sin(2 * (de - md)) + 0.057212 * e * sin(2 * de - ms - md)
        + 0.05332 * sin(2 * de + md) + 0.045874 * e * sin(2 * de - ms) + 0.041024 * e * sin(md - ms)
    )
    lon += (
        -0.034718 * sin(de) - e * 0.030465 * sin(ms + md) + 0.015326 * sin(2 * (de - f))
        - 0.012528 * sin(2 * f + md) - 0.01098 * sin(2 * f - md) + 0.010674 * sin(4 * de - md)
        + 0.010034 * sin(3 * md) + 0.008548 * sin(4 * de - 2 * md) - e * 0.00791 * sin(ms - md + 2 * de)
        - e * 0.006783 * sin(2 * de + ms)
    )
    lon += (
        0.005162 * sin(md - de) + e * 0.005 * sin(ms + de) + 0.003862 * sin(4 * de)
        + e * 0.004049 * sin(md - ms + 2 * de) + 0.003996 * sin(2 * (md + de))
        + 0.003665 * sin(2 * de - 3 * md) + e * 0.002695 * sin(2 * md - ms)
        + 0.002602 * sin(md - 2 * (f + de)) + e * 0.002396 * sin(2 * (de - md) - ms)
        - 0.002349 * sin(md + de)
    )
    lon += (
        e2 * 0.002249 * sin(2 * (de - ms)) - e * 0.002125 * sin(2 * md + ms)
        - e2 * 0.002079 * sin(2 * ms) + e2 * 0.002059 * sin(2 * (de - ms) - md)
        - 0.001773 * sin(md + 2 * (de - f)) - 0.001595 * sin(2 * (f + de))
        + e * 0.00122 * sin(4 * de - ms - md) - 0.00111 * sin(2 * (md + f)) + 0.000892 * sin(md - 3 * de)
    )
    lon += (
        -e * 0.000811 * sin(ms + md + 2 * de) + e * 0.000761 * sin(4 * de - ms - 2 * md)
        + e2 * 0.000704 * sin(md - 2 * (ms + de)) + e * 0.000693 * sin(ms - 2 * (md - de))
        + e * 0.000598 * sin(2 * (de - f) - ms) + 0.00055 * sin(md + 4 * de) + 0.000538 * sin(4 * md)
        + e * 0.000521 * sin(4 * de - ms) + 0.000486 * sin(2 * md - de)
    )
    lon += e2 * 0.000717 * sin(md - 2 * ms)
    ecl_lon = pfmod(ld + math.radians(lon), 2.0 * math.pi)

    # Latitude (degrees)
    g = (
        5.12819 * sin(f) + 0.280606 * sin(md + f) + 0.277693 * sin(md - f)
        + 0.173238 * sin(2 * de - f) + 0.055413 * sin(2 * de + f - md) + 0.046272 * sin(2 * de - f - md)
        + 0.032573 * sin(2 * de + f) + 0.017198 * sin(2 * md + f) + 0.009267 * sin(2 * de + md - f)
        + 0.008823 * sin(2 * md - f) + e * 0.008247 * sin(2 * de - ms - f)
    )
    g += (
        0.004323 * sin(2 * (de - md) - f) + 0.0042 * sin(2 * de + f + md)
        + e * 0.003372 * sin(f - ms - 2 * de) + e * 0.002472 * sin(2 * de + f - ms - md)
        + e * 0.002222 * sin(2 * de + f - ms) + e * 0.002072 * sin(2 * de - f - ms - md)
        + e * 0.001877 * sin(f - ms + md) + 0.001828 * sin(4 * de - f - md) - e * 0.001803 * sin(f + ms)
        - 0.00175 * sin(3 * f)
    )
    g += (
        e * 0.00157 * sin(md - ms - f) - 0.001487 * sin(f + de) - e * 0.001481 * sin(f + ms + md)
        + e * 0.001417 * sin(f - ms - md) + e * 0.00135 * sin(f - ms) + 0.00133 * sin(f - de)
        + 0.001106 * sin(f + 3 * md) + 0.00102 * sin(4 * de - f) + 0.000833 * sin(f + 4 * de - md)
        + 0.000781 * sin(md - 3 * f) + 0.00067 * sin(f + 4 * de - 2 * md)
    )
    g += (
        0.000606 * sin(2 * de - 3 * f) + 0.000597 * sin(2 * (de + md) - f)
        + e * 0.000492 * sin(2 * de + md - ms - f) + 0.00045 * sin(2 * (md - de) - f)
        + 0.000439 * sin(3 * md - f) + 0.000423 * sin(f + 2 * (de + md))
        + 0.000422 * sin(2 * de - f - 3 * md) - e * 0.000367 * sin(ms + f + 2 * de - md)
        - e * 0.000353 * sin(ms + f + 2 * de) + 0.000331 * sin(f + 4 * de)
    )
    g += (
        e * 0.000317 * sin(2 * de + f - ms + md) + e2 * 0.000306 * sin(2 * (de - ms) - f)
        - 0.000283 * sin(md + 3 * f)
    )
    w1 = 0.0004664 * cos(n)
    w2 = 0.0000754 * cos(c)
    ecl_lat = math.radians(g) * (1.0 - w1 - w2)

    # Horizontal parallax (degrees)
    hp = (
        0.950724 + 0.051818 * cos(md) + 0.009531 * cos(2 * de - md) + 0.007843 * cos(2 * de)
        + 0.002824 * cos(2 * md) + 0.000857 * cos(2 * de + md) + e * 0.000533 * cos(2 * de - ms)
        + e * 0.000401 * cos(2 * de - md - ms) + e * 0.00032 * cos(md - ms) - 0.000271 * cos(de)
        - e * 0.000264 * cos(ms + md) - 0.000198 * cos(2 * f - md)
    )
    hp += (
        0.000173 * cos(3 * md) + 0.000167 * cos(4 * de - md) - e * 0.000111 * cos(ms)
        + 0.000103 * cos(4 * de - 2 * md) - 0.000084 * cos(2 * md - 2 * de)
        - e * 0.000083 * cos(2 * de + ms) + 0.000079 * cos(2 * de + 2 * md) + 0.000072 * cos(4 * de)
        + e * 0.000064 * cos(2 * de - ms + md) - e * 0.000063 * cos(2 * de + ms - md)
        + e * 0.000041 * cos(ms + de)
    )
    hp += (
        e * 0.000035 * cos(2 * md - ms) - 0.000033 * cos(3 * md - 2 * de)
        - 0.00003 * cos(md + de) - 0.000029 * cos(2 * (f - de)) - e * 0.000029 * cos(2 * md + ms)
        + e2 * 0.000026 * cos(2 * (de - ms)) - 0.000023 * cos(2 * (f - de) + md)
        + e * 0.000019 * cos(4 * de - ms - md)
    )
    distance = EARTH_EQUATORIAL_RADIUS_KM / math.sin(math.radians(hp))
    return ecl_lon, ecl_lat, distance


class LunarOrbit(Orbit):
    """Moon relative to the Earth."""

    orbit_type = OrbitType.LUNAR
    period = 27.321661

    def __init__(self, earth_rotation: RotationModel | None = None) -> None:
        if earth_rotation is None:
            earth_rotation = EarthRotationModel()
        self.earth_rotation = earth_rotation

    def equatorial_j2000(self, jd: float) -> tuple[float, float]:
        """Right ascension and declination referred to the J2000 equinox (radians)."""
        lon, lat, _distance = lunar_ecliptic(jd)
        ra, dec = ecliptic_to_equatorial(lat, lon, centuries_since_1900(jd))
        return epoch_convert(jd, J2000, ra, dec)

    def position_at_time(self, jd: float) -> np.ndarray:
        lon, lat, distance = lunar_ecliptic(jd)
        km = np.array(
            [
                distance * math.cos(lat) * math.cos(lon),
                distance * math.sin(lat),
                distance * math.cos(lat) * math.sin(lon),
            ]
        )
        position = au_from_km(km)
        return self.earth_rotation.equator_orientation(jd).inverse().rotate(position)
