"""Low-precision coordinate utilities: obliquity, nutation, ecliptic to equatorial, precession.

Obliquity and nutation take t in Julian centuries since 1900 Jan 0.5
(JD 2415020.0), the epoch of the Newcomb/Brown theories they come from.
All angles are radians unless stated otherwise.
"""

from __future__ import annotations

import math

from orrery_ephemeris.angle_utils import pfmod
from orrery_ephemeris.constants import ARCSEC_PER_DEGREE, DAYS_PER_JULIAN_CENTURY, J1900, J2000


def centuries_since_1900(jd: float) -> float:
    return (jd - J1900) / DAYS_PER_JULIAN_CENTURY


def obliquity(t: float) -> float:
    """Mean obliquity of the ecliptic.

    Parameters:
        t: Julian centuries since 1900 Jan 0.5.

    Returns:
        Obliquity in radians.
    """
    return math.radians(2.345229444e1 - ((((-1.81e-3 * t) + 5.9e-3) * t + 4.6845e1) * t) / 3600.0)


def _revolutions(rate: float, t: float) -> float:
    """Fractional part of rate * t, in degrees (sign of the product kept)."""
    a = rate * t
    return 360.0 * (a - math.trunc(a))


def nutation(t: float) -> tuple[float, float]:
    """Nutation in obliquity and longitude.

    Parameters:
        t: Julian centuries since 1900 Jan 0.5.

    Returns:
        (delta_epsilon, delta_psi) in radians.
    """
    t2 = t * t
    ls = 279.697 + 0.000303 * t2 + _revolutions(100.0021358, t)  # Sun mean longitude
    ld = 270.434 - 0.001133 * t2 + _revolutions(1336.855231, t)  # Moon mean longitude
    ms = 358.476 - 0.00015 * t2 + _revolutions(99.99736056000026, t)  # Sun mean anomaly
    md = 296.105 + 0.009192 * t2 + _revolutions(13255523.59, t)  # Moon mean anomaly
    nm = 259.183 + 0.002078 * t2 - _revolutions(5.372616667, t)  # Moon ascending node

    tls = 2.0 * math.radians(ls)
    nm = math.radians(nm)
    tnm = 2.0 * nm
    ms = math.radians(ms)
    tld = 2.0 * math.radians(ld)
    md = math.radians(md)

    # Arcseconds
    dpsi = (
        (-17.2327 - 0.01737 * t) * math.sin(nm)
        + (-1.2729 - 0.00013 * t) * math.sin(tls)
        + 0.2088 * math.sin(tnm)
        - 0.2037 * math.sin(tld)
        + (0.1261 - 0.00031 * t) * math.sin(ms)
        + 0.0675 * math.sin(md)
        - (0.0497 - 0.00012 * t) * math.sin(tls + ms)
        - 0.0342 * math.sin(tld - nm)
        - 0.0261 * math.sin(tld + md)
        + 0.0214 * math.sin(tls - ms)
        - 0.0149 * math.sin(tls - tld + md)
        + 0.0124 * math.sin(tls - nm)
        + 0.0114 * math.sin(tld - md)
    )
    deps = (
        (9.21 + 0.00091 * t) * math.cos(nm)
        + (0.5522 - 0.00029 * t) * math.cos(tls)
        - 0.0904 * math.cos(tnm)
        + 0.0884 * math.cos(tld)
        + 0.0216 * math.cos(tls + ms)
        + 0.0183 * math.cos(tld - nm)
        + 0.0113 * math.cos(tld + md)
        - 0.0093 * math.cos(tls - ms)
        - 0.0066 * math.cos(tls - nm)
    )
    return math.radians(deps / ARCSEC_PER_DEGREE), math.radians(dpsi / ARCSEC_PER_DEGREE)


def ecliptic_to_equatorial(latitude: float, longitude: float, t: float = 0.0) -> tuple[float, float]:
    """Convert ecliptic latitude/longitude to right ascension/declination.

    Parameters:
        latitude: Ecliptic latitude (radians).
        longitude: Ecliptic longitude (radians).
        t: Julian centuries since 1900 for the true obliquity (0 = 1900.0).

    Returns:
        (ra, dec) in radians, ra in [0, 2*pi).
    """
    deps, _dpsi = nutation(t)
    eps = obliquity(t) + deps
    seps, ceps = math.sin(eps), math.cos(eps)
    sy, cy = math.sin(latitude), math.cos(latitude)
    if abs(cy) < 1e-20:
        cy = 1e-20
    ty = sy / cy
    sx, cx = math.sin(longitude), math.cos(longitude)
    dec = math.asin(sy * ceps + cy * seps * sx)
    ra = math.atan2(sx * ceps - ty * seps, cx)
    return pfmod(ra, 2.0 * math.pi), dec


def epoch_convert(jd_from: float, jd_to: float, ra: float, dec: float) -> tuple[float, float]:
    """Precess equatorial coordinates between epochs (Meeus, ch. 21 rigorous method).

    Parameters:
        jd_from: Julian Day of the starting epoch.
        jd_to: Julian Day of the target epoch.
        ra, dec: Coordinates at jd_from (radians).

    Returns:
        (ra, dec) at jd_to (radians). RA is not reduced into [0, 2*pi).
    """
    big_t = (jd_from - J2000) / DAYS_PER_JULIAN_CENTURY
    t = (jd_to - jd_from) / DAYS_PER_JULIAN_CENTURY
    base = 2306.2181 + 1.39656 * big_t - 0.000139 * big_t * big_t
    zeta = base * t + (0.30188 - 0.000344 * big_t) * t * t + 0.017998 * t**3
    z = base * t + (1.09468 + 0.000066 * big_t) * t * t + 0.018203 * t**3
    theta = (
        (2004.3109 - 0.85330 * big_t - 0.000217 * big_t * big_t) * t
        - (0.42665 + 0.000217 * big_t) * t * t
        - 0.041833 * t**3
    )
    zeta = math.radians(zeta / ARCSEC_PER_DEGREE)
    z = math.radians(z / ARCSEC_PER_DEGREE)
    theta = math.radians(theta / ARCSEC_PER_DEGREE)

    a = math.cos(dec) * math.sin(ra + zeta)
    b = math.cos(theta) * math.cos(dec) * math.cos(ra + zeta) - math.sin(theta) * math.sin(dec)
    c = math.sin(theta) * math.cos(dec) * math.cos(ra + zeta) + math.cos(theta) * math.sin(dec)
    return math.atan2(a, b) + z, math.asin(c)
