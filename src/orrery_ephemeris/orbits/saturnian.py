"""Saturnicentric Titan from Dourneau's theory (Meeus, Astronomical Algorithms ch. 46).

Angles inside the theory are degrees; the helpers below follow the book's
names so each step can be checked against it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from orrery_ephemeris.angle_utils import au_from_km, cos_deg, sin_deg
from orrery_ephemeris.constants import B1950, SATURN_RADIUS_KM
from orrery_ephemeris.orbits.base import Orbit, OrbitType

SATURN_TILT_DEG = 28.0817
SATURN_ASCENDING_NODE_DEG = 168.8112
TITAN_SEMI_MAJOR_AXIS = 20.216193  # Saturn radii
TITAN_G0_DEG = 102.8623


@dataclass(frozen=True)
class SaturnianElements:
    """Time arguments t1..t11 and angles W0..W8 (degrees) of the theory."""

    t1: float
    t2: float
    t3: float
    t4: float
    t5: float
    t6: float
    t7: float
    t8: float
    t9: float
    t10: float
    t11: float
    w0: float
    w1: float
    w2: float
    w3: float
    w4: float
    w5: float
    w6: float
    w7: float
    w8: float


def saturnian_elements(jd: float) -> SaturnianElements:
    t1 = jd - 2411093.0
    t2 = t1 / 365.25
    t3 = (jd - B1950) / 365.25 + 1950.0
    t4 = jd - 2411368.0
    t5 = t4 / 365.25
    t6 = jd - 2415020.0
    t7 = t6 / 36525.0
    t8 = t6 / 365.25
    t9 = (jd - 2442000.5) / 365.25
    t10 = jd - 2409786.0
    t11 = t10 / 36525.0
    return SaturnianElements(
        t1, t2, t3, t4, t5, t6, t7, t8, t9, t10, t11,
        w0=5.095 * (t3 - 1866.39),
        w1=74.4 + 32.39 * t2,
        w2=134.3 + 92.62 * t2,
        w3=42.0 - 0.5118 * t5,
        w4=276.59 + 0.5118 * t5,
        w5=267.2635 + 1222.1136 * t7,
        w6=175.4762 + 1221.5515 * t7,
        w7=2.4891 + 0.002435 * t7,
        w8=113.35 - 0.2597 * t7,
    )


def outer_moon_params(
    a: float, e: float, i: float, node: float, mean_anomaly: float, mean_longitude: float
) -> tuple[float, float, float, float]:
    """Reduce osculating elements to Saturn's equatorial frame.

    Parameters:
        a: Semi-major axis in Saturn radii.
        e: Eccentricity.
        i: Inclination (degrees).
        node: Longitude of the ascending node (degrees).
        mean_anomaly: Mean anomaly M (degrees).
        mean_longitude: Mean longitude (degrees).

    Returns:
        (lam, gam, r, w): longitude and inclination on Saturn's equator
        (degrees), radius (Saturn radii) and node on that equator (degrees).
    """
    s1 = sin_deg(SATURN_TILT_DEG)
    c1 = cos_deg(SATURN_TILT_DEG)
    m = mean_anomaly
    e2 = e * e
    e3 = e2 * e
    e4 = e3 * e
    e5 = e4 * e
    center = (
        (2 * e - 0.25 * e3 + 0.0520833333 * e5) * sin_deg(m)
        + (1.25 * e2 - 0.458333333 * e4) * sin_deg(2 * m)
        + (1.083333333 * e3 - 0.671875 * e5) * sin_deg(3 * m)
        + 1.072917 * e4 * sin_deg(4 * m)
        + 1.142708 * e5 * sin_deg(5 * m)
    )
    g = node - SATURN_ASCENDING_NODE_DEG
    a1 = sin_deg(i) * sin_deg(g)
    a2 = c1 * sin_deg(i) * cos_deg(g) - s1 * cos_deg(i)
    u = math.degrees(math.atan2(a1, a2))
    h = c1 * sin_deg(i) - s1 * cos_deg(i) * cos_deg(g)
    psi = math.degrees(math.atan2(s1 * sin_deg(g), h))

    center = math.degrees(center)
    lam = mean_longitude + center + u - g - psi
    gam = math.degrees(math.asin(math.sqrt(a1 * a1 + a2 * a2)))
    r = a * (1 - e2) / (1 + e * cos_deg(m + center))
    w = SATURN_ASCENDING_NODE_DEG + u
    return lam, gam, r, w


def saturn_moon_position(lam: float, gam: float, node: float, r: float) -> np.ndarray:
    """Position in AU (engine axes) from equatorial longitude, inclination, node and radius."""
    u = -math.radians(lam - node)
    w = -math.radians(node - SATURN_ASCENDING_NODE_DEG)
    gam = -math.radians(gam)
    r *= SATURN_RADIUS_KM

    su, cu = math.sin(u), math.cos(u)
    sw, cw = math.sin(w), math.cos(w)
    sg, cg = math.sin(gam), math.cos(gam)
    x = r * (cu * cw - su * sw * cg)
    y = r * su * sg
    z = r * (su * cw * cg + cu * sw)
    return au_from_km(np.array([x, y, -z]))


class TitanOrbit(Orbit):
    orbit_type = OrbitType.TITAN
    period = 15.94544758

    def position_at_time(self, jd: float) -> np.ndarray:
        el = saturnian_elements(jd)
        e1 = 0.05589 - 0.000346 * el.t7

        mean_lon = 261.1582 + 22.57697855 * el.t4 + 0.074025 * sin_deg(el.w3)
        i_ = 27.45141 + 0.295999 * cos_deg(el.w3)
        node_ = 168.66925 + 0.628808 * sin_deg(el.w3)
        a1 = sin_deg(el.w7) * sin_deg(node_ - el.w8)
        a2 = cos_deg(el.w7) * sin_deg(i_) - sin_deg(el.w7) * cos_deg(i_) * cos_deg(node_ - el.w8)
        psi = math.degrees(math.atan2(a1, a2))
        s = math.sqrt(a1 * a1 + a2 * a2)
        g = el.w4 - node_ - psi

        # Three successive approximations always converge
        om = 0.0
        for _ in range(3):
            om = el.w4 + 0.37515 * (sin_deg(2 * g) - sin_deg(2 * TITAN_G0_DEG))
            g = om - node_ - psi

        e_ = 0.029092 + 0.00019048 * (cos_deg(2 * g) - cos_deg(2 * TITAN_G0_DEG))
        q = 2 * (el.w5 - om)
        b1 = sin_deg(i_) * sin_deg(node_ - el.w8)
        b2 = cos_deg(el.w7) * sin_deg(i_) * cos_deg(node_ - el.w8) - sin_deg(el.w7) * cos_deg(i_)
        theta = math.degrees(math.atan2(b1, b2)) + el.w8
        e = e_ + 0.002778797 * e_ * cos_deg(q)
        p = om + 0.159215 * sin_deg(q)
        u = 2 * el.w5 - 2 * theta + psi
        h = 0.9375 * e_ * e_ * sin_deg(q) + 0.1875 * s * s * sin_deg(2 * (el.w5 - theta))
        lam_ = mean_lon - 0.254744 * (e1 * sin_deg(el.w6) + 0.75 * e1 * e1 * sin_deg(2 * el.w6) + h)
        i = i_ + 0.031843 * s * cos_deg(u)
        node = node_ + (0.031843 * s * sin_deg(u)) / sin_deg(i_)

        lam, gam, r, w = outer_moon_params(TITAN_SEMI_MAJOR_AXIS, e, i, node, lam_ - p, lam_)
        return saturn_moon_position(lam, gam, w, r)
