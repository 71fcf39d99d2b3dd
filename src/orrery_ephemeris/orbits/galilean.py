"""Jovicentric positions of Io, Europa, Ganymede and Callisto (Lieske E2x3 series).

All four theories share one set of mean elements computed by
:func:`galilean_elements`. Longitude corrections are summed in degrees,
latitude corrections as the tangent of the latitude, and radii in units of
the theory's semi-major axis.
"""

from __future__ import annotations

import math
from abc import abstractmethod
from dataclasses import dataclass

import numpy as np

from orrery_ephemeris.angle_utils import au_from_km, pfmod
from orrery_ephemeris.constants import B1950, JUPITER_RADIUS_KM
from orrery_ephemeris.orbits.base import Orbit, OrbitType
from orrery_ephemeris.series import spherical_to_engine

GALILEAN_EPOCH_JD = 2443000.5  # 1976 Aug 10
LPEJ = 0.23509484  # longitude of perihelion of Jupiter (radians)
JUPITER_ASCENDING_NODE = math.radians(22.203)


@dataclass(frozen=True)
class GalileanElements:
    """Mean longitudes (l), perijove longitudes (p), node longitudes (w) and Jupiter angles.

    All angles in radians.
    """

    l1: float
    l2: float
    l3: float
    l4: float
    p1: float
    p2: float
    p3: float
    p4: float
    w1: float
    w2: float
    w3: float
    w4: float
    gamma: float
    phi: float
    psi: float
    g: float  # mean anomaly of Jupiter (with gamma)
    g_saturn: float  # mean anomaly of Saturn


def galilean_elements(jd: float) -> GalileanElements:
    """Mean elements of the Galilean system at Julian Day jd."""
    t = jd - GALILEAN_EPOCH_JD
    gamma = 5.7653e-3 * math.sin(2.85674 + 1.8347e-5 * t) + 6.002e-4 * math.sin(
        0.60189 - 2.82274e-4 * t
    )
    return GalileanElements(
        l1=1.8513962 + 3.551552269981 * t,
        l2=3.0670952 + 1.769322724929 * t,
        l3=2.1041485 + 0.87820795239 * t,
        l4=1.473836 + 0.37648621522 * t,
        p1=1.69451 + 2.8167146e-3 * t,
        p2=2.702927 + 8.248962e-4 * t,
        p3=3.28443 + 1.24396e-4 * t,
        p4=5.851859 + 3.21e-5 * t,
        w1=5.451267 - 2.3176901e-3 * t,
        w2=1.753028 - 5.695121e-4 * t,
        w3=2.080331 - 1.25263e-4 * t,
        w4=5.630757 - 3.07063e-5 * t,
        gamma=gamma,
        phi=3.485014 + 3.033241e-3 * t,
        psi=5.524285 - 3.63e-8 * t,
        g=0.527745 + 1.45023893e-3 * t + gamma,
        g_saturn=0.5581306 + 5.83982523e-4 * t,
    )


def _sigma_radians(sigma_deg: float) -> float:
    return math.radians(pfmod(sigma_deg, 360.0))


def jovicentric_position(jd: float, longitude: float, tan_latitude: float, radius_km: float) -> np.ndarray:
    """Final assembly shared by the four moons.

    Adds the precession since B1950 and Jupiter's ascending node to the
    longitude, then converts to engine axes in AU.
    """
    t = (jd - B1950) / 36525.0
    precession = math.radians(1.3966626 * t + 3.088e-4 * t * t)
    lon = longitude + precession + JUPITER_ASCENDING_NODE
    return au_from_km(spherical_to_engine(lon, math.atan(tan_latitude), radius_km))


class GalileanOrbit(Orbit):
    """Base for the four moons; subclasses provide the three series."""

    semi_major_axis = 0.0  # Jupiter radii

    @abstractmethod
    def series(self, el: GalileanElements) -> tuple[float, float, float]:
        """Return (true longitude rad, tangent of latitude, radius factor - 1)."""

    def position_at_time(self, jd: float) -> np.ndarray:
        longitude, tan_lat, radius = self.series(galilean_elements(jd))
        radius_km = self.semi_major_axis * JUPITER_RADIUS_KM * (1.0 + radius)
        return jovicentric_position(jd, longitude, tan_lat, radius_km)


class IoOrbit(GalileanOrbit):
    orbit_type = OrbitType.IO
    period = 1.769138
    semi_major_axis = 5.90569

    def series(self, el: GalileanElements) -> tuple[float, float, float]:
        l1, l2, l3 = el.l1, el.l2, el.l3
        p1, p2, p3, p4 = el.p1, el.p2, el.p3, el.p4
        w1, w2, w3, w4 = el.w1, el.w2, el.w3, el.w4
        psi, phi, g = el.psi, el.phi, el.g
        sin, cos = math.sin, math.cos

        sigma = (
            0.47259 * sin(2 * (l1 - l2)) - 0.03478 * sin(p3 - p4)
            + 0.01081 * sin(l2 - 2 * l3 + p3) + 7.38e-3 * sin(phi)
            + 7.13e-3 * sin(l2 - 2 * l3 + p2) - 6.74e-3 * sin(p1 + p3 - 2 * LPEJ - 2 * g)
            + 6.66e-3 * sin(l2 - 2 * l3 + p4) + 4.45e-3 * sin(l1 - p3)
            - 3.54e-3 * sin(l1 - l2) - 3.17e-3 * sin(2 * (psi - LPEJ))
            + 2.65e-3 * sin(l1 - p4) - 1.86e-3 * sin(g)
            + 1.62e-3 * sin(p2 - p3) + 1.58e-3 * sin(4 * (l1 - l2))
            - 1.55e-3 * sin(l1 - l3) - 1.38e-3 * sin(psi + w3 - 2 * LPEJ - 2 * g)
            - 1.15e-3 * sin(2 * (l1 - 2 * l2 + w2)) + 8.9e-4 * sin(p2 - p4)
            + 8.5e-4 * sin(l1 + p3 - 2 * LPEJ - 2 * g) + 8.3e-4 * sin(w2 - w3)
            + 5.3e-4 * sin(psi - w2)
        )
        sigma = _sigma_radians(sigma)
        lon = l1 + sigma

        tan_lat = (
            6.393e-4 * sin(lon - w1) + 1.825e-4 * sin(lon - w2)
            + 3.29e-5 * sin(lon - w3) - 3.11e-5 * sin(lon - psi)
            + 9.3e-6 * sin(lon - w4) + 7.5e-6 * sin(3 * lon - 4 * l2 - 1.9927 * sigma + w2)
            + 4.6e-6 * sin(lon + psi - 2 * LPEJ - 2 * g)
        )

        radius = (
            -4.1339e-3 * cos(2 * (l1 - l2)) - 3.87e-5 * cos(l1 - p3)
            - 2.14e-5 * cos(l1 - p4) + 1.7e-5 * cos(l1 - l2)
            - 1.31e-5 * cos(4 * (l1 - l2)) + 1.06e-5 * cos(l1 - l3)
            - 6.6e-6 * cos(l1 + p3 - 2 * LPEJ - 2 * g)
        )
        return lon, tan_lat, radius


class EuropaOrbit(GalileanOrbit):
    orbit_type = OrbitType.EUROPA
    period = 3.5511810791
    semi_major_axis = 9.39657

    def series(self, el: GalileanElements) -> tuple[float, float, float]:
        l1, l2, l3, l4 = el.l1, el.l2, el.l3, el.l4
        p1, p2, p3, p4 = el.p1, el.p2, el.p3, el.p4
        w1, w2, w3, w4 = el.w1, el.w2, el.w3, el.w4
        psi, phi, g, gp = el.psi, el.phi, el.g, el.g_saturn
        sin, cos = math.sin, math.cos

        sigma = (
            1.06476 * sin(2 * (l2 - l3)) + 0.04256 * sin(l1 - 2 * l2 + p3)
            + 0.03581 * sin(l2 - p3) + 0.02395 * sin(l1 - 2 * l2 + p4)
            + 0.01984 * sin(l2 - p4) - 0.01778 * sin(phi)
            + 0.01654 * sin(l2 - p2) + 0.01334 * sin(l2 - 2 * l3 + p2)
            + 0.01294 * sin(p3 - p4) - 0.01142 * sin(l2 - l3)
            - 0.01057 * sin(g) - 7.75e-3 * sin(2 * (psi - LPEJ))
            + 5.24e-3 * sin(2 * (l1 - l2)) - 4.6e-3 * sin(l1 - l3)
            + 3.16e-3 * sin(psi - 2 * g + w3 - 2 * LPEJ) - 2.03e-3 * sin(p1 + p3 - 2 * LPEJ - 2 * g)
            + 1.46e-3 * sin(psi - w3) - 1.45e-3 * sin(2 * g)
            + 1.25e-3 * sin(psi - w4) - 1.15e-3 * sin(l1 - 2 * l3 + p3)
            - 9.4e-4 * sin(2 * (l2 - w2)) + 8.6e-4 * sin(2 * (l1 - 2 * l2 + w2))
            - 8.6e-4 * sin(5 * gp - 2 * g + 0.9115) - 7.8e-4 * sin(l2 - l4)
            - 6.4e-4 * sin(3 * l3 - 7 * l4 + 4 * p4) + 6.4e-4 * sin(p1 - p4)
            - 6.3e-4 * sin(l1 - 2 * l3 + p4) + 5.8e-4 * sin(w3 - w4)
            + 5.6e-4 * sin(2 * (psi - LPEJ - g)) + 5.6e-4 * sin(2 * (l2 - l4))
            + 5.5e-4 * sin(2 * (l1 - l3)) + 5.2e-4 * sin(3 * l3 - 7 * l4 + p3 + 3 * p4)
            - 4.3e-4 * sin(l1 - p3) + 4.1e-4 * sin(5 * (l2 - l3))
            + 4.1e-4 * sin(p4 - LPEJ) + 3.2e-4 * sin(w2 - w3)
            + 3.2e-4 * sin(2 * (l3 - g - LPEJ))
        )
        sigma = _sigma_radians(sigma)
        lon = l2 + sigma

        tan_lat = (
            8.1004e-3 * sin(lon - w2) + 4.512e-4 * sin(lon - w3)
            - 3.284e-4 * sin(lon - psi) + 1.160e-4 * sin(lon - w4)
            + 2.72e-5 * sin(l1 - 2 * l3 + 1.0146 * sigma + w2) - 1.44e-5 * sin(lon - w1)
            + 1.43e-5 * sin(lon + psi - 2 * LPEJ - 2 * g) + 3.5e-6 * sin(lon - psi + g)
            - 2.8e-6 * sin(l1 - 2 * l3 + 1.0146 * sigma + w3)
        )

        radius = (
            9.3848e-3 * cos(l1 - l2) - 3.116e-4 * cos(l2 - p3)
            - 1.744e-4 * cos(l2 - p4) - 1.442e-4 * cos(l2 - p2)
            + 5.53e-5 * cos(l2 - l3) + 5.23e-5 * cos(l1 - l3)
            - 2.9e-5 * cos(2 * (l1 - l2)) + 1.64e-5 * cos(2 * (l2 - w2))
            + 1.07e-5 * cos(l1 - 2 * l3 + p3) - 1.02e-5 * cos(l2 - p1)
            - 9.1e-6 * cos(2 * (l1 - l3))
        )
        return lon, tan_lat, radius


class GanymedeOrbit(GalileanOrbit):
    orbit_type = OrbitType.GANYMEDE
    period = 7.154553
    semi_major_axis = 14.98832

    def series(self, el: GalileanElements) -> tuple[float, float, float]:
        l1, l2, l3, l4 = el.l1, el.l2, el.l3, el.l4
        p1, p2, p3, p4 = el.p1, el.p2, el.p3, el.p4
        w2, w3, w4 = el.w2, el.w3, el.w4
        psi, phi, g, gp = el.psi, el.phi, el.g, el.g_saturn
        sin, cos = math.sin, math.cos

        sigma = (
            0.1649 * sin(l3 - p3) + 0.09081 * sin(l3 - p4)
            - 0.06907 * sin(l2 - l3) + 0.03784 * sin(p3 - p4)
            + 0.01846 * sin(2 * (l3 - l4)) - 0.01340 * sin(g)
            - 0.01014 * sin(2 * (psi - LPEJ)) + 7.04e-3 * sin(l2 - 2 * l3 + p3)
            - 6.2e-3 * sin(l2 - 2 * l3 + p2) - 5.41e-3 * sin(l3 - l4)
            + 3.81e-3 * sin(l2 - 2 * l3 + p4) + 2.35e-3 * sin(psi - w3)
            + 1.98e-3 * sin(psi - w4) + 1.76e-3 * sin(phi)
            + 1.3e-3 * sin(3 * (l3 - l4)) + 1.25e-3 * sin(l1 - l3)
            - 1.19e-3 * sin(5 * gp - 2 * g + 0.9115) + 1.09e-3 * sin(l1 - l2)
            - 1.0e-3 * sin(3 * l3 - 7 * l4 + 4 * p4) + 9.1e-4 * sin(w3 - w4)
            + 8.0e-4 * sin(3 * l3 - 7 * l4 + p3 + 3 * p4) - 7.5e-4 * sin(2 * l2 - 3 * l3 + p3)
            + 7.2e-4 * sin(p1 + p3 - 2 * LPEJ - 2 * g) + 6.9e-4 * sin(p4 - LPEJ)
            - 5.8e-4 * sin(2 * l3 - 3 * l4 + p4) - 5.7e-4 * sin(l3 - 2 * l4 + p4)
            + 5.6e-4 * sin(l3 + p3 - 2 * LPEJ - 2 * g) - 5.2e-4 * sin(l2 - 2 * l3 + p1)
            - 5.0e-4 * sin(p2 - p3) + 4.8e-4 * sin(l3 - 2 * l4 + p3)
            - 4.5e-4 * sin(2 * l2 - 3 * l3 + p4) - 4.1e-4 * sin(p2 - p4)
            - 3.8e-4 * sin(2 * g) - 3.7e-4 * sin(p3 - p4 + w3 - w4)
            - 3.2e-4 * sin(3 * l3 - 7 * l4 + 2 * p3 + 2 * p4) + 3.0e-4 * sin(4 * (l3 - l4))
            + 2.9e-4 * sin(l3 + p4 - 2 * LPEJ - 2 * g) - 2.8e-4 * sin(w3 + psi - 2 * LPEJ - 2 * g)
            + 2.6e-4 * sin(l3 - LPEJ - g) + 2.4e-4 * sin(l2 - 3 * l3 + 2 * l4)
            + 2.1e-4 * sin(2 * (l3 - LPEJ - g)) - 2.1e-4 * sin(l3 - p2)
            + 1.7e-4 * sin(l3 - p3)
        )
        sigma = _sigma_radians(sigma)
        lon = l3 + sigma

        tan_lat = (
            3.2402e-3 * sin(lon - w3) - 1.6911e-3 * sin(lon - psi)
            + 6.847e-4 * sin(lon - w4) - 2.797e-4 * sin(lon - w2)
            + 3.21e-5 * sin(lon + psi - 2 * LPEJ - 2 * g) + 5.1e-6 * sin(lon - psi + g)
            - 4.5e-6 * sin(lon - psi - g) - 4.5e-6 * sin(lon + psi - 2 * LPEJ)
            + 3.7e-6 * sin(lon + psi - 2 * LPEJ - 3 * g)
            + 3.0e-6 * sin(2 * l2 - 3 * lon + 4.03 * sigma + w2)
            - 2.1e-6 * sin(2 * l2 - 3 * lon + 4.03 * sigma + w3)
        )

        radius = (
            -1.4388e-3 * cos(l3 - p3) - 7.919e-4 * cos(l3 - p4)
            + 6.342e-4 * cos(l2 - l3) - 1.761e-4 * cos(2 * (l3 - l4))
            + 2.94e-5 * cos(l3 - l4) - 1.56e-5 * cos(3 * (l3 - l4))
            + 1.56e-5 * cos(l1 - l3) - 1.53e-5 * cos(l1 - l2)
            + 7.0e-6 * cos(2 * l2 - 3 * l3 + p3) - 5.1e-6 * cos(l3 + p3 - 2 * LPEJ - 2 * g)
        )
        return lon, tan_lat, radius


class CallistoOrbit(GalileanOrbit):
    orbit_type = OrbitType.CALLISTO
    period = 16.689018
    semi_major_axis = 26.36273

    def series(self, el: GalileanElements) -> tuple[float, float, float]:
        l1, l2, l3, l4 = el.l1, el.l2, el.l3, el.l4
        p3, p4 = el.p3, el.p4
        w3, w4 = el.w3, el.w4
        psi, g, gp = el.psi, el.g, el.g_saturn
        sin, cos = math.sin, math.cos

        sigma = (
            0.84287 * sin(l4 - p4)
            + 0.03431 * sin(p4 - p3)
            - 0.03305 * sin(2 * (psi - LPEJ))
            - 0.03211 * sin(g)
            - 0.01862 * sin(l4 - p3)
            + 0.01186 * sin(psi - w4)
            + 6.23e-3 * sin(l4 + p4 - 2 * g - 2 * LPEJ)
            + 3.87e-3 * sin(2 * (l4 - p4))
            - 2.84e-3 * sin(5 * gp - 2 * g + 0.9115)
            - 2.34e-3 * sin(2 * (psi - p4))
            - 2.23e-3 * sin(l3 - l4)
            - 2.08e-3 * sin(l4 - LPEJ)
            + 1.78e-3 * sin(psi + w4 - 2 * p4)
            + 1.34e-3 * sin(p4 - LPEJ)
            + 1.25e-3 * sin(2 * (l4 - g - LPEJ))
            - 1.17e-3 * sin(2 * g)
            - 1.12e-3 * sin(2 * (l3 - l4))
            + 1.07e-3 * sin(3 * l3 - 7 * l4 + 4 * p4)
            + 1.02e-3 * sin(l4 - g - LPEJ)
            + 9.6e-4 * sin(2 * l4 - psi - w4)
            + 8.7e-4 * sin(2 * (psi - w4))
            - 8.5e-4 * sin(3 * l3 - 7 * l4 + p3 + 3 * p4)
            + 8.5e-4 * sin(l3 - 2 * l4 + p4)
            - 8.1e-4 * sin(2 * (l4 - psi))
            + 7.1e-4 * sin(l4 + p4 - 2 * LPEJ - 3 * g)
            + 6.1e-4 * sin(l1 - l4)
            - 5.6e-4 * sin(psi - w3)
            - 5.4e-4 * sin(l3 - 2 * l4 + p3)
            + 5.1e-4 * sin(l2 - l4)
            + 4.2e-4 * sin(2 * (psi - g - LPEJ))
            + 3.9e-4 * sin(2 * (p4 - w4))
            + 3.6e-4 * sin(psi + LPEJ - p4 - w4)
            + 3.5e-4 * sin(2 * gp - g + 3.2877)
            - 3.5e-4 * sin(l4 - p4 + 2 * LPEJ - 2 * psi)
            - 3.2e-4 * sin(l4 + p4 - 2 * LPEJ - g)
            + 3.0e-4 * sin(2 * gp - 2 * g + 2.6032)
            + 2.9e-4 * sin(3 * l3 - 7 * l4 + 2 * p3 + 2 * p4)
            + 2.8e-4 * sin(l4 - p4 + 2 * psi - 2 * LPEJ)
            - 2.8e-4 * sin(2 * (l4 - w4))
            - 2.7e-4 * sin(p3 - p4 + w3 - w4)
            - 2.6e-4 * sin(5 * gp - 3 * g + 3.2877)
            + 2.5e-4 * sin(w4 - w3)
            - 2.5e-4 * sin(l2 - 3 * l3 + 2 * l4)
            - 2.3e-4 * sin(3 * (l3 - l4))
            + 2.1e-4 * sin(2 * l4 - 2 * LPEJ - 3 * g)
            - 2.1e-4 * sin(2 * l3 - 3 * l4 + p4)
            + 1.9e-4 * sin(l4 - p4 - g)
            - 1.9e-4 * sin(2 * l4 - p3 - p4)
            - 1.8e-4 * sin(l4 - p4 + g)
            - 1.6e-4 * sin(l4 + p3 - 2 * LPEJ - 2 * g)
        )
        sigma = _sigma_radians(sigma)
        lon = l4 + sigma

        tan_lat = (
            -7.6579e-3 * sin(lon - psi)
            + 4.4134e-3 * sin(lon - w4)
            - 5.112e-4 * sin(lon - w3)
            + 7.73e-5 * sin(lon + psi - 2 * LPEJ - 2 * g)
            + 1.04e-5 * sin(lon - psi + g)
            - 1.02e-5 * sin(lon - psi - g)
            + 8.8e-6 * sin(lon + psi - 2 * LPEJ - 3 * g)
            - 3.8e-6 * sin(lon + psi - 2 * LPEJ - g)
        )

        radius = (
            -7.3546e-3 * cos(l4 - p4)
            + 1.621e-4 * cos(l4 - p3)
            + 9.74e-5 * cos(l3 - l4)
            - 5.43e-5 * cos(l4 + p4 - 2 * LPEJ - 2 * g)
            - 2.71e-5 * cos(2 * (l4 - p4))
            + 1.82e-5 * cos(l4 - LPEJ)
            + 1.77e-5 * cos(2 * (l3 - l4))
            - 1.67e-5 * cos(2 * l4 - psi - w4)
            + 1.67e-5 * cos(psi - w4)
            - 1.55e-5 * cos(2 * (l4 - LPEJ - g))
            + 1.42e-5 * cos(2 * (l4 - psi))
            + 1.05e-5 * cos(l1 - l4)
            + 9.2e-6 * cos(l2 - l4)
            - 8.9e-6 * cos(l4 - LPEJ - g)
            - 6.2e-6 * cos(l4 + p4 - 2 * LPEJ - 3 * g)
            + 4.8e-6 * cos(2 * (l4 - w4))
        )
        return lon, tan_lat, radius
