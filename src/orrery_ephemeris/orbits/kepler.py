"""Two-body elliptical orbits for illustrative orbit paths.

Phase is time in orbital periods. Kepler's equation is solved by a fixed 20
rounds of successive substitution with no convergence test; this is exact to
double precision for moderate eccentricity and degrades as e approaches 1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from orrery_ephemeris.constants import J2000
from orrery_ephemeris.orbits.base import Orbit, OrbitType
from orrery_ephemeris.quaternion import Quaternion

KEPLER_ITERATIONS = 20
ORBIT_LINE_SAMPLES = 200
MAX_LINE_ECCENTRICITY = 0.999
# Phase zero: 2000 Jan 1 00:00
PHASE_EPOCH_JD = J2000 - 0.5

_X_AXIS = (1.0, 0.0, 0.0)
_Y_AXIS = (0.0, 1.0, 0.0)


@dataclass(frozen=True)
class KeplerElements:
    """Mean orbital elements; angles in degrees, period in days.

    Defaults describe the Earth's orbit.
    """

    semi_major_axis: float = 1.0
    eccentricity: float = 0.01673
    inclination: float = 0.0
    ascending_node: float = 0.0
    periapsis_longitude: float = 102.93
    mean_longitude_at_epoch: float = 100.47
    period: float = 1.0


def mean_anomaly(elements: KeplerElements, phase: float) -> float:
    """Mean anomaly in radians at the given phase (periods since epoch)."""
    return phase * 2.0 * math.pi + math.radians(
        elements.mean_longitude_at_epoch - elements.periapsis_longitude
    )


def solve_kepler(m: float, e: float, iterations: int = KEPLER_ITERATIONS) -> float:
    """Solve E = M + e sin E by successive substitution.

    Parameters:
        m: Mean anomaly (radians).
        e: Eccentricity, 0 <= e < 1.
        iterations: Fixed number of rounds.

    Returns:
        Eccentric anomaly E (radians).
    """
    ecc_anomaly = m
    for _ in range(iterations):
        ecc_anomaly = m + e * math.sin(ecc_anomaly)
    return ecc_anomaly


def true_anomaly(ecc_anomaly: float, e: float) -> float:
    return 2.0 * math.atan(math.sqrt((1.0 + e) / (1.0 - e)) * math.tan(ecc_anomaly / 2.0))


def orbital_plane_position(a: float, e: float, m: float) -> np.ndarray:
    """Position in the orbital plane (periapsis along +X, motion toward +Z).

    Parameters:
        a: Semi-major axis.
        e: Eccentricity.
        m: Mean anomaly (radians).

    Returns:
        (x, 0, z) in the unit of a.
    """
    v = true_anomaly(solve_kepler(m, e), e)
    r = a * (1.0 - e * e) / (1.0 + e * math.cos(v))
    return np.array([math.cos(v), 0.0, math.sin(v)]) * r


class KeplerOrbit(Orbit):
    """Fixed-element ellipse; time enters as phase = (jd - 2000 Jan 1.0) / period."""

    def __init__(self, elements: KeplerElements | None = None) -> None:
        self.elements = elements or KeplerElements()
        self.orbit_type = OrbitType.NONE
        self.period = self.elements.period

    def phase_at_time(self, jd: float) -> float:
        return (jd - PHASE_EPOCH_JD) / self.elements.period

    def position_at_phase(self, phase: float, eccentricity: float | None = None) -> np.ndarray:
        """Orbital-plane position at phase (unrotated)."""
        el = self.elements
        e = el.eccentricity if eccentricity is None else eccentricity
        return orbital_plane_position(el.semi_major_axis, e, mean_anomaly(el, phase))

    def orientation(self) -> Quaternion:
        """Rotation from the orbital plane to the reference plane (node, inclination, periapsis)."""
        el = self.elements
        return (
            Quaternion.from_axis_angle(_Y_AXIS, math.radians(-el.ascending_node))
            * Quaternion.from_axis_angle(_X_AXIS, math.radians(-el.inclination))
            * Quaternion.from_axis_angle(
                _Y_AXIS, math.radians(-el.periapsis_longitude + el.ascending_node)
            )
        )

    def world_position_at_phase(self, phase: float) -> np.ndarray:
        return self.orientation().rotate(self.position_at_phase(phase))

    def position_at_time(self, jd: float) -> np.ndarray:
        return self.world_position_at_phase(self.phase_at_time(jd))

    def speed_at_phase(self, phase: float, epsilon: float = 1e-4) -> float:
        """Distance covered between phase - epsilon and phase + epsilon."""
        p0 = self.position_at_phase(phase - epsilon)
        p1 = self.position_at_phase(phase + epsilon)
        return float(np.linalg.norm(p1 - p0))

    def orbit_line(self, jd: float | None = None, samples: int = ORBIT_LINE_SAMPLES) -> np.ndarray:
        """Sample one full revolution in the orbital plane.

        Eccentricity is clamped to 0.999 so the path stays closed.

        Parameters:
            jd: Julian Day of the first sample (phase 0 when None).
            samples: Number of points.

        Returns:
            (samples, 3) array of unrotated positions.
        """
        e = min(max(self.elements.eccentricity, 0.0), MAX_LINE_ECCENTRICITY)
        start = 0.0 if jd is None else self.phase_at_time(jd)
        return np.array(
            [self.position_at_phase(start + i / samples, eccentricity=e) for i in range(samples)]
        )
