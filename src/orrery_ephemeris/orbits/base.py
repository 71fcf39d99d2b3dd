"""Orbit model interface and orbit type tags."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

import numpy as np

from orrery_ephemeris.constants import VELOCITY_DELTA_DAYS


class OrbitType(IntEnum):
    """Closed set of orbit theories, one per body."""

    MERCURY = 0
    VENUS = 1
    EARTH = 2
    MARS = 3
    JUPITER = 4
    SATURN = 5
    URANUS = 6
    NEPTUNE = 7
    LUNAR = 8
    IO = 9
    EUROPA = 10
    GANYMEDE = 11
    CALLISTO = 12
    TITAN = 13
    SUN = 14
    NONE = 15


class Orbit(ABC):
    """Position of a body relative to its parent, in AU, engine axes (+Y = pole).

    Positions are pure functions of the Julian Day (TDB); instances hold only
    immutable coefficients.
    """

    orbit_type: OrbitType = OrbitType.NONE
    period: float = 0.0  # days

    @abstractmethod
    def position_at_time(self, jd: float) -> np.ndarray:
        """Return (x, y, z) in AU at Julian Day jd."""

    def velocity_at_time(self, jd: float) -> np.ndarray:
        """Return velocity in AU/day by symmetric difference over one minute.

        The truncation error grows with the square of the step and the
        curvature of the path; short-period moons are the least accurate.
        """
        dt = VELOCITY_DELTA_DAYS
        p0 = self.position_at_time(jd - dt)
        p1 = self.position_at_time(jd + dt)
        return (p1 - p0) / (2.0 * dt)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.orbit_type.name}, period={self.period})'
