"""Planetary orbits from VSOP87 series (spherical for planets, rectangular for the Sun)."""

from __future__ import annotations

from collections.abc import Mapping

import numpy as np

from orrery_ephemeris import vsop87_data
from orrery_ephemeris.orbits.base import Orbit, OrbitType
from orrery_ephemeris.series import (
    RectangularSeries,
    SphericalSeries,
    TermGroups,
    rectangular_position,
    spherical_position,
)
from orrery_ephemeris.time_utils import julian_millennium


class Vsop87Orbit(Orbit):
    """Heliocentric planet position from L/B/R series."""

    def __init__(self, orbit_type: OrbitType, table: Mapping[str, TermGroups], period: float) -> None:
        self.orbit_type = orbit_type
        self.period = period
        self.series = SphericalSeries.from_table(table)

    def spherical_at_time(self, jd: float) -> tuple[float, float, float]:
        """Return heliocentric ecliptic (L rad, B rad, R AU) of date."""
        return self.series.coordinates(julian_millennium(jd))

    def position_at_time(self, jd: float) -> np.ndarray:
        return spherical_position(self.series, julian_millennium(jd))


class Vsop87RectOrbit(Orbit):
    """Position from X/Y/Z series, returned with the Y and Z axes exchanged."""

    def __init__(self, orbit_type: OrbitType, table: Mapping[str, TermGroups], period: float) -> None:
        self.orbit_type = orbit_type
        self.period = period
        self.series = RectangularSeries.from_table(table)

    def position_at_time(self, jd: float) -> np.ndarray:
        return rectangular_position(self.series, julian_millennium(jd))


VSOP87_TABLES: dict[OrbitType, Mapping[str, TermGroups]] = {
    OrbitType.MERCURY: vsop87_data.MERCURY,
    OrbitType.VENUS: vsop87_data.VENUS,
    OrbitType.EARTH: vsop87_data.EARTH,
    OrbitType.MARS: vsop87_data.MARS,
    OrbitType.JUPITER: vsop87_data.JUPITER,
    OrbitType.SATURN: vsop87_data.SATURN,
    OrbitType.URANUS: vsop87_data.URANUS,
    OrbitType.NEPTUNE: vsop87_data.NEPTUNE,
}
