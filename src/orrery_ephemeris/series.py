"""Evaluation of VSOP87-style periodic series.

A coordinate is ``sum_k t**k * sum_i A[k, i] * cos(B[k, i] + C[k, i] * t)``
with t in Julian millennia from J2000. Term groups are converted once to
(n, 3) numpy arrays and shared read-only afterwards.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

Term = tuple[float, float, float]
TermGroups = Sequence[Sequence[Term]]


@dataclass(frozen=True)
class PowerSeries:
    """Term groups of one coordinate, indexed by ascending power of t."""

    groups: tuple[np.ndarray, ...]

    @classmethod
    def from_terms(cls, groups: TermGroups) -> PowerSeries:
        arrays = []
        for group in groups:
            arr = np.array(group, dtype=np.float64).reshape(-1, 3)
            arr.setflags(write=False)
            arrays.append(arr)
        return cls(tuple(arrays))

    def __call__(self, t: float) -> float:
        return evaluate_series(self.groups, t)

    @property
    def term_count(self) -> int:
        return sum(len(g) for g in self.groups)


def sum_terms(terms: np.ndarray, t: float) -> float:
    """Return sum of A * cos(B + C * t) over one (n, 3) group."""
    if len(terms) == 0:
        return 0.0
    return float(np.dot(terms[:, 0], np.cos(terms[:, 1] + terms[:, 2] * t)))


def evaluate_series(groups: Sequence[np.ndarray], t: float) -> float:
    """Evaluate the power series in t with Horner's scheme.

    Parameters:
        groups: One (n, 3) array per power of t, lowest power first.
        t: Time argument (Julian millennia from J2000 for VSOP87).

    Returns:
        Series value.
    """
    total = 0.0
    for terms in reversed(groups):
        total = total * t + sum_terms(terms, t)
    return total


@dataclass(frozen=True)
class SphericalSeries:
    """Heliocentric longitude, latitude (radians) and radius (AU) series."""

    longitude: PowerSeries
    latitude: PowerSeries
    radius: PowerSeries

    @classmethod
    def from_table(cls, table: Mapping[str, TermGroups]) -> SphericalSeries:
        return cls(
            PowerSeries.from_terms(table['L']),
            PowerSeries.from_terms(table['B']),
            PowerSeries.from_terms(table['R']),
        )

    def coordinates(self, t: float) -> tuple[float, float, float]:
        """Return (L, B, R) at t millennia from J2000."""
        return self.longitude(t), self.latitude(t), self.radius(t)


@dataclass(frozen=True)
class RectangularSeries:
    """Rectangular X, Y, Z (AU) series."""

    x: PowerSeries
    y: PowerSeries
    z: PowerSeries

    @classmethod
    def from_table(cls, table: Mapping[str, TermGroups]) -> RectangularSeries:
        return cls(
            PowerSeries.from_terms(table['X']),
            PowerSeries.from_terms(table['Y']),
            PowerSeries.from_terms(table['Z']),
        )

    def coordinates(self, t: float) -> tuple[float, float, float]:
        return self.x(t), self.y(t), self.z(t)


def spherical_to_engine(longitude: float, latitude: float, radius: float) -> np.ndarray:
    """Convert ecliptic (L, B, R) to engine Cartesian axes.

    Latitude is shifted to a polar angle (B - pi/2) and longitude rotated by pi;
    the ecliptic pole maps to +Y.

    Returns:
        (x, y, z) array in the unit of radius.
    """
    b = latitude - 0.5 * math.pi
    lon = longitude + math.pi
    return np.array(
        [
            math.cos(lon) * math.sin(b) * radius,
            math.cos(b) * radius,
            math.sin(lon) * math.sin(b) * radius,
        ]
    )


def rectangular_to_engine(x: float, y: float, z: float) -> np.ndarray:
    """Map rectangular (X, Y, Z) to engine axes (X, Z, Y)."""
    return np.array([x, z, y])


def spherical_position(series: SphericalSeries, t: float) -> np.ndarray:
    """Engine Cartesian position from an L/B/R series at t millennia from J2000."""
    return spherical_to_engine(*series.coordinates(t))


def rectangular_position(series: RectangularSeries, t: float) -> np.ndarray:
    """Engine Cartesian position from an X/Y/Z series at t millennia from J2000."""
    return rectangular_to_engine(*series.coordinates(t))
