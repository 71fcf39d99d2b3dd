"""Ephemeris queries by body: parent-relative position, velocity and orientation.

Models are cached per tag and hold immutable coefficients only, so every
query here is safe to run from several threads at once.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TextIO

import numpy as np

from orrery_ephemeris.bodies import BodySpec, get_body
from orrery_ephemeris.orbits import Orbit, OrbitType, create_orbit
from orrery_ephemeris.quaternion import Quaternion
from orrery_ephemeris.rotation import RotationModel, create_rotation_model
from orrery_ephemeris.time_utils import DateFormat, format_date, tdb_to_utc

logger = logging.getLogger(__name__)


def _orbit(body: str | OrbitType) -> Orbit:
    spec = get_body(body)
    orbit = create_orbit(spec.orbit_type)
    if orbit is None:
        raise ValueError(f'{spec.name} has no orbit model')
    return orbit


def _rotation(body: str | OrbitType) -> RotationModel:
    return create_rotation_model(get_body(body).rotation_type)


def parent_of(body: str | OrbitType) -> str | None:
    """Name of the body the position of body is measured from (None for the Sun)."""
    return get_body(body).parent


def position(body: str | OrbitType, jd: float) -> np.ndarray:
    """Position of body relative to its parent.

    Parameters:
        body: Catalog name (case-insensitive) or OrbitType.
        jd: Julian Day (TDB).

    Returns:
        (x, y, z) in AU, engine axes (+Y toward the ecliptic pole for planets).

    Raises:
        ValueError: If body is not in the catalog.
    """
    return _orbit(body).position_at_time(jd)


def velocity(body: str | OrbitType, jd: float) -> np.ndarray:
    """Velocity relative to the parent in AU/day (finite difference)."""
    return _orbit(body).velocity_at_time(jd)


def equator_orientation(body: str | OrbitType, jd: float) -> Quaternion:
    return _rotation(body).equator_orientation(jd)


def spin(body: str | OrbitType, jd: float) -> Quaternion:
    return _rotation(body).spin(jd)


def orientation(body: str | OrbitType, jd: float) -> Quaternion:
    """Full body orientation: the equator orientation applied after the spin."""
    model = _rotation(body)
    return model.equator_orientation(jd) * model.spin(jd)


def sample_positions(body: str | OrbitType, jds: Sequence[float], jobs: int = 1) -> np.ndarray:
    """Evaluate positions at many times.

    Parameters:
        body: Catalog name or OrbitType.
        jds: Julian Days (TDB).
        jobs: Worker threads; 1 evaluates in a plain loop.

    Returns:
        Array of shape (len(jds), 3) in AU, in the order of jds.
    """
    orbit = _orbit(body)
    result = np.empty((len(jds), 3), dtype=np.float64)
    if jobs <= 1 or len(jds) < 2:
        for i, jd in enumerate(jds):
            result[i] = orbit.position_at_time(jd)
        return result

    logger.debug('Sampling %d positions of %s with %d workers', len(jds), body, jobs)
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        future_to_idx = {executor.submit(orbit.position_at_time, jd): i for i, jd in enumerate(jds)}
        for fut in as_completed(future_to_idx):
            result[future_to_idx[fut]] = fut.result()
    return result


def write_position_table(
    stream: TextIO,
    body: str | OrbitType,
    jds: Sequence[float],
    positions: np.ndarray,
    date_format: DateFormat = DateFormat.ISO8601,
) -> None:
    """Write one line per sample: UTC date, JD (TDB), x y z and distance in AU."""
    spec: BodySpec = get_body(body)
    parent = spec.parent or 'barycentre'
    stream.write(f'# {spec.name} relative to {parent}\n')
    stream.write(f'# {"date (UTC)":<23s} {"JD (TDB)":>16s} {"x":>14s} {"y":>14s} {"z":>14s} {"r":>14s}\n')
    for jd, (x, y, z) in zip(jds, positions):
        date = format_date(tdb_to_utc(jd), date_format)
        r = math.sqrt(x * x + y * y + z * z)
        stream.write(f'  {date:<23s} {jd:16.6f} {x:14.9f} {y:14.9f} {z:14.9f} {r:14.9f}\n')
