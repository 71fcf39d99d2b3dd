"""Orbit theories and the tag-to-instance factory."""

from __future__ import annotations

import functools
import logging

from orrery_ephemeris import vsop87_data
from orrery_ephemeris.orbits.base import Orbit, OrbitType
from orrery_ephemeris.orbits.galilean import CallistoOrbit, EuropaOrbit, GanymedeOrbit, IoOrbit
from orrery_ephemeris.orbits.kepler import KeplerElements, KeplerOrbit
from orrery_ephemeris.orbits.lunar import LunarOrbit
from orrery_ephemeris.orbits.saturnian import TitanOrbit
from orrery_ephemeris.orbits.vsop87 import VSOP87_TABLES, Vsop87Orbit, Vsop87RectOrbit
from orrery_ephemeris.rotation import RotationModelType, create_rotation_model

logger = logging.getLogger(__name__)

__all__ = [
    'ORBITAL_PERIODS',
    'KeplerElements',
    'KeplerOrbit',
    'Orbit',
    'OrbitType',
    'create_orbit',
]

# Days; the Sun's series is relative to the solar-system barycentre and has no period.
ORBITAL_PERIODS: dict[OrbitType, float] = {
    OrbitType.MERCURY: 87.9522,
    OrbitType.VENUS: 224.7018,
    OrbitType.EARTH: 365.25,
    OrbitType.MARS: 689.998725,
    OrbitType.JUPITER: 4332.66855,
    OrbitType.SATURN: 10759.42493,
    OrbitType.URANUS: 30686.07698,
    OrbitType.NEPTUNE: 60190.64325,
    OrbitType.LUNAR: LunarOrbit.period,
    OrbitType.IO: IoOrbit.period,
    OrbitType.EUROPA: EuropaOrbit.period,
    OrbitType.GANYMEDE: GanymedeOrbit.period,
    OrbitType.CALLISTO: CallistoOrbit.period,
    OrbitType.TITAN: TitanOrbit.period,
    OrbitType.SUN: 0.0,
}

_MOON_ORBITS: dict[OrbitType, type[Orbit]] = {
    OrbitType.IO: IoOrbit,
    OrbitType.EUROPA: EuropaOrbit,
    OrbitType.GANYMEDE: GanymedeOrbit,
    OrbitType.CALLISTO: CallistoOrbit,
    OrbitType.TITAN: TitanOrbit,
}


@functools.lru_cache(maxsize=None)
def create_orbit(orbit_type: OrbitType | int) -> Orbit | None:
    """Return the shared orbit instance for a tag.

    Parameters:
        orbit_type: OrbitType member or its integer value.

    Returns:
        The orbit model, or None for OrbitType.NONE and unrecognized tags.
        Callers must not ask a missing orbit for positions.
    """
    try:
        tag = OrbitType(orbit_type)
    except ValueError:
        logger.warning('Unknown orbit type %r; no orbit model', orbit_type)
        return None
    if tag in VSOP87_TABLES:
        return Vsop87Orbit(tag, VSOP87_TABLES[tag], ORBITAL_PERIODS[tag])
    if tag == OrbitType.SUN:
        return Vsop87RectOrbit(tag, vsop87_data.SUN, ORBITAL_PERIODS[tag])
    if tag == OrbitType.LUNAR:
        return LunarOrbit(create_rotation_model(RotationModelType.EARTH))
    if tag in _MOON_ORBITS:
        return _MOON_ORBITS[tag]()
    logger.warning('Orbit type %s has no orbit model', tag.name)
    return None
