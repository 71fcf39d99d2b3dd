"""Body catalog: orbit theory, rotation model, parent and radius for each body."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from orrery_ephemeris.constants import (
    EARTH_EQUATORIAL_RADIUS_KM,
    JUPITER_RADIUS_KM,
    SATURN_RADIUS_KM,
    SUN_RADIUS_KM,
)
from orrery_ephemeris.orbits import OrbitType
from orrery_ephemeris.rotation import RotationModelType

logger = logging.getLogger(__name__)


class BodyClass(IntEnum):
    UNKNOWN = 0
    TERRESTRIAL = 1
    GAS_GIANT = 2
    ICE_GIANT = 3
    YELLOW_DWARF = 4


_BODY_CLASS_LABELS: dict[str, dict[BodyClass, str]] = {
    'en': {
        BodyClass.TERRESTRIAL: 'Terrestrial',
        BodyClass.GAS_GIANT: 'Gas Giant',
        BodyClass.ICE_GIANT: 'Ice Giant',
        BodyClass.YELLOW_DWARF: 'Yellow Dwarf',
    },
    'de': {
        BodyClass.TERRESTRIAL: 'Terrestrisch',
        BodyClass.GAS_GIANT: 'Gasriese',
        BodyClass.ICE_GIANT: 'Eisriese',
        BodyClass.YELLOW_DWARF: 'Gelber Zwerg',
    },
}
_UNKNOWN_LABELS = {'en': 'Unknown', 'de': 'Unbekannt'}


def body_class_label(body_class: BodyClass, language: str = 'en') -> str:
    """Display name of a body class in English ('en') or German ('de')."""
    lang = language.lower()
    labels = _BODY_CLASS_LABELS.get(lang, _BODY_CLASS_LABELS['en'])
    return labels.get(body_class, _UNKNOWN_LABELS.get(lang, 'Unknown'))


@dataclass(frozen=True)
class BodySpec:
    """One body of the catalog.

    The parent is the body the orbit theory is relative to; None for the Sun.
    """

    name: str
    orbit_type: OrbitType
    rotation_type: RotationModelType
    parent: str | None
    radius_km: float
    body_class: BodyClass = BodyClass.UNKNOWN


BODIES: tuple[BodySpec, ...] = (
    BodySpec('Sun', OrbitType.SUN, RotationModelType.SUN, None, SUN_RADIUS_KM, BodyClass.YELLOW_DWARF),
    BodySpec('Mercury', OrbitType.MERCURY, RotationModelType.MERCURY, 'Sun', 2439.7, BodyClass.TERRESTRIAL),
    BodySpec('Venus', OrbitType.VENUS, RotationModelType.VENUS, 'Sun', 6051.8, BodyClass.TERRESTRIAL),
    BodySpec(
        'Earth', OrbitType.EARTH, RotationModelType.EARTH, 'Sun', EARTH_EQUATORIAL_RADIUS_KM,
        BodyClass.TERRESTRIAL,
    ),
    BodySpec('Mars', OrbitType.MARS, RotationModelType.MARS, 'Sun', 3396.19, BodyClass.TERRESTRIAL),
    BodySpec('Jupiter', OrbitType.JUPITER, RotationModelType.JUPITER, 'Sun', JUPITER_RADIUS_KM, BodyClass.GAS_GIANT),
    BodySpec('Saturn', OrbitType.SATURN, RotationModelType.SATURN, 'Sun', SATURN_RADIUS_KM, BodyClass.GAS_GIANT),
    BodySpec('Uranus', OrbitType.URANUS, RotationModelType.URANUS, 'Sun', 25559.0, BodyClass.ICE_GIANT),
    BodySpec('Neptune', OrbitType.NEPTUNE, RotationModelType.NEPTUNE, 'Sun', 24764.0, BodyClass.ICE_GIANT),
    BodySpec('Moon', OrbitType.LUNAR, RotationModelType.LUNAR, 'Earth', 1737.4, BodyClass.TERRESTRIAL),
    BodySpec('Io', OrbitType.IO, RotationModelType.IO, 'Jupiter', 1821.6, BodyClass.TERRESTRIAL),
    BodySpec('Europa', OrbitType.EUROPA, RotationModelType.EUROPA, 'Jupiter', 1560.8, BodyClass.TERRESTRIAL),
    BodySpec('Ganymede', OrbitType.GANYMEDE, RotationModelType.GANYMEDE, 'Jupiter', 2631.2, BodyClass.TERRESTRIAL),
    BodySpec('Callisto', OrbitType.CALLISTO, RotationModelType.CALLISTO, 'Jupiter', 2410.3, BodyClass.TERRESTRIAL),
    BodySpec('Titan', OrbitType.TITAN, RotationModelType.TITAN, 'Saturn', 2574.73, BodyClass.TERRESTRIAL),
)

_BY_NAME: dict[str, BodySpec] = {b.name.lower(): b for b in BODIES}
_BY_ORBIT: dict[OrbitType, BodySpec] = {b.orbit_type: b for b in BODIES}
# Alternate spellings accepted on input
_ALIASES = {'luna': 'moon', 'lunar': 'moon', 'sol': 'sun'}


def body_names() -> list[str]:
    return [b.name for b in BODIES]


def get_body(body: str | OrbitType) -> BodySpec:
    """Look up a body by case-insensitive name or OrbitType.

    Parameters:
        body: Catalog name (e.g. 'jupiter', 'Moon') or OrbitType member.

    Returns:
        The catalog entry.

    Raises:
        ValueError: If the name or tag is not in the catalog (including
            OrbitType.NONE, which has no orbit).
    """
    if isinstance(body, OrbitType):
        spec = _BY_ORBIT.get(body)
        if spec is None:
            raise ValueError(f'No body with orbit type {body.name}')
        return spec
    key = body.strip().lower()
    key = _ALIASES.get(key, key)
    spec = _BY_NAME.get(key)
    if spec is None:
        logger.debug('Body lookup failed for %r', body)
        raise ValueError(f'Unknown body {body!r}; expected one of: {", ".join(body_names())}')
    return spec
