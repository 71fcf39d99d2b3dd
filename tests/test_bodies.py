"""Tests for the body catalog."""

from __future__ import annotations

import pytest

from orrery_ephemeris.bodies import BODIES, BodyClass, body_class_label, body_names, get_body
from orrery_ephemeris.orbits import OrbitType
from orrery_ephemeris.rotation import RotationModelType


def test_lookup_is_case_insensitive() -> None:
    assert get_body('JUPITER').name == 'Jupiter'
    assert get_body('  titan ').parent == 'Saturn'


def test_aliases() -> None:
    assert get_body('Luna').name == 'Moon'
    assert get_body('sol').name == 'Sun'


def test_lookup_by_orbit_type() -> None:
    assert get_body(OrbitType.CALLISTO).name == 'Callisto'
    assert get_body(OrbitType.LUNAR).rotation_type is RotationModelType.LUNAR


def test_unknown_body_raises() -> None:
    with pytest.raises(ValueError, match='Unknown body'):
        get_body('pluto')
    with pytest.raises(ValueError):
        get_body(OrbitType.NONE)


def test_every_orbit_type_has_one_body() -> None:
    """Each orbit theory except NONE belongs to exactly one catalog entry."""
    tags = [b.orbit_type for b in BODIES]
    assert sorted(tags) == sorted(t for t in OrbitType if t is not OrbitType.NONE)
    assert len(body_names()) == len(set(body_names()))


def test_parents_are_in_catalog() -> None:
    names = set(body_names())
    for body in BODIES:
        assert body.parent is None or body.parent in names
    assert [b.name for b in BODIES if b.parent is None] == ['Sun']


def test_body_class_labels() -> None:
    assert body_class_label(BodyClass.GAS_GIANT) == 'Gas Giant'
    assert body_class_label(BodyClass.ICE_GIANT, 'de') == 'Eisriese'
    assert body_class_label(BodyClass.UNKNOWN, 'de') == 'Unbekannt'
    assert body_class_label(BodyClass.YELLOW_DWARF, 'fr') == 'Yellow Dwarf'
