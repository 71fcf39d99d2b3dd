"""Tests for body rotation models."""

from __future__ import annotations

import logging
import math

import numpy as np
import pytest

from orrery_ephemeris.constants import J2000
from orrery_ephemeris.quaternion import Quaternion
from orrery_ephemeris.rotation import (
    IauRotationModel,
    NeptuneRotationModel,
    RotationModel,
    RotationModelType,
    TitanRotationModel,
    clamp_centuries,
    create_rotation_model,
)

DATES = [2415020.0, 2440000.5, J2000, 2455197.5, 2460310.25, 2470000.0]
IAU_TYPES = [
    t for t in RotationModelType if t not in (RotationModelType.NONE, RotationModelType.EARTH)
]


def _pole_vector(ra: float, dec: float) -> np.ndarray:
    ra, dec = math.radians(ra), math.radians(dec)
    return np.array([math.cos(dec) * math.cos(ra), math.sin(dec), math.cos(dec) * math.sin(ra)])


@pytest.mark.parametrize('model_type', list(RotationModelType))
def test_orientations_are_unit_quaternions(model_type: RotationModelType) -> None:
    model = create_rotation_model(model_type)
    for jd in DATES:
        assert model.equator_orientation(jd).norm() == pytest.approx(1.0, abs=1e-9)
        assert model.spin(jd).norm() == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize('model_type', IAU_TYPES)
def test_equator_orientation_points_at_pole(model_type: RotationModelType) -> None:
    """The body's +Y axis rotated into the reference frame is the IAU pole."""
    model = create_rotation_model(model_type)
    assert isinstance(model, IauRotationModel)
    for jd in DATES:
        derived = _pole_vector(*RotationModel.pole(model, jd))
        assert np.allclose(derived, _pole_vector(*model.pole(jd)), atol=1e-9)


def test_mars_pole_and_period() -> None:
    model = create_rotation_model(RotationModelType.MARS)
    ra, dec = model.pole(J2000)
    assert (ra, dec) == pytest.approx((317.68143, 52.88650))
    assert model.period == pytest.approx(360.0 / 350.89198226)
    assert model.meridian(J2000) == pytest.approx(176.630)
    assert not model.flipped


@pytest.mark.parametrize('model_type', [RotationModelType.VENUS, RotationModelType.URANUS])
def test_retrograde_rotators_are_flipped(model_type: RotationModelType) -> None:
    assert create_rotation_model(model_type).flipped


def test_spin_direction_follows_flip() -> None:
    """Prograde bodies spin with RY(-(180 + W)), retrograde ones with RY(180 + W)."""
    mars = create_rotation_model(RotationModelType.MARS)
    venus = create_rotation_model(RotationModelType.VENUS)
    w_mars = math.radians(180.0 + mars.meridian(J2000))
    w_venus = math.radians(180.0 + venus.meridian(J2000))
    assert abs(mars.spin(J2000).dot(Quaternion.rotate_y(-w_mars))) == pytest.approx(1.0)
    assert abs(venus.spin(J2000).dot(Quaternion.rotate_y(w_venus))) == pytest.approx(1.0)


def test_secular_terms_are_clamped() -> None:
    """Pole drift stops 50 centuries from J2000."""
    model = create_rotation_model(RotationModelType.MARS)
    far = model.pole(J2000 + 100.0 * 36525.0)
    edge = model.pole(J2000 + 60.0 * 36525.0)
    assert far == pytest.approx(edge)
    assert far == pytest.approx((317.68143 - 0.1061 * 50.0, 52.88650 - 0.0609 * 50.0))
    assert clamp_centuries(-75.0) == -50.0
    assert clamp_centuries(12.5) == 12.5


def test_synchronous_moons() -> None:
    """The Moon and Titan rotate once per orbit."""
    assert create_rotation_model(RotationModelType.LUNAR).period == pytest.approx(27.32, abs=0.01)
    assert create_rotation_model(RotationModelType.TITAN).period == pytest.approx(15.945, abs=0.001)
    assert create_rotation_model(RotationModelType.IO).period == pytest.approx(1.769, abs=0.001)


def test_moon_pole_near_ecliptic_pole() -> None:
    """The lunar pole librates only a few degrees about (270, 66.5)."""
    model = create_rotation_model(RotationModelType.LUNAR)
    for jd in DATES[1:-1]:
        ra, dec = model.pole(jd)
        assert ra == pytest.approx(269.9949, abs=4.2)
        assert dec == pytest.approx(66.5392, abs=1.7)


def test_earth_equator_at_j2000_is_obliquity_tilt() -> None:
    """At J2000 the Earth's equator is the J2000 ecliptic tilted by 23.4393 degrees."""
    model = create_rotation_model(RotationModelType.EARTH)
    expected = Quaternion.rotate_x(math.radians(84381.406 / 3600.0))
    assert abs(model.equator_orientation(J2000).dot(expected)) == pytest.approx(1.0, abs=1e-9)
    assert model.period == pytest.approx(23.9344694 / 24.0)
    assert 0.0 <= model.meridian(J2000 + 0.3) < 360.0


def test_earth_spin_repeats_each_sidereal_day() -> None:
    model = create_rotation_model(RotationModelType.EARTH)
    q0 = model.spin(J2000 + 10.0)
    q1 = model.spin(J2000 + 10.0 + model.period)
    assert abs(q0.dot(q1)) == pytest.approx(1.0, abs=1e-9)


def test_none_is_identity() -> None:
    model = create_rotation_model(RotationModelType.NONE)
    assert model.equator_orientation(J2000) == Quaternion.identity()
    assert model.spin(J2000) == Quaternion.identity()
    assert model.meridian(J2000) == 0.0
    assert model.pole(J2000)[1] == pytest.approx(90.0)


def test_unknown_tag_falls_back_to_identity(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger='orrery_ephemeris.rotation'):
        model = create_rotation_model(4242)
    assert type(model) is RotationModel
    assert 'Unknown rotation model type' in caplog.text


def test_models_are_cached() -> None:
    assert create_rotation_model(RotationModelType.SATURN) is create_rotation_model(6)


def test_iau_model_needs_pole_and_meridian() -> None:
    with pytest.raises(TypeError):
        IauRotationModel()


def test_degree_argument_terms_at_j2000() -> None:
    """Periodic pole and meridian terms take their arguments in degrees."""
    neptune = NeptuneRotationModel()
    assert neptune.pole(J2000) == pytest.approx((299.333738959, 42.950359022), abs=1e-8)
    assert neptune.meridian(J2000) == pytest.approx(253.198007571, abs=1e-8)
    titan = TitanRotationModel()
    assert titan.pole(J2000) == pytest.approx((37.731950736, 83.679670364), abs=1e-8)
    assert titan.meridian(J2000) == pytest.approx(188.327988743, abs=1e-8)
