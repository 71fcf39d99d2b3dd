"""Body rotation models: pole orientation and prime-meridian spin.

All orientations are referred to the J2000 Earth equatorial frame expressed
in engine axes (+Y toward the celestial pole, X toward the equinox). The IAU
models follow the IAU/IAG Working Group reports: pole right ascension and
declination are linear in Julian centuries from J2000 plus body-specific
periodic terms, and the meridian angle W is linear in days from J2000.
"""

from __future__ import annotations

import functools
import logging
import math
from abc import ABC, abstractmethod
from enum import IntEnum

from orrery_ephemeris.angle_utils import cos_deg, pfmod, sin_deg
from orrery_ephemeris.constants import (
    DAYS_PER_JULIAN_CENTURY,
    EARTH_MERIDIAN_AT_J2000_DEG,
    EARTH_SIDEREAL_HOURS,
    J2000,
    P03LP_CLAMP_CENTURIES,
    ROTATION_CLAMP_CENTURIES,
)
from orrery_ephemeris.precession import mean_equator_rotation_p03lp
from orrery_ephemeris.quaternion import Quaternion

logger = logging.getLogger(__name__)


class RotationModelType(IntEnum):
    NONE = 0
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    LUNAR = 9
    IO = 10
    EUROPA = 11
    GANYMEDE = 12
    CALLISTO = 13
    TITAN = 14
    SUN = 15


def clamp_centuries(t: float, limit: float = ROTATION_CLAMP_CENTURIES) -> float:
    """Hold t (Julian centuries) inside [-limit, limit]."""
    return max(-limit, min(limit, t))


class RotationModel:
    """Identity rotation: no tilt and no spin.

    Also the fallback for bodies without a model.
    """

    period: float = 0.0  # days
    flipped: bool = False

    def equator_orientation(self, jd: float) -> Quaternion:
        return Quaternion.identity()

    def spin(self, jd: float) -> Quaternion:
        return Quaternion.identity()

    def pole(self, jd: float) -> tuple[float, float]:
        """North pole (right ascension, declination) in degrees.

        Derived from the equator orientation: the body's +Y axis rotated
        into the J2000 frame.
        """
        x, y, z = self.equator_orientation(jd).rotate((0.0, 1.0, 0.0))
        dec = math.degrees(math.asin(max(-1.0, min(1.0, float(y)))))
        ra = pfmod(math.degrees(math.atan2(float(z), float(x))), 360.0)
        return ra, dec

    def meridian(self, jd: float) -> float:
        """Prime-meridian angle W in degrees."""
        return 0.0

    def __repr__(self) -> str:
        return f'{type(self).__name__}(period={self.period}, flipped={self.flipped})'


class EarthRotationModel(RotationModel):
    """Earth: long-period precession of the equator and a uniform sidereal spin."""

    period = EARTH_SIDEREAL_HOURS / 24.0

    def equator_orientation(self, jd: float) -> Quaternion:
        t = clamp_centuries((jd - J2000) / DAYS_PER_JULIAN_CENTURY, P03LP_CLAMP_CENTURIES)
        q = mean_equator_rotation_p03lp(t)
        # Ecliptic frame has +Z up; engine frame has +Y up
        return Quaternion.rotate_x(0.5 * math.pi) * q * Quaternion.rotate_x(-0.5 * math.pi)

    def _sidereal_angle(self, jd: float) -> float:
        d = jd - J2000
        return 2.0 * math.pi * (d * 24.0 / EARTH_SIDEREAL_HOURS - EARTH_MERIDIAN_AT_J2000_DEG / 360.0)

    def spin(self, jd: float) -> Quaternion:
        # TODO: replace the uniform rate with a sidereal time model (GMST with UT1)
        return Quaternion.rotate_y(-self._sidereal_angle(jd))

    def meridian(self, jd: float) -> float:
        return pfmod(math.degrees(self._sidereal_angle(jd)), 360.0)


class IauRotationModel(RotationModel, ABC):
    """Base for IAU models; subclasses supply pole(jd) and meridian(jd)."""

    def __init__(self, period: float, flipped: bool = False) -> None:
        self.period = period
        self.flipped = flipped

    def equator_orientation(self, jd: float) -> Quaternion:
        ra, dec = self.pole(jd)
        node = ra + 90.0
        inclination = 90.0 - dec
        return Quaternion.rotate_y(-math.radians(node)) * Quaternion.rotate_x(-math.radians(inclination))

    def spin(self, jd: float) -> Quaternion:
        sign = 1.0 if self.flipped else -1.0
        return Quaternion.rotate_y(sign * math.radians(180.0 + self.meridian(jd)))

    @abstractmethod
    def pole(self, jd: float) -> tuple[float, float]:
        """North pole (right ascension, declination) in degrees."""

    @abstractmethod
    def meridian(self, jd: float) -> float:
        """Prime-meridian angle W in degrees."""


class IauPrecessingModel(IauRotationModel):
    """Pole drifting linearly with time and a constant rotation rate.

    Parameters:
        pole_ra: Pole right ascension at J2000 (degrees).
        pole_ra_rate: Degrees per Julian century.
        pole_dec: Pole declination at J2000 (degrees).
        pole_dec_rate: Degrees per Julian century.
        meridian_at_epoch: W at J2000 (degrees).
        rotation_rate: Degrees per day; negative for retrograde rotators.
    """

    def __init__(
        self,
        pole_ra: float,
        pole_ra_rate: float,
        pole_dec: float,
        pole_dec_rate: float,
        meridian_at_epoch: float,
        rotation_rate: float,
    ) -> None:
        super().__init__(abs(360.0 / rotation_rate), rotation_rate < 0.0)
        self.pole_ra = pole_ra
        self.pole_ra_rate = pole_ra_rate
        self.pole_dec = pole_dec
        self.pole_dec_rate = pole_dec_rate
        self.meridian_at_epoch = meridian_at_epoch
        self.rotation_rate = rotation_rate

    def pole(self, jd: float) -> tuple[float, float]:
        t = clamp_centuries((jd - J2000) / DAYS_PER_JULIAN_CENTURY)
        return self.pole_ra + self.pole_ra_rate * t, self.pole_dec + self.pole_dec_rate * t

    def meridian(self, jd: float) -> float:
        return self.meridian_at_epoch + self.rotation_rate * (jd - J2000)


class NeptuneRotationModel(IauRotationModel):
    RATE = 536.3128492

    def __init__(self) -> None:
        super().__init__(360.0 / self.RATE)

    @staticmethod
    def _n(jd: float) -> float:
        return 357.85 + 52.316 * (jd - J2000) / DAYS_PER_JULIAN_CENTURY

    def pole(self, jd: float) -> tuple[float, float]:
        n = self._n(jd)
        return 299.36 + 0.70 * sin_deg(n), 43.46 - 0.51 * cos_deg(n)

    def meridian(self, jd: float) -> float:
        return 253.18 + self.RATE * (jd - J2000) - 0.48 * sin_deg(self._n(jd))


def lunar_arguments(d: float) -> tuple[float, ...]:
    """The thirteen lunar arguments E1..E13 (radians) at d days from J2000."""
    return tuple(
        math.radians(a + b * d)
        for a, b in (
            (125.045, -0.0529921),
            (250.089, -0.1059842),
            (260.008, 13.0120090),
            (176.625, 13.3407154),
            (357.529, 0.9856993),
            (311.589, 26.4057084),
            (134.963, 13.0649930),
            (276.617, 0.3287146),
            (34.226, 1.7484877),
            (15.134, -0.1589763),
            (119.743, 0.0036096),
            (239.961, 0.1643573),
            (25.053, 12.9590088),
        )
    )


class LunarRotationModel(IauRotationModel):
    RATE = 13.17635815

    def __init__(self) -> None:
        super().__init__(360.0 / self.RATE)

    def pole(self, jd: float) -> tuple[float, float]:
        d = jd - J2000
        t = clamp_centuries(d / DAYS_PER_JULIAN_CENTURY)
        e1, e2, e3, e4, _e5, e6, e7, _e8, _e9, e10, _e11, _e12, e13 = lunar_arguments(d)
        sin, cos = math.sin, math.cos
        ra = (
            269.9949 + 0.0013 * t
            - 3.8787 * sin(e1) - 0.1204 * sin(e2) + 0.0700 * sin(e3) - 0.0172 * sin(e4)
            + 0.0072 * sin(e6) - 0.0052 * sin(e10) + 0.0043 * sin(e13)
        )
        dec = (
            66.5392 + 0.0130 * t
            + 1.5419 * cos(e1) + 0.0239 * cos(e2) - 0.0278 * cos(e3) + 0.0068 * cos(e4)
            - 0.0029 * cos(e6) + 0.0009 * cos(e7) + 0.0008 * cos(e10) - 0.0009 * cos(e13)
        )
        return ra, dec

    def meridian(self, jd: float) -> float:
        d = jd - J2000
        e1, e2, e3, e4, e5, e6, e7, e8, e9, e10, e11, e12, e13 = lunar_arguments(d)
        # Quadratic term is tidal despinning; held at the secular bound
        ds = clamp_centuries(d / DAYS_PER_JULIAN_CENTURY) * DAYS_PER_JULIAN_CENTURY
        sin = math.sin
        return (
            38.3213 + self.RATE * d - 1.4e-12 * ds * ds
            + 3.5610 * sin(e1) + 0.1208 * sin(e2) - 0.0642 * sin(e3) + 0.0158 * sin(e4)
            + 0.0252 * sin(e5) - 0.0066 * sin(e6) - 0.0047 * sin(e7) - 0.0046 * sin(e8)
            + 0.0028 * sin(e9) + 0.0052 * sin(e10) + 0.0040 * sin(e11) + 0.0019 * sin(e12)
            - 0.0044 * sin(e13)
        )


def jupiter_arguments(t: float) -> dict[str, float]:
    """Jovian satellite arguments J3..J8 in degrees at t centuries from J2000."""
    return {
        'J3': 283.90 + 4850.7 * t,
        'J4': 355.80 + 1191.3 * t,
        'J5': 119.90 + 262.1 * t,
        'J6': 229.80 + 64.3 * t,
        'J7': 352.35 + 2382.6 * t,
        'J8': 113.35 + 6070.0 * t,
    }


class GalileanRotationModel(IauRotationModel):
    """Jupiter's pole (268.05, 64.49) with per-moon periodic terms.

    ``pole_terms`` holds (argument, ra amplitude, dec amplitude) and
    ``meridian_terms`` holds (argument, W amplitude); amplitudes in degrees.
    """

    meridian_at_epoch = 0.0
    rate = 1.0
    pole_terms: tuple[tuple[str, float, float], ...] = ()
    meridian_terms: tuple[tuple[str, float], ...] = ()

    def __init__(self) -> None:
        super().__init__(360.0 / self.rate)

    def pole(self, jd: float) -> tuple[float, float]:
        t = (jd - J2000) / DAYS_PER_JULIAN_CENTURY
        args = jupiter_arguments(t)
        t = clamp_centuries(t)
        ra = 268.05 - 0.009 * t
        dec = 64.49 + 0.003 * t
        for name, ra_amp, dec_amp in self.pole_terms:
            ra += ra_amp * sin_deg(args[name])
            dec += dec_amp * cos_deg(args[name])
        return ra, dec

    def meridian(self, jd: float) -> float:
        d = jd - J2000
        args = jupiter_arguments(d / DAYS_PER_JULIAN_CENTURY)
        w = self.meridian_at_epoch + self.rate * d
        for name, amp in self.meridian_terms:
            w += amp * sin_deg(args[name])
        return w


class IoRotationModel(GalileanRotationModel):
    meridian_at_epoch = 200.39
    rate = 203.4889538
    pole_terms = (('J3', 0.094, 0.040), ('J4', 0.024, 0.011))
    meridian_terms = (('J3', -0.085), ('J4', -0.022))


class EuropaRotationModel(GalileanRotationModel):
    meridian_at_epoch = 36.022
    rate = 101.3747235
    pole_terms = (
        ('J4', 1.086, 0.486),
        ('J5', 0.060, 0.026),
        ('J6', 0.015, 0.007),
        ('J7', 0.009, 0.002),
    )
    meridian_terms = (('J4', -0.980), ('J5', -0.054), ('J6', -0.014), ('J7', -0.008))


class GanymedeRotationModel(GalileanRotationModel):
    meridian_at_epoch = 44.064
    rate = 50.3176081
    pole_terms = (('J4', -0.037, -0.016), ('J5', 0.431, 0.186), ('J6', 0.091, 0.039))
    meridian_terms = (('J4', 0.033), ('J5', -0.389), ('J6', -0.082))


class CallistoRotationModel(GalileanRotationModel):
    meridian_at_epoch = 259.51
    rate = 21.5710715
    pole_terms = (('J5', -0.068, -0.029), ('J6', 0.590, 0.254), ('J8', 0.010, -0.004))
    meridian_terms = (('J5', 0.061), ('J6', -0.533), ('J8', -0.009))


class TitanRotationModel(IauRotationModel):
    RATE = 22.5769768

    def __init__(self) -> None:
        super().__init__(360.0 / self.RATE)

    def pole(self, jd: float) -> tuple[float, float]:
        t = (jd - J2000) / DAYS_PER_JULIAN_CENTURY
        s8 = 29.80 - 52.1 * t
        t = clamp_centuries(t)
        return 36.41 - 0.036 * t + 2.66 * sin_deg(s8), 83.94 - 0.004 * t - 0.30 * cos_deg(s8)

    def meridian(self, jd: float) -> float:
        d = jd - J2000
        s8 = 29.80 - 52.1 * d / DAYS_PER_JULIAN_CENTURY
        return 189.64 + self.RATE * d - 2.64 * sin_deg(s8)


# (pole RA, RA rate, pole Dec, Dec rate, W0, W rate)
IAU_PRECESSING_PARAMETERS: dict[RotationModelType, tuple[float, float, float, float, float, float]] = {
    RotationModelType.MERCURY: (281.01, -0.033, 61.45, -0.005, 329.548, 6.1385025),
    RotationModelType.VENUS: (272.76, 0.0, 67.16, 0.0, 160.20, -1.4813688),
    RotationModelType.MARS: (317.68143, -0.1061, 52.88650, -0.0609, 176.630, 350.89198226),
    RotationModelType.JUPITER: (268.05, -0.009, 64.49, -0.003, 284.95, 870.5366420),
    RotationModelType.SATURN: (40.589, -0.036, 83.537, -0.004, 38.90, 810.7939024),
    RotationModelType.URANUS: (257.311, 0.0, -15.175, 0.0, 203.81, -501.1600928),
    # Solar pole from the 7.25 degree tilt to the ecliptic; not the IAU solar model
    RotationModelType.SUN: (0.0, 0.0, 90.0 - 7.25, 0.0, 0.0, 12.8571426),
}

_PERIODIC_MODELS: dict[RotationModelType, type[RotationModel]] = {
    RotationModelType.EARTH: EarthRotationModel,
    RotationModelType.NEPTUNE: NeptuneRotationModel,
    RotationModelType.LUNAR: LunarRotationModel,
    RotationModelType.IO: IoRotationModel,
    RotationModelType.EUROPA: EuropaRotationModel,
    RotationModelType.GANYMEDE: GanymedeRotationModel,
    RotationModelType.CALLISTO: CallistoRotationModel,
    RotationModelType.TITAN: TitanRotationModel,
}


@functools.lru_cache(maxsize=None)
def create_rotation_model(model_type: RotationModelType | int) -> RotationModel:
    """Return the shared rotation model for a tag.

    Parameters:
        model_type: RotationModelType member or its integer value.

    Returns:
        The model; the identity model for NONE and unrecognized tags.
    """
    try:
        tag = RotationModelType(model_type)
    except ValueError:
        logger.warning('Unknown rotation model type %r; using identity', model_type)
        return RotationModel()
    if tag in IAU_PRECESSING_PARAMETERS:
        return IauPrecessingModel(*IAU_PRECESSING_PARAMETERS[tag])
    if tag in _PERIODIC_MODELS:
        return _PERIODIC_MODELS[tag]()
    return RotationModel()
