"""Tests for angle helpers and sexagesimal formatting."""

from __future__ import annotations

import pytest

from orrery_ephemeris.angle_utils import au_from_km, cos_deg, dms_string, km_from_au, pfmod, sin_deg
from orrery_ephemeris.constants import AU_KM


def test_pfmod_positive_range() -> None:
    """Negative and large values reduce into [0, y)."""
    assert pfmod(-30.0, 360.0) == pytest.approx(330.0)
    assert pfmod(725.0, 360.0) == pytest.approx(5.0)
    assert pfmod(12.5, 360.0) == pytest.approx(12.5)


def test_degree_trig() -> None:
    assert sin_deg(30.0) == pytest.approx(0.5)
    assert cos_deg(60.0) == pytest.approx(0.5)


def test_au_km_conversion() -> None:
    assert au_from_km(AU_KM) == pytest.approx(1.0)
    assert km_from_au(2.0) == pytest.approx(2.0 * AU_KM)


def test_dms_string() -> None:
    """12.5125 degrees is 12 deg 30 min 45 sec."""
    assert dms_string(12.5125, 'dms', decimals=1) == ' 12d 30m 45.0s'
    assert dms_string(12.5125, '   ', decimals=0) == ' 12  30  45 '


def test_dms_string_negative_zero_degrees() -> None:
    """A negative angle under one degree keeps its sign."""
    assert dms_string(-0.5, 'dms', decimals=1) == ' -0d 30m 00.0s'
