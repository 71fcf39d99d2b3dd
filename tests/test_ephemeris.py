"""Tests for body-level ephemeris queries and position tables."""

from __future__ import annotations

from io import StringIO

import numpy as np
import pytest

from orrery_ephemeris import ephemeris
from orrery_ephemeris.constants import J2000
from orrery_ephemeris.orbits import OrbitType
from orrery_ephemeris.time_utils import DateFormat


def test_position_by_name_and_tag() -> None:
    by_name = ephemeris.position('earth', J2000)
    by_tag = ephemeris.position(OrbitType.EARTH, J2000)
    assert np.array_equal(by_name, by_tag)
    assert by_name.shape == (3,)


def test_unknown_body_raises() -> None:
    with pytest.raises(ValueError):
        ephemeris.position('vulcan', J2000)
    with pytest.raises(ValueError):
        ephemeris.velocity(OrbitType.NONE, J2000)


def test_parent_of() -> None:
    assert ephemeris.parent_of('Moon') == 'Earth'
    assert ephemeris.parent_of('Europa') == 'Jupiter'
    assert ephemeris.parent_of('Sun') is None


def test_velocity_matches_position_change() -> None:
    """Velocity times a small step predicts the position change."""
    dt = 0.01
    p0 = ephemeris.position('mars', J2000)
    p1 = ephemeris.position('mars', J2000 + dt)
    v = ephemeris.velocity('mars', J2000 + 0.5 * dt)
    assert np.allclose(p1 - p0, v * dt, rtol=1e-6, atol=1e-12)


def test_orientation_is_equator_after_spin() -> None:
    jd = J2000 + 123.4
    expected = ephemeris.equator_orientation('saturn', jd) * ephemeris.spin('saturn', jd)
    assert ephemeris.orientation('saturn', jd) == expected


def test_sample_positions_parallel_matches_serial() -> None:
    jds = [J2000 + 3.7 * i for i in range(40)]
    serial = ephemeris.sample_positions('io', jds)
    parallel = ephemeris.sample_positions('io', jds, jobs=4)
    assert serial.shape == (40, 3)
    assert np.array_equal(serial, parallel)
    assert np.array_equal(serial[7], ephemeris.position('io', jds[7]))


def test_sample_positions_empty() -> None:
    assert ephemeris.sample_positions('venus', [], jobs=3).shape == (0, 3)


def test_write_position_table() -> None:
    jds = [2460000.5, 2460001.5]
    positions = ephemeris.sample_positions('moon', jds)
    out = StringIO()
    ephemeris.write_position_table(out, 'moon', jds, positions, DateFormat.ISO8601)
    lines = out.getvalue().splitlines()
    assert lines[0] == '# Moon relative to Earth'
    assert lines[1].startswith('# date (UTC)')
    assert len(lines) == 4
    fields = lines[2].split()
    # TDB runs 69.184 s ahead of UTC in 2023
    assert fields[:3] == ['2023-02-24', '23:58:50', 'UTC']
    assert float(fields[3]) == pytest.approx(2460000.5)
    assert float(fields[-1]) == pytest.approx(np.linalg.norm(positions[0]), abs=1e-9)


def test_write_position_table_sun_header() -> None:
    out = StringIO()
    ephemeris.write_position_table(out, 'sun', [], np.empty((0, 3)))
    assert out.getvalue().startswith('# Sun relative to barycentre\n')
