"""Tests for matplotlib orbit-track rendering."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from orrery_ephemeris import ephemeris
from orrery_ephemeris.constants import J2000
from orrery_ephemeris.rendering.orbit_plot import draw_orbit_track


def test_draw_orbit_track_writes_png(tmp_path: Path) -> None:
    """A month of lunar positions renders to a non-empty PNG."""
    jds = [J2000 + i for i in range(30)]
    positions = ephemeris.sample_positions('moon', jds)
    out = draw_orbit_track('Moon', positions, tmp_path / 'moon.png', parent='Earth')
    assert out == tmp_path / 'moon.png'
    data = out.read_bytes()
    assert data.startswith(b'\x89PNG')
    assert len(data) > 1000


def test_draw_orbit_track_rejects_bad_shape(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match='shape'):
        draw_orbit_track('Mars', np.zeros((10, 2)), tmp_path / 'mars.png')


def test_draw_orbit_track_single_point(tmp_path: Path) -> None:
    out = draw_orbit_track('Sun', np.zeros((1, 3)), tmp_path / 'sun.svg', title='Barycentre')
    assert out.exists()
