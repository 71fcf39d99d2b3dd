"""Tests for the orrery-ephemeris command line."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from orrery_ephemeris.cli import main as cli_main


def _run(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['orrery-ephemeris', *args])
    return cli_main.main()


def test_convert_prints_time_scales(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """convert reports UTC, weekday and Julian Days in every scale."""
    rc = _run(monkeypatch, 'convert', '2000-01-01 12:00:00')
    out = capsys.readouterr().out
    assert rc == 0
    assert 'UTC:       2000-01-01 12:00:00 UTC' in out
    assert 'Weekday:   Saturday' in out
    assert 'JD (UTC):  2451545.00000000' in out
    assert 'JD (TAI):  2451545.00037037' in out
    assert 'JD (TT):   2451545.00074287' in out


def test_convert_us_format(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'convert', '2024-07-04 18:30', '--format', 'us')
    assert rc == 0
    assert 'UTC:       Jul 04, 2024 18:30:00 UTC' in capsys.readouterr().out


def test_position_reports_distance(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'position', 'Moon', '2024-01-01 00:00')
    out = capsys.readouterr().out
    assert rc == 0
    assert 'Body:      Moon (Terrestrial)' in out
    assert 'Parent:    Earth' in out
    assert 'AU/day' in out


def test_position_unknown_body(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'position', 'pluto', '2024-01-01 00:00')
    assert rc == 1
    assert 'Error: Unknown body' in capsys.readouterr().err


def test_orientation(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'orientation', 'uranus', '2000-01-01 12:00')
    out = capsys.readouterr().out
    assert rc == 0
    assert 'Pole Dec:  -15d 10m' in out
    assert '(retrograde)' in out


def test_table_to_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    out_file = tmp_path / 'mars.txt'
    rc = _run(
        monkeypatch,
        'table', 'mars', '2024-01-01 00:00', '2024-01-03 00:00', '--step', '12', '--unit', 'hours',
        '--jobs', '2', '-o', str(out_file),
    )
    assert rc == 0
    lines = out_file.read_text(encoding='utf-8').splitlines()
    assert lines[0] == '# Mars relative to Sun'
    assert len(lines) == 2 + 5


def test_table_unwritable_output(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    out_file = tmp_path / 'missing' / 'mars.txt'
    rc = _run(monkeypatch, 'table', 'mars', '2024-01-01 00:00', '2024-01-02 00:00', '-o', str(out_file))
    assert rc == 1
    assert capsys.readouterr().err.startswith(f'Error: cannot write {out_file}')


def test_table_rejects_reversed_range(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'table', 'mars', '2024-01-03 00:00', '2024-01-01 00:00')
    assert rc == 1
    assert 'Stop time is before start time' in capsys.readouterr().err


def test_table_rejects_bad_unit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'table', 'mars', '2024-01-01 00:00', '2024-01-03 00:00', '--unit', 'fortnight')
    assert rc == 1
    assert capsys.readouterr().err.startswith('Error:')


def test_precession(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    rc = _run(monkeypatch, 'precession', '2000-01-01 12:00')
    out = capsys.readouterr().out
    assert rc == 0
    assert 'eps_A:     84381.40' in out
    assert out.count('\n  ') == 3


def test_plot_default_path(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    monkeypatch.setenv('ORRERY_PLOT_PATH', str(tmp_path))
    rc = _run(
        monkeypatch, 'plot', 'europa', '2024-01-01 00:00', '2024-01-05 00:00', '--step', '6', '--unit', 'hours'
    )
    assert rc == 0
    assert (tmp_path / 'europa_orbit.png').exists()
    assert capsys.readouterr().out.strip() == str(tmp_path / 'europa_orbit.png')


def test_plot_unwritable_output(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    output = tmp_path / 'missing' / 'io.png'
    rc = _run(
        monkeypatch, 'plot', 'io', '2024-01-01 00:00', '2024-01-02 00:00', '--unit', 'hours', '-o', str(output)
    )
    assert rc == 1
    assert capsys.readouterr().err.startswith(f'Error: cannot write {output}')
