"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from orrery_ephemeris import config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('ORRERY_EPHEMERIS_LOG', 'ORRERY_LEAPSECS', 'ORRERY_DATE_FORMAT', 'ORRERY_PLOT_PATH'):
        monkeypatch.delenv(name, raising=False)
    assert config.get_log_level_name() == ''
    assert config.get_leapsecs_path() is None
    assert config.get_date_format() == 'iso8601'
    assert config.get_plot_path() == '.'


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('ORRERY_EPHEMERIS_LOG', ' debug ')
    monkeypatch.setenv('ORRERY_LEAPSECS', str(tmp_path / 'leaps.txt'))
    monkeypatch.setenv('ORRERY_DATE_FORMAT', 'DE')
    monkeypatch.setenv('ORRERY_PLOT_PATH', str(tmp_path))
    assert config.get_log_level_name() == 'DEBUG'
    assert config.get_leapsecs_path() == tmp_path / 'leaps.txt'
    assert config.get_date_format() == 'de'
    assert config.get_plot_path() == str(tmp_path)


def test_blank_leapsecs_is_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('ORRERY_LEAPSECS', '   ')
    assert config.get_leapsecs_path() is None
