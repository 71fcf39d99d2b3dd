"""Configuration: log level, leap-second extension file, output defaults from environment."""

import os
from pathlib import Path

DEFAULT_DATE_FORMAT = 'iso8601'
DEFAULT_PLOT_PATH = '.'
LOG_LEVEL_ENV = 'ORRERY_EPHEMERIS_LOG'


def get_log_level_name() -> str:
    """Return the log level name requested through ORRERY_EPHEMERIS_LOG.

    Returns:
        Upper-case level name, or empty string when unset.
    """
    return os.environ.get(LOG_LEVEL_ENV, '').strip().upper()


def get_leapsecs_path() -> Path | None:
    """Return the optional leap-second extension file (ORRERY_LEAPSECS).

    The file holds ``<cumulative seconds> <julian day>`` lines appended after
    the built-in table.

    Returns:
        Path, or None when the variable is unset or blank.
    """
    path = os.environ.get('ORRERY_LEAPSECS', '').strip()
    if not path:
        return None
    return Path(path)


def get_date_format() -> str:
    """Return default output date format name (ORRERY_DATE_FORMAT or iso8601)."""
    return os.environ.get('ORRERY_DATE_FORMAT', DEFAULT_DATE_FORMAT).strip().lower()


def get_plot_path() -> str:
    """Return directory for rendered plots (ORRERY_PLOT_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('ORRERY_PLOT_PATH', DEFAULT_PLOT_PATH)
