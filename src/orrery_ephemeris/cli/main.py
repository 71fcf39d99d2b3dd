"""CLI entry point: orrery-ephemeris convert|position|orientation|table|precession|plot."""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import NoReturn

import numpy as np

from orrery_ephemeris import ephemeris
from orrery_ephemeris.angle_utils import dms_string, km_from_au
from orrery_ephemeris.bodies import body_class_label, body_names, get_body
from orrery_ephemeris.config import get_date_format, get_log_level_name, get_plot_path
from orrery_ephemeris.precession import (
    ecliptic_pole_p03lp,
    equatorial_precession_p03,
    obliquity_p03lp,
    precession_matrix_p03lp,
)
from orrery_ephemeris.rendering.orbit_plot import draw_orbit_track
from orrery_ephemeris.rotation import create_rotation_model
from orrery_ephemeris.time_utils import (
    CalendarDate,
    DateFormat,
    calendar_to_jd,
    format_date,
    julian_century,
    parse_date_format,
    parse_datetime,
    parse_time_unit,
    tai_to_tt,
    to_days,
    tt_to_tdb,
    utc_to_tai,
)

logger = logging.getLogger(__name__)

_WEEKDAYS = ('Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday')
MAX_TABLE_ROWS = 100000


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or ORRERY_EPHEMERIS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = get_log_level_name()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    # Font lookup and backend selection are noisy at DEBUG.
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def _parse_date(text: str) -> CalendarDate:
    date = parse_datetime(text)
    if date is None:
        raise ValueError(f'Cannot parse date {text!r}')
    return date


def _date_format(args: argparse.Namespace) -> DateFormat:
    return parse_date_format(args.format or get_date_format())


def _tdb_from_text(text: str) -> float:
    """UTC date string to TDB Julian Day."""
    return tt_to_tdb(tai_to_tt(utc_to_tai(_parse_date(text))))


def _time_grid(start: str, stop: str, step: float, unit: str) -> list[float]:
    """TDB Julian Days from start to stop inclusive at a fixed step."""
    jd0 = _tdb_from_text(start)
    jd1 = _tdb_from_text(stop)
    if jd1 < jd0:
        raise ValueError('Stop time is before start time')
    step_days = to_days(step, parse_time_unit(unit))
    if step_days <= 0.0:
        raise ValueError('Step must be positive')
    count = int(math.floor((jd1 - jd0) / step_days + 1e-9)) + 1
    if count > MAX_TABLE_ROWS:
        raise ValueError(f'Too many time steps ({count}); the limit is {MAX_TABLE_ROWS}')
    return [jd0 + i * step_days for i in range(count)]


def _convert_cmd(args: argparse.Namespace) -> int:
    """Print a UTC date in every supported time scale.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    try:
        date = _parse_date(args.date)
        fmt = _date_format(args)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    jd_utc = calendar_to_jd(date)
    tai = utc_to_tai(date)
    tt = tai_to_tt(tai)
    tdb = tt_to_tdb(tt)
    print(f'UTC:       {format_date(date, fmt)}')
    print(f'Weekday:   {_WEEKDAYS[date.weekday]}')
    print(f'JD (UTC):  {jd_utc:.8f}')
    print(f'JD (TAI):  {tai:.8f}')
    print(f'JD (TT):   {tt:.8f}')
    print(f'JD (TDB):  {tdb:.8f}')
    print(f'T (TDB):   {julian_century(tdb):.12f} Julian centuries from J2000')
    return 0


def _position_cmd(args: argparse.Namespace) -> int:
    try:
        spec = get_body(args.body)
        jd = _tdb_from_text(args.date)
        pos = ephemeris.position(spec.name, jd)
        vel = ephemeris.velocity(spec.name, jd)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    distance = float(np.linalg.norm(pos))
    print(f'Body:      {spec.name} ({body_class_label(spec.body_class)})')
    print(f'Parent:    {spec.parent or "solar-system barycentre"}')
    print(f'JD (TDB):  {jd:.8f}')
    print(f'Position:  {pos[0]:15.10f} {pos[1]:15.10f} {pos[2]:15.10f} AU')
    print(f'Velocity:  {vel[0]:15.10f} {vel[1]:15.10f} {vel[2]:15.10f} AU/day')
    print(f'Distance:  {distance:.10f} AU ({km_from_au(distance):.1f} km)')
    return 0


def _orientation_cmd(args: argparse.Namespace) -> int:
    try:
        spec = get_body(args.body)
        jd = _tdb_from_text(args.date)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    model = create_rotation_model(spec.rotation_type)
    ra, dec = model.pole(jd)
    meridian = model.meridian(jd) % 360.0
    equator = model.equator_orientation(jd)
    spin = model.spin(jd)
    print(f'Body:      {spec.name}')
    print(f'JD (TDB):  {jd:.8f}')
    print(f'Pole RA:   {dms_string(ra / 15.0, "hms")}')
    print(f'Pole Dec:  {dms_string(dec, "dms")}')
    print(f'Meridian:  {meridian:.6f} deg')
    if model.period:
        direction = 'retrograde' if model.flipped else 'prograde'
        print(f'Period:    {model.period:.8f} days ({direction})')
    print('Equator:   ' + ' '.join(f'{c: .12f}' for c in equator.as_tuple()))
    print('Spin:      ' + ' '.join(f'{c: .12f}' for c in spin.as_tuple()))
    return 0


def _table_cmd(args: argparse.Namespace) -> int:
    try:
        jds = _time_grid(args.start, args.stop, args.step, args.unit)
        fmt = _date_format(args)
        positions = ephemeris.sample_positions(args.body, jds, jobs=args.jobs)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    if args.output is not None:
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                ephemeris.write_position_table(f, args.body, jds, positions, fmt)
        except OSError as e:
            print(f'Error: cannot write {args.output}: {e}', file=sys.stderr)
            return 1
        logger.info('Wrote %d rows to %s', len(jds), args.output)
        return 0
    ephemeris.write_position_table(sys.stdout, args.body, jds, positions, fmt)
    return 0


def _precession_cmd(args: argparse.Namespace) -> int:
    try:
        jd = _tdb_from_text(args.date)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    t = julian_century(jd)
    pole_p, pole_q = ecliptic_pole_p03lp(t)
    p_a, eps_a = obliquity_p03lp(t)
    zeta, z, theta = equatorial_precession_p03(t)
    print(f'T:         {t:.10f} Julian centuries from J2000')
    print(f'P_A, Q_A:  {pole_p:.6f} {pole_q:.6f} arcsec')
    print(f'p_A:       {p_a:.6f} arcsec')
    print(f'eps_A:     {eps_a:.6f} arcsec ({dms_string(eps_a / 3600.0, "dms")})')
    print(f'zeta/z/th: {zeta:.6f} {z:.6f} {theta:.6f} arcsec')
    print('Matrix:')
    for row in precession_matrix_p03lp(t):
        print('  ' + ' '.join(f'{v: .12f}' for v in row))
    return 0


def _plot_cmd(args: argparse.Namespace) -> int:
    try:
        spec = get_body(args.body)
        jds = _time_grid(args.start, args.stop, args.step, args.unit)
        positions = ephemeris.sample_positions(spec.name, jds, jobs=args.jobs)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    output = Path(args.output) if args.output else Path(get_plot_path()) / f'{spec.name.lower()}_orbit.png'
    try:
        draw_orbit_track(spec.name, positions, output, parent=spec.parent)
    except OSError as e:
        print(f'Error: cannot write {output}: {e}', file=sys.stderr)
        return 1
    print(output)
    return 0


def _add_format_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--format',
        type=str,
        default=None,
        choices=['iso8601', 'us', 'de'],
        help='Date output format; env: ORRERY_DATE_FORMAT',
    )


def _add_range_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('body', type=str, help=f'Body name ({", ".join(body_names())})')
    parser.add_argument('start', type=str, help='Start time (UTC)')
    parser.add_argument('stop', type=str, help='Stop time (UTC)')
    parser.add_argument('--step', type=float, default=1.0, help='Time step (default 1)')
    parser.add_argument(
        '--unit', type=str, default='day', help='Step unit: sec, min, hour, day, week, year'
    )
    parser.add_argument('--jobs', type=int, default=1, help='Worker threads for sampling')


def main() -> int:
    """Entry point for orrery-ephemeris CLI.

    Returns:
        Exit code 0 on success, 1 on failure.
    """
    parser = argparse.ArgumentParser(
        prog='orrery-ephemeris',
        description='Solar-system body positions, orientations and time scales.',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    convert_parser = subparsers.add_parser('convert', help='Convert a UTC date to JD, TAI, TT and TDB')
    convert_parser.add_argument('date', type=str, help='UTC date, e.g. "2024-03-20 03:06"')
    _add_format_arg(convert_parser)
    convert_parser.set_defaults(func=_convert_cmd)

    position_parser = subparsers.add_parser('position', help='Position relative to the parent body')
    position_parser.add_argument('body', type=str, help='Body name')
    position_parser.add_argument('date', type=str, help='UTC date')
    position_parser.set_defaults(func=_position_cmd)

    orient_parser = subparsers.add_parser('orientation', help='Pole, meridian and rotation quaternions')
    orient_parser.add_argument('body', type=str, help='Body name')
    orient_parser.add_argument('date', type=str, help='UTC date')
    orient_parser.set_defaults(func=_orientation_cmd)

    table_parser = subparsers.add_parser('table', help='Position table over a time range')
    _add_range_args(table_parser)
    _add_format_arg(table_parser)
    table_parser.add_argument('-o', '--output', type=str, default=None, help='Output file (default stdout)')
    table_parser.set_defaults(func=_table_cmd)

    prec_parser = subparsers.add_parser('precession', help='Long-period precession quantities')
    prec_parser.add_argument('date', type=str, help='UTC date')
    prec_parser.set_defaults(func=_precession_cmd)

    plot_parser = subparsers.add_parser('plot', help='Plot an orbit track (matplotlib)')
    _add_range_args(plot_parser)
    plot_parser.add_argument(
        '-o', '--output', type=str, default=None, help='Image file; default in ORRERY_PLOT_PATH'
    )
    plot_parser.set_defaults(func=_plot_cmd)

    args = parser.parse_args()
    _configure_logging(args.verbose)
    return int(args.func(args))


def cli_main() -> NoReturn:
    """Entry point for console_scripts; calls main() and exits with its return code."""
    sys.exit(main())


if __name__ == '__main__':
    sys.exit(main())
