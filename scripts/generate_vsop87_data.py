#!/usr/bin/env python3
"""Regenerate src/orrery_ephemeris/vsop87_data.py.

Planet tables are read from the full VSOP87D series shipped with PyMeeus
(amplitudes there are stored in units of 1e-8) and truncated to terms of at
least 1e-7 radian or AU. The first term of every power group is always kept
so each group stays non-empty. PyMeeus has no VSOP87E Sun series, so the Sun
table is a least-squares fit (numpy) to the mass-weighted barycentre of the
truncated planet tables, rotated to the J2000 ecliptic with the P03
precession angles from orrery_ephemeris.precession.

Usage:
    pip install pymeeus
    python scripts/generate_vsop87_data.py
    python scripts/generate_vsop87_data.py --threshold 5e-8 -o /tmp/vsop87_data.py
"""

from __future__ import annotations

import argparse
import importlib
import math
import sys
from pathlib import Path

import numpy as np

from orrery_ephemeris import precession

# Repo root (script is in scripts/)
_REPO_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_OUTPUT = _REPO_ROOT / 'src' / 'orrery_ephemeris' / 'vsop87_data.py'

# Highest power kept per coordinate (L, B, R).
POWER_LIMITS = {
    'Mercury': (5, 5, 4),
    'Venus': (5, 5, 4),
    'Earth': (5, 2, 5),
    'Mars': (5, 5, 5),
    'Jupiter': (5, 5, 5),
    'Saturn': (5, 5, 5),
    'Uranus': (4, 3, 4),
    'Neptune': (3, 3, 4),
}

# M_sun / m for each planet (Earth includes the Moon).
MASS_RATIOS = {
    'Mercury': 6023600.0,
    'Venus': 408523.71,
    'Earth': 328900.56,
    'Mars': 3098708.0,
    'Jupiter': 1047.3486,
    'Saturn': 3497.898,
    'Uranus': 22902.98,
    'Neptune': 19412.24,
}

# Mean motions (rad / millennium) the Sun fit is built on.
_NJ, _NS, _NU, _NN = 529.6909650946, 213.2990954380, 74.7815985673, 38.1330356378
_NE, _NV, _NM = 628.3075849991, 1021.3285546211, 334.0612426700

# Frequencies per power of t; 0.0 is the constant term.
SUN_FREQUENCIES = (
    (
        0.0, _NJ, _NS, _NU, _NN, 2 * _NJ, 2 * _NS, 2 * _NU, 2 * _NN, 3 * _NJ, 3 * _NS,
        _NJ - _NS, 2 * _NJ - _NS, 2 * _NS - _NJ, 3 * _NJ - 2 * _NS, 2 * _NJ - 3 * _NS,
        3 * _NJ - 5 * _NS, 5 * _NS - _NJ, 2 * _NJ - 4 * _NS, 6 * _NS - 2 * _NJ, 2 * _NU - _NN,
        _NE, _NV, _NM, 2 * _NJ - 2 * _NS, _NJ + _NS, 2 * _NU - _NS, 3 * _NS - _NJ, 4 * _NS - _NJ,
        _NS - _NU, _NS - _NN, _NJ - _NU, _NJ - _NN, 4 * _NJ, 4 * _NS, 3 * _NJ - 3 * _NS,
    ),
    (0.0, _NJ, _NS, _NU, _NN, 2 * _NJ, 2 * _NS, 3 * _NJ - 5 * _NS, 5 * _NS - _NJ),
    (0.0, _NJ, _NS, _NU, _NN),
)

# Fit window, Julian millennia from J2000.
SUN_FIT_SPAN = 0.5
SUN_FIT_SAMPLES = 2500

HEADER = '''"""VSOP87 coefficient tables.

Planets use the heliocentric spherical variant (VSOP87D, Bretagnon & Francou
1988, ecliptic and equinox of date) truncated at an amplitude of 1e-7 radian
or AU. The Sun uses a barycentric rectangular table laid out like VSOP87E
(J2000 ecliptic) but not taken from it: the terms are a least-squares fit,
over 1500-2500 TDB, to the mass-weighted barycentre of the eight planet
tables below after rotating them to the J2000 ecliptic. The fit follows the
barycentre to about 1e-5 AU inside that window (3.5e-6 AU at J2000) and
degrades quickly outside it.

Layout: coordinate key -> term groups ordered by ascending power of t, each
group a tuple of (A, B, C) with the term value A * cos(B + C * t), t in
Julian millennia from J2000 (TDB). Amplitudes are in radians (L, B) or AU
(R, X, Y, Z).

Regenerate with ``scripts/generate_vsop87_data.py``.
"""
'''

Term = tuple[float, float, float]


def _amplitude(value: float) -> str:
    text = f'{value:.11f}'.rstrip('0')
    return text + '0' if text.endswith('.') else text


def _truncate(groups: list[list[list[float]]], max_power: int, threshold: float) -> list[list[Term]]:
    """Keep terms at or above threshold (scaled from 1e-8 units)."""
    kept: list[list[Term]] = []
    for group in groups[: max_power + 1]:
        terms = [(a * 1e-8, b, c) for a, b, c in group]
        selected = [terms[0]] + [t for t in terms[1:] if t[0] >= threshold]
        kept.append(selected)
    return kept


def _format_table(name: str, coords: dict[str, list[list[Term]]]) -> list[str]:
    lines = [f'{name.upper()} = {{']
    for coord, groups in coords.items():
        lines.append(f"    '{coord}': (")
        for power, group in enumerate(groups):
            lines.append(f'        # {coord}{power}')
            lines.append('        (')
            for a, b, c in group:
                lines.append(f'            ({_amplitude(a)}, {float(b)!r}, {float(c)!r}),')
            lines.append('        ),')
        lines.append('    ),')
    lines.append('}')
    return lines


def _evaluate(groups: list[list[Term]], t: float) -> float:
    total = 0.0
    for group in reversed(groups):
        total = total * t + sum(a * math.cos(b + c * t) for a, b, c in group)
    return total


def _ecliptic_of_date_to_j2000(vec: tuple[float, float, float], t: float) -> tuple[float, float, float]:
    """Rotate ecliptic-of-date coordinates to the J2000 ecliptic (P03 angles)."""
    pi_a, big_pi_a = precession.ecliptic_precession_angles_p03(10.0 * t)
    p_a = precession.obliquity_p03(10.0 * t)[0]
    pi_a, big_pi_a, p_a = (math.radians(v / 3600.0) for v in (pi_a, big_pi_a, p_a))
    x, y, z = vec
    angle = big_pi_a + p_a
    x, y = x * math.cos(angle) + y * math.sin(angle), -x * math.sin(angle) + y * math.cos(angle)
    y, z = y * math.cos(pi_a) - z * math.sin(pi_a), y * math.sin(pi_a) + z * math.cos(pi_a)
    x, y = x * math.cos(big_pi_a) - y * math.sin(big_pi_a), x * math.sin(big_pi_a) + y * math.cos(big_pi_a)
    return x, y, z


def _sun_barycentric(planets: dict[str, dict[str, list[list[Term]]]], t: float) -> list[float]:
    """Sun relative to the barycentre, J2000 ecliptic, from heliocentric planets."""
    total = [0.0, 0.0, 0.0]
    mass_sum = 0.0
    for name, coords in planets.items():
        lon = _evaluate(coords['L'], t)
        lat = _evaluate(coords['B'], t)
        rad = _evaluate(coords['R'], t)
        heliocentric = (
            rad * math.cos(lat) * math.cos(lon),
            rad * math.cos(lat) * math.sin(lon),
            rad * math.sin(lat),
        )
        mass = 1.0 / MASS_RATIOS[name]
        mass_sum += mass
        for k, value in enumerate(_ecliptic_of_date_to_j2000(heliocentric, t)):
            total[k] += mass * value
    return [-value / (1.0 + mass_sum) for value in total]


def _sun_basis(t: float) -> list[float]:
    row: list[float] = []
    for power, frequencies in enumerate(SUN_FREQUENCIES):
        scale = t**power
        for freq in frequencies:
            if freq == 0.0:
                row.append(scale)
            else:
                row.extend((scale * math.cos(abs(freq) * t), scale * math.sin(abs(freq) * t)))
    return row


def _sun_table(planets: dict[str, dict[str, list[list[Term]]]]) -> dict[str, list[list[Term]]]:
    """Fit the Sun's barycentric X, Y, Z to the planet tables.

    Samples are spread over +/- SUN_FIT_SPAN millennia with a golden-ratio
    jitter so no frequency in the basis aliases onto the sampling step.
    """
    golden = (math.sqrt(5.0) - 1.0) / 2.0
    rows = []
    targets = []
    for s in range(SUN_FIT_SAMPLES):
        t = -SUN_FIT_SPAN + 2.0 * SUN_FIT_SPAN * (s + (s * golden) % 1.0) / SUN_FIT_SAMPLES
        rows.append(_sun_basis(t))
        targets.append(_sun_barycentric(planets, t))
    coeffs, *_ = np.linalg.lstsq(np.array(rows), np.array(targets), rcond=None)

    table: dict[str, list[list[Term]]] = {}
    for k, coord in enumerate('XYZ'):
        column = iter(coeffs[:, k])
        groups: list[list[Term]] = []
        for frequencies in SUN_FREQUENCIES:
            group: list[Term] = []
            for freq in frequencies:
                if freq == 0.0:
                    value = float(next(column))
                    group.append((abs(value), math.pi if value < 0 else 0.0, 0.0))
                else:
                    a = float(next(column))
                    b = float(next(column))
                    phase = math.atan2(-b, a) % (2.0 * math.pi)
                    group.append((math.hypot(a, b), phase, abs(freq)))
            group.sort(key=lambda term: -term[0])
            groups.append(group)
        table[coord] = groups
    return table


def generate(threshold: float) -> str:
    """Return the full text of the data module."""
    lines = [HEADER]
    planets: dict[str, dict[str, list[list[Term]]]] = {}
    for planet, (lmax, bmax, rmax) in POWER_LIMITS.items():
        module = importlib.import_module(f'pymeeus.{planet}')
        coords = {
            'L': _truncate(module.VSOP87_L, lmax, threshold),
            'B': _truncate(module.VSOP87_B, bmax, threshold),
            'R': _truncate(module.VSOP87_R, rmax, threshold),
        }
        planets[planet] = coords
        lines.extend(_format_table(planet, coords))
        lines.extend(['', ''])
    lines.append('# Least-squares fit to the mass-weighted barycentre of the planet tables')
    lines.append('# above, rotated to the J2000 ecliptic, over 1500-2500 TDB.')
    lines.extend(_format_table('Sun', _sun_table(planets)))
    return '\n'.join(lines) + '\n'


def main() -> int:
    """Write the generated coefficient module.

    Returns:
        0 on success, 1 when pymeeus is missing or the output cannot be written.
    """
    parser = argparse.ArgumentParser(description='Generate VSOP87 coefficient tables.')
    parser.add_argument(
        '--threshold',
        type=float,
        default=1e-7,
        help='Smallest amplitude kept (radian or AU); default 1e-7',
    )
    parser.add_argument(
        '-o',
        '--output',
        type=Path,
        default=_DEFAULT_OUTPUT,
        help='Output module path',
    )
    args = parser.parse_args()
    try:
        text = generate(args.threshold)
    except ModuleNotFoundError as e:
        print(f'Error: {e} (install pymeeus)', file=sys.stderr)
        return 1
    try:
        args.output.write_text(text, encoding='utf-8')
    except OSError as e:
        print(f'Error: cannot write {args.output}: {e}', file=sys.stderr)
        return 1
    print(f'Wrote {args.output}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
