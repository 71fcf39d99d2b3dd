"""Angle helpers: positive modulo, degree trigonometry, sexagesimal formatting, AU/km."""

from __future__ import annotations

import math

from orrery_ephemeris.constants import AU_KM


def pfmod(x: float, y: float) -> float:
    """Positive floating-point modulo: result in [0, |y|) for y > 0.

    Parameters:
        x: Dividend.
        y: Divisor (non-zero).

    Returns:
        x reduced into [0, y).
    """
    q = math.floor(abs(x / y))
    if x < 0.0:
        return x + (q + 1) * y
    return x - q * y


def sin_deg(angle: float) -> float:
    return math.sin(math.radians(angle))


def cos_deg(angle: float) -> float:
    return math.cos(math.radians(angle))


def au_from_km(km: float) -> float:
    return km / AU_KM


def km_from_au(au: float) -> float:
    return au * AU_KM


def dms_string(angle: float, units: str = 'dms', decimals: int = 3) -> str:
    """Sexagesimal text for an angle in degrees (or hours when formatting RA).

    ``units`` holds the three markers written after each field, so 'dms'
    gives ' 12d 30m 45.000s'; anything shorter than three characters uses
    blanks. Negative angles under one unit keep their sign (' -0d ...').
    """
    marks = units if len(units) >= 3 else '   '
    scale = 10**decimals
    whole_seconds, fraction = divmod(round(abs(angle) * 3600.0 * scale), scale)
    whole_minutes, seconds = divmod(whole_seconds, 60)
    degrees, minutes = divmod(whole_minutes, 60)
    head = f'-{degrees}' if angle < 0 else str(degrees)
    frac = f'.{fraction:0{decimals}d}' if decimals > 0 else ''
    return f'{head:>3s}{marks[0]} {minutes:02d}{marks[1]} {seconds:02d}{frac}{marks[2]}'
