"""Analytic solar-system ephemeris and time-scale engine.

This package computes, for a Julian Day:
- positions of the planets, the Sun, the Moon, the Galilean moons and Titan
  relative to their parent body (VSOP87 and closed-form satellite theories)
- pole orientation and prime-meridian spin from IAU rotation models
- conversions between calendar dates and the UTC, TAI, TT and TDB scales

Dates are parsed with rms-julian; numerical work uses numpy.
"""

__all__: list[str] = []
