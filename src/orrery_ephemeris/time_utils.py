"""Calendar dates, Julian Days and the UTC/TAI/TT/TDB time scales.

All Julian Days are plain floats on a continuous scale. Leap-second
discontinuities only appear when converting to or from UTC calendar fields.
Calendar fields are not validated; callers supply sane values.
"""

from __future__ import annotations

import bisect
import functools
import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

import julian

from orrery_ephemeris.config import get_leapsecs_path
from orrery_ephemeris.constants import (
    DATETIME_EPOCH_JD,
    DAYS_PER_JULIAN_CENTURY,
    DAYS_PER_JULIAN_MILLENNIUM,
    DAYS_PER_JULIAN_YEAR,
    DAYS_PER_WEEK,
    GREGORIAN_START_JD,
    J2000,
    MINUTES_PER_DAY,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    TICKS_PER_DAY,
    TT_MINUS_TAI_SECONDS,
)

logger = logging.getLogger(__name__)

INVALID_DATE = 'NOT A VALID DATE'

_MONTHS_US = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')
_MONTHS_DE = ('Jan', 'Feb', 'Mär', 'Apr', 'Mai', 'Jun', 'Jul', 'Aug', 'Sep', 'Okt', 'Nov', 'Dez')

# TDB - TT periodic term (seconds), driven by Earth's mean anomaly.
_TDB_K = 1.657e-3
_TDB_EB = 1.671e-2
_TDB_M0 = 6.239996
_TDB_M1 = 1.99096871e-7

# (TAI - UTC seconds, first UTC Julian Day it applies to)
BUILTIN_LEAP_SECONDS: tuple[tuple[float, float], ...] = (
    (10, 2441317.5),  # 1972 Jan 1
    (11, 2441499.5),  # 1972 Jul 1
    (12, 2441683.5),  # 1973 Jan 1
    (13, 2442048.5),  # 1974 Jan 1
    (14, 2442413.5),  # 1975 Jan 1
    (15, 2442778.5),  # 1976 Jan 1
    (16, 2443144.5),  # 1977 Jan 1
    (17, 2443509.5),  # 1978 Jan 1
    (18, 2443874.5),  # 1979 Jan 1
    (19, 2444239.5),  # 1980 Jan 1
    (20, 2444786.5),  # 1981 Jul 1
    (21, 2445151.5),  # 1982 Jul 1
    (22, 2445516.5),  # 1983 Jul 1
    (23, 2446247.5),  # 1985 Jul 1
    (24, 2447161.5),  # 1988 Jan 1
    (25, 2447892.5),  # 1990 Jan 1
    (26, 2448257.5),  # 1991 Jan 1
    (27, 2448804.5),  # 1992 Jul 1
    (28, 2449169.5),  # 1993 Jul 1
    (29, 2449534.5),  # 1994 Jul 1
    (30, 2450083.5),  # 1996 Jan 1
    (31, 2450630.5),  # 1997 Jul 1
    (32, 2451179.5),  # 1999 Jan 1
    (33, 2453736.5),  # 2006 Jan 1
    (34, 2454832.5),  # 2009 Jan 1
    (35, 2456109.5),  # 2012 Jul 1
    (36, 2457204.5),  # 2015 Jul 1
    (37, 2457754.5),  # 2017 Jan 1
)


@dataclass(frozen=True)
class CalendarDate:
    """Civil calendar fields (Julian calendar before 1582 Oct 15, Gregorian after).

    ``second`` may reach 60.x while a leap second is being inserted.
    ``utc_offset_hours`` is local time minus UTC.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0
    utc_offset_hours: float = 0.0
    timezone: str = 'UTC'

    @property
    def weekday(self) -> int:
        """Day of week of the local date, 0 = Sunday."""
        local_jd = calendar_to_jd(replace(self, utc_offset_hours=0.0))
        return int(math.floor(local_jd + 0.5) + 1) % 7

    def with_leap_seconds(self, seconds: float) -> CalendarDate:
        """Return a copy with ``seconds`` added to the seconds field (no carry)."""
        return replace(self, second=self.second + seconds)

    def date_only(self) -> CalendarDate:
        """Return the same date at 00:00:00."""
        return replace(self, hour=0, minute=0, second=0.0)

    def is_valid(self) -> bool:
        """Return True when the fields can be formatted."""
        return (
            1 <= self.month <= 12
            and self.day >= 1
            and self.hour >= 0
            and self.minute >= 0
            and self.second >= 0.0
        )


@dataclass(frozen=True)
class JulianDate:
    """Julian Day with a caller-defined epoch tag (metadata only)."""

    jd: float
    epoch: str = 'J2000'

    @classmethod
    def from_calendar(cls, date: CalendarDate, epoch: str = 'J2000') -> JulianDate:
        return cls(calendar_to_jd(date), epoch)

    def to_calendar(self) -> CalendarDate:
        return jd_to_calendar(self.jd)

    def centuries(self) -> float:
        """Julian centuries since J2000."""
        return julian_century(self.jd)

    def millennia(self) -> float:
        """Julian millennia since J2000."""
        return julian_millennium(self.jd)

    @property
    def ticks(self) -> int:
        """100-nanosecond ticks since 0001-01-01 00:00 (proleptic Gregorian)."""
        return int(round((self.jd - DATETIME_EPOCH_JD) * TICKS_PER_DAY))

    def __float__(self) -> float:
        return self.jd


@dataclass(frozen=True)
class LeapSecond:
    """One leap-second record: cumulative TAI - UTC from a UTC Julian Day onward."""

    offset: float
    jd: float


class LeapSecondTable:
    """Append-only step function of TAI - UTC against UTC Julian Day.

    Queries before the first record use the first offset; queries after the
    last record extrapolate the last offset.
    """

    def __init__(self, records: Iterable[tuple[float, float]] = ()) -> None:
        self._records: list[LeapSecond] = []
        self._thresholds: list[float] = []
        for offset, jd in records:
            self.append(offset, jd)

    def append(self, offset: float, jd: float) -> None:
        """Add a record after the existing ones.

        Parameters:
            offset: Cumulative TAI - UTC in seconds.
            jd: UTC Julian Day at which the offset takes effect.

        Raises:
            ValueError: If jd is not after the last threshold or the offset decreases.
        """
        if self._records:
            last = self._records[-1]
            if jd <= last.jd:
                raise ValueError(f'leap second threshold {jd} is not after {last.jd}')
            if offset < last.offset:
                raise ValueError(f'leap second offset {offset} is less than {last.offset}')
        self._records.append(LeapSecond(float(offset), float(jd)))
        self._thresholds.append(float(jd))

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LeapSecond]:
        return iter(self._records)

    def __getitem__(self, index: int) -> LeapSecond:
        return self._records[index]

    def offset_at(self, utc_jd: float) -> float:
        """Return TAI - UTC seconds for the most recent threshold not after utc_jd."""
        if not self._records:
            return 0.0
        index = bisect.bisect_right(self._thresholds, utc_jd) - 1
        return self._records[max(index, 0)].offset

    def offset_for_tai(self, tai: float) -> tuple[float, float]:
        """Return (TAI - UTC, extra seconds) for a TAI Julian Day.

        ``extra`` is non-zero only while a leap second is being inserted, so the
        resulting UTC seconds field can read 60.x.
        """
        records = self._records
        if not records:
            return 0.0, 0.0
        for i in range(len(records) - 1, 0, -1):
            current, previous = records[i], records[i - 1]
            if tai - current.offset / SECONDS_PER_DAY >= current.jd:
                return current.offset, 0.0
            if tai - previous.offset / SECONDS_PER_DAY >= current.jd:
                return current.offset, current.offset - previous.offset
        return records[0].offset, 0.0


def _read_leapsecs_file(table: LeapSecondTable, path: Path) -> None:
    with open(path, encoding='utf-8') as f:
        for lineno, line in enumerate(f, start=1):
            text = line.split('#', 1)[0].strip()
            if not text:
                continue
            parts = text.split()
            if len(parts) != 2:
                raise ValueError(f'{path}:{lineno}: expected "<seconds> <julian day>"')
            jd = float(parts[1])
            if jd <= table[-1].jd:
                continue
            table.append(float(parts[0]), jd)


@functools.lru_cache(maxsize=1)
def default_leap_second_table() -> LeapSecondTable:
    """Return the shared leap-second table (built-in records plus ORRERY_LEAPSECS).

    Built once on first use. Records in the extension file at or before the
    last built-in threshold are ignored.
    """
    table = LeapSecondTable(BUILTIN_LEAP_SECONDS)
    path = get_leapsecs_path()
    if path is None:
        return table
    try:
        _read_leapsecs_file(table, path)
    except (OSError, ValueError) as e:
        logger.warning('Leap seconds from %s not used (%s); using built-in table.', path, e)
        return LeapSecondTable(BUILTIN_LEAP_SECONDS)
    logger.info('Leap-second table extended from %s to %d records', path, len(table))
    return table


def _table(table: LeapSecondTable | None) -> LeapSecondTable:
    return default_leap_second_table() if table is None else table


# ---------------------------------------------------------------------------
# Calendar <-> Julian Day
# ---------------------------------------------------------------------------


def _is_gregorian(year: int, month: int, day: int) -> bool:
    return (year, month, day) >= (1582, 10, 15)


def calendar_to_jd(date: CalendarDate) -> float:
    """Convert calendar fields to a Julian Day (Meeus, Astronomical Algorithms ch. 7).

    Julian calendar rules apply before 1582 Oct 15 and Gregorian rules from
    then on. Years <= 0 are astronomical (year 0 = 1 BCE).

    Parameters:
        date: Calendar date; local time when utc_offset_hours is non-zero.

    Returns:
        Julian Day (UTC when the offset is honoured).
    """
    y, m = date.year, date.month
    if m <= 2:
        y -= 1
        m += 12
    b = -2
    if _is_gregorian(date.year, date.month, date.day):
        # Integer division truncating toward zero.
        b = int(y / 400) - int(y / 100)
    day_fraction = (
        date.hour / 24.0 + date.minute / MINUTES_PER_DAY + date.second / SECONDS_PER_DAY
    )
    jd = math.floor(365.25 * y) + math.floor(30.6001 * (m + 1)) + b + 1720996.5
    return jd + date.day + day_fraction - date.utc_offset_hours / 24.0


def jd_to_calendar(jd: float, timezone: str = 'UTC') -> CalendarDate:
    """Convert a Julian Day to calendar fields (inverse of calendar_to_jd).

    The time of day is rounded to the millisecond.

    Parameters:
        jd: Julian Day.
        timezone: Label stored on the result.

    Returns:
        CalendarDate.
    """
    z = math.floor(jd + 0.5)
    millis = round((jd + 0.5 - z) * SECONDS_PER_DAY * 1000.0)
    if millis >= SECONDS_PER_DAY * 1000.0:
        z += 1
        millis = 0
    if z < GREGORIAN_START_JD:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = int(b - d - math.floor(30.6001 * e))
    month = int(e - 1 if e < 14 else e - 13)
    year = int(c - 4716 if month > 2 else c - 4715)
    hour, rem = divmod(int(millis), 3600000)
    minute, rem = divmod(rem, 60000)
    return CalendarDate(year, month, day, hour, minute, rem / 1000.0, timezone=timezone)


def day_number(date: CalendarDate) -> float:
    """Days since 2000 Jan 0.0 UT (the 'd' of Schlyter's orbital formulae)."""
    y, m = date.year, date.month
    d = 367 * y - (7 * (y + (m + 9) // 12)) // 4 + (275 * m) // 9 + date.day - 730530
    return d + (date.hour + date.minute / 60.0 + date.second / SECONDS_PER_HOUR) / 24.0


def julian_century(jd: float) -> float:
    """Julian centuries from J2000."""
    return (jd - J2000) / DAYS_PER_JULIAN_CENTURY


def julian_millennium(jd: float) -> float:
    """Julian millennia from J2000."""
    return (jd - J2000) / DAYS_PER_JULIAN_MILLENNIUM


# ---------------------------------------------------------------------------
# Time scales
# ---------------------------------------------------------------------------


def utc_to_tai(date: CalendarDate, table: LeapSecondTable | None = None) -> float:
    """Convert a UTC calendar date to a TAI Julian Day.

    The leap-second offset is selected from the date at 00:00, so a seconds
    field of 60.x on the day of a leap second maps into the inserted second.

    Parameters:
        date: UTC (or local, via utc_offset_hours) calendar date.
        table: Leap-second table; default shared table when None.

    Returns:
        TAI Julian Day.
    """
    midnight = calendar_to_jd(CalendarDate(date.year, date.month, date.day))
    dat = _table(table).offset_at(midnight)
    seconds = (
        date.hour * SECONDS_PER_HOUR
        + date.minute * SECONDS_PER_MINUTE
        + date.second
        - date.utc_offset_hours * SECONDS_PER_HOUR
        + dat
    )
    return midnight + seconds / SECONDS_PER_DAY


def tai_to_utc(tai: float, table: LeapSecondTable | None = None) -> CalendarDate:
    """Convert a TAI Julian Day to UTC calendar fields.

    Parameters:
        tai: TAI Julian Day.
        table: Leap-second table; default shared table when None.

    Returns:
        UTC CalendarDate; seconds read 60.x inside an inserted leap second.
    """
    dat, extra = _table(table).offset_for_tai(tai)
    date = jd_to_calendar(tai - dat / SECONDS_PER_DAY)
    if extra:
        date = date.with_leap_seconds(extra)
    return date


def tai_to_tt(tai: float) -> float:
    return tai + TT_MINUS_TAI_SECONDS / SECONDS_PER_DAY


def tt_to_tai(tt: float) -> float:
    return tt - TT_MINUS_TAI_SECONDS / SECONDS_PER_DAY


def tdb_correction(jd: float) -> float:
    """Return TDB - TT in seconds (single periodic term, amplitude ~1.7 ms).

    Parameters:
        jd: TT or TDB Julian Day (the difference is negligible for the argument).
    """
    t = (jd - J2000) * SECONDS_PER_DAY
    m = _TDB_M0 + _TDB_M1 * t
    e = m + _TDB_EB * math.sin(m)
    return _TDB_K * math.sin(e)


def tt_to_tdb(tt: float) -> float:
    return tt + tdb_correction(tt) / SECONDS_PER_DAY


def tdb_to_tt(tdb: float) -> float:
    return tdb - tdb_correction(tdb) / SECONDS_PER_DAY


def utc_to_tdb(date: CalendarDate, table: LeapSecondTable | None = None) -> float:
    """Convert a UTC calendar date to a TDB Julian Day (UTC -> TAI -> TT -> TDB)."""
    return tt_to_tdb(tai_to_tt(utc_to_tai(date, table)))


def tdb_to_utc(tdb: float, table: LeapSecondTable | None = None) -> CalendarDate:
    """Convert a TDB Julian Day to UTC calendar fields (TDB -> TT -> TAI -> UTC)."""
    return tai_to_utc(tt_to_tai(tdb_to_tt(tdb)), table)


def jd_utc_to_tai(utc_jd: float, table: LeapSecondTable | None = None) -> float:
    """Convert a UTC Julian Day to TAI.

    A UTC Julian Day cannot represent the inserted leap second itself;
    prefer calendar dates with utc_to_tai near leap seconds.
    """
    records = list(_table(table))
    if not records:
        return utc_jd
    dat = records[0].offset
    for record in reversed(records[1:]):
        if utc_jd > record.jd:
            dat = record.offset
            break
    return utc_jd + dat / SECONDS_PER_DAY


def tai_to_jd_utc(tai: float, table: LeapSecondTable | None = None) -> float:
    """Convert TAI to a UTC Julian Day (see jd_utc_to_tai for the leap-second caveat)."""
    records = list(_table(table))
    if not records:
        return tai
    dat = records[0].offset
    for i in range(len(records) - 1, 0, -1):
        if tai - records[i - 1].offset / SECONDS_PER_DAY > records[i].jd:
            dat = records[i].offset
            break
    return tai - dat / SECONDS_PER_DAY


# ---------------------------------------------------------------------------
# Units and formatting
# ---------------------------------------------------------------------------


class TimeUnit(Enum):
    """Units accepted by to_days/from_days (years are Julian years)."""

    SECONDS = 'seconds'
    MINUTES = 'minutes'
    HOURS = 'hours'
    DAYS = 'days'
    WEEKS = 'weeks'
    YEARS = 'years'


_DAYS_PER_UNIT = {
    TimeUnit.SECONDS: 1.0 / SECONDS_PER_DAY,
    TimeUnit.MINUTES: 1.0 / MINUTES_PER_DAY,
    TimeUnit.HOURS: 1.0 / 24.0,
    TimeUnit.DAYS: 1.0,
    TimeUnit.WEEKS: DAYS_PER_WEEK,
    TimeUnit.YEARS: DAYS_PER_JULIAN_YEAR,
}


def parse_time_unit(name: str) -> TimeUnit:
    """Parse a unit name (first three letters: sec, min, hou, day, wee, yea).

    Raises:
        ValueError: If the name is not recognized.
    """
    u = name.strip().lower()[:3]
    for unit in TimeUnit:
        if u and unit.value.startswith(u):
            return unit
    raise ValueError(
        f'Invalid time unit {name!r}; expected one of sec, min, hour, day, week, year'
    )


def to_days(value: float, unit: TimeUnit) -> float:
    """Convert value in unit to days."""
    return value * _DAYS_PER_UNIT[unit]


def from_days(days: float, unit: TimeUnit) -> float:
    """Convert days to unit."""
    return days / _DAYS_PER_UNIT[unit]


class DateFormat(Enum):
    ISO8601 = 'iso8601'
    US = 'us'
    DE = 'de'


def parse_date_format(name: str) -> DateFormat:
    """Return the DateFormat named by name (case-insensitive).

    Raises:
        ValueError: If name is not iso8601, us or de.
    """
    try:
        return DateFormat(name.strip().lower())
    except ValueError:
        raise ValueError(f'Invalid date format {name!r}; expected iso8601, us or de') from None


def format_date(
    date: CalendarDate,
    fmt: DateFormat = DateFormat.ISO8601,
    include_time: bool = True,
) -> str:
    """Format a calendar date.

    Parameters:
        date: Calendar date.
        fmt: ISO8601 ("2000-01-01 12:00:00 UTC"), US ("Jan 01, 2000 ...") or
            DE ("01.Jan 2000 ...", German month abbreviations).
        include_time: False for the date part only.

    Returns:
        Formatted string, or "NOT A VALID DATE" for out-of-range fields.
    """
    if not date.is_valid():
        return INVALID_DATE
    y, m, d = date.year, date.month, date.day
    if fmt is DateFormat.ISO8601:
        text = f'{y:04d}-{m:02d}-{d:02d}'
    elif fmt is DateFormat.US:
        text = f'{_MONTHS_US[m - 1]} {d:02d}, {y:04d}'
    else:
        text = f'{d:02d}.{_MONTHS_DE[m - 1]} {y:04d}'
    if not include_time:
        return text
    return f'{text} {date.hour:02d}:{date.minute:02d}:{int(date.second):02d} {date.timezone}'


def parse_datetime(string: str) -> CalendarDate | None:
    """Parse a UTC date/time string with rms-julian.

    Parameters:
        string: Any form accepted by julian.day_sec_from_string; a trailing
            ISO "Z" is accepted.

    Returns:
        UTC CalendarDate, or None on parse failure.
    """
    candidates = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z".
        candidates.append(stripped[:-1])
    for candidate in candidates:
        try:
            result = julian.day_sec_from_string(candidate)
        except (ValueError, TypeError, LookupError, OSError) as e:
            logger.debug('Cannot parse %r: %s', candidate, e)
            continue
        day, sec = int(result[0]), float(result[1])
        year, month, mday = julian.ymd_from_day(day)
        hour, minute, second = julian.hms_from_sec(sec)
        return CalendarDate(int(year), int(month), int(mday), int(hour), int(minute), float(second))
    return None
