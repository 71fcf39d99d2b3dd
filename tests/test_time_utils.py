"""Tests for calendar conversion, leap seconds and time scales."""

from __future__ import annotations

from pathlib import Path

import julian
import pytest

from orrery_ephemeris import time_utils
from orrery_ephemeris.time_utils import (
    CalendarDate,
    DateFormat,
    JulianDate,
    LeapSecondTable,
    TimeUnit,
    calendar_to_jd,
    jd_to_calendar,
)

ONE_SECOND = 1.0 / 86400.0


def test_calendar_to_jd_j2000() -> None:
    """2000 Jan 1 12:00 is JD 2451545.0."""
    assert calendar_to_jd(CalendarDate(2000, 1, 1, 12)) == pytest.approx(2451545.0, abs=1e-9)


def test_gregorian_cutover() -> None:
    """1582 Oct 4 (Julian) is followed directly by 1582 Oct 15 (Gregorian)."""
    oct4 = calendar_to_jd(CalendarDate(1582, 10, 4))
    oct15 = calendar_to_jd(CalendarDate(1582, 10, 15))
    assert oct4 == pytest.approx(2299159.5)
    assert oct15 - oct4 == pytest.approx(1.0)


def test_julian_day_zero_is_4713_bce() -> None:
    """JD 0 is noon of 1 Jan 4713 BCE (astronomical year -4712)."""
    assert calendar_to_jd(CalendarDate(-4712, 1, 1, 12)) == pytest.approx(0.0, abs=1e-9)
    date = jd_to_calendar(0.0)
    assert (date.year, date.month, date.day, date.hour) == (-4712, 1, 1, 12)


@pytest.mark.parametrize(
    'date',
    [
        CalendarDate(2024, 2, 29, 23, 59, 59.5),
        CalendarDate(1969, 7, 20, 20, 17, 40.0),
        CalendarDate(1582, 10, 15, 0, 0, 0.0),
        CalendarDate(1066, 10, 14, 9, 0, 0.0),
        CalendarDate(-500, 3, 1, 6, 30, 0.0),
    ],
)
def test_calendar_round_trip(date: CalendarDate) -> None:
    """Calendar -> JD -> calendar reproduces the date within one second."""
    back = jd_to_calendar(calendar_to_jd(date))
    assert (back.year, back.month, back.day) == (date.year, date.month, date.day)
    assert abs(calendar_to_jd(back) - calendar_to_jd(date)) < ONE_SECOND


def test_weekday() -> None:
    """2000 Jan 1 was a Saturday and 2024 Jul 4 a Thursday (0 = Sunday)."""
    assert CalendarDate(2000, 1, 1).weekday == 6
    assert CalendarDate(2024, 7, 4, 18).weekday == 4


def test_utc_offset_shifts_julian_day() -> None:
    """Local time two hours ahead of UTC maps to a JD two hours earlier."""
    local = CalendarDate(2000, 1, 1, 14, utc_offset_hours=2.0, timezone='CEST')
    assert calendar_to_jd(local) == pytest.approx(2451545.0, abs=1e-9)


def test_julian_date_helpers() -> None:
    """JulianDate exposes centuries, millennia and .NET-style ticks."""
    jd = JulianDate(2451545.0 + 36525.0, epoch='J2000')
    assert jd.centuries() == pytest.approx(1.0)
    assert jd.millennia() == pytest.approx(0.1)
    assert JulianDate(1721425.5).ticks == 0
    assert float(jd) == jd.jd


def test_leap_second_offsets() -> None:
    """Offsets step at thresholds and clamp at both ends of the table."""
    table = time_utils.default_leap_second_table()
    assert table.offset_at(2441317.5) == 10
    assert table.offset_at(2441317.0) == 10
    assert table.offset_at(2457754.4) == 36
    assert table.offset_at(2457754.5) == 37
    assert table.offset_at(2470000.0) == 37


def test_leap_second_table_monotonic() -> None:
    """Built-in offsets never decrease as thresholds increase."""
    records = list(time_utils.default_leap_second_table())
    for prev, cur in zip(records, records[1:]):
        assert cur.jd > prev.jd
        assert cur.offset >= prev.offset


def test_leap_second_append_rejects_out_of_order() -> None:
    """Records must be appended in increasing Julian Day order."""
    table = LeapSecondTable([(10, 2441317.5)])
    with pytest.raises(ValueError):
        table.append(11, 2441317.5)
    with pytest.raises(ValueError):
        table.append(9, 2441499.5)
    table.append(11, 2441499.5)
    assert len(table) == 2


def test_utc_to_tai_applies_offset() -> None:
    """TAI is 37 s ahead of UTC after 2017."""
    date = CalendarDate(2020, 6, 1, 12)
    assert time_utils.utc_to_tai(date) - calendar_to_jd(date) == pytest.approx(37 * ONE_SECOND)


@pytest.mark.parametrize('year', [1972, 1985, 1999, 2008, 2016, 2030])
def test_utc_tai_round_trip(year: int) -> None:
    """UTC -> TAI -> UTC is the identity within 1e-6 days after 1972."""
    date = CalendarDate(year, 8, 17, 13, 45, 12.25)
    back = time_utils.tai_to_utc(time_utils.utc_to_tai(date))
    assert abs(calendar_to_jd(back) - calendar_to_jd(date)) < 1e-6


def test_inserted_leap_second_reads_sixty() -> None:
    """The second inserted at the end of 2016 reads 23:59:60.x in UTC."""
    date = CalendarDate(2016, 12, 31, 23, 59, 60.5)
    back = time_utils.tai_to_utc(time_utils.utc_to_tai(date))
    assert (back.year, back.month, back.day, back.hour, back.minute) == (2016, 12, 31, 23, 59)
    assert back.second == pytest.approx(60.5, abs=1e-3)


def test_leapsecs_file_extends_table(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """ORRERY_LEAPSECS appends later records; earlier ones are ignored."""
    path = tmp_path / 'leapsecs.txt'
    path.write_text('# extra\n37 2457754.5\n38 2462000.5\n')
    monkeypatch.setenv('ORRERY_LEAPSECS', str(path))
    time_utils.default_leap_second_table.cache_clear()
    try:
        table = time_utils.default_leap_second_table()
        assert len(table) == len(time_utils.BUILTIN_LEAP_SECONDS) + 1
        assert table.offset_at(2462001.0) == 38
    finally:
        time_utils.default_leap_second_table.cache_clear()


def test_bad_leapsecs_file_falls_back(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """A malformed extension file leaves the built-in table in place."""
    path = tmp_path / 'leapsecs.txt'
    path.write_text('38\n')
    monkeypatch.setenv('ORRERY_LEAPSECS', str(path))
    time_utils.default_leap_second_table.cache_clear()
    try:
        table = time_utils.default_leap_second_table()
        assert len(table) == len(time_utils.BUILTIN_LEAP_SECONDS)
    finally:
        time_utils.default_leap_second_table.cache_clear()


def test_tt_and_tdb_offsets() -> None:
    """TT - TAI is 32.184 s and TDB - TT stays below 1.7 ms."""
    tai = 2451545.0
    tt = time_utils.tai_to_tt(tai)
    assert (tt - tai) * 86400.0 == pytest.approx(32.184)
    assert time_utils.tt_to_tai(tt) == pytest.approx(tai, abs=1e-12)
    for jd in (2451545.0, 2451600.0, 2451700.0, 2460000.0):
        assert abs(time_utils.tdb_correction(jd)) <= 1.7e-3
        assert time_utils.tdb_to_tt(time_utils.tt_to_tdb(jd)) == pytest.approx(jd, abs=1e-10)


def test_utc_tdb_round_trip() -> None:
    """UTC -> TDB -> UTC returns the same instant."""
    date = CalendarDate(2024, 3, 20, 3, 6, 0.0)
    back = time_utils.tdb_to_utc(time_utils.utc_to_tdb(date))
    assert abs(calendar_to_jd(back) - calendar_to_jd(date)) < 1e-6


def test_julian_century_and_millennium() -> None:
    assert time_utils.julian_century(2451545.0 + 36525.0) == pytest.approx(1.0)
    assert time_utils.julian_millennium(2451545.0 - 365250.0) == pytest.approx(-1.0)


def test_parse_time_unit() -> None:
    """Units are recognized by their first three letters."""
    assert time_utils.parse_time_unit('hours') is TimeUnit.HOURS
    assert time_utils.parse_time_unit('SEC') is TimeUnit.SECONDS
    assert time_utils.parse_time_unit('week') is TimeUnit.WEEKS
    with pytest.raises(ValueError):
        time_utils.parse_time_unit('fortnight')


def test_time_unit_conversion() -> None:
    assert time_utils.to_days(2.0, TimeUnit.WEEKS) == pytest.approx(14.0)
    assert time_utils.to_days(36.0, TimeUnit.HOURS) == pytest.approx(1.5)
    assert time_utils.from_days(1.0, TimeUnit.MINUTES) == pytest.approx(1440.0)


def test_format_date() -> None:
    """Dates format in ISO 8601, US and German styles."""
    date = CalendarDate(2024, 3, 5, 7, 8, 9.9)
    assert time_utils.format_date(date) == '2024-03-05 07:08:09 UTC'
    assert time_utils.format_date(date, DateFormat.US) == 'Mar 05, 2024 07:08:09 UTC'
    assert time_utils.format_date(date, DateFormat.DE, include_time=False) == '05.Mär 2024'


def test_format_invalid_date() -> None:
    """Out-of-range fields format as the invalid-date marker."""
    assert time_utils.format_date(CalendarDate(2024, 13, 1)) == time_utils.INVALID_DATE


def test_parse_date_format() -> None:
    assert time_utils.parse_date_format('ISO8601') is DateFormat.ISO8601
    with pytest.raises(ValueError):
        time_utils.parse_date_format('klingon')


def test_parse_datetime_accepts_iso_z_suffix() -> None:
    """ISO-8601 trailing Z parses as UTC like the same timestamp without Z."""
    with_z = time_utils.parse_datetime('2022-08-18T00:01:47Z')
    without_z = time_utils.parse_datetime('2022-08-18T00:01:47')

    assert with_z is not None
    assert without_z is not None
    assert with_z == without_z
    assert (with_z.year, with_z.month, with_z.day, with_z.hour, with_z.minute) == (2022, 8, 18, 0, 1)
    assert with_z.second == pytest.approx(47.0)


@pytest.mark.parametrize('ymd', [(1901, 3, 1), (1972, 1, 1), (2000, 2, 29), (2016, 12, 31), (2099, 12, 31)])
def test_calendar_matches_rms_julian(ymd: tuple[int, int, int]) -> None:
    """Midnight Julian Days agree with rms-julian's day count from 2000-01-01."""
    expected = 2451544.5 + julian.day_from_ymd(*ymd)
    assert calendar_to_jd(CalendarDate(*ymd)) == pytest.approx(expected, abs=1e-9)


def test_day_number() -> None:
    """Day 1.5 is 2000 Jan 1 at noon."""
    assert time_utils.day_number(CalendarDate(2000, 1, 1, 12)) == pytest.approx(1.5)
    assert time_utils.day_number(CalendarDate(1999, 12, 31)) == pytest.approx(0.0)


def test_jd_utc_to_tai_round_trip() -> None:
    utc = 2458849.5  # 2020 Jan 1
    tai = time_utils.jd_utc_to_tai(utc)
    assert (tai - utc) * 86400.0 == pytest.approx(37.0)
    assert time_utils.tai_to_jd_utc(tai) == pytest.approx(utc, abs=1e-9)
