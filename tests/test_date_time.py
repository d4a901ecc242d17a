import calendar
import re
from datetime import datetime, timezone

import pytest

from portkit.date_time import (
    DateTime,
    compare_date_time,
    current_date,
    current_unix_time,
    date_to_unix_time,
    day_of_week,
    format_date,
    format_system_time,
    unix_time_to_date,
)

TIMESTAMPS = [0, 1, 59, 86399, 86400, 951782400, 951868800, 1700000000,
              1709164800, 2147483647, 4102444800]


def test_format_system_time_hours():
    assert format_system_time(3723004) == "1h 02min 03s 004ms"


def test_format_system_time_only_milliseconds():
    assert format_system_time(0) == "0ms"
    assert format_system_time(999).endswith("ms")
    assert re.fullmatch(r"\d+ms", format_system_time(999))


def test_format_system_time_minutes_and_seconds():
    assert re.fullmatch(r"\d+min \d{2}s \d{3}ms", format_system_time(61_005))
    assert re.fullmatch(r"\d+s \d{3}ms", format_system_time(1_005))
    assert format_system_time(61_005).startswith("1min ")


def test_format_date_with_day_of_week():
    date = DateTime(2024, 1, 5, 5, 3, 4, 5)
    assert format_date(date) == "Friday, January 5, 2024 03:04:05"


def test_format_date_without_day_of_week_matches_datetime():
    ref = datetime(2021, 7, 9, 14, 5, 6)
    date = DateTime(2021, 7, 9, 0, 14, 5, 6)
    expected = f"{calendar.month_name[7]} 9, 2021 {ref:%H:%M:%S}"
    assert format_date(date) == expected


def test_format_date_clamps_names():
    date = DateTime(2000, 15, 1, 9, 0, 0, 0)
    text = format_date(date)
    assert text.startswith(calendar.day_name[6] + ", " + calendar.month_name[12])


@pytest.mark.parametrize("t", TIMESTAMPS)
def test_unix_time_to_date_matches_stdlib(t):
    ref = datetime.fromtimestamp(t, timezone.utc)
    date = unix_time_to_date(t)
    assert (date.year, date.month, date.day) == (ref.year, ref.month, ref.day)
    assert (date.hours, date.minutes, date.seconds) == (ref.hour, ref.minute, ref.second)
    assert date.day_of_week == ref.isoweekday()
    assert date.milliseconds == 0


@pytest.mark.parametrize("t", TIMESTAMPS)
def test_round_trip(t):
    assert date_to_unix_time(unix_time_to_date(t)) == t


def test_negative_time_is_epoch():
    assert unix_time_to_date(-100) == unix_time_to_date(0)
    assert date_to_unix_time(unix_time_to_date(-5)) == 0


@pytest.mark.parametrize(
    "year,month,day",
    [(1970, 1, 1), (2000, 2, 29), (2024, 3, 1), (1999, 12, 31), (2100, 1, 1)],
)
def test_date_to_unix_time_matches_stdlib(year, month, day):
    ref = datetime(year, month, day, 12, 34, 56, tzinfo=timezone.utc)
    date = DateTime(year, month, day, 0, 12, 34, 56)
    assert date_to_unix_time(date) == int(ref.timestamp())


@pytest.mark.parametrize(
    "year,month,day",
    [(1900, 1, 1), (1970, 1, 1), (2000, 2, 29), (2023, 12, 31), (2024, 2, 1)],
)
def test_day_of_week_matches_stdlib(year, month, day):
    assert day_of_week(year, month, day) == datetime(year, month, day).isoweekday()


def test_compare_equal_ignores_day_of_week():
    a = DateTime(2020, 5, 6, 1, 7, 8, 9, 10)
    b = DateTime(2020, 5, 6, 3, 7, 8, 9, 10)
    assert compare_date_time(a, b) == 0


@pytest.mark.parametrize(
    "field", ["year", "month", "day", "hours", "minutes", "seconds", "milliseconds"]
)
def test_compare_each_field(field):
    a = DateTime(2020, 5, 6, 0, 7, 8, 9, 10)
    b = DateTime(2020, 5, 6, 0, 7, 8, 9, 10)
    setattr(b, field, getattr(b, field) + 1)
    assert compare_date_time(a, b) == -1
    assert compare_date_time(b, a) == 1


def test_compare_earlier_field_dominates():
    a = DateTime(2019, 12, 31, 0, 23, 59, 59, 999)
    b = DateTime(2020, 1, 1, 0, 0, 0, 0, 0)
    assert compare_date_time(a, b) == -1


def test_current_date_consistent_with_current_time():
    before = current_unix_time()
    date = current_date()
    after = current_unix_time()
    assert before <= date_to_unix_time(date) <= after