"""Date and time representation, conversion and formatting."""

from __future__ import annotations

import time as _time
from dataclasses import dataclass

_DAYS = (
    "",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_MONTHS = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass
class DateTime:
    """Calendar date and time of day.

    ``day_of_week`` runs from 1 (Monday) to 7 (Sunday); 0 means unknown.
    """

    year: int
    month: int
    day: int
    day_of_week: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def _sort_key(self) -> tuple[int, ...]:
        return (
            self.year,
            self.month,
            self.day,
            self.hours,
            self.minutes,
            self.seconds,
            self.milliseconds,
        )


def format_system_time(time: int) -> str:
    """Format a duration in milliseconds, e.g. ``"1h 02min 03s 004ms"``."""
    time, milliseconds = divmod(time, 1000)
    time, seconds = divmod(time, 60)
    hours, minutes = divmod(time, 60)

    if hours > 0:
        return f"{hours}h {minutes:02d}min {seconds:02d}s {milliseconds:03d}ms"
    if minutes > 0:
        return f"{minutes}min {seconds:02d}s {milliseconds:03d}ms"
    if seconds > 0:
        return f"{seconds}s {milliseconds:03d}ms"
    return f"{milliseconds}ms"


def format_date(date: DateTime) -> str:
    """Format a date, e.g. ``"Friday, January 5, 2024 03:04:05"``."""
    month = _MONTHS[max(0, min(date.month, 12))]
    text = (
        f"{month} {date.day}, {date.year} "
        f"{date.hours:02d}:{date.minutes:02d}:{date.seconds:02d}"
    )
    if date.day_of_week:
        return f"{_DAYS[max(0, min(date.day_of_week, 7))]}, {text}"
    return text


def current_unix_time() -> int:
    """Return the current time as a Unix timestamp in whole seconds."""
    return int(_time.time())


def current_date() -> DateTime:
    """Return the current date and time (UTC)."""
    return unix_time_to_date(current_unix_time())


def unix_time_to_date(t: int) -> DateTime:
    """Convert a Unix timestamp to a date; negative values map to the epoch."""
    t = max(int(t), 0)

    t, seconds = divmod(t, 60)
    t, minutes = divmod(t, 60)
    t, hours = divmod(t, 24)

    a = (4 * t + 102032) // 146097 + 15
    b = t + 2442113 + a - a // 4
    c = (20 * b - 2442) // 7305
    d = b - 365 * c - c // 4
    e = d * 1000 // 30601
    f = d - e * 30 - e * 601 // 1000

    # January and February are counted as months 13 and 14 of the previous year
    if e <= 13:
        c -= 4716
        e -= 1
    else:
        c -= 4715
        e -= 13

    return DateTime(
        year=c,
        month=e,
        day=f,
        day_of_week=day_of_week(c, e, f),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
        milliseconds=0,
    )


def date_to_unix_time(date: DateTime) -> int:
    """Convert a date to a Unix timestamp in seconds."""
    y, m, d = date.year, date.month, date.day

    if m <= 2:
        m += 12
        y -= 1

    t = 365 * y + y // 4 - y // 100 + y // 400
    t += 30 * m + 3 * (m + 1) // 5 + d
    t -= 719561
    t *= 86400
    t += 3600 * date.hours + 60 * date.minutes + date.seconds
    return t


def compare_date_time(date1: DateTime, date2: DateTime) -> int:
    """Return -1, 0 or 1 as ``date1`` is before, equal to or after ``date2``.

    The day of week takes no part in the comparison.
    """
    key1 = date1._sort_key()
    key2 = date2._sort_key()
    return (key1 > key2) - (key1 < key2)


def day_of_week(year: int, month: int, day: int) -> int:
    """Return the day of week, 1 (Monday) to 7 (Sunday), by Zeller's congruence."""
    if month <= 2:
        month += 12
        year -= 1

    j = year // 100
    k = year % 100
    h = day + 26 * (month + 1) // 10 + k + k // 4 + 5 * j + j // 4
    return (h + 5) % 7 + 1