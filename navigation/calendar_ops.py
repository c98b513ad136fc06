# navigation/calendar_ops.py
"""
Calendar operations on naive datetimes ("civil dates").

Conventions
- A plain `date` is promoted to midnight of that day.
- Weeks run Monday..Sunday.
- end_of_* means 23:59:59.999999 of the last day.
- Month and year arithmetic overflows instead of clamping:
    add_months(2019-01-31, 1) -> 2019-03-03
    add_years(2020-02-29, 1)  -> 2021-03-01
  The month-end drift correction in navigation.arithmetic relies on this.

`datetime` is immutable, so nothing here can change a caller's value.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union
from zoneinfo import ZoneInfo

from navigation.config import get_settings

DateLike = Union[date, datetime]

__all__ = [
    "DateLike",
    "as_datetime",
    "today",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "quarter_of",
    "first_of_quarter",
    "end_of_quarter",
    "start_of_year",
    "end_of_year",
    "add_days",
    "add_weeks",
    "add_months",
    "add_quarters",
    "add_years",
    "diff_in_days",
    "diff_in_months",
]


def as_datetime(d: DateLike) -> datetime:
    """Return `d` as a datetime; dates become midnight."""
    if isinstance(d, datetime):
        return d
    if isinstance(d, date):
        return datetime.combine(d, time.min)
    raise TypeError(f"expected a date or datetime, got {type(d).__name__}")


def today(tz_name: Optional[str] = None) -> datetime:
    """
    Start of the current day in `tz_name`, returned naive.
    Defaults to the configured application timezone.
    """
    if tz_name is None:
        tz_name = get_settings().app_timezone
    now = datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return start_of_day(now)


# ---------- Day / week ----------


def start_of_day(d: DateLike) -> datetime:
    return as_datetime(d).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(d: DateLike) -> datetime:
    return as_datetime(d).replace(hour=23, minute=59, second=59, microsecond=999999)


def start_of_week(d: DateLike) -> datetime:
    dt = start_of_day(d)
    return dt - timedelta(days=dt.weekday())


def end_of_week(d: DateLike) -> datetime:
    dt = end_of_day(d)
    return dt + timedelta(days=6 - dt.weekday())


# ---------- Month / quarter / year ----------


def start_of_month(d: DateLike) -> datetime:
    return start_of_day(d).replace(day=1)


def end_of_month(d: DateLike) -> datetime:
    dt = end_of_day(d)
    return dt.replace(day=calendar.monthrange(dt.year, dt.month)[1])


def quarter_of(d: DateLike) -> int:
    """1..4"""
    return (as_datetime(d).month - 1) // 3 + 1


def first_of_quarter(d: DateLike) -> datetime:
    month = (quarter_of(d) - 1) * 3 + 1
    return start_of_day(d).replace(month=month, day=1)


def end_of_quarter(d: DateLike) -> datetime:
    month = quarter_of(d) * 3
    dt = end_of_day(d).replace(day=1, month=month)
    return dt.replace(day=calendar.monthrange(dt.year, month)[1])


def start_of_year(d: DateLike) -> datetime:
    return start_of_day(d).replace(month=1, day=1)


def end_of_year(d: DateLike) -> datetime:
    return end_of_day(d).replace(month=12, day=31)


# ---------- Arithmetic ----------


def add_days(d: DateLike, n: int) -> datetime:
    return as_datetime(d) + timedelta(days=n)


def add_weeks(d: DateLike, n: int) -> datetime:
    return as_datetime(d) + timedelta(weeks=n)


def add_months(d: DateLike, n: int) -> datetime:
    """Shift by `n` months (negative goes back); surplus days spill forward."""
    dt = as_datetime(d)
    year, month0 = divmod(dt.year * 12 + dt.month - 1 + n, 12)
    first = dt.replace(year=year, month=month0 + 1, day=1)
    return first + timedelta(days=dt.day - 1)


def add_quarters(d: DateLike, n: int) -> datetime:
    return add_months(d, 3 * n)


def add_years(d: DateLike, n: int) -> datetime:
    return add_months(d, 12 * n)


def diff_in_days(a: DateLike, b: DateLike) -> int:
    """Whole days between a and b, regardless of order."""
    return abs(as_datetime(b) - as_datetime(a)).days


def diff_in_months(a: DateLike, b: DateLike) -> int:
    """Whole months between a and b, regardless of order."""
    start, end = as_datetime(a), as_datetime(b)
    if end < start:
        start, end = end, start
    months = (end.year - start.year) * 12 + end.month - start.month
    if (end.day, end.time()) < (start.day, start.time()):
        months -= 1
    return months
