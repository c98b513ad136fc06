# navigation/boundaries.py
"""
Start and end of the period a date falls in.

Unknown frequency codes are logged at error level and the input date is
handed back unchanged; none of these functions raise for a bad code.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from navigation.calendar_ops import (
    DateLike,
    add_days,
    add_months,
    add_weeks,
    add_years,
    as_datetime,
    end_of_day,
    end_of_month,
    end_of_quarter,
    end_of_week,
    end_of_year,
    first_of_quarter,
    start_of_day,
    start_of_month,
    start_of_week,
    start_of_year,
)
from navigation.custom_range import RangeSource, custom_day_count
from navigation.frequency import frequency_of
from navigation.models import Frequency

logger = logging.getLogger("nav")

__all__ = ["start_of_period", "end_of_period", "end_of_x", "start_of_half_year"]


def start_of_half_year(d: DateLike) -> datetime:
    """Jan 1 for January..June, Jul 1 for July..December."""
    start = start_of_year(d)
    if as_datetime(d).month >= 7:
        start = add_months(start, 6)
    return start


def _days_back(days: int) -> Callable[[DateLike], datetime]:
    def rolling_start(d: DateLike) -> datetime:
        return start_of_day(add_days(d, -days))

    return rolling_start


def _days_ahead(days: int) -> Callable[[DateLike], datetime]:
    def rolling_end(d: DateLike) -> datetime:
        return start_of_day(add_days(d, days))

    return rolling_end


def _one_unit_on(add: Callable[[DateLike, int], datetime], amount: int) -> Callable[[DateLike], datetime]:
    # add the unit(s), step back a day, close the day
    def next_end(d: DateLike) -> datetime:
        return end_of_day(add_days(add(d, amount), -1))

    return next_end


_START_OF = {
    Frequency.daily: start_of_day,
    Frequency.weekly: start_of_week,
    Frequency.monthly: start_of_month,
    Frequency.quarterly: first_of_quarter,
    Frequency.half_yearly: start_of_half_year,
    Frequency.yearly: start_of_year,
    Frequency.custom: as_datetime,  # already normalized by the caller
    Frequency.last7: _days_back(7),
    Frequency.last30: _days_back(30),
    Frequency.last90: _days_back(90),
    Frequency.last365: _days_back(365),
    Frequency.month_to_date: start_of_month,
    Frequency.quarter_to_date: first_of_quarter,
    Frequency.year_to_date: start_of_year,
}

_END_OF = {
    Frequency.daily: end_of_day,
    Frequency.weekly: _one_unit_on(add_weeks, 1),
    Frequency.monthly: _one_unit_on(add_months, 1),
    Frequency.quarterly: _one_unit_on(add_months, 3),
    Frequency.half_yearly: _one_unit_on(add_months, 6),
    Frequency.yearly: _one_unit_on(add_years, 1),
    # rolling "ends" are day starts, not 23:59:59
    Frequency.last7: _days_ahead(7),
    Frequency.last30: _days_ahead(30),
    Frequency.last90: _days_ahead(90),
    Frequency.last365: _days_ahead(365),
    Frequency.month_to_date: lambda d: start_of_day(end_of_month(d)),
    Frequency.quarter_to_date: lambda d: start_of_day(end_of_quarter(d)),
    Frequency.year_to_date: lambda d: start_of_day(end_of_year(d)),
}

# plain "end of the unit containing the date"; no multipliers
_END_OF_UNIT = {
    Frequency.daily: end_of_day,
    Frequency.weekly: end_of_week,
    Frequency.monthly: end_of_month,
    Frequency.quarterly: end_of_quarter,
    Frequency.yearly: end_of_year,
}


def start_of_period(the_date: DateLike, repeat_freq: str) -> datetime:
    """
    First instant of the period containing `the_date`.

    Rolling codes (last7..last365) go back that many days; MTD/QTD/YTD snap
    to the start of the month/quarter/year. "custom" returns the date as is.
    """
    freq = frequency_of(repeat_freq)
    if freq is None:
        logger.error('Cannot do start_of_period for frequency "%s"', repeat_freq)
        return the_date
    return _START_OF[freq](the_date)


def end_of_period(
    the_end: DateLike, repeat_freq: str, *, ranges: Optional[RangeSource] = None
) -> datetime:
    """
    End of the period that starts at `the_end`.

    Fixed frequencies move one unit forward and step back a day
    (Jan 1 -> Jan 31 23:59:59.999999 for "1M"). "custom" adds the day span
    of the currently selected range from `ranges`. Rolling and to-date codes
    return a day start.
    """
    freq = frequency_of(repeat_freq)
    if freq is None:
        logger.error('Cannot do end_of_period for frequency "%s"', repeat_freq)
        return the_end
    if freq is Frequency.custom:
        return add_days(the_end, custom_day_count(ranges))
    return _END_OF[freq](the_end)


def end_of_x(
    the_current_end: DateLike, repeat_freq: str, max_date: Optional[DateLike] = None
) -> datetime:
    """
    End of the day/week/month/quarter/year containing the date, capped at `max_date`.
    Frequencies without a plain unit (half-year, rolling, custom) leave the date as is.
    """
    current = as_datetime(the_current_end)
    freq = frequency_of(repeat_freq)
    if freq is None:
        logger.error('Cannot do end_of_x for frequency "%s"', repeat_freq)
    elif freq in _END_OF_UNIT:
        current = _END_OF_UNIT[freq](current)

    if max_date is not None and current > as_datetime(max_date):
        return as_datetime(max_date)
    return current
