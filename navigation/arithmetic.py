# navigation/arithmetic.py
"""
Moving dates by whole periods, and snapping report windows.

Error policy differs per entry point:
- add_period logs and returns the input for an unknown code
- subtract_period, update_start_date and update_end_date raise
  UnsupportedFrequencyError, because their callers validate settings
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from navigation.boundaries import start_of_half_year
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
    today,
)
from navigation.custom_range import RangeSource, custom_day_count
from navigation.errors import UnsupportedFrequencyError
from navigation.fiscal import FiscalHelper, FiscalProvider
from navigation.frequency import frequency_of
from navigation.models import Frequency

logger = logging.getLogger("nav")

__all__ = ["add_period", "subtract_period", "update_start_date", "update_end_date"]

# (function, multiplier) per frequency for add_period.
# Rolling windows jump by the calendar unit they roughly cover.
_ADD = {
    Frequency.daily: (add_days, 1),
    Frequency.weekly: (add_weeks, 1),
    Frequency.monthly: (add_months, 1),
    Frequency.quarterly: (add_months, 3),
    Frequency.half_yearly: (add_months, 6),
    Frequency.yearly: (add_years, 1),
    Frequency.custom: (add_months, 1),
    Frequency.last7: (add_days, 7),
    Frequency.last30: (add_months, 1),
    Frequency.last90: (add_months, 3),
    Frequency.last365: (add_years, 1),
    Frequency.month_to_date: (add_months, 1),
    Frequency.quarter_to_date: (add_months, 3),
    Frequency.year_to_date: (add_years, 1),
}

# subtract `subtract * multiplier` units
_SUBTRACT = {
    Frequency.daily: (add_days, 1),
    Frequency.weekly: (add_weeks, 1),
    Frequency.monthly: (add_months, 1),
    Frequency.quarterly: (add_months, 3),
    Frequency.half_yearly: (add_months, 6),
    Frequency.yearly: (add_years, 1),
}

# rolling and to-date windows always step back exactly one window
_SUBTRACT_ONCE = {
    Frequency.last7: (add_days, 7),
    Frequency.last30: (add_days, 30),
    Frequency.last90: (add_days, 90),
    Frequency.last365: (add_days, 365),
    Frequency.month_to_date: (add_months, 1),
    Frequency.quarter_to_date: (add_months, 3),
    Frequency.year_to_date: (add_years, 1),
}

_ROLLING_DAYS = {
    Frequency.last7: 7,
    Frequency.last30: 30,
    Frequency.last90: 90,
    Frequency.last365: 365,
}


def add_period(the_date: DateLike, repeat_freq: str, skip: int = 0) -> datetime:
    """
    Move `the_date` forward by (skip + 1) periods.

    Month-end drift: adding one month to the 29th-31st of January overflows
    into March; that overshoot is pulled back to the last day of February:
        2019-01-29 -> 2019-02-28
        2019-01-30 -> 2019-02-28
        2019-01-31 -> 2019-02-28
    """
    freq = frequency_of(repeat_freq)
    if freq is None:
        logger.error('Cannot do add_period for frequency "%s"', repeat_freq)
        return the_date

    original = as_datetime(the_date)
    function, multiplier = _ADD[freq]
    add = (skip + 1) * multiplier
    result = function(original, add)

    if freq is Frequency.monthly and add == 1 and result.month - original.month == 2 and result.day > 0:
        result = add_days(result, -result.day)
    return result


def subtract_period(
    the_date: DateLike,
    repeat_freq: str,
    subtract: Optional[int] = None,
    *,
    ranges: Optional[RangeSource] = None,
) -> datetime:
    """
    Move `the_date` back by `subtract` periods (default 1).

    "custom" steps back `subtract` times the day span of the selected range.
    Rolling and to-date codes ignore `subtract` and go back one window.
    Raises UnsupportedFrequencyError for unknown codes.
    """
    subtract = 1 if subtract is None else subtract
    freq = frequency_of(repeat_freq)
    if freq is None:
        raise UnsupportedFrequencyError(repeat_freq, "subtract_period")

    date = as_datetime(the_date)
    if freq in _SUBTRACT:
        function, multiplier = _SUBTRACT[freq]
        return function(date, -subtract * multiplier)
    if freq is Frequency.custom:
        return add_days(date, -custom_day_count(ranges) * subtract)
    function, amount = _SUBTRACT_ONCE[freq]
    return function(date, -amount)


def update_start_date(
    range_code: str, start: DateLike, *, fiscal: Optional[FiscalProvider] = None
) -> datetime:
    """Start of the report window of type `range_code` that contains `start`."""
    logger.debug('update_start_date("%s", "%s")', range_code, as_datetime(start).date())
    freq = frequency_of(range_code)
    if freq is None:
        raise UnsupportedFrequencyError(range_code, "update_start_date")

    if freq is Frequency.daily:
        return start_of_day(start)
    if freq is Frequency.weekly:
        return start_of_week(start)
    if freq in (Frequency.monthly, Frequency.custom, Frequency.month_to_date):
        return start_of_month(start)
    if freq in (Frequency.quarterly, Frequency.quarter_to_date):
        return first_of_quarter(start)
    if freq is Frequency.half_yearly:
        return start_of_half_year(start)
    if freq is Frequency.yearly:
        # yearly windows follow the financial year
        return (fiscal or FiscalHelper.from_settings()).start_of_fiscal_year(start)
    if freq is Frequency.year_to_date:
        return start_of_year(start)
    return add_days(start, -_ROLLING_DAYS[freq])


def update_end_date(
    range_code: str,
    start: DateLike,
    *,
    fiscal: Optional[FiscalProvider] = None,
    now: Optional[DateLike] = None,
) -> datetime:
    """
    End of the report window of type `range_code` that contains `start`.

    Rolling and to-date windows always end today (`now`, defaulting to today
    in the configured timezone).
    """
    logger.debug('update_end_date("%s", "%s")', range_code, as_datetime(start).date())
    freq = frequency_of(range_code)
    if freq is None:
        raise UnsupportedFrequencyError(range_code, "update_end_date")

    if freq is Frequency.daily:
        return end_of_day(start)
    if freq is Frequency.weekly:
        return end_of_week(start)
    if freq is Frequency.monthly:
        return end_of_month(start)
    if freq is Frequency.quarterly:
        # midnight of the quarter's last day, unlike the other fixed windows
        return start_of_day(end_of_quarter(start))
    if freq is Frequency.custom:
        return start_of_month(start)
    if freq is Frequency.half_yearly:
        if as_datetime(start).month >= 7:
            return end_of_year(start)
        return add_months(start_of_year(start), 6)
    if freq is Frequency.yearly:
        return (fiscal or FiscalHelper.from_settings()).end_of_fiscal_year(start)

    end = end_of_day(now if now is not None else today())
    logger.debug('update_end_date returns "%s"', end.date())
    return end
