# navigation/formats.py
"""
Granularity and format selection for a (start, end) span.

Every selector goes through granularity(), so for one span they always
agree on the tier:
    span <= 1 month   -> day
    span <= 12 months -> month
    otherwise         -> year
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from navigation import labels as label_keys
from navigation.calendar_ops import DateLike, as_datetime, diff_in_months
from navigation.config import get_settings
from navigation.frequency import frequency_of
from navigation.labels import DefaultLabels, LabelProvider
from navigation.models import Frequency, Granularity

logger = logging.getLogger("nav")

__all__ = [
    "granularity",
    "preferred_carbon_format",
    "preferred_carbon_localized_format",
    "preferred_sql_format",
    "preferred_end_of_period",
    "preferred_range_format",
    "get_view_range",
    "period_show",
]

_SORT_KEY_FORMATS = {
    Granularity.day: "%Y-%m-%d",
    Granularity.month: "%Y-%m",
    Granularity.year: "%Y",
}

# same tokens, meant for SQL date formatting (strftime / DATE_FORMAT)
_SQL_FORMATS = {
    Granularity.day: "%Y-%m-%d",
    Granularity.month: "%Y-%m",
    Granularity.year: "%Y",
}

_DISPLAY_KEYS = {
    Granularity.day: label_keys.MONTH_AND_DAY,
    Granularity.month: label_keys.MONTH,
    Granularity.year: label_keys.YEAR,
}

# names of functions in navigation.calendar_ops
_END_OF_UNIT_NAMES = {
    Granularity.day: "end_of_day",
    Granularity.month: "end_of_month",
    Granularity.year: "end_of_year",
}

_RANGE_CODES = {
    Granularity.day: Frequency.daily.value,
    Granularity.month: Frequency.monthly.value,
    Granularity.year: Frequency.yearly.value,
}

# dynamic view ranges and the fixed range closest to each
_VIEW_RANGE_CORRECTIONS = {
    "last7": "1W",
    "last30": "1M",
    "MTD": "1M",
    "last90": "3M",
    "QTD": "3M",
    "last365": "1Y",
    "YTD": "1Y",
}

_PERIOD_LABEL_KEYS = {
    Frequency.daily: label_keys.SPECIFIC_DAY,
    Frequency.custom: label_keys.SPECIFIC_DAY,
    Frequency.weekly: label_keys.WEEK_IN_YEAR,
    Frequency.monthly: label_keys.MONTH,
    Frequency.yearly: label_keys.YEAR,
}


def granularity(start: DateLike, end: DateLike) -> Granularity:
    months = diff_in_months(start, end)
    if months > 12:
        return Granularity.year
    if months > 1:
        return Granularity.month
    return Granularity.day


def preferred_carbon_format(start: DateLike, end: DateLike) -> str:
    """Sort-key pattern: "%Y-%m-%d", "%Y-%m" or "%Y"."""
    return _SORT_KEY_FORMATS[granularity(start, end)]


def preferred_carbon_localized_format(
    start: DateLike,
    end: DateLike,
    *,
    labels: Optional[LabelProvider] = None,
    locale: Optional[str] = None,
) -> str:
    """Display pattern for the span, looked up through the label provider."""
    provider = labels or DefaultLabels()
    return provider.label(_DISPLAY_KEYS[granularity(start, end)], locale or get_settings().locale)


def preferred_sql_format(start: DateLike, end: DateLike) -> str:
    return _SQL_FORMATS[granularity(start, end)]


def preferred_end_of_period(start: DateLike, end: DateLike) -> str:
    """"end_of_day", "end_of_month" or "end_of_year"."""
    return _END_OF_UNIT_NAMES[granularity(start, end)]


def preferred_range_format(start: DateLike, end: DateLike) -> str:
    """"1D", "1M" or "1Y"."""
    return _RANGE_CODES[granularity(start, end)]


def get_view_range(correct: bool, *, view_range: Optional[str] = None) -> str:
    """
    The stored view range, or (with `correct`) the fixed range closest to it:
    last7 -> 1W, last30/MTD -> 1M, last90/QTD -> 3M, last365/YTD -> 1Y.
    `view_range` defaults to the configured preference.
    """
    stored = view_range if view_range is not None else get_settings().view_range
    if not correct:
        return stored
    return _VIEW_RANGE_CORRECTIONS.get(stored, stored)


def period_show(
    the_date: DateLike,
    repeat_frequency: str,
    *,
    labels: Optional[LabelProvider] = None,
    locale: Optional[str] = None,
) -> str:
    """Short label for the period containing the date, e.g. "Q3 2023"."""
    date = as_datetime(the_date)
    freq = frequency_of(repeat_frequency)

    if freq in _PERIOD_LABEL_KEYS:
        provider = labels or DefaultLabels()
        pattern = provider.label(_PERIOD_LABEL_KEYS[freq], locale or get_settings().locale)
        return date.strftime(pattern)
    if freq is Frequency.quarterly:
        return "Q%d %d" % (math.ceil(date.month / 3), date.year)
    if freq is Frequency.half_yearly:
        return "H%d %d" % (math.ceil(date.month / 6), date.year)

    logger.error('No date formats for frequency "%s"!', repeat_frequency)
    return date.strftime("%Y-%m-%d")
