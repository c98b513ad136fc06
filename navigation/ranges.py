# navigation/ranges.py
"""
Sequences of periods between two dates.

- block_periods: newest-first report periods for period-over-period charts
- list_of_periods: chart buckets (sort key -> label) at an automatic step
"""

from __future__ import annotations

from typing import Dict, List, Optional

from navigation.boundaries import end_of_period, start_of_period
from navigation.calendar_ops import (
    DateLike,
    add_days,
    add_months,
    add_years,
    as_datetime,
    start_of_day,
)
from navigation.config import get_settings
from navigation.custom_range import RangeSource
from navigation.formats import granularity, preferred_carbon_format, preferred_carbon_localized_format
from navigation.labels import LabelProvider
from navigation.models import Frequency, Granularity, PeriodDescriptor

__all__ = ["block_periods", "list_of_periods", "BLOCK_LIMIT", "YEARLY_LIMIT"]

BLOCK_LIMIT = 13  # periods of the requested frequency
YEARLY_LIMIT = 20  # extra yearly periods when the span is longer than that

_STEPS = {
    Granularity.day: add_days,
    Granularity.month: add_months,
    Granularity.year: add_years,
}


def block_periods(
    start: DateLike,
    end: DateLike,
    range_code: str,
    *,
    ranges: Optional[RangeSource] = None,
) -> List[PeriodDescriptor]:
    """
    Walk back from `end` in periods of `range_code`, keeping the periods that
    end after `start`. After BLOCK_LIMIT periods, if `start` is still not
    reached, continue with up to YEARLY_LIMIT yearly periods. Newest first.
    """
    start, end = as_datetime(start), as_datetime(end)
    if end < start:
        start, end = end, start

    periods: List[PeriodDescriptor] = []
    work_start = end
    work_end = end

    for _ in range(BLOCK_LIMIT):
        work_start = as_datetime(start_of_period(work_start, range_code))
        work_end = as_datetime(end_of_period(work_start, range_code, ranges=ranges))
        if work_end > start:
            periods.append(PeriodDescriptor(start=work_start, end=work_end, period=range_code))
        work_start = start_of_day(add_days(work_start, -1))

    yearly = Frequency.yearly.value
    loops = 0
    while work_end > start and loops < YEARLY_LIMIT:
        work_start = start_of_period(work_start, yearly)
        work_end = end_of_period(work_start, yearly)
        if work_end > start:
            periods.append(PeriodDescriptor(start=work_start, end=work_end, period=yearly))
        work_start = start_of_day(add_days(work_start, -1))
        loops += 1

    return periods


def list_of_periods(
    start: DateLike,
    end: DateLike,
    *,
    labels: Optional[LabelProvider] = None,
    locale: Optional[str] = None,
) -> Dict[str, str]:
    """
    Buckets from `start` up to (not including) `end`: one per day for spans
    up to a month, per month up to a year, per year beyond that.
    Keys sort chronologically ("2023-01"), values are display labels.
    """
    grain = granularity(start, end)
    key_format = preferred_carbon_format(start, end)
    display_format = preferred_carbon_localized_format(
        start, end, labels=labels, locale=locale or get_settings().locale
    )
    step = _STEPS[grain]

    begin, stop = as_datetime(start), as_datetime(end)
    entries: Dict[str, str] = {}
    while begin < stop:
        entries[begin.strftime(key_format)] = begin.strftime(display_format)
        begin = step(begin, 1)
    return entries
