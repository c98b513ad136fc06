# navigation/fiscal.py
"""
Financial year boundaries.

Definitions
- fiscal_year_start: "MM-DD", the first day of the financial year, e.g. "04-06"
- custom_fiscal_year: when False the financial year is simply the calendar year

A financial year starting 04-06 runs 2024-04-06 .. 2025-04-05 for any date
inside it. Yearly report windows ("1Y") are routed through here.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Protocol

from navigation.calendar_ops import (
    DateLike,
    add_days,
    as_datetime,
    end_of_day,
    end_of_year,
    start_of_year,
)
from navigation.config import Settings, get_settings

logger = logging.getLogger("nav.fiscal")

__all__ = ["FiscalProvider", "FiscalHelper", "parse_month_day"]


class FiscalProvider(Protocol):
    def start_of_fiscal_year(self, d: DateLike) -> datetime: ...

    def end_of_fiscal_year(self, d: DateLike) -> datetime: ...


def parse_month_day(value: str) -> tuple[int, int]:
    """
    Convert 'MM-DD' to (month, day).
    Examples: '01-01' -> (1, 1), '04-06' -> (4, 6).
    Feb 29 is accepted; in non-leap years it lands on Mar 1.
    """
    if not value or not isinstance(value, str):
        raise ValueError("MM-DD string is required")
    parts = value.strip().split("-")
    if len(parts) != 2:
        raise ValueError("Invalid MM-DD format; expected e.g. '04-06'")
    mm, dd = parts[0].strip(), parts[1].strip()
    if len(mm) != 2 or len(dd) != 2 or not mm.isdigit() or not dd.isdigit():
        raise ValueError("Invalid MM-DD; use two digits for month and day, e.g. '04-06'")
    month, day = int(mm), int(dd)
    try:
        date(2000, month, day)  # leap year, so 02-29 passes
    except ValueError as exc:
        raise ValueError(f"Not a calendar day: {value!r}") from exc
    return month, day


class FiscalHelper:
    def __init__(self, fiscal_year_start: str = "01-01", custom_fiscal_year: bool = False):
        self._month, self._day = parse_month_day(fiscal_year_start)
        self._custom = custom_fiscal_year

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FiscalHelper":
        settings = settings or get_settings()
        return cls(settings.fiscal_year_start, settings.custom_fiscal_year)

    @property
    def is_custom(self) -> bool:
        return self._custom

    def _anchor(self, year: int) -> datetime:
        # day - 1 days after the 1st, so 02-29 spills into March like other arithmetic
        return add_days(datetime(year, self._month, 1), self._day - 1)

    def start_of_fiscal_year(self, d: DateLike) -> datetime:
        current = as_datetime(d)
        if not self._custom:
            return start_of_year(current)
        start = self._anchor(current.year)
        if start > current:
            start = self._anchor(current.year - 1)
        logger.debug("start_of_fiscal_year(%s) -> %s", current.date(), start.date())
        return start

    def end_of_fiscal_year(self, d: DateLike) -> datetime:
        current = as_datetime(d)
        if not self._custom:
            return end_of_year(current)
        start = self.start_of_fiscal_year(current)
        end = end_of_day(add_days(self._anchor(start.year + 1), -1))
        logger.debug("end_of_fiscal_year(%s) -> %s", current.date(), end.date())
        return end
