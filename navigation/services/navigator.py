# navigation/services/navigator.py
"""
One object that carries the collaborators a request needs.

Why:
- Report pages call several period helpers in a row with the same
  selected range, fiscal year and labels.
- Binding them once keeps call sites short and makes sure every call
  sees the same collaborators.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from starlette.requests import Request

from navigation import arithmetic, boundaries, formats, ranges
from navigation.calendar_ops import DateLike
from navigation.config import Settings, get_settings
from navigation.custom_range import CurrentMonth, RangeSource, SessionRange
from navigation.fiscal import FiscalHelper, FiscalProvider
from navigation.labels import DefaultLabels, LabelProvider
from navigation.models import PeriodDescriptor


class Navigator:
    def __init__(
        self,
        *,
        ranges: Optional[RangeSource] = None,
        fiscal: Optional[FiscalProvider] = None,
        labels: Optional[LabelProvider] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.ranges = ranges or CurrentMonth(tz_name=self.settings.app_timezone)
        self.fiscal = fiscal or FiscalHelper.from_settings(self.settings)
        self.labels = labels or DefaultLabels()

    @classmethod
    def for_request(cls, request: Request, **kwargs) -> "Navigator":
        """
        Build a Navigator whose custom range comes from the request session.

        Plain words:
        - "custom" periods are as long as the range stored in the session.
        - Without a session (or nothing stored) the current month is used,
          or `ranges` when one is passed.
        """
        settings = kwargs.pop("settings", None) or get_settings()
        fallback = kwargs.pop("ranges", None) or CurrentMonth(tz_name=settings.app_timezone)
        return cls(ranges=SessionRange(request, fallback=fallback), settings=settings, **kwargs)

    # ---------- boundaries ----------

    def start_of_period(self, the_date: DateLike, repeat_freq: str) -> datetime:
        return boundaries.start_of_period(the_date, repeat_freq)

    def end_of_period(self, the_end: DateLike, repeat_freq: str) -> datetime:
        return boundaries.end_of_period(the_end, repeat_freq, ranges=self.ranges)

    def end_of_x(
        self, the_current_end: DateLike, repeat_freq: str, max_date: Optional[DateLike] = None
    ) -> datetime:
        return boundaries.end_of_x(the_current_end, repeat_freq, max_date)

    # ---------- arithmetic ----------

    def add_period(self, the_date: DateLike, repeat_freq: str, skip: int = 0) -> datetime:
        return arithmetic.add_period(the_date, repeat_freq, skip)

    def subtract_period(
        self, the_date: DateLike, repeat_freq: str, subtract: Optional[int] = None
    ) -> datetime:
        return arithmetic.subtract_period(the_date, repeat_freq, subtract, ranges=self.ranges)

    def update_start_date(self, range_code: str, start: DateLike) -> datetime:
        return arithmetic.update_start_date(range_code, start, fiscal=self.fiscal)

    def update_end_date(
        self, range_code: str, start: DateLike, now: Optional[DateLike] = None
    ) -> datetime:
        return arithmetic.update_end_date(range_code, start, fiscal=self.fiscal, now=now)

    # ---------- ranges & formats ----------

    def block_periods(self, start: DateLike, end: DateLike, range_code: str) -> List[PeriodDescriptor]:
        return ranges.block_periods(start, end, range_code, ranges=self.ranges)

    def list_of_periods(self, start: DateLike, end: DateLike) -> Dict[str, str]:
        return ranges.list_of_periods(start, end, labels=self.labels, locale=self.settings.locale)

    def period_show(self, the_date: DateLike, repeat_frequency: str) -> str:
        return formats.period_show(
            the_date, repeat_frequency, labels=self.labels, locale=self.settings.locale
        )

    def get_view_range(self, correct: bool) -> str:
        return formats.get_view_range(correct, view_range=self.settings.view_range)
