from datetime import date, datetime
from enum import Enum  # small enums for clarity
from typing import Optional

from pydantic import BaseModel, model_validator

from navigation.calendar_ops import as_datetime


class Frequency(str, Enum):
    # value = canonical code; synonyms are mapped in navigation.frequency
    daily = "1D"
    weekly = "1W"
    monthly = "1M"
    quarterly = "3M"
    half_yearly = "6M"
    yearly = "1Y"
    custom = "custom"
    last7 = "last7"
    last30 = "last30"
    last90 = "last90"
    last365 = "last365"
    month_to_date = "MTD"
    quarter_to_date = "QTD"
    year_to_date = "YTD"


class BaseUnit(str, Enum):
    day = "day"
    week = "week"
    month = "month"
    quarter = "quarter"
    year = "year"


class Granularity(str, Enum):
    # display / bucketing tier picked from the length of a span
    day = "day"
    month = "month"
    year = "year"


class Resolution(BaseModel):
    """
    Result of resolving a frequency code.

    An unknown code still produces a Resolution, with frequency and
    base_unit left empty, so callers have to look at `resolved`.
    """

    model_config = {"frozen": True}

    code: str
    frequency: Optional[Frequency] = None
    base_unit: Optional[BaseUnit] = None
    multiplier: int = 1

    @property
    def resolved(self) -> bool:
        return self.frequency is not None


class DateRange(BaseModel):
    """An ordered (start, end) pair; inverted bounds are swapped."""

    model_config = {"frozen": True}

    start: datetime
    end: datetime

    @model_validator(mode="before")
    @classmethod
    def _promote_dates(cls, data):
        if isinstance(data, dict):
            data = {
                key: as_datetime(value) if key in ("start", "end") and isinstance(value, date) else value
                for key, value in data.items()
            }
        return data

    @model_validator(mode="after")
    def _order_bounds(self):
        # fields are parsed by now, so ISO strings are ordered too
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)
        return self

    def diff_in_days(self) -> int:
        """Whole days between start and end (23:59:59 does not count as a day)."""
        return (self.end - self.start).days


class PeriodDescriptor(BaseModel):
    model_config = {"frozen": True}

    start: datetime
    end: datetime
    period: str  # the frequency code that produced this period
