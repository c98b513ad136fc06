# navigation/custom_range.py
"""
Where the "custom" frequency gets its length from.

A custom period is as long as the range the user currently has selected.
That range lives outside the engine (normally in the web session), so the
engine only reads it through a RangeSource:

- FixedRange(start, end)  -> an explicit range (scripts, tests)
- CurrentMonth()          -> first..last day of the current calendar month
- SessionRange(request)   -> "start"/"end" stored in a Starlette session,
                             each falling back to CurrentMonth when missing
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Protocol

from starlette.requests import Request

from navigation.calendar_ops import (
    DateLike,
    as_datetime,
    end_of_month,
    start_of_month,
    today,
)
from navigation.models import DateRange

__all__ = [
    "RangeSource",
    "FixedRange",
    "CurrentMonth",
    "SessionRange",
    "store_range",
    "custom_day_count",
]

_START_KEY = "start"
_END_KEY = "end"


class RangeSource(Protocol):
    def current_range(self) -> DateRange: ...


class FixedRange:
    def __init__(self, start: DateLike, end: DateLike):
        self._range = DateRange(start=start, end=end)

    def current_range(self) -> DateRange:
        return self._range


class CurrentMonth:
    """
    Start and end of the calendar month containing `now`.
    `now` defaults to today in the configured timezone, looked up on every call.
    """

    def __init__(self, now: Optional[DateLike] = None, tz_name: Optional[str] = None):
        self._now = now
        self._tz_name = tz_name

    def current_range(self) -> DateRange:
        now = self._now if self._now is not None else today(self._tz_name)
        return DateRange(start=start_of_month(now), end=end_of_month(now))


def _session_of(request: Request) -> Mapping[str, Any]:
    """
    Return the session mapping if SessionMiddleware attached one,
    otherwise an empty mapping (nothing selected yet).
    """
    if "session" in request.scope:
        return request.session
    return {}


def _parse_stored(value: Any) -> Optional[datetime]:
    # sessions are JSON-encoded, so dates normally come back as ISO strings;
    # engine dates are naive civil dates, so an offset is dropped as-is
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return as_datetime(value).replace(tzinfo=None)
    if isinstance(value, str):
        return datetime.fromisoformat(value).replace(tzinfo=None)
    raise ValueError(f"Cannot read a date from session value {value!r}")


class SessionRange:
    def __init__(self, request: Request, *, fallback: Optional[RangeSource] = None):
        self._request = request
        self._fallback = fallback or CurrentMonth()

    def current_range(self) -> DateRange:
        store = _session_of(self._request)
        start = _parse_stored(store.get(_START_KEY))
        end = _parse_stored(store.get(_END_KEY))
        if start is None or end is None:
            default = self._fallback.current_range()
            start = start if start is not None else default.start
            end = end if end is not None else default.end
        return DateRange(start=start, end=end)


def store_range(request: Request, start: DateLike, end: DateLike) -> None:
    """Remember a selected range in the session (ISO strings survive JSON)."""
    rng = DateRange(start=start, end=end)
    request.session[_START_KEY] = rng.start.isoformat()
    request.session[_END_KEY] = rng.end.isoformat()


def custom_day_count(ranges: Optional[RangeSource] = None) -> int:
    """Length in whole days of the selected range (current month when none is given)."""
    source = ranges if ranges is not None else CurrentMonth()
    return source.current_range().diff_in_days()
