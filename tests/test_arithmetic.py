# tests/test_arithmetic.py
"""
Adding/subtracting periods and snapping report windows.
No HTTP, no session: collaborators are passed in explicitly.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import pytest

from navigation.arithmetic import add_period, subtract_period, update_end_date, update_start_date
from navigation.errors import UnsupportedFrequencyError

END = (23, 59, 59, 999999)


# ---------- add_period ----------


@pytest.mark.parametrize("day", [29, 30, 31])
@pytest.mark.parametrize("code", ["1M", "month", "monthly"])
def test_month_end_drift_is_pulled_back(day, code):
    assert add_period(datetime(2019, 1, day), code, 0) == datetime(2019, 2, 28)


@pytest.mark.parametrize("day", [30, 31])
def test_month_end_drift_in_leap_year(day):
    assert add_period(datetime(2020, 1, day), "1M", 0) == datetime(2020, 2, 29)


def test_drift_correction_only_for_single_month_steps():
    # two months from Jan 31 lands on Mar 31 without any correction
    assert add_period(datetime(2019, 1, 31), "1M", 1) == datetime(2019, 3, 31)
    assert add_period(datetime(2019, 12, 31), "1M", 0) == datetime(2020, 1, 31)


@pytest.mark.parametrize(
    "code,skip,expected",
    [
        ("1D", 0, datetime(2023, 1, 16)),
        ("daily", 2, datetime(2023, 1, 18)),
        ("1W", 0, datetime(2023, 1, 22)),
        ("1M", 2, datetime(2023, 4, 15)),
        ("3M", 0, datetime(2023, 4, 15)),
        ("quarterly", 1, datetime(2023, 7, 15)),
        ("6M", 0, datetime(2023, 7, 15)),
        ("half-year", 0, datetime(2023, 7, 15)),
        ("1Y", 0, datetime(2024, 1, 15)),
        ("custom", 0, datetime(2023, 2, 15)),
        ("last7", 0, datetime(2023, 1, 22)),
        ("last30", 0, datetime(2023, 2, 15)),
        ("last90", 0, datetime(2023, 4, 15)),
        ("last365", 0, datetime(2024, 1, 15)),
        ("MTD", 0, datetime(2023, 2, 15)),
        ("QTD", 0, datetime(2023, 4, 15)),
        ("YTD", 0, datetime(2024, 1, 15)),
    ],
)
def test_add_period(code, skip, expected):
    assert add_period(datetime(2023, 1, 15), code, skip) == expected


def test_add_period_unknown_code_degrades(caplog):
    caplog.set_level(logging.ERROR, logger="nav")
    d = datetime(2023, 1, 15)
    assert add_period(d, "bogus", 0) is d
    assert "bogus" in caplog.text


# ---------- subtract_period ----------


@pytest.mark.parametrize("code", ["1M", "month", "monthly"])
def test_add_then_subtract_round_trips_mid_month(code):
    d = datetime(2023, 3, 15, 10)
    assert subtract_period(add_period(d, code, 0), code, 1) == d


def test_round_trip_breaks_after_drift_correction():
    # Jan 29 -> Feb 28 (corrected) -> Jan 28
    d = datetime(2019, 1, 29)
    assert subtract_period(add_period(d, "1M", 0), "1M", 1) == datetime(2019, 1, 28)


@pytest.mark.parametrize(
    "code,count,expected",
    [
        ("1D", None, datetime(2023, 3, 14)),
        ("1W", 1, datetime(2023, 3, 8)),
        ("1M", 1, datetime(2023, 2, 15)),
        ("3M", 2, datetime(2022, 9, 15)),
        ("quarter", 1, datetime(2022, 12, 15)),
        ("6M", 1, datetime(2022, 9, 15)),
        ("1Y", 3, datetime(2020, 3, 15)),
        ("yearly", None, datetime(2022, 3, 15)),
    ],
)
def test_subtract_period(code, count, expected):
    assert subtract_period(datetime(2023, 3, 15), code, count) == expected


def test_subtracting_a_month_overflows_like_adding():
    # Feb 31 does not exist, the surplus spills into March
    assert subtract_period(datetime(2023, 3, 31), "1M") == datetime(2023, 3, 3)


def test_custom_subtracts_multiples_of_selected_range(october_range):
    assert subtract_period(datetime(2023, 12, 1), "custom", 2, ranges=october_range) == datetime(2023, 10, 2)


@pytest.mark.parametrize(
    "code,expected",
    [
        ("last7", datetime(2023, 3, 8)),
        ("last30", datetime(2023, 2, 13)),
        ("last90", datetime(2022, 12, 15)),
        ("last365", datetime(2022, 3, 15)),
        ("MTD", datetime(2023, 2, 15)),
        ("QTD", datetime(2022, 12, 15)),
        ("YTD", datetime(2022, 3, 15)),
    ],
)
def test_rolling_codes_step_back_one_window(code, expected):
    # the count is ignored for rolling / to-date windows
    assert subtract_period(datetime(2023, 3, 15), code, 5) == expected


def test_subtract_unknown_code_raises():
    with pytest.raises(UnsupportedFrequencyError) as exc_info:
        subtract_period(datetime(2023, 3, 15), "bogus")
    assert exc_info.value.code == "bogus"
    assert exc_info.value.operation == "subtract_period"
    assert isinstance(exc_info.value, ValueError)


# ---------- update_start_date / update_end_date ----------


@pytest.mark.parametrize(
    "code,expected",
    [
        ("1D", datetime(2023, 8, 17)),
        ("1W", datetime(2023, 8, 14)),
        ("1M", datetime(2023, 8, 1)),
        ("custom", datetime(2023, 8, 1)),
        ("3M", datetime(2023, 7, 1)),
        ("6M", datetime(2023, 7, 1)),
        ("last7", datetime(2023, 8, 10, 14, 30)),
        ("last365", datetime(2022, 8, 17, 14, 30)),
        ("YTD", datetime(2023, 1, 1)),
        ("QTD", datetime(2023, 7, 1)),
        ("MTD", datetime(2023, 8, 1)),
    ],
)
def test_update_start_date(mid_august, code, expected):
    assert update_start_date(code, mid_august) == expected


def test_update_start_date_first_half_year():
    assert update_start_date("6M", datetime(2023, 3, 9)) == datetime(2023, 1, 1)


def test_yearly_start_follows_fiscal_year(uk_fiscal, calendar_fiscal, mid_august):
    assert update_start_date("1Y", mid_august, fiscal=uk_fiscal) == datetime(2023, 4, 6)
    assert update_start_date("1Y", datetime(2023, 2, 10), fiscal=uk_fiscal) == datetime(2022, 4, 6)
    assert update_start_date("year", mid_august, fiscal=calendar_fiscal) == datetime(2023, 1, 1)


@pytest.mark.parametrize(
    "code,expected",
    [
        ("1D", datetime(2023, 8, 17, *END)),
        ("1W", datetime(2023, 8, 20, *END)),
        ("1M", datetime(2023, 8, 31, *END)),
        ("3M", datetime(2023, 9, 30)),
        ("custom", datetime(2023, 8, 1)),
        ("6M", datetime(2023, 12, 31, *END)),
    ],
)
def test_update_end_date(mid_august, code, expected):
    assert update_end_date(code, mid_august) == expected


def test_update_end_date_first_half_year():
    # first half "ends" on the first instant of July
    assert update_end_date("6M", datetime(2023, 3, 9)) == datetime(2023, 7, 1)


def test_update_end_date_quarter_ends_at_midnight_of_last_day():
    assert update_end_date("quarterly", datetime(2023, 11, 2, 8)) == datetime(2023, 12, 31)
    assert update_end_date("3M", datetime(2024, 1, 1)) == datetime(2024, 3, 31)


def test_yearly_end_follows_fiscal_year(uk_fiscal, calendar_fiscal, mid_august):
    assert update_end_date("1Y", mid_august, fiscal=uk_fiscal) == datetime(2024, 4, 5, *END)
    assert update_end_date("1Y", mid_august, fiscal=calendar_fiscal) == datetime(2023, 12, 31, *END)


@pytest.mark.parametrize("code", ["last7", "last30", "last90", "last365", "MTD", "QTD", "YTD"])
def test_rolling_windows_end_today(mid_august, code):
    now = datetime(2023, 9, 1, 8)
    assert update_end_date(code, mid_august, now=now) == datetime(2023, 9, 1, *END)


def test_rolling_window_end_defaults_to_today(mid_august):
    end = update_end_date("last30", mid_august)
    assert end.time() == datetime(2000, 1, 1, *END).time()
    assert abs(end - datetime.now()) < timedelta(days=2)


class RecordingFiscal:
    def __init__(self):
        self.calls = []

    def start_of_fiscal_year(self, d):
        self.calls.append(("start", d))
        return datetime(1999, 1, 1)

    def end_of_fiscal_year(self, d):
        self.calls.append(("end", d))
        return datetime(1999, 12, 31)


def test_yearly_windows_are_routed_through_fiscal_provider(mid_august):
    fiscal = RecordingFiscal()
    assert update_start_date("1Y", mid_august, fiscal=fiscal) == datetime(1999, 1, 1)
    assert update_end_date("yearly", mid_august, fiscal=fiscal) == datetime(1999, 12, 31)
    assert fiscal.calls == [("start", mid_august), ("end", mid_august)]


@pytest.mark.parametrize("func,name", [(update_start_date, "update_start_date"), (update_end_date, "update_end_date")])
def test_update_dates_reject_unknown_codes(func, name, mid_august):
    with pytest.raises(UnsupportedFrequencyError) as exc_info:
        func("bogus", mid_august)
    assert exc_info.value.operation == name


def test_update_dates_log_at_debug(mid_august, caplog):
    caplog.set_level(logging.DEBUG, logger="nav")
    update_start_date("1M", mid_august)
    update_end_date("1M", mid_august)
    assert 'update_start_date("1M", "2023-08-17")' in caplog.text
    assert 'update_end_date("1M", "2023-08-17")' in caplog.text
