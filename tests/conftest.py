# tests/conftest.py
# Test setup: repo root on sys.path and shared period collaborators.

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure repo root on sys.path so "import navigation" works
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from navigation.custom_range import FixedRange  # noqa: E402
from navigation.fiscal import FiscalHelper  # noqa: E402


@pytest.fixture()
def october_range():
    # start/end of October 2023, the shape a selected month has in the session: 30 whole days
    return FixedRange(datetime(2023, 10, 1), datetime(2023, 10, 31, 23, 59, 59, 999999))


@pytest.fixture()
def uk_fiscal():
    return FiscalHelper("04-06", custom_fiscal_year=True)


@pytest.fixture()
def calendar_fiscal():
    return FiscalHelper()


@pytest.fixture()
def mid_august():
    # a Thursday afternoon in Q3
    return datetime(2023, 8, 17, 14, 30)
