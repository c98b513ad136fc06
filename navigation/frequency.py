# navigation/frequency.py
"""
Frequency codes -> Frequency members.

Stored preferences and API callers use several spellings for the same
period ("1M", "month", "monthly"). They are collapsed here, once, so the
rest of the package only ever dispatches on `Frequency`.

Public API:
- SYNONYMS                -> read-only code -> Frequency table
- frequency_of(code)      -> Frequency | None
- is_supported(code)      -> bool
- resolve(code)           -> Resolution (base unit + multiplier)
- codes_for(frequency)    -> every spelling of one frequency
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from navigation.models import BaseUnit, Frequency, Resolution

__all__ = ["SYNONYMS", "frequency_of", "is_supported", "resolve", "codes_for"]


SYNONYMS: Mapping[str, Frequency] = MappingProxyType(
    {
        "1D": Frequency.daily,
        "daily": Frequency.daily,
        "1W": Frequency.weekly,
        "week": Frequency.weekly,
        "weekly": Frequency.weekly,
        "1M": Frequency.monthly,
        "month": Frequency.monthly,
        "monthly": Frequency.monthly,
        "3M": Frequency.quarterly,
        "quarter": Frequency.quarterly,
        "quarterly": Frequency.quarterly,
        "6M": Frequency.half_yearly,
        "half-year": Frequency.half_yearly,
        "half_year": Frequency.half_yearly,
        "1Y": Frequency.yearly,
        "year": Frequency.yearly,
        "yearly": Frequency.yearly,
        "custom": Frequency.custom,
        "last7": Frequency.last7,
        "last30": Frequency.last30,
        "last90": Frequency.last90,
        "last365": Frequency.last365,
        "MTD": Frequency.month_to_date,
        "QTD": Frequency.quarter_to_date,
        "YTD": Frequency.year_to_date,
    }
)

# natural unit of each frequency; composite ones carry a multiplier
_UNITS = {
    Frequency.daily: (BaseUnit.day, 1),
    Frequency.weekly: (BaseUnit.week, 1),
    Frequency.monthly: (BaseUnit.month, 1),
    Frequency.quarterly: (BaseUnit.month, 3),
    Frequency.half_yearly: (BaseUnit.month, 6),
    Frequency.yearly: (BaseUnit.year, 1),
    Frequency.custom: (BaseUnit.day, 1),
    Frequency.last7: (BaseUnit.day, 7),
    Frequency.last30: (BaseUnit.day, 30),
    Frequency.last90: (BaseUnit.day, 90),
    Frequency.last365: (BaseUnit.day, 365),
    Frequency.month_to_date: (BaseUnit.month, 1),
    Frequency.quarter_to_date: (BaseUnit.quarter, 1),
    Frequency.year_to_date: (BaseUnit.year, 1),
}


def frequency_of(code) -> Optional[Frequency]:
    """Return the Frequency for a code, or None when the code is unknown."""
    if isinstance(code, Frequency):
        return code
    if not isinstance(code, str):
        return None
    return SYNONYMS.get(code)


def is_supported(code) -> bool:
    return frequency_of(code) is not None


def resolve(code) -> Resolution:
    """
    Resolve a code to its base unit and multiplier.
    Examples: '6M' -> (month, 6), 'quarterly' -> (month, 3), 'last7' -> (day, 7).
    Unknown codes give an unresolved Resolution; there is no fallback frequency.
    """
    freq = frequency_of(code)
    raw = code.value if isinstance(code, Frequency) else str(code)
    if freq is None:
        return Resolution(code=raw)
    unit, multiplier = _UNITS[freq]
    return Resolution(code=raw, frequency=freq, base_unit=unit, multiplier=multiplier)


def codes_for(frequency: Frequency) -> list[str]:
    """All spellings that resolve to `frequency`, in table order."""
    return [code for code, freq in SYNONYMS.items() if freq is frequency]
