# navigation/labels.py
"""
Display patterns for period labels.

The engine only picks a label *key* ("month", "week_in_year", ...). Turning
a key into a pattern is the label provider's job, so a translated catalog
can be plugged in without touching the engine. DefaultLabels ships the
English `strftime` patterns.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol

__all__ = [
    "LabelProvider",
    "DefaultLabels",
    "SPECIFIC_DAY",
    "WEEK_IN_YEAR",
    "MONTH",
    "MONTH_AND_DAY",
    "YEAR",
]

SPECIFIC_DAY = "specific_day"
WEEK_IN_YEAR = "week_in_year"
MONTH = "month"
MONTH_AND_DAY = "month_and_day"
YEAR = "year"


class LabelProvider(Protocol):
    def label(self, key: str, locale: Optional[str] = None) -> str: ...


class DefaultLabels:
    _CATALOG: Dict[str, str] = {
        SPECIFIC_DAY: "%B %d, %Y",
        WEEK_IN_YEAR: "Week %V, %G",  # ISO week + ISO year
        MONTH: "%B %Y",
        MONTH_AND_DAY: "%B %d",
        YEAR: "%Y",
    }

    def label(self, key: str, locale: Optional[str] = None) -> str:
        # one English catalog; locale is accepted for interface compatibility
        try:
            return self._CATALOG[key]
        except KeyError:
            raise ValueError(f"Unknown label key: {key!r}") from None
