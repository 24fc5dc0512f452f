"""
calendar_day.py — Calendar-day values
=====================================
A small comparable, incrementable day type used for the backfill range.
Days are stored as proleptic Gregorian ordinals so that comparing and
stepping are plain integer operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, Optional

import pytz


@dataclass(frozen=True, order=True)
class CalendarDay:
    ordinal: int

    @classmethod
    def from_iso(cls, text: str) -> "CalendarDay":
        """Parse a YYYY-MM-DD string."""
        return cls(date.fromisoformat(text).toordinal())

    @classmethod
    def today(cls, tz_name: Optional[str] = None) -> "CalendarDay":
        """Today's date, in local time unless an IANA zone name is given."""
        if tz_name:
            return cls(datetime.now(pytz.timezone(tz_name)).date().toordinal())
        return cls(date.today().toordinal())

    def next(self) -> "CalendarDay":
        return CalendarDay(self.ordinal + 1)

    def iso(self) -> str:
        return date.fromordinal(self.ordinal).isoformat()

    def __str__(self) -> str:
        return self.iso()


def span(start: CalendarDay, end: CalendarDay) -> Iterator[CalendarDay]:
    """Yield every day from start through end, inclusive."""
    current = start
    while current <= end:
        yield current
        current = current.next()
