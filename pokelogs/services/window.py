"""
DateWindow - the inclusive range of days a report covers

This module maps calendar days onto zero-based bucket offsets.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from pokelogs.config import DATE_EXAMPLE, DEFAULT_PERIOD, MAX_PERIOD
from pokelogs.errors import InvalidDate, InvalidPeriod, InvalidRange
from pokelogs.utils.helpers import parse_day


@dataclass(frozen=True)
class DateWindow:
    """Consecutive days start, start+1, .., start+length-1"""
    start: date
    length: int

    def __post_init__(self):
        if not 1 <= self.length <= MAX_PERIOD:
            raise InvalidPeriod(self.length, MAX_PERIOD)

    @property
    def end(self) -> date:
        return self.start + timedelta(days=self.length - 1)

    def offset_of(self, day: date) -> Optional[int]:
        """Bucket index of ``day``, or None when it falls outside the window"""
        offset = (day - self.start).days
        if 0 <= offset < self.length:
            return offset
        return None

    def days(self) -> List[date]:
        return [self.start + timedelta(days=i) for i in range(self.length)]

    @classmethod
    def from_range(cls, start_text: str, end_text: str) -> "DateWindow":
        """
        Build a window from two DD/MM/YYYY boundaries, both inclusive.
        Raises InvalidDate for an unparseable boundary and InvalidRange when
        the end precedes the start.
        """
        start = parse_day(start_text)
        if start is None:
            raise InvalidDate("start", start_text, DATE_EXAMPLE)
        end = parse_day(end_text)
        if end is None:
            raise InvalidDate("end", end_text, DATE_EXAMPLE)
        if end < start:
            raise InvalidRange()
        return cls(start=start, length=(end - start).days + 1)

    @classmethod
    def last_days(cls, days: int, today: date) -> "DateWindow":
        """The ``days`` days ending today, today included"""
        if not 1 <= days <= MAX_PERIOD:
            raise InvalidPeriod(days, MAX_PERIOD)
        try:
            start = today - timedelta(days=days - 1)
        except OverflowError:
            raise InvalidPeriod(days, MAX_PERIOD) from None
        return cls(start=start, length=days)


def resolve_period(
    last_nth_days: Optional[int] = None,
    last_3_days: bool = False,
    last_30_days: bool = False,
) -> int:
    """
    Number of days for a relative window.
    Precedence: Last30Days > Last3Days > explicit N > default.
    """
    if last_30_days:
        return 30
    if last_3_days:
        return 3
    if last_nth_days is not None:
        return last_nth_days
    return DEFAULT_PERIOD
