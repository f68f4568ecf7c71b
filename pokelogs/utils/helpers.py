"""
Helper Functions

This module contains utility functions used throughout the application.
"""

import re
from datetime import date
from typing import Any, List, Optional, Sequence

from dateutil import parser as dtparser

from pokelogs.config import DATE_FORMAT

DAY_SHAPE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_day(x: Any) -> Optional[date]:
    """Parse a DD/MM/YYYY string, return None if it is not a real calendar day"""
    if not x:
        return None
    text = str(x).strip()
    if not DAY_SHAPE.match(text):
        return None
    try:
        parsed = dtparser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError):
        return None
    # dateutil swaps day and month when the month is out of range
    if format_day(parsed) != text:
        return None
    return parsed


def format_day(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def mean(values: Sequence[float]) -> Optional[float]:
    """Arithmetic mean, None for an empty sequence"""
    if not values:
        return None
    return sum(values) / len(values)


def format_number(x: float) -> str:
    """Integral values without a fractional part, others at full precision"""
    if float(x).is_integer():
        return str(int(x))
    return repr(float(x))


def repeat_each(values: Sequence[float], times: int) -> List[float]:
    """[a, b] -> [a, a, .., b, b, ..] with each value repeated ``times`` times"""
    return [v for v in values for _ in range(times)]
