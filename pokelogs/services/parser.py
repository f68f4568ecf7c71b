"""
LogParser Class - Handles parsing of raw log lines

This module turns raw text lines into structured LogEvent objects.
"""

import re
from typing import Optional

from pokelogs.models.data_models import LogEvent, Module, Outcome
from pokelogs.utils.helpers import parse_day


class LogParser:
    """
    Parses raw log lines into LogEvent objects.
    Responsibilities:
    - Find a record anywhere in the line
    - Map module and outcome onto their enums
    - Reject dates that are not real calendar days
    """

    PATTERN = re.compile(
        r"(?P<module>"
        + "|".join(re.escape(name) for name in Module.names())
        + r") \((?P<outcome>success|fail),(?P<latency>\d+)ms,(?P<date>\d{2}/\d{2}/\d{4})\)"
    )

    @classmethod
    def parse_line(cls, line: str) -> Optional[LogEvent]:
        """Parse one line, return None if it holds no valid record"""
        match = cls.PATTERN.search(line)
        if match is None:
            return None

        day = parse_day(match.group("date"))
        if day is None:
            return None

        return LogEvent(
            module=Module(match.group("module")),
            outcome=Outcome(match.group("outcome")),
            latency_ms=int(match.group("latency")),
            date=day,
        )
