"""
Aggregator Class - Buckets log events into daily series

This module scans the log once and accumulates per-module, per-day
success/fail counts and latency samples for a date window.
"""

import logging
from datetime import date
from typing import Dict, Optional

from pokelogs.models.data_models import Module, ModuleSeries
from pokelogs.services.parser import LogParser
from pokelogs.services.storage import LogStore
from pokelogs.services.window import DateWindow

LOGGER = logging.getLogger(__name__)


class Aggregator:
    """
    Aggregates log events into per-module daily series.
    Responsibilities:
    - Read the store exactly once per aggregation
    - Drop unmatched lines and events outside the window
    - Fill one ModuleSeries per known module
    """

    def __init__(self, log_store: LogStore, log_parser: LogParser):
        self.store = log_store
        self.parser = log_parser

    def aggregate(self, window: DateWindow) -> Dict[Module, ModuleSeries]:
        """Series of exactly ``window.length`` days for every known module"""
        data = {module: ModuleSeries.empty(window.length) for module in Module}

        lines = matched = outside = 0
        for line in self.store.read_lines():
            lines += 1
            event = self.parser.parse_line(line)
            if event is None:
                continue
            matched += 1

            offset = window.offset_of(event.date)
            if offset is None:
                outside += 1
                continue

            data[event.module].record(offset, event)

        LOGGER.debug(
            "scanned %s: %d lines, %d events, %d outside %s..%s",
            self.store.file_path, lines, matched, outside, window.start, window.end,
        )
        return data

    def latest_date(self) -> Optional[date]:
        """Most recent event date in the log, None if it holds no events"""
        latest: Optional[date] = None
        for line in self.store.read_lines():
            event = self.parser.parse_line(line)
            if event and (latest is None or event.date > latest):
                latest = event.date
        return latest
