"""
Data Models (DTOs - Data Transfer Objects)

This module contains the enums and dataclasses shared by the parser, the
aggregation engine and the report drivers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional


class Module(str, Enum):
    """Closed set of monitored services"""
    POKE_API = "PokeAPI"
    POKE_IMAGES = "PokeImages"
    POKE_STATS = "PokeStats"

    @classmethod
    def names(cls) -> List[str]:
        return [m.value for m in cls]


class Outcome(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"


@dataclass(frozen=True)
class LogEvent:
    """One request outcome extracted from a log line"""
    module: Module
    outcome: Outcome
    latency_ms: int
    date: date


@dataclass
class ModuleSeries:
    """
    Per-day accumulators for one module.
    The three lists always have the same length, indexed by day offset.
    """
    success_counts: List[int]
    fail_counts: List[int]
    latency_samples: List[List[int]]

    @classmethod
    def empty(cls, length: int) -> "ModuleSeries":
        return cls(
            success_counts=[0] * length,
            fail_counts=[0] * length,
            latency_samples=[[] for _ in range(length)],
        )

    @property
    def length(self) -> int:
        return len(self.success_counts)

    def record(self, offset: int, event: LogEvent) -> None:
        """Fold one in-window event into the bucket at ``offset``"""
        if event.outcome is Outcome.SUCCESS:
            self.success_counts[offset] += 1
        else:
            self.fail_counts[offset] += 1
        self.latency_samples[offset].append(event.latency_ms)


@dataclass(frozen=True)
class DayMetric:
    """Derived metrics for one day; None means unknown"""
    date: date
    average_latency: Optional[float]
    availability: Optional[float]


@dataclass(frozen=True)
class ReportRow:
    date: date
    value: Optional[float]


@dataclass
class ChartReport:
    """Chart-ready data for one module over one window"""
    module: Module
    metric: str
    start: date
    values: List[float]
    series: List[float]
    chart: str
    axis: List[str] = field(default_factory=list)


@dataclass
class HealthStatus:
    """Health check response"""
    status: str
    log_file_exists: bool
    path: str
    size_bytes: int
    total_lines: int
    latest_date: Optional[str] = None
