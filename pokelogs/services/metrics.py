"""
Metric derivation over a completed ModuleSeries.

All functions are pure and total: a day without samples or traffic yields
None instead of dividing by zero.
"""

from typing import List, Optional

from pokelogs.models.data_models import DayMetric, ModuleSeries
from pokelogs.services.window import DateWindow
from pokelogs.utils.helpers import mean


def average_latency(series: ModuleSeries, offset: int) -> Optional[float]:
    """Mean latency in ms of the day at ``offset``"""
    return mean(series.latency_samples[offset])


def availability(series: ModuleSeries, offset: int) -> Optional[float]:
    """Percentage of successful requests of the day at ``offset``"""
    success = series.success_counts[offset]
    total = success + series.fail_counts[offset]
    if total == 0:
        return None
    return success / total * 100


def day_metrics(series: ModuleSeries, window: DateWindow) -> List[DayMetric]:
    return [
        DayMetric(
            date=day,
            average_latency=average_latency(series, offset),
            availability=availability(series, offset),
        )
        for offset, day in enumerate(window.days())
    ]
