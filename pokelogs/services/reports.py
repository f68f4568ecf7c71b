"""
ReportService Class - Latency, availability and chart reports

Each report validates its inputs, resolves a DateWindow, runs exactly one
aggregation pass and derives the requested metric per day. Formatting the
results as text is kept in the module-level functions below.
"""

import logging
from datetime import date, timedelta
from typing import Callable, List, Optional, Sequence

from pokelogs.config import CHART_HEIGHT, CHART_STEP_WIDTH, DEFAULT_PERIOD, UNKNOWN_LABEL
from pokelogs.errors import MissingModule, UnknownModule
from pokelogs.models.data_models import ChartReport, Module, ReportRow
from pokelogs.services.aggregator import Aggregator
from pokelogs.services.chart import axis_offset, chart_axis, plot
from pokelogs.services.metrics import day_metrics
from pokelogs.services.window import DateWindow, resolve_period
from pokelogs.utils.helpers import format_day, format_number, repeat_each

LOGGER = logging.getLogger(__name__)

Plotter = Callable[[Sequence[float], int], str]


def default_start(today: date) -> date:
    """First day of the default latency window ending today"""
    return today - timedelta(days=DEFAULT_PERIOD - 1)


def resolve_module(name: Optional[str]) -> Module:
    """Map a user-supplied module name onto the enum"""
    if not name:
        raise MissingModule(Module.names())
    try:
        return Module(name)
    except ValueError:
        raise UnknownModule(name, Module.names()) from None


class ReportService:
    """
    Builds reports over the log behind ``aggregator``.
    ``today`` is fixed at construction so every relative window of one run
    agrees on it.
    """

    def __init__(
        self,
        aggregator: Aggregator,
        today: date,
        step_width: int = CHART_STEP_WIDTH,
        chart_height: int = CHART_HEIGHT,
        plotter: Plotter = plot,
    ):
        self.aggregator = aggregator
        self.today = today
        self.step_width = step_width
        self.chart_height = chart_height
        self.plotter = plotter

    def latency_report(
        self,
        module_name: Optional[str],
        start: Optional[str] = None,
        end: Optional[str] = None,
    ) -> List[ReportRow]:
        """Average latency per day between ``start`` and ``end`` (DD/MM/YYYY)"""
        module = resolve_module(module_name)
        window = DateWindow.from_range(
            start if start is not None else format_day(default_start(self.today)),
            end if end is not None else format_day(self.today),
        )

        series = self.aggregator.aggregate(window)[module]
        return [
            ReportRow(date=m.date, value=m.average_latency)
            for m in day_metrics(series, window)
        ]

    def availability_report(
        self,
        module_name: Optional[str],
        last_nth_days: Optional[int] = None,
        last_3_days: bool = False,
        last_30_days: bool = False,
    ) -> List[ReportRow]:
        """Availability percentage per day over the last N days"""
        module = resolve_module(module_name)
        days = resolve_period(last_nth_days, last_3_days, last_30_days)
        window = DateWindow.last_days(days, self.today)

        series = self.aggregator.aggregate(window)[module]
        return [
            ReportRow(date=m.date, value=m.availability)
            for m in day_metrics(series, window)
        ]

    def chart_report(
        self,
        module_name: Optional[str],
        last_nth_days: Optional[int] = None,
        last_3_days: bool = False,
        last_30_days: bool = False,
        latency: bool = False,
    ) -> ChartReport:
        """
        Chart of availability (default) or average latency over the last N
        days. Unknown days plot as 0; each day spans ``step_width`` columns.
        """
        module = resolve_module(module_name)
        days = resolve_period(last_nth_days, last_3_days, last_30_days)
        window = DateWindow.last_days(days, self.today)
        LOGGER.debug("chart %s over %d days, latency=%s", module.value, days, latency)

        metrics = day_metrics(self.aggregator.aggregate(window)[module], window)
        if latency:
            values = [
                round(m.average_latency, 2) if m.average_latency is not None else 0
                for m in metrics
            ]
        else:
            values = [m.availability if m.availability is not None else 0 for m in metrics]

        stepped = repeat_each(values, self.step_width)
        chart = self.plotter(stepped, self.chart_height)
        return ChartReport(
            module=module,
            metric="latency" if latency else "availability",
            start=window.start,
            values=values,
            series=stepped,
            chart=chart,
            axis=chart_axis(window, axis_offset(chart)),
        )


# ──────────────────────────────────────────────────────────────────────────────
# Text rendering
# ──────────────────────────────────────────────────────────────────────────────

def format_latency_rows(rows: List[ReportRow]) -> List[str]:
    return [
        f"{format_day(r.date)} "
        + (f"{r.value:.2f}ms" if r.value is not None else UNKNOWN_LABEL)
        for r in rows
    ]


def format_availability_rows(rows: List[ReportRow]) -> List[str]:
    return [
        f"{format_day(r.date)} "
        + (format_number(r.value) if r.value is not None else UNKNOWN_LABEL)
        for r in rows
    ]


def render_chart(report: ChartReport) -> List[str]:
    return [report.chart.rstrip("\n")] + report.axis
