"""
Text-mode charts

Plots a numeric sequence with plotext and builds the day/month/year axis
printed under it. The axis is shifted to the column where the plot's left
frame sits, so each tick lands on the first column of its day.
"""

from typing import List, Sequence

import plotext as plt

from pokelogs.config import CHART_HEIGHT
from pokelogs.services.window import DateWindow

DEFAULT_AXIS_OFFSET = 13
FRAME_CHARS = "│┤┼┌└"


def _build(values: Sequence[float], width: int, height: int) -> str:
    plt.clear_figure()
    plt.theme("clear")
    plt.plotsize(width, height)
    plt.xfrequency(0)
    plt.plot(list(values))
    return plt.uncolorize(plt.build())


def plot(values: Sequence[float], height: int = CHART_HEIGHT) -> str:
    """
    Render ``values`` as a colourless line chart, one column per value.
    The y labels' width is only known after a first build, so the chart is
    built twice: the second time with the plot area exactly len(values) wide.
    """
    first = _build(values, len(values) + 20, height + 2)
    offset = axis_offset(first)
    text = _build(values, offset + len(values) + 2, height + 2)
    return "\n".join(line.rstrip() for line in text.splitlines() if line.strip())


def axis_offset(chart: str) -> int:
    """Column of the chart's left frame, or the default when it has none"""
    columns = [
        i
        for line in chart.splitlines()
        for i, ch in enumerate(line)
        if ch in FRAME_CHARS
    ]
    return min(columns) if columns else DEFAULT_AXIS_OFFSET


def chart_axis(window: DateWindow, offset: int = DEFAULT_AXIS_OFFSET) -> List[str]:
    """One tick per window day followed by day, month and year label lines"""
    days = window.days()
    prefix = " " * offset
    return [
        prefix + "─" + "───".join("┬" for _ in days),
        prefix + " ".join(f"{d.day:02d}/" for d in days),
        prefix + " ".join(f"{d.month:02d}/" for d in days),
        prefix + "  ".join(f"{d.year % 100:02d}" for d in days),
    ]
