"""Display helpers shared by the JSON API and the HTML dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from models.records import Reading

PLACEHOLDER = "--"


class TemperatureBand(str, Enum):
    """Color-coding categories for a single temperature."""

    cool = "cool"
    mild = "mild"
    warm = "warm"
    hot = "hot"


BAND_COLORS = {
    TemperatureBand.cool: "#2196F3",
    TemperatureBand.mild: "#4CAF50",
    TemperatureBand.warm: "#FF9800",
    TemperatureBand.hot: "#F44336",
}


def temperature_band(value: float) -> TemperatureBand:
    if value < 70:
        return TemperatureBand.cool
    if value < 75:
        return TemperatureBand.mild
    if value < 80:
        return TemperatureBand.warm
    return TemperatureBand.hot


def band_color(value: float) -> str:
    return BAND_COLORS[temperature_band(value)]


def format_temperature(value: float, has_data: bool = True) -> str:
    if not has_data:
        return PLACEHOLDER
    return f"{int(value)}°F"


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float
    temperature: float


def chart_points(readings: Sequence[Reading], width: float, height: float) -> List[ChartPoint]:
    """Map readings onto a ``width`` x ``height`` canvas, oldest on the left.

    Returns no points when the readings span a zero temperature range, which
    includes the single-reading case.
    """
    if not readings:
        return []

    temperatures = [reading.temperature for reading in readings]
    lowest = min(temperatures)
    span = max(temperatures) - lowest
    if span == 0:
        return []

    spacing = width / max(len(readings) - 1, 1)
    points: List[ChartPoint] = []
    for index, value in enumerate(temperatures):
        normalized = (value - lowest) / span
        points.append(
            ChartPoint(x=index * spacing, y=height - normalized * height, temperature=value)
        )
    return points
