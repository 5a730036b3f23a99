"""Rolling statistics over the retained reading history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from models.records import Reading

NO_DATA = 0.0


@dataclass(frozen=True)
class TemperatureStatistics:
    """Summary of the retained history.

    Every field holds ``NO_DATA`` while the history is empty; callers should
    check the history length rather than the values to tell the two apart.
    """

    current: float = NO_DATA
    average: float = NO_DATA
    min: float = NO_DATA
    max: float = NO_DATA


class StatisticsCalculator:
    """Pure statistics component that can be unit tested in isolation."""

    def compute(self, readings: Sequence[Reading]) -> TemperatureStatistics:
        if not readings:
            return TemperatureStatistics()

        total = 0.0
        lowest = highest = readings[0].temperature
        for reading in readings:
            value = reading.temperature
            total += value
            if value < lowest:
                lowest = value
            if value > highest:
                highest = value

        return TemperatureStatistics(
            current=readings[-1].temperature,
            average=total / len(readings),
            min=lowest,
            max=highest,
        )
