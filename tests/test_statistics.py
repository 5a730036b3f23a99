"""Unit tests for the statistics calculator."""

from __future__ import annotations

from models.records import Reading
from services.statistics import StatisticsCalculator, TemperatureStatistics


def _reading(value: float) -> Reading:
    """Helper to build deterministic readings."""

    return Reading(temperature=value, timestamp="12:00:00")


def test_compute_empty_history_returns_sentinel_statistics() -> None:
    calculator = StatisticsCalculator()

    statistics = calculator.compute([])

    assert statistics == TemperatureStatistics(current=0.0, average=0.0, min=0.0, max=0.0)


def test_compute_uses_last_reading_as_current() -> None:
    calculator = StatisticsCalculator()
    readings = [_reading(70.0), _reading(80.0), _reading(75.0)]

    statistics = calculator.compute(readings)

    assert statistics.current == 75.0
    assert statistics.average == 75.0
    assert statistics.min == 70.0
    assert statistics.max == 80.0


def test_compute_single_reading() -> None:
    calculator = StatisticsCalculator()

    statistics = calculator.compute([_reading(68.5)])

    assert statistics == TemperatureStatistics(current=68.5, average=68.5, min=68.5, max=68.5)


def test_compute_bounds_every_retained_temperature() -> None:
    calculator = StatisticsCalculator()
    values = [84.2, 65.1, 77.7, 71.3, 79.9, 65.1]
    readings = [_reading(value) for value in values]

    statistics = calculator.compute(readings)

    assert all(statistics.min <= value <= statistics.max for value in values)
    assert statistics.min == 65.1
    assert statistics.max == 84.2
    assert statistics.average == sum(values) / len(values)
    assert statistics.current == 65.1
