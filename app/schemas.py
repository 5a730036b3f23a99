"""Pydantic schemas for the HTTP API layer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from models.records import Reading
from services.presentation import ChartPoint, TemperatureBand, temperature_band
from services.state_store import DashboardState
from services.statistics import TemperatureStatistics


class ReadingOut(BaseModel):
    """A single simulated reading."""

    id: str
    temperature: float
    timestamp: str = Field(..., description="Wall-clock time formatted as HH:MM:SS.")
    band: TemperatureBand

    @classmethod
    def from_reading(cls, reading: Reading) -> "ReadingOut":
        return cls(
            id=reading.id,
            temperature=reading.temperature,
            timestamp=reading.timestamp,
            band=temperature_band(reading.temperature),
        )


class StatisticsOut(BaseModel):
    """Rolling statistics; all zero until the first reading arrives."""

    current: float = 0.0
    average: float = 0.0
    min: float = 0.0
    max: float = 0.0
    has_data: bool = False

    @classmethod
    def from_statistics(cls, statistics: TemperatureStatistics, has_data: bool) -> "StatisticsOut":
        return cls(
            current=statistics.current,
            average=statistics.average,
            min=statistics.min,
            max=statistics.max,
            has_data=has_data,
        )


class RunStateOut(BaseModel):
    running: bool


class DashboardSnapshot(BaseModel):
    """Full dashboard state. Readings are in insertion order, oldest first."""

    running: bool
    reading_count: int = Field(..., ge=0)
    statistics: StatisticsOut
    readings: List[ReadingOut] = Field(default_factory=list)

    @classmethod
    def from_state(cls, state: DashboardState) -> "DashboardSnapshot":
        return cls(
            running=state.running,
            reading_count=state.reading_count,
            statistics=StatisticsOut.from_statistics(state.statistics, state.has_data),
            readings=[ReadingOut.from_reading(reading) for reading in state.readings],
        )


class ChartPointOut(BaseModel):
    x: float
    y: float
    temperature: float

    @classmethod
    def from_point(cls, point: ChartPoint) -> "ChartPointOut":
        return cls(x=point.x, y=point.y, temperature=point.temperature)


class ChartSeries(BaseModel):
    """Trend line coordinates; ``chartable`` is false for a zero temperature range."""

    width: float
    height: float
    chartable: bool
    points: List[ChartPointOut] = Field(default_factory=list)
