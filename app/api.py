"""HTTP route definitions for the service."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.schemas import (
    ChartPointOut,
    ChartSeries,
    DashboardSnapshot,
    ReadingOut,
    RunStateOut,
    StatisticsOut,
)
from services.presentation import chart_points
from services.simulator import SimulationEngine, build_default_engine

router = APIRouter()


def get_engine() -> SimulationEngine:
    return build_default_engine()


@router.get(
    "/state",
    response_model=DashboardSnapshot,
    summary="Current readings, statistics and run state.",
)
async def get_state(engine: SimulationEngine = Depends(get_engine)) -> DashboardSnapshot:
    return DashboardSnapshot.from_state(engine.store.get())


@router.get(
    "/readings",
    response_model=List[ReadingOut],
    summary="Retained readings, newest first.",
)
async def get_readings(engine: SimulationEngine = Depends(get_engine)) -> List[ReadingOut]:
    state = engine.store.get()
    return [ReadingOut.from_reading(reading) for reading in state.newest_first()]


@router.get(
    "/statistics",
    response_model=StatisticsOut,
    summary="Current, average, min and max over the retained readings.",
)
async def get_statistics(engine: SimulationEngine = Depends(get_engine)) -> StatisticsOut:
    state = engine.store.get()
    return StatisticsOut.from_statistics(state.statistics, state.has_data)


@router.get(
    "/chart",
    response_model=ChartSeries,
    summary="Trend line coordinates for the retained readings.",
)
async def get_chart(
    width: float = Query(300.0, gt=0),
    height: float = Query(150.0, gt=0),
    engine: SimulationEngine = Depends(get_engine),
) -> ChartSeries:
    points = chart_points(engine.store.get().readings, width=width, height=height)
    return ChartSeries(
        width=width,
        height=height,
        chartable=bool(points),
        points=[ChartPointOut.from_point(point) for point in points],
    )


@router.post(
    "/simulation/start",
    response_model=RunStateOut,
    summary="Start generating readings; no-op when already running.",
)
async def start_simulation(engine: SimulationEngine = Depends(get_engine)) -> RunStateOut:
    engine.start()
    return RunStateOut(running=engine.running)


@router.post(
    "/simulation/stop",
    response_model=RunStateOut,
    summary="Stop generating readings; no-op when already stopped.",
)
async def stop_simulation(engine: SimulationEngine = Depends(get_engine)) -> RunStateOut:
    engine.stop()
    return RunStateOut(running=engine.running)


@router.post(
    "/simulation/toggle",
    response_model=RunStateOut,
    summary="Start when stopped, stop when running.",
)
async def toggle_simulation(engine: SimulationEngine = Depends(get_engine)) -> RunStateOut:
    return RunStateOut(running=engine.toggle())


@router.get(
    "/health",
    summary="Health check endpoint.",
    status_code=status.HTTP_200_OK,
)
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get(
    "/",
    summary="Root endpoint mirrors health information.",
    status_code=status.HTTP_200_OK,
)
async def root() -> dict[str, str]:
    return {"status": "ok", "detail": "See /ui for the dashboard."}
