from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from services.presentation import band_color, chart_points, format_temperature
from services.simulator import SimulationEngine, build_default_engine

CHART_WIDTH = 600.0
CHART_HEIGHT = 160.0

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent / "templates"))
templates.env.filters["temperature"] = format_temperature
templates.env.filters["band_color"] = band_color


def get_engine() -> SimulationEngine:
    return build_default_engine()


router = APIRouter(include_in_schema=False)


@router.get("/ui", name="ui_index", response_class=HTMLResponse)
async def ui_index(
    request: Request,
    engine: SimulationEngine = Depends(get_engine),
) -> HTMLResponse:
    state = engine.store.get()
    points = chart_points(state.readings, width=CHART_WIDTH, height=CHART_HEIGHT)
    return templates.TemplateResponse(
        request,
        "ui/index.html",
        {
            "state": state,
            "readings": state.newest_first(),
            "chart_points": points,
            "chart_width": CHART_WIDTH,
            "chart_height": CHART_HEIGHT,
            "should_poll": state.running,
            "refresh_seconds": max(1, round(engine.interval)),
        },
    )


@router.post("/ui/toggle", name="ui_toggle")
async def ui_toggle(
    request: Request,
    engine: SimulationEngine = Depends(get_engine),
) -> RedirectResponse:
    engine.toggle()
    return RedirectResponse(
        url=str(request.url_for("ui_index")),
        status_code=status.HTTP_303_SEE_OTHER,
    )
