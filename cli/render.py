from __future__ import annotations

from typing import Any, Dict, Iterable

import typer

PLACEHOLDER = "--"

_BAND_COLORS = {
    "cool": typer.colors.BLUE,
    "mild": typer.colors.GREEN,
    "warm": typer.colors.YELLOW,
    "hot": typer.colors.RED,
}


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def format_value(value: Any, has_data: bool) -> str:
    if not has_data or value is None:
        return PLACEHOLDER
    return f"{float(value):.1f}°F"


def render_reading(reading: Dict[str, Any]) -> None:
    color = _BAND_COLORS.get(reading.get("band", ""))
    typer.secho(
        f"  {reading.get('timestamp')}  {format_value(reading.get('temperature'), True)}",
        fg=color,
    )


def render_run_state(running: bool) -> None:
    if running:
        typer.secho("Simulation running.", fg=typer.colors.GREEN)
    else:
        typer.secho("Simulation stopped.", fg=typer.colors.YELLOW)


def render_state(payload: Dict[str, Any]) -> None:
    echo_heading("Dashboard")
    echo_key_values(
        [
            ("running", payload.get("running")),
            ("reading_count", payload.get("reading_count")),
        ]
    )

    statistics = payload.get("statistics") or {}
    has_data = bool(statistics.get("has_data"))
    typer.echo()
    echo_heading("Statistics")
    echo_key_values(
        [
            ("current", format_value(statistics.get("current"), has_data)),
            ("average", format_value(statistics.get("average"), has_data)),
            ("min", format_value(statistics.get("min"), has_data)),
            ("max", format_value(statistics.get("max"), has_data)),
        ]
    )

    readings = payload.get("readings") or []
    typer.echo()
    echo_heading(f"Readings ({len(readings)})")
    if readings:
        for reading in reversed(readings):
            render_reading(reading)
    else:
        typer.echo("No readings yet. Run `start` to begin.")
