from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_reading, render_run_state, render_state


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the temperature dashboard service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1, message="CLI state is uninitialized.")
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Dashboard API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    request_timeout: Optional[float] = typer.Option(
        None,
        "--request-timeout",
        help="Seconds to wait for each HTTP response (defaults to CLI_REQUEST_TIMEOUT env or 10).",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(
        base_url=base_url,
        request_timeout=request_timeout,
    )
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("state")
def state_command(ctx: typer.Context) -> None:
    """Show statistics and readings, newest first."""
    state = _get_state(ctx)
    render_state(state.client.get_state())


@app.command("start")
def start_command(ctx: typer.Context) -> None:
    """Start the simulation."""
    state = _get_state(ctx)
    render_run_state(state.client.start())


@app.command("stop")
def stop_command(ctx: typer.Context) -> None:
    """Stop the simulation."""
    state = _get_state(ctx)
    render_run_state(state.client.stop())


@app.command("toggle")
def toggle_command(ctx: typer.Context) -> None:
    """Start the simulation if stopped, stop it if running."""
    state = _get_state(ctx)
    render_run_state(state.client.toggle())


@app.command("watch")
def watch_command(
    ctx: typer.Context,
    count: Optional[int] = typer.Option(
        None,
        "--count",
        "-n",
        min=1,
        help="Exit after this many new readings.",
    ),
    interval: Optional[float] = typer.Option(
        None,
        "--interval",
        help="Seconds between state checks (defaults to CLI_WATCH_INTERVAL env or 2).",
    ),
    duration: Optional[float] = typer.Option(
        None,
        "--duration",
        help="Stop watching after this many seconds (defaults to CLI_WATCH_DURATION env or 30).",
    ),
) -> None:
    """Print new readings as they arrive."""
    state = _get_state(ctx)
    poll_every = interval if interval is not None else state.config.watch_interval
    watch_for = duration if duration is not None else state.config.watch_duration
    typer.echo(f"Watching {state.config.base_url} (interval={poll_every}s, duration={watch_for}s)...")
    seen = state.client.watch(
        render_reading,
        interval=poll_every,
        duration=watch_for,
        count=count,
    )
    typer.echo(f"{seen} new reading(s).")


@app.command("serve")
def serve_command(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind."),
    port: int = typer.Option(8000, "--port", help="Port to listen on."),
) -> None:
    """Run the dashboard service."""
    import uvicorn

    uvicorn.run("app.main:app", host=host, port=port, log_config=None)
