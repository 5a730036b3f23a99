from __future__ import annotations

import time
from typing import Any, Callable, Dict, Optional

import httpx
import typer

from cli.config import CLIConfig


class ApiClient:
    """Minimal HTTP client for the dashboard service."""

    def __init__(self, config: CLIConfig, transport: Optional[httpx.BaseTransport] = None) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.request_timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def get_state(self) -> Dict[str, Any]:
        return self._request("GET", "/state")

    def start(self) -> bool:
        return self._run_state("/simulation/start")

    def stop(self) -> bool:
        return self._run_state("/simulation/stop")

    def toggle(self) -> bool:
        return self._run_state("/simulation/toggle")

    def watch(
        self,
        on_reading: Callable[[Dict[str, Any]], None],
        interval: float,
        duration: float,
        count: Optional[int] = None,
    ) -> int:
        """Report readings that arrive after the first poll.

        Stops after ``count`` readings, after ``duration`` seconds, or once the
        simulation is no longer running. Returns the number of readings reported.
        """
        deadline = time.monotonic() + duration
        seen: set[str] = set()
        reported = 0
        first = True
        while True:
            payload = self.get_state()
            readings = payload.get("readings") or []
            fresh = [reading for reading in readings if reading.get("id") not in seen]
            seen.update(reading.get("id") for reading in readings)
            if not first:
                for reading in fresh:
                    on_reading(reading)
                    reported += 1
                    if count is not None and reported >= count:
                        return reported
            first = False
            if not payload.get("running"):
                typer.secho("Simulation is stopped.", fg=typer.colors.YELLOW, err=True)
                return reported
            if time.monotonic() + interval > deadline:
                return reported
            time.sleep(interval)

    def _run_state(self, path: str) -> bool:
        payload = self._request("POST", path)
        running = payload.get("running")
        if not isinstance(running, bool):
            raise typer.BadParameter("Unexpected response payload when changing run state.")
        return running

    def _request(self, method: str, path: str) -> Dict[str, Any]:
        try:
            response = self._client.request(method, path)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            typer.secho(
                f"Could not reach {self._config.base_url}: {exc}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1) from exc
        return response.json()

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
