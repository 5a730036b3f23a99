from __future__ import annotations

from typing import Any, Dict, List

import httpx
import pytest
import typer
from typer.testing import CliRunner

from cli.app import app
from cli.client import ApiClient
from cli.config import CLIConfig


def _reading(reading_id: str, temperature: float = 72.0) -> Dict[str, Any]:
    return {"id": reading_id, "temperature": temperature, "timestamp": "10:00:00", "band": "mild"}


def _state(*reading_ids: str, running: bool = True) -> Dict[str, Any]:
    return {
        "running": running,
        "reading_count": len(reading_ids),
        "statistics": {"current": 72.0, "average": 72.0, "min": 72.0, "max": 72.0, "has_data": True},
        "readings": [_reading(reading_id) for reading_id in reading_ids],
    }


class StateSequence:
    """Serves one queued ``/state`` payload per request, repeating the last one."""

    def __init__(self, *payloads: Dict[str, Any]) -> None:
        self.payloads = list(payloads)
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = self.payloads.pop(0) if len(self.payloads) > 1 else self.payloads[0]
        return httpx.Response(200, json=payload)


def _client(handler) -> ApiClient:
    return ApiClient(CLIConfig(base_url="http://dashboard"), transport=httpx.MockTransport(handler))


def test_watch_skips_first_poll_and_stops_at_count() -> None:
    client = _client(StateSequence(_state("a"), _state("a", "b", "c", "d")))
    reported: List[str] = []

    result = client.watch(lambda reading: reported.append(reading["id"]), interval=0, duration=5, count=1)

    assert result == 1
    assert reported == ["b"]


def test_watch_reports_each_new_reading_once() -> None:
    sequence = StateSequence(
        _state("a"),
        _state("a", "b"),
        _state("a", "b"),
        _state("b", "c", running=False),
    )
    client = _client(sequence)
    reported: List[str] = []

    result = client.watch(lambda reading: reported.append(reading["id"]), interval=0, duration=5)

    assert reported == ["b", "c"]
    assert result == 2
    assert len(sequence.requests) == 4


def test_watch_stops_when_simulation_is_stopped(capsys) -> None:
    client = _client(StateSequence(_state("a", running=False)))
    reported: List[str] = []

    result = client.watch(lambda reading: reported.append(reading["id"]), interval=0, duration=5, count=3)

    assert result == 0
    assert reported == []
    assert "Simulation is stopped." in capsys.readouterr().err


def test_watch_returns_when_duration_elapses() -> None:
    sequence = StateSequence(_state("a"))
    client = _client(sequence)

    result = client.watch(lambda reading: None, interval=0.5, duration=0.1)

    assert result == 0
    assert len(sequence.requests) == 1


def test_run_state_commands_post_to_simulation_routes() -> None:
    paths: List[tuple[str, str]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append((request.method, request.url.path))
        return httpx.Response(200, json={"running": request.url.path != "/simulation/stop"})

    client = _client(handler)

    assert client.start() is True
    assert client.stop() is False
    assert client.toggle() is True
    assert paths == [
        ("POST", "/simulation/start"),
        ("POST", "/simulation/stop"),
        ("POST", "/simulation/toggle"),
    ]


def test_run_state_rejects_unexpected_payload() -> None:
    client = _client(lambda request: httpx.Response(200, json={"running": "yes"}))

    with pytest.raises(typer.BadParameter):
        client.start()


def test_http_error_reports_detail_and_exits(capsys) -> None:
    client = _client(lambda request: httpx.Response(500, json={"detail": "engine unavailable"}))

    with pytest.raises(typer.Exit) as excinfo:
        client.get_state()

    assert excinfo.value.exit_code == 1
    assert "Request failed with status 500: engine unavailable" in capsys.readouterr().err


def test_http_error_falls_back_to_response_text(capsys) -> None:
    client = _client(lambda request: httpx.Response(503, text="maintenance"))

    with pytest.raises(typer.Exit):
        client.toggle()

    assert "Request failed with status 503: maintenance" in capsys.readouterr().err


def test_transport_error_reports_unreachable_server(capsys) -> None:
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(refuse)

    with pytest.raises(typer.Exit) as excinfo:
        client.get_state()

    assert excinfo.value.exit_code == 1
    assert "Could not reach http://dashboard" in capsys.readouterr().err


def test_cli_exits_with_error_on_server_failure(monkeypatch) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(404, json={"detail": "Not Found"}))

    def factory(config: CLIConfig) -> ApiClient:
        return ApiClient(config, transport=transport)

    monkeypatch.setattr("cli.app.ApiClient", factory)

    result = CliRunner().invoke(app, ["start"])

    assert result.exit_code == 1
    assert "Request failed with status 404: Not Found" in result.output
