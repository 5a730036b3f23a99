from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:8000"
# Matches the service's default tick so each poll sees at most one new reading.
DEFAULT_WATCH_INTERVAL = 2.0
DEFAULT_WATCH_DURATION = 30.0
DEFAULT_REQUEST_TIMEOUT = 10.0

_BASE_URL_ENV = "API_BASE_URL"
_WATCH_INTERVAL_ENV = "CLI_WATCH_INTERVAL"
_WATCH_DURATION_ENV = "CLI_WATCH_DURATION"
_REQUEST_TIMEOUT_ENV = "CLI_REQUEST_TIMEOUT"


@dataclass(frozen=True)
class CLIConfig:
    """Connection and watch settings for the dashboard CLI.

    ``watch_duration`` bounds how long ``watch`` follows the feed; reaching it
    is a normal exit, not a failure.
    """

    base_url: str = DEFAULT_BASE_URL
    watch_interval: float = DEFAULT_WATCH_INTERVAL
    watch_duration: float = DEFAULT_WATCH_DURATION
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT


def _env_positive_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _pick(explicit: Optional[float], env_name: str, default: float) -> float:
    if explicit is not None:
        return explicit
    return _env_positive_float(env_name, default)


def load_config(
    base_url: Optional[str] = None,
    watch_interval: Optional[float] = None,
    watch_duration: Optional[float] = None,
    request_timeout: Optional[float] = None,
) -> CLIConfig:
    """Merge explicit options over environment variables over defaults."""
    url = base_url or os.getenv(_BASE_URL_ENV) or DEFAULT_BASE_URL
    return CLIConfig(
        base_url=url.rstrip("/"),
        watch_interval=_pick(watch_interval, _WATCH_INTERVAL_ENV, DEFAULT_WATCH_INTERVAL),
        watch_duration=_pick(watch_duration, _WATCH_DURATION_ENV, DEFAULT_WATCH_DURATION),
        request_timeout=_pick(request_timeout, _REQUEST_TIMEOUT_ENV, DEFAULT_REQUEST_TIMEOUT),
    )
