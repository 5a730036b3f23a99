from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_INTERVAL_ENV = "SIMULATION_INTERVAL_SECONDS"
_HISTORY_LIMIT_ENV = "SIMULATION_HISTORY_LIMIT"
_MIN_TEMPERATURE_ENV = "SIMULATION_MIN_TEMPERATURE"
_MAX_TEMPERATURE_ENV = "SIMULATION_MAX_TEMPERATURE"
_AUTOSTART_ENV = "SIMULATION_AUTOSTART"
_LOG_LEVEL_ENV = "LOG_LEVEL"

DEFAULT_INTERVAL_SECONDS = 2.0
DEFAULT_HISTORY_LIMIT = 20
DEFAULT_MIN_TEMPERATURE = 65.0
DEFAULT_MAX_TEMPERATURE = 85.0

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    interval_seconds: float
    history_limit: int
    min_temperature: float
    max_temperature: float
    autostart: bool
    log_level: str


def _read_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    candidate = value.strip()
    return candidate or None


def _read_positive_float(name: str, default: float) -> float:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        parsed = float(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_float(name: str, default: float) -> float:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        return float(candidate)
    except ValueError:
        return default


def _read_positive_int(name: str, default: int) -> int:
    candidate = _read_env(name)
    if candidate is None:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _read_bool(name: str, default: bool) -> bool:
    candidate = _read_env(name)
    if candidate is None:
        return default
    lowered = candidate.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    return default


def _read_log_level(default: str) -> str:
    candidate = _read_env(_LOG_LEVEL_ENV)
    if candidate is None:
        return default
    return candidate.upper()


def _read_temperature_range() -> tuple[float, float]:
    low = _read_float(_MIN_TEMPERATURE_ENV, DEFAULT_MIN_TEMPERATURE)
    high = _read_float(_MAX_TEMPERATURE_ENV, DEFAULT_MAX_TEMPERATURE)
    if high <= low:
        return DEFAULT_MIN_TEMPERATURE, DEFAULT_MAX_TEMPERATURE
    return low, high


@lru_cache
def get_settings() -> Settings:
    min_temperature, max_temperature = _read_temperature_range()
    return Settings(
        interval_seconds=_read_positive_float(_INTERVAL_ENV, DEFAULT_INTERVAL_SECONDS),
        history_limit=_read_positive_int(_HISTORY_LIMIT_ENV, DEFAULT_HISTORY_LIMIT),
        min_temperature=min_temperature,
        max_temperature=max_temperature,
        autostart=_read_bool(_AUTOSTART_ENV, False),
        log_level=_read_log_level("INFO"),
    )
