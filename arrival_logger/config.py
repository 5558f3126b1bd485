"""Configuration loader for the bus arrival logger."""

from __future__ import annotations

from dataclasses import dataclass
import math
import os
from typing import Any

from dotenv import load_dotenv
import yaml

SERVICE_KEY_ENV = "SERVICE_KEY"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


@dataclass(frozen=True)
class ApiConfig:
    """Upstream bus arrival API configuration."""

    service_key: str
    base_url: str
    station_id: str
    request_timeout_seconds: float | None


@dataclass(frozen=True)
class FilterConfig:
    """Row filter thresholds; ``None`` disables a check."""

    route_name: int | None = None
    max_predict_minutes: int | None = None


@dataclass(frozen=True)
class OutputConfig:
    """Paths of the CSV table and the run log."""

    csv_path: str
    log_path: str


@dataclass(frozen=True)
class ScheduleConfig:
    """Batch scheduling configuration."""

    interval_seconds: float
    run_once: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    api: ApiConfig
    filter: FilterConfig
    output: OutputConfig
    schedule: ScheduleConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = _require_key(data, name, name)
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' config must be a mapping")
    return section


def _optional_int(mapping: dict[str, Any], key: str, context: str) -> int | None:
    value = mapping.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{key}' in {context} config must be an integer or null")
    return value


def _positive_number(value: Any, key: str, context: str) -> float:
    valid = not isinstance(value, bool) and isinstance(value, (int, float))
    if not valid or not math.isfinite(value) or value <= 0:
        raise ValueError(f"'{key}' in {context} config must be a number greater than 0")
    return value


def _log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
        raise ValueError(f"'level' in logging config must be one of {', '.join(LOG_LEVELS)}")
    return value.upper()


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file plus the environment."""
    load_dotenv()
    service_key = os.environ.get(SERVICE_KEY_ENV, "").strip()
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    api_section = _require_section(data, "api")
    output_section = _require_section(data, "output")
    schedule_section = _require_section(data, "schedule")
    logging_section = _require_section(data, "logging")

    filter_section = data.get("filter") or {}
    if not isinstance(filter_section, dict):
        raise ValueError("'filter' config must be a mapping")

    timeout = api_section.get("request_timeout_seconds")
    if timeout is not None:
        timeout = _positive_number(timeout, "request_timeout_seconds", "api")

    api = ApiConfig(
        service_key=service_key,
        base_url=_require_key(api_section, "base_url", "api"),
        station_id=str(_require_key(api_section, "station_id", "api")),
        request_timeout_seconds=timeout,
    )

    arrival_filter = FilterConfig(
        route_name=_optional_int(filter_section, "route_name", "filter"),
        max_predict_minutes=_optional_int(filter_section, "max_predict_minutes", "filter"),
    )

    output = OutputConfig(
        csv_path=_require_key(output_section, "csv_path", "output"),
        log_path=_require_key(output_section, "log_path", "output"),
    )

    schedule = ScheduleConfig(
        interval_seconds=_positive_number(
            _require_key(schedule_section, "interval_seconds", "schedule"),
            "interval_seconds",
            "schedule",
        ),
        run_once=bool(schedule_section.get("run_once", False)),
    )

    logging = LoggingConfig(
        level=_log_level(_require_key(logging_section, "level", "logging")),
    )

    return AppConfig(
        api=api,
        filter=arrival_filter,
        output=output,
        schedule=schedule,
        log=logging,
    )
