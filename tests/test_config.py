from __future__ import annotations

import textwrap

import pytest

from arrival_logger.config import AppConfig, FilterConfig, load_config


VALID_YAML = """
api:
  base_url: "https://example.test/getBusArrivalListv2"
  station_id: "226000039"
  request_timeout_seconds: null

filter:
  route_name: 1009
  max_predict_minutes: 10

output:
  csv_path: "./data.csv"
  log_path: "./result.log"

schedule:
  interval_seconds: 600
  run_once: false

logging:
  level: "INFO"
"""


def _write_yaml(tmp_path, contents: str) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(contents))
    return str(path)


def test_load_config_valid(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)

    monkeypatch.setenv("SERVICE_KEY", "testkey")
    config = load_config(path)

    assert isinstance(config, AppConfig)
    assert config.api.service_key == "testkey"
    assert config.api.station_id == "226000039"
    assert config.api.request_timeout_seconds is None
    assert config.filter == FilterConfig(route_name=1009, max_predict_minutes=10)
    assert config.output.csv_path == "./data.csv"
    assert config.schedule.interval_seconds == 600
    assert config.schedule.run_once is False
    assert config.log.level == "INFO"


def test_load_config_blank_service_key_is_empty(tmp_path, monkeypatch) -> None:
    path = _write_yaml(tmp_path, VALID_YAML)
    monkeypatch.setenv("SERVICE_KEY", "   ")

    config = load_config(path)

    assert config.api.service_key == ""


def test_load_config_numeric_station_id_is_string(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace('"226000039"', "226000039"))

    config = load_config(path)

    assert config.api.station_id == "226000039"


def test_load_config_without_filter_disables_filtering(tmp_path) -> None:
    yaml_text = """
    api:
      base_url: "https://example.test/"
      station_id: "1"
    output:
      csv_path: "data.csv"
      log_path: "result.log"
    schedule:
      interval_seconds: 60
    logging:
      level: "DEBUG"
    """
    path = _write_yaml(tmp_path, yaml_text)

    config = load_config(path)

    assert config.filter == FilterConfig(route_name=None, max_predict_minutes=None)
    assert config.schedule.run_once is False


def test_load_config_missing_file(tmp_path) -> None:
    missing_path = tmp_path / "does_not_exist.yaml"

    with pytest.raises(ValueError):
        load_config(str(missing_path))


def test_load_config_missing_api_section(tmp_path) -> None:
    yaml_text = """
    output:
      csv_path: "data.csv"
      log_path: "result.log"
    schedule:
      interval_seconds: 600
    logging:
      level: "INFO"
    """
    path = _write_yaml(tmp_path, yaml_text)

    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_station_id(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace('  station_id: "226000039"\n', ""))

    with pytest.raises(ValueError, match="station_id"):
        load_config(path)


def test_load_config_rejects_non_integer_route(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace("route_name: 1009", 'route_name: "abc"'))

    with pytest.raises(ValueError, match="route_name"):
        load_config(path)


@pytest.mark.parametrize("interval", ["0", "-5", "0.0", '"600"', "true", ".inf"])
def test_load_config_rejects_bad_interval(tmp_path, interval: str) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace("interval_seconds: 600", f"interval_seconds: {interval}"))

    with pytest.raises(ValueError, match="interval_seconds"):
        load_config(path)


def test_load_config_accepts_fractional_interval(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace("interval_seconds: 600", "interval_seconds: 0.5"))

    assert load_config(path).schedule.interval_seconds == 0.5


@pytest.mark.parametrize("timeout", ['"10"', "0", "-1", "false"])
def test_load_config_rejects_bad_timeout(tmp_path, timeout: str) -> None:
    path = _write_yaml(
        tmp_path,
        VALID_YAML.replace("request_timeout_seconds: null", f"request_timeout_seconds: {timeout}"),
    )

    with pytest.raises(ValueError, match="request_timeout_seconds"):
        load_config(path)


def test_load_config_accepts_timeout(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace("request_timeout_seconds: null", "request_timeout_seconds: 5"))

    assert load_config(path).api.request_timeout_seconds == 5


def test_load_config_invalid_yaml(tmp_path) -> None:
    path = _write_yaml(tmp_path, "api: [unclosed\n")

    with pytest.raises(ValueError, match="not valid YAML"):
        load_config(path)


@pytest.mark.parametrize("level", ['"VERBOSE"', "10", "null"])
def test_load_config_rejects_unknown_log_level(tmp_path, level: str) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace('level: "INFO"', f"level: {level}"))

    with pytest.raises(ValueError, match="level"):
        load_config(path)


def test_load_config_normalizes_log_level(tmp_path) -> None:
    path = _write_yaml(tmp_path, VALID_YAML.replace('level: "INFO"', 'level: "debug"'))

    assert load_config(path).log.level == "DEBUG"
