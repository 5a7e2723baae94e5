# tests/test_config.py
# StopwatchConfig loading from environment & .env files

import pytest
from pydantic import ValidationError

from wear_stopwatch.config import StopwatchConfig


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults(no_dotenv):
    config = StopwatchConfig.fromEnv(no_dotenv)
    assert config.tick_interval_ms == 10
    assert config.refresh_hz == 30.0
    assert config.log_level == "INFO"


def test_reads_environment(monkeypatch, no_dotenv):
    monkeypatch.setenv("STOPWATCH_TICK_INTERVAL_MS", "25")
    monkeypatch.setenv("STOPWATCH_REFRESH_HZ", "12.5")
    monkeypatch.setenv("STOPWATCH_LOG_LEVEL", " debug ")
    config = StopwatchConfig.fromEnv(no_dotenv)
    assert config.tick_interval_ms == 25
    assert config.refresh_hz == 12.5
    assert config.log_level == "DEBUG"


def test_reads_dotenv_file_but_environment_wins(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "STOPWATCH_TICK_INTERVAL_MS=40\nSTOPWATCH_REFRESH_HZ=5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("STOPWATCH_REFRESH_HZ", "60")
    config = StopwatchConfig.fromEnv(str(env_file))
    assert config.tick_interval_ms == 40
    assert config.refresh_hz == 60.0


@pytest.mark.parametrize(
    "name, value",
    [
        ("STOPWATCH_TICK_INTERVAL_MS", "0"),
        ("STOPWATCH_TICK_INTERVAL_MS", "fast"),
        ("STOPWATCH_REFRESH_HZ", "-1"),
        ("STOPWATCH_LOG_LEVEL", "loud"),
    ],
)
def test_invalid_values_raise(monkeypatch, no_dotenv, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        StopwatchConfig.fromEnv(no_dotenv)


def test_config_is_frozen():
    config = StopwatchConfig()
    with pytest.raises(ValidationError):
        config.refresh_hz = 1.0
