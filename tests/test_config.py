from pathlib import Path

import pytest

from habit_tracker.config import Environment, LogLevel, TrackerConfig


def test_from_env__defaults():
    config = TrackerConfig.from_env({})

    assert config.environment is Environment.DEVELOPMENT
    assert config.data_path == Path("data") / "habits-data.json"
    assert config.logging.level is LogLevel.INFO
    assert config.logging.to_file is False
    assert config.reminder.interval_seconds == 10
    assert config.timezone == "UTC"


def test_from_env__reads_variables(tmp_path):
    config = TrackerConfig.from_env(
        {
            "ENVIRONMENT": "production",
            "DATA_DIR": str(tmp_path),
            "DATA_FILE": "mine.json",
            "LOG_LEVEL": "DEBUG",
            "LOG_TO_FILE": "true",
            "REMINDER_INTERVAL_SECONDS": "60",
            "TIMEZONE": "Europe/Moscow",
        }
    )

    assert config.environment is Environment.PRODUCTION
    assert config.data_path == tmp_path / "mine.json"
    assert config.reminder.interval_seconds == 60
    assert "file" in config.get_logging_config()["handlers"]


def test_from_env__collects_all_errors():
    with pytest.raises(ValueError) as exc_info:
        TrackerConfig.from_env({"LOG_LEVEL": "LOUD", "REMINDER_INTERVAL_SECONDS": "x", "TIMEZONE": "Mars/Base"})

    text = str(exc_info.value)
    assert "LOG_LEVEL" in text
    assert "REMINDER_INTERVAL_SECONDS" in text
    assert "Mars/Base" in text


def test_with_overrides(tmp_path):
    config = TrackerConfig.from_env({}).with_overrides(
        data_file=str(tmp_path / "x.json"), log_level="warning", reminder_interval=5
    )

    assert config.data_path == tmp_path / "x.json"
    assert config.logging.level is LogLevel.WARNING
    assert config.reminder.interval_seconds == 5


def test_with_overrides__rejects_non_positive_interval():
    with pytest.raises(ValueError):
        TrackerConfig.from_env({}).with_overrides(reminder_interval=0)


def test_logging_config__console_only_by_default():
    logging_config = TrackerConfig.from_env({}).get_logging_config()

    assert list(logging_config["handlers"]) == ["console"]
    assert logging_config["loggers"]["apscheduler"]["level"] == "WARNING"
