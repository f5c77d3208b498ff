"""Tests for configuration loading."""

import logging
from pathlib import Path

import pytest

from weekplan.config import DATA_DIR, Config, load_config


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str) -> Path:
        path = tmp_path / "weekplan.conf"
        path.write_text(text)
        return path
    return _write


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "nope.conf")
        assert config == Config()

    def test_parses_keys(self, write_config):
        path = write_config(
            "# weekplan settings\n"
            "TASKS_FILE = ~/school/tasks.json\n"
            'BUSY_FILE = "/data/busy.json"  # classes\n'
            "SCHEDULE_DIR = '/data/out'\n"
            "INCLUDE_COMPLETED = yes\n"
            "REGENERATE_DAY = Sunday\n"
            "REGENERATE_TIME = 18:30  # evening\n"
            "log_level = debug\n"
            "BEDTIMES = 23:00,23:00,23:00,23:00,00:00,0,23:30\n"
            "WAKE_TIMES = 07:00,07:00,07:00,07:00,07:00,0,09:00\n"
        )
        config = load_config(path)

        assert config.tasks_file == "~/school/tasks.json"
        assert config.busy_file == "/data/busy.json"
        assert config.schedule_dir == "/data/out"
        assert config.include_completed is True
        assert config.regenerate_day == "Sunday"
        assert config.regenerate_time == "18:30"
        assert config.log_level == "DEBUG"
        assert config.bedtimes[-1] == "23:30"
        assert len(config.wake_times) == 7

    def test_ignores_unknown_and_malformed_lines(self, write_config):
        config = load_config(write_config("FOO = bar\nnot a setting\n\nTIMEZONE = UTC\n"))
        assert config.timezone == "UTC"

    def test_bad_sleep_times_keep_default(self, write_config, caplog):
        path = write_config("BEDTIMES = 23:00,23:00\nWAKE_TIMES = 7,7,7,7,7,7,noon\n")
        with caplog.at_level(logging.WARNING, logger="weekplan.config"):
            config = load_config(path)

        assert config.bedtimes == []
        assert config.wake_times == []
        assert "BEDTIMES needs 7 values" in caplog.text
        assert "WAKE_TIMES" in caplog.text


class TestConfigPaths:
    def test_defaults_under_data_dir(self):
        config = Config()
        assert config.tasks_path() == DATA_DIR / "tasks.json"
        assert config.busy_path() == DATA_DIR / "busy.json"
        assert config.schedule_path() == DATA_DIR / "schedules"

    def test_expands_user(self):
        config = Config(tasks_file="~/tasks.json")
        assert config.tasks_path() == Path.home() / "tasks.json"


class TestSleepMinutes:
    def test_not_configured(self):
        assert Config().sleep_minutes() is None

    def test_converts_to_minutes(self):
        config = Config(bedtimes=["23:00"] * 7, wake_times=["07:30"] * 7)
        bedtimes, wake_times = config.sleep_minutes()
        assert bedtimes == [1380] * 7
        assert wake_times == [450] * 7
