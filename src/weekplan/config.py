"""Configuration management for weekplan."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from .core.errors import ValidationError
from .core.sleep import parse_clock

logger = logging.getLogger(__name__)

WEEKPLAN_HOME = Path(os.environ.get("WEEKPLAN_HOME", Path.home() / "weekplan"))
CONFIG_FILE = WEEKPLAN_HOME / "config" / "weekplan.conf"
DATA_DIR = WEEKPLAN_HOME / "data"


class ConfigError(Exception):
    """A configured input file is missing or unreadable."""


@dataclass
class Config:
    """weekplan configuration."""

    tasks_file: str = ""
    busy_file: str = ""
    schedule_dir: str = ""
    # Seven HH:MM values, Monday first; empty means no sleep blocks
    bedtimes: list[str] = field(default_factory=list)
    wake_times: list[str] = field(default_factory=list)
    include_completed: bool = False
    timezone: str = "America/Toronto"
    regenerate_day: str = "Monday"
    regenerate_time: str = "06:00"
    log_level: str = "INFO"

    def tasks_path(self) -> Path:
        return Path(self.tasks_file).expanduser() if self.tasks_file else DATA_DIR / "tasks.json"

    def busy_path(self) -> Path:
        return Path(self.busy_file).expanduser() if self.busy_file else DATA_DIR / "busy.json"

    def schedule_path(self) -> Path:
        if self.schedule_dir:
            return Path(self.schedule_dir).expanduser()
        return DATA_DIR / "schedules"

    def sleep_minutes(self) -> tuple[list[int], list[int]] | None:
        """Bedtimes and wake times in minutes, or None when not configured."""
        if not self.bedtimes and not self.wake_times:
            return None
        return (
            [parse_clock(v) for v in self.bedtimes],
            [parse_clock(v) for v in self.wake_times],
        )


def _split_list(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _parse_bool(value: str) -> bool:
    return value.lower() in ("1", "true", "yes", "on")


def _check_clocks(key: str, values: list[str]) -> list[str] | None:
    if len(values) != 7:
        logger.warning(f"{key.upper()} needs 7 values (Monday first), got {len(values)}")
        return None
    try:
        for v in values:
            parse_clock(v)
    except ValidationError as e:
        logger.warning(f"Failed to parse {key.upper()}: {e}")
        return None
    return values


def load_config(path: Path | None = None) -> Config:
    """Load configuration from weekplan.conf."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        logger.debug(f"No config file at {path}, using defaults")
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value.startswith('"') or value.startswith("'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "tasks_file":
                config.tasks_file = value
            case "busy_file":
                config.busy_file = value
            case "schedule_dir":
                config.schedule_dir = value
            case "bedtimes":
                config.bedtimes = _check_clocks(key, _split_list(value)) or config.bedtimes
            case "wake_times":
                config.wake_times = _check_clocks(key, _split_list(value)) or config.wake_times
            case "include_completed":
                config.include_completed = _parse_bool(value)
            case "timezone":
                config.timezone = value
            case "regenerate_day":
                config.regenerate_day = value
            case "regenerate_time":
                config.regenerate_time = value
            case "log_level":
                config.log_level = value.upper()
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
