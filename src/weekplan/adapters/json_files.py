"""JSON file adapters for tasks and busy time blocks."""

import json
import logging
from pathlib import Path

from weekplan.config import ConfigError
from weekplan.core.errors import ValidationError
from weekplan.core.intervals import BusyInterval
from weekplan.core.tasks import Task, filter_open

logger = logging.getLogger(__name__)

BLOCK_TYPES = ("busy", "wake", "bedtime")


def _read_records(path: Path, key: str) -> list[dict]:
    """Read a JSON list of records, either bare or wrapped as {key: [...]}."""
    if not path.exists():
        raise ConfigError(f"File not found: {path}")
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise ConfigError(f"Expected a list of records in {path}")
    return data


class JsonTaskRepository:
    """
    Task list stored as JSON todo-item records.

    Implements TaskRepository protocol.
    """

    def __init__(self, path: Path | str, include_completed: bool = False):
        self.path = Path(path).expanduser()
        self.include_completed = include_completed

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks; completed ones are skipped unless include_completed."""
        tasks = []
        for item in _read_records(self.path, "tasks"):
            if not isinstance(item, dict):
                raise ValidationError(f"Task record must be an object, got {item!r}")
            tasks.append(Task.from_dict(item))

        if not self.include_completed:
            open_tasks = filter_open(tasks)
            logger.debug(f"Skipping {len(tasks) - len(open_tasks)} completed tasks")
            tasks = open_tasks
        logger.info(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks


class JsonBusyTimeRepository:
    """
    Weekly time blocks stored as JSON.

    Implements BusyTimeRepository protocol. Records look like
    {"id", "day", "startTime", "endTime", "type", "notes"}.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_busy(self) -> list[tuple[int, BusyInterval]]:
        """Fetch (day_index, interval) pairs. Missing file means a free week."""
        if not self.path.exists():
            logger.warning(f"No busy time file at {self.path}, treating week as free")
            return []
        busy = [self._parse_block(item) for item in _read_records(self.path, "timeBlocks")]
        logger.info(f"Loaded {len(busy)} busy blocks from {self.path}")
        return busy

    def _parse_block(self, item: dict) -> tuple[int, BusyInterval]:
        if not isinstance(item, dict):
            raise ValidationError(f"Time block must be an object, got {item!r}")
        block_id = item.get("id", "?")
        try:
            day = item["day"]
            start = item.get("startTime", item.get("start"))
            end = item.get("endTime", item.get("end"))
        except KeyError:
            raise ValidationError(f"Time block {block_id} is missing a day") from None

        block_type = item.get("type", "busy")
        if block_type not in BLOCK_TYPES:
            raise ValidationError(f"Time block {block_id} has unknown type {block_type!r}")

        try:
            interval = BusyInterval(start, end, label=item.get("notes") or block_type)
        except ValidationError as e:
            raise ValidationError(f"Time block {block_id}: {e}") from None
        return day, interval
