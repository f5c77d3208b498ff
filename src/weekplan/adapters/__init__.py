"""Adapters - I/O implementations of ports."""

from .json_files import JsonBusyTimeRepository, JsonTaskRepository
from .file_schedule import FileScheduleStore

__all__ = [
    "JsonTaskRepository",
    "JsonBusyTimeRepository",
    "FileScheduleStore",
]
