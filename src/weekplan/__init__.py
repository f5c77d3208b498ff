"""weekplan - weekly task scheduling engine."""

from .core import ValidationError, generate_schedule

__all__ = ["ValidationError", "generate_schedule"]
