"""Errors raised by the scheduling core."""


class ValidationError(ValueError):
    """Malformed scheduler input (busy interval, day index or task)."""
