"""Generic project helpers."""

from datetime import date, datetime
from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).resolve().parents[2]


def coerce_date(value) -> date:
    """Normalize raw store values to a calendar date.

    Args:
        value: ``date``, ``datetime`` or ISO-8601 string.

    Returns:
        date: Calendar date of the value.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        raw = value.strip()
        try:
            return date.fromisoformat(raw[:10])
        except ValueError as exc:
            raise ValueError(f"Invalid date value: {value!r}") from exc
    raise ValueError(f"Invalid date value: {value!r}")


__all__ = ["get_project_root", "coerce_date"]
