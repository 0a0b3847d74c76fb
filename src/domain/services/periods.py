"""Period resolution for report filtering.

A period selector becomes a predicate over record dates. The reference day
is always passed in by the caller so the resolver never reads the clock.
"""

from collections.abc import Callable
from datetime import date

from src.domain.errors import InvalidPeriodRangeError, UnknownPeriodError

DatePredicate = Callable[[date], bool]

SUPPORTED_SELECTORS = (
    "current_month",
    "current_year",
    "all",
    "quarter",
    "semester",
    "custom",
)


def resolve_period(
    selector: str,
    today: date,
    start: date | None = None,
    end: date | None = None,
) -> DatePredicate:
    """Return an inclusion predicate for the selected period.

    Args:
        selector: Period selector value (``current_month``, ``current_year``,
            ``all``, ``quarter``, ``semester`` or ``custom``).
        today: Reference day for relative periods.
        start: First included day for ``custom``.
        end: Last included day for ``custom``.

    Returns:
        DatePredicate: Function returning True for dates inside the period.

    Raises:
        UnknownPeriodError: If the selector is not supported.
        InvalidPeriodRangeError: If a custom range is missing or inverted.
    """
    key = getattr(selector, "value", selector)
    if key == "current_month":
        return lambda value: (
            value.year == today.year and value.month == today.month
        )
    if key == "current_year":
        return lambda value: value.year == today.year
    if key == "all":
        return lambda value: True
    if key == "quarter":
        quarter = _quarter(today)
        return lambda value: (
            value.year == today.year and _quarter(value) == quarter
        )
    if key == "semester":
        semester = _semester(today)
        return lambda value: (
            value.year == today.year and _semester(value) == semester
        )
    if key == "custom":
        if start is None or end is None:
            raise InvalidPeriodRangeError(
                "Custom period requires start and end dates"
            )
        if start > end:
            raise InvalidPeriodRangeError(
                f"Start date {start} is after end date {end}"
            )
        return lambda value: start <= value <= end
    raise UnknownPeriodError(selector)


def period_label(selector: str) -> str:
    """Return the header label for a period selector."""
    key = getattr(selector, "value", selector)
    return str(key).replace("_", " ").upper()


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a (year, month) pair by a number of calendar months."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def trailing_months(today: date, count: int) -> list[tuple[int, int]]:
    """Return the last ``count`` calendar months ending at ``today``.

    Args:
        today: Reference day; its month is the last element.
        count: Number of months to return.

    Returns:
        list[tuple[int, int]]: ``(year, month)`` pairs, oldest first.
    """
    return [
        shift_month(today.year, today.month, -offset)
        for offset in range(count - 1, -1, -1)
    ]


def _quarter(value: date) -> int:
    return (value.month - 1) // 3


def _semester(value: date) -> int:
    return (value.month - 1) // 6


__all__ = [
    "DatePredicate",
    "SUPPORTED_SELECTORS",
    "resolve_period",
    "period_label",
    "shift_month",
    "trailing_months",
]
