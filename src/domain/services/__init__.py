"""Domain services package."""

from .aggregation import aggregate, month_label
from .normalization import (
    normalize_category,
    normalize_description,
    normalize_ledger_type,
    normalize_movement_type,
)
from .periods import (
    period_label,
    resolve_period,
    shift_month,
    trailing_months,
)
from .records import parse_cash_movement, parse_ledger_entry

__all__ = [
    "aggregate",
    "month_label",
    "normalize_category",
    "normalize_description",
    "normalize_ledger_type",
    "normalize_movement_type",
    "period_label",
    "resolve_period",
    "shift_month",
    "trailing_months",
    "parse_cash_movement",
    "parse_ledger_entry",
]
