"""Domain package for business rules and core models."""

from .constants import (
    OTHER_LEDGER_TYPE_LABEL,
    TOP_CATEGORIES_LIMIT,
    TREND_MONTHS,
    UNCATEGORIZED_LABEL,
)
from .models import (
    CashMovement,
    LedgerEntry,
    MovementType,
    ReportData,
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportRequest,
    ReportType,
    TrendBucket,
)
from .services import aggregate, period_label, resolve_period

__all__ = [
    "OTHER_LEDGER_TYPE_LABEL",
    "TOP_CATEGORIES_LIMIT",
    "TREND_MONTHS",
    "UNCATEGORIZED_LABEL",
    "CashMovement",
    "LedgerEntry",
    "MovementType",
    "ReportData",
    "ReportFormat",
    "ReportPeriod",
    "ReportRecord",
    "ReportRequest",
    "ReportType",
    "TrendBucket",
    "aggregate",
    "period_label",
    "resolve_period",
]
