"""Domain models package."""

from .records import CashMovement, LedgerEntry, MovementType
from .report import (
    ReportData,
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportRequest,
    ReportType,
    TrendBucket,
)

__all__ = [
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
]
