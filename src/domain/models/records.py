"""Domain models for records read from the record store."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class MovementType(str, Enum):
    """Direction of a cash movement."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class CashMovement:
    """Single cash-register transaction.

    Attributes:
        id: Store identifier.
        date: Calendar date of the movement.
        type: Income or expense.
        category: Grouping key, already normalized (never blank).
        description: Optional free text.
        amount: Movement amount.
    """

    id: int
    date: date
    type: MovementType
    category: str
    description: str | None
    amount: Decimal


@dataclass(frozen=True)
class LedgerEntry:
    """Recorded obligation or expense line, counted as debt in reports.

    Attributes:
        id: Store identifier.
        date: Calendar date of the entry.
        type: Grouping key, already normalized (never blank).
        category: Optional category.
        description: Optional free text.
        amount: Entry amount.
    """

    id: int
    date: date
    type: str
    category: str | None
    description: str | None
    amount: Decimal


__all__ = ["MovementType", "CashMovement", "LedgerEntry"]
