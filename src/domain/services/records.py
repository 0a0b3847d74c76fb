"""Boundary parsing from raw store values to domain records."""

from logging import Logger

from src.domain.models import CashMovement, LedgerEntry
from src.domain.services.normalization import (
    normalize_category,
    normalize_description,
    normalize_ledger_type,
    normalize_movement_type,
)
from src.utils.decimal_utils import coerce_decimal
from src.utils.utils import coerce_date


def parse_cash_movement(
    *,
    id,
    date,
    type,
    category,
    description,
    amount,
    logger: Logger,
) -> CashMovement | None:
    """Build a CashMovement from raw store values.

    Args:
        id: Store identifier.
        date: Raw date value.
        type: Raw movement type code.
        category: Raw category, possibly null.
        description: Raw description, possibly null.
        amount: Raw numeric amount.
        logger: Logger used for warnings.

    Returns:
        CashMovement | None: Parsed record, or None when the type code is
        not income or expense.
    """
    movement_type = normalize_movement_type(type)
    if movement_type is None:
        logger.warning(
            f"Skipping cash movement id={id} with unknown type {type!r}"
        )
        return None
    return CashMovement(
        id=int(id),
        date=coerce_date(date),
        type=movement_type,
        category=normalize_category(category),
        description=normalize_description(description),
        amount=coerce_decimal(amount),
    )


def parse_ledger_entry(
    *,
    id,
    date,
    type,
    category,
    description,
    amount,
) -> LedgerEntry:
    """Build a LedgerEntry from raw store values."""
    return LedgerEntry(
        id=int(id),
        date=coerce_date(date),
        type=normalize_ledger_type(type),
        category=normalize_description(category),
        description=normalize_description(description),
        amount=coerce_decimal(amount),
    )


__all__ = ["parse_cash_movement", "parse_ledger_entry"]
