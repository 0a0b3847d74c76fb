"""Port for reading cash movements and ledger entries."""

from typing import Protocol

from src.domain.models import CashMovement, LedgerEntry


class FinancialRecordsRepositoryPort(Protocol):
    """Port exposing unfiltered record collections for aggregation.

    Implementations raise ``FetchFailedError`` when the store cannot be
    read. Ordering of the returned lists is not significant.
    """

    def fetch_cash_movements(self) -> list[CashMovement]:
        """Return every cash movement visible to the current user."""

    def fetch_ledger_entries(self) -> list[LedgerEntry]:
        """Return every ledger entry visible to the current user."""


__all__ = ["FinancialRecordsRepositoryPort"]
