"""SQLAlchemy-backed repository for cash movements and ledger entries."""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.records_repository import (
    FinancialRecordsRepositoryPort,
)
from src.domain.errors import FetchFailedError
from src.domain.models import CashMovement, LedgerEntry
from src.domain.services.records import (
    parse_cash_movement,
    parse_ledger_entry,
)
from src.infrastructure.logging.logger import get_app_logger

SELECT_CASH_MOVEMENTS_SQL = text(
    """
    SELECT id_movimentacao AS id,
           data AS date,
           tipo AS type,
           categoria AS category,
           descricao AS description,
           valor AS amount
    FROM movimentacao_caixa
    """
)

SELECT_LEDGER_ENTRIES_SQL = text(
    """
    SELECT id_lancamento AS id,
           data AS date,
           tipo AS type,
           categoria AS category,
           descricao AS description,
           valor AS amount
    FROM lancamento
    """
)


class SqlAlchemyFinancialRecordsRepository(FinancialRecordsRepositoryPort):
    """Repository reading report source records from the record store.

    Rows are returned unfiltered; row visibility per user is enforced by the
    store itself.
    """

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the record store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_cash_movements(self) -> list[CashMovement]:
        rows = self._fetch_rows(SELECT_CASH_MOVEMENTS_SQL, "cash movements")
        movements = []
        for row in rows:
            movement = parse_cash_movement(
                id=row.id,
                date=row.date,
                type=row.type,
                category=row.category,
                description=row.description,
                amount=row.amount,
                logger=self._logger,
            )
            if movement is not None:
                movements.append(movement)
        return movements

    def fetch_ledger_entries(self) -> list[LedgerEntry]:
        rows = self._fetch_rows(SELECT_LEDGER_ENTRIES_SQL, "ledger entries")
        return [
            parse_ledger_entry(
                id=row.id,
                date=row.date,
                type=row.type,
                category=row.category,
                description=row.description,
                amount=row.amount,
            )
            for row in rows
        ]

    def _fetch_rows(self, query, label: str):
        try:
            engine = self._db_port.get_engine()
            with engine.connect() as conn:
                return conn.execute(query).all()
        except SQLAlchemyError as exc:
            self._logger.error(f"Failed to read {label}: {exc}")
            raise FetchFailedError(f"Could not load {label}") from exc


__all__ = ["SqlAlchemyFinancialRecordsRepository"]
