"""Use cases for report labels: owner lookup, generation and history."""

from src.application.ports.report_records_repository import (
    ReportRecordsRepositoryPort,
)
from src.domain.errors import PersistFailedError
from src.domain.models import ReportRecord, ReportRequest
from src.infrastructure.logging.logger import get_app_logger


class ResolveOwnerUseCase:
    """Map the identity provider's user id to the store owner id."""

    def __init__(self, report_records_repository: ReportRecordsRepositoryPort):
        self._repository = report_records_repository

    def execute(self, auth_id: str | None) -> int | None:
        """Return the owner id, or None when the user is unknown."""
        if not auth_id:
            return None
        return self._repository.fetch_owner_id(auth_id)


class GenerateReportUseCase:
    """Persist a report label for an explicit "generate" action.

    Only the label is stored. Viewing or downloading it later recomputes
    the data from the live records.
    """

    def __init__(
        self,
        report_records_repository: ReportRecordsRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            report_records_repository: Port storing report labels.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = report_records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        request: ReportRequest,
        owner_id: int | None,
    ) -> ReportRecord:
        """Write one report label.

        Args:
            request: Validated type, period and format.
            owner_id: Store id of the current user.

        Returns:
            ReportRecord: Persisted label with its identifier.

        Raises:
            PersistFailedError: If the user is unknown or the write fails.
        """
        if owner_id is None:
            raise PersistFailedError(
                "Cannot save a report without an authenticated user"
            )
        record = self._repository.insert_report_record(
            request.type,
            request.period,
            request.format,
            owner_id,
        )
        self._logger.info(
            f"Report label saved: id={record.id}, type={record.type.value}, "
            f"period={record.period.value}, format={record.format.value}"
        )
        return record


class ListReportsUseCase:
    """Return the owner's report history, newest first."""

    def __init__(
        self,
        report_records_repository: ReportRecordsRepositoryPort,
        logger=None,
    ) -> None:
        self._repository = report_records_repository
        self._logger = logger or get_app_logger()

    def execute(self, owner_id: int | None) -> list[ReportRecord]:
        if owner_id is None:
            return []
        records = self._repository.fetch_report_records(owner_id)
        self._logger.info(
            f"Fetched {len(records)} report labels for owner={owner_id}"
        )
        return records


__all__ = [
    "ResolveOwnerUseCase",
    "GenerateReportUseCase",
    "ListReportsUseCase",
]
