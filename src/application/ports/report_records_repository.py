"""Port for persisting and listing report labels."""

from typing import Protocol

from src.domain.models import (
    ReportFormat,
    ReportPeriod,
    ReportRecord,
    ReportType,
)


class ReportRecordsRepositoryPort(Protocol):
    """Port exposing report label storage."""

    def fetch_report_records(self, owner_id: int) -> list[ReportRecord]:
        """Return the owner's report labels, newest first."""

    def insert_report_record(
        self,
        report_type: ReportType,
        period: ReportPeriod,
        report_format: ReportFormat,
        owner_id: int,
    ) -> ReportRecord:
        """Persist one report label and return it with its identifier."""

    def fetch_owner_id(self, auth_id: str) -> int | None:
        """Return the store owner id linked to an identity provider id."""


__all__ = ["ReportRecordsRepositoryPort"]
