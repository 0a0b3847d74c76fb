"""Use case to view or download a persisted report label."""

from datetime import date

from src.application.ports.report_exporter import ExportPayload
from src.application.use_cases.build_report_data import (
    BuildReportDataUseCase,
)
from src.application.use_cases.export_report import ExportReportUseCase
from src.domain.models import ReportData, ReportRecord


class OpenReportUseCase:
    """Re-run aggregation for a report label on every view or download.

    Report labels never cache data: each call reads through to the record
    store with the label's period, and downloads route the fresh data into
    the exporter for the label's format.
    """

    def __init__(
        self,
        build_report_data: BuildReportDataUseCase,
        export_report: ExportReportUseCase,
    ) -> None:
        self._build_report_data = build_report_data
        self._export_report = export_report

    def view(
        self,
        record: ReportRecord,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ReportData:
        """Return freshly aggregated data for the label's period.

        Args:
            record: Persisted report label.
            start_date: First included day when the label is custom.
            end_date: Last included day when the label is custom.

        Returns:
            ReportData: Data recomputed from the live records.
        """
        return self._build_report_data.execute(
            record.period.value,
            start_date,
            end_date,
        )

    def download(
        self,
        record: ReportRecord,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ExportPayload:
        """Recompute the label's data and export it in the label's format."""
        report = self.view(record, start_date, end_date)
        return self._export_report.execute(
            report,
            record.format,
            record.period.value,
            report_type=record.type,
        )


__all__ = ["OpenReportUseCase"]
