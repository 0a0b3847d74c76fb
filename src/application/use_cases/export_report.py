"""Use case to render report data into a downloadable file."""

from collections.abc import Iterable
from datetime import datetime

from src.application.ports.clock import ClockPort
from src.application.ports.report_exporter import (
    ExportContext,
    ExportPayload,
    ReportExporterPort,
)
from src.domain.errors import NotReadyError, UnsupportedFormatError
from src.domain.models import ReportData, ReportFormat, ReportType
from src.domain.services.periods import period_label
from src.infrastructure.logging.logger import get_app_logger


def build_export_filename(
    period: str,
    generated_at: datetime,
    extension: str,
) -> str:
    """Return ``relatorio-<period>-<epoch millis>.<ext>``."""
    key = getattr(period, "value", period)
    timestamp = int(generated_at.timestamp() * 1000)
    return f"relatorio-{key}-{timestamp}.{extension}"


class ExportReportUseCase:
    """Route report data to the exporter registered for a format."""

    def __init__(
        self,
        exporters: Iterable[ReportExporterPort],
        clock: ClockPort,
        currency_code: str = "BRL",
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            exporters: One exporter per supported format.
            clock: Port providing the generation timestamp.
            currency_code: Currency printed in exported files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._exporters = {exporter.format: exporter for exporter in exporters}
        self._clock = clock
        self._currency_code = currency_code
        self._logger = logger or get_app_logger()

    @property
    def formats(self) -> list[ReportFormat]:
        """Return the formats with a registered exporter."""
        return list(self._exporters)

    def execute(
        self,
        report: ReportData | None,
        report_format: ReportFormat,
        period: str,
        report_type: ReportType = ReportType.FINANCIAL,
    ) -> ExportPayload:
        """Render the report in the requested format.

        Args:
            report: Aggregated data, or None when not computed yet.
            report_format: Target file format.
            period: Period selector the data was computed for.
            report_type: Report label type, used for the title.

        Returns:
            ExportPayload: File name, bytes and media type.

        Raises:
            NotReadyError: If ``report`` is None; no bytes are produced.
            UnsupportedFormatError: If no exporter handles the format.
        """
        if report is None:
            raise NotReadyError(
                "Report data has not been computed for the current parameters"
            )
        exporter = self._exporters.get(report_format)
        if exporter is None:
            raise UnsupportedFormatError(
                f"Unsupported report format: {report_format!r}"
            )

        generated_at = self._clock.now()
        context = ExportContext(
            period_label=period_label(period),
            generated_at=generated_at,
            title=report_type.title,
            currency_code=self._currency_code,
        )
        content = exporter.render(report, context)
        filename = build_export_filename(
            period,
            generated_at,
            exporter.extension,
        )
        self._logger.info(
            f"Exported {filename} ({len(content)} bytes)"
        )
        return ExportPayload(
            filename=filename,
            content=content,
            media_type=exporter.media_type,
        )


__all__ = ["ExportReportUseCase", "build_export_filename"]
