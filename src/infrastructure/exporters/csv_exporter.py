"""Delimited-text rendering of report data.

The CSV carries the header, summary and breakdown tables only. Detail rows
are only exported in the Excel workbook.
"""

import csv
import io

from src.application.ports.report_exporter import (
    ExportContext,
    ReportExporterPort,
)
from src.domain.models import ReportData, ReportFormat
from src.infrastructure.exporters.common import (
    CATEGORY_SECTION,
    LEDGER_TYPE_SECTION,
    SUMMARY_SECTION,
    format_report_date,
    sanitize_cell_text,
    summary_rows,
)
from src.utils.decimal_utils import format_amount


class CsvReportExporter(ReportExporterPort):
    """Render reports as a single UTF-8 CSV stream."""

    format = ReportFormat.CSV
    extension = "csv"
    media_type = "text/csv"

    def render(self, report: ReportData, context: ExportContext) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")

        writer.writerow([context.title])
        writer.writerow([])
        writer.writerow(["Período", context.period_label])
        writer.writerow(["Data", format_report_date(context.generated_at)])
        writer.writerow(["Moeda", context.currency_code])
        writer.writerow([])

        writer.writerow([SUMMARY_SECTION])
        for label, amount in summary_rows(report):
            writer.writerow([label, format_amount(amount)])
        writer.writerow([])

        writer.writerow([CATEGORY_SECTION])
        writer.writerow(["Categoria", "Valor"])
        for category, amount in report.top_categories():
            writer.writerow([sanitize_cell_text(category), format_amount(amount)])
        writer.writerow([])

        writer.writerow([LEDGER_TYPE_SECTION])
        writer.writerow(["Tipo", "Valor"])
        for ledger_type, amount in report.sorted_ledger_types():
            writer.writerow(
                [sanitize_cell_text(ledger_type), format_amount(amount)]
            )

        return buffer.getvalue().encode("utf-8")


__all__ = ["CsvReportExporter"]
