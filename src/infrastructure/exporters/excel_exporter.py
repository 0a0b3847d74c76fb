"""Excel rendering of report data with openpyxl."""

import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from src.application.ports.report_exporter import (
    ExportContext,
    ReportExporterPort,
)
from src.domain.models import ReportData, ReportFormat
from src.infrastructure.exporters.common import (
    DETAIL_HEADERS,
    MISSING_VALUE,
    MOVEMENT_TYPE_LABELS,
    format_report_date,
    summary_rows,
)
from src.utils.decimal_utils import quantize_cents

AMOUNT_FORMAT = "#,##0.00"
DATE_FORMAT = "DD/MM/YYYY"

SUMMARY_SHEET = "Resumo"
CATEGORIES_SHEET = "Categorias"
LEDGER_TYPES_SHEET = "Tipos de Dívidas"
CASH_MOVEMENTS_SHEET = "Movimentações"
LEDGER_ENTRIES_SHEET = "Lançamentos"

_HEADER_FONT = Font(bold=True, color="FFFFFF")
_HEADER_FILL = PatternFill(
    start_color="1B9AAA",
    end_color="1B9AAA",
    fill_type="solid",
)


class ExcelReportExporter(ReportExporterPort):
    """Render reports as five-sheet workbooks."""

    format = ReportFormat.EXCEL
    extension = "xlsx"
    media_type = (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )

    def render(self, report: ReportData, context: ExportContext) -> bytes:
        wb = Workbook()
        summary_ws = wb.active
        summary_ws.title = SUMMARY_SHEET
        self._write_summary_sheet(summary_ws, report, context)
        self._write_totals_sheet(
            wb.create_sheet(CATEGORIES_SHEET),
            ("Categoria", "Valor"),
            report.top_categories(),
        )
        self._write_totals_sheet(
            wb.create_sheet(LEDGER_TYPES_SHEET),
            ("Tipo", "Valor"),
            report.sorted_ledger_types(),
        )
        self._write_detail_sheet(
            wb.create_sheet(CASH_MOVEMENTS_SHEET),
            [
                (
                    movement.date,
                    MOVEMENT_TYPE_LABELS[movement.type],
                    movement.category,
                    movement.description,
                    movement.amount,
                )
                for movement in report.cash_movements
            ],
        )
        self._write_detail_sheet(
            wb.create_sheet(LEDGER_ENTRIES_SHEET),
            [
                (
                    entry.date,
                    entry.type,
                    entry.category,
                    entry.description,
                    entry.amount,
                )
                for entry in report.ledger_entries
            ],
        )

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    def _write_summary_sheet(
        self,
        ws: Worksheet,
        report: ReportData,
        context: ExportContext,
    ) -> None:
        ws.append([context.title])
        ws["A1"].font = Font(bold=True, size=14)
        ws.append([])
        ws.append(["Período", context.period_label])
        ws.append(["Data", format_report_date(context.generated_at)])
        ws.append(["Moeda", context.currency_code])
        ws.append([])
        for label, amount in summary_rows(report):
            ws.append([label, quantize_cents(amount)])
            ws.cell(row=ws.max_row, column=2).number_format = AMOUNT_FORMAT
        self._autosize(ws)

    def _write_totals_sheet(
        self,
        ws: Worksheet,
        headers: tuple[str, str],
        totals: list,
    ) -> None:
        self._write_header(ws, headers)
        for key, amount in totals:
            self._append_row(ws, [key, quantize_cents(amount)])
            ws.cell(row=ws.max_row, column=2).number_format = AMOUNT_FORMAT
        self._autosize(ws)

    def _write_detail_sheet(self, ws: Worksheet, rows: list[tuple]) -> None:
        self._write_header(ws, DETAIL_HEADERS)
        for record_date, kind, category, description, amount in rows:
            self._append_row(
                ws,
                [
                    record_date,
                    kind,
                    category or MISSING_VALUE,
                    description or MISSING_VALUE,
                    quantize_cents(amount),
                ],
            )
            ws.cell(row=ws.max_row, column=1).number_format = DATE_FORMAT
            ws.cell(row=ws.max_row, column=5).number_format = AMOUNT_FORMAT
        ws.freeze_panes = "A2"
        self._autosize(ws)

    @staticmethod
    def _append_row(ws: Worksheet, values: list) -> None:
        """Append a row keeping record text literal.

        openpyxl stores strings starting with ``=`` as formulas; such cells
        are forced back to text so names round-trip unchanged.
        """
        ws.append(values)
        for cell in ws[ws.max_row]:
            if cell.data_type == "f":
                cell.data_type = "s"

    @staticmethod
    def _write_header(ws: Worksheet, headers) -> None:
        ws.append(list(headers))
        for cell in ws[1]:
            cell.font = _HEADER_FONT
            cell.fill = _HEADER_FILL
            cell.alignment = Alignment(horizontal="center")

    @staticmethod
    def _autosize(ws: Worksheet) -> None:
        for index, column in enumerate(ws.iter_cols(), start=1):
            width = max(
                (len(str(cell.value)) for cell in column if cell.value is not None),
                default=8,
            )
            ws.column_dimensions[get_column_letter(index)].width = min(
                max(width + 2, 10),
                60,
            )


__all__ = [
    "ExcelReportExporter",
    "SUMMARY_SHEET",
    "CATEGORIES_SHEET",
    "LEDGER_TYPES_SHEET",
    "CASH_MOVEMENTS_SHEET",
    "LEDGER_ENTRIES_SHEET",
]
