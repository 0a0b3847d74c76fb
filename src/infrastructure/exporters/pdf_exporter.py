"""PDF rendering of report data with reportlab."""

from dataclasses import dataclass
import io
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import (
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from src.application.ports.report_exporter import (
    ExportContext,
    ReportExporterPort,
)
from src.domain.constants import TOP_CATEGORIES_LIMIT
from src.domain.models import ReportData, ReportFormat
from src.infrastructure.exporters.common import (
    CATEGORY_SECTION,
    LEDGER_TYPE_SECTION,
    SUMMARY_SECTION,
    format_report_date,
    summary_rows,
)
from src.utils.decimal_utils import format_amount

EMPTY_SECTION_MESSAGE = "Nenhum registro no período."


@dataclass(frozen=True)
class DocumentSection:
    """Heading and two-column rows rendered as one table."""

    heading: str
    rows: list[tuple[str, str]]


def build_document_sections(
    report: ReportData,
    top_categories: int = TOP_CATEGORIES_LIMIT,
) -> list[DocumentSection]:
    """Return the document body as plain-text sections.

    Args:
        report: Aggregated report data.
        top_categories: Number of categories listed, largest first.

    Returns:
        list[DocumentSection]: Summary, category and ledger type sections.
    """
    return [
        DocumentSection(
            heading=SUMMARY_SECTION,
            rows=[
                (label, format_amount(amount))
                for label, amount in summary_rows(report)
            ],
        ),
        DocumentSection(
            heading=CATEGORY_SECTION,
            rows=[
                (category, format_amount(amount))
                for category, amount in report.top_categories(top_categories)
            ],
        ),
        DocumentSection(
            heading=LEDGER_TYPE_SECTION,
            rows=[
                (ledger_type, format_amount(amount))
                for ledger_type, amount in report.sorted_ledger_types()
            ],
        ),
    ]


class PdfReportExporter(ReportExporterPort):
    """Render reports as A4 PDF documents.

    Tables flow through reportlab frames, so long breakdowns continue on
    new pages with their header row repeated.
    """

    format = ReportFormat.PDF
    extension = "pdf"
    media_type = "application/pdf"

    def __init__(self, top_categories: int = TOP_CATEGORIES_LIMIT) -> None:
        self._top_categories = top_categories

    def render(self, report: ReportData, context: ExportContext) -> bytes:
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=2 * cm,
            rightMargin=2 * cm,
            topMargin=2 * cm,
            bottomMargin=2 * cm,
            title=context.title,
        )
        styles = getSampleStyleSheet()
        title_style = ParagraphStyle(
            "ReportTitle",
            parent=styles["Title"],
            alignment=TA_CENTER,
        )

        elements = [
            Paragraph(escape(context.title), title_style),
            Paragraph(
                f"Período: {escape(context.period_label)}",
                styles["Normal"],
            ),
            Paragraph(
                f"Data: {format_report_date(context.generated_at)}",
                styles["Normal"],
            ),
            Paragraph(f"Moeda: {escape(context.currency_code)}", styles["Normal"]),
            Spacer(1, 0.6 * cm),
        ]
        for section in build_document_sections(report, self._top_categories):
            elements.append(Paragraph(escape(section.heading), styles["Heading2"]))
            if section.rows:
                elements.append(self._build_table(section.rows))
            else:
                elements.append(
                    Paragraph(EMPTY_SECTION_MESSAGE, styles["Italic"])
                )
            elements.append(Spacer(1, 0.4 * cm))

        doc.build(elements)
        return buffer.getvalue()

    @staticmethod
    def _build_table(rows: list[tuple[str, str]]) -> Table:
        table = Table(
            [("Descrição", "Valor"), *rows],
            colWidths=[11 * cm, 5 * cm],
            repeatRows=1,
        )
        table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#1b9aaa")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("ALIGN", (1, 0), (1, -1), "RIGHT"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#f2f4f7")],
                    ),
                    ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ]
            )
        )
        return table


__all__ = [
    "DocumentSection",
    "EMPTY_SECTION_MESSAGE",
    "PdfReportExporter",
    "build_document_sections",
]
