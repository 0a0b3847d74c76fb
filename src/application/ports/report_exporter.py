"""Port for rendering report data into downloadable files."""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from src.domain.models import ReportData, ReportFormat


@dataclass(frozen=True)
class ExportContext:
    """Presentation details shared by every export format.

    Attributes:
        period_label: Header label of the selected period.
        generated_at: Timestamp printed in the header and filename.
        title: Document title.
        currency_code: Currency of every amount.
    """

    period_label: str
    generated_at: datetime
    title: str = "Relatório Financeiro"
    currency_code: str = "BRL"


@dataclass(frozen=True)
class ExportPayload:
    """Rendered file ready for the download sink."""

    filename: str
    content: bytes
    media_type: str


class ReportExporterPort(Protocol):
    """Port rendering ReportData into bytes for one format."""

    format: ReportFormat
    extension: str
    media_type: str

    def render(self, report: ReportData, context: ExportContext) -> bytes:
        """Return the encoded file content."""


__all__ = ["ExportContext", "ExportPayload", "ReportExporterPort"]
