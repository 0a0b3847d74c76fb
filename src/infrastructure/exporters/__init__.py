"""Report exporters package."""

from .csv_exporter import CsvReportExporter
from .excel_exporter import ExcelReportExporter
from .pdf_exporter import PdfReportExporter

__all__ = ["CsvReportExporter", "ExcelReportExporter", "PdfReportExporter"]
