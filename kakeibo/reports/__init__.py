"""Report generation for Kakeibo."""

from kakeibo.reports.csv_export import CsvExporter
from kakeibo.reports.summary import SummaryReportGenerator

__all__ = ["CsvExporter", "SummaryReportGenerator"]
