"""Report generation for concatwords."""

from .core import create_report_directory, generate_reports
from .data import ReportData
from .helpers import format_time, write_report_header

__all__ = [
    "ReportData",
    "create_report_directory",
    "format_time",
    "generate_reports",
    "write_report_header",
]
