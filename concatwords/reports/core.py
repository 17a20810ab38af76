"""Report generation for the analysis pipeline."""

from datetime import datetime
from pathlib import Path

from loguru import logger

from concatwords.reports.data import ReportData
from concatwords.reports.summary import generate_summary_report


def create_report_directory(reports_path: str) -> Path:
    """Create a timestamped report directory.

    Args:
        reports_path: Base path for reports directory

    Returns:
        Path to the created report directory
    """
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    report_dir = Path(reports_path).expanduser() / timestamp
    report_dir.mkdir(parents=True, exist_ok=True)
    return report_dir


def generate_reports(data: ReportData, report_dir: Path, verbose: bool = False) -> Path:
    """Generate all reports in the given directory."""
    if verbose:
        logger.info(f"  Generating reports in: {report_dir}/")

    generate_summary_report(data, report_dir)

    return report_dir
