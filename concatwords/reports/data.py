"""Report data models."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from concatwords.processing.data_models import AnalysisResult


@dataclass
class ReportData:
    """Collects data throughout the pipeline for reporting."""

    start_time: float = 0.0
    analyses: list["AnalysisResult"] = field(default_factory=list)
