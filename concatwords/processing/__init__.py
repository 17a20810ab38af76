"""Processing pipeline for concatwords."""

from .classification import classify_words
from .data_models import AnalysisResult, StageResult
from .pipeline import analyze_words, resolve_sources, run_pipeline

__all__ = [
    "AnalysisResult",
    "StageResult",
    "analyze_words",
    "classify_words",
    "resolve_sources",
    "run_pipeline",
]
