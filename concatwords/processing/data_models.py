"""Data models for passing information between pipeline stages."""

from pydantic import BaseModel, Field

from concatwords.core import Result


class StageResult(BaseModel):
    """Base class for stage results with timing."""

    elapsed_time: float = Field(0.0, ge=0)


class AnalysisResult(StageResult):
    """Outcome of analyzing one word source."""

    source: str
    words_loaded: int = Field(0, ge=0)
    dictionary_size: int = Field(0, ge=0)
    rejected_count: int = Field(0, ge=0)
    shortest_length: int = Field(0, ge=0)
    result: Result = Field(default_factory=Result)
    decompositions: dict[str, list[str]] = Field(default_factory=dict)
    stage_times: dict[str, float] = Field(default_factory=dict)
