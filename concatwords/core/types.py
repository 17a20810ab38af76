"""Result types shared by the engine, the pipeline and the reports."""

from dataclasses import dataclass
from typing import Iterable

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class CompositeRecord:
    """A composite word together with its position in the scan order."""

    word: str
    position: int

    @property
    def length(self) -> int:
        return len(self.word)


class TopTwo:
    """Running tracker for the two longest composite words.

    Ties on length keep the record offered first, so the outcome depends on
    scan order.
    """

    __slots__ = ("longest", "second")

    def __init__(self) -> None:
        self.longest: CompositeRecord | None = None
        self.second: CompositeRecord | None = None

    def offer(self, record: CompositeRecord) -> None:
        """Consider a newly found composite word."""
        longest_len = self.longest.length if self.longest else 0
        second_len = self.second.length if self.second else 0

        if record.length > longest_len:
            self.second = self.longest
            self.longest = record
        # Duplicate input must not fill both slots with the same word
        elif record.length > second_len and (
            self.longest is None or record.word != self.longest.word
        ):
            self.second = record

    def records(self) -> list[CompositeRecord]:
        return [r for r in (self.longest, self.second) if r is not None]


class Result(BaseModel):
    """Final output: the two longest composite words and the total count."""

    longest: str = ""
    second_longest: str = ""
    total_count: int = Field(0, ge=0)

    model_config = {"frozen": True}

    @property
    def longest_length(self) -> int:
        return len(self.longest)

    @property
    def second_longest_length(self) -> int:
        return len(self.second_longest)

    @classmethod
    def from_tracker(cls, tracker: TopTwo, total_count: int) -> "Result":
        return cls(
            longest=tracker.longest.word if tracker.longest else "",
            second_longest=tracker.second.word if tracker.second else "",
            total_count=total_count,
        )


class PartialResult(BaseModel):
    """Per-chunk output of a worker, merged by a single writer."""

    count: int = Field(0, ge=0)
    candidates: list[CompositeRecord] = Field(default_factory=list)
    classified: int = Field(0, ge=0)

    model_config = {
        "arbitrary_types_allowed": True,  # For CompositeRecord
    }


def merge_partials(partials: Iterable[PartialResult]) -> Result:
    """Reduce partial results into one Result.

    Candidates are re-offered in scan position order, which reproduces the
    tie-breaking of a sequential scan.
    """
    tracker = TopTwo()
    total = 0
    candidates: list[CompositeRecord] = []
    for partial in partials:
        total += partial.count
        candidates.extend(partial.candidates)

    for record in sorted(candidates, key=lambda r: r.position):
        tracker.offer(record)

    return Result.from_tracker(tracker, total)
