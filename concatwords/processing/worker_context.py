"""Worker context for multiprocessing without global state."""

import threading
from dataclasses import dataclass

from concatwords.core import ComposabilityEngine, DictionaryIndex


@dataclass(frozen=True)
class WorkerContext:
    """Immutable context for multiprocessing workers.

    The dictionary is read-only after construction, so every worker can hold
    its own copy and build a private engine (and memo) from it.

    Attributes:
        words: Full deduplicated dictionary
        shortest_length: Minimum word length in the dictionary
    """

    words: frozenset[str]
    shortest_length: int

    @classmethod
    def from_index(cls, index: DictionaryIndex) -> "WorkerContext":
        """Create WorkerContext from a built dictionary index."""
        return cls(words=index.frozen_words(), shortest_length=index.shortest_length)

    def build_engine(self) -> ComposabilityEngine:
        return ComposabilityEngine(DictionaryIndex(self.words, self.shortest_length))


# Thread-local storage for worker context
_worker_context = threading.local()


def init_worker(context: WorkerContext) -> None:
    """Initialize worker process with context in thread-local storage.

    Args:
        context: WorkerContext to store in thread-local storage
    """
    _worker_context.value = context
    _worker_context.engine = None


def get_worker_context() -> WorkerContext:
    """Get the current worker's context from thread-local storage.

    Raises:
        RuntimeError: If called before init_worker
    """
    try:
        return _worker_context.value
    except AttributeError as e:
        raise RuntimeError("Worker context not initialized. Call init_worker first.") from e


def get_worker_engine() -> ComposabilityEngine:
    """Get this worker's engine, building it on first use.

    The engine and its memo live for the lifetime of the worker, so chunks
    handled by the same worker share cached results.
    """
    context = get_worker_context()
    engine = getattr(_worker_context, "engine", None)
    if engine is None:
        engine = context.build_engine()
        _worker_context.engine = engine
    return engine
