"""Composite word classification with multiprocessing support."""

from multiprocessing import Pool
from typing import Any

from loguru import logger
from tqdm import tqdm

from concatwords.core import (
    ComposabilityEngine,
    Config,
    DictionaryIndex,
    PartialResult,
    Result,
    merge_partials,
    scan_order,
)
from concatwords.processing.worker_context import WorkerContext, get_worker_engine, init_worker


def classify_chunk_worker(task: tuple[int, list[str]]) -> PartialResult:
    """Worker function for multiprocessing.

    Args:
        task: Tuple of (scan position of the first word, words in the chunk)

    Returns:
        PartialResult for the chunk
    """
    start, words = task
    return get_worker_engine().classify(words, start)


def make_chunks(words: list[str], chunk_size: int) -> list[tuple[int, list[str]]]:
    """Split words into (start position, chunk) tasks in scan order."""
    return [(start, words[start : start + chunk_size]) for start in range(0, len(words), chunk_size)]


def _classify_multiprocessing(
    index: DictionaryIndex, ordered: list[str], config: Config, verbose: bool
) -> Result:
    """Classify words across a pool of workers and merge their partial results."""
    if verbose:
        logger.info(f"  Using {config.jobs} parallel workers")

    context = WorkerContext.from_index(index)
    tasks = make_chunks(ordered, config.chunk_size)
    partials: list[PartialResult] = []

    with Pool(
        processes=config.jobs,
        initializer=init_worker,
        initargs=(context,),
    ) as pool:
        results = pool.imap_unordered(classify_chunk_worker, tasks)

        if verbose:
            results_wrapped_iter: Any = tqdm(
                results,
                total=len(tasks),
                desc="Classifying chunks",
                unit="chunk",
            )
        else:
            results_wrapped_iter = results

        # Single writer: only the parent process touches the aggregate
        for partial in results_wrapped_iter:
            partials.append(partial)

    return merge_partials(partials)


def _classify_single_threaded(
    engine: ComposabilityEngine, ordered: list[str], verbose: bool
) -> Result:
    """Classify words in the current process."""
    if verbose:
        words_iter: Any = tqdm(ordered, desc="Classifying words", unit="word")
    else:
        words_iter = ordered

    return merge_partials([engine.classify(words_iter)])


def classify_words(
    index: DictionaryIndex,
    config: Config,
    verbose: bool = False,
    engine: ComposabilityEngine | None = None,
) -> Result:
    """Classify every word of the index and aggregate the Result.

    Args:
        index: Dictionary index to scan
        config: Configuration object
        verbose: Whether to show progress output
        engine: Optional engine to reuse in single-threaded mode

    Returns:
        Result with the longest two composite words and the count
    """
    ordered = scan_order(index, tie_break=config.tie_break)

    if config.jobs > 1 and len(ordered) > config.chunk_size:
        return _classify_multiprocessing(index, ordered, config, verbose)

    return _classify_single_threaded(engine or ComposabilityEngine(index), ordered, verbose)
