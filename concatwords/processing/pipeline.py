"""Main processing pipeline orchestration."""

from pathlib import Path
import sys
import time
from typing import Callable, TextIO

from loguru import logger

from concatwords.core import ComposabilityEngine, Config, DictionaryIndex, EmptyDictionaryError
from concatwords.data import load_english_words, load_word_list, read_words, sample_words
from concatwords.output import write_result
from concatwords.processing.classification import classify_words
from concatwords.processing.data_models import AnalysisResult
from concatwords.reports import ReportData, create_report_directory, format_time, generate_reports
from concatwords.utils import add_log_file_handler

WordSource = tuple[str, Callable[[], list[str]]]


def resolve_sources(config: Config, stdin: TextIO | None = None) -> list[WordSource]:
    """List the word sources for this run as (name, loader) pairs."""
    verbose = config.verbose
    if config.test:
        return [("sample", sample_words)]
    if config.english_words:
        return [("english-words", lambda: load_english_words(verbose))]
    if config.inputs:
        return [(path, lambda path=path: load_word_list(path, verbose)) for path in config.inputs]

    stream = stdin if stdin is not None else sys.stdin
    return [("<stdin>", lambda: read_words(stream))]


def _build_index(words: list[str], config: Config) -> DictionaryIndex | None:
    try:
        return DictionaryIndex.build(words, strict=config.strict)
    except EmptyDictionaryError:
        logger.warning("  No valid words supplied, nothing to analyze")
        return None


def analyze_words(words: list[str], config: Config, source: str = "<words>") -> AnalysisResult:
    """Run index building and classification over one word list.

    Args:
        words: Words as supplied by the source, duplicates allowed
        config: Configuration object
        source: Name of the word source, for logs and reports

    Returns:
        AnalysisResult for the source
    """
    start_time = time.time()
    verbose = config.verbose
    stage_times: dict[str, float] = {}

    # Stage 1: Build dictionary index
    stage_start = time.time()
    index = _build_index(words, config)
    stage_times["Building dictionary index"] = time.time() - stage_start

    if index is None:
        return AnalysisResult(
            source=source,
            words_loaded=len(words),
            rejected_count=len(words),
            stage_times=stage_times,
            elapsed_time=time.time() - start_time,
        )

    if verbose:
        logger.info(f"  Dictionary: {len(index)} distinct words, shortest {index.shortest_length}")
        if index.rejected_count:
            logger.info(f"  Skipped {index.rejected_count} words with invalid characters")

    # Stage 2: Classify every word
    stage_start = time.time()
    engine = ComposabilityEngine(index)
    result = classify_words(index, config, verbose, engine=engine)
    stage_times["Classifying words"] = time.time() - stage_start

    # Stage 3: Witness decompositions for the reported words
    decompositions: dict[str, list[str]] = {}
    if config.show_components or config.reports:
        stage_start = time.time()
        for word in (result.longest, result.second_longest):
            components = engine.decompose(word) if word else None
            if components:
                decompositions[word] = components
        stage_times["Decomposing results"] = time.time() - stage_start

    elapsed_time = time.time() - start_time
    if verbose:
        logger.info(f"  Found {result.total_count} composite words in {format_time(elapsed_time)}")

    return AnalysisResult(
        source=source,
        words_loaded=len(words),
        dictionary_size=len(index),
        rejected_count=index.rejected_count,
        shortest_length=index.shortest_length,
        result=result,
        decompositions=decompositions,
        stage_times=stage_times,
        elapsed_time=elapsed_time,
    )


def _setup_reporting(config: Config, start_time: float) -> tuple[ReportData | None, Path | None]:
    """Set up reporting infrastructure if enabled."""
    if not config.reports:
        return None, None

    report_data = ReportData(start_time=start_time)
    report_dir = create_report_directory(config.reports)

    # Directory name starts with the timestamp: YYYY-MM-DD_HH-MM-SS
    timestamp = report_dir.name[:19]
    log_file = report_dir / f"concatwords-{timestamp}.log"
    add_log_file_handler(log_file, verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info(f"Logs will be saved to: {log_file}")
        logger.info("")

    return report_data, report_dir


def run_pipeline(
    config: Config, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> list[AnalysisResult]:
    """Analyze every configured word source and print one result per source.

    Args:
        config: Configuration object containing all settings
        stdin: Stream read when no file is configured (default: sys.stdin)
        stdout: Stream results are written to (default: sys.stdout)

    Returns:
        One AnalysisResult per word source, in order
    """
    start_time = time.time()
    verbose = config.verbose
    out = stdout if stdout is not None else sys.stdout

    report_data, report_dir = _setup_reporting(config, start_time)

    analyses: list[AnalysisResult] = []
    for source, loader in resolve_sources(config, stdin):
        if verbose:
            logger.info(f"Source: {source}")

        load_start = time.time()
        words = loader()
        load_time = time.time() - load_start

        analysis = analyze_words(words, config, source)
        analysis.stage_times = {"Loading words": load_time, **analysis.stage_times}
        analyses.append(analysis)

        write_result(
            analysis.result,
            out,
            analysis.decompositions if config.show_components else None,
        )

    if report_data is not None and report_dir is not None:
        report_data.analyses.extend(analyses)
        generate_reports(report_data, report_dir, verbose)

    if verbose:
        logger.info(f"Total processing time: {format_time(time.time() - start_time)}")

    return analyses
