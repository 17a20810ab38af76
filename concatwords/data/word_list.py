"""Word list loading from files, streams and the english-words package."""

from typing import TextIO

from english_words import get_english_words_set  # type: ignore[import-untyped]
from loguru import logger

from concatwords.utils import Constants, expand_file_path


def read_words(stream: TextIO) -> list[str]:
    """Read whitespace-separated words from an open text stream."""
    words: list[str] = []
    for line in stream:
        words.extend(line.split())
    return words


def load_word_list(filepath: str | None, verbose: bool = False) -> list[str]:
    """Load a word list from file, one or more words per line."""
    if not filepath:
        return []

    filepath = expand_file_path(filepath)
    if not filepath:
        return []

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            words = read_words(f)
    except FileNotFoundError:
        logger.error(f"✗ Word list file not found: {filepath}")
        logger.error("  Please check the file path and try again")
        raise
    except PermissionError:
        logger.error(f"✗ Permission denied reading file: {filepath}")
        logger.error("  Please check file permissions and try again")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"✗ Encoding error reading {filepath}: {e}")
        logger.error("  Please ensure the file is UTF-8 encoded")
        raise

    if verbose:
        logger.info(f"  Loaded {len(words)} words from {filepath}")

    return words


def load_english_words(verbose: bool = False) -> list[str]:
    """Load the english-words dictionary as a sorted word list."""
    if verbose:
        logger.info("  Loading English words dictionary...")

    try:
        words: set[str] = get_english_words_set(
            list(Constants.ENGLISH_WORDS_SOURCES), lower=True, alpha=True
        )
    except Exception as e:
        logger.error(f"✗ Failed to load English words dictionary: {e}")
        logger.error("  This may indicate a problem with the 'english-words' package")
        logger.error("  Try reinstalling: pip install english-words")
        raise RuntimeError("Failed to load english-words dictionary") from e

    if verbose:
        logger.info(f"  Loaded {len(words)} words from english-words")

    # Sorted so scan order matches a sorted word file
    return sorted(words)


def sample_words() -> list[str]:
    """The worked example word list."""
    return list(Constants.SAMPLE_WORDS)
