"""concatwords - find words built entirely from shorter words of the same list.

Reports the longest and second-longest composite words of a dictionary and
how many composite words it contains.
"""

from concatwords.core import (
    ComposabilityEngine,
    Config,
    DictionaryIndex,
    Result,
    evaluate,
    find_composite_words,
    load_config,
)
from concatwords.processing import run_pipeline
from concatwords.utils.logging import setup_logger

__version__ = "0.1.0"
__all__ = [
    "ComposabilityEngine",
    "Config",
    "DictionaryIndex",
    "Result",
    "evaluate",
    "find_composite_words",
    "load_config",
    "run_pipeline",
    "setup_logger",
]
