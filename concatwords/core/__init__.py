"""Core domain logic for concatwords."""

from .config import Config, load_config
from .engine import ComposabilityEngine, TieBreak, evaluate, find_composite_words, scan_order
from .exceptions import EmptyDictionaryError, MalformedWordError
from .index import DictionaryIndex, is_valid_word
from .types import CompositeRecord, PartialResult, Result, TopTwo, merge_partials

__all__ = [
    "ComposabilityEngine",
    "CompositeRecord",
    "Config",
    "DictionaryIndex",
    "EmptyDictionaryError",
    "MalformedWordError",
    "PartialResult",
    "Result",
    "TieBreak",
    "TopTwo",
    "evaluate",
    "find_composite_words",
    "is_valid_word",
    "load_config",
    "merge_partials",
    "scan_order",
]
