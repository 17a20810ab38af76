"""Dictionary index: deduplicated word set with an O(1) membership oracle."""

from __future__ import annotations

import re
from typing import Iterable, Iterator

from loguru import logger

from .exceptions import EmptyDictionaryError, MalformedWordError

_WORD_RE = re.compile(r"[a-z]+")


def is_valid_word(word: str) -> bool:
    """Return True if word is a non-empty run of lowercase ASCII letters."""
    return _WORD_RE.fullmatch(word) is not None


class DictionaryIndex:
    """Immutable set of dictionary words.

    Words keep their first-seen order so scans over the index are
    deterministic. Membership is a plain set lookup.
    """

    __slots__ = ("_words", "_order", "_shortest_length", "rejected_count")

    def __init__(self, words: Iterable[str], shortest_length: int, rejected_count: int = 0):
        self._order = tuple(words)
        self._words = frozenset(self._order)
        self._shortest_length = shortest_length
        self.rejected_count = rejected_count

    @classmethod
    def build(cls, words: Iterable[str], strict: bool = False) -> DictionaryIndex:
        """Build an index from a sequence of words.

        Args:
            words: Words in any order, duplicates allowed
            strict: Raise on malformed words instead of skipping them

        Returns:
            New DictionaryIndex

        Raises:
            MalformedWordError: If strict and a word is not lowercase a-z
            EmptyDictionaryError: If no valid word was supplied
        """
        unique: dict[str, None] = {}
        shortest: int | None = None
        rejected = 0

        for word in words:
            if not is_valid_word(word):
                if strict:
                    raise MalformedWordError(word)
                rejected += 1
                continue
            if word in unique:
                continue
            unique[word] = None
            if shortest is None or len(word) < shortest:
                shortest = len(word)

        if rejected:
            logger.debug(f"Rejected {rejected} malformed words at ingestion")

        if shortest is None:
            raise EmptyDictionaryError("Cannot build a dictionary index from zero words")

        return cls(unique, shortest, rejected)

    @property
    def shortest_length(self) -> int:
        """Minimum word length in the dictionary."""
        return self._shortest_length

    def contains(self, candidate: str) -> bool:
        return candidate in self._words

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._words

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def sorted_words(self) -> list[str]:
        """Distinct words in lexicographic order."""
        return sorted(self._order)

    def frozen_words(self) -> frozenset[str]:
        """The underlying word set, for sharing with worker processes."""
        return self._words

    def __repr__(self) -> str:
        return f"DictionaryIndex(words={len(self)}, shortest_length={self._shortest_length})"
