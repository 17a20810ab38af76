"""Composability engine: decides which dictionary words are composite.

A word is composite when it splits into a prefix that is a dictionary word
and a suffix that is either a dictionary word or itself composite. Every
component must be at least ``shortest_length`` characters, so a word shorter
than twice that can never be composite and split points are limited to
``[m, len(word) - m]``.
"""

from __future__ import annotations

from typing import Iterable, Literal

from loguru import logger

from .exceptions import EmptyDictionaryError
from .index import DictionaryIndex
from .types import CompositeRecord, PartialResult, Result, TopTwo, merge_partials

TieBreak = Literal["scan", "lexicographic"]


class ComposabilityEngine:
    """Classifies words against a fixed dictionary index.

    Composite status depends only on the word and the dictionary, so results
    are memoized per engine and shared across all words it classifies.
    """

    def __init__(self, index: DictionaryIndex):
        self.index = index
        self._memo: dict[str, bool] = {}

    @property
    def cache_size(self) -> int:
        return len(self._memo)

    def is_composite(self, word: str) -> bool:
        """Return True if word splits fully into at least two shorter dictionary words.

        The recursion over suffixes runs on an explicit stack. A frame whose
        suffix has no memoized status yet pushes that suffix and retries the
        same split point once the suffix is resolved.
        """
        m = self.index.shortest_length
        if len(word) < 2 * m:
            return False

        memo = self._memo
        cached = memo.get(word)
        if cached is not None:
            return cached

        index = self.index
        stack: list[list] = [[word, m]]

        while stack:
            frame = stack[-1]
            candidate, split = frame
            last_split = len(candidate) - m
            status = False
            descended = False

            while split <= last_split:
                if candidate[:split] in index:
                    suffix = candidate[split:]
                    if suffix in index:
                        status = True
                        break
                    if len(suffix) >= 2 * m:
                        suffix_status = memo.get(suffix)
                        if suffix_status is None:
                            frame[1] = split
                            stack.append([suffix, m])
                            descended = True
                            break
                        if suffix_status:
                            status = True
                            break
                split += 1

            if descended:
                continue

            memo[candidate] = status
            stack.pop()

        return memo[word]

    def decompose(self, word: str) -> list[str] | None:
        """Return one decomposition of word into dictionary words, or None.

        The witness follows the first valid split point at every step, so
        each component is a dictionary word and they concatenate to word.
        """
        if not self.is_composite(word):
            return None

        m = self.index.shortest_length
        components: list[str] = []
        rest = word
        while True:
            for split in range(m, len(rest) - m + 1):
                prefix, suffix = rest[:split], rest[split:]
                if prefix not in self.index:
                    continue
                if suffix in self.index:
                    components.extend((prefix, suffix))
                    return components
                if self.is_composite(suffix):
                    components.append(prefix)
                    rest = suffix
                    break
            else:
                # Unreachable for a word already classified composite
                raise RuntimeError(f"No split found for composite word {word!r}")

    def classify(self, words: Iterable[str], start: int = 0) -> PartialResult:
        """Classify a run of words whose first element sits at scan position start."""
        tracker = TopTwo()
        count = 0
        classified = 0
        for position, word in enumerate(words, start):
            classified += 1
            if self.is_composite(word):
                count += 1
                tracker.offer(CompositeRecord(word, position))
        return PartialResult(count=count, candidates=tracker.records(), classified=classified)

    def evaluate(
        self, words: Iterable[str] | None = None, tie_break: TieBreak = "scan"
    ) -> Result:
        """Classify every distinct word once and aggregate the Result.

        Args:
            words: Words to classify (default: every word in the index)
            tie_break: "scan" keeps scan order, "lexicographic" sorts first

        Returns:
            Result with the longest, second longest and count of composites
        """
        return evaluate(self.index, words, tie_break, engine=self)


def scan_order(
    index: DictionaryIndex, words: Iterable[str] | None = None, tie_break: TieBreak = "scan"
) -> list[str]:
    """Distinct words in the order they will be classified."""
    if words is None:
        ordered = list(index)
    else:
        ordered = list(dict.fromkeys(words))
    if tie_break == "lexicographic":
        ordered.sort()
    return ordered


def evaluate(
    dictionary: DictionaryIndex,
    words: Iterable[str] | None = None,
    tie_break: TieBreak = "scan",
    engine: ComposabilityEngine | None = None,
) -> Result:
    """Find composite words and return the longest two and the total count."""
    if dictionary is None:
        raise ValueError("A dictionary index is required")

    engine = engine or ComposabilityEngine(dictionary)
    ordered = scan_order(dictionary, words, tie_break)
    partial = engine.classify(ordered)

    logger.debug(
        f"Classified {partial.classified} words, {partial.count} composite, "
        f"{engine.cache_size} memo entries"
    )
    return merge_partials([partial])


def find_composite_words(
    words: Iterable[str], tie_break: TieBreak = "scan", strict: bool = False
) -> Result:
    """Build an index from words and evaluate it.

    An empty word list (or one with no valid words) is not an error and
    yields an empty Result.
    """
    try:
        index = DictionaryIndex.build(words, strict=strict)
    except EmptyDictionaryError:
        logger.debug("Empty dictionary, no composite words possible")
        return Result()
    return evaluate(index, tie_break=tie_break)
