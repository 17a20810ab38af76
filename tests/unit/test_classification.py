"""Unit tests for the classification stage."""

import pytest

from concatwords.core import Config, DictionaryIndex, Result, evaluate
from concatwords.processing.classification import classify_words, make_chunks

WORDS = [
    "cat",
    "cats",
    "catsdogcats",
    "dog",
    "dogcatsdog",
    "hippopotamuses",
    "rat",
    "ratcatdogcat",
    "ratdog",
    "dograt",
    "catcat",
]


class TestMakeChunks:
    """Test make_chunks behavior."""

    def test_chunks_carry_scan_positions(self) -> None:
        """When words are chunked, each chunk starts at its scan position."""
        chunks = make_chunks(["a", "b", "c", "d", "e"], 2)
        assert [start for start, _ in chunks] == [0, 2, 4]

    def test_chunks_cover_every_word_once(self) -> None:
        """When words are chunked, concatenating the chunks gives back the words."""
        words = ["a", "b", "c", "d", "e"]
        chunks = make_chunks(words, 2)
        assert [w for _, chunk in chunks for w in chunk] == words


class TestClassifyWords:
    """Test classify_words behavior."""

    def test_single_threaded_matches_evaluate(self) -> None:
        """When run with one job, the result equals a direct evaluation."""
        index = DictionaryIndex.build(WORDS)
        assert classify_words(index, Config(jobs=1)) == evaluate(index)

    def test_verbose_mode_gives_same_result(self) -> None:
        """When progress output is on, the result is unchanged."""
        index = DictionaryIndex.build(WORDS)
        assert classify_words(index, Config(jobs=1), verbose=True) == evaluate(index)

    @pytest.mark.slow
    def test_parallel_matches_sequential(self) -> None:
        """When split across workers, the result equals the sequential scan."""
        index = DictionaryIndex.build(WORDS)
        config = Config(jobs=2, chunk_size=2)
        assert classify_words(index, config) == evaluate(index)

    @pytest.mark.slow
    def test_parallel_keeps_first_seen_ties(self) -> None:
        """When equal-length composites land in different chunks, the first seen wins."""
        index = DictionaryIndex.build(["rat", "dog", "ratdog", "dograt", "ratrat"])
        config = Config(jobs=2, chunk_size=1)
        assert classify_words(index, config) == Result(
            longest="ratdog", second_longest="dograt", total_count=3
        )
