"""Unit tests for the composability engine.

Tests verify composite classification, decomposition and aggregation. Each
test has a single assertion and focuses on behavior.
"""

import pytest

from concatwords.core import (
    ComposabilityEngine,
    DictionaryIndex,
    Result,
    evaluate,
    find_composite_words,
)

SAMPLE = [
    "cat",
    "cats",
    "catsdogcats",
    "dog",
    "dogcatsdog",
    "hippopotamuses",
    "rat",
    "ratcatdogcat",
]


@pytest.fixture
def sample_engine() -> ComposabilityEngine:
    return ComposabilityEngine(DictionaryIndex.build(SAMPLE))


class TestIsComposite:
    """Test is_composite behavior."""

    @pytest.mark.parametrize("word", ["catsdogcats", "dogcatsdog", "ratcatdogcat"])
    def test_sample_composites_are_detected(self, sample_engine, word: str) -> None:
        """When a word is a concatenation of dictionary words, it is composite."""
        assert sample_engine.is_composite(word)

    def test_word_without_decomposition_is_not_composite(self, sample_engine) -> None:
        """When no split yields dictionary words, the word is not composite."""
        assert not sample_engine.is_composite("hippopotamuses")

    def test_cats_is_not_composite_without_s(self, sample_engine) -> None:
        """When the remainder 's' is not a word, 'cats' is not composite."""
        assert not sample_engine.is_composite("cats")

    def test_dictionary_membership_alone_is_not_composite(self, sample_engine) -> None:
        """When a word is only a dictionary entry, it is not composite."""
        assert not sample_engine.is_composite("cat")

    def test_word_outside_dictionary_can_be_classified(self, sample_engine) -> None:
        """When a candidate is not indexed but splits into words, it is composite."""
        assert sample_engine.is_composite("dogdog")

    def test_suffix_may_itself_be_composite(self) -> None:
        """When the suffix is composite rather than a word, the word is composite."""
        engine = ComposabilityEngine(DictionaryIndex.build(["ab", "cd", "ef"]))
        assert engine.is_composite("abcdef")

    def test_prefix_must_be_a_word(self) -> None:
        """When only the suffix side decomposes, the word is not composite."""
        engine = ComposabilityEngine(DictionaryIndex.build(["xyz", "abc", "def"]))
        assert not engine.is_composite("qqqabcdef")

    def test_single_letter_components_with_minimum_one(self) -> None:
        """When the shortest word has length 1, single letters are components."""
        engine = ComposabilityEngine(DictionaryIndex.build(["a", "b", "ab"]))
        assert engine.is_composite("ab")

    def test_backtracks_past_misleading_prefix(self) -> None:
        """When the first matching prefix leads nowhere, later splits are tried."""
        engine = ComposabilityEngine(DictionaryIndex.build(["ab", "abc", "cd", "de"]))
        assert engine.is_composite("abcde")

    def test_long_chain_does_not_hit_recursion_limit(self) -> None:
        """When a word is thousands of components long, classification completes."""
        engine = ComposabilityEngine(DictionaryIndex.build(["a", "b"]))
        assert engine.is_composite("ab" * 3000)

    def test_results_are_memoized(self, sample_engine) -> None:
        """When a word has been classified, its status is cached."""
        sample_engine.is_composite("ratcatdogcat")
        assert sample_engine.cache_size > 0


class TestMinimumLengthPruning:
    """Test shortest-length pruning behavior."""

    def test_words_shorter_than_twice_minimum_are_never_composite(self) -> None:
        """When shortest_length is k, no word shorter than 2k is composite."""
        words = ["abc", "bca", "abcab", "abcbc"]
        engine = ComposabilityEngine(DictionaryIndex.build(words))
        assert not any(engine.is_composite(w) for w in words)

    def test_components_shorter_than_minimum_are_not_used(self) -> None:
        """When a split would need a part shorter than the minimum, it is skipped."""
        engine = ComposabilityEngine(DictionaryIndex.build(["cat", "dog", "catdogs"]))
        assert not engine.is_composite("catdogs")

    def test_split_range_includes_both_ends(self) -> None:
        """When both parts are exactly the minimum length, the word is composite."""
        engine = ComposabilityEngine(DictionaryIndex.build(["cat", "dog"]))
        assert engine.is_composite("catdog")


class TestDecompose:
    """Test decompose behavior."""

    def test_decomposition_concatenates_to_word(self, sample_engine) -> None:
        """When a word is composite, its components join back to the word."""
        assert "".join(sample_engine.decompose("ratcatdogcat")) == "ratcatdogcat"

    def test_decomposition_uses_dictionary_words(self, sample_engine) -> None:
        """When a word is composite, every component is a dictionary word."""
        components = sample_engine.decompose("catsdogcats")
        assert all(c in sample_engine.index for c in components)

    def test_decomposition_has_at_least_two_parts(self, sample_engine) -> None:
        """When a word is composite, it decomposes into two or more parts."""
        assert len(sample_engine.decompose("dogcatsdog")) >= 2

    def test_expected_components(self, sample_engine) -> None:
        """When decomposing ratcatdogcat, yields its four words."""
        assert sample_engine.decompose("ratcatdogcat") == ["rat", "cat", "dog", "cat"]

    def test_non_composite_returns_none(self, sample_engine) -> None:
        """When a word is not composite, decompose returns None."""
        assert sample_engine.decompose("hippopotamuses") is None


class TestEvaluate:
    """Test evaluate and find_composite_words behavior."""

    def test_worked_example(self) -> None:
        """When evaluating the sample list, matches the expected result."""
        result = evaluate(DictionaryIndex.build(SAMPLE))
        assert result == Result(
            longest="ratcatdogcat", second_longest="catsdogcats", total_count=3
        )

    def test_single_word_dictionary(self) -> None:
        """When the dictionary is {'a'}, nothing is composite."""
        assert find_composite_words(["a"]) == Result(longest="", second_longest="", total_count=0)

    def test_two_letters_and_their_concatenation(self) -> None:
        """When the dictionary is {a, b, ab}, only 'ab' is composite."""
        assert find_composite_words(["a", "b", "ab"]) == Result(
            longest="ab", second_longest="", total_count=1
        )

    def test_empty_input_yields_empty_result(self) -> None:
        """When no words are supplied, the result is empty rather than an error."""
        assert find_composite_words([]) == Result()

    def test_is_idempotent(self) -> None:
        """When evaluated twice with the same engine, the results are identical."""
        engine = ComposabilityEngine(DictionaryIndex.build(SAMPLE))
        assert engine.evaluate() == engine.evaluate()

    def test_duplicate_input_gives_same_result(self) -> None:
        """When the word list repeats entries, the result is unchanged."""
        assert find_composite_words(SAMPLE + SAMPLE[::-1]) == find_composite_words(SAMPLE)

    def test_duplicate_candidates_are_counted_once(self) -> None:
        """When the candidate list repeats a word, it is classified once."""
        index = DictionaryIndex.build(SAMPLE)
        result = evaluate(index, words=["ratcatdogcat", "ratcatdogcat"])
        assert result.total_count == 1

    def test_duplicate_candidate_does_not_fill_second_slot(self) -> None:
        """When the candidate list repeats the longest word, second stays empty."""
        index = DictionaryIndex.build(SAMPLE)
        result = evaluate(index, words=["ratcatdogcat", "ratcatdogcat"])
        assert result.second_longest == ""

    def test_longest_is_never_shorter_than_second(self) -> None:
        """When two composites exist, longest is at least as long as second."""
        result = find_composite_words(SAMPLE)
        assert result.longest_length >= result.second_longest_length

    def test_ties_resolve_to_first_seen_word(self) -> None:
        """When two composites have equal length, the earlier one is longest."""
        result = find_composite_words(["dog", "cat", "dogcat", "catdog"])
        assert result.longest == "dogcat"

    def test_lexicographic_tie_break_is_order_independent(self) -> None:
        """When tie_break is lexicographic, equal-length ties resolve alphabetically."""
        result = find_composite_words(["dog", "cat", "dogcat", "catdog"], tie_break="lexicographic")
        assert result.longest == "catdog"

    def test_missing_dictionary_is_rejected(self) -> None:
        """When no dictionary index is given, evaluate raises ValueError."""
        with pytest.raises(ValueError, match="dictionary index is required"):
            evaluate(None)

    def test_every_reported_composite_has_witness(self) -> None:
        """When a word is reported, a witness split exists within the minimum bounds."""
        index = DictionaryIndex.build(SAMPLE)
        engine = ComposabilityEngine(index)
        word = engine.evaluate().longest
        m = index.shortest_length
        assert any(
            word[:p] in index and (word[p:] in index or engine.is_composite(word[p:]))
            for p in range(m, len(word) - m + 1)
        )
