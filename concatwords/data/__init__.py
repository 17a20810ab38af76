"""Word sources for concatwords."""

from concatwords.data.word_list import load_english_words, load_word_list, read_words, sample_words

__all__ = [
    "load_english_words",
    "load_word_list",
    "read_words",
    "sample_words",
]
