"""Exceptions raised by the concatwords core."""


class EmptyDictionaryError(ValueError):
    """Raised when a dictionary index is built from no valid words."""


class MalformedWordError(ValueError):
    """Raised in strict mode when a word contains characters outside a-z."""

    def __init__(self, word: str):
        super().__init__(f"Malformed word {word!r}: only lowercase a-z allowed")
        self.word = word
