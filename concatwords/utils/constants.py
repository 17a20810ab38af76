"""Shared constants for concatwords."""


class Constants:
    """Project-wide constant values."""

    # Words handed to a worker per task in parallel mode
    DEFAULT_CHUNK_SIZE = 5000

    # english-words lists used as the built-in dictionary
    ENGLISH_WORDS_SOURCES = ("web2",)

    # Worked example word list for --test
    SAMPLE_WORDS = (
        "cat",
        "cats",
        "catsdogcats",
        "dog",
        "dogcatsdog",
        "hippopotamuses",
        "rat",
        "ratcatdogcat",
    )

    BANNER_WIDTH = 60
    REPORT_WIDTH = 80
