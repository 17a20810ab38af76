"""Console presentation of analysis results."""

from typing import TextIO

from concatwords.core import Result


def format_result(result: Result, decompositions: dict[str, list[str]] | None = None) -> list[str]:
    """Format a Result as the lines printed for one word source.

    Args:
        result: Result to format
        decompositions: Optional components for the reported words

    Returns:
        Output lines without trailing newlines
    """
    lines = [
        f"longest word {result.longest} length {result.longest_length}",
        f"second longest word {result.second_longest} length {result.second_longest_length}",
        f"count {result.total_count}",
    ]

    if decompositions:
        for word in (result.longest, result.second_longest):
            components = decompositions.get(word)
            if components:
                lines.append(f"  {word} = {' + '.join(components)}")

    return lines


def write_result(
    result: Result, stream: TextIO, decompositions: dict[str, list[str]] | None = None
) -> None:
    for line in format_result(result, decompositions):
        stream.write(line + "\n")
