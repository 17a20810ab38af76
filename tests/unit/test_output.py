"""Unit tests for console output formatting."""

import io

from concatwords.core import Result
from concatwords.output import format_result, write_result

RESULT = Result(longest="ratcatdogcat", second_longest="catsdogcats", total_count=3)


class TestFormatResult:
    """Test format_result behavior."""

    def test_formats_three_result_lines(self) -> None:
        """When formatting a result, prints longest, second longest and count."""
        assert format_result(RESULT) == [
            "longest word ratcatdogcat length 12",
            "second longest word catsdogcats length 11",
            "count 3",
        ]

    def test_empty_result_reports_zero_lengths(self) -> None:
        """When nothing is composite, lengths are zero."""
        assert format_result(Result())[0] == "longest word  length 0"

    def test_appends_components_when_given(self) -> None:
        """When decompositions are supplied, component lines follow."""
        lines = format_result(RESULT, {"ratcatdogcat": ["rat", "cat", "dog", "cat"]})
        assert lines[-1] == "  ratcatdogcat = rat + cat + dog + cat"


class TestWriteResult:
    """Test write_result behavior."""

    def test_writes_newline_terminated_lines(self) -> None:
        """When writing to a stream, each line ends with a newline."""
        stream = io.StringIO()
        write_result(RESULT, stream)
        assert stream.getvalue().endswith("count 3\n")
