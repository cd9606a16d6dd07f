"""
Unit tests for the GNU time line parser.
"""

import pytest

from scrapermetrics.parsing.line_parser import LINE_PATTERNS, parse_duration, parse_line


class TestParseLine:
    """Test cases for parse_line."""

    @pytest.mark.parametrize(
        "line",
        [
            'Command being timed: "ls"',
            "Percent of CPU this job got: 0%",
            "Exit status: 0",
            "Something to be ignored",
            "",
            "   ",
        ],
    )
    def test_unrecognised_lines(self, line):
        """Lines without a recognised label produce nothing."""
        assert parse_line(line) is None

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("User time (seconds): 1.34", ("utime", 1.34)),
            ("System time (seconds): 24.45", ("stime", 24.45)),
            ("Maximum resident set size (kbytes): 3808", ("maxrss", 3808)),
            ("Minor (reclaiming a frame) page faults: 312", ("minflt", 312)),
            ("Major (requiring I/O) page faults: 2", ("majflt", 2)),
            ("File system inputs: 480", ("inblock", 480)),
            ("File system outputs: 23", ("oublock", 23)),
            ("Voluntary context switches: 43", ("nvcsw", 43)),
            ("Involuntary context switches: 65", ("nivcsw", 65)),
            ("Page size (bytes): 4096", ("page_size", 4096)),
        ],
    )
    def test_recognised_labels(self, line, expected):
        """Each recognised label maps to its field and typed value."""
        assert parse_line(line) == expected

    def test_integer_fields_are_ints(self):
        """Count fields are returned as int, not float."""
        field, value = parse_line("Voluntary context switches: 43")
        assert isinstance(value, int)

    @pytest.mark.parametrize(
        "duration, seconds",
        [("0:00.00", 0.0), ("2:02.04", 122.04), ("1:02:02.04", 3722.04)],
    )
    def test_wall_clock_time(self, duration, seconds):
        """Elapsed time is converted to seconds."""
        field, value = parse_line(f"Elapsed (wall clock) time (h:mm:ss or m:ss): {duration}")
        assert field == "wall_time"
        assert value == pytest.approx(seconds)

    def test_leading_whitespace_is_ignored(self):
        """Indentation does not prevent a match."""
        plain = parse_line("Maximum resident set size (kbytes): 3808")
        assert parse_line("    Maximum resident set size (kbytes): 3808") == plain
        assert parse_line("\tMaximum resident set size (kbytes): 3808") == plain

    def test_trailing_newline_is_ignored(self):
        assert parse_line("Page size (bytes): 4096\n") == ("page_size", 4096)

    def test_labels_are_case_sensitive(self):
        assert parse_line("user time (seconds): 1.34") is None

    def test_label_must_start_the_line(self):
        assert parse_line("Average User time (seconds): 1.34") is None

    @pytest.mark.parametrize(
        "line",
        [
            "Maximum resident set size (kbytes): lots",
            "Voluntary context switches: 4.5",
            "User time (seconds): ",
            "Elapsed (wall clock) time (h:mm:ss or m:ss): 12.5",
            "Elapsed (wall clock) time (h:mm:ss or m:ss): 1:2:3:4",
        ],
    )
    def test_malformed_values_are_skipped(self, line):
        """A recognised label with an unparseable value yields nothing."""
        assert parse_line(line) is None

    def test_malformed_value_is_logged(self, caplog):
        with caplog.at_level("WARNING"):
            parse_line("Page size (bytes): big")
        assert "Page size (bytes)" in caplog.text


class TestParseDuration:
    """Test cases for parse_duration."""

    def test_minutes_seconds(self):
        assert parse_duration("2:02.04") == pytest.approx(122.04)

    def test_hours_minutes_seconds(self):
        assert parse_duration("1:02:02.04") == pytest.approx(3722.04)

    def test_zero(self):
        assert parse_duration("0:00.00") == 0.0

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_duration("122.04")


class TestLinePatterns:
    """Test cases for the label table."""

    def test_every_field_has_one_pattern(self):
        fields = [pattern.field for pattern in LINE_PATTERNS]
        assert len(fields) == len(set(fields)) == 11

    def test_pattern_match_returns_value_text(self):
        pattern = LINE_PATTERNS[0]
        assert pattern.match(f"{pattern.label}: 0:01.50") == "0:01.50"
        assert pattern.match("unrelated: 1") is None
