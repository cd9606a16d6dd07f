"""
Unit tests for record assembly.
"""

from unittest.mock import patch

import pytest

from scrapermetrics.models.metric import METRIC_FIELDS, MetricRecord
from scrapermetrics.parsing.assembler import (
    MAXRSS_OVERREPORT_FACTOR,
    collect_fields,
    correct_maxrss,
    parse_text,
)


REPORT = """Maximum resident set size (kbytes): 3808
Minor (reclaiming a frame) page faults: 292
Something to be ignored
Major (requiring I/O) page faults: 0
Page size (bytes): 4096
"""


class TestCollectFields:
    """Test cases for collect_fields."""

    def test_each_line_goes_through_parse_line(self):
        """Every line is offered to the line parser, unknown ones included."""
        returns = [("maxrss", 3808), ("minflt", 292), None, ("majflt", 0), ("page_size", 4096)]
        with patch(
            "scrapermetrics.parsing.assembler.parse_line", side_effect=returns
        ) as mock_parse:
            fields = collect_fields(REPORT)

        assert [call.args[0] for call in mock_parse.call_args_list] == [
            "Maximum resident set size (kbytes): 3808",
            "Minor (reclaiming a frame) page faults: 292",
            "Something to be ignored",
            "Major (requiring I/O) page faults: 0",
            "Page size (bytes): 4096",
        ]
        assert fields == {"maxrss": 3808, "minflt": 292, "majflt": 0, "page_size": 4096}

    def test_last_occurrence_wins(self):
        text = "User time (seconds): 1.0\nUser time (seconds): 2.5\n"
        assert collect_fields(text) == {"utime": 2.5}

    def test_windows_line_endings(self):
        text = "User time (seconds): 1.0\r\nPage size (bytes): 4096\r\n"
        assert collect_fields(text) == {"utime": 1.0, "page_size": 4096}

    def test_empty_text(self):
        assert collect_fields("") == {}


class TestCorrectMaxrss:
    """Test cases for the resident set size correction."""

    def test_divides_by_four(self):
        assert MAXRSS_OVERREPORT_FACTOR == 4
        assert correct_maxrss({"maxrss": 3808}) == {"maxrss": 952}

    @pytest.mark.parametrize("raw, stored", [(3, 0), (7, 1), (4099, 1024), (0, 0)])
    def test_truncating_division(self, raw, stored):
        assert correct_maxrss({"maxrss": raw})["maxrss"] == stored

    def test_other_fields_untouched(self):
        assert correct_maxrss({"minflt": 292, "utime": 1.5}) == {"minflt": 292, "utime": 1.5}

    def test_does_not_mutate_input(self):
        fields = {"maxrss": 3808}
        correct_maxrss(fields)
        assert fields == {"maxrss": 3808}


class TestParseText:
    """Test cases for parse_text."""

    def test_record_from_report(self):
        record = parse_text(REPORT)
        assert record.maxrss == 952
        assert record.minflt == 292
        assert record.majflt == 0
        assert record.page_size == 4096
        assert record.utime is None

    def test_record_is_uncommitted(self):
        assert parse_text(REPORT).id is None

    def test_full_report(self, time_report):
        record = parse_text(time_report)
        assert record.utime == pytest.approx(1.34)
        assert record.stime == pytest.approx(24.45)
        assert record.wall_time == pytest.approx(122.04)
        assert record.maxrss == 952
        assert record.majflt == 2
        assert record.minflt == 312
        assert record.nvcsw == 43
        assert record.nivcsw == 65
        assert record.inblock == 480
        assert record.oublock == 23
        assert record.page_size == 4096

    @pytest.mark.parametrize("text", ["", "nothing useful here\n", "\n\n\n"])
    def test_unrecognised_text_gives_empty_record(self, text):
        record = parse_text(text)
        assert record == MetricRecord()
        assert all(getattr(record, name) is None for name in METRIC_FIELDS)

    def test_parsing_is_repeatable(self, time_report):
        assert parse_text(time_report) == parse_text(time_report)
