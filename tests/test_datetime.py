"""Tests for date-time parsing and formatting."""

import pytest
from datetime import datetime

from tasklist_cli.exceptions import DateFormatError, IllegalContentError
from tasklist_cli.utils.datetime import parse_date_time, format_display, format_machine


class TestParseDateTime:
    """Test parsing of user and file date text."""

    def test_parse_date_and_time(self):
        """Test the full YYYY-MM-DD HHMM form."""
        assert parse_date_time("2019-12-02 1800") == datetime(2019, 12, 2, 18, 0)

    def test_parse_date_only_is_midnight(self):
        """Test a bare date parses to midnight."""
        assert parse_date_time("2019-12-02") == datetime(2019, 12, 2, 0, 0)

    def test_surrounding_whitespace_ignored(self):
        assert parse_date_time("  2019-12-02 0930 ") == datetime(2019, 12, 2, 9, 30)

    def test_result_is_naive(self):
        assert parse_date_time("2019-12-02 1800").tzinfo is None

    @pytest.mark.parametrize("text", [
        "tomorrow",
        "02/12/2019",
        "2019-12-02 18:00",
        "2019-13-01 1000",
        "2019-1-2 900",
        "2019-12-2",
        "999-01-02 0300",
        "2019-12-02 1800 extra",
    ])
    def test_invalid_text_rejected(self, text):
        """Test text outside the accepted grammar."""
        with pytest.raises(DateFormatError):
            parse_date_time(text)

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_missing_text_rejected(self, text):
        with pytest.raises(DateFormatError):
            parse_date_time(text)

    def test_date_format_error_is_content_error(self):
        """Date errors are reported like any other bad content."""
        with pytest.raises(IllegalContentError):
            parse_date_time("not a date")


class TestFormatting:
    """Test display and machine renderings."""

    def test_format_display_expands_month(self):
        assert format_display(datetime(2019, 12, 2, 18, 0)) == "Dec 02 2019 18:00"

    def test_format_machine(self):
        assert format_machine(datetime(2019, 12, 2, 18, 0)) == "2019-12-02 1800"

    def test_machine_text_parses_back(self):
        """Machine text always carries the time, so it re-parses exactly."""
        dt = datetime(2024, 2, 29, 0, 5)
        assert parse_date_time(format_machine(dt)) == dt

    @pytest.mark.parametrize("dt", [
        datetime(1, 1, 1, 0, 0),
        datetime(999, 1, 2, 3, 0),
        datetime(9999, 12, 31, 23, 59),
    ])
    def test_machine_year_always_four_digits(self, dt):
        """Years below 1000 are zero-padded so the file stays readable."""
        text = format_machine(dt)
        assert text[:5] == f"{dt.year:04d}-"
        assert parse_date_time(text) == dt

    def test_parse_year_below_1000(self):
        assert parse_date_time("0999-01-02 0300") == datetime(999, 1, 2, 3, 0)
