"""
Unit tests for stop date/time window parsing.

Run: pytest tests/unit/test_task_sheet_dates.py -v
"""

from datetime import date

import pytest

from parsers.task_sheet_dates import parse_instant, parse_time_window


class TestParseTimeWindow:
    """Tests for parse_time_window()"""

    def test_date_with_range(self, reference_date):
        """Start and end time share the date."""
        window = parse_time_window("01.06.2024 08:00-10:00", reference_date)

        assert window.datetime_from == "2024-06-01T08:00:00.000000Z"
        assert window.datetime_to == "2024-06-01T10:00:00.000000Z"
        assert window.to_dict() == {
            "datetime_from": "2024-06-01T08:00:00.000000Z",
            "datetime_to": "2024-06-01T10:00:00.000000Z",
        }

    def test_year_from_reference_date(self):
        """Day.month tokens take the caller's year."""
        window = parse_time_window("01.06 08:00-10:00", date(2024, 3, 1))

        assert window.datetime_from == "2024-06-01T08:00:00.000000Z"
        assert window.datetime_to == "2024-06-01T10:00:00.000000Z"

    def test_date_only_collapses(self, reference_date):
        """Same instant on both sides drops datetime_to from output."""
        window = parse_time_window("04.06.2024", reference_date)

        assert window.is_single_instant is True
        assert window.to_dict() == {"datetime_from": "2024-06-04T00:00:00.000000Z"}

    def test_start_time_only(self, reference_date):
        """Without an end time, the end is the bare date."""
        window = parse_time_window("03.06.2024 14:00", reference_date)

        assert window.datetime_from == "2024-06-03T14:00:00.000000Z"
        assert window.datetime_to == "2024-06-03T00:00:00.000000Z"
        assert "datetime_to" in window.to_dict()

    def test_end_time_only(self, reference_date):
        """Hyphen directly after the date gives an end time only."""
        window = parse_time_window("03.06.2024-16:00", reference_date)

        assert window.datetime_from == "2024-06-03T00:00:00.000000Z"
        assert window.datetime_to == "2024-06-03T16:00:00.000000Z"

    def test_two_digit_year(self, reference_date):
        """Short years are accepted."""
        window = parse_time_window("01.06.24 08:00", reference_date)
        assert window.datetime_from == "2024-06-01T08:00:00.000000Z"

    def test_bad_end_time_keeps_start(self, reference_date):
        """One side failing does not affect the other."""
        window = parse_time_window("01.06.2024 08:00-25:00", reference_date)

        assert window.datetime_from == "2024-06-01T08:00:00.000000Z"
        assert window.datetime_to is None
        assert "datetime_to" in window.to_dict()

    def test_invalid_date_both_none(self, reference_date):
        """Impossible date gives None on both sides."""
        window = parse_time_window("31.02.2024 08:00-10:00", reference_date)

        assert window.datetime_from is None
        assert window.datetime_to is None

    @pytest.mark.parametrize("value", ["7:30-9:00", "08:00", "8", "2024 08:00"])
    def test_time_without_date(self, value, reference_date):
        """A time on the date line without day and month gives an empty window."""
        window = parse_time_window(value, reference_date)

        assert window.datetime_from is None
        assert window.datetime_to is None

    @pytest.mark.parametrize("value", ["", None, "Contact: Jonas", "tomorrow 08:00"])
    def test_non_date_token(self, value, reference_date):
        """Tokens not shaped like a date give an empty window."""
        window = parse_time_window(value, reference_date)

        assert window.datetime_from is None
        assert window.datetime_to is None
        assert window.to_dict() == {"datetime_from": None, "datetime_to": None}


class TestParseInstant:
    """Tests for parse_instant()"""

    def test_seconds(self):
        """Seconds are kept."""
        assert parse_instant("01.06.2024 08:00:30") == "2024-06-01T08:00:30.000000Z"

    def test_hour_only(self):
        """Bare hour is accepted."""
        assert parse_instant("01.06.2024 8") == "2024-06-01T08:00:00.000000Z"

    def test_empty(self):
        """Blank input gives None."""
        assert parse_instant("  ") is None

    def test_garbage(self):
        """Unparseable input gives None."""
        assert parse_instant("99.99.9999") is None

    def test_fragment_not_read_as_year_one(self):
        """Bare numbers never render as a pre-1900 instant."""
        assert parse_instant("7") is None
        assert parse_instant("08 09:00") is None
