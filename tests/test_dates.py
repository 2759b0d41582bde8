"""Tests for ledgerline.dates pure functions."""

from datetime import date

import pytest

from ledgerline.dates import (
    month_to_date,
    parse_user_amount,
    parse_user_date,
    previous_month,
    previous_year,
    year_to_date,
)


class TestMonthToDate:
    """Tests for month_to_date."""

    def test_starts_on_first_of_month(self) -> None:
        """Should run from the 1st through today."""
        start, end, label = month_to_date(date(2025, 3, 17))

        assert start == date(2025, 3, 1)
        assert end == date(2025, 3, 17)
        assert label == "March 2025 to date"

    def test_first_day_of_month(self) -> None:
        """Should be a single day on the 1st."""
        start, end, _ = month_to_date(date(2025, 3, 1))

        assert start == end == date(2025, 3, 1)


class TestPreviousMonth:
    """Tests for previous_month."""

    def test_mid_year(self) -> None:
        """Should cover the whole previous month."""
        start, end, label = previous_month(date(2025, 5, 20))

        assert start == date(2025, 4, 1)
        assert end == date(2025, 4, 30)
        assert label == "April 2025"

    def test_january_crosses_year(self) -> None:
        """Should return December of the previous year in January."""
        start, end, label = previous_month(date(2025, 1, 10))

        assert start == date(2024, 12, 1)
        assert end == date(2024, 12, 31)
        assert label == "December 2024"

    def test_february_leap_year(self) -> None:
        """Should end on the 29th for a leap-year February."""
        start, end, _ = previous_month(date(2024, 3, 31))

        assert start == date(2024, 2, 1)
        assert end == date(2024, 2, 29)

    def test_february_non_leap_year(self) -> None:
        """Should end on the 28th for a non-leap February."""
        _, end, _ = previous_month(date(2025, 3, 1))

        assert end == date(2025, 2, 28)


class TestYearRanges:
    """Tests for year_to_date and previous_year."""

    def test_year_to_date(self) -> None:
        """Should run from January 1st through today."""
        start, end, label = year_to_date(date(2025, 8, 9))

        assert start == date(2025, 1, 1)
        assert end == date(2025, 8, 9)
        assert label == "2025 to date"

    def test_previous_year(self) -> None:
        """Should cover the whole previous calendar year."""
        start, end, label = previous_year(date(2025, 8, 9))

        assert start == date(2024, 1, 1)
        assert end == date(2024, 12, 31)
        assert label == "2024"


class TestParseUserDate:
    """Tests for parse_user_date."""

    def test_iso_date(self) -> None:
        """Should parse YYYY-MM-DD."""
        assert parse_user_date("2024-01-05") == date(2024, 1, 5)

    def test_strips_whitespace(self) -> None:
        """Should ignore surrounding whitespace."""
        assert parse_user_date("  2024-12-31 ") == date(2024, 12, 31)

    def test_blank_returns_none(self) -> None:
        """Should treat blank input as not supplied."""
        assert parse_user_date("") is None
        assert parse_user_date("   ") is None

    def test_invalid_raises_valueerror(self) -> None:
        """Should raise ValueError for garbage input."""
        with pytest.raises(ValueError):
            parse_user_date("not a date")


class TestParseUserAmount:
    """Tests for parse_user_amount."""

    def test_plain_number(self) -> None:
        """Should parse a decimal number."""
        assert parse_user_amount("75.50") == 75.50

    def test_currency_and_thousands(self) -> None:
        """Should ignore dollar signs and thousands separators."""
        assert parse_user_amount("$1,200.00") == 1200.0

    def test_blank_returns_none(self) -> None:
        """Should treat blank input as not supplied."""
        assert parse_user_amount(" ") is None

    def test_invalid_raises_valueerror(self) -> None:
        """Should raise ValueError for non-numeric input."""
        with pytest.raises(ValueError):
            parse_user_amount("ten")

    def test_non_finite_raises_valueerror(self) -> None:
        """Should reject nan and infinity."""
        with pytest.raises(ValueError):
            parse_user_amount("nan")
        with pytest.raises(ValueError):
            parse_user_amount("inf")
