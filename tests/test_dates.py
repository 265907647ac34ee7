"""Tests for spendlog.dates pure functions."""

from datetime import date

import pytest

from spendlog.dates import (
    days_in_month,
    end_of_month,
    format_month_key,
    format_month_label,
    month_range,
    parse_month_key,
    previous_month_key,
    start_of_month,
)
from spendlog.domain.models import Month


class TestMonthRange:
    """Tests for month_range."""

    def test_january_range(self) -> None:
        """Should calculate range for January."""
        since, until, label = month_range(Month("2025-01"))

        assert since == "2025-01-01"
        assert until == "2025-02-01"
        assert label == "January 2025"

    def test_december_range_crosses_year(self) -> None:
        """Should handle December (crosses year boundary)."""
        since, until, label = month_range(Month("2025-12"))

        assert since == "2025-12-01"
        assert until == "2026-01-01"
        assert label == "December 2025"

    def test_february_leap_year(self) -> None:
        """Should handle February in leap year."""
        since, until, label = month_range(Month("2024-02"))

        assert since == "2024-02-01"
        assert until == "2024-03-01"
        assert label == "February 2024"

    def test_invalid_month_format_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month format."""
        with pytest.raises(ValueError):
            month_range(Month("invalid"))

    def test_invalid_month_number_raises_valueerror(self) -> None:
        """Should raise ValueError for invalid month number."""
        with pytest.raises(ValueError):
            month_range(Month("2025-13"))


class TestMonthBoundaries:
    """Tests for start_of_month, end_of_month and days_in_month."""

    def test_thirty_one_day_month(self) -> None:
        """Should end on the 31st."""
        assert start_of_month(Month("2025-03")) == date(2025, 3, 1)
        assert end_of_month(Month("2025-03")) == date(2025, 3, 31)
        assert days_in_month(Month("2025-03")) == 31

    def test_thirty_day_month(self) -> None:
        """Should end on the 30th."""
        assert end_of_month(Month("2025-04")) == date(2025, 4, 30)
        assert days_in_month(Month("2025-04")) == 30

    def test_february_non_leap_year(self) -> None:
        """Should have 28 days in Feb 2025."""
        assert end_of_month(Month("2025-02")) == date(2025, 2, 28)
        assert days_in_month(Month("2025-02")) == 28

    def test_february_leap_year(self) -> None:
        """Should have 29 days in Feb 2024."""
        assert end_of_month(Month("2024-02")) == date(2024, 2, 29)
        assert days_in_month(Month("2024-02")) == 29

    def test_december(self) -> None:
        """Should end on Dec 31 without spilling into January."""
        assert end_of_month(Month("2025-12")) == date(2025, 12, 31)

    def test_all_months_of_year(self) -> None:
        """Should match the calendar for all 12 months."""
        expected = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]

        for month_num in range(1, 13):
            assert days_in_month(Month(f"2025-{month_num:02d}")) == expected[month_num - 1]


class TestPreviousMonthKey:
    """Tests for previous_month_key."""

    def test_mid_year(self) -> None:
        """Should step back one month."""
        assert previous_month_key(Month("2026-10")) == "2026-09"

    def test_january_rolls_over_year(self) -> None:
        """Should roll January back to December of the previous year."""
        assert previous_month_key(Month("2026-01")) == "2025-12"

    def test_march_after_leap_february(self) -> None:
        """Should not be thrown off by short months."""
        assert previous_month_key(Month("2024-03")) == "2024-02"

    def test_first_representable_month_raises_valueerror(self) -> None:
        """Should reject a month with no month before it."""
        with pytest.raises(ValueError, match="No month before"):
            previous_month_key(Month("0001-01"))


class TestMonthKeyFormatting:
    """Tests for parse_month_key, format_month_key and format_month_label."""

    def test_parse_returns_first_day(self) -> None:
        """Should parse to the first of the month."""
        assert parse_month_key(Month("2023-10")) == date(2023, 10, 1)

    def test_format_truncates_day(self) -> None:
        """Should drop the day part."""
        assert format_month_key(date(2023, 10, 25)) == "2023-10"

    def test_format_pads_short_years(self) -> None:
        """Should always produce a four-digit year."""
        assert format_month_key(date(999, 12, 1)) == "0999-12"

    def test_same_month_same_key(self) -> None:
        """Dates in the same calendar month share a key."""
        assert format_month_key(date(2023, 10, 1)) == format_month_key(date(2023, 10, 31))
        assert format_month_key(date(2023, 10, 31)) != format_month_key(date(2023, 11, 1))

    def test_label(self) -> None:
        """Should render 'Month YYYY'."""
        assert format_month_label(Month("2023-10")) == "October 2023"

    def test_parse_invalid_raises_valueerror(self) -> None:
        """Should reject malformed keys."""
        with pytest.raises(ValueError):
            parse_month_key(Month("2023/10"))


class TestOutOfRangeMonths:
    """Tests for month arithmetic at the edges of the calendar."""

    def test_last_representable_month_has_no_end(self) -> None:
        """Should raise ValueError rather than overflow."""
        with pytest.raises(ValueError, match="No month after"):
            end_of_month(Month("9999-12"))

    def test_month_range_of_last_month_raises_valueerror(self) -> None:
        with pytest.raises(ValueError):
            month_range(Month("9999-12"))
