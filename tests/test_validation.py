"""
Tests for the input shape helpers.
"""

import pytest

from meetzone.domain.exceptions import MalformedInput
from meetzone.domain.validation import (
    compare_time_of_day,
    is_valid_date_shape,
    is_valid_time_shape,
    split_date,
    split_time,
)


class TestTimeShape:
    """Tests for is_valid_time_shape."""

    @pytest.mark.parametrize("value", ["00:00", "09:30", "23:59"])
    def test_accepts_two_digit_fields(self, value):
        assert is_valid_time_shape(value)

    @pytest.mark.parametrize("value", ["9:30", "0930", "09:3", "09:30:00", "", "ab:cd", "09:30\n", " 09:30"])
    def test_rejects_other_shapes(self, value):
        assert not is_valid_time_shape(value)

    def test_out_of_range_passes_shape_check(self):
        """Only the structure is checked here."""
        assert is_valid_time_shape("99:99")


class TestDateShape:
    """Tests for is_valid_date_shape."""

    def test_accepts_iso_date(self):
        assert is_valid_date_shape("2026-01-19")

    @pytest.mark.parametrize("value", ["2026-1-19", "19.01.2026", "2026/01/19", ""])
    def test_rejects_other_shapes(self, value):
        assert not is_valid_date_shape(value)


class TestSplitting:
    """Tests for split_time and split_date."""

    def test_split_time(self):
        assert split_time("08:05") == (8, 5)

    def test_split_date(self):
        assert split_date("2026-01-19") == (2026, 1, 19)

    def test_split_malformed_time_raises(self):
        with pytest.raises(MalformedInput, match="HH:mm"):
            split_time("8:05")

    def test_split_malformed_date_raises(self):
        with pytest.raises(MalformedInput, match="yyyy-MM-dd"):
            split_date("2026-1-9")


class TestCompareTimeOfDay:
    """Tests for compare_time_of_day."""

    def test_earlier_hour_is_negative(self):
        assert compare_time_of_day("09:30", "10:00") < 0

    def test_same_time_is_zero(self):
        assert compare_time_of_day("10:00", "10:00") == 0

    def test_later_minute_is_positive(self):
        assert compare_time_of_day("10:05", "10:00") > 0

    def test_hour_takes_precedence_over_minute(self):
        assert compare_time_of_day("09:59", "10:00") < 0

    def test_malformed_input_raises(self):
        with pytest.raises(MalformedInput):
            compare_time_of_day("9:00", "10:00")
