"""
Tests for the HourOfDay and MinuteOfHour units.
"""

import pytest

from wallclock.domain import HourOfDay, InvalidArgumentError, MinuteOfHour


class TestHourOfDay:
    """Tests for HourOfDay."""
    
    @pytest.mark.parametrize("value", [0, 12, 23])
    def test_valid_hours(self, value):
        """Test that in-range hours construct."""
        assert HourOfDay(value).value == value
    
    @pytest.mark.parametrize("value", [-1, 24, 100])
    def test_out_of_range_raises_error(self, value):
        """Test that out-of-range hours are rejected."""
        with pytest.raises(InvalidArgumentError, match="Hour must be between 0 and 23"):
            HourOfDay(value)
    
    @pytest.mark.parametrize("value", [9.0, "9", None, True])
    def test_non_int_raises_error(self, value):
        """Test that only real ints are accepted."""
        with pytest.raises(InvalidArgumentError, match="must be an int"):
            HourOfDay(value)
    
    def test_predicates(self):
        """Test is_after and is_before."""
        assert HourOfDay(10).is_after(HourOfDay(9))
        assert HourOfDay(9).is_before(HourOfDay(10))
        assert not HourOfDay(9).is_after(HourOfDay(9))
        assert not HourOfDay(9).is_before(HourOfDay(9))
    
    def test_str_is_unpadded(self):
        """Test the default rendering."""
        assert str(HourOfDay(7)) == "7"
    
    @pytest.mark.parametrize(
        "value,am_pm,expected",
        [(12, "AM", 0), (1, "am", 1), (11, "AM", 11), (12, "PM", 12), (1, "pm", 13), (11, " PM ", 23)],
    )
    def test_from_twelve_hour(self, value, am_pm, expected):
        """Test conversion from the 12-hour clock."""
        assert HourOfDay.from_twelve_hour(value, am_pm) == HourOfDay(expected)
    
    @pytest.mark.parametrize("value,am_pm", [(0, "AM"), (13, "PM"), (9, "noon"), (9, None)])
    def test_from_twelve_hour_invalid(self, value, am_pm):
        """Test that invalid 12-hour input is rejected."""
        with pytest.raises(InvalidArgumentError):
            HourOfDay.from_twelve_hour(value, am_pm)


class TestMinuteOfHour:
    """Tests for MinuteOfHour."""
    
    @pytest.mark.parametrize("value", [0, 30, 59])
    def test_valid_minutes(self, value):
        """Test that in-range minutes construct."""
        assert MinuteOfHour(value).value == value
    
    @pytest.mark.parametrize("value", [-1, 60])
    def test_out_of_range_raises_error(self, value):
        """Test that out-of-range minutes are rejected."""
        with pytest.raises(InvalidArgumentError, match="Minute must be between 0 and 59"):
            MinuteOfHour(value)
    
    def test_ordering(self):
        """Test comparison operators and compare_to."""
        assert MinuteOfHour(5) < MinuteOfHour(50)
        assert MinuteOfHour(50).compare_to(MinuteOfHour(5)) > 0
        assert MinuteOfHour(5).is_before(MinuteOfHour(50))
    
    def test_none_comparand_raises_error(self):
        """Test that the predicates reject None."""
        with pytest.raises(InvalidArgumentError):
            MinuteOfHour(5).is_after(None)
