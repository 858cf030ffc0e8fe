import pytest

from storepay.services.payroll.errors import PayrollValidationError
from storepay.services.payroll.intervals import (
    breaks_within,
    compute_shift,
    compute_shift_hours,
    night_windows,
    overlap_minutes,
    parse_time,
    place_breaks,
    shift_bounds,
)
from storepay.services.payroll.rules import PayrollRules
from storepay.services.payroll.types import BreakPeriod

from conftest import lunch, make_shift


class TestParseTime:

    def test_parses_hours_and_minutes(self):
        assert parse_time("09:30") == 570

    def test_accepts_seconds_suffix(self):
        assert parse_time("22:00:00") == 1320

    def test_accepts_end_of_day(self):
        assert parse_time("24:00") == 1440

    @pytest.mark.parametrize("value", ["9", "25:00", "12:60", "24:30", "ab:cd", "", None])
    def test_rejects_malformed(self, value):
        with pytest.raises(PayrollValidationError):
            parse_time(value)


class TestOverlapMinutes:

    def test_partial_overlap(self):
        assert overlap_minutes(0, 100, 50, 150) == 50

    def test_disjoint_ranges(self):
        assert overlap_minutes(0, 50, 60, 100) == 0

    def test_touching_ranges(self):
        assert overlap_minutes(0, 50, 50, 100) == 0


class TestShiftBounds:

    def test_same_day(self):
        assert shift_bounds("09:00", "18:00") == (540, 1080)

    def test_infers_overnight(self):
        assert shift_bounds("22:00", "06:00") == (1320, 1800)

    def test_equal_times_infer_full_day(self):
        start, end = shift_bounds("09:00", "09:00")
        assert end - start == 1440

    def test_equal_times_not_crossing_is_zero_length(self):
        start, end = shift_bounds("09:00", "09:00", crosses_midnight=False)
        assert end == start

    def test_explicit_not_crossing_rejects_inverted(self):
        with pytest.raises(PayrollValidationError):
            shift_bounds("22:00", "06:00", crosses_midnight=False)

    def test_explicit_crossing_rejects_forward_range(self):
        with pytest.raises(PayrollValidationError):
            shift_bounds("09:00", "18:00", crosses_midnight=True)


class TestPlaceBreaks:

    def test_break_after_midnight_moves_to_next_day(self):
        start, end = shift_bounds("22:00", "06:00")
        placed = place_breaks(start, end, [BreakPeriod("02:00", "02:30")])
        assert placed == [(1560, 1590)]

    def test_break_outside_shift_raises(self):
        start, end = shift_bounds("09:00", "12:00")
        with pytest.raises(PayrollValidationError):
            place_breaks(start, end, [lunch()])

    def test_overlapping_breaks_raise(self):
        start, end = shift_bounds("09:00", "18:00")
        with pytest.raises(PayrollValidationError):
            place_breaks(start, end, [BreakPeriod("12:00", "13:00"), BreakPeriod("12:30", "13:30")])

    def test_breaks_within_drops_outside_breaks(self):
        kept = breaks_within("14:00", "18:00", [lunch(), BreakPeriod("15:00", "15:15")])
        assert kept == [BreakPeriod("15:00", "15:15")]


class TestComputeShift:

    def test_day_shift_with_lunch(self):
        hours = compute_shift("09:00", "18:00", [lunch()])
        assert hours.total_hours == 8.0
        assert hours.regular_hours == 8.0
        assert hours.overtime_hours == 0.0
        assert hours.night_hours == 0.0
        assert hours.is_night_shift is False

    def test_full_night_shift(self):
        hours = compute_shift("22:00", "06:00")
        assert hours.total_hours == 8.0
        assert hours.night_hours == 8.0
        assert hours.is_night_shift is True

    def test_long_shift_daily_overtime(self):
        hours = compute_shift("08:00", "20:00", [lunch()])
        assert hours.total_hours == 11.0
        assert hours.regular_hours == 8.0
        assert hours.overtime_hours == 3.0

    def test_evening_shift_partial_night(self):
        hours = compute_shift("18:00", "23:30")
        assert hours.total_hours == 5.5
        assert hours.night_hours == 1.5

    def test_early_morning_counts_as_night(self):
        hours = compute_shift("04:00", "10:00")
        assert hours.night_hours == 2.0

    def test_night_hours_ignore_breaks_by_default(self):
        hours = compute_shift("22:00", "06:00", [BreakPeriod("02:00", "03:00")])
        assert hours.total_hours == 7.0
        assert hours.night_hours == 8.0

    def test_night_hours_can_deduct_breaks(self):
        rules = PayrollRules(deduct_breaks_from_night_hours=True)
        hours = compute_shift("22:00", "06:00", [BreakPeriod("02:00", "03:00")], rules)
        assert hours.night_hours == 7.0

    def test_night_hours_never_exceed_total(self):
        hours = compute_shift("21:00", "07:00", [BreakPeriod("23:00", "23:30")])
        assert 0 <= hours.night_hours <= hours.total_hours
        assert hours.regular_hours + hours.overtime_hours == hours.total_hours

    def test_zero_length_shift(self):
        hours = compute_shift("09:00", "09:00", crosses_midnight=False)
        assert hours.total_hours == 0.0
        assert hours.is_night_shift is False

    def test_custom_night_window(self):
        rules = PayrollRules(night_window_start="20:00", night_window_end="23:00")
        assert night_windows(rules) == [(1200, 1380), (2640, 2820)]
        hours = compute_shift("19:00", "22:00", rules=rules)
        assert hours.night_hours == 2.0

    def test_compute_shift_hours_uses_shift_fields(self):
        shift = make_shift(1, 1, "22:00", "06:00", [BreakPeriod("02:00", "02:30")])
        hours = compute_shift_hours(shift)
        assert hours.total_hours == 7.5
