import pytest

from storepay.core.config import Settings
from storepay.services.payroll.errors import PayrollValidationError
from storepay.services.payroll.rules import (
    DEFAULT_RULES,
    OvertimeBasis,
    PayrollRules,
    is_below_minimum_wage,
    is_eligible_for_holiday_pay,
    round_hours,
    round_won,
    split_regular_overtime,
)


class TestHolidayPayEligibility:

    def test_threshold_is_inclusive(self):
        assert is_eligible_for_holiday_pay(15) is True

    def test_just_below_threshold(self):
        assert is_eligible_for_holiday_pay(14.99) is False

    def test_twelve_hours_not_eligible(self):
        assert is_eligible_for_holiday_pay(12) is False

    def test_custom_threshold(self):
        assert is_eligible_for_holiday_pay(10, PayrollRules(holiday_pay_eligibility_weekly_hours=10)) is True


class TestSplitRegularOvertime:

    def test_under_threshold(self):
        assert split_regular_overtime(32, 40) == (32, 0)

    def test_exactly_threshold(self):
        assert split_regular_overtime(40, 40) == (40, 0)

    def test_just_over_threshold(self):
        assert split_regular_overtime(40.01, 40) == (40, 0.01)

    def test_daily_threshold(self):
        assert split_regular_overtime(11, 8) == (8, 3)

    def test_parts_add_up(self):
        regular, overtime = split_regular_overtime(47.25, 40)
        assert regular + overtime == 47.25

    def test_negative_hours_raise(self):
        with pytest.raises(PayrollValidationError):
            split_regular_overtime(-1, 40)


class TestRounding:

    def test_round_hours_half_up(self):
        assert round_hours(2.675) == 2.68
        assert round_hours(1.005) == 1.01

    def test_round_won_half_up(self):
        assert round_won(2.5) == 3
        assert round_won(150449.5) == 150450
        assert round_won(-2.5) == -3


class TestMinimumWage:

    def test_below_minimum(self):
        assert is_below_minimum_wage(9000) is True

    def test_at_minimum(self):
        assert is_below_minimum_wage(DEFAULT_RULES.minimum_wage) is False


class TestPayrollRulesFromSettings:

    def test_defaults_match_module_constants(self):
        rules = PayrollRules.from_settings(Settings(_env_file=None))
        assert rules.minimum_wage == DEFAULT_RULES.minimum_wage
        assert rules.overtime_basis == OvertimeBasis.WEEKLY
        assert rules.night_window_start == "22:00"

    def test_settings_override(self):
        settings = Settings(
            _env_file=None,
            PAYROLL_MINIMUM_WAGE=11000,
            PAYROLL_OVERTIME_BASIS="daily",
            PAYROLL_DEDUCT_BREAKS_FROM_NIGHT_HOURS=True,
        )
        rules = PayrollRules.from_settings(settings)
        assert rules.minimum_wage == 11000
        assert rules.overtime_basis == OvertimeBasis.DAILY
        assert rules.deduct_breaks_from_night_hours is True
