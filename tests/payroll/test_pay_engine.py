import pytest

from storepay.services.payroll.errors import PayrollValidationError
from storepay.services.payroll.pay_engine import compute_pay, monthly_salary, net_salary
from storepay.services.payroll.rules import PayrollRules
from storepay.services.payroll.types import WeeklyHours


def hours(total, regular=None, overtime=0.0, night=0.0) -> WeeklyHours:
    return WeeklyHours(
        total_hours=total,
        regular_hours=total if regular is None else regular,
        overtime_hours=overtime,
        night_hours=night,
    )


class TestComputePay:

    def test_holiday_eligible_week(self):
        pay = compute_pay(hours(16), 10000)
        assert pay.regular_pay == 160000
        assert pay.overtime_pay == 0
        assert pay.holiday_pay == 32000
        assert pay.total_pay == 192000
        assert pay.is_eligible_for_holiday_pay is True

    def test_sub_threshold_week(self):
        pay = compute_pay(hours(12), 10000)
        assert pay.is_eligible_for_holiday_pay is False
        assert pay.holiday_pay == 0
        assert pay.total_pay == 120000

    def test_overtime_multiplier(self):
        pay = compute_pay(hours(45, regular=40, overtime=5), 10000)
        assert pay.regular_pay == 400000
        assert pay.overtime_pay == 75000
        assert pay.holiday_pay == 95000
        assert pay.total_pay == 570000

    def test_night_premium_is_additive(self):
        pay = compute_pay(hours(8, night=8), 10000)
        assert pay.regular_pay == 80000
        assert pay.night_pay == 40000
        assert pay.total_pay == 120000

    def test_holiday_pay_excludes_night_premium(self):
        pay = compute_pay(hours(16, night=4), 10000)
        assert pay.holiday_pay == 32000

    def test_eligibility_uses_given_weekly_hours(self):
        pay = compute_pay(hours(12), 10000, weekly_hours_for_eligibility=20)
        assert pay.is_eligible_for_holiday_pay is True
        assert pay.holiday_pay == 24000

    def test_total_is_sum_of_rounded_components(self):
        pay = compute_pay(hours(17.33, regular=17.33, night=3.17), 10030)
        assert pay.total_pay == pay.regular_pay + pay.overtime_pay + pay.night_pay + pay.holiday_pay

    def test_zero_wage(self):
        pay = compute_pay(hours(20), 0)
        assert pay.total_pay == 0
        assert pay.is_eligible_for_holiday_pay is True

    def test_negative_wage_raises(self):
        with pytest.raises(PayrollValidationError):
            compute_pay(hours(8), -1)

    def test_negative_hours_raise(self):
        with pytest.raises(PayrollValidationError):
            compute_pay(hours(-1, regular=-1), 10000)

    def test_custom_multipliers(self):
        rules = PayrollRules(overtime_multiplier=2.0, night_differential_multiplier=1.0)
        pay = compute_pay(hours(42, regular=40, overtime=2, night=2), 10000, rules=rules)
        assert pay.overtime_pay == 40000
        assert pay.night_pay == 20000


class TestMonthlySalary:

    def test_eligible_adds_holiday_hours(self):
        assert monthly_salary(16, 10000, True) == 1042800

    def test_not_eligible(self):
        assert monthly_salary(12, 10000, False) == 521400

    def test_zero_hours(self):
        assert monthly_salary(0, 10000, False) == 0


class TestNetSalary:

    def test_flat_rate_deduction(self):
        assert net_salary(1000000) == 881000

    def test_rounds_to_whole_won(self):
        assert isinstance(net_salary(1042800), int)
        assert net_salary(1042800) == 918707
