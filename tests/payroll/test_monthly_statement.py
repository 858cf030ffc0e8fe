import pytest
from datetime import date

from storepay.services.payroll.deductions import estimate_insurance
from storepay.services.payroll.monthly import calculate_monthly_payroll, month_dates
from storepay.services.payroll.statement import build_statement
from storepay.services.payroll.types import (
    DayTemplate,
    EmployeeSlot,
    ExceptionType,
    ScheduleException,
    WeeklyTemplate,
)


def january(store, template, employees, exceptions=()):
    return calculate_monthly_payroll(store, template, employees, list(exceptions), 2025, 1)


def monday_mornings_cancelled(store, employee):
    # 4 Mondays x 4h in January 2025; the template estimate rounds to slightly less than that
    template = WeeklyTemplate(id=2, store_id=1, name="Mondays", days={
        0: DayTemplate(is_open=True, assignments={employee.id: EmployeeSlot("09:00", "13:00")}),
    })
    exceptions = [
        ScheduleException(employee.id, date(2025, 1, day), ExceptionType.CANCEL)
        for day in (6, 13, 20, 27)
    ]
    return january(store, template, [employee], exceptions).employees[0]


class TestMonthDates:

    def test_january(self):
        assert month_dates(2025, 1) == (date(2025, 1, 1), date(2025, 1, 31))

    def test_leap_february(self):
        assert month_dates(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))


class TestCalculateMonthlyPayroll:

    def test_template_hours_for_month(self, store, weekday_template, three_employees):
        summary = january(store, weekday_template, three_employees[:2])
        full_time, part_time = summary.employees

        # January 2025 has 23 weekdays; 4 Mondays and 5 Wednesdays
        assert full_time.monthly_hours == 184
        assert part_time.monthly_hours == 36
        assert full_time.weekly_hours == 42.35
        assert full_time.monthly_salary.holiday_hours > 0
        assert part_time.monthly_salary.holiday_hours == 0

    def test_no_exceptions_means_no_adjustment(self, store, weekday_template, three_employees):
        summary = january(store, weekday_template, three_employees[:2])
        assert summary.total_exception_adjustments == 0
        assert summary.total_final_pay == summary.total_base_pay

    def test_exceptions_are_counted_once(self, store, weekday_template, three_employees):
        exceptions = [
            ScheduleException(1, date(2025, 1, 20), ExceptionType.CANCEL),
            ScheduleException(2, date(2025, 1, 25), ExceptionType.EXTRA, "10:00", "14:00"),
        ]
        summary = january(store, weekday_template, three_employees[:2], exceptions)
        full_time, part_time = summary.employees

        assert full_time.final_monthly_hours == 176
        assert full_time.adjustment_total == -80000
        assert full_time.total_pay == full_time.monthly_salary.gross_salary - 80000
        assert part_time.adjustment_total == 40120
        assert summary.total_exception_adjustments == -80000 + 40120
        assert summary.total_final_pay == summary.total_base_pay + summary.total_exception_adjustments

    def test_exceptions_outside_month_are_ignored(self, store, weekday_template, three_employees):
        exceptions = [ScheduleException(1, date(2025, 2, 3), ExceptionType.CANCEL)]
        summary = january(store, weekday_template, three_employees[:1], exceptions)
        assert summary.employees[0].adjustments == []

    def test_employee_without_assignments(self, store, weekday_template, three_employees):
        summary = january(store, weekday_template, [three_employees[2]])
        assert summary.employees[0].monthly_hours == 0
        assert summary.employees[0].total_pay == 0
        assert summary.total_employees == 1

    def test_deductions_follow_adjusted_pay(self, store, weekday_template, three_employees):
        exceptions = [ScheduleException(1, date(2025, 1, 20), ExceptionType.CANCEL)]
        full_time = january(store, weekday_template, three_employees[:1], exceptions).employees[0]

        assert full_time.insurance == estimate_insurance(full_time.total_pay)
        assert full_time.net_salary.gross_salary == full_time.total_pay

    def test_cancelled_month_is_not_negative(self, store, three_employees):
        result = monday_mornings_cancelled(store, three_employees[2])

        # 3.68h x 4.345 x 12000 = 191875 won of template pay against 192000 won cancelled
        assert result.monthly_salary.gross_salary == 191875
        assert result.adjustment_total == -192000
        assert result.total_pay == 0
        assert result.insurance.employee.total == 0
        assert result.net_salary.net_salary == 0


class TestBuildStatement:

    def test_items_add_up(self, store, weekday_template, three_employees):
        exceptions = [ScheduleException(1, date(2025, 1, 20), ExceptionType.CANCEL)]
        result = january(store, weekday_template, three_employees[:1], exceptions).employees[0]

        statement = build_statement(result, 2025, 1, store.name, payment_date=date(2025, 2, 10))

        assert statement.company_name == "Gangnam"
        assert statement.period_start == date(2025, 1, 1)
        assert statement.period_end == date(2025, 1, 31)
        assert statement.payment_date == date(2025, 2, 10)
        assert statement.total_payment == result.total_pay
        assert statement.total_payment == sum(p.amount for p in statement.payment_items)
        assert statement.total_deduction == sum(d.amount for d in statement.deduction_items)
        assert statement.net_payment == statement.total_payment - statement.total_deduction

    def test_holiday_allowance_and_adjustment_items(self, store, weekday_template, three_employees):
        exceptions = [ScheduleException(1, date(2025, 1, 20), ExceptionType.CANCEL)]
        result = january(store, weekday_template, three_employees[:1], exceptions).employees[0]

        statement = build_statement(result, 2025, 1, store.name)
        items = {p.id: p for p in statement.payment_items}

        assert items["holiday-pay"].category == "allowance"
        assert items["exception-adjustment"].amount == -80000
        assert items["basic-salary"].amount + items["holiday-pay"].amount == result.monthly_salary.gross_salary

    def test_no_holiday_item_below_threshold(self, store, weekday_template, three_employees):
        result = january(store, weekday_template, three_employees[1:2]).employees[0]
        statement = build_statement(result, 2025, 1, store.name)
        ids = [p.id for p in statement.payment_items]
        assert ids == ["basic-salary"]

    def test_deduction_rates_are_percent(self, store, weekday_template, three_employees):
        result = january(store, weekday_template, three_employees[:1]).employees[0]
        statement = build_statement(result, 2025, 1, store.name)
        pension = next(d for d in statement.deduction_items if d.id == "national-pension")
        assert pension.rate == pytest.approx(4.5)
        assert pension.category == "insurance"

    def test_net_payment_never_negative(self, store, three_employees):
        result = monday_mornings_cancelled(store, three_employees[2])
        statement = build_statement(result, 2025, 1, store.name)

        assert statement.total_payment == -125
        assert statement.total_deduction == 0
        assert statement.net_payment == 0
