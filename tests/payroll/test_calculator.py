from datetime import date

from storepay.services.payroll.calculator import calculate_employee_payroll, calculate_store_payroll
from storepay.services.payroll.rollup import grand_totals, rollup
from storepay.services.payroll.rules import OvertimeBasis, is_eligible_for_holiday_pay, split_regular_overtime
from storepay.services.payroll.intervals import compute_shift
from storepay.services.payroll.types import BreakPeriod, Employee, PayrollContext

from conftest import get_test_sunday, lunch, make_shift


def four_hour_shifts(employee_id: int, count: int):
    return [make_shift(employee_id, d, "09:00", "13:00") for d in range(1, count + 1)]


class TestZeroShiftEmployee:

    def test_no_shifts_means_no_pay(self, basic_employee):
        result = calculate_employee_payroll(basic_employee, [])
        assert result.total_pay == 0
        assert result.weekly_hours == 0
        assert result.is_eligible_for_holiday_pay is False
        assert result.monthly_salary == 0
        assert result.net_salary == 0


class TestAdditivity:

    def test_total_pay_is_sum_of_components(self, basic_employee):
        shifts = [
            make_shift(1, 1, "07:30", "19:10", [lunch()]),
            make_shift(1, 2, "21:00", "07:45", [BreakPeriod("01:00", "01:20")]),
            make_shift(1, 3, "09:05", "18:55", [lunch()]),
            make_shift(1, 5, "16:00", "23:35"),
            make_shift(1, 6, "10:00", "14:00"),
        ]
        result = calculate_employee_payroll(basic_employee, shifts)
        assert result.overtime_hours > 0
        assert result.night_hours > 0
        assert result.total_pay == (
            result.regular_pay + result.overtime_pay + result.night_pay + result.holiday_pay
        )


class TestRollupAssociativity:

    def test_store_order_does_not_matter(self, three_employees):
        store_a = [calculate_employee_payroll(three_employees[0], four_hour_shifts(1, 5))]
        store_b = [
            calculate_employee_payroll(three_employees[1], four_hour_shifts(2, 3)),
            calculate_employee_payroll(three_employees[2], [make_shift(3, 1, "22:00", "06:00")]),
        ]
        a, b = rollup(store_a), rollup(store_b)

        assert grand_totals([a, b]) == grand_totals([b, a])
        assert grand_totals([a, b]) == rollup(store_a + store_b)
        assert grand_totals([a, b]).total_employees == 3


class TestEligibilityBoundary:

    def test_just_below(self):
        assert is_eligible_for_holiday_pay(14.99) is False

    def test_at_threshold(self):
        assert is_eligible_for_holiday_pay(15.0) is True


class TestOvertimeBoundary:

    def test_exactly_forty(self):
        regular, overtime = split_regular_overtime(40.0, 40)
        assert overtime == 0

    def test_just_over_forty(self):
        regular, overtime = split_regular_overtime(40.01, 40)
        assert regular == 40
        assert overtime == 0.01


class TestConcreteScenarios:

    def test_regular_day_shift(self):
        result = compute_shift("09:00", "18:00", [lunch()])
        assert result.total_hours == 8.0
        assert result.night_hours == 0

    def test_overnight_shift(self):
        result = compute_shift("22:00", "06:00")
        assert result.total_hours == 8.0
        assert result.night_hours == 8.0

    def test_holiday_eligible_week(self, basic_employee):
        result = calculate_employee_payroll(basic_employee, four_hour_shifts(1, 4))
        assert result.regular_hours == 16
        assert result.overtime_pay == 0
        assert result.holiday_pay == 32000
        assert result.total_pay == 192000
        assert result.is_eligible_for_holiday_pay is True

    def test_sub_threshold_week(self, basic_employee):
        result = calculate_employee_payroll(basic_employee, four_hour_shifts(1, 3))
        assert result.is_eligible_for_holiday_pay is False
        assert result.holiday_pay == 0


class TestOvertimeBasisRegression:
    # weekly is the default; pinning it keeps a basis change from silently altering pay

    def test_weekly_basis_is_default(self, basic_employee):
        shifts = [make_shift(1, d, "08:00", "20:00") for d in range(1, 4)]
        result = calculate_employee_payroll(basic_employee, shifts)
        assert result.overtime_hours == 0
        assert result.total_pay == 360000 + 72000

    def test_daily_basis(self, basic_employee):
        shifts = [make_shift(1, d, "08:00", "20:00") for d in range(1, 4)]
        result = calculate_employee_payroll(basic_employee, shifts, basis=OvertimeBasis.DAILY)
        assert result.regular_hours == 24
        assert result.overtime_hours == 12
        assert result.overtime_pay == 180000


class TestCalculateStorePayroll:

    def test_one_result_per_employee(self, store, three_employees, full_week_shifts):
        shifts = full_week_shifts + four_hour_shifts(2, 4)
        context = PayrollContext(
            store=store,
            start_date=get_test_sunday(),
            end_date=date(2025, 1, 25),
            employees=three_employees,
            shifts=shifts,
        )
        result = calculate_store_payroll(context)

        assert [d.employee.id for d in result.payroll_data] == [1, 2, 3]
        assert result.totals.total_employees == 3
        assert result.totals.total_pay == sum(d.total_pay for d in result.payroll_data)
        assert result.payroll_data[2].total_pay == 0

    def test_skips_employees_of_other_stores(self, store, three_employees):
        outsider = Employee(id=9, store_id=2, hourly_wage=10000, name="Outsider")
        context = PayrollContext(
            store=store,
            start_date=get_test_sunday(),
            end_date=date(2025, 1, 25),
            employees=three_employees + [outsider],
            shifts=[],
        )
        result = calculate_store_payroll(context)
        assert result.totals.total_employees == 3

    def test_carries_template_name(self, store, three_employees, weekday_template):
        context = PayrollContext(
            store=store,
            start_date=get_test_sunday(),
            end_date=date(2025, 1, 25),
            employees=three_employees,
            shifts=[],
            template=weekday_template,
        )
        assert calculate_store_payroll(context).template_name == "Weekday template"
