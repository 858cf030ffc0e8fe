"""
Store and grand-total rollups.

Pure elementwise sums. Hour totals are re-rounded to 2 decimal places so the
grouping of the sum never shows up in the result.
"""

from functools import reduce
from typing import Iterable, Union

from .rules import round_hours
from .types import HolidayPayFilter, PayrollData, PayrollTotals


def totals_for(data: PayrollData) -> PayrollTotals:
    """Totals of a single employee."""
    return PayrollTotals(
        total_employees=1,
        total_hours=data.weekly_hours,
        total_regular_hours=data.regular_hours,
        total_overtime_hours=data.overtime_hours,
        total_night_hours=data.night_hours,
        total_regular_pay=data.regular_pay,
        total_overtime_pay=data.overtime_pay,
        total_night_pay=data.night_pay,
        total_holiday_pay=data.holiday_pay,
        total_pay=data.total_pay,
        total_monthly_salary=data.monthly_salary,
        total_net_salary=data.net_salary,
    )


def add_totals(a: PayrollTotals, b: PayrollTotals) -> PayrollTotals:
    return PayrollTotals(
        total_employees=a.total_employees + b.total_employees,
        total_hours=round_hours(a.total_hours + b.total_hours),
        total_regular_hours=round_hours(a.total_regular_hours + b.total_regular_hours),
        total_overtime_hours=round_hours(a.total_overtime_hours + b.total_overtime_hours),
        total_night_hours=round_hours(a.total_night_hours + b.total_night_hours),
        total_regular_pay=a.total_regular_pay + b.total_regular_pay,
        total_overtime_pay=a.total_overtime_pay + b.total_overtime_pay,
        total_night_pay=a.total_night_pay + b.total_night_pay,
        total_holiday_pay=a.total_holiday_pay + b.total_holiday_pay,
        total_pay=a.total_pay + b.total_pay,
        total_monthly_salary=a.total_monthly_salary + b.total_monthly_salary,
        total_net_salary=a.total_net_salary + b.total_net_salary,
    )


def rollup(payroll_data: Iterable[PayrollData]) -> PayrollTotals:
    """Sum per-employee results into store totals."""
    return reduce(add_totals, (totals_for(d) for d in payroll_data), PayrollTotals())


def grand_totals(store_totals: Iterable[PayrollTotals]) -> PayrollTotals:
    """Sum per-store totals. Order of the stores does not matter."""
    return reduce(add_totals, store_totals, PayrollTotals())


def filter_payroll_data(
    payroll_data: Iterable[PayrollData],
    search: str = "",
    status: Union[HolidayPayFilter, str] = HolidayPayFilter.ALL,
) -> list[PayrollData]:
    """Filter by name/position substring (case-insensitive) and holiday-pay eligibility."""
    status = HolidayPayFilter(status)
    needle = search.strip().lower()

    def matches(data: PayrollData) -> bool:
        if needle:
            name = data.employee.name.lower()
            position = (data.employee.position or "").lower()
            if needle not in name and needle not in position:
                return False
        if status == HolidayPayFilter.ELIGIBLE:
            return data.is_eligible_for_holiday_pay
        if status == HolidayPayFilter.NOT_ELIGIBLE:
            return not data.is_eligible_for_holiday_pay
        return True

    return [d for d in payroll_data if matches(d)]
