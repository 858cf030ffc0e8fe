"""
Monthly payroll from a weekly template plus the month's exceptions.

The base salary comes from the template alone; exceptions are then added as
explicit pay adjustments so they are counted exactly once.
"""

import calendar
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from .aggregator import aggregate_week, shifts_for_employee
from .deductions import (
    InsuranceEstimate,
    MonthlySalaryEstimate,
    NetSalaryEstimate,
    estimate_insurance,
    estimate_monthly_salary,
    estimate_net_salary,
)
from .rules import DEFAULT_RULES, PayrollRules, round_hours
from .schedule_builder import apply_exceptions, exception_adjustments, expand_template
from .types import Employee, ExceptionAdjustment, ScheduleException, Shift, Store, WeeklyTemplate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthlyEmployeePayroll:
    employee: Employee
    monthly_hours: float        # template hours for the month
    final_monthly_hours: float  # after exceptions
    weekly_hours: float         # template average per week
    monthly_salary: MonthlySalaryEstimate
    net_salary: NetSalaryEstimate
    insurance: InsuranceEstimate
    adjustments: list[ExceptionAdjustment]
    total_pay: int

    @property
    def adjustment_total(self) -> int:
        return sum(a.pay_difference for a in self.adjustments)


@dataclass(frozen=True)
class MonthlyPayrollSummary:
    store: Store
    template_name: Optional[str]
    year: int
    month: int
    employees: list[MonthlyEmployeePayroll]
    total_employees: int
    total_base_pay: int
    total_exception_adjustments: int
    total_final_pay: int


def month_dates(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def calculate_employee_monthly(
    employee: Employee,
    base_shifts: list[Shift],
    final_shifts: list[Shift],
    exceptions: list[ScheduleException],
    rules: PayrollRules = DEFAULT_RULES,
    dependents: int = 1,
) -> MonthlyEmployeePayroll:
    base = aggregate_week(base_shifts, employee.id, rules)
    final = aggregate_week(final_shifts, employee.id, rules)
    weekly_hours = round_hours(base.total_hours / rules.average_weeks_per_month)

    salary = estimate_monthly_salary(weekly_hours, employee.hourly_wage, rules)
    adjustments = exception_adjustments(
        shifts_for_employee(base_shifts, employee.id),
        shifts_for_employee(final_shifts, employee.id),
        [e for e in exceptions if e.employee_id == employee.id],
        {employee.id: employee.hourly_wage},
        rules,
    )

    # deductions follow what is actually paid, never a negative amount
    payable = max(0, salary.gross_salary + sum(a.pay_difference for a in adjustments))

    return MonthlyEmployeePayroll(
        employee=employee,
        monthly_hours=base.total_hours,
        final_monthly_hours=final.total_hours,
        weekly_hours=weekly_hours,
        monthly_salary=salary,
        net_salary=estimate_net_salary(payable, dependents, rules),
        insurance=estimate_insurance(payable, rules),
        adjustments=adjustments,
        total_pay=payable,
    )


def calculate_monthly_payroll(
    store: Store,
    template: WeeklyTemplate,
    employees: list[Employee],
    exceptions: list[ScheduleException],
    year: int,
    month: int,
    rules: PayrollRules = DEFAULT_RULES,
) -> MonthlyPayrollSummary:
    """
    Monthly payroll for every employee of a store.

    Args:
        store: The store being paid
        template: Active weekly template of the store
        employees: Employees to include (usually the store's active employees)
        exceptions: Exceptions of the month, any employee
        year, month: Calendar month

    Returns:
        MonthlyPayrollSummary with per-employee results and store totals
    """
    start, end = month_dates(year, month)
    month_exceptions = [e for e in exceptions if start <= e.date <= end]
    base_shifts = expand_template(template, start, end)
    final_shifts = apply_exceptions(base_shifts, month_exceptions)

    results = [
        calculate_employee_monthly(emp, base_shifts, final_shifts, month_exceptions, rules)
        for emp in employees
    ]

    logger.info(
        f"Monthly payroll for store {store.id} {year}-{month:02d}: {len(results)} employees"
    )

    return MonthlyPayrollSummary(
        store=store,
        template_name=template.name,
        year=year,
        month=month,
        employees=results,
        total_employees=len(results),
        total_base_pay=sum(r.monthly_salary.gross_salary for r in results),
        total_exception_adjustments=sum(r.adjustment_total for r in results),
        total_final_pay=sum(r.total_pay for r in results),
    )
