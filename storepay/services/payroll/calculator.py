"""
Payroll calculator - main orchestration layer.

Combines data loading, shift aggregation, pay computation and rollups into
single calls. Everything below calculate_payroll is pure.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from .aggregator import aggregate_week, shifts_for_employee
from .data_loader import load_active_template, load_employees, load_exceptions, load_payroll_context, load_store
from .monthly import MonthlyPayrollSummary, calculate_monthly_payroll, month_dates
from .pay_engine import compute_pay, monthly_salary, net_salary, validate_wage
from .rollup import grand_totals, rollup
from .rules import DEFAULT_RULES, OvertimeBasis, PayrollRules
from .types import Employee, PayrollContext, PayrollData, PayrollTotals, Shift, StorePayrollData


logger = logging.getLogger(__name__)


def calculate_employee_payroll(
    employee: Employee,
    shifts: Iterable[Shift],
    rules: PayrollRules = DEFAULT_RULES,
    basis: Optional[OvertimeBasis] = None,
) -> PayrollData:
    """
    Pay breakdown for one employee from the period's shifts.

    Shifts of other employees are ignored, so the whole store's shift list can
    be passed. An employee without shifts gets an all-zero result.
    """
    validate_wage(employee.hourly_wage)

    hours = aggregate_week(shifts_for_employee(shifts, employee.id), None, rules, basis)
    pay = compute_pay(hours, employee.hourly_wage, hours.total_hours, rules)
    monthly = monthly_salary(hours.total_hours, employee.hourly_wage, pay.is_eligible_for_holiday_pay, rules)

    return PayrollData(
        employee=employee,
        weekly_hours=hours.total_hours,
        regular_hours=hours.regular_hours,
        overtime_hours=hours.overtime_hours,
        night_hours=hours.night_hours,
        regular_pay=pay.regular_pay,
        overtime_pay=pay.overtime_pay,
        night_pay=pay.night_pay,
        holiday_pay=pay.holiday_pay,
        total_pay=pay.total_pay,
        is_eligible_for_holiday_pay=pay.is_eligible_for_holiday_pay,
        monthly_salary=monthly,
        net_salary=net_salary(monthly, rules),
    )


def calculate_store_payroll(
    context: PayrollContext,
    rules: PayrollRules = DEFAULT_RULES,
    basis: Optional[OvertimeBasis] = None,
) -> StorePayrollData:
    """Payroll for every employee of the context's store plus store totals."""
    store_id = context.store.id
    employees = [e for e in context.employees if e.store_id == store_id]
    shifts = [s for s in context.shifts if s.store_id in (None, store_id)]

    payroll_data = [calculate_employee_payroll(emp, shifts, rules, basis) for emp in employees]

    return StorePayrollData(
        store=context.store,
        payroll_data=payroll_data,
        totals=rollup(payroll_data),
        template_name=context.template_name,
    )


def calculate_payroll(
    db: Session,
    store_ids: list[int],
    start_date: date,
    end_date: date,
    rules: PayrollRules = DEFAULT_RULES,
) -> tuple[list[StorePayrollData], PayrollTotals]:
    """
    Compute payroll for several stores over one period.

    main entry point for payroll computation. This function:
    1. Loads stores, employees, the active template and exceptions per store
    2. Resolves them into concrete shifts
    3. Computes per-employee pay and per-store totals
    4. Sums the store totals into grand totals

    Args:
        db: Database session
        store_ids: Stores to include
        start_date: First day of the period (inclusive)
        end_date: Last day of the period (inclusive)
        rules: Statutory constants to apply

    Returns:
        (store results in the order given, grand totals)

    Raises:
        ValueError: If a store does not exist
        PayrollValidationError: If the period is inverted or a shift, break or wage is malformed
    """
    results = []
    for store_id in store_ids:
        context = load_payroll_context(db, store_id, start_date, end_date)
        result = calculate_store_payroll(context, rules)
        logger.info(
            f"Payroll for store {store_id} {start_date}..{end_date}: "
            f"{result.totals.total_employees} employees, {result.totals.total_pay} KRW"
        )
        results.append(result)

    return results, grand_totals(r.totals for r in results)


def calculate_store_monthly_payroll(
    db: Session,
    store_id: int,
    year: int,
    month: int,
    rules: PayrollRules = DEFAULT_RULES,
) -> MonthlyPayrollSummary:
    """
    Monthly payroll of one store from its active template and the month's exceptions.

    Raises:
        ValueError: If the store does not exist or has no active template
    """
    store = load_store(db, store_id)
    template = load_active_template(db, store_id)
    if template is None:
        raise ValueError(f"Store {store_id} has no active weekly template")

    start, end = month_dates(year, month)
    return calculate_monthly_payroll(
        store,
        template,
        load_employees(db, store_id),
        load_exceptions(db, store_id, start, end),
        year,
        month,
        rules,
    )
