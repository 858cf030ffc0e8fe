"""
Payroll service package.

Usage:
    from datetime import date
    from storepay.services.payroll import calculate_payroll

    # Load data and compute in one call
    stores, totals = calculate_payroll(db, [1, 2], date(2025, 1, 19), date(2025, 1, 25))

    # Or work on plain values, no database involved
    from storepay.services.payroll import Employee, Shift, calculate_employee_payroll

    employee = Employee(id=1, store_id=1, hourly_wage=10030)
    shifts = [Shift(employee_id=1, date=date(2025, 1, 20), start_time="09:00", end_time="18:00")]
    result = calculate_employee_payroll(employee, shifts)
"""

from .errors import PayrollValidationError
from .types import (
    BreakPeriod,
    DayTemplate,
    Employee,
    EmployeeSlot,
    ExceptionAdjustment,
    ExceptionType,
    HolidayPayFilter,
    PayComponents,
    PayPeriod,
    PayrollContext,
    PayrollData,
    PayrollTotals,
    ScheduleException,
    Shift,
    ShiftHours,
    Store,
    StorePayrollData,
    WeeklyHours,
    WeeklyTemplate,
)
from .rules import (
    DEFAULT_RULES,
    InsuranceRates,
    OvertimeBasis,
    PayrollRules,
    is_below_minimum_wage,
    is_eligible_for_holiday_pay,
    split_regular_overtime,
)
from .intervals import compute_shift, compute_shift_hours, parse_time
from .aggregator import aggregate_week
from .pay_engine import compute_pay, monthly_salary, net_salary
from .rollup import filter_payroll_data, grand_totals, rollup
from .periods import period_bounds
from .schedule_builder import apply_exceptions, exception_adjustments, expand_template, parse_schedule_data
from .monthly import calculate_monthly_payroll
from .statement import build_statement
from .data_loader import load_payroll_context
from .calculator import (
    calculate_employee_payroll,
    calculate_payroll,
    calculate_store_monthly_payroll,
    calculate_store_payroll,
)

__all__ = [
    # Types
    "BreakPeriod",
    "DayTemplate",
    "Employee",
    "EmployeeSlot",
    "ExceptionAdjustment",
    "ExceptionType",
    "HolidayPayFilter",
    "PayComponents",
    "PayPeriod",
    "PayrollContext",
    "PayrollData",
    "PayrollTotals",
    "ScheduleException",
    "Shift",
    "ShiftHours",
    "Store",
    "StorePayrollData",
    "WeeklyHours",
    "WeeklyTemplate",
    "PayrollValidationError",
    # Rules
    "DEFAULT_RULES",
    "InsuranceRates",
    "OvertimeBasis",
    "PayrollRules",
    "is_below_minimum_wage",
    "is_eligible_for_holiday_pay",
    "split_regular_overtime",
    # Main entry points
    "calculate_payroll",
    "calculate_store_payroll",
    "calculate_employee_payroll",
    "calculate_monthly_payroll",
    "calculate_store_monthly_payroll",
    # Lower-level functions
    "parse_time",
    "compute_shift",
    "compute_shift_hours",
    "aggregate_week",
    "compute_pay",
    "monthly_salary",
    "net_salary",
    "rollup",
    "grand_totals",
    "filter_payroll_data",
    "period_bounds",
    "parse_schedule_data",
    "expand_template",
    "apply_exceptions",
    "exception_adjustments",
    "build_statement",
    "load_payroll_context",
]
