"""Payroll statement (pay slip) data for one employee and month."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from .monthly import MonthlyEmployeePayroll, month_dates
from .rules import DEFAULT_RULES, PayrollRules, round_won


@dataclass(frozen=True)
class PaymentItem:
    id: str
    name: str
    amount: int
    category: str  # basic | allowance | adjustment
    is_required: bool = False


@dataclass(frozen=True)
class DeductionItem:
    id: str
    name: str
    amount: int
    category: str  # insurance | tax
    rate: Optional[float] = None  # percent
    is_auto_calculated: bool = True


@dataclass(frozen=True)
class PayrollStatement:
    company_name: str
    employee_id: int
    employee_name: str
    position: str
    period_start: date
    period_end: date
    payment_date: date
    payment_items: list[PaymentItem] = field(default_factory=list)
    deduction_items: list[DeductionItem] = field(default_factory=list)
    total_payment: int = 0
    total_deduction: int = 0
    net_payment: int = 0


def build_statement(
    result: MonthlyEmployeePayroll,
    year: int,
    month: int,
    store_name: str,
    payment_date: Optional[date] = None,
    rules: PayrollRules = DEFAULT_RULES,
) -> PayrollStatement:
    """
    Convert a monthly payroll result into statement line items.

    The weekly-holiday allowance is split out of the gross salary as its own
    item; exception adjustments appear as one signed item.
    """
    employee = result.employee
    holiday_amount = round_won(result.monthly_salary.holiday_hours * employee.hourly_wage)

    payments = [
        PaymentItem(
            id="basic-salary",
            name="Basic salary",
            amount=result.monthly_salary.gross_salary - holiday_amount,
            category="basic",
            is_required=True,
        ),
    ]
    if holiday_amount > 0:
        payments.append(PaymentItem(
            id="holiday-pay",
            name="Weekly holiday allowance",
            amount=holiday_amount,
            category="allowance",
        ))

    adjustment = result.adjustment_total
    if adjustment != 0:
        payments.append(PaymentItem(
            id="exception-adjustment",
            name="Schedule change (extra pay)" if adjustment > 0 else "Schedule change (reduction)",
            amount=adjustment,
            category="adjustment",
        ))

    rates = rules.insurance
    insurance = result.insurance.employee
    deductions = [
        DeductionItem("national-pension", "National pension", insurance.national_pension,
                      "insurance", rates.national_pension * 100),
        DeductionItem("health-insurance", "Health insurance", insurance.health_insurance,
                      "insurance", rates.health_insurance * 100),
        DeductionItem("long-term-care", "Long-term care insurance", insurance.long_term_care,
                      "insurance", rates.long_term_care * 100),
        DeductionItem("employment-insurance", "Employment insurance", insurance.employment,
                      "insurance", rates.employment * 100),
        DeductionItem("income-tax", "Income tax", result.net_salary.income_tax, "tax"),
        DeductionItem("local-tax", "Local income tax", result.net_salary.local_tax, "tax"),
    ]

    total_payment = sum(p.amount for p in payments)
    total_deduction = sum(d.amount for d in deductions)
    period_start, period_end = month_dates(year, month)

    return PayrollStatement(
        company_name=store_name,
        employee_id=employee.id,
        employee_name=employee.name,
        position=employee.position or "Employee",
        period_start=period_start,
        period_end=period_end,
        payment_date=payment_date or date.today(),
        payment_items=payments,
        deduction_items=deductions,
        total_payment=total_payment,
        total_deduction=total_deduction,
        net_payment=max(0, total_payment - total_deduction),
    )
