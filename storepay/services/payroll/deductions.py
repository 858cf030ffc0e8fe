"""
Itemised monthly salary estimate: proportional weekly-holiday hours, the four
social insurances (employee and employer shares) and an approximated income
tax. Figures are estimates; the official simplified tax table is not used.
"""

from dataclasses import dataclass
from typing import Optional

from .pay_engine import validate_wage
from .rules import DEFAULT_RULES, PayrollRules, is_eligible_for_holiday_pay, round_hours, round_won


# (upper bound of monthly gross, marginal rate, base tax, deduction per dependent)
INCOME_TAX_BRACKETS = [
    (1_000_000, 0.0, 0, 0),
    (2_000_000, 0.06, 0, 10_000),
    (3_000_000, 0.15, 60_000, 15_000),
    (None, 0.24, 210_000, 20_000),
]
LOCAL_TAX_RATE = 0.1  # of income tax


@dataclass(frozen=True)
class MonthlySalaryEstimate:
    gross_salary: int
    total_working_hours: float  # including paid holiday hours
    holiday_hours: float        # per month


@dataclass(frozen=True)
class EmployeeInsurance:
    national_pension: int
    health_insurance: int
    long_term_care: int
    employment: int
    total: int


@dataclass(frozen=True)
class EmployerInsurance:
    national_pension: int
    health_insurance: int
    long_term_care: int
    employment: int
    employment_stability: int
    workers_compensation: int
    total: int


@dataclass(frozen=True)
class InsuranceEstimate:
    employee: EmployeeInsurance
    employer: EmployerInsurance


@dataclass(frozen=True)
class NetSalaryEstimate:
    gross_salary: int
    employee_insurance: int
    income_tax: int
    local_tax: int
    total_deductions: int
    net_salary: int


@dataclass(frozen=True)
class EmployerCostEstimate:
    gross_salary: int
    employer_insurance: int
    total_cost: int


def holiday_hours(weekly_hours: float, rules: PayrollRules = DEFAULT_RULES) -> float:
    """Paid weekly-holiday hours, proportional to weekly hours below the full-time week."""
    if not is_eligible_for_holiday_pay(weekly_hours, rules):
        return 0.0
    full_week = rules.overtime_weekly_threshold_hours
    if weekly_hours >= full_week:
        return float(rules.weekly_holiday_hours)
    return weekly_hours / full_week * rules.weekly_holiday_hours


def estimate_monthly_salary(
    weekly_hours: float,
    hourly_wage: Optional[float] = None,
    rules: PayrollRules = DEFAULT_RULES,
) -> MonthlySalaryEstimate:
    """Monthly gross = (weekly hours + holiday hours) x average weeks per month x wage."""
    if hourly_wage is None:
        hourly_wage = rules.minimum_wage
    validate_wage(hourly_wage)

    monthly_holiday_hours = holiday_hours(weekly_hours, rules) * rules.average_weeks_per_month
    total_hours = weekly_hours * rules.average_weeks_per_month + monthly_holiday_hours

    return MonthlySalaryEstimate(
        gross_salary=round_won(total_hours * hourly_wage),
        total_working_hours=round_hours(total_hours),
        holiday_hours=round_hours(monthly_holiday_hours),
    )


def estimate_insurance(gross_salary: float, rules: PayrollRules = DEFAULT_RULES) -> InsuranceEstimate:
    rates = rules.insurance

    pension = round_won(gross_salary * rates.national_pension)
    health = round_won(gross_salary * rates.health_insurance)
    care = round_won(health * rates.long_term_care)
    employment = round_won(gross_salary * rates.employment)
    stability = round_won(gross_salary * rates.employment_stability)
    compensation = round_won(gross_salary * rates.workers_compensation)

    return InsuranceEstimate(
        employee=EmployeeInsurance(
            national_pension=pension,
            health_insurance=health,
            long_term_care=care,
            employment=employment,
            total=pension + health + care + employment,
        ),
        employer=EmployerInsurance(
            national_pension=pension,
            health_insurance=health,
            long_term_care=care,
            employment=employment,
            employment_stability=stability,
            workers_compensation=compensation,
            total=pension + health + care + employment + stability + compensation,
        ),
    )


def estimate_income_tax(gross_salary: float, dependents: int = 1) -> tuple[int, int]:
    """
    Approximate monthly income tax and local income tax.

    Returns:
        (income_tax, local_tax)
    """
    lower = 0
    tax = 0.0
    for upper, rate, base, per_dependent in INCOME_TAX_BRACKETS:
        if upper is None or gross_salary <= upper:
            if rate:
                tax = max(0.0, (gross_salary - lower) * rate + base - dependents * per_dependent)
            break
        lower = upper

    return round_won(tax), round_won(tax * LOCAL_TAX_RATE)


def estimate_net_salary(
    gross_salary: int,
    dependents: int = 1,
    rules: PayrollRules = DEFAULT_RULES,
) -> NetSalaryEstimate:
    insurance = estimate_insurance(gross_salary, rules)
    income_tax, local_tax = estimate_income_tax(gross_salary, dependents)

    deductions = insurance.employee.total + income_tax + local_tax
    return NetSalaryEstimate(
        gross_salary=gross_salary,
        employee_insurance=insurance.employee.total,
        income_tax=income_tax,
        local_tax=local_tax,
        total_deductions=deductions,
        net_salary=max(0, gross_salary - deductions),
    )


def estimate_employer_cost(gross_salary: int, rules: PayrollRules = DEFAULT_RULES) -> EmployerCostEstimate:
    employer_insurance = estimate_insurance(gross_salary, rules).employer.total
    return EmployerCostEstimate(
        gross_salary=gross_salary,
        employer_insurance=employer_insurance,
        total_cost=gross_salary + employer_insurance,
    )
