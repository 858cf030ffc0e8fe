"""
Pay components from aggregated hours.

Every monetary component is rounded to the whole won on its own and the total
is the sum of the rounded components, so the breakdown always adds up.
"""

from typing import Optional

from .errors import PayrollValidationError
from .rules import DEFAULT_RULES, PayrollRules, is_eligible_for_holiday_pay, round_won
from .types import PayComponents, WeeklyHours


def validate_wage(hourly_wage: float) -> None:
    if hourly_wage is None or hourly_wage < 0:
        raise PayrollValidationError(f"Hourly wage must be non-negative, got {hourly_wage}")


def validate_hours(hours: WeeklyHours) -> None:
    for name in ("total_hours", "regular_hours", "overtime_hours", "night_hours"):
        value = getattr(hours, name)
        if value < 0:
            raise PayrollValidationError(f"{name} cannot be negative, got {value}")


def compute_pay(
    hours: WeeklyHours,
    hourly_wage: float,
    weekly_hours_for_eligibility: Optional[float] = None,
    rules: PayrollRules = DEFAULT_RULES,
) -> PayComponents:
    """
    Convert regular/overtime/night hours into pay.

    Night pay is an additive premium: night hours are already counted in the
    regular or overtime band. The weekly-holiday allowance is one fifth of
    regular + overtime pay when the employee is eligible.
    """
    validate_wage(hourly_wage)
    validate_hours(hours)

    if weekly_hours_for_eligibility is None:
        weekly_hours_for_eligibility = hours.total_hours
    eligible = is_eligible_for_holiday_pay(weekly_hours_for_eligibility, rules)

    regular = hours.regular_hours * hourly_wage
    overtime = hours.overtime_hours * hourly_wage * rules.overtime_multiplier
    night = hours.night_hours * hourly_wage * rules.night_differential_multiplier
    holiday = (regular + overtime) / 5 if eligible else 0

    regular_pay = round_won(regular)
    overtime_pay = round_won(overtime)
    night_pay = round_won(night)
    holiday_pay = round_won(holiday)

    return PayComponents(
        regular_pay=regular_pay,
        overtime_pay=overtime_pay,
        night_pay=night_pay,
        holiday_pay=holiday_pay,
        total_pay=regular_pay + overtime_pay + night_pay + holiday_pay,
        is_eligible_for_holiday_pay=eligible,
    )


def monthly_salary(
    weekly_hours: float,
    hourly_wage: float,
    is_eligible: bool,
    rules: PayrollRules = DEFAULT_RULES,
) -> int:
    """Projected monthly gross: (weekly hours + paid holiday hours) x weeks/month x wage."""
    holiday_hours = rules.weekly_holiday_hours if is_eligible else 0
    return round_won((weekly_hours + holiday_hours) * rules.average_weeks_per_month * hourly_wage)


def net_salary(monthly: float, rules: PayrollRules = DEFAULT_RULES) -> int:
    """
    Flat-rate estimate of take-home pay.

    Not a payroll-compliant figure: insurance and income tax are single flat
    percentages. See deductions.estimate_net_salary for the itemised estimate.
    """
    return round_won(monthly * (1 - (rules.flat_insurance_rate + rules.flat_income_tax_rate)))
