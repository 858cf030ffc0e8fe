"""
Statutory constants and threshold predicates.

All calculation functions take a PayrollRules value instead of reading module
globals, so yearly updates (minimum wage, insurance rates) are a config change.
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum

from .errors import PayrollValidationError


MINIMUM_WAGE = 10030  # KRW/hour, 2025
HOLIDAY_PAY_ELIGIBILITY_WEEKLY_HOURS = 15
OVERTIME_WEEKLY_THRESHOLD_HOURS = 40
OVERTIME_DAILY_THRESHOLD_HOURS = 8
OVERTIME_MULTIPLIER = 1.5
NIGHT_DIFFERENTIAL_MULTIPLIER = 0.5  # premium on top of hours already paid
NIGHT_WINDOW_START = "22:00"
NIGHT_WINDOW_END = "06:00"
AVERAGE_WEEKS_PER_MONTH = 4.345  # 365 / 7 / 12
WEEKLY_HOLIDAY_HOURS = 8
FLAT_INSURANCE_RATE = 0.089
FLAT_INCOME_TAX_RATE = 0.03


class OvertimeBasis(str, Enum):
    DAILY = "DAILY"    # each shift split at the daily threshold
    WEEKLY = "WEEKLY"  # the period total split at the weekly threshold


@dataclass(frozen=True)
class InsuranceRates:
    # employee share
    national_pension: float = 0.045
    health_insurance: float = 0.03545
    long_term_care: float = 0.1295  # fraction of the health insurance premium
    employment: float = 0.009
    # employer-only
    employment_stability: float = 0.0025  # under 150 employees
    workers_compensation: float = 0.007   # industry average


@dataclass(frozen=True)
class PayrollRules:
    minimum_wage: int = MINIMUM_WAGE
    holiday_pay_eligibility_weekly_hours: float = HOLIDAY_PAY_ELIGIBILITY_WEEKLY_HOURS
    overtime_weekly_threshold_hours: float = OVERTIME_WEEKLY_THRESHOLD_HOURS
    overtime_daily_threshold_hours: float = OVERTIME_DAILY_THRESHOLD_HOURS
    overtime_multiplier: float = OVERTIME_MULTIPLIER
    night_differential_multiplier: float = NIGHT_DIFFERENTIAL_MULTIPLIER
    night_window_start: str = NIGHT_WINDOW_START
    night_window_end: str = NIGHT_WINDOW_END
    average_weeks_per_month: float = AVERAGE_WEEKS_PER_MONTH
    weekly_holiday_hours: float = WEEKLY_HOLIDAY_HOURS
    flat_insurance_rate: float = FLAT_INSURANCE_RATE
    flat_income_tax_rate: float = FLAT_INCOME_TAX_RATE
    overtime_basis: OvertimeBasis = OvertimeBasis.WEEKLY
    deduct_breaks_from_night_hours: bool = False
    insurance: InsuranceRates = field(default_factory=InsuranceRates)

    @classmethod
    def from_settings(cls, settings) -> "PayrollRules":
        """Build rules from the application Settings (PAYROLL_* fields)."""
        return cls(
            minimum_wage=settings.PAYROLL_MINIMUM_WAGE,
            holiday_pay_eligibility_weekly_hours=settings.PAYROLL_HOLIDAY_PAY_ELIGIBILITY_WEEKLY_HOURS,
            overtime_weekly_threshold_hours=settings.PAYROLL_OVERTIME_WEEKLY_THRESHOLD_HOURS,
            overtime_daily_threshold_hours=settings.PAYROLL_OVERTIME_DAILY_THRESHOLD_HOURS,
            overtime_multiplier=settings.PAYROLL_OVERTIME_MULTIPLIER,
            night_differential_multiplier=settings.PAYROLL_NIGHT_DIFFERENTIAL_MULTIPLIER,
            night_window_start=settings.PAYROLL_NIGHT_WINDOW_START,
            night_window_end=settings.PAYROLL_NIGHT_WINDOW_END,
            average_weeks_per_month=settings.PAYROLL_AVERAGE_WEEKS_PER_MONTH,
            flat_insurance_rate=settings.PAYROLL_FLAT_INSURANCE_RATE,
            flat_income_tax_rate=settings.PAYROLL_FLAT_INCOME_TAX_RATE,
            overtime_basis=OvertimeBasis(settings.PAYROLL_OVERTIME_BASIS.upper()),
            deduct_breaks_from_night_hours=settings.PAYROLL_DEDUCT_BREAKS_FROM_NIGHT_HOURS,
        )


DEFAULT_RULES = PayrollRules()


def round_hours(hours: float) -> float:
    """Round to 2 decimal places, half-up."""
    return float(Decimal(str(hours)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def round_won(amount: float) -> int:
    """Round a money amount to the nearest whole won, half-up."""
    return int(Decimal(str(amount)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def is_eligible_for_holiday_pay(weekly_hours: float, rules: PayrollRules = DEFAULT_RULES) -> bool:
    return weekly_hours >= rules.holiday_pay_eligibility_weekly_hours


def split_regular_overtime(hours: float, threshold: float) -> tuple[float, float]:
    """
    Split worked hours into (regular, overtime) around a threshold.

    The threshold is either the daily or the weekly one; callers pick the
    granularity, this function never decides it.
    """
    if hours < 0:
        raise PayrollValidationError(f"Worked hours cannot be negative, got {hours}")
    regular = min(hours, threshold)
    overtime = max(hours - threshold, 0)
    return round_hours(regular), round_hours(overtime)


def is_below_minimum_wage(hourly_wage: float, rules: PayrollRules = DEFAULT_RULES) -> bool:
    """Reference check for validation layers. The pay engine does not enforce it."""
    return hourly_wage < rules.minimum_wage
