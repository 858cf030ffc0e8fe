"""
Internal data types for payroll calculation.
Plain values, decoupled from SQLAlchemy models so the calculation stays pure.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class ExceptionType(str, Enum):
    CANCEL = "CANCEL"
    OVERRIDE = "OVERRIDE"
    EXTRA = "EXTRA"

    @classmethod
    def _missing_(cls, value):
        # older exception records call extra work ADDITIONAL
        if value == "ADDITIONAL":
            return cls.EXTRA
        return None


class PayPeriod(str, Enum):
    CURRENT_WEEK = "current-week"
    LAST_WEEK = "last-week"
    CURRENT_MONTH = "current-month"


class HolidayPayFilter(str, Enum):
    ALL = "all"
    ELIGIBLE = "holiday-eligible"
    NOT_ELIGIBLE = "holiday-not-eligible"


@dataclass(frozen=True)
class BreakPeriod:
    start: str  # "HH:MM"
    end: str
    name: str = ""


@dataclass(frozen=True)
class Employee:
    id: int
    store_id: int
    hourly_wage: float
    name: str = ""
    position: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True)
class Store:
    id: int
    name: str


@dataclass(frozen=True)
class Shift:
    """One continuous scheduled work interval for one employee on one date."""
    employee_id: int
    date: date
    start_time: str  # "HH:MM"
    end_time: str
    break_periods: list[BreakPeriod] = field(default_factory=list)
    store_id: Optional[int] = None
    # None = infer from the clock (end <= start means the shift runs into the next day)
    crosses_midnight: Optional[bool] = None


@dataclass(frozen=True)
class ShiftHours:
    total_hours: float
    regular_hours: float  # daily split
    overtime_hours: float
    night_hours: float
    is_night_shift: bool


@dataclass(frozen=True)
class WeeklyHours:
    total_hours: float
    regular_hours: float
    overtime_hours: float
    night_hours: float
    shift_count: int = 0


@dataclass(frozen=True)
class PayComponents:
    regular_pay: int
    overtime_pay: int
    night_pay: int
    holiday_pay: int
    total_pay: int
    is_eligible_for_holiday_pay: bool


@dataclass(frozen=True)
class PayrollData:
    """Pay breakdown for one employee over one period."""
    employee: Employee
    weekly_hours: float
    regular_hours: float
    overtime_hours: float
    night_hours: float
    regular_pay: int
    overtime_pay: int
    night_pay: int
    holiday_pay: int
    total_pay: int
    is_eligible_for_holiday_pay: bool
    monthly_salary: int
    net_salary: int


@dataclass(frozen=True)
class PayrollTotals:
    total_employees: int = 0
    total_hours: float = 0.0
    total_regular_hours: float = 0.0
    total_overtime_hours: float = 0.0
    total_night_hours: float = 0.0
    total_regular_pay: int = 0
    total_overtime_pay: int = 0
    total_night_pay: int = 0
    total_holiday_pay: int = 0
    total_pay: int = 0
    total_monthly_salary: int = 0
    total_net_salary: int = 0


@dataclass(frozen=True)
class StorePayrollData:
    store: Store
    payroll_data: list[PayrollData]
    totals: PayrollTotals
    template_name: Optional[str] = None


@dataclass(frozen=True)
class EmployeeSlot:
    """An employee's assignment on one template day."""
    start_time: str
    end_time: str
    # None = use the day's break periods
    break_periods: Optional[list[BreakPeriod]] = None


@dataclass(frozen=True)
class DayTemplate:
    is_open: bool
    break_periods: list[BreakPeriod] = field(default_factory=list)
    assignments: dict[int, EmployeeSlot] = field(default_factory=dict)  # employee_id -> slot


@dataclass(frozen=True)
class WeeklyTemplate:
    id: int
    store_id: int
    name: str
    days: dict[int, DayTemplate] = field(default_factory=dict)  # 0=Monday .. 6=Sunday


@dataclass(frozen=True)
class ScheduleException:
    employee_id: int
    date: date
    exception_type: ExceptionType
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None
    store_id: Optional[int] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class ExceptionAdjustment:
    employee_id: int
    date: date
    exception_type: ExceptionType
    original_hours: float
    adjusted_hours: float
    hours_difference: float
    pay_difference: int


@dataclass
class PayrollContext:
    """All data needed to compute payroll for one store/period."""
    store: Store
    start_date: date
    end_date: date
    employees: list[Employee]
    shifts: list[Shift]
    template: Optional[WeeklyTemplate] = None
    exceptions: list[ScheduleException] = field(default_factory=list)

    @property
    def template_name(self) -> Optional[str]:
        return self.template.name if self.template else None
