from pydantic import BaseModel
from datetime import date
from typing import List, Optional


class BreakPeriodSchema(BaseModel):
    start: str
    end: str
    name: str = ""


class ShiftHoursRequest(BaseModel):
    start_time: str
    end_time: str
    break_periods: List[BreakPeriodSchema] = []
    crosses_midnight: Optional[bool] = None


class ShiftHoursResponse(BaseModel):
    total_hours: float
    regular_hours: float
    overtime_hours: float
    night_hours: float
    is_night_shift: bool


class PayrollEmployee(BaseModel):
    id: int
    store_id: int
    name: str
    position: Optional[str] = None
    hourly_wage: float


class PayrollDataResponse(BaseModel):
    employee: PayrollEmployee
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


class PayrollTotalsResponse(BaseModel):
    total_employees: int
    total_hours: float
    total_regular_hours: float
    total_overtime_hours: float
    total_night_hours: float
    total_regular_pay: int
    total_overtime_pay: int
    total_night_pay: int
    total_holiday_pay: int
    total_pay: int
    total_monthly_salary: int
    total_net_salary: int


class PayrollStore(BaseModel):
    id: int
    name: str


class StorePayrollResponse(BaseModel):
    store: PayrollStore
    template_name: Optional[str] = None
    start_date: date
    end_date: date
    payroll_data: List[PayrollDataResponse]
    totals: PayrollTotalsResponse


class PayrollOverviewResponse(BaseModel):
    start_date: date
    end_date: date
    stores: List[StorePayrollResponse]
    grand_totals: PayrollTotalsResponse


class ExceptionAdjustmentResponse(BaseModel):
    employee_id: int
    date: date
    exception_type: str
    original_hours: float
    adjusted_hours: float
    hours_difference: float
    pay_difference: int


class MonthlyEmployeeResponse(BaseModel):
    employee: PayrollEmployee
    monthly_hours: float
    final_monthly_hours: float
    weekly_hours: float
    gross_salary: int
    holiday_hours: float
    net_salary: int
    total_deductions: int
    adjustments: List[ExceptionAdjustmentResponse]
    total_pay: int


class MonthlyPayrollResponse(BaseModel):
    store: PayrollStore
    template_name: Optional[str] = None
    year: int
    month: int
    employees: List[MonthlyEmployeeResponse]
    total_employees: int
    total_base_pay: int
    total_exception_adjustments: int
    total_final_pay: int


class PaymentItemResponse(BaseModel):
    id: str
    name: str
    amount: int
    category: str
    is_required: bool


class DeductionItemResponse(BaseModel):
    id: str
    name: str
    amount: int
    category: str
    rate: Optional[float] = None
    is_auto_calculated: bool


class PayrollStatementResponse(BaseModel):
    company_name: str
    employee_id: int
    employee_name: str
    position: str
    period_start: date
    period_end: date
    payment_date: date
    payment_items: List[PaymentItemResponse]
    deduction_items: List[DeductionItemResponse]
    total_payment: int
    total_deduction: int
    net_payment: int
