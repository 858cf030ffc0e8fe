import dataclasses
import logging
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storepay.api.deps import get_db, get_payroll_rules
from storepay.schemas.payroll import (
    MonthlyPayrollResponse,
    PayrollOverviewResponse,
    PayrollStatementResponse,
    ShiftHoursRequest,
    ShiftHoursResponse,
    StorePayrollResponse,
)
from storepay.services.payroll import (
    BreakPeriod,
    HolidayPayFilter,
    OvertimeBasis,
    PayPeriod,
    PayrollRules,
    PayrollValidationError,
    StorePayrollData,
    build_statement,
    calculate_payroll,
    calculate_store_monthly_payroll,
    compute_shift,
    filter_payroll_data,
    period_bounds,
)
from storepay.services.payroll.monthly import MonthlyEmployeePayroll, MonthlyPayrollSummary

router = APIRouter(prefix="/payroll", tags=["payroll"])

logger = logging.getLogger(__name__)


def _resolve_period(
    period: Optional[PayPeriod],
    start_date: Optional[date],
    end_date: Optional[date],
) -> tuple[date, date]:
    """Explicit dates win over a named period; default is the current week."""
    if start_date is not None or end_date is not None:
        if start_date is None or end_date is None:
            raise HTTPException(status_code=422, detail="start_date and end_date must be given together")
        return start_date, end_date
    return period_bounds(period or PayPeriod.CURRENT_WEEK)


def _with_basis(rules: PayrollRules, overtime_basis: Optional[OvertimeBasis]) -> PayrollRules:
    if overtime_basis is None:
        return rules
    return dataclasses.replace(rules, overtime_basis=overtime_basis)


def _store_response(result: StorePayrollData, start: date, end: date) -> dict:
    return {
        "store": dataclasses.asdict(result.store),
        "template_name": result.template_name,
        "start_date": start,
        "end_date": end,
        "payroll_data": [dataclasses.asdict(d) for d in result.payroll_data],
        "totals": dataclasses.asdict(result.totals),
    }


def _monthly_employee_response(result: MonthlyEmployeePayroll) -> dict:
    return {
        "employee": dataclasses.asdict(result.employee),
        "monthly_hours": result.monthly_hours,
        "final_monthly_hours": result.final_monthly_hours,
        "weekly_hours": result.weekly_hours,
        "gross_salary": result.monthly_salary.gross_salary,
        "holiday_hours": result.monthly_salary.holiday_hours,
        "net_salary": result.net_salary.net_salary,
        "total_deductions": result.net_salary.total_deductions,
        "adjustments": [
            {**dataclasses.asdict(a), "exception_type": a.exception_type.value}
            for a in result.adjustments
        ],
        "total_pay": result.total_pay,
    }


def _monthly_summary(
    db: Session, store_id: int, year: int, month: int, rules: PayrollRules
) -> MonthlyPayrollSummary:
    try:
        return calculate_store_monthly_payroll(db, store_id, year, month, rules)
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/shift-hours", response_model=ShiftHoursResponse)
def preview_shift_hours(
    payload: ShiftHoursRequest,
    rules: PayrollRules = Depends(get_payroll_rules),
):
    breaks = [BreakPeriod(start=b.start, end=b.end, name=b.name) for b in payload.break_periods]
    try:
        hours = compute_shift(payload.start_time, payload.end_time, breaks, rules, payload.crosses_midnight)
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return dataclasses.asdict(hours)


@router.get("", response_model=PayrollOverviewResponse)
def get_payroll_overview(
    store_ids: List[int] = Query(...),
    period: Optional[PayPeriod] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    overtime_basis: Optional[OvertimeBasis] = None,
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    start, end = _resolve_period(period, start_date, end_date)
    try:
        results, totals = calculate_payroll(db, store_ids, start, end, _with_basis(rules, overtime_basis))
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return {
        "start_date": start,
        "end_date": end,
        "stores": [_store_response(r, start, end) for r in results],
        "grand_totals": dataclasses.asdict(totals),
    }


@router.get("/stores/{store_id}", response_model=StorePayrollResponse)
def get_store_payroll(
    store_id: int,
    period: Optional[PayPeriod] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    overtime_basis: Optional[OvertimeBasis] = None,
    search: str = "",
    status: HolidayPayFilter = HolidayPayFilter.ALL,
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    """Store payroll for a period. search/status narrow the employee list only, totals cover the whole store."""
    start, end = _resolve_period(period, start_date, end_date)
    try:
        results, _ = calculate_payroll(db, [store_id], start, end, _with_basis(rules, overtime_basis))
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))

    result = results[0]
    filtered = dataclasses.replace(
        result, payroll_data=filter_payroll_data(result.payroll_data, search, status)
    )
    return _store_response(filtered, start, end)


@router.get("/stores/{store_id}/monthly", response_model=MonthlyPayrollResponse)
def get_store_monthly_payroll(
    store_id: int,
    year: int = Query(..., ge=2000, le=2100),
    month: int = Query(..., ge=1, le=12),
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    summary = _monthly_summary(db, store_id, year, month, rules)
    return {
        "store": dataclasses.asdict(summary.store),
        "template_name": summary.template_name,
        "year": summary.year,
        "month": summary.month,
        "employees": [_monthly_employee_response(e) for e in summary.employees],
        "total_employees": summary.total_employees,
        "total_base_pay": summary.total_base_pay,
        "total_exception_adjustments": summary.total_exception_adjustments,
        "total_final_pay": summary.total_final_pay,
    }


@router.get("/stores/{store_id}/employees/{employee_id}/statement", response_model=PayrollStatementResponse)
def get_payroll_statement(
    store_id: int,
    employee_id: int,
    year: int = Query(..., ge=2000, le=2100),
    month: int = Query(..., ge=1, le=12),
    payment_date: Optional[date] = None,
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    summary = _monthly_summary(db, store_id, year, month, rules)
    result = next((e for e in summary.employees if e.employee.id == employee_id), None)
    if result is None:
        raise HTTPException(status_code=404, detail="Employee not found in store payroll")

    logger.info(f"Building statement for employee {employee_id} {year}-{month:02d}")
    statement = build_statement(result, year, month, summary.store.name, payment_date, rules)
    return dataclasses.asdict(statement)
