from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storepay.api.deps import get_db
from storepay.db.models.employees import Employees
from storepay.db.models.schedule_exceptions import ScheduleExceptions, ScheduleExceptionType
from storepay.schemas.schedule_exceptions import (
    ScheduleExceptionCreate,
    ScheduleExceptionUpdate,
    ScheduleExceptionResponse,
)
from storepay.services.payroll import PayrollValidationError, parse_time

router = APIRouter(prefix="/schedule-exceptions", tags=["schedule-exceptions"])


def _validate_times(
    exception_type: ScheduleExceptionType,
    start_time: Optional[str],
    end_time: Optional[str],
) -> None:
    if exception_type == ScheduleExceptionType.CANCEL:
        return
    if not start_time or not end_time:
        raise HTTPException(
            status_code=422,
            detail=f"{exception_type.value} exceptions need start_time and end_time",
        )
    try:
        parse_time(start_time)
        parse_time(end_time)
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("", response_model=ScheduleExceptionResponse, status_code=status.HTTP_201_CREATED)
def create_schedule_exception(
    payload: ScheduleExceptionCreate,
    db: Session = Depends(get_db),
):
    employee = db.query(Employees).filter(Employees.id == payload.employee_id).first()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    if employee.store_id != payload.store_id:
        raise HTTPException(status_code=400, detail="Employee does not belong to this store")

    _validate_times(payload.exception_type, payload.start_time, payload.end_time)

    exception = ScheduleExceptions(**payload.model_dump())
    db.add(exception)
    db.commit()
    db.refresh(exception)
    return exception


@router.get("", response_model=List[ScheduleExceptionResponse])
def list_schedule_exceptions(
    store_id: Optional[int] = None,
    employee_id: Optional[int] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    db: Session = Depends(get_db),
):
    query = db.query(ScheduleExceptions)
    if store_id:
        query = query.filter(ScheduleExceptions.store_id == store_id)
    if employee_id:
        query = query.filter(ScheduleExceptions.employee_id == employee_id)
    if start_date:
        query = query.filter(ScheduleExceptions.work_date >= start_date)
    if end_date:
        query = query.filter(ScheduleExceptions.work_date <= end_date)
    return query.order_by(ScheduleExceptions.work_date, ScheduleExceptions.id).all()


@router.get("/{exception_id}", response_model=ScheduleExceptionResponse)
def get_schedule_exception(
    exception_id: int,
    db: Session = Depends(get_db),
):
    exception = db.query(ScheduleExceptions).filter(ScheduleExceptions.id == exception_id).first()
    if not exception:
        raise HTTPException(status_code=404, detail="Schedule exception not found")
    return exception


@router.put("/{exception_id}", response_model=ScheduleExceptionResponse)
def update_schedule_exception(
    exception_id: int,
    payload: ScheduleExceptionUpdate,
    db: Session = Depends(get_db),
):
    exception = db.query(ScheduleExceptions).filter(ScheduleExceptions.id == exception_id).first()
    if not exception:
        raise HTTPException(status_code=404, detail="Schedule exception not found")

    update_data = payload.model_dump(exclude_unset=True)
    _validate_times(
        update_data.get("exception_type") or exception.exception_type,
        update_data.get("start_time", exception.start_time),
        update_data.get("end_time", exception.end_time),
    )

    for field, value in update_data.items():
        setattr(exception, field, value)

    db.commit()
    db.refresh(exception)
    return exception


@router.delete("/{exception_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule_exception(
    exception_id: int,
    db: Session = Depends(get_db),
):
    exception = db.query(ScheduleExceptions).filter(ScheduleExceptions.id == exception_id).first()
    if not exception:
        raise HTTPException(status_code=404, detail="Schedule exception not found")

    db.delete(exception)
    db.commit()
