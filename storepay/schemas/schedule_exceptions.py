from pydantic import BaseModel
from datetime import datetime, date
from typing import Optional
from storepay.db.models.schedule_exceptions import ScheduleExceptionType


class ScheduleExceptionBase(BaseModel):
    store_id: int
    employee_id: int
    template_id: Optional[int] = None
    work_date: date
    exception_type: ScheduleExceptionType
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None


class ScheduleExceptionCreate(ScheduleExceptionBase):
    pass


class ScheduleExceptionUpdate(BaseModel):
    exception_type: Optional[ScheduleExceptionType] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    notes: Optional[str] = None


class ScheduleExceptionResponse(ScheduleExceptionBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
