from pydantic import BaseModel, Field
from datetime import datetime, date
from typing import Optional


class EmployeeBase(BaseModel):
    store_id: int
    name: str
    position: Optional[str] = None
    hourly_wage: int = Field(ge=0)
    phone: Optional[str] = None
    start_date: Optional[date] = None
    is_active: bool = True


class EmployeeCreate(EmployeeBase):
    pass


class EmployeeUpdate(BaseModel):
    store_id: Optional[int] = None
    name: Optional[str] = None
    position: Optional[str] = None
    hourly_wage: Optional[int] = Field(default=None, ge=0)
    phone: Optional[str] = None
    start_date: Optional[date] = None
    is_active: Optional[bool] = None


class EmployeeResponse(EmployeeBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
