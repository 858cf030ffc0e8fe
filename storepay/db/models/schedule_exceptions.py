from sqlalchemy import Integer, String, Date, DateTime, ForeignKey, Enum as SQLEnum, Index, func
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date, datetime
from enum import Enum
from typing import Optional
from storepay.db.database import Base


class ScheduleExceptionType(str, Enum):
    CANCEL = "CANCEL"
    OVERRIDE = "OVERRIDE"
    EXTRA = "EXTRA"


class ScheduleExceptions(Base):
    __tablename__ = "schedule_exceptions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id"), nullable=False)
    employee_id: Mapped[int] = mapped_column(Integer, ForeignKey("employees.id"), nullable=False)
    template_id: Mapped[Optional[int]] = mapped_column(Integer, ForeignKey("weekly_templates.id"), nullable=True)
    work_date: Mapped[date] = mapped_column(Date, nullable=False)
    exception_type: Mapped[ScheduleExceptionType] = mapped_column(SQLEnum(ScheduleExceptionType, name="schedule_exception_type_enum"), nullable=False)
    start_time: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)  # HH:MM
    end_time: Mapped[Optional[str]] = mapped_column(String(8), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_schedule_exceptions_store_date", "store_id", "work_date"),
    )
