from sqlalchemy import Integer, String, DateTime, Boolean, JSON, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from storepay.db.database import Base


class WeeklyTemplates(Base):
    __tablename__ = "weekly_templates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    store_id: Mapped[int] = mapped_column(Integer, ForeignKey("stores.id"), nullable=False, index=True)
    template_name: Mapped[str] = mapped_column(String(100), nullable=False)
    # weekday -> {is_open, break_periods, employees: {employee_id: {start_time, end_time, break_periods?}}}
    schedule_data: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
