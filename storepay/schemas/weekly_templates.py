from pydantic import BaseModel
from datetime import datetime
from typing import Optional


class WeeklyTemplateBase(BaseModel):
    store_id: int
    template_name: str
    schedule_data: dict
    is_active: bool = True


class WeeklyTemplateCreate(WeeklyTemplateBase):
    pass


class WeeklyTemplateUpdate(BaseModel):
    template_name: Optional[str] = None
    schedule_data: Optional[dict] = None
    is_active: Optional[bool] = None


class WeeklyTemplateResponse(WeeklyTemplateBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
