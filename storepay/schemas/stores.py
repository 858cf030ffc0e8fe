from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class StoreBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    # 15, 30 or 60, checked by the route
    time_slot_minutes: int = 30


class StoreCreate(StoreBase):
    pass


class StoreUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    time_slot_minutes: Optional[int] = None


class StoreResponse(StoreBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
