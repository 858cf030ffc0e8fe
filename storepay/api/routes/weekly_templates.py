from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storepay.api.deps import get_db
from storepay.db.models.stores import Stores
from storepay.db.models.weekly_templates import WeeklyTemplates
from storepay.schemas.weekly_templates import (
    WeeklyTemplateCreate,
    WeeklyTemplateUpdate,
    WeeklyTemplateResponse,
)
from storepay.services.payroll import PayrollValidationError, parse_schedule_data, parse_time
from storepay.services.payroll.intervals import place_breaks, shift_bounds

router = APIRouter(prefix="/weekly-templates", tags=["weekly-templates"])


def _validate_schedule_data(store_id: int, name: str, schedule_data: dict) -> None:
    try:
        template = parse_schedule_data(0, store_id, name, schedule_data, strict=True)
        for day in template.days.values():
            for period in day.break_periods:
                parse_time(period.start)
                parse_time(period.end)
            for slot in day.assignments.values():
                bounds = shift_bounds(slot.start_time, slot.end_time)
                # day-level breaks are clipped per shift; an employee's own breaks must fit
                if slot.break_periods:
                    place_breaks(*bounds, slot.break_periods)
    except PayrollValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("", response_model=WeeklyTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_weekly_template(
    payload: WeeklyTemplateCreate,
    db: Session = Depends(get_db),
):
    store = db.query(Stores).filter(Stores.id == payload.store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    _validate_schedule_data(payload.store_id, payload.template_name, payload.schedule_data)

    template = WeeklyTemplates(**payload.model_dump())
    db.add(template)
    db.commit()
    db.refresh(template)
    return template


@router.get("", response_model=List[WeeklyTemplateResponse])
def list_weekly_templates(
    store_id: Optional[int] = None,
    active_only: bool = False,
    db: Session = Depends(get_db),
):
    query = db.query(WeeklyTemplates)
    if store_id:
        query = query.filter(WeeklyTemplates.store_id == store_id)
    if active_only:
        query = query.filter(WeeklyTemplates.is_active == True)
    return query.order_by(WeeklyTemplates.id).all()


@router.get("/{template_id}", response_model=WeeklyTemplateResponse)
def get_weekly_template(
    template_id: int,
    db: Session = Depends(get_db),
):
    template = db.query(WeeklyTemplates).filter(WeeklyTemplates.id == template_id).first()
    if not template:
        raise HTTPException(status_code=404, detail="Weekly template not found")
    return template


@router.put("/{template_id}", response_model=WeeklyTemplateResponse)
def update_weekly_template(
    template_id: int,
    payload: WeeklyTemplateUpdate,
    db: Session = Depends(get_db),
):
    template = db.query(WeeklyTemplates).filter(WeeklyTemplates.id == template_id).first()
    if not template:
        raise HTTPException(status_code=404, detail="Weekly template not found")

    update_data = payload.model_dump(exclude_unset=True)
    if update_data.get("schedule_data") is not None:
        _validate_schedule_data(
            template.store_id,
            update_data.get("template_name") or template.template_name,
            update_data["schedule_data"],
        )

    for field, value in update_data.items():
        setattr(template, field, value)

    db.commit()
    db.refresh(template)
    return template


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_weekly_template(
    template_id: int,
    db: Session = Depends(get_db),
):
    template = db.query(WeeklyTemplates).filter(WeeklyTemplates.id == template_id).first()
    if not template:
        raise HTTPException(status_code=404, detail="Weekly template not found")

    db.delete(template)
    db.commit()
