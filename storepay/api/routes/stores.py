from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storepay.api.deps import get_db
from storepay.db.models.employees import Employees
from storepay.db.models.stores import Stores
from storepay.db.models.weekly_templates import WeeklyTemplates
from storepay.schemas.stores import StoreCreate, StoreUpdate, StoreResponse

router = APIRouter(prefix="/stores", tags=["stores"])

# schedule grid granularity offered to store owners
ALLOWED_TIME_SLOT_MINUTES = (15, 30, 60)


def _check_time_slot(minutes: Optional[int]) -> None:
    if minutes is not None and minutes not in ALLOWED_TIME_SLOT_MINUTES:
        raise HTTPException(
            status_code=422,
            detail=f"time_slot_minutes must be one of {', '.join(map(str, ALLOWED_TIME_SLOT_MINUTES))}",
        )


def _check_name_free(db: Session, name: str, store_id: Optional[int] = None) -> None:
    query = db.query(Stores).filter(Stores.name == name)
    if store_id is not None:
        query = query.filter(Stores.id != store_id)
    if query.first():
        raise HTTPException(status_code=400, detail="Store name already exists")


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
def create_store(
    payload: StoreCreate,
    db: Session = Depends(get_db),
):
    _check_time_slot(payload.time_slot_minutes)
    _check_name_free(db, payload.name)

    store = Stores(**payload.model_dump())
    db.add(store)
    db.commit()
    db.refresh(store)
    return store


@router.get("", response_model=List[StoreResponse])
def list_stores(
    name: Optional[str] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    query = db.query(Stores)
    if name:
        query = query.filter(Stores.name.ilike(f"%{name}%"))
    return query.order_by(Stores.id).offset(skip).limit(limit).all()


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(
    store_id: int,
    db: Session = Depends(get_db),
):
    store = db.query(Stores).filter(Stores.id == store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store


@router.put("/{store_id}", response_model=StoreResponse)
def update_store(
    store_id: int,
    payload: StoreUpdate,
    db: Session = Depends(get_db),
):
    store = db.query(Stores).filter(Stores.id == store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    update_data = payload.model_dump(exclude_unset=True)
    _check_time_slot(update_data.get("time_slot_minutes"))
    if update_data.get("name"):
        _check_name_free(db, update_data["name"], store_id)

    for field, value in update_data.items():
        setattr(store, field, value)

    db.commit()
    db.refresh(store)
    return store


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_store(
    store_id: int,
    db: Session = Depends(get_db),
):
    store = db.query(Stores).filter(Stores.id == store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    # payroll history hangs off employees and templates
    has_employees = db.query(Employees).filter(Employees.store_id == store_id).first()
    has_templates = db.query(WeeklyTemplates).filter(WeeklyTemplates.store_id == store_id).first()
    if has_employees or has_templates:
        raise HTTPException(
            status_code=400,
            detail="Store still has employees or weekly templates; remove them first",
        )

    db.delete(store)
    db.commit()
