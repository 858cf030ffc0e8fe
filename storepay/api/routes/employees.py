import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from storepay.api.deps import get_db, get_payroll_rules
from storepay.db.models.employees import Employees
from storepay.db.models.stores import Stores
from storepay.schemas.employees import EmployeeCreate, EmployeeUpdate, EmployeeResponse
from storepay.services.payroll import PayrollRules, is_below_minimum_wage

router = APIRouter(prefix="/employees", tags=["employees"])

logger = logging.getLogger(__name__)


def _warn_if_below_minimum(name: str, hourly_wage: int, rules: PayrollRules) -> None:
    if is_below_minimum_wage(hourly_wage, rules):
        logger.warning(
            f"Employee {name} hourly wage {hourly_wage} is below minimum wage {rules.minimum_wage}"
        )


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    store = db.query(Stores).filter(Stores.id == payload.store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")

    _warn_if_below_minimum(payload.name, payload.hourly_wage, rules)

    employee = Employees(**payload.model_dump())
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee


@router.get("", response_model=List[EmployeeResponse])
def list_employees(
    store_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
):
    query = db.query(Employees)
    if store_id:
        query = query.filter(Employees.store_id == store_id)
    return query.order_by(Employees.name).offset(skip).limit(limit).all()


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
):
    employee = db.query(Employees).filter(Employees.id == employee_id).first()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")
    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    db: Session = Depends(get_db),
    rules: PayrollRules = Depends(get_payroll_rules),
):
    employee = db.query(Employees).filter(Employees.id == employee_id).first()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    update_data = payload.model_dump(exclude_unset=True)

    # Validate store if being updated
    if "store_id" in update_data:
        store = db.query(Stores).filter(Stores.id == update_data["store_id"]).first()
        if not store:
            raise HTTPException(status_code=404, detail="Store not found")

    if update_data.get("hourly_wage") is not None:
        _warn_if_below_minimum(employee.name, update_data["hourly_wage"], rules)

    for field, value in update_data.items():
        setattr(employee, field, value)

    db.commit()
    db.refresh(employee)
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
):
    employee = db.query(Employees).filter(Employees.id == employee_id).first()
    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    db.delete(employee)
    db.commit()
