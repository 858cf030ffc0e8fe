"""
Data loader for payroll service.
Fetches stores, employees, templates and exceptions and converts them to internal types.
"""

import logging
from datetime import date
from typing import Optional

from sqlalchemy import select, and_
from sqlalchemy.orm import Session

from storepay.db.models.stores import Stores
from storepay.db.models.employees import Employees
from storepay.db.models.weekly_templates import WeeklyTemplates
from storepay.db.models.schedule_exceptions import ScheduleExceptions

from .errors import PayrollValidationError
from .schedule_builder import apply_exceptions, expand_template, parse_schedule_data
from .types import (
    Employee,
    ExceptionType,
    PayrollContext,
    ScheduleException,
    Store,
    WeeklyTemplate,
)


logger = logging.getLogger(__name__)


def load_store(db: Session, store_id: int) -> Store:
    row = db.get(Stores, store_id)
    if row is None:
        raise ValueError(f"Store {store_id} not found")
    return Store(id=row.id, name=row.name)


def load_employees(db: Session, store_id: int) -> list[Employee]:
    """Load active employees for a store."""
    stmt = select(Employees).where(
        and_(
            Employees.store_id == store_id,
            Employees.is_active == True
        )
    ).order_by(Employees.name)
    rows = db.execute(stmt).scalars().all()

    return [
        Employee(
            id=r.id,
            store_id=r.store_id,
            hourly_wage=r.hourly_wage,
            name=r.name,
            position=r.position,
            is_active=r.is_active,
        )
        for r in rows
    ]


def load_active_template(db: Session, store_id: int) -> Optional[WeeklyTemplate]:
    """Load the store's active weekly template (most recently updated wins)."""
    stmt = select(WeeklyTemplates).where(
        and_(
            WeeklyTemplates.store_id == store_id,
            WeeklyTemplates.is_active == True
        )
    ).order_by(WeeklyTemplates.updated_at.desc(), WeeklyTemplates.id.desc())
    row = db.execute(stmt).scalars().first()
    if row is None:
        return None

    return parse_schedule_data(row.id, row.store_id, row.template_name, row.schedule_data)


def load_exceptions(
    db: Session,
    store_id: int,
    start_date: date,
    end_date: date,
) -> list[ScheduleException]:
    """Load schedule exceptions for a store within [start_date, end_date]."""
    stmt = select(ScheduleExceptions).where(
        and_(
            ScheduleExceptions.store_id == store_id,
            ScheduleExceptions.work_date >= start_date,
            ScheduleExceptions.work_date <= end_date,
        )
    ).order_by(ScheduleExceptions.work_date, ScheduleExceptions.id)
    rows = db.execute(stmt).scalars().all()

    return [
        ScheduleException(
            id=r.id,
            store_id=r.store_id,
            employee_id=r.employee_id,
            date=r.work_date,
            exception_type=ExceptionType(r.exception_type.value),
            start_time=r.start_time,
            end_time=r.end_time,
            notes=r.notes,
        )
        for r in rows
    ]


def load_payroll_context(
    db: Session,
    store_id: int,
    start_date: date,
    end_date: date,
) -> PayrollContext:
    """
    Load everything needed to compute payroll for a store/period.

    Shifts are the active template expanded over the period with the period's
    exceptions applied. A store without an active template only gets shifts
    created by OVERRIDE/EXTRA exceptions.
    """
    if end_date < start_date:
        raise PayrollValidationError(f"end_date {end_date} is before start_date {start_date}")

    store = load_store(db, store_id)
    template = load_active_template(db, store_id)
    exceptions = load_exceptions(db, store_id, start_date, end_date)

    base_shifts = expand_template(template, start_date, end_date) if template else []
    shifts = apply_exceptions(base_shifts, exceptions)

    if template is None:
        logger.warning(f"Store {store_id} has no active weekly template")

    return PayrollContext(
        store=store,
        start_date=start_date,
        end_date=end_date,
        employees=load_employees(db, store_id),
        shifts=shifts,
        template=template,
        exceptions=exceptions,
    )
