from typing import Generator
from sqlalchemy.orm import Session

from storepay.core.config import settings
from storepay.db.database import SessionLocal
from storepay.services.payroll import PayrollRules


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_payroll_rules() -> PayrollRules:
    """Statutory constants for the current settings; overridable in tests."""
    return PayrollRules.from_settings(settings)
