from storepay.db.database import Base

# Import models
from storepay.db.models.stores import Stores
from storepay.db.models.employees import Employees
from storepay.db.models.weekly_templates import WeeklyTemplates
from storepay.db.models.schedule_exceptions import ScheduleExceptions, ScheduleExceptionType

__all__ = [
    "Base",
    # Models
    "Stores",
    "Employees",
    "WeeklyTemplates",
    "ScheduleExceptions",
    # Enums
    "ScheduleExceptionType",
]
