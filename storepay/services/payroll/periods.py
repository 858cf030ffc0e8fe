"""Pay period boundaries. Weeks run Sunday to Saturday."""

import calendar
from datetime import date, timedelta
from typing import Optional, Union

from .errors import PayrollValidationError
from .types import PayPeriod


def week_bounds(day: date) -> tuple[date, date]:
    """Sunday..Saturday week containing day."""
    start = day - timedelta(days=(day.weekday() + 1) % 7)
    return start, start + timedelta(days=6)


def month_bounds(day: date) -> tuple[date, date]:
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def period_bounds(period: Union[PayPeriod, str], today: Optional[date] = None) -> tuple[date, date]:
    """Inclusive (start, end) dates of a named period relative to today."""
    try:
        period = PayPeriod(period)
    except ValueError:
        raise PayrollValidationError(f"Unknown pay period {period!r}") from None

    today = today or date.today()
    if period == PayPeriod.LAST_WEEK:
        return week_bounds(today - timedelta(days=7))
    if period == PayPeriod.CURRENT_MONTH:
        return month_bounds(today)
    return week_bounds(today)


def iter_dates(start: date, end: date):
    """Every date from start to end inclusive."""
    if end < start:
        raise PayrollValidationError(f"Period end {end} is before start {start}")
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
