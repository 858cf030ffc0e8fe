import pytest
from datetime import date, timedelta

from storepay.services.payroll.types import (
    BreakPeriod,
    DayTemplate,
    Employee,
    EmployeeSlot,
    Shift,
    Store,
    WeeklyTemplate,
)


def get_test_sunday() -> date:
    # returns a fixed Sunday (start of a pay week) for deterministic tests
    return date(2025, 1, 19)


def make_shift(employee_id: int, day_offset: int, start: str, end: str, breaks=None, **kwargs) -> Shift:
    # shift on get_test_sunday() + day_offset
    return Shift(
        employee_id=employee_id,
        date=get_test_sunday() + timedelta(days=day_offset),
        start_time=start,
        end_time=end,
        break_periods=breaks or [],
        **kwargs,
    )


def lunch() -> BreakPeriod:
    return BreakPeriod(start="12:00", end="13:00", name="lunch")


@pytest.fixture
def store() -> Store:
    return Store(id=1, name="Gangnam")


@pytest.fixture
def basic_employee() -> Employee:
    return Employee(id=1, store_id=1, hourly_wage=10000, name="Kim Minji", position="Barista")


@pytest.fixture
def three_employees() -> list[Employee]:
    # full-timer, part-timer above the holiday threshold, part-timer below it
    return [
        Employee(id=1, store_id=1, hourly_wage=10000, name="Kim Minji", position="Manager"),
        Employee(id=2, store_id=1, hourly_wage=10030, name="Lee Jun", position="Barista"),
        Employee(id=3, store_id=1, hourly_wage=12000, name="Park Seo", position="Barista"),
    ]


@pytest.fixture
def weekday_template() -> WeeklyTemplate:
    # Mon-Fri open 09:00-18:00 with lunch; employee 1 all week, employee 2 Mon/Wed afternoons
    days = {}
    for weekday in range(5):
        assignments = {1: EmployeeSlot(start_time="09:00", end_time="18:00")}
        if weekday in (0, 2):
            assignments[2] = EmployeeSlot(start_time="14:00", end_time="18:00")
        days[weekday] = DayTemplate(is_open=True, break_periods=[lunch()], assignments=assignments)
    days[5] = DayTemplate(is_open=False)
    return WeeklyTemplate(id=1, store_id=1, name="Weekday template", days=days)


@pytest.fixture
def full_week_shifts() -> list[Shift]:
    # employee 1: Mon-Fri 09:00-18:00 with lunch = 40h
    return [make_shift(1, offset, "09:00", "18:00", [lunch()]) for offset in range(1, 6)]
