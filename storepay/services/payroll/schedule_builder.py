"""
Turns weekly templates and schedule exceptions into concrete shifts.

Template schedule_data layout (JSON, one key per weekday):

    {
        "monday": {
            "is_open": true,
            "break_periods": [{"start": "12:00", "end": "13:00", "name": "lunch"}],
            "employees": {
                "12": {"start_time": "09:00", "end_time": "18:00"},
                "15": {"start_time": "18:00", "end_time": "02:00", "break_periods": []}
            }
        },
        ...
    }

An employee's own break_periods replace the day's; otherwise the day's breaks
apply where they fall inside the employee's shift.
"""

import logging
from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Iterable, Optional

from .errors import PayrollValidationError
from .intervals import breaks_within, compute_shift_hours
from .periods import iter_dates
from .rules import DEFAULT_RULES, PayrollRules, round_hours, round_won
from .types import (
    BreakPeriod,
    DayTemplate,
    EmployeeSlot,
    ExceptionAdjustment,
    ExceptionType,
    ScheduleException,
    Shift,
    WeeklyTemplate,
)


logger = logging.getLogger(__name__)

DAY_KEYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# cancellations and overrides reshape the day before extra work is added on top
_EXCEPTION_ORDER = {
    ExceptionType.CANCEL: 0,
    ExceptionType.OVERRIDE: 1,
    ExceptionType.EXTRA: 2,
}


def _parse_breaks(raw: Optional[list]) -> list[BreakPeriod]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise PayrollValidationError(f"break_periods must be a list, got {type(raw).__name__}")

    breaks = []
    for entry in raw:
        try:
            breaks.append(BreakPeriod(start=entry["start"], end=entry["end"], name=entry.get("name", "")))
        except (KeyError, TypeError, AttributeError) as e:
            raise PayrollValidationError(f"Malformed break period {entry!r}") from e
    return breaks


def parse_schedule_data(
    template_id: int,
    store_id: int,
    name: str,
    schedule_data: dict,
    strict: bool = False,
) -> WeeklyTemplate:
    """
    Build a WeeklyTemplate from stored JSON.

    Malformed employee assignments are skipped with a warning, or raise
    PayrollValidationError when strict. Malformed day-level data always raises.
    """
    days: dict[int, DayTemplate] = {}

    for day_index, day_key in enumerate(DAY_KEYS):
        raw_day = (schedule_data or {}).get(day_key)
        if not raw_day:
            continue
        if not isinstance(raw_day, dict):
            raise PayrollValidationError(f"Template {template_id}: {day_key} must be an object")

        raw_employees = raw_day.get("employees") or {}
        if not isinstance(raw_employees, dict):
            raise PayrollValidationError(f"Template {template_id}: {day_key} employees must be an object")

        assignments: dict[int, EmployeeSlot] = {}
        for raw_id, raw_slot in raw_employees.items():
            try:
                employee_id = int(raw_id)
                slot = EmployeeSlot(
                    start_time=raw_slot["start_time"],
                    end_time=raw_slot["end_time"],
                    break_periods=(
                        _parse_breaks(raw_slot["break_periods"])
                        if raw_slot.get("break_periods") is not None
                        else None
                    ),
                )
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                if strict:
                    raise PayrollValidationError(
                        f"Malformed {day_key} assignment {raw_id!r}: {e}"
                    ) from e
                logger.warning(
                    f"Template {template_id}: skipping malformed {day_key} assignment {raw_id!r}: {e}"
                )
                continue
            if not slot.start_time or not slot.end_time:
                continue
            assignments[employee_id] = slot

        days[day_index] = DayTemplate(
            is_open=bool(raw_day.get("is_open")),
            break_periods=_parse_breaks(raw_day.get("break_periods")),
            assignments=assignments,
        )

    return WeeklyTemplate(id=template_id, store_id=store_id, name=name, days=days)


def expand_template(template: WeeklyTemplate, start: date, end: date) -> list[Shift]:
    """One shift per open day and assigned employee between start and end (inclusive)."""
    shifts = []
    for day in iter_dates(start, end):
        day_template = template.days.get(day.weekday())
        if not day_template or not day_template.is_open:
            continue

        for employee_id, slot in sorted(day_template.assignments.items()):
            if slot.break_periods is not None:
                breaks = list(slot.break_periods)
            else:
                breaks = breaks_within(slot.start_time, slot.end_time, day_template.break_periods)

            shifts.append(Shift(
                employee_id=employee_id,
                date=day,
                start_time=slot.start_time,
                end_time=slot.end_time,
                break_periods=breaks,
                store_id=template.store_id,
            ))

    return shifts


def _require_times(exception: ScheduleException) -> bool:
    if exception.start_time and exception.end_time:
        return True
    logger.warning(
        f"{exception.exception_type.value} exception for employee {exception.employee_id} "
        f"on {exception.date} has no time range, ignoring"
    )
    return False


def apply_exceptions(
    shifts: Iterable[Shift],
    exceptions: Iterable[ScheduleException],
) -> list[Shift]:
    """
    Resolve exceptions against base shifts.

    CANCEL removes the employee's shifts on that date. OVERRIDE replaces their
    time range, keeping only the breaks that still fit (or creates the shift
    when there was none). EXTRA adds a separate break-free shift.
    """
    result = list(shifts)
    ordered = sorted(exceptions, key=lambda e: (e.date, _EXCEPTION_ORDER[e.exception_type]))

    for exc in ordered:
        def same_slot(shift: Shift) -> bool:
            return shift.employee_id == exc.employee_id and shift.date == exc.date

        if exc.exception_type == ExceptionType.CANCEL:
            result = [s for s in result if not same_slot(s)]

        elif exc.exception_type == ExceptionType.OVERRIDE:
            if not _require_times(exc):
                continue
            matched = [s for s in result if same_slot(s)]
            result = [s for s in result if not same_slot(s)]
            if matched:
                base = matched[0]
                result.append(replace(
                    base,
                    start_time=exc.start_time,
                    end_time=exc.end_time,
                    break_periods=breaks_within(exc.start_time, exc.end_time, base.break_periods),
                    crosses_midnight=None,
                ))
            else:
                result.append(Shift(
                    employee_id=exc.employee_id,
                    date=exc.date,
                    start_time=exc.start_time,
                    end_time=exc.end_time,
                    store_id=exc.store_id,
                ))

        elif exc.exception_type == ExceptionType.EXTRA:
            if not _require_times(exc):
                continue
            result.append(Shift(
                employee_id=exc.employee_id,
                date=exc.date,
                start_time=exc.start_time,
                end_time=exc.end_time,
                store_id=exc.store_id,
            ))

    result.sort(key=lambda s: (s.date, s.employee_id, s.start_time))
    return result


def _hours_by_slot(shifts: Iterable[Shift], rules: PayrollRules) -> dict[tuple[int, date], float]:
    hours: dict[tuple[int, date], float] = defaultdict(float)
    for shift in shifts:
        hours[(shift.employee_id, shift.date)] += compute_shift_hours(shift, rules).total_hours
    return hours


def exception_adjustments(
    base_shifts: Iterable[Shift],
    final_shifts: Iterable[Shift],
    exceptions: Iterable[ScheduleException],
    hourly_wages: dict[int, float],
    rules: PayrollRules = DEFAULT_RULES,
) -> list[ExceptionAdjustment]:
    """
    Hours and pay difference caused by exceptions, one entry per employee/date.

    When several exceptions hit the same day the entry carries the type of the
    last one applied.
    """
    base_hours = _hours_by_slot(base_shifts, rules)
    final_hours = _hours_by_slot(final_shifts, rules)

    last_type: dict[tuple[int, date], ExceptionType] = {}
    for exc in sorted(exceptions, key=lambda e: (e.date, _EXCEPTION_ORDER[e.exception_type])):
        last_type[(exc.employee_id, exc.date)] = exc.exception_type

    adjustments = []
    for (employee_id, day), exception_type in sorted(last_type.items()):
        if employee_id not in hourly_wages:
            raise PayrollValidationError(f"No hourly wage for employee {employee_id}")

        original = round_hours(base_hours.get((employee_id, day), 0.0))
        adjusted = round_hours(final_hours.get((employee_id, day), 0.0))
        difference = round_hours(adjusted - original)

        adjustments.append(ExceptionAdjustment(
            employee_id=employee_id,
            date=day,
            exception_type=exception_type,
            original_hours=original,
            adjusted_hours=adjusted,
            hours_difference=difference,
            pay_difference=round_won(difference * hourly_wages[employee_id]),
        ))

    return adjustments
