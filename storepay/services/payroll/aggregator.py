"""
Period aggregation of shift hours.

The aggregator is period-agnostic: it sums whatever shifts it is given and then
applies exactly one overtime granularity to the result.
"""

import logging
from typing import Iterable, Optional

from .intervals import compute_shift_hours
from .rules import DEFAULT_RULES, OvertimeBasis, PayrollRules, round_hours, split_regular_overtime
from .types import Shift, WeeklyHours


logger = logging.getLogger(__name__)


def shifts_for_employee(shifts: Iterable[Shift], employee_id: int) -> list[Shift]:
    return [s for s in shifts if s.employee_id == employee_id]


def aggregate_week(
    shifts: Iterable[Shift],
    employee_id: Optional[int] = None,
    rules: PayrollRules = DEFAULT_RULES,
    basis: Optional[OvertimeBasis] = None,
) -> WeeklyHours:
    """
    Sum shift hours for one employee and split them into regular/overtime.

    Args:
        shifts: Shifts for the period (other employees' shifts are ignored)
        employee_id: Employee to aggregate, or None when shifts are pre-filtered
        rules: Thresholds to apply
        basis: WEEKLY splits the summed total at the weekly threshold, DAILY
            sums each shift's own daily split. Defaults to rules.overtime_basis.

    Returns:
        WeeklyHours with totals rounded to 2 decimal places
    """
    basis = basis or rules.overtime_basis
    if employee_id is not None:
        shifts = shifts_for_employee(shifts, employee_id)

    total = 0.0
    night = 0.0
    daily_regular = 0.0
    daily_overtime = 0.0
    count = 0

    for shift in shifts:
        hours = compute_shift_hours(shift, rules)
        total += hours.total_hours
        night += hours.night_hours
        daily_regular += hours.regular_hours
        daily_overtime += hours.overtime_hours
        count += 1

    total = round_hours(total)
    if basis == OvertimeBasis.DAILY:
        regular, overtime = round_hours(daily_regular), round_hours(daily_overtime)
    else:
        regular, overtime = split_regular_overtime(total, rules.overtime_weekly_threshold_hours)

    logger.debug(
        f"Aggregated {count} shifts for employee {employee_id}: "
        f"{total}h total, {regular}h regular, {overtime}h overtime ({basis.value})"
    )

    return WeeklyHours(
        total_hours=total,
        regular_hours=regular,
        overtime_hours=overtime,
        night_hours=round_hours(night),
        shift_count=count,
    )
