"""
Shift interval calculation.

Times are wall-clock "HH:MM" strings converted to minutes since midnight of the
shift's start date. A shift that runs past midnight is extended into the next
day (end + 1440), so every interval below lives in one linear minute space.
"""

import logging
import re
from typing import Iterable, Optional

from .errors import PayrollValidationError
from .rules import DEFAULT_RULES, PayrollRules, round_hours, split_regular_overtime
from .types import BreakPeriod, Shift, ShiftHours


logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60

# database time columns come back as HH:MM:SS, seconds are ignored
_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def parse_time(value: str) -> int:
    """Convert "HH:MM" to minutes since midnight. "24:00" is accepted as end of day."""
    match = _TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise PayrollValidationError(f"Invalid time {value!r}, expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59 or hours > 24 or (hours == 24 and minutes != 0):
        raise PayrollValidationError(f"Invalid time {value!r}, expected HH:MM")
    return hours * 60 + minutes


def overlap_minutes(start1: int, end1: int, start2: int, end2: int) -> int:
    """Length of the intersection of two half-open minute ranges."""
    return max(0, min(end1, end2) - max(start1, start2))


def shift_bounds(
    start_time: str,
    end_time: str,
    crosses_midnight: Optional[bool] = None,
) -> tuple[int, int]:
    """
    Resolve a shift's (start, end) in minutes.

    crosses_midnight=None infers the day change from the clock: any end not
    strictly after start is next day, so a zero-length shift reads as 24 hours.
    Passing False makes start == end a zero-length shift.
    """
    start = parse_time(start_time)
    end = parse_time(end_time)

    if crosses_midnight is None:
        if end <= start:
            end += MINUTES_PER_DAY
    elif crosses_midnight:
        if end > start:
            raise PayrollValidationError(
                f"Shift {start_time}-{end_time} is marked as crossing midnight but ends after it starts"
            )
        end += MINUTES_PER_DAY
    elif end < start:
        raise PayrollValidationError(
            f"Shift {start_time}-{end_time} ends before it starts and is not marked as crossing midnight"
        )

    return start, end


def place_breaks(
    shift_start: int,
    shift_end: int,
    break_periods: Iterable[BreakPeriod],
) -> list[tuple[int, int]]:
    """
    Map break periods into the shift's minute space.

    Breaks clocked before the shift start belong to the next day (e.g. 02:00
    inside a 22:00-06:00 shift). Raises if a break leaves the shift or two
    breaks overlap.
    """
    placed = []
    for period in break_periods:
        start = parse_time(period.start)
        end = parse_time(period.end)
        if end <= start:
            end += MINUTES_PER_DAY
        if start < shift_start:
            start += MINUTES_PER_DAY
            end += MINUTES_PER_DAY

        if start < shift_start or end > shift_end:
            label = f" ({period.name})" if period.name else ""
            raise PayrollValidationError(
                f"Break {period.start}-{period.end}{label} falls outside the shift"
            )
        placed.append((start, end))

    placed.sort()
    for (_, prev_end), (next_start, _) in zip(placed, placed[1:]):
        if next_start < prev_end:
            raise PayrollValidationError("Break periods overlap")

    return placed


def breaks_within(
    start_time: str,
    end_time: str,
    break_periods: Iterable[BreakPeriod],
    crosses_midnight: Optional[bool] = None,
) -> list[BreakPeriod]:
    """Keep only the break periods that fit inside the given shift."""
    shift_start, shift_end = shift_bounds(start_time, end_time, crosses_midnight)
    kept = []
    for period in break_periods:
        try:
            place_breaks(shift_start, shift_end, [period])
        except PayrollValidationError:
            continue
        kept.append(period)
    return kept


def night_windows(rules: PayrollRules = DEFAULT_RULES) -> list[tuple[int, int]]:
    """
    Night windows around the shift's start day.

    With the default 22:00-06:00 window this yields the early morning of day 0,
    22:00 of day 0 through 06:00 of day 1, and 22:00 of day 1 onwards.
    """
    night_start = parse_time(rules.night_window_start)
    night_end = parse_time(rules.night_window_end)

    if night_end <= night_start:
        return [
            (night_start + MINUTES_PER_DAY * day, night_end + MINUTES_PER_DAY * (day + 1))
            for day in (-1, 0, 1)
        ]
    return [
        (night_start + MINUTES_PER_DAY * day, night_end + MINUTES_PER_DAY * day)
        for day in (0, 1)
    ]


def night_minutes(
    shift_start: int,
    shift_end: int,
    breaks: Iterable[tuple[int, int]] = (),
    rules: PayrollRules = DEFAULT_RULES,
) -> int:
    windows = night_windows(rules)
    minutes = sum(overlap_minutes(shift_start, shift_end, ws, we) for ws, we in windows)

    if rules.deduct_breaks_from_night_hours:
        for break_start, break_end in breaks:
            minutes -= sum(overlap_minutes(break_start, break_end, ws, we) for ws, we in windows)

    return minutes


def compute_shift(
    start_time: str,
    end_time: str,
    break_periods: Iterable[BreakPeriod] = (),
    rules: PayrollRules = DEFAULT_RULES,
    crosses_midnight: Optional[bool] = None,
) -> ShiftHours:
    """
    Compute worked, night and daily regular/overtime hours for one shift.

    Breaks reduce total hours. They reduce night hours only when
    rules.deduct_breaks_from_night_hours is set.
    """
    start, end = shift_bounds(start_time, end_time, crosses_midnight)
    breaks = place_breaks(start, end, break_periods)

    break_minutes = sum(b_end - b_start for b_start, b_end in breaks)
    worked_minutes = (end - start) - break_minutes
    night = night_minutes(start, end, breaks, rules)

    total_hours = worked_minutes / 60
    regular, overtime = split_regular_overtime(total_hours, rules.overtime_daily_threshold_hours)

    logger.debug(
        f"Shift {start_time}-{end_time}: {worked_minutes} worked min, "
        f"{break_minutes} break min, {night} night min"
    )

    return ShiftHours(
        total_hours=round_hours(total_hours),
        regular_hours=regular,
        overtime_hours=overtime,
        night_hours=round_hours(night / 60),
        is_night_shift=night > 0,
    )


def compute_shift_hours(shift: Shift, rules: PayrollRules = DEFAULT_RULES) -> ShiftHours:
    return compute_shift(
        shift.start_time,
        shift.end_time,
        shift.break_periods,
        rules,
        crosses_midnight=shift.crosses_midnight,
    )
