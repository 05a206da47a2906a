# breakplan/timemath.py
from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from breakplan.models import ShiftWindow

DurationLike = Union[timedelta, str, int, float]

_HHMM = re.compile(r"^\s*(\d{1,3}):([0-5]\d)\s*$")


def parse_hhmm(text: str) -> timedelta:
    """
    Parse an "HH:MM" duration string (e.g. "04:00", "07:30").
    Hours may exceed 23; minutes must be 00..59.
    """
    match = _HHMM.match(text)
    if match is None:
        raise ValueError(f"Expected an 'HH:MM' duration, got {text!r}.")
    hours, minutes = int(match.group(1)), int(match.group(2))
    return timedelta(hours=hours, minutes=minutes)


def to_duration(value: DurationLike) -> timedelta:
    """
    Normalize a timedelta, "HH:MM" string or a number of minutes to a timedelta.
    Negative durations are rejected.
    """
    if isinstance(value, timedelta):
        out = value
    elif isinstance(value, str):
        out = parse_hhmm(value)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            out = timedelta(minutes=value)
        except OverflowError:
            raise ValueError(f"Duration of {value!r} minutes is too large.") from None
    else:
        raise TypeError(
            "Durations must be timedelta, 'HH:MM' strings or minutes; "
            f"got {type(value)!r}"
        )
    if out < timedelta(0):
        raise ValueError(f"Durations must be non-negative, got {out}.")
    return out


def minutes_of(duration: timedelta) -> float:
    return duration.total_seconds() / 60.0


def hours_part_of(duration: timedelta) -> int:
    """Whole hours of a duration ("07:30" -> 7)."""
    return int(minutes_of(duration) // 60)


def duration_minutes(shift: ShiftWindow) -> float:
    return minutes_of(shift.length)


def add_minutes(instant: datetime, minutes: float) -> datetime:
    return instant + timedelta(minutes=minutes)


def weekday_of(instant: datetime) -> int:
    """Sunday-first weekday number: 0 = Sunday, 1 = Monday, ..., 6 = Saturday."""
    return (instant.weekday() + 1) % 7


def format_hhmm(instant: datetime) -> str:
    if instant.second or instant.microsecond:
        return instant.strftime("%H:%M:%S")
    return instant.strftime("%H:%M")
