from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import IntEnum
from typing import Any, Union

from breakplan.timemath import to_duration, weekday_of


class Weekday(IntEnum):
    """Sunday-first weekday numbering with ANY as the match-all sentinel."""

    ANY = -1
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, instant: datetime) -> "Weekday":
        return cls(weekday_of(instant))

    def matches(self, instant: datetime) -> bool:
        return self is Weekday.ANY or self.value == weekday_of(instant)


class DistributionType(IntEnum):
    BEGINNING = 0
    MIDDLE = 1
    END = 2
    AFTER_HOURS = 3


def coerce_distribution(value: Any) -> Union[DistributionType, Any]:
    """
    Map integer codes and names onto DistributionType. Anything else is
    returned untouched so the pipeline can reject it as an invalid type.
    """
    if isinstance(value, DistributionType):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return DistributionType(value)
        except ValueError:
            return value
    if isinstance(value, str):
        return DistributionType.__members__.get(value.strip().upper(), value)
    return value


def _coerce_weekday(value: Any) -> Weekday:
    if isinstance(value, Weekday):
        return value
    if isinstance(value, str):
        try:
            return Weekday[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday {value!r}.") from None
    try:
        return Weekday(int(value))
    except (TypeError, ValueError):
        raise ValueError(
            f"Weekday filter must be -1 (any) or 0..6 (Sunday..Saturday); got {value!r}."
        ) from None


@dataclass(frozen=True, slots=True)
class ShiftWindow:
    """The work interval breaks are placed in. Instants are used as given."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if not (isinstance(self.start, datetime) and isinstance(self.end, datetime)):
            raise TypeError("Shift start and end must be datetime instances.")
        if self.end <= self.start:
            raise ValueError(
                f"Shift end {self.end.isoformat()} must be after start "
                f"{self.start.isoformat()}."
            )

    @property
    def length(self) -> timedelta:
        return self.end - self.start

    @property
    def weekday(self) -> Weekday:
        return Weekday.of(self.start)


@dataclass(frozen=True, slots=True)
class BreakRule:
    """
    How many breaks a shift gets, how long they are in total and how they are
    spread across the shift.

    Durations accept timedelta, "HH:MM" strings or minutes and are stored as
    timedelta. Integer distribution codes 0..3 and weekday numbers -1..6 are
    coerced to their enums.
    """

    id: Any
    min_shift_length: timedelta
    total_break_minutes: int
    break_count: int
    distribution: Any = DistributionType.MIDDLE
    after_hours_offset: timedelta = timedelta(0)
    weekday_filter: Any = Weekday.ANY

    def __post_init__(self) -> None:
        if isinstance(self.break_count, bool) or not isinstance(self.break_count, int):
            raise TypeError(
                f"break_count must be an int; got {type(self.break_count)!r}"
            )
        if isinstance(self.total_break_minutes, bool) or not isinstance(
            self.total_break_minutes, (int, float)
        ):
            raise TypeError(
                "total_break_minutes must be a number; "
                f"got {type(self.total_break_minutes)!r}"
            )
        object.__setattr__(self, "min_shift_length", to_duration(self.min_shift_length))
        object.__setattr__(
            self, "after_hours_offset", to_duration(self.after_hours_offset)
        )
        object.__setattr__(
            self, "distribution", coerce_distribution(self.distribution)
        )
        object.__setattr__(self, "weekday_filter", _coerce_weekday(self.weekday_filter))

    @property
    def has_known_distribution(self) -> bool:
        return isinstance(self.distribution, DistributionType)

