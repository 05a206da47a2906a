# breakplan/result_types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from breakplan.models import BreakRule
from breakplan.timemath import minutes_of


class FailureReason(Enum):
    """Why a placement came back empty. Listed in pipeline order."""

    NO_APPLICABLE_RULE = "NoApplicableRule"
    INVALID_BREAK_COUNT = "InvalidBreakCount"
    INVALID_BREAK_LENGTH = "InvalidBreakLength"
    INVALID_DISTRIBUTION_TYPE = "InvalidDistributionType"
    FIRST_BREAK_OUT_OF_BOUNDS = "FirstBreakOutOfBounds"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    FailureReason.NO_APPLICABLE_RULE: "No applicable break rules found for this shift",
    FailureReason.INVALID_BREAK_COUNT: "Invalid number of breaks (must be between 1 and 4)",
    FailureReason.INVALID_BREAK_LENGTH: "Invalid break length (must be greater than 0)",
    FailureReason.INVALID_DISTRIBUTION_TYPE: "Invalid distribution type",
    FailureReason.FIRST_BREAK_OUT_OF_BOUNDS: "First break is outside shift bounds",
}


@dataclass(frozen=True, slots=True)
class BreakWindow:
    """One placed break. slot_index is its 0-based position in the rule's slots."""

    start: datetime
    end: datetime
    slot_index: int

    @property
    def minutes(self) -> float:
        return minutes_of(self.end - self.start)


@dataclass(frozen=True, slots=True)
class ValidatedRule:
    rule: BreakRule
    single_break_minutes: float


@dataclass(frozen=True, slots=True)
class FirstBreak:
    """
    First break of a distribution plus the spacing between successive starts,
    all in minutes from shift start. Instants are only built for breaks that
    fit inside the shift.
    """

    start_offset: float
    end_offset: float
    spacing_minutes: float

    def fits(self, shift_minutes: float, i: int = 0) -> bool:
        """True when this break moved by spacing * i lies inside [0, shift_minutes]."""
        moved = self.spacing_minutes * i
        return (
            self.start_offset + moved >= 0
            and self.end_offset + moved <= shift_minutes
        )


@dataclass(frozen=True, slots=True)
class StageRecord:
    """Outcome of one pipeline stage, kept on the result for display."""

    stage: str
    passed: bool
    detail: str = ""


@dataclass(frozen=True)
class PlacementResult:
    """
    Structured output of one placement run.

    breaks is ordered by slot_index; reason is set only when breaks is empty
    because a stage failed.
    """

    breaks: tuple[BreakWindow, ...] = ()
    reason: Optional[FailureReason] = None
    rule: Optional[BreakRule] = None
    trace: tuple[StageRecord, ...] = ()

    @property
    def ok(self) -> bool:
        return self.reason is None

    @property
    def slot_indices(self) -> list[int]:
        return [b.slot_index for b in self.breaks]
