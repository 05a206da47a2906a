# src/breakplan/distribution/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from breakplan.result_types import FirstBreak
from breakplan.timemath import duration_minutes

if TYPE_CHECKING:
    from breakplan.models import BreakRule, DistributionType, ShiftWindow


class Distributor(ABC):
    """
    Positions the first break of a rule and the spacing between successive
    break starts. Offsets are minutes from shift start.

    Distributors do not bounds-check; the pipeline rejects a first break that
    falls outside the shift.
    """

    kind: "DistributionType"
    name: str = "Distributor"

    def __init__(self, rule: BreakRule) -> None:
        self.rule: BreakRule = rule

    @property
    def n(self) -> int:
        return self.rule.break_count

    @abstractmethod
    def first_offset(self, shift_minutes: float, single: float) -> float: ...

    @abstractmethod
    def spacing(self, shift_minutes: float, single: float) -> float: ...

    def compute_first(self, shift: ShiftWindow, single: float) -> FirstBreak:
        length = duration_minutes(shift)
        offset = self.first_offset(length, single)
        return FirstBreak(
            start_offset=offset,
            end_offset=offset + single,
            spacing_minutes=self.spacing(length, single),
        )
