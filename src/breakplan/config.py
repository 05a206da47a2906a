from dataclasses import dataclass
from datetime import datetime
from typing import Any

from breakplan.models import BreakRule, DistributionType, ShiftWindow, Weekday
from breakplan.timemath import parse_hhmm

# Fixed number of break slots a rule can fill.
MAX_BREAKS: int = 4


@dataclass
class Config:

    # Shift window (instants are used as given, no timezone handling)
    SHIFT_START: datetime = datetime(2025, 3, 14, 8, 0)
    SHIFT_END: datetime = datetime(2025, 3, 14, 16, 0)

    ### BREAK RULE ###

    RULE_ID: Any = 1

    # Minimum shift length the rule applies to ("HH:MM")
    RULE_MIN_SHIFT_LENGTH: str = "04:00"

    # Total break minutes split evenly over RULE_BREAK_COUNT breaks
    RULE_TOTAL_BREAK_MINUTES: int = 60
    RULE_BREAK_COUNT: int = 4

    RULE_DISTRIBUTION: Any = DistributionType.MIDDLE

    # Only used by AFTER_HOURS ("HH:MM" after shift start)
    RULE_AFTER_HOURS: str = "02:00"

    # -1 = any day, 0 = Sunday ... 6 = Saturday
    RULE_WEEKDAY: int = Weekday.ANY

    ### DIAGNOSTICS ###

    # Log each pipeline stage at INFO instead of DEBUG
    LOG_STAGES: bool = False

    def validate(self):
        """
        Validate the Config object has sensible values before placing breaks.
        Rule parameters the pipeline itself reports on (break count, per-break
        length, distribution type) are left for the pipeline.
        """
        if self.SHIFT_END <= self.SHIFT_START:
            raise ValueError("Require SHIFT_START < SHIFT_END.")
        for attr in ("RULE_MIN_SHIFT_LENGTH", "RULE_AFTER_HOURS"):
            try:
                parse_hhmm(getattr(self, attr))
            except (TypeError, ValueError):
                raise ValueError(f"{attr} must be an 'HH:MM' string.") from None
        if not (-1 <= int(self.RULE_WEEKDAY) <= 6):
            raise ValueError("RULE_WEEKDAY must be within [-1, 6].")

    def shift(self) -> ShiftWindow:
        return ShiftWindow(start=self.SHIFT_START, end=self.SHIFT_END)

    def rule(self) -> BreakRule:
        return BreakRule(
            id=self.RULE_ID,
            min_shift_length=parse_hhmm(self.RULE_MIN_SHIFT_LENGTH),
            total_break_minutes=self.RULE_TOTAL_BREAK_MINUTES,
            break_count=self.RULE_BREAK_COUNT,
            distribution=self.RULE_DISTRIBUTION,
            after_hours_offset=parse_hhmm(self.RULE_AFTER_HOURS),
            weekday_filter=self.RULE_WEEKDAY,
        )


cfg = Config()
