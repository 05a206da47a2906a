# breakplan/precheck.py
from __future__ import annotations

from dataclasses import dataclass

from breakplan.models import BreakRule, ShiftWindow, Weekday
from breakplan.rules.applicability import length_matches, weekday_matches
from breakplan.timemath import duration_minutes, minutes_of


@dataclass(frozen=True)
class PrecheckIssue:
    code: str
    message: str


def _day_name(day: Weekday) -> str:
    return "Any day" if day is Weekday.ANY else day.name.capitalize()


def precheck(shift: ShiftWindow, rule: BreakRule) -> list[PrecheckIssue]:
    """
    Explain, before placing anything, why a rule would not apply to a shift.

    An empty list means the rule applies. Does not validate break count,
    length or distribution; those are reported by the pipeline.
    """
    issues: list[PrecheckIssue] = []

    if not weekday_matches(shift, rule):
        issues.append(
            PrecheckIssue(
                code="weekday",
                message=(
                    "Selected weekday doesn't match the shift date: "
                    f"shift {shift.start.date().isoformat()} is a "
                    f"{_day_name(shift.weekday)}, rule is for "
                    f"{_day_name(rule.weekday_filter)}."
                ),
            )
        )

    if not length_matches(shift, rule):
        issues.append(
            PrecheckIssue(
                code="shift_length",
                message=(
                    "Shift is too short for breaks: "
                    f"{duration_minutes(shift):.0f} minutes, minimum required "
                    f"{minutes_of(rule.min_shift_length):.0f} minutes."
                ),
            )
        )

    return issues
