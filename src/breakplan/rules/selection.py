from __future__ import annotations

from typing import Iterable, Optional

from breakplan.models import BreakRule, ShiftWindow
from breakplan.rules.applicability import is_applicable
from breakplan.timemath import duration_minutes, minutes_of


def applicable_rules(shift: ShiftWindow, rules: Iterable[BreakRule]) -> list[BreakRule]:
    """Candidates that apply to the shift, in input order."""
    return [r for r in rules if is_applicable(shift, r)]


def select_best_rule(
    shift: ShiftWindow, rules: Iterable[BreakRule]
) -> Optional[BreakRule]:
    """
    Pick the applicable rule whose minimum shift length is closest to (and not
    above) the actual shift length. Ties go to the earliest candidate.
    Returns None when nothing applies.
    """
    shift_minutes = duration_minutes(shift)
    best: Optional[BreakRule] = None
    best_diff = float("inf")
    for rule in applicable_rules(shift, rules):
        diff = shift_minutes - minutes_of(rule.min_shift_length)
        # strict "<" keeps the first of equally close rules
        if diff < best_diff:
            best, best_diff = rule, diff
    return best
