from __future__ import annotations

from typing import Union

from breakplan.config import MAX_BREAKS
from breakplan.models import BreakRule
from breakplan.result_types import FailureReason, ValidatedRule


def validate(rule: BreakRule) -> Union[ValidatedRule, FailureReason]:
    """
    Check the rule's break count and derive the length of a single break.

    The count is checked first so a zero count never reaches the division.
    """
    if not (1 <= rule.break_count <= MAX_BREAKS):
        return FailureReason.INVALID_BREAK_COUNT
    single = rule.total_break_minutes / rule.break_count
    if not single > 0:
        return FailureReason.INVALID_BREAK_LENGTH
    return ValidatedRule(rule=rule, single_break_minutes=single)
