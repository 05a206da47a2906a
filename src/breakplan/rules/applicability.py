from breakplan.models import BreakRule, ShiftWindow
from breakplan.timemath import duration_minutes, minutes_of


def weekday_matches(shift: ShiftWindow, rule: BreakRule) -> bool:
    return rule.weekday_filter.matches(shift.start)


def length_matches(shift: ShiftWindow, rule: BreakRule) -> bool:
    return duration_minutes(shift) >= minutes_of(rule.min_shift_length)


def is_applicable(shift: ShiftWindow, rule: BreakRule) -> bool:
    """A rule applies when its weekday filter matches the shift start and the
    shift is at least as long as the rule's minimum shift length."""
    return weekday_matches(shift, rule) and length_matches(shift, rule)
