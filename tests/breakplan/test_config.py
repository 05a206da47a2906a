from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from breakplan.config import MAX_BREAKS, Config, cfg
from breakplan.models import DistributionType, Weekday
from breakplan.pipeline import place_breaks
from breakplan.result_types import FailureReason


def test_default_config_matches_demo_shift_and_rule():
    cfg.validate()
    shift = cfg.shift()
    rule = cfg.rule()
    assert shift.start == datetime(2025, 3, 14, 8, 0)
    assert shift.length == timedelta(hours=8)
    assert rule.min_shift_length == timedelta(hours=4)
    assert rule.total_break_minutes == 60
    assert rule.break_count == MAX_BREAKS
    assert rule.distribution is DistributionType.MIDDLE
    assert rule.after_hours_offset == timedelta(hours=2)
    assert rule.weekday_filter is Weekday.ANY


@pytest.mark.parametrize(
    "overrides",
    [
        dict(SHIFT_END=datetime(2025, 3, 14, 8, 0)),
        dict(RULE_MIN_SHIFT_LENGTH="four hours"),
        dict(RULE_AFTER_HOURS="2"),
        dict(RULE_WEEKDAY=7),
    ],
)
def test_validate_rejects_nonsense(overrides):
    with pytest.raises(ValueError):
        Config(**overrides).validate()


def test_validate_leaves_rule_problems_to_pipeline():
    Config(RULE_BREAK_COUNT=5, RULE_DISTRIBUTION=9).validate()


def test_negative_break_minutes_is_reported_by_pipeline():
    config = Config(RULE_TOTAL_BREAK_MINUTES=-5)
    config.validate()
    res = place_breaks(config.shift(), [config.rule()])
    assert res.reason is FailureReason.INVALID_BREAK_LENGTH
