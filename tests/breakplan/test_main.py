from __future__ import annotations

from datetime import datetime

import pytest

from breakplan.config import Config
from breakplan.main import run_placement
from breakplan.models import ShiftWindow
from breakplan.result_types import FailureReason


def test_run_placement_uses_config_defaults():
    res = run_placement(Config(), enable_reporting=False)
    assert len(res.breaks) == 4


def test_run_placement_with_explicit_inputs(make_rule):
    shift = ShiftWindow(
        start=datetime(2025, 3, 14, 8, 0), end=datetime(2025, 3, 14, 11, 0)
    )
    res = run_placement(shift=shift, rules=make_rule(), enable_reporting=False)
    assert res.reason is FailureReason.NO_APPLICABLE_RULE


def test_run_placement_validates_config():
    bad = Config(SHIFT_END=datetime(2025, 3, 14, 7, 0))
    with pytest.raises(ValueError):
        run_placement(bad, enable_reporting=False)


def test_run_placement_reports(capfd):
    run_placement(Config(), enable_reporting=True)
    out = capfd.readouterr().out
    assert "Pre-check: rule 1 applies." in out
    assert "Number of Breaks Created: 4" in out
