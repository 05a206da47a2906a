# tests/conftest.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Callable

import pytest

from breakplan.models import BreakRule, DistributionType, ShiftWindow, Weekday


# -----------------------------
# Path helpers
# -----------------------------
@pytest.fixture(scope="session")
def project_root() -> Path:
    """Repository root (where pyproject.toml lives)."""
    return Path(__file__).resolve().parents[1]


# -----------------------------
# Shifts and rules
# -----------------------------
@pytest.fixture
def day_shift() -> ShiftWindow:
    """Friday 2025-03-14, 08:00-16:00 (480 minutes)."""
    return ShiftWindow(
        start=datetime(2025, 3, 14, 8, 0), end=datetime(2025, 3, 14, 16, 0)
    )


@pytest.fixture
def make_rule() -> Callable[..., BreakRule]:
    """Factory for the demo rule (04:00 minimum, 60 minutes in 4 MIDDLE breaks)."""

    def _make(**overrides: Any) -> BreakRule:
        fields: dict[str, Any] = dict(
            id=1,
            min_shift_length="04:00",
            total_break_minutes=60,
            break_count=4,
            distribution=DistributionType.MIDDLE,
            after_hours_offset="02:00",
            weekday_filter=Weekday.ANY,
        )
        fields.update(overrides)
        return BreakRule(**fields)

    return _make
