from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from breakplan.models import ShiftWindow
from breakplan.timemath import (
    add_minutes,
    duration_minutes,
    format_hhmm,
    hours_part_of,
    minutes_of,
    parse_hhmm,
    to_duration,
    weekday_of,
)


@pytest.mark.parametrize(
    "text, minutes",
    [("04:00", 240), ("07:30", 450), ("0:05", 5), ("26:15", 1575)],
)
def test_parse_hhmm(text, minutes):
    assert minutes_of(parse_hhmm(text)) == minutes


@pytest.mark.parametrize("text", ["", "4", "04:60", "aa:bb", "-01:00", "04:00:00"])
def test_parse_hhmm_rejects_malformed(text):
    with pytest.raises(ValueError):
        parse_hhmm(text)


def test_to_duration_accepts_minutes_and_timedelta():
    assert to_duration(90) == timedelta(minutes=90)
    assert to_duration(timedelta(hours=2)) == timedelta(hours=2)
    assert to_duration("01:15") == timedelta(minutes=75)


def test_to_duration_rejects_negative_and_wrong_types():
    with pytest.raises(ValueError):
        to_duration(-1)
    with pytest.raises(TypeError):
        to_duration(True)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        to_duration(None)  # type: ignore[arg-type]


def test_hours_part_ignores_minutes():
    assert hours_part_of(parse_hhmm("07:30")) == 7
    assert hours_part_of(parse_hhmm("00:45")) == 0


def test_weekday_is_sunday_first():
    assert weekday_of(datetime(2025, 3, 16)) == 0  # Sunday
    assert weekday_of(datetime(2025, 3, 14)) == 5  # Friday
    assert weekday_of(datetime(2025, 3, 15)) == 6  # Saturday


def test_duration_and_add_minutes(day_shift: ShiftWindow):
    assert duration_minutes(day_shift) == 480
    assert add_minutes(day_shift.start, 88.5) == datetime(2025, 3, 14, 9, 28, 30)


def test_format_hhmm_shows_seconds_only_when_needed():
    assert format_hhmm(datetime(2025, 1, 1, 9, 5)) == "09:05"
    assert format_hhmm(datetime(2025, 1, 1, 9, 28, 30)) == "09:28:30"
