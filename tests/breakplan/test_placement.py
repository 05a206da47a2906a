from __future__ import annotations

from datetime import datetime

from breakplan.placement import compact, derive_all
from breakplan.result_types import BreakWindow, FirstBreak


def at(h: int, m: int = 0, s: int = 0) -> datetime:
    return datetime(2025, 3, 14, h, m, s)


def test_always_four_slots_only_first_n_filled(day_shift):
    first = FirstBreak(start_offset=0, end_offset=15, spacing_minutes=120)
    slots = derive_all(day_shift, first, 2)
    assert len(slots) == 4
    assert slots[0] == BreakWindow(at(8), at(8, 15), 0)
    assert slots[1] == BreakWindow(at(10), at(10, 15), 1)
    assert slots[2] is None and slots[3] is None


def test_out_of_bounds_slots_are_left_empty(day_shift):
    first = FirstBreak(start_offset=120, end_offset=135, spacing_minutes=135)
    slots = derive_all(day_shift, first, 4)
    assert [s.slot_index if s else None for s in slots] == [0, 1, 2, None]


def test_slots_derive_from_slot_zero_not_from_neighbour(day_shift):
    # Slot 0 (06:30) is handed over unchecked; slot 1 (07:30) is before the
    # shift and stays empty, slot 2 is still placed at slot 0 + 2 * spacing.
    first = FirstBreak(start_offset=-90, end_offset=-75, spacing_minutes=60)
    slots = derive_all(day_shift, first, 3)
    assert slots[1] is None
    assert slots[2] == BreakWindow(at(8, 30), at(8, 45), 2)


def test_compact_keeps_slot_index(day_shift):
    first = FirstBreak(start_offset=-90, end_offset=-75, spacing_minutes=60)
    placed = compact(derive_all(day_shift, first, 4))
    assert [b.slot_index for b in placed] == [0, 2, 3]


def test_break_ending_exactly_at_shift_end_is_kept(day_shift):
    first = FirstBreak(start_offset=105, end_offset=120, spacing_minutes=120)
    slots = derive_all(day_shift, first, 4)
    assert slots[3] == BreakWindow(at(15, 45), at(16), 3)


def test_huge_spacing_leaves_slots_empty_without_building_instants(day_shift):
    first = FirstBreak(start_offset=0, end_offset=15, spacing_minutes=1e12)
    slots = derive_all(day_shift, first, 4)
    assert slots[1:] == (None, None, None)


def test_fits_is_inclusive_at_both_ends():
    first = FirstBreak(start_offset=0, end_offset=15, spacing_minutes=155)
    assert first.fits(480)
    assert first.fits(480, 3)  # 465..480
    assert not first.fits(479, 3)
    assert not FirstBreak(-0.5, 14.5, 0).fits(480)
