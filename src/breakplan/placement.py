from __future__ import annotations

from typing import Iterable, Optional

from breakplan.config import MAX_BREAKS
from breakplan.models import ShiftWindow
from breakplan.result_types import BreakWindow, FirstBreak
from breakplan.timemath import add_minutes, duration_minutes

Slots = tuple[Optional[BreakWindow], ...]


def _window(shift: ShiftWindow, first: FirstBreak, i: int) -> BreakWindow:
    moved = first.spacing_minutes * i
    return BreakWindow(
        start=add_minutes(shift.start, first.start_offset + moved),
        end=add_minutes(shift.start, first.end_offset + moved),
        slot_index=i,
    )


def derive_all(shift: ShiftWindow, first: FirstBreak, n: int) -> Slots:
    """
    Fill the first n of MAX_BREAKS slots from the first break.

    Slot 0 is the first break, already bounds-checked by the caller. Slot i
    is the first break shifted by spacing * i and is left empty when it does
    not fit inside the shift. Every slot is derived from slot 0 alone, so an
    empty slot i does not move slot i + 1.
    """
    length = duration_minutes(shift)
    slots: list[Optional[BreakWindow]] = [None] * MAX_BREAKS
    slots[0] = _window(shift, first, 0)

    for i in range(1, min(n, MAX_BREAKS)):
        # offsets are compared before any instant is built
        if first.fits(length, i):
            slots[i] = _window(shift, first, i)
    return tuple(slots)


def compact(slots: Iterable[Optional[BreakWindow]]) -> tuple[BreakWindow, ...]:
    """Drop empty slots; slot_index keeps each break's original position."""
    return tuple(s for s in slots if s is not None)
