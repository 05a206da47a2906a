# src/breakplan/pipeline.py
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Sequence, Union

from breakplan.distribution.registry import DistributorRegistry, compute_first
from breakplan.models import BreakRule, ShiftWindow
from breakplan.placement import Slots, compact, derive_all
from breakplan.result_types import (
    FailureReason,
    FirstBreak,
    PlacementResult,
    StageRecord,
    ValidatedRule,
)
from breakplan.rules.selection import applicable_rules, select_best_rule
from breakplan.rules.validation import validate
from breakplan.timemath import add_minutes, duration_minutes, format_hhmm, minutes_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlacementContext:
    """Everything one placement run has computed so far. Replaced, never mutated."""

    shift: ShiftWindow
    candidates: tuple[BreakRule, ...]
    registry: Optional[DistributorRegistry] = None
    rule: Optional[BreakRule] = None
    validated: Optional[ValidatedRule] = None
    first: Optional[FirstBreak] = None
    slots: Slots = ()
    trace: tuple[StageRecord, ...] = ()

    def record(self, stage: str, passed: bool, detail: str = "") -> "PlacementContext":
        return replace(self, trace=self.trace + (StageRecord(stage, passed, detail),))


StageOutcome = Union[PlacementContext, FailureReason]
Stage = Callable[[PlacementContext], StageOutcome]


def _select(ctx: PlacementContext) -> StageOutcome:
    rule = select_best_rule(ctx.shift, ctx.candidates)
    if rule is None:
        return FailureReason.NO_APPLICABLE_RULE
    n_applicable = len(applicable_rules(ctx.shift, ctx.candidates))
    diff = duration_minutes(ctx.shift) - minutes_of(rule.min_shift_length)
    return replace(ctx, rule=rule).record(
        "select",
        True,
        f"{n_applicable} of {len(ctx.candidates)} rules applicable; "
        f"selected rule {rule.id!r} ({diff:g} minutes above its minimum)",
    )


def _validate(ctx: PlacementContext) -> StageOutcome:
    assert ctx.rule is not None
    outcome = validate(ctx.rule)
    if isinstance(outcome, FailureReason):
        return outcome
    return replace(ctx, validated=outcome).record(
        "validate",
        True,
        f"{ctx.rule.break_count} breaks of {outcome.single_break_minutes:g} minutes",
    )


def _distribute(ctx: PlacementContext) -> StageOutcome:
    assert ctx.rule is not None and ctx.validated is not None
    outcome = compute_first(
        ctx.shift, ctx.rule, ctx.validated.single_break_minutes, ctx.registry
    )
    if isinstance(outcome, FailureReason):
        return outcome
    return replace(ctx, first=outcome).record(
        "distribute",
        True,
        f"{ctx.rule.distribution.name}: first break "
        f"{outcome.start_offset:g}-{outcome.end_offset:g} minutes into the shift, "
        f"{outcome.spacing_minutes:g} minutes between breaks",
    )


def _check_first(ctx: PlacementContext) -> StageOutcome:
    assert ctx.first is not None
    if not ctx.first.fits(duration_minutes(ctx.shift)):
        return FailureReason.FIRST_BREAK_OUT_OF_BOUNDS
    start = add_minutes(ctx.shift.start, ctx.first.start_offset)
    end = add_minutes(ctx.shift.start, ctx.first.end_offset)
    return ctx.record(
        "bounds",
        True,
        f"first break {format_hhmm(start)}-{format_hhmm(end)} is within the shift",
    )


def _place(ctx: PlacementContext) -> StageOutcome:
    assert ctx.rule is not None and ctx.first is not None
    slots = derive_all(ctx.shift, ctx.first, ctx.rule.break_count)
    placed = sum(1 for s in slots if s is not None)
    return replace(ctx, slots=slots).record(
        "place", True, f"{placed} of {ctx.rule.break_count} breaks placed"
    )


STAGES: tuple[tuple[str, Stage], ...] = (
    ("select", _select),
    ("validate", _validate),
    ("distribute", _distribute),
    ("bounds", _check_first),
    ("place", _place),
)


def _normalize_rules(rules: Union[BreakRule, Sequence[BreakRule]]) -> tuple[BreakRule, ...]:
    if isinstance(rules, BreakRule):
        return (rules,)
    out = tuple(rules)
    for item in out:
        if not isinstance(item, BreakRule):
            raise TypeError(f"Rules must be BreakRule instances; got {type(item)!r}")
    return out


def place_breaks(
    shift: ShiftWindow,
    rules: Union[BreakRule, Sequence[BreakRule]],
    *,
    registry: Optional[DistributorRegistry] = None,
    log_stages: bool = False,
) -> PlacementResult:
    """
    Place the breaks of the best matching rule inside the shift.

    Stages run in order (select, validate, distribute, bounds, place). The
    first stage that fails ends the run with an empty result and its
    FailureReason; nothing is raised for rule problems.
    """
    if not isinstance(shift, ShiftWindow):
        raise TypeError(f"shift must be a ShiftWindow; got {type(shift)!r}")

    level = logging.INFO if log_stages else logging.DEBUG
    ctx = PlacementContext(
        shift=shift, candidates=_normalize_rules(rules), registry=registry
    )

    for name, stage in STAGES:
        outcome = stage(ctx)
        if isinstance(outcome, FailureReason):
            logger.log(level, "Stage %s failed: %s", name, outcome.value)
            failed = ctx.record(name, False, outcome.description)
            return PlacementResult(
                breaks=(), reason=outcome, rule=ctx.rule, trace=failed.trace
            )
        ctx = outcome
        logger.log(level, "Stage %s: %s", name, ctx.trace[-1].detail)

    return PlacementResult(breaks=compact(ctx.slots), rule=ctx.rule, trace=ctx.trace)
