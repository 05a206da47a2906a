from __future__ import annotations

from typing import Sequence

from breakplan.config import Config, cfg
from breakplan.distribution.registry import DistributorRegistry
from breakplan.models import BreakRule, ShiftWindow
from breakplan.pipeline import place_breaks
from breakplan.reporting import Reporter
from breakplan.result_types import PlacementResult


def run_placement(
    config: Config | None = None,
    shift: ShiftWindow | None = None,
    rules: BreakRule | Sequence[BreakRule] | None = None,
    reporter: Reporter | None = None,
    registry: DistributorRegistry | None = None,
    validate_config: bool = True,
    enable_reporting: bool = True,
) -> PlacementResult:
    """
    Place breaks for a shift and optionally report on the outcome.

    Parameters
    ----------
    config:
        The configuration for the run. Defaults to `breakplan.config.cfg` when omitted.
    shift:
        Shift to place breaks in. Built from the config when omitted.
    rules:
        Candidate rule(s). When omitted the single rule described by the config is used.
    reporter:
        Custom reporter instance. When `enable_reporting` is True and no reporter is
        provided, the default `Reporter` is used.
    registry:
        Optional mapping of distribution type to distributor class.
    validate_config:
        Toggle to run `Config.validate()` first.
    enable_reporting:
        When False, skips reporter pre/post hooks even if a reporter is provided.

    Returns
    -------
    PlacementResult
    """
    cfg_obj = config or cfg
    if validate_config:
        cfg_obj.validate()

    shift_obj = shift or cfg_obj.shift()
    if rules is None:
        candidates: list[BreakRule] = [cfg_obj.rule()]
    elif isinstance(rules, BreakRule):
        candidates = [rules]
    else:
        candidates = list(rules)

    active_reporter = reporter if enable_reporting else None
    if active_reporter is None and enable_reporting:
        active_reporter = Reporter()

    if active_reporter is not None:
        active_reporter.pre_place(shift_obj, candidates)

    result = place_breaks(
        shift_obj, candidates, registry=registry, log_stages=cfg_obj.LOG_STAGES
    )

    if active_reporter is not None:
        active_reporter.post_place(result, shift_obj)

    return result


def main() -> PlacementResult:
    """Run the default configuration and print the summary."""
    return run_placement(config=cfg, validate_config=True, enable_reporting=True)


if __name__ == "__main__":
    main()
