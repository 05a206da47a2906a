from __future__ import annotations

import logging
from typing import Mapping, Optional, Type, Union

from breakplan.distribution.after_hours import AfterHoursDistributor
from breakplan.distribution.base import Distributor
from breakplan.distribution.beginning import BeginningDistributor
from breakplan.distribution.end import EndDistributor
from breakplan.distribution.middle import MiddleDistributor
from breakplan.models import BreakRule, DistributionType, ShiftWindow
from breakplan.result_types import FailureReason, FirstBreak

logger = logging.getLogger(__name__)

DistributorRegistry = Mapping[DistributionType, Type[Distributor]]

_DEFAULT_DISTRIBUTORS: list[Type[Distributor]] = [
    BeginningDistributor,
    MiddleDistributor,
    EndDistributor,
    AfterHoursDistributor,
]


def default_registry() -> dict[DistributionType, Type[Distributor]]:
    """Return a fresh mapping of distribution type to distributor class."""
    return {cls.kind: cls for cls in _DEFAULT_DISTRIBUTORS}


def normalize_registry(
    distributors: Union[DistributorRegistry, list[Type[Distributor]], None],
) -> dict[DistributionType, Type[Distributor]]:
    """Turn user-provided distributors into a registry, falling back to defaults."""
    if distributors is None:
        return default_registry()
    if isinstance(distributors, Mapping):
        return dict(distributors)

    registry: dict[DistributionType, Type[Distributor]] = {}
    for item in distributors:
        if isinstance(item, type) and issubclass(item, Distributor):
            registry[item.kind] = item
        else:
            raise TypeError(
                "Distributors must be Distributor subclasses; " f"got {type(item)!r}"
            )
    return registry


def get_distributor(
    rule: BreakRule, registry: Optional[DistributorRegistry] = None
) -> Optional[Distributor]:
    """Instantiate the distributor for the rule's distribution, or None if unknown."""
    reg = registry if registry is not None else default_registry()
    if not rule.has_known_distribution:
        return None
    cls = reg.get(rule.distribution)
    return cls(rule) if cls is not None else None


def compute_first(
    shift: ShiftWindow,
    rule: BreakRule,
    single_break_minutes: float,
    registry: Optional[DistributorRegistry] = None,
) -> Union[FirstBreak, FailureReason]:
    distributor = get_distributor(rule, registry)
    if distributor is None:
        logger.debug("No distributor for %r", rule.distribution)
        return FailureReason.INVALID_DISTRIBUTION_TYPE
    return distributor.compute_first(shift, single_break_minutes)
