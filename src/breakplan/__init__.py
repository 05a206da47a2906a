from .config import Config, cfg
from .main import run_placement
from .models import BreakRule, DistributionType, ShiftWindow, Weekday
from .pipeline import place_breaks
from .result_types import BreakWindow, FailureReason, PlacementResult

__all__ = [
    "Config",
    "cfg",
    "BreakRule",
    "BreakWindow",
    "DistributionType",
    "FailureReason",
    "PlacementResult",
    "ShiftWindow",
    "Weekday",
    "place_breaks",
    "run_placement",
]
