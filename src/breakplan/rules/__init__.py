from __future__ import annotations

from .applicability import is_applicable
from .selection import applicable_rules, select_best_rule
from .validation import validate

__all__ = ["is_applicable", "applicable_rules", "select_best_rule", "validate"]
