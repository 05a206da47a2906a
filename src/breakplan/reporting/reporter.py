from __future__ import annotations

from typing import Any

from breakplan.models import BreakRule, ShiftWindow
from breakplan.precheck import precheck
from breakplan.reporting.adapters import PandasResultAdapter, ResultAdapter
from breakplan.reporting.text_report import render_text_report


class Reporter:
    """Prints precheck diagnostics before placement and a summary after it."""

    def __init__(self, adapter: ResultAdapter | None = None) -> None:
        self.adapter: ResultAdapter = adapter or PandasResultAdapter()

    def pre_place(self, shift: ShiftWindow, rules: list[BreakRule]) -> None:
        """Print why each candidate rule would not apply (if any)."""
        for rule in rules:
            issues = precheck(shift, rule)
            if not issues:
                print(f"Pre-check: rule {rule.id!r} applies.")
                continue
            for issue in issues:
                print(f"Pre-check: rule {rule.id!r}: {issue.message}")

    def post_place(self, res: Any, shift: ShiftWindow) -> list[str]:
        return render_text_report(self.adapter, res, shift)
