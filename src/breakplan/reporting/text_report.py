from __future__ import annotations

from typing import Any

import pandas as pd

from breakplan.models import BreakRule, ShiftWindow
from breakplan.timemath import duration_minutes, format_hhmm

from .adapters import ResultAdapter


def _log_print(lines: list[str], *args, **kwargs) -> None:
    """Print and keep a copy of the printed line."""
    sep = kwargs.get("sep", " ")
    lines.append(sep.join(str(a) for a in args))
    print(*args, **kwargs)


def _fmt_minutes(x: float | None, nd: int = 1) -> str:
    if x is None or pd.isna(x):
        return "nan"
    return f"{float(x):g}" if float(x).is_integer() else f"{float(x):.{nd}f}"


def _distribution_name(rule: BreakRule) -> str:
    if rule.has_known_distribution:
        return rule.distribution.name
    return "Unknown"


def render_text_report(
    adapter: ResultAdapter, res: Any, shift: ShiftWindow
) -> list[str]:
    """Print the break calculation summary; return the printed lines."""
    lines: list[str] = []
    hours = duration_minutes(shift) / 60.0

    _log_print(lines, "\nBreak Calculation Summary")
    _log_print(
        lines,
        f"Shift: {format_hhmm(shift.start)} - {format_hhmm(shift.end)} "
        f"({hours:.1f} hours)",
    )

    reason = getattr(res, "reason", None)
    if reason is not None:
        _log_print(lines, "Result: No breaks were created due to validation failures:")
        _log_print(lines, f"  - {reason.description}")
        return lines

    rule: BreakRule | None = getattr(res, "rule", None)
    if rule is not None:
        single = rule.total_break_minutes / rule.break_count
        _log_print(
            lines,
            f"Break Rule: {rule.total_break_minutes} minutes total, "
            f"{rule.break_count} breaks",
        )
        _log_print(lines, f"Distribution: {_distribution_name(rule)}")
        _log_print(lines, f"Single Break Length: {_fmt_minutes(single)} minutes")

    df = adapter.df_breaks(res)
    _log_print(lines, f"Number of Breaks Created: {len(df)}")
    for row in df.itertuples(index=False):
        _log_print(
            lines,
            f"  Break {row.slot_index + 1}: {format_hhmm(row.start.to_pydatetime())}"
            f" - {format_hhmm(row.end.to_pydatetime())}"
            f" ({_fmt_minutes(row.minutes)} min)",
        )
    return lines
