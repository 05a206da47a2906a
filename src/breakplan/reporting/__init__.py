from __future__ import annotations

from .adapters import PandasResultAdapter, ResultAdapter
from .reporter import Reporter
from .text_report import render_text_report

__all__ = [
    "Reporter",
    "ResultAdapter",
    "PandasResultAdapter",
    "render_text_report",
]
