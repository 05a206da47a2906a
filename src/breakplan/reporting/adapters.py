from __future__ import annotations

from typing import Any, Optional, Protocol

import pandas as pd

BREAK_COLUMNS = ["slot_index", "start", "end", "minutes"]
TRACE_COLUMNS = ["stage", "passed", "detail"]


class ResultAdapter(Protocol):
    """Minimal interface the Reporter needs to work with any placement result."""

    def reason_name(self, res: Any) -> Optional[str]: ...
    def df_breaks(self, res: Any) -> pd.DataFrame: ...
    def df_trace(self, res: Any) -> pd.DataFrame: ...


class PandasResultAdapter:
    """Default adapter for the shipped PlacementResult dataclass."""

    def reason_name(self, res: Any) -> Optional[str]:
        reason = getattr(res, "reason", None)
        return getattr(reason, "value", None) if reason is not None else None

    def df_breaks(self, res: Any) -> pd.DataFrame:
        breaks = getattr(res, "breaks", ()) or ()
        if not breaks:
            return pd.DataFrame(columns=BREAK_COLUMNS)
        df = pd.DataFrame(
            {
                "slot_index": [b.slot_index for b in breaks],
                "start": pd.to_datetime([b.start for b in breaks]),
                "end": pd.to_datetime([b.end for b in breaks]),
            }
        )
        df["minutes"] = (df["end"] - df["start"]).dt.total_seconds() / 60.0
        return df.sort_values("slot_index").reset_index(drop=True)

    def df_trace(self, res: Any) -> pd.DataFrame:
        trace = getattr(res, "trace", ()) or ()
        if not trace:
            return pd.DataFrame(columns=TRACE_COLUMNS)
        return pd.DataFrame(
            [(r.stage, bool(r.passed), r.detail) for r in trace],
            columns=TRACE_COLUMNS,
        )
