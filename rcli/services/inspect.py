from __future__ import annotations

import pandas as pd

from ..models.record_set import RecordSet

"""Tabular preview of parsed records (``rcli csv --inspect``)."""


def render_preview(record_set: RecordSet, max_rows: int = 5) -> str:
    """Render the header and first ``max_rows`` records as an aligned text table."""
    sample = record_set.records[:max_rows]
    df = pd.DataFrame(sample, columns=record_set.fields)
    lines = [f"fields={record_set.fields} rows={len(record_set)}"]
    if df.empty:
        lines.append("(no data rows)")
    else:
        lines.append(df.to_string(index=False))
        if len(record_set) > max_rows:
            lines.append(f"... {len(record_set) - max_rows} more row(s)")
    return "\n".join(lines) + "\n"
