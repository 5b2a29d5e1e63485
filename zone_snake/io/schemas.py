"""Parquet schema for the per-snapshot decision log.

Replay tooling and analysis read against this single column contract.
"""

from __future__ import annotations

import pyarrow as pa

DECISION_LOG_SCHEMA_VERSION = 1

DECISION_LOG_SCHEMA = pa.schema(
    [
        ("snapshot", pa.string()),
        ("tick", pa.int64()),
        ("remaining_ticks", pa.int64()),
        ("action", pa.int64()),
        ("tier", pa.string()),
        ("target_row", pa.int64()),
        ("target_col", pa.int64()),
        ("target_value", pa.int64()),
        ("target_score", pa.float64()),
        ("score_left", pa.float64()),
        ("score_up", pa.float64()),
        ("score_right", pa.float64()),
        ("score_down", pa.float64()),
    ],
    metadata={"schema_version": str(DECISION_LOG_SCHEMA_VERSION)},
)

DIRECTION_SCORE_COLUMNS = ("score_left", "score_up", "score_right", "score_down")
"""Per-direction score columns in direction-code order."""
