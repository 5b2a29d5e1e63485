"""I/O layer: judge protocol, Parquet schemas and output paths."""

from zone_snake.io.ingest import SnapshotFormatError, format_action, parse_snapshot
from zone_snake.io.paths import decision_log_path, logs_dir, resolve_within_base
from zone_snake.io.schemas import DECISION_LOG_SCHEMA

__all__ = [
    "DECISION_LOG_SCHEMA",
    "SnapshotFormatError",
    "decision_log_path",
    "format_action",
    "logs_dir",
    "parse_snapshot",
    "resolve_within_base",
]
