"""Batched Parquet writer for the decision log."""

from __future__ import annotations

from pathlib import Path
from types import TracebackType

import pyarrow as pa
import pyarrow.parquet as pq

from zone_snake.config.constants import FLUSH_THRESHOLD
from zone_snake.domain.geometry import Direction
from zone_snake.engine.decide import Decision
from zone_snake.io.schemas import DECISION_LOG_SCHEMA, DIRECTION_SCORE_COLUMNS


def decision_row(
    snapshot: str, tick: int, remaining_ticks: int, decision: Decision
) -> dict[str, object]:
    """Flatten one decision into a ``DECISION_LOG_SCHEMA`` row."""
    target = decision.target
    row: dict[str, object] = {
        "snapshot": snapshot,
        "tick": tick,
        "remaining_ticks": remaining_ticks,
        "action": int(decision.action),
        "tier": decision.tier.value,
        "target_row": target.item.cell.row if target else None,
        "target_col": target.item.cell.col if target else None,
        "target_value": target.item.value if target else None,
        "target_score": target.score if target else None,
    }
    for direction, column in zip(Direction, DIRECTION_SCORE_COLUMNS, strict=True):
        row[column] = decision.direction_scores.get(direction)
    return row


class DecisionLogWriter:
    """Buffers decision rows and appends them to one Parquet file in batches.

    The file is created on the first flush, so a writer that never receives a
    row leaves nothing on disk.
    """

    def __init__(self, log_path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        if flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
        self.log_path = Path(log_path)
        self.flush_threshold = flush_threshold
        self._rows: list[dict[str, object]] = []
        self._writer: pq.ParquetWriter | None = None
        self.rows_written = 0

    def append(
        self, snapshot: str, tick: int, remaining_ticks: int, decision: Decision
    ) -> None:
        self._rows.append(decision_row(snapshot, tick, remaining_ticks, decision))
        if len(self._rows) >= self.flush_threshold:
            self.flush()

    def flush(self) -> None:
        if not self._rows:
            return
        table = pa.Table.from_pylist(self._rows, schema=DECISION_LOG_SCHEMA)
        if self._writer is None:
            self._writer = pq.ParquetWriter(self.log_path, DECISION_LOG_SCHEMA)
        self._writer.write_table(table)
        self.rows_written += len(self._rows)
        self._rows.clear()

    def close(self) -> None:
        self.flush()
        if self._writer is not None:
            self._writer.close()
            self._writer = None

    def __enter__(self) -> DecisionLogWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            # Keep rows already on disk valid; drop the unflushed batch.
            self._rows.clear()
        self.close()
