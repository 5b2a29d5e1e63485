"""Batch replay of recorded snapshots through the decision engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from random import Random

from zone_snake.config.constants import FLUSH_THRESHOLD
from zone_snake.config.types import ReplayConfig
from zone_snake.engine.decide import DecisionEngine
from zone_snake.io.ingest import parse_snapshot
from zone_snake.io.paths import decision_log_path, logs_dir
from zone_snake.simulation.persistence import DecisionLogWriter

logger = logging.getLogger(__name__)


def replay_snapshots(
    snapshot_paths: Iterable[Path],
    config: ReplayConfig | None = None,
    flush_threshold: int = FLUSH_THRESHOLD,
) -> list[dict[str, object]]:
    """Decide every snapshot file and persist the decisions to Parquet.

    Snapshot ``i`` is decided with ``Random(config.seed + i)`` so each row is
    reproducible on its own. Returns one summary dict per snapshot.
    """
    cfg = config or ReplayConfig()
    out_dir = Path(cfg.out_dir)
    log_path = decision_log_path(out_dir)
    log = DecisionLogWriter(log_path, flush_threshold)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    summaries: list[dict[str, object]] = []

    with log:
        for index, path in enumerate(snapshot_paths):
            path = Path(path)
            world = parse_snapshot(path.read_text(), cfg.engine)
            engine = DecisionEngine(cfg.engine, cfg.heuristics, Random(cfg.seed + index))
            decision = engine.decide(world)
            log.append(path.name, world.tick, world.remaining_ticks, decision)
            summaries.append(
                {
                    "snapshot": path.name,
                    "tick": world.tick,
                    "action": int(decision.action),
                    "tier": decision.tier.value,
                }
            )

    logger.info("replayed %d snapshots into %s", log.rows_written, log_path)
    return summaries
