"""Replay tooling: batch decisions and Parquet persistence."""

from zone_snake.simulation.persistence import DecisionLogWriter, decision_row
from zone_snake.simulation.replay import replay_snapshots

__all__ = ["DecisionLogWriter", "decision_row", "replay_snapshots"]
