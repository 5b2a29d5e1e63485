"""Per-tick decision engine for the zone snake survival game."""

from zone_snake.config.types import EngineConfig, HeuristicConfig
from zone_snake.domain.geometry import Action, Cell, Direction
from zone_snake.domain.world import WorldModel
from zone_snake.engine.decide import Decision, DecisionEngine, decide
from zone_snake.io.ingest import format_action, parse_snapshot

__all__ = [
    "Action",
    "Cell",
    "Decision",
    "DecisionEngine",
    "Direction",
    "EngineConfig",
    "HeuristicConfig",
    "WorldModel",
    "decide",
    "format_action",
    "parse_snapshot",
]
