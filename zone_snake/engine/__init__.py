"""Decision engine: lethality oracle, flood-fill, scoring, selection, escape."""

from zone_snake.engine.decide import Decision, DecisionEngine, decide
from zone_snake.engine.fallback import DecisionTier, cautious_retry, escape, forced_move
from zone_snake.engine.freedom import reachable_count
from zone_snake.engine.oracle import congestion, count_obstacles, is_lethal
from zone_snake.engine.scoring import Target, score_item, select_target
from zone_snake.engine.selector import Selection, select_direction

__all__ = [
    "Decision",
    "DecisionEngine",
    "DecisionTier",
    "Selection",
    "Target",
    "cautious_retry",
    "congestion",
    "count_obstacles",
    "decide",
    "escape",
    "forced_move",
    "is_lethal",
    "reachable_count",
    "score_item",
    "select_direction",
    "select_target",
]
