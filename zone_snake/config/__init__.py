"""Configuration layer: constants and typed config dataclasses."""

from zone_snake.config.constants import (
    DEFAULT_SELF_ID,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_TICKS,
    REJECT_SCORE,
    SHIELD_ACTION,
)
from zone_snake.config.types import (
    BeanFallbackPolicy,
    EngineConfig,
    HeuristicConfig,
    ReplayConfig,
    ShieldThresholds,
)

__all__ = [
    "BeanFallbackPolicy",
    "DEFAULT_SELF_ID",
    "EngineConfig",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "HeuristicConfig",
    "MAX_TICKS",
    "REJECT_SCORE",
    "ReplayConfig",
    "SHIELD_ACTION",
    "ShieldThresholds",
]
