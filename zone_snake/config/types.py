"""Configuration dataclasses for the decision engine and its tooling.

All frozen dataclasses that parameterise the engine, its heuristics and the
replay tooling live here. Validation happens in ``__post_init__`` and raises
``ValueError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from zone_snake.config.constants import (
    CONGESTION_LIMIT,
    DEFAULT_SELF_ID,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_TICKS,
    REJECT_SCORE,
    ROAM_FREEDOM_DEPTH,
    SHIELD_MIN_REMAINING_TICKS,
    SHIELD_MIN_SCORE,
    TARGET_FREEDOM_DEPTH,
)

__all__ = [
    "BeanFallbackPolicy",
    "EngineConfig",
    "HeuristicConfig",
    "ReplayConfig",
    "ShieldThresholds",
]


class BeanFallbackPolicy(Enum):
    """How a growth bean that misses both priority tiers is scored."""

    LOW_PRIORITY = "low_priority"
    REJECT = "reject"


@dataclass(frozen=True)
class EngineConfig:
    """Identity and board geometry the engine is constructed with."""

    self_id: int = DEFAULT_SELF_ID
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    max_ticks: int = MAX_TICKS

    def __post_init__(self) -> None:
        if self.grid_width < 1:
            raise ValueError("grid_width must be >= 1")
        if self.grid_height < 1:
            raise ValueError("grid_height must be >= 1")
        if self.max_ticks < 1:
            raise ValueError("max_ticks must be >= 1")


@dataclass(frozen=True)
class ShieldThresholds:
    """Minimum ``shield_time`` at which each lethality check is waived.

    A check applies while ``shield_time`` is strictly below its threshold.
    Self-collision, traps and the grid edge ignore the shield entirely.
    """

    zone: int = 1
    shrink: int = 2
    body: int = 2
    head: int = 1

    def __post_init__(self) -> None:
        for name in ("zone", "shrink", "body", "head"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} threshold must be >= 0")


@dataclass(frozen=True)
class HeuristicConfig:
    """Tunable scoring weights for target selection and direction choice."""

    food_weight: float = 100.0
    food_freedom_weight: float = 10.0
    bean_short_length: int = 10
    bean_short_free: int = 10
    bean_short_score: float = 80.0
    bean_medium_length: int = 15
    bean_medium_free: int = 5
    bean_medium_score: float = 45.0
    bean_fallback_policy: BeanFallbackPolicy = BeanFallbackPolicy.LOW_PRIORITY
    bean_fallback_score: float = 25.0
    key_score: float = 2000.0
    chest_score: float = 2e5
    reject_score: float = REJECT_SCORE
    distance_weight: float = 100.0
    competition_penalty: float = 50.0
    tie_lean_weight: float = 0.1
    target_depth: int = TARGET_FREEDOM_DEPTH
    roam_depth: int = ROAM_FREEDOM_DEPTH
    bean_depth: int = TARGET_FREEDOM_DEPTH
    congestion_limit: int = CONGESTION_LIMIT
    shield_min_score: int = SHIELD_MIN_SCORE
    shield_min_remaining_ticks: int = SHIELD_MIN_REMAINING_TICKS
    shields: ShieldThresholds = field(default_factory=ShieldThresholds)

    def __post_init__(self) -> None:
        if self.target_depth < 1:
            raise ValueError("target_depth must be >= 1")
        if self.roam_depth < 1:
            raise ValueError("roam_depth must be >= 1")
        if self.bean_depth < 1:
            raise ValueError("bean_depth must be >= 1")
        if not 1 <= self.congestion_limit <= 4:
            raise ValueError("congestion_limit must be in [1, 4]")
        if self.chest_score <= self.key_score:
            raise ValueError("chest_score must exceed key_score")
        if self.competition_penalty < 0:
            raise ValueError("competition_penalty must be >= 0")


@dataclass(frozen=True)
class ReplayConfig:
    """Settings for batch replay of recorded snapshots."""

    out_dir: Path = Path("data")
    seed: int = 0
    engine: EngineConfig = field(default_factory=EngineConfig)
    heuristics: HeuristicConfig = field(default_factory=HeuristicConfig)
