"""Direction selector: combine safety, target distance and free space."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zone_snake.config.types import HeuristicConfig
from zone_snake.domain.geometry import Cell, Direction
from zone_snake.domain.world import ItemKind, WorldModel
from zone_snake.engine.freedom import reachable_count
from zone_snake.engine.oracle import count_obstacles, is_lethal
from zone_snake.engine.scoring import Target

logger = logging.getLogger(__name__)

DEFAULT_HEURISTICS = HeuristicConfig()


@dataclass(frozen=True)
class Selection:
    """Outcome of one selector pass; ``None`` scores mark discarded moves."""

    direction: Direction | None
    scores: dict[Direction, float | None] = field(default_factory=dict)


def competition_penalty(
    dest: Cell, world: WorldModel, target: Target, heuristics: HeuristicConfig
) -> float:
    """Penalty for opponents whose heads are strictly closer to the target."""
    dist = dest.manhattan(target.item.cell)
    chest_target = target.item.kind is ItemKind.CHEST
    penalty = 0.0
    for other in world.opponents:
        if chest_target and not other.has_key:
            continue
        other_dist = other.head.manhattan(target.item.cell)
        if other_dist < dist:
            penalty += heuristics.competition_penalty * (dist - other_dist)
    return penalty


def score_destination(
    dest: Cell,
    world: WorldModel,
    target: Target | None,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> float:
    """Composite score of moving the head onto *dest*."""
    if target is not None:
        score = -heuristics.distance_weight * dest.manhattan(target.item.cell)
        score -= competition_penalty(dest, world, target, heuristics)
    else:
        score = float(reachable_count(dest, world, heuristics.roam_depth))
    return score + heuristics.tie_lean_weight * reachable_count(
        dest, world, heuristics.target_depth
    )


def select_direction(
    world: WorldModel,
    target: Target | None,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> Selection:
    """Best non-lethal move, or a ``Selection`` with ``direction=None``."""
    me = world.me
    scores: dict[Direction, float | None] = {}
    best: Direction | None = None
    best_score = 0.0
    best_obstacles = 0

    for direction in me.legal_moves():
        dest = me.head.neighbor(direction)
        if is_lethal(dest, world, consider_opponent_heads=True, heuristics=heuristics):
            scores[direction] = None
            continue
        score = score_destination(dest, world, target, heuristics)
        scores[direction] = score
        if best is None or score > best_score:
            best, best_score = direction, score
            best_obstacles = count_obstacles(dest, world, heuristics)
        elif score == best_score:
            obstacles = count_obstacles(dest, world, heuristics)
            if obstacles < best_obstacles:
                best, best_obstacles = direction, obstacles

    logger.debug("selector scores %s -> %s", scores, best)
    return Selection(direction=best, scores=scores)
