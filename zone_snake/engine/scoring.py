"""Target scorer: rank every item by type-specific desirability."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from zone_snake.config.constants import NEVER_EXPIRES
from zone_snake.config.types import BeanFallbackPolicy, HeuristicConfig
from zone_snake.domain.world import Item, ItemKind, WorldModel
from zone_snake.engine.freedom import reachable_count

logger = logging.getLogger(__name__)

DEFAULT_HEURISTICS = HeuristicConfig()


@dataclass(frozen=True)
class Target:
    """The item the engine pursues this tick."""

    item: Item
    score: float


def _growth_bean_score(item: Item, world: WorldModel, dist: int, h: HeuristicConfig) -> float:
    free = reachable_count(item.cell, world, h.bean_depth)
    length = world.me.length
    if length < h.bean_short_length and free > h.bean_short_free and not world.rich_food_present:
        return h.bean_short_score / dist
    if length < h.bean_medium_length and free > h.bean_medium_free:
        return h.bean_medium_score / dist
    if h.bean_fallback_policy is BeanFallbackPolicy.REJECT:
        return h.reject_score
    return h.bean_fallback_score / dist


def score_item(
    item: Item,
    world: WorldModel,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> float:
    """Desirability of *item* for self; ``heuristics.reject_score`` means never."""
    h = heuristics
    me = world.me
    dist = max(1, me.head.manhattan(item.cell))
    kind = item.kind

    if kind is ItemKind.FOOD:
        free = reachable_count(item.cell, world, h.target_depth)
        return item.value * h.food_weight / dist + h.food_freedom_weight * free
    if kind is ItemKind.GROWTH_BEAN:
        return _growth_bean_score(item, world, dist, h)
    if kind is ItemKind.KEY:
        reachable_in_time = item.lifetime == NEVER_EXPIRES or item.lifetime >= dist
        if not me.has_key and reachable_in_time:
            return h.key_score / dist
        return h.reject_score
    if kind is ItemKind.CHEST:
        return h.chest_score / dist if me.has_key else h.reject_score
    return h.reject_score


def select_target(
    world: WorldModel,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> Target | None:
    """Pick the best-scoring item; a held key always redirects to a chest."""
    best: Target | None = None
    best_chest: Target | None = None
    for item in world.target_candidates():
        score = score_item(item, world, heuristics)
        if score <= heuristics.reject_score:
            continue
        candidate = Target(item=item, score=score)
        if best is None or score > best.score:
            best = candidate
        if item.kind is ItemKind.CHEST and (best_chest is None or score > best_chest.score):
            best_chest = candidate

    if world.me.has_key and best_chest is not None and best is not best_chest:
        logger.debug("key held: overriding target %s with chest %s", best, best_chest)
        best = best_chest
    return best
