"""Fallback escape state machine, entered only when the selector finds no move.

States degrade from a relaxed safety check to a random forced move and,
when the forced move is known to be fatal, the defensive shield. The machine
always ends with a concrete action.
"""

from __future__ import annotations

import logging
from enum import Enum
from random import Random

from zone_snake.config.types import HeuristicConfig
from zone_snake.domain.geometry import Action, Direction
from zone_snake.domain.world import WorldModel
from zone_snake.engine.freedom import reachable_count
from zone_snake.engine.oracle import is_lethal

logger = logging.getLogger(__name__)

DEFAULT_HEURISTICS = HeuristicConfig()


class DecisionTier(Enum):
    """Which stage of the decision pipeline produced the action."""

    SELECTOR = "selector"
    CAUTIOUS = "cautious"
    FORCED = "forced"
    SHIELD = "shield"


def cautious_retry(
    world: WorldModel, heuristics: HeuristicConfig = DEFAULT_HEURISTICS
) -> Direction | None:
    """Roomiest move that survives the oracle with head prediction disabled."""
    me = world.me
    best: Direction | None = None
    best_free = -1
    for direction in me.legal_moves():
        dest = me.head.neighbor(direction)
        if is_lethal(dest, world, consider_opponent_heads=False, heuristics=heuristics):
            continue
        free = reachable_count(dest, world, heuristics.target_depth)
        if free > best_free:
            best, best_free = direction, free
    return best


def shield_eligible(world: WorldModel, heuristics: HeuristicConfig = DEFAULT_HEURISTICS) -> bool:
    me = world.me
    return (
        me.shield_cooldown == 0
        and me.score >= heuristics.shield_min_score
        and world.remaining_ticks >= heuristics.shield_min_remaining_ticks
    )


def forced_move(
    world: WorldModel,
    rng: Random,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> tuple[Action, DecisionTier]:
    """Random non-reversal move, swapped for the shield when that move is fatal.

    Directions are drawn without replacement; once every draw has proven
    lethal the first draw is returned as a best guess.
    """
    me = world.me
    legal = me.legal_moves()
    pool = [d for d in legal if world.in_bounds(me.head.neighbor(d))] or legal
    draws = rng.sample(pool, len(pool))

    for index, direction in enumerate(draws):
        dest = me.head.neighbor(direction)
        if not is_lethal(dest, world, consider_opponent_heads=False, heuristics=heuristics):
            return Action.move(direction), DecisionTier.FORCED
        if index == 0 and shield_eligible(world, heuristics):
            logger.warning("tick %d: forced move is fatal, activating shield", world.tick)
            return Action.SHIELD, DecisionTier.SHIELD

    logger.warning("tick %d: no survivable move, best guess %s", world.tick, draws[0].name)
    return Action.move(draws[0]), DecisionTier.FORCED


def escape(
    world: WorldModel,
    rng: Random,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> tuple[Action, DecisionTier]:
    """Run the escape states in order and return the first concrete action."""
    logger.info("tick %d: no safe move under full prediction, escaping", world.tick)
    direction = cautious_retry(world, heuristics)
    if direction is not None:
        return Action.move(direction), DecisionTier.CAUTIOUS
    return forced_move(world, rng, heuristics)
