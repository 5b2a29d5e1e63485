"""Per-tick decision pipeline: target, selector, then fallback escape."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from random import Random

from zone_snake.config.types import EngineConfig, HeuristicConfig
from zone_snake.domain.geometry import Action, Direction
from zone_snake.domain.world import WorldModel
from zone_snake.engine.fallback import DecisionTier, escape
from zone_snake.engine.scoring import Target, select_target
from zone_snake.engine.selector import select_direction

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decision:
    """The action emitted for one tick together with how it was reached."""

    action: Action
    tier: DecisionTier
    target: Target | None = None
    direction_scores: dict[Direction, float | None] = field(default_factory=dict)


class DecisionEngine:
    """Stateless decision engine bound to one agent identity.

    Randomness is only consumed by the forced-move tier; inject a seeded
    ``Random`` to make that tier reproducible.
    """

    def __init__(
        self,
        config: EngineConfig | None = None,
        heuristics: HeuristicConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.heuristics = heuristics or HeuristicConfig()
        self.rng = rng if rng is not None else Random()

    def decide(self, world: WorldModel) -> Decision:
        if world.self_id != self.config.self_id:
            logger.warning(
                "world is seen by agent %d, engine is bound to %d",
                world.self_id,
                self.config.self_id,
            )
        target = select_target(world, self.heuristics)
        selection = select_direction(world, target, self.heuristics)
        if selection.direction is not None:
            action, tier = Action.move(selection.direction), DecisionTier.SELECTOR
        else:
            action, tier = escape(world, self.rng, self.heuristics)
        logger.debug(
            "tick %d: action=%s tier=%s target=%s", world.tick, action.name, tier.value, target
        )
        return Decision(
            action=action,
            tier=tier,
            target=target,
            direction_scores=selection.scores,
        )


def decide(
    world: WorldModel,
    heuristics: HeuristicConfig | None = None,
    rng: Random | None = None,
) -> Decision:
    """Decide one tick for the agent the world is seen by."""
    config = EngineConfig(
        self_id=world.self_id,
        grid_width=world.grid_width,
        grid_height=world.grid_height,
        max_ticks=world.max_ticks,
    )
    return DecisionEngine(config, heuristics, rng).decide(world)
