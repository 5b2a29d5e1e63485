"""Lethality oracle: is a candidate head cell immediately or imminently fatal?

Shield-dependent checks are waived once ``shield_time`` reaches the matching
:class:`~zone_snake.config.types.ShieldThresholds` value. Self-collision,
traps and the grid edge are never waived.
"""

from __future__ import annotations

from zone_snake.config.types import HeuristicConfig, ShieldThresholds
from zone_snake.domain.geometry import Cell
from zone_snake.domain.world import WorldModel

DEFAULT_HEURISTICS = HeuristicConfig()


def outside_current_zone(cell: Cell, world: WorldModel, shields: ShieldThresholds) -> bool:
    """True when *cell* is outside the current zone and the shield does not cover it."""
    return world.me.shield_time < shields.zone and not world.current_zone.contains(cell)


def outside_upcoming_zone(cell: Cell, world: WorldModel, shields: ShieldThresholds) -> bool:
    """True when a shrink lands next tick and *cell* falls outside the shrunk zone."""
    if world.me.shield_time >= shields.shrink:
        return False
    zone = world.upcoming_zone()
    return zone is not None and not zone.contains(cell)


def _is_static_hazard(cell: Cell, world: WorldModel, shields: ShieldThresholds) -> bool:
    return (
        not world.in_bounds(cell)
        or outside_current_zone(cell, world, shields)
        or outside_upcoming_zone(cell, world, shields)
        or cell in world.trap_cells
        or cell in world.keyless_chest_cells
    )


def _is_congestion_hazard(
    cell: Cell,
    world: WorldModel,
    shields: ShieldThresholds,
    consider_opponent_heads: bool,
) -> bool:
    if _is_static_hazard(cell, world, shields):
        return True
    shield_time = world.me.shield_time
    if shield_time < shields.body and cell in world.opponent_body_cells:
        return True
    return (
        consider_opponent_heads
        and shield_time < shields.head
        and cell in world.opponent_next_heads
    )


def congestion(
    cell: Cell,
    world: WorldModel,
    consider_opponent_heads: bool = True,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> int:
    """Number of *cell*'s four neighbors that are hazards for the next step."""
    shields = heuristics.shields
    return sum(
        1
        for neighbor in cell.neighbors()
        if _is_congestion_hazard(neighbor, world, shields, consider_opponent_heads)
    )


def is_lethal(
    cell: Cell,
    world: WorldModel,
    consider_opponent_heads: bool = True,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> bool:
    """Classify *cell* as a fatal (or dead-end) destination for self's head."""
    shields = heuristics.shields
    me = world.me

    if _is_static_hazard(cell, world, shields):
        return True
    # Reversal onto the own body is fatal even under a shield.
    if cell == me.head or cell == me.neck:
        return True
    if me.shield_time < shields.body and cell in world.opponent_body_cells:
        return True
    if (
        consider_opponent_heads
        and me.shield_time < shields.head
        and cell in world.opponent_next_heads
    ):
        return True
    crowded = congestion(cell, world, consider_opponent_heads, heuristics)
    return crowded >= heuristics.congestion_limit


def count_obstacles(
    cell: Cell,
    world: WorldModel,
    heuristics: HeuristicConfig = DEFAULT_HEURISTICS,
) -> int:
    """Obstacle-adjacency count used to break exact direction-score ties.

    Unlike :func:`congestion`, other bodies always count, predicted heads never
    do, and self's current head counts as an obstacle.
    """
    shields = heuristics.shields
    head = world.me.head
    return sum(
        1
        for neighbor in cell.neighbors()
        if _is_static_hazard(neighbor, world, shields)
        or neighbor in world.opponent_body_cells
        or neighbor == head
    )
