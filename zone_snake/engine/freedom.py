"""Bounded flood-fill estimating local room to maneuver."""

from __future__ import annotations

from collections import deque

from zone_snake.domain.geometry import Cell
from zone_snake.domain.world import WorldModel


def freedom_obstacles(world: WorldModel) -> frozenset[Cell]:
    """Cells the flood-fill never enters.

    Traps, other agents' bodies minus their tails (tails vacate next tick)
    and every legal next-head cell of other agents. Self's body is free.
    """
    blocked: set[Cell] = set(world.trap_cells)
    for agent in world.opponents:
        blocked.update(agent.body[:-1])
    blocked |= world.opponent_next_heads
    return frozenset(blocked)


def reachable_count(start: Cell, world: WorldModel, max_depth: int) -> int:
    """Number of cells dequeued by a BFS from *start*, capped at *max_depth*.

    A monotone, saturating proxy for free space, not the exact size of the
    connected component.
    """
    if max_depth < 1:
        return 0
    blocked = freedom_obstacles(world)
    shielded = world.me.shield_time > 0
    zone = world.current_zone

    visited = {start}
    queue = deque([start])
    count = 0
    while queue and count < max_depth:
        current = queue.popleft()
        count += 1
        for nxt in current.neighbors():
            if nxt in visited or not world.in_bounds(nxt):
                continue
            if not shielded and not zone.contains(nxt):
                continue
            if nxt in blocked:
                continue
            visited.add(nxt)
            queue.append(nxt)
    return count
