"""Shared builders for synthetic world snapshots."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from zone_snake.config.constants import DEFAULT_SELF_ID
from zone_snake.domain.geometry import Cell, Direction
from zone_snake.domain.world import Agent, Chest, Item, Key, SafeZone, WorldModel

FULL_ZONE = SafeZone(x_min=0, y_min=0, x_max=39, y_max=29)
NO_SHRINK_TICK = 10_000


def build_agent(
    cells: Iterable[tuple[int, int]],
    agent_id: int = DEFAULT_SELF_ID,
    direction: Direction = Direction.RIGHT,
    score: int = 0,
    shield_cooldown: int = 0,
    shield_time: int = 0,
    has_key: bool = False,
) -> Agent:
    body = tuple(Cell(row, col) for row, col in cells)
    return Agent(
        agent_id=agent_id,
        length=len(body),
        score=score,
        direction=direction,
        shield_cooldown=shield_cooldown,
        shield_time=shield_time,
        body=body,
        has_key=has_key,
    )


def build_item(row: int, col: int, value: int, lifetime: int = -1) -> Item:
    return Item(cell=Cell(row, col), value=value, lifetime=lifetime)


def build_world(
    me: Agent | None = None,
    opponents: Iterable[Agent] = (),
    items: Iterable[Item] = (),
    remaining_ticks: int = 200,
    current_zone: SafeZone = FULL_ZONE,
    next_zone: SafeZone = FULL_ZONE,
    next_zone_tick: int = NO_SHRINK_TICK,
    final_zone: SafeZone = FULL_ZONE,
    final_zone_tick: int = NO_SHRINK_TICK,
    chests: Iterable[Chest] = (),
    keys: Iterable[Key] = (),
) -> WorldModel:
    """World on the default 40x30 board; self defaults to a length-3 snake at (5, 5)."""
    if me is None:
        me = build_agent([(5, 5), (5, 4), (5, 3)])
    return WorldModel(
        remaining_ticks=remaining_ticks,
        items=tuple(items),
        agents=(me, *opponents),
        self_id=me.agent_id,
        current_zone=current_zone,
        next_zone=next_zone,
        next_zone_tick=next_zone_tick,
        final_zone=final_zone,
        final_zone_tick=final_zone_tick,
        chests=tuple(chests),
        keys=tuple(keys),
    )


@pytest.fixture
def make_agent() -> Callable[..., Agent]:
    return build_agent


@pytest.fixture
def make_item() -> Callable[..., Item]:
    return build_item


@pytest.fixture
def make_world() -> Callable[..., WorldModel]:
    return build_world
