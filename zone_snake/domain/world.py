"""Immutable per-tick world model.

The model is rebuilt from the judge snapshot on every tick and never mutated
during a decision. Derived views (trap cells, opponents, the upcoming zone)
are computed on demand and cached on the frozen instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property

from zone_snake.config.constants import (
    CHEST_VALUE,
    FOOD_RICH_VALUE,
    GRID_HEIGHT,
    GRID_WIDTH,
    GROWTH_BEAN_VALUE,
    KEY_VALUE,
    MAX_TICKS,
    NEVER_EXPIRES,
    NO_HOLDER,
    TRAP_VALUE,
)
from zone_snake.domain.geometry import Cell, Direction


class ItemKind(Enum):
    """Closed set of item variants encoded by the signed item value."""

    FOOD = "food"
    GROWTH_BEAN = "growth_bean"
    TRAP = "trap"
    KEY = "key"
    CHEST = "chest"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: int) -> ItemKind:
        if value > 0:
            return cls.FOOD
        return _KIND_BY_VALUE.get(value, cls.UNKNOWN)


_KIND_BY_VALUE: dict[int, ItemKind] = {
    GROWTH_BEAN_VALUE: ItemKind.GROWTH_BEAN,
    TRAP_VALUE: ItemKind.TRAP,
    KEY_VALUE: ItemKind.KEY,
    CHEST_VALUE: ItemKind.CHEST,
}


@dataclass(frozen=True)
class Item:
    """A collectible (or hazardous) object lying on the grid."""

    cell: Cell
    value: int
    lifetime: int = NEVER_EXPIRES

    @property
    def kind(self) -> ItemKind:
        return ItemKind.from_value(self.value)


@dataclass(frozen=True)
class Chest:
    cell: Cell
    value: int


@dataclass(frozen=True)
class Key:
    cell: Cell
    holder_id: int = NO_HOLDER
    remaining_time: int = NEVER_EXPIRES


@dataclass(frozen=True)
class Agent:
    """One snake on the board; ``body[0]`` is the head."""

    agent_id: int
    length: int
    score: int
    direction: Direction
    shield_cooldown: int
    shield_time: int
    body: tuple[Cell, ...]
    has_key: bool = False

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]

    @property
    def neck(self) -> Cell | None:
        """The cell right behind the head, or None for a one-cell body."""
        return self.body[1] if len(self.body) > 1 else None

    def legal_moves(self) -> list[Direction]:
        """Directions this agent may take; reversal is barred once length > 1."""
        reverse = self.direction.opposite()
        return [d for d in Direction if not (self.length > 1 and d == reverse)]

    def next_head_cells(self) -> set[Cell]:
        """Every cell this agent's head can occupy on the next tick."""
        return {self.head.neighbor(d) for d in self.legal_moves()}


@dataclass(frozen=True)
class SafeZone:
    """Axis-aligned rectangle with inclusive bounds; x is col, y is row."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    def contains(self, cell: Cell) -> bool:
        return self.x_min <= cell.col <= self.x_max and self.y_min <= cell.row <= self.y_max

    def contains_zone(self, other: SafeZone) -> bool:
        return (
            self.x_min <= other.x_min
            and self.y_min <= other.y_min
            and other.x_max <= self.x_max
            and other.y_max <= self.y_max
        )


@dataclass(frozen=True)
class WorldModel:
    """Full snapshot of one tick, as seen by the agent ``self_id``."""

    remaining_ticks: int
    items: tuple[Item, ...]
    agents: tuple[Agent, ...]
    self_id: int
    current_zone: SafeZone
    next_zone: SafeZone
    next_zone_tick: int
    final_zone: SafeZone
    final_zone_tick: int
    chests: tuple[Chest, ...] = ()
    keys: tuple[Key, ...] = ()
    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    max_ticks: int = MAX_TICKS
    last_action: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not any(a.agent_id == self.self_id for a in self.agents):
            raise ValueError(f"no agent with self_id={self.self_id} in snapshot")

    @cached_property
    def me(self) -> Agent:
        return next(a for a in self.agents if a.agent_id == self.self_id)

    @cached_property
    def opponents(self) -> tuple[Agent, ...]:
        return tuple(a for a in self.agents if a.agent_id != self.self_id)

    @property
    def tick(self) -> int:
        """Ticks elapsed since the start of the game."""
        return self.max_ticks - self.remaining_ticks

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.grid_height and 0 <= cell.col < self.grid_width

    @cached_property
    def trap_cells(self) -> frozenset[Cell]:
        return frozenset(i.cell for i in self.items if i.kind is ItemKind.TRAP)

    @cached_property
    def chest_cells(self) -> frozenset[Cell]:
        cells = {i.cell for i in self.items if i.kind is ItemKind.CHEST}
        cells.update(c.cell for c in self.chests)
        return frozenset(cells)

    @property
    def keyless_chest_cells(self) -> frozenset[Cell]:
        """Chest cells that are obstacles because self holds no key."""
        return frozenset() if self.me.has_key else self.chest_cells

    @cached_property
    def opponent_body_cells(self) -> frozenset[Cell]:
        return frozenset(c for a in self.opponents for c in a.body)

    @cached_property
    def opponent_next_heads(self) -> frozenset[Cell]:
        cells: set[Cell] = set()
        for agent in self.opponents:
            cells |= agent.next_head_cells()
        return frozenset(cells)

    def upcoming_zone(self) -> SafeZone | None:
        """Zone that takes effect on the next tick, if a shrink lands then."""
        next_tick = self.tick + 1
        if next_tick == self.next_zone_tick:
            return self.next_zone
        if next_tick == self.final_zone_tick:
            return self.final_zone
        return None

    @cached_property
    def rich_food_present(self) -> bool:
        return any(i.kind is ItemKind.FOOD and i.value >= FOOD_RICH_VALUE for i in self.items)

    def target_candidates(self) -> tuple[Item, ...]:
        """Items plus chest and ground-key list entries with no mirroring item.

        A ground key carries its ``remaining_time`` as the item lifetime.
        """
        item_cells = {(i.cell, i.kind) for i in self.items}
        chests = tuple(
            Item(cell=c.cell, value=CHEST_VALUE, lifetime=NEVER_EXPIRES)
            for c in self.chests
            if (c.cell, ItemKind.CHEST) not in item_cells
        )
        keys = tuple(
            Item(cell=k.cell, value=KEY_VALUE, lifetime=k.remaining_time)
            for k in self.keys
            if k.holder_id == NO_HOLDER and (k.cell, ItemKind.KEY) not in item_cells
        )
        return self.items + chests + keys
