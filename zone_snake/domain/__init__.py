"""Domain layer: grid geometry and the immutable per-tick world model."""

from zone_snake.domain.geometry import ALL_DIRECTIONS, Action, Cell, Direction
from zone_snake.domain.world import (
    Agent,
    Chest,
    Item,
    ItemKind,
    Key,
    SafeZone,
    WorldModel,
)

__all__ = [
    "ALL_DIRECTIONS",
    "Action",
    "Agent",
    "Cell",
    "Chest",
    "Direction",
    "Item",
    "ItemKind",
    "Key",
    "SafeZone",
    "WorldModel",
]
