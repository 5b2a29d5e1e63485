"""Grid cells, compass directions and judge action codes.

Cells are ``(row, col)`` pairs with row-major ordering; row grows downward
(the judge's y axis) and col grows rightward (the judge's x axis).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from zone_snake.config.constants import SHIELD_ACTION


class Direction(IntEnum):
    """Compass move; the integer value is the judge's action code."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @property
    def delta(self) -> tuple[int, int]:
        """``(d_row, d_col)`` offset of one step in this direction."""
        return _DELTAS[self]

    def opposite(self) -> Direction:
        return Direction((self.value + 2) % 4)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.LEFT: (0, -1),
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
}

ALL_DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


class Action(IntEnum):
    """Everything the engine can emit on one tick."""

    LEFT = Direction.LEFT.value
    UP = Direction.UP.value
    RIGHT = Direction.RIGHT.value
    DOWN = Direction.DOWN.value
    SHIELD = SHIELD_ACTION

    @classmethod
    def move(cls, direction: Direction) -> Action:
        return cls(direction.value)


@dataclass(frozen=True, order=True)
class Cell:
    """A grid coordinate; equality and ordering follow ``(row, col)``."""

    row: int
    col: int

    def neighbor(self, direction: Direction) -> Cell:
        d_row, d_col = direction.delta
        return Cell(self.row + d_row, self.col + d_col)

    def neighbors(self) -> list[Cell]:
        """The four orthogonal neighbors in direction-code order."""
        return [self.neighbor(d) for d in ALL_DIRECTIONS]

    def manhattan(self, other: Cell) -> int:
        return abs(self.row - other.row) + abs(self.col - other.col)
