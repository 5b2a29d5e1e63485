"""Tests for zone_snake.domain.geometry."""

from __future__ import annotations

import pytest

from zone_snake.domain.geometry import ALL_DIRECTIONS, Action, Cell, Direction


class TestDirection:
    def test_codes_match_judge_protocol(self) -> None:
        assert [int(d) for d in ALL_DIRECTIONS] == [0, 1, 2, 3]
        assert [d.name for d in ALL_DIRECTIONS] == ["LEFT", "UP", "RIGHT", "DOWN"]

    @pytest.mark.parametrize(
        ("direction", "delta"),
        [
            (Direction.LEFT, (0, -1)),
            (Direction.UP, (-1, 0)),
            (Direction.RIGHT, (0, 1)),
            (Direction.DOWN, (1, 0)),
        ],
    )
    def test_delta(self, direction: Direction, delta: tuple[int, int]) -> None:
        assert direction.delta == delta

    def test_opposite_is_involution(self) -> None:
        for d in Direction:
            assert d.opposite() != d
            assert d.opposite().opposite() == d
        assert Direction.LEFT.opposite() is Direction.RIGHT
        assert Direction.UP.opposite() is Direction.DOWN


class TestAction:
    def test_move_maps_direction_codes(self) -> None:
        for d in Direction:
            assert int(Action.move(d)) == int(d)

    def test_shield_code(self) -> None:
        assert int(Action.SHIELD) == 4


class TestCell:
    def test_neighbor_applies_delta(self) -> None:
        assert Cell(5, 5).neighbor(Direction.UP) == Cell(4, 5)
        assert Cell(5, 5).neighbor(Direction.RIGHT) == Cell(5, 6)

    def test_neighbors_in_direction_order(self) -> None:
        assert Cell(2, 2).neighbors() == [Cell(2, 1), Cell(1, 2), Cell(2, 3), Cell(3, 2)]

    def test_manhattan(self) -> None:
        assert Cell(0, 0).manhattan(Cell(3, 4)) == 7
        assert Cell(3, 4).manhattan(Cell(3, 4)) == 0

    def test_row_major_ordering(self) -> None:
        assert sorted([Cell(1, 0), Cell(0, 5), Cell(0, 1)]) == [Cell(0, 1), Cell(0, 5), Cell(1, 0)]
