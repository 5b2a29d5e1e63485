"""Tests for zone_snake.domain.world views."""

from __future__ import annotations

import pytest

from zone_snake.config.constants import DEFAULT_SELF_ID
from zone_snake.domain.geometry import Cell, Direction
from zone_snake.domain.world import Chest, ItemKind, Key, SafeZone


class TestItemKind:
    @pytest.mark.parametrize(
        ("value", "kind"),
        [
            (1, ItemKind.FOOD),
            (5, ItemKind.FOOD),
            (-1, ItemKind.GROWTH_BEAN),
            (-2, ItemKind.TRAP),
            (-3, ItemKind.KEY),
            (-5, ItemKind.CHEST),
            (-4, ItemKind.UNKNOWN),
            (0, ItemKind.UNKNOWN),
        ],
    )
    def test_from_value(self, value: int, kind: ItemKind) -> None:
        assert ItemKind.from_value(value) is kind


class TestAgent:
    def test_head_neck_tail(self, make_agent) -> None:
        agent = make_agent([(5, 5), (5, 4), (5, 3)])
        assert agent.head == Cell(5, 5)
        assert agent.neck == Cell(5, 4)
        assert agent.tail == Cell(5, 3)

    def test_single_cell_has_no_neck(self, make_agent) -> None:
        assert make_agent([(5, 5)]).neck is None

    def test_reversal_barred_when_long(self, make_agent) -> None:
        agent = make_agent([(5, 5), (5, 4)], direction=Direction.RIGHT)
        assert Direction.LEFT not in agent.legal_moves()
        assert len(agent.legal_moves()) == 3

    def test_reversal_allowed_at_length_one(self, make_agent) -> None:
        agent = make_agent([(5, 5)], direction=Direction.RIGHT)
        assert agent.legal_moves() == list(Direction)

    def test_next_head_cells(self, make_agent) -> None:
        agent = make_agent([(5, 5), (5, 4)], agent_id=7, direction=Direction.RIGHT)
        assert agent.next_head_cells() == {Cell(4, 5), Cell(5, 6), Cell(6, 5)}


class TestSafeZone:
    def test_bounds_are_inclusive(self) -> None:
        zone = SafeZone(x_min=0, y_min=0, x_max=10, y_max=10)
        assert zone.contains(Cell(10, 10))
        assert zone.contains(Cell(0, 0))
        assert not zone.contains(Cell(5, 11))

    def test_x_is_column(self) -> None:
        zone = SafeZone(x_min=0, y_min=0, x_max=10, y_max=20)
        assert zone.contains(Cell(row=15, col=5))
        assert not zone.contains(Cell(row=5, col=15))

    def test_contains_zone(self) -> None:
        outer = SafeZone(0, 0, 10, 10)
        assert outer.contains_zone(SafeZone(2, 2, 8, 8))
        assert not SafeZone(2, 2, 8, 8).contains_zone(outer)


class TestWorldModel:
    def test_missing_self_raises(self, make_world, make_agent) -> None:
        me = make_agent([(5, 5)], agent_id=1)
        world = make_world(me=me)
        with pytest.raises(ValueError, match="self_id"):
            type(world)(
                remaining_ticks=10,
                items=(),
                agents=(me,),
                self_id=DEFAULT_SELF_ID,
                current_zone=world.current_zone,
                next_zone=world.next_zone,
                next_zone_tick=world.next_zone_tick,
                final_zone=world.final_zone,
                final_zone_tick=world.final_zone_tick,
            )

    def test_me_and_opponents(self, make_world, make_agent) -> None:
        other = make_agent([(10, 10)], agent_id=7)
        world = make_world(opponents=[other])
        assert world.me.agent_id == DEFAULT_SELF_ID
        assert world.opponents == (other,)

    def test_tick_counts_elapsed(self, make_world) -> None:
        assert make_world(remaining_ticks=200).tick == 56

    def test_in_bounds(self, make_world) -> None:
        world = make_world()
        assert world.in_bounds(Cell(29, 39))
        assert not world.in_bounds(Cell(30, 0))
        assert not world.in_bounds(Cell(0, -1))

    def test_trap_and_chest_cells(self, make_world, make_item) -> None:
        world = make_world(
            items=[make_item(1, 1, -2), make_item(2, 2, -5)],
            chests=[Chest(cell=Cell(3, 3), value=10)],
        )
        assert world.trap_cells == {Cell(1, 1)}
        assert world.chest_cells == {Cell(2, 2), Cell(3, 3)}
        assert world.keyless_chest_cells == world.chest_cells

    def test_key_holder_sees_no_chest_obstacles(self, make_world, make_agent, make_item) -> None:
        me = make_agent([(5, 5), (5, 4)], has_key=True)
        world = make_world(me=me, items=[make_item(2, 2, -5)])
        assert world.keyless_chest_cells == frozenset()

    def test_opponent_cells(self, make_world, make_agent) -> None:
        other = make_agent([(10, 10), (10, 11)], agent_id=7, direction=Direction.LEFT)
        world = make_world(opponents=[other])
        assert world.opponent_body_cells == {Cell(10, 10), Cell(10, 11)}
        assert world.opponent_next_heads == {Cell(10, 9), Cell(9, 10), Cell(11, 10)}

    def test_upcoming_zone_on_shrink_tick(self, make_world) -> None:
        shrunk = SafeZone(5, 5, 30, 20)
        final = SafeZone(10, 10, 20, 15)
        world = make_world(remaining_ticks=200, next_zone=shrunk, next_zone_tick=57)
        assert world.upcoming_zone() == shrunk
        world = make_world(remaining_ticks=200, final_zone=final, final_zone_tick=57)
        assert world.upcoming_zone() == final
        assert make_world(remaining_ticks=200, next_zone_tick=58).upcoming_zone() is None

    def test_rich_food_present(self, make_world, make_item) -> None:
        assert make_world(items=[make_item(1, 1, 3)]).rich_food_present
        assert not make_world(items=[make_item(1, 1, 2)]).rich_food_present

    def test_target_candidates_merge_chest_list(self, make_world, make_item) -> None:
        world = make_world(
            items=[make_item(2, 2, -5)],
            chests=[Chest(cell=Cell(2, 2), value=10), Chest(cell=Cell(8, 8), value=10)],
        )
        cells = [i.cell for i in world.target_candidates()]
        assert cells == [Cell(2, 2), Cell(8, 8)]
        assert world.target_candidates()[1].kind is ItemKind.CHEST

    def test_target_candidates_merge_ground_keys(self, make_world, make_item) -> None:
        world = make_world(
            items=[make_item(2, 2, -3)],
            keys=[
                Key(cell=Cell(2, 2)),
                Key(cell=Cell(6, 6), remaining_time=4),
                Key(cell=Cell(5, 5), holder_id=7),
            ],
        )
        candidates = world.target_candidates()
        assert [i.cell for i in candidates] == [Cell(2, 2), Cell(6, 6)]
        assert candidates[1].kind is ItemKind.KEY
        assert candidates[1].lifetime == 4
