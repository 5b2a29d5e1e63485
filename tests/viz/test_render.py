"""Tests for zone_snake.viz.render."""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from zone_snake.domain.world import SafeZone  # noqa: E402
from zone_snake.engine.decide import DecisionEngine  # noqa: E402
from zone_snake.viz.render import CELL_CODES, build_cell_array, render_world  # noqa: E402
from zone_snake.viz.theme import DEFAULT_THEME  # noqa: E402


class TestBuildCellArray:
    def test_shape_is_rows_by_cols(self, make_world) -> None:
        assert build_cell_array(make_world()).shape == (30, 40)

    def test_paints_agents_and_items(self, make_world, make_agent, make_item) -> None:
        other = make_agent([(10, 10), (10, 11)], agent_id=7)
        world = make_world(opponents=[other], items=[make_item(2, 3, -2), make_item(4, 6, 3)])
        grid = build_cell_array(world)
        assert grid[5, 5] == CELL_CODES["self_head"]
        assert grid[5, 4] == CELL_CODES["self_body"]
        assert grid[10, 10] == CELL_CODES["opponent_head"]
        assert grid[10, 11] == CELL_CODES["opponent_body"]
        assert grid[2, 3] == CELL_CODES["trap"]
        assert grid[4, 6] == CELL_CODES["food"]

    def test_marks_outside_zone(self, make_world) -> None:
        grid = build_cell_array(make_world(current_zone=SafeZone(0, 0, 10, 10)))
        assert grid[0, 11] == CELL_CODES["outside_zone"]
        assert grid[10, 10] == CELL_CODES["empty"]


def test_theme_has_color_per_code() -> None:
    assert len(DEFAULT_THEME.cell_colors) == len(CELL_CODES)


class TestRenderWorld:
    def test_writes_png(self, tmp_path: Path, make_world) -> None:
        out = render_world(make_world(), tmp_path / "frame.png")
        assert out.exists()
        assert out.stat().st_size > 0

    def test_with_decision(self, tmp_path: Path, make_world, make_item) -> None:
        world = make_world(items=[make_item(5, 9, 3)])
        decision = DecisionEngine().decide(world)
        out = render_world(world, tmp_path / "nested" / "frame.png", decision=decision)
        assert out.exists()

    def test_rejects_path_outside_base(self, tmp_path: Path, make_world) -> None:
        with pytest.raises(ValueError, match="resolves outside"):
            render_world(make_world(), Path("../escape.png"), base_dir=tmp_path / "renders")
