"""Visualization: matplotlib snapshot renderer and themes."""

from zone_snake.viz.render import CELL_CODES, build_cell_array, render_world
from zone_snake.viz.theme import DEFAULT_THEME, Theme

__all__ = ["CELL_CODES", "DEFAULT_THEME", "Theme", "build_cell_array", "render_world"]
