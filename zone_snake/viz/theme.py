"""Visualization theme presets for snapshot renderers.

Themes are frozen dataclasses that group all styling constants together so a
palette can be swapped without touching the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of snapshot style tokens."""

    # One color per cell code, in code order (see render.CELL_CODES)
    cell_colors: tuple[str, ...] = (
        "#F0F0F0",  # empty
        "#D6D6D6",  # outside current zone
        "#4CAF50",  # food
        "#8BC34A",  # growth bean
        "#212121",  # trap
        "#FFC107",  # key
        "#795548",  # chest
        "#FF5722",  # opponent body
        "#E64A19",  # opponent head
        "#2196F3",  # self body
        "#0D47A1",  # self head
    )
    grid_line_color: str = "#CCCCCC"
    next_zone_color: str = "#FF9800"
    final_zone_color: str = "#F44336"
    move_arrow_color: str = "#000000"


DEFAULT_THEME = Theme()
