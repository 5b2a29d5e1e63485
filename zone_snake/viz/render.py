"""Matplotlib rendering of a single world snapshot and the chosen action."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch, Rectangle

from zone_snake.domain.geometry import Action, Direction
from zone_snake.domain.world import ItemKind, SafeZone, WorldModel
from zone_snake.engine.decide import Decision
from zone_snake.io.paths import resolve_within_base
from zone_snake.viz.theme import DEFAULT_THEME, Theme

CELL_CODES: dict[str, int] = {
    "empty": 0,
    "outside_zone": 1,
    "food": 2,
    "growth_bean": 3,
    "trap": 4,
    "key": 5,
    "chest": 6,
    "opponent_body": 7,
    "opponent_head": 8,
    "self_body": 9,
    "self_head": 10,
}

_ITEM_CODES: dict[ItemKind, int] = {
    ItemKind.FOOD: CELL_CODES["food"],
    ItemKind.GROWTH_BEAN: CELL_CODES["growth_bean"],
    ItemKind.TRAP: CELL_CODES["trap"],
    ItemKind.KEY: CELL_CODES["key"],
    ItemKind.CHEST: CELL_CODES["chest"],
}


def build_cell_array(world: WorldModel) -> np.ndarray:
    """Return (H, W) int array of cell codes; later layers overwrite earlier ones."""
    grid = np.full((world.grid_height, world.grid_width), CELL_CODES["empty"], dtype=int)
    zone = world.current_zone
    rows = np.arange(world.grid_height)[:, None]
    cols = np.arange(world.grid_width)[None, :]
    inside = (
        (rows >= zone.y_min) & (rows <= zone.y_max) & (cols >= zone.x_min) & (cols <= zone.x_max)
    )
    grid[~inside] = CELL_CODES["outside_zone"]

    def paint(row: int, col: int, code: int) -> None:
        if 0 <= row < world.grid_height and 0 <= col < world.grid_width:
            grid[row, col] = code

    for item in world.items:
        code = _ITEM_CODES.get(item.kind)
        if code is not None:
            paint(item.cell.row, item.cell.col, code)
    for chest in world.chests:
        paint(chest.cell.row, chest.cell.col, CELL_CODES["chest"])
    for agent in world.agents:
        prefix = "self" if agent.agent_id == world.self_id else "opponent"
        for cell in reversed(agent.body[1:]):
            paint(cell.row, cell.col, CELL_CODES[f"{prefix}_body"])
        paint(agent.head.row, agent.head.col, CELL_CODES[f"{prefix}_head"])
    return grid


def _cell_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete colormap with one bin per cell code."""
    cmap = ListedColormap(list(theme.cell_colors))
    bounds = [code - 0.5 for code in range(len(theme.cell_colors) + 1)]
    return cmap, BoundaryNorm(bounds, cmap.N)


def _zone_patch(zone: SafeZone, color: str, label: str) -> Rectangle:
    return Rectangle(
        (zone.x_min - 0.5, zone.y_min - 0.5),
        zone.x_max - zone.x_min + 1,
        zone.y_max - zone.y_min + 1,
        fill=False,
        edgecolor=color,
        linestyle="--",
        linewidth=1.2,
        label=label,
    )


def render_world(
    world: WorldModel,
    output_path: Path,
    decision: Decision | None = None,
    theme: Theme = DEFAULT_THEME,
    base_dir: Path | None = None,
) -> Path:
    """Render *world* (and optionally the decided move) to an image file."""
    output_path = Path(output_path)
    if base_dir is not None:
        output_path = resolve_within_base(output_path, Path(base_dir))

    grid = build_cell_array(world)
    cmap, norm = _cell_cmap(theme)
    fig, ax = plt.subplots(figsize=(world.grid_width / 4, world.grid_height / 4 + 1))
    ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    for x in range(world.grid_width + 1):
        ax.axvline(x - 0.5, color=theme.grid_line_color, linewidth=0.3)
    for y in range(world.grid_height + 1):
        ax.axhline(y - 0.5, color=theme.grid_line_color, linewidth=0.3)
    ax.add_patch(_zone_patch(world.next_zone, theme.next_zone_color, "next zone"))
    ax.add_patch(_zone_patch(world.final_zone, theme.final_zone_color, "final zone"))
    ax.set_xticks([])
    ax.set_yticks([])

    title = f"tick {world.tick} (remaining {world.remaining_ticks})"
    if decision is not None:
        head = world.me.head
        if decision.action is Action.SHIELD:
            ax.scatter(
                [head.col],
                [head.row],
                s=120,
                facecolors="none",
                edgecolors=theme.move_arrow_color,
            )
        else:
            d_row, d_col = Direction(int(decision.action)).delta
            ax.annotate(
                "",
                xy=(head.col + d_col, head.row + d_row),
                xytext=(head.col, head.row),
                arrowprops={"arrowstyle": "->", "color": theme.move_arrow_color},
            )
        title += f" | {decision.action.name} via {decision.tier.value}"
    ax.set_title(title, fontsize=9)

    handles = [
        Patch(facecolor=color, edgecolor="gray", label=name.replace("_", " "))
        for name, color in zip(CELL_CODES, theme.cell_colors, strict=True)
    ]
    fig.legend(handles=handles, loc="lower center", ncol=6, fontsize=6, frameon=False)
    fig.tight_layout(rect=(0, 0.08, 1, 1))
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return output_path
