"""Centralized game constants for the decision engine.

Values mirror the judge's fixed rules. Consuming modules should import from
this module rather than defining their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 40
"""Default grid width (columns, the x axis)."""

GRID_HEIGHT = 30
"""Default grid height (rows, the y axis)."""

MAX_TICKS = 256
"""Total ticks in one game."""

DEFAULT_SELF_ID = 2024201552
"""Agent identifier used when none is configured."""

FOOD_RICH_VALUE = 3
"""Food value at or above which a food item counts as rich."""

GROWTH_BEAN_VALUE = -1
TRAP_VALUE = -2
KEY_VALUE = -3
CHEST_VALUE = -5

NO_HOLDER = -1
"""Key holder id meaning the key lies on the ground."""

NEVER_EXPIRES = -1
"""Item lifetime meaning the item does not expire."""

REJECT_SCORE = -1e12
"""Score assigned to items that must never become a target."""

SHIELD_ACTION = 4
"""Judge action code for activating the shield."""

SHIELD_MIN_SCORE = 50
"""Minimum score required to activate the shield."""

SHIELD_MIN_REMAINING_TICKS = 10
"""Minimum remaining ticks required to activate the shield."""

CONGESTION_LIMIT = 3
"""Hazardous-neighbor count at which a cell is treated as a dead end."""

TARGET_FREEDOM_DEPTH = 5
"""Flood-fill cap used when scoring items and breaking direction ties."""

ROAM_FREEDOM_DEPTH = 10
"""Flood-fill cap used when no target is selected."""

FLUSH_THRESHOLD = 1_024
"""Flush decision-log rows to Parquet once this in-memory row count is reached."""
