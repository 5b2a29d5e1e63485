"""Tests for zone_snake.io.paths."""

from __future__ import annotations

from pathlib import Path

import pytest

from zone_snake.io.paths import decision_log_path, resolve_within_base


def test_relative_path_anchored_at_base(tmp_path: Path) -> None:
    expected = tmp_path.resolve() / "frames" / "a.png"
    assert resolve_within_base(Path("frames/a.png"), tmp_path) == expected


def test_absolute_path_inside_base_allowed(tmp_path: Path) -> None:
    inside = tmp_path / "a.png"
    assert resolve_within_base(inside, tmp_path) == inside.resolve()


@pytest.mark.parametrize("path", [Path("../a.png"), Path("/elsewhere/a.png")])
def test_escape_rejected(tmp_path: Path, path: Path) -> None:
    with pytest.raises(ValueError, match="resolves outside"):
        resolve_within_base(path, tmp_path / "base")


def test_decision_log_location(tmp_path: Path) -> None:
    assert decision_log_path(tmp_path) == tmp_path / "logs" / "decision_log.parquet"
