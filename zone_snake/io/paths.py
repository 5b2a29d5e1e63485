"""Output locations for replay logs and rendered frames."""

from __future__ import annotations

from pathlib import Path


def resolve_within_base(path: Path, base_dir: Path) -> Path:
    """Anchor *path* under *base_dir* and reject anything that lands outside it.

    Relative paths are taken from *base_dir*; symlinks and ``..`` are resolved
    before the check, so the returned path is absolute.
    """
    base = Path(base_dir).resolve()
    target = (base / path).resolve()
    if not target.is_relative_to(base):
        raise ValueError(f"{path} resolves outside {base}")
    return target


def logs_dir(out_dir: Path) -> Path:
    """Directory holding the Parquet decision log."""
    return Path(out_dir) / "logs"


def decision_log_path(out_dir: Path) -> Path:
    return logs_dir(out_dir) / "decision_log.parquet"
