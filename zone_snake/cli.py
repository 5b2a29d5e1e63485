"""CLI entrypoint: judge mode, batch replay and snapshot rendering.

- ``decide``  – read one snapshot from stdin, write the action to stdout
- ``replay``  – decide a set of snapshot files into a Parquet decision log
- ``render``  – draw one snapshot (and the decided move) to an image

Settings resolve CLI > ``--config`` JSON file > built-in defaults. Logs go to
stderr; stdout is reserved for the judge reply.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, replace
from pathlib import Path
from random import Random

from zone_snake.config.types import (
    BeanFallbackPolicy,
    EngineConfig,
    HeuristicConfig,
    ReplayConfig,
    ShieldThresholds,
)
from zone_snake.engine.decide import DecisionEngine
from zone_snake.io.ingest import SnapshotFormatError, format_action, parse_snapshot
from zone_snake.simulation.replay import replay_snapshots

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# ---------------------------------------------------------------------------
# Config resolution helpers
# ---------------------------------------------------------------------------


def _coerce_number(raw: object, key: str, kind: type[int] | type[float]) -> int | float:
    """Convert a CLI or JSON config value to *kind*.

    Booleans are refused, and an int field only takes floats with no fraction.
    """
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be {kind.__name__}, got {raw!r}")
    try:
        value = float(raw) if kind is float or isinstance(raw, float) else int(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be {kind.__name__}, got {raw!r}") from exc
    if kind is int:
        if value != int(value):
            raise ValueError(f"{key} must be int, got {raw!r}")
        return int(value)
    return value


def _get_int(cli_val: int | None, key: str, file_cfg: dict[str, object], default: int) -> int:
    """CLI > file > default resolution for integer values."""
    if cli_val is not None:
        return cli_val
    return int(_coerce_number(file_cfg.get(key, default), key, int))


def _parse_bean_policy(raw: object) -> BeanFallbackPolicy:
    try:
        return BeanFallbackPolicy(raw)
    except ValueError as exc:
        valid = ", ".join(p.value for p in BeanFallbackPolicy)
        raise ValueError(f"bean_fallback_policy must be one of {valid}") from exc


def _heuristics_from_file(file_cfg: dict[str, object]) -> HeuristicConfig:
    """Apply the optional ``heuristics`` object of a config file to the defaults."""
    raw = file_cfg.get("heuristics", {})
    if not isinstance(raw, dict):
        raise ValueError("heuristics must be a JSON object")
    defaults = HeuristicConfig()
    known = {f.name for f in fields(HeuristicConfig)}
    overrides: dict[str, object] = {}
    for key, value in raw.items():
        if key not in known:
            raise ValueError(f"unknown heuristics key: {key}")
        if key == "shields":
            if not isinstance(value, dict):
                raise ValueError("heuristics.shields must be a JSON object")
            overrides[key] = ShieldThresholds(
                **{k: _coerce_number(v, f"shields.{k}", int) for k, v in value.items()}
            )
        elif key == "bean_fallback_policy":
            overrides[key] = _parse_bean_policy(value)
        elif isinstance(getattr(defaults, key), int):
            overrides[key] = _coerce_number(value, key, int)
        else:
            overrides[key] = _coerce_number(value, key, float)
    return replace(defaults, **overrides)


def _load_file_config(parser: argparse.ArgumentParser, path: Path | None) -> dict[str, object]:
    if path is None:
        return {}
    try:
        loaded = json.loads(Path(path).read_text())
    except FileNotFoundError:
        parser.error(f"Config file not found: {path}")
    except json.JSONDecodeError as exc:
        parser.error(f"Config file is not valid JSON: {path}: {exc}")
    if not isinstance(loaded, dict):
        parser.error(f"Config file must hold a JSON object: {path}")
    return loaded


def _resolve_settings(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> tuple[EngineConfig, HeuristicConfig, int]:
    file_cfg = _load_file_config(parser, args.config)
    try:
        engine_config = EngineConfig(
            self_id=_get_int(args.self_id, "self_id", file_cfg, EngineConfig().self_id),
            grid_width=_get_int(None, "grid_width", file_cfg, EngineConfig().grid_width),
            grid_height=_get_int(None, "grid_height", file_cfg, EngineConfig().grid_height),
            max_ticks=_get_int(None, "max_ticks", file_cfg, EngineConfig().max_ticks),
        )
        heuristics = _heuristics_from_file(file_cfg)
        seed = _get_int(args.seed, "seed", file_cfg, 0)
    except (TypeError, ValueError) as exc:
        parser.error(str(exc))
    return engine_config, heuristics, seed


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    p.add_argument("--self-id", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", type=str.upper, choices=_LOG_LEVELS, default="WARNING")


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Zone snake per-tick decision engine")
    sub = parser.add_subparsers(dest="command")

    p_decide = sub.add_parser("decide", help="Decide one tick read from stdin")
    _add_common_arguments(p_decide)

    p_replay = sub.add_parser("replay", help="Decide snapshot files into a Parquet log")
    _add_common_arguments(p_replay)
    p_replay.add_argument("snapshots", type=Path, nargs="+")
    p_replay.add_argument("--out-dir", type=Path, default=Path("data"))

    p_render = sub.add_parser("render", help="Render one snapshot to an image")
    _add_common_arguments(p_render)
    p_render.add_argument("snapshot", type=Path)
    p_render.add_argument("--output", type=Path, required=True)
    p_render.add_argument("--base-dir", type=Path, default=None)
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for the decision engine."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        stream=sys.stderr,
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    engine_config, heuristics, seed = _resolve_settings(parser, args)

    if args.command == "decide":
        try:
            world = parse_snapshot(sys.stdin.read(), engine_config)
        except SnapshotFormatError as exc:
            parser.error(f"invalid snapshot: {exc}")
        engine = DecisionEngine(engine_config, heuristics, Random(seed))
        decision = engine.decide(world)
        sys.stdout.write(format_action(decision.action))
        sys.stdout.flush()
    elif args.command == "replay":
        config = ReplayConfig(
            out_dir=args.out_dir, seed=seed, engine=engine_config, heuristics=heuristics
        )
        try:
            summaries = replay_snapshots(args.snapshots, config)
        except (FileNotFoundError, SnapshotFormatError) as exc:
            parser.error(str(exc))
        tiers: dict[str, int] = {}
        for row in summaries:
            tiers[str(row["tier"])] = tiers.get(str(row["tier"]), 0) + 1
        summary = {"mode": "replay", "snapshots": len(summaries), "tiers": tiers}
        print(json.dumps(summary, ensure_ascii=False, indent=2))
    elif args.command == "render":
        from zone_snake.viz.render import render_world

        try:
            world = parse_snapshot(args.snapshot.read_text(), engine_config)
        except (FileNotFoundError, SnapshotFormatError) as exc:
            parser.error(str(exc))
        decision = DecisionEngine(engine_config, heuristics, Random(seed)).decide(world)
        output = render_world(world, args.output, decision=decision, base_dir=args.base_dir)
        print(json.dumps({"mode": "render", "output": str(output)}, indent=2))


if __name__ == "__main__":
    main()
