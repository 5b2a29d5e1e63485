"""Judge text protocol: parse a tick snapshot and format the reply.

Snapshot layout (whitespace-separated integers, cells given as ``y x``)::

    remaining_ticks
    item_count   {y x value lifetime}
    agent_count  {id length score direction shield_cd shield_time {y x}*length}
    chest_count  {y x value}
    key_count    {y x holder_id remaining_time}
    x_min y_min x_max y_max                 current zone
    next_tick x_min y_min x_max y_max       next zone
    final_tick x_min y_min x_max y_max      final zone
    [last_action]                           memory, absent on the first tick
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from zone_snake.config.types import EngineConfig
from zone_snake.domain.geometry import Action, Cell, Direction
from zone_snake.domain.world import Agent, Chest, Item, Key, SafeZone, WorldModel


class SnapshotFormatError(ValueError):
    """Raised when snapshot text does not follow the judge protocol."""


class _TokenStream:
    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())
        self._position = 0

    def next_int(self, label: str) -> int:
        try:
            raw = next(self._tokens)
        except StopIteration as exc:
            raise SnapshotFormatError(f"unexpected end of snapshot reading {label}") from exc
        self._position += 1
        try:
            return int(raw)
        except ValueError as exc:
            raise SnapshotFormatError(
                f"token {self._position} ({label}) is not an integer: {raw!r}"
            ) from exc

    def next_count(self, label: str) -> int:
        count = self.next_int(label)
        if count < 0:
            raise SnapshotFormatError(f"{label} must be >= 0, got {count}")
        return count

    def next_cell(self, label: str) -> Cell:
        row = self.next_int(f"{label}.y")
        col = self.next_int(f"{label}.x")
        return Cell(row, col)

    def next_zone(self, label: str) -> SafeZone:
        return SafeZone(
            x_min=self.next_int(f"{label}.x_min"),
            y_min=self.next_int(f"{label}.y_min"),
            x_max=self.next_int(f"{label}.x_max"),
            y_max=self.next_int(f"{label}.y_max"),
        )

    def optional_int(self) -> int | None:
        try:
            raw = next(self._tokens)
        except StopIteration:
            return None
        self._position += 1
        try:
            return int(raw)
        except ValueError as exc:
            raise SnapshotFormatError(f"memory token is not an integer: {raw!r}") from exc


def _read_agent(stream: _TokenStream, index: int) -> Agent:
    label = f"agent[{index}]"
    agent_id = stream.next_int(f"{label}.id")
    length = stream.next_count(f"{label}.length")
    score = stream.next_int(f"{label}.score")
    raw_direction = stream.next_int(f"{label}.direction")
    try:
        direction = Direction(raw_direction)
    except ValueError as exc:
        raise SnapshotFormatError(f"{label}.direction out of range: {raw_direction}") from exc
    shield_cooldown = stream.next_int(f"{label}.shield_cd")
    shield_time = stream.next_int(f"{label}.shield_time")
    body = tuple(stream.next_cell(f"{label}.body[{j}]") for j in range(length))
    if not body:
        raise SnapshotFormatError(f"{label} has an empty body")
    return Agent(
        agent_id=agent_id,
        length=length,
        score=score,
        direction=direction,
        shield_cooldown=shield_cooldown,
        shield_time=shield_time,
        body=body,
    )


def parse_snapshot(text: str, config: EngineConfig | None = None) -> WorldModel:
    """Build a :class:`WorldModel` from one tick of judge input."""
    cfg = config or EngineConfig()
    stream = _TokenStream(text)

    remaining_ticks = stream.next_int("remaining_ticks")

    items = tuple(
        Item(
            cell=stream.next_cell(f"item[{i}]"),
            value=stream.next_int(f"item[{i}].value"),
            lifetime=stream.next_int(f"item[{i}].lifetime"),
        )
        for i in range(stream.next_count("item_count"))
    )
    agents = [_read_agent(stream, i) for i in range(stream.next_count("agent_count"))]
    chests = tuple(
        Chest(cell=stream.next_cell(f"chest[{i}]"), value=stream.next_int(f"chest[{i}].value"))
        for i in range(stream.next_count("chest_count"))
    )
    keys = tuple(
        Key(
            cell=stream.next_cell(f"key[{i}]"),
            holder_id=stream.next_int(f"key[{i}].holder"),
            remaining_time=stream.next_int(f"key[{i}].remaining_time"),
        )
        for i in range(stream.next_count("key_count"))
    )

    current_zone = stream.next_zone("current_zone")
    next_tick = stream.next_int("next_zone.tick")
    next_zone = stream.next_zone("next_zone")
    final_tick = stream.next_int("final_zone.tick")
    final_zone = stream.next_zone("final_zone")

    last_action = None
    if remaining_ticks < cfg.max_ticks - 1:
        last_action = stream.optional_int()

    holders = {k.holder_id for k in keys}
    with_keys = tuple(replace(a, has_key=a.agent_id in holders) for a in agents)

    try:
        return WorldModel(
            remaining_ticks=remaining_ticks,
            items=items,
            agents=with_keys,
            self_id=cfg.self_id,
            current_zone=current_zone,
            next_zone=next_zone,
            next_zone_tick=next_tick,
            final_zone=final_zone,
            final_zone_tick=final_tick,
            chests=chests,
            keys=keys,
            grid_width=cfg.grid_width,
            grid_height=cfg.grid_height,
            max_ticks=cfg.max_ticks,
            last_action=last_action,
        )
    except ValueError as exc:
        raise SnapshotFormatError(str(exc)) from exc


def format_action(action: Action) -> str:
    """Reply lines: the action code, then the same code as the memory echo."""
    code = int(action)
    return f"{code}\n{code}\n"
