from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple

from .entity import Color
from .registry import EntityRegistry

PLAYER_COLOR: Color = (255, 255, 255)

# Chance that a spawned monster is the weak kind
WEAK_MONSTER_CHANCE = 0.8


class RandomSource(Protocol):
    """The subset of ``random.Random`` that generation relies on."""

    def randint(self, a: int, b: int) -> int: ...
    def random(self) -> float: ...


@dataclass(frozen=True)
class MonsterKind:
    name: str
    glyph: str
    color: Color


ORC = MonsterKind("orc", "o", (63, 127, 63))
TROLL = MonsterKind("troll", "T", (0, 127, 0))


def choose_kind(rng: RandomSource) -> MonsterKind:
    """Weighted draw: 80% weak orc, 20% strong troll."""
    return ORC if rng.random() < WEAK_MONSTER_CHANCE else TROLL


def spawn_player(registry: EntityRegistry, pos: Tuple[int, int] = (0, 0)) -> int:
    return registry.add(pos[0], pos[1], "@", PLAYER_COLOR, "player", blocks=True)


def spawn_monster(registry: EntityRegistry, kind: MonsterKind, x: int, y: int) -> int:
    return registry.add(x, y, kind.glyph, kind.color, kind.name, blocks=True)


__all__ = [
    "RandomSource",
    "MonsterKind",
    "ORC",
    "TROLL",
    "PLAYER_COLOR",
    "WEAK_MONSTER_CHANCE",
    "choose_kind",
    "spawn_player",
    "spawn_monster",
]
