from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class Entity:
    """An actor on the map.

    Position and ``alive`` change during play. ``blocks``, ``name``, ``glyph``
    and ``color`` are fixed at creation. ``eid`` is the registry index.
    """

    eid: int
    x: int
    y: int
    glyph: str
    color: Color
    name: str
    blocks: bool
    alive: bool = True

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def snapshot(self) -> "EntitySnapshot":
        return EntitySnapshot(self.eid, self.x, self.y, self.glyph, self.color, self.name)


@dataclass(frozen=True)
class EntitySnapshot:
    """Passive draw data handed to renderers."""

    eid: int
    x: int
    y: int
    glyph: str
    color: Color
    name: str


__all__ = ["Color", "Entity", "EntitySnapshot"]
