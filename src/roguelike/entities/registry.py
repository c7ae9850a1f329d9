from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from .entity import Color, Entity

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Append-only, ordered collection of entities.

    Entities are addressed by integer id (their index). Death is recorded by
    ``alive=False``; entries are never removed or reordered, so ids stay valid
    for the whole session. Dead entities neither block nor occupy cells.
    """

    def __init__(self) -> None:
        self._entities: List[Entity] = []

    def add(
        self,
        x: int,
        y: int,
        glyph: str,
        color: Color,
        name: str,
        blocks: bool = False,
    ) -> int:
        eid = len(self._entities)
        self._entities.append(
            Entity(eid=eid, x=x, y=y, glyph=glyph, color=color, name=name, blocks=blocks)
        )
        logger.debug("Registered entity #%d '%s' at (%d,%d)", eid, name, x, y)
        return eid

    def get(self, eid: int) -> Entity:
        if not 0 <= eid < len(self._entities):
            raise KeyError(f"Unknown entity id: {eid}")
        return self._entities[eid]

    def ids(self) -> range:
        return range(len(self._entities))

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def alive(self) -> Iterator[Entity]:
        return (e for e in self._entities if e.alive)

    def entity_at(self, x: int, y: int, exclude: Optional[int] = None) -> Optional[Entity]:
        """First living entity at (x, y), skipping the id ``exclude``."""
        for e in self._entities:
            if e.alive and e.eid != exclude and e.x == x and e.y == y:
                return e
        return None

    def blocking_entity_at(self, x: int, y: int) -> Optional[Entity]:
        for e in self._entities:
            if e.alive and e.blocks and e.x == x and e.y == y:
                return e
        return None

    def kill(self, eid: int) -> None:
        entity = self.get(eid)
        if entity.alive:
            entity.alive = False
            logger.info("Entity #%d '%s' died", eid, entity.name)


__all__ = ["EntityRegistry"]
