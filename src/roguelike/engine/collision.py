from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ..dungeon.grid import TileGrid
from ..entities.registry import EntityRegistry

logger = logging.getLogger(__name__)


class StepOutcome(Enum):
    MOVED = auto()
    BLOCKED = auto()
    INTERACTED = auto()


@dataclass(frozen=True)
class Interaction:
    """Placeholder attack notification between two entities."""

    actor_id: int
    target_id: int
    message: str


@dataclass(frozen=True)
class StepResult:
    outcome: StepOutcome
    interaction: Optional[Interaction] = None

    @property
    def moved(self) -> bool:
        return self.outcome is StepOutcome.MOVED


class CollisionResolver:
    """Validates and applies single-step moves against terrain and entities.

    A step onto a blocked tile or a living blocking entity is a no-op, not an
    error. Steps are not checked for magnitude; destinations outside the grid
    are rejected here before the grid is queried.
    """

    def __init__(self, grid: TileGrid, entities: EntityRegistry) -> None:
        self.grid = grid
        self.entities = entities

    def is_blocked(self, x: int, y: int) -> bool:
        if self.grid.blocked(x, y):
            return True
        return self.entities.blocking_entity_at(x, y) is not None

    def move_entity(self, eid: int, dx: int, dy: int) -> StepResult:
        entity = self.entities.get(eid)
        tx, ty = entity.x + dx, entity.y + dy
        if not self.grid.in_bounds(tx, ty) or self.is_blocked(tx, ty):
            logger.debug("Blocked move for #%d: target (%d,%d)", eid, tx, ty)
            return StepResult(StepOutcome.BLOCKED)
        logger.debug("Entity #%d moves from (%d,%d) to (%d,%d)", eid, entity.x, entity.y, tx, ty)
        entity.move_to(tx, ty)
        return StepResult(StepOutcome.MOVED)

    def move_or_attack(self, eid: int, dx: int, dy: int) -> StepResult:
        actor = self.entities.get(eid)
        tx, ty = actor.x + dx, actor.y + dy
        target = self.entities.entity_at(tx, ty, exclude=eid)
        if target is not None:
            message = f"The {target.name} shrugs off the {actor.name}'s attack."
            logger.info("Interaction: #%d -> #%d (%s)", eid, target.eid, message)
            return StepResult(
                StepOutcome.INTERACTED,
                Interaction(actor_id=eid, target_id=target.eid, message=message),
            )
        return self.move_entity(eid, dx, dy)


__all__ = ["CollisionResolver", "Interaction", "StepOutcome", "StepResult"]
