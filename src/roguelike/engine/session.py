from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..dungeon.generator import Dungeon, DungeonGenerator
from ..entities.entity import Entity
from ..entities.monsters import RandomSource
from ..fov.visibility import VisibilityTracker
from ..input.actions import Intent, move_delta
from ..settings import GameConfig
from .collision import CollisionResolver, StepOutcome
from .events import GameEvent
from .messages import MessageLog
from .turn import TurnOutcome, TurnResult

logger = logging.getLogger(__name__)

INTERACTION_COLOR = (255, 191, 0)


class GameSession:
    """Owns the state of one play session and resolves one intent per turn.

    Per turn: intent -> collision resolution -> visibility recompute (only if
    the player moved) -> non-player pass (only if a turn was taken). All state
    is mutated here, between turns, on the caller's thread.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[RandomSource] = None,
        dungeon: Optional[Dungeon] = None,
    ) -> None:
        self._listeners: List[Callable[[GameEvent, "GameSession"], None]] = []
        self.config = config or GameConfig()
        self.config.validate()
        if dungeon is None:
            dungeon = DungeonGenerator(self.config, rng).generate()
        self.dungeon = dungeon
        self.grid = dungeon.grid
        self.entities = dungeon.entities
        self.player_id = dungeon.player_id
        self.resolver = CollisionResolver(self.grid, self.entities)
        self.visibility = VisibilityTracker(self.grid)
        self.messages = MessageLog()
        self.turn: int = 0
        self.recompute_fov()
        logger.info("Initialized GameSession, player at %s", self.player.pos)

    @property
    def player(self) -> Entity:
        return self.entities.get(self.player_id)

    def add_listener(self, listener: Callable[[GameEvent, "GameSession"], None]) -> None:
        """Subscribe to session events (movement, interaction, FOV)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    def recompute_fov(self, force: bool = False) -> bool:
        player = self.player
        recomputed = self.visibility.recompute_from(
            player.x,
            player.y,
            self.config.torch_radius,
            self.config.light_walls,
            self.config.algorithm,
            force=force,
        )
        if recomputed:
            self._emit(GameEvent.FOV_RECOMPUTED)
        return recomputed

    def handle_intent(self, intent: Intent) -> TurnResult:
        if intent is Intent.QUIT:
            logger.info("Quit requested at turn %d", self.turn)
            return TurnResult(TurnOutcome.EXIT)
        delta = move_delta(intent)
        if delta is None:
            # Display toggles and other pass-through intents
            return TurnResult(TurnOutcome.NO_TURN)

        self.turn += 1
        step = self.resolver.move_or_attack(self.player_id, *delta)
        if step.outcome is StepOutcome.INTERACTED and step.interaction is not None:
            self.messages.add(self.turn, step.interaction.message, INTERACTION_COLOR)
            self._emit(GameEvent.INTERACTION)
        elif step.moved:
            self._emit(GameEvent.PLAYER_MOVED)
            self.recompute_fov()
        self.monsters_act()
        return TurnResult(TurnOutcome.TOOK_TURN, step)

    def monsters_act(self) -> List[int]:
        """Give every living non-player entity its turn; returns their ids.

        Monsters have no behaviour yet, so acting is a no-op.
        """
        acted: List[int] = []
        for eid in self.entities.ids():
            if eid == self.player_id:
                continue
            entity = self.entities.get(eid)
            if not entity.alive:
                continue
            acted.append(eid)
        logger.debug("Turn %d: %d monsters acted", self.turn, len(acted))
        return acted


__all__ = ["GameSession", "INTERACTION_COLOR"]
