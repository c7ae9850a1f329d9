from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..entities.monsters import RandomSource, choose_kind, spawn_monster, spawn_player
from ..entities.registry import EntityRegistry
from .grid import TileGrid
from .rect import Rect

if TYPE_CHECKING:
    from ..settings import GameConfig

logger = logging.getLogger(__name__)


@dataclass
class Dungeon:
    """Result of a generation pass."""

    grid: TileGrid
    entities: EntityRegistry
    player_id: int
    rooms: List[Rect] = field(default_factory=list)


class DungeonGenerator:
    """Random room placer and L-shaped tunnel carver.

    Makes ``max_rooms`` placement attempts; overlapping candidates are
    dropped without retry, so the number of rooms is at most ``max_rooms``.
    Each accepted room is joined to the previously accepted one, which keeps
    the whole layout connected.

    The random source is injectable: anything with ``randint`` and ``random``
    works, so tests can script the exact sequence of draws. Without one, a
    ``random.Random`` seeded from ``config.seed`` is used.
    """

    def __init__(self, config: GameConfig, rng: Optional[RandomSource] = None) -> None:
        config.validate()
        self.config = config
        self.rng: RandomSource = rng if rng is not None else random.Random(config.seed)

    def generate(self) -> Dungeon:
        cfg = self.config
        logger.info(
            "Generating dungeon %dx%d (%d attempts, seed=%s)",
            cfg.map_width,
            cfg.map_height,
            cfg.max_rooms,
            cfg.seed,
        )
        grid = TileGrid(cfg.map_width, cfg.map_height, fill_wall=True)
        entities = EntityRegistry()
        player_id = spawn_player(entities)
        rooms: List[Rect] = []

        for _ in range(cfg.max_rooms):
            w = self.rng.randint(cfg.room_min_size, cfg.room_max_size)
            h = self.rng.randint(cfg.room_min_size, cfg.room_max_size)
            x = self.rng.randint(0, cfg.map_width - w - 1)
            y = self.rng.randint(0, cfg.map_height - h - 1)
            candidate = Rect.from_size(x, y, w, h)

            if any(candidate.intersects(other) for other in rooms):
                continue

            grid.carve_room(candidate)
            new_x, new_y = candidate.center()
            if not rooms:
                entities.get(player_id).move_to(new_x, new_y)
            else:
                prev_x, prev_y = rooms[-1].center()
                self._carve_tunnel(grid, prev_x, prev_y, new_x, new_y)
            self._place_monsters(grid, entities, candidate)
            rooms.append(candidate)

        if not rooms:
            logger.warning("No rooms accepted; map is solid wall and the player stays at its default position")
        else:
            logger.info("Accepted %d rooms, %d entities", len(rooms), len(entities))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generated map:\n%s", "\n".join(grid.to_lines(marker=entities.get(player_id).pos)))
        return Dungeon(grid=grid, entities=entities, player_id=player_id, rooms=rooms)

    def _carve_tunnel(self, grid: TileGrid, prev_x: int, prev_y: int, new_x: int, new_y: int) -> None:
        if self.rng.random() < 0.5:
            # horizontal then vertical
            grid.carve_h_tunnel(prev_x, new_x, prev_y)
            grid.carve_v_tunnel(prev_y, new_y, new_x)
        else:
            # vertical then horizontal
            grid.carve_v_tunnel(prev_y, new_y, prev_x)
            grid.carve_h_tunnel(prev_x, new_x, new_y)

    def _place_monsters(self, grid: TileGrid, entities: EntityRegistry, room: Rect) -> None:
        count = self.rng.randint(0, self.config.max_room_monsters)
        for _ in range(count):
            x = self.rng.randint(room.x1 + 1, room.x2 - 1)
            y = self.rng.randint(room.y1 + 1, room.y2 - 1)
            # Taken cells are skipped, not retried
            if grid.blocked(x, y) or entities.blocking_entity_at(x, y) is not None:
                logger.debug("Skipping monster at occupied (%d,%d)", x, y)
                continue
            spawn_monster(entities, choose_kind(self.rng), x, y)


__all__ = ["Dungeon", "DungeonGenerator"]
