from __future__ import annotations

import logging
from typing import FrozenSet, Optional, Set, Tuple

from ..dungeon.grid import TileGrid
from .algorithms import Coord, FovAlgorithm, compute_fov

logger = logging.getLogger(__name__)


class VisibilityTracker:
    """Tracks which cells are currently visible and grows the explored mask.

    Recomputation is skipped entirely while the origin stays where it was
    last computed from. Every cell found visible is marked explored on the
    grid, so ``is_visible`` always implies ``is_explored``.
    """

    def __init__(self, grid: TileGrid) -> None:
        self._grid = grid
        self._visible: Set[Coord] = set()
        self._origin: Optional[Coord] = None

    @property
    def last_origin(self) -> Optional[Coord]:
        return self._origin

    def recompute_from(
        self,
        x: int,
        y: int,
        radius: int,
        light_walls: bool = True,
        algorithm: "FovAlgorithm | str" = FovAlgorithm.BASIC,
        force: bool = False,
    ) -> bool:
        """Recompute visibility from (x, y) if the origin moved.

        Returns True when a recomputation happened.
        """
        origin = (x, y)
        if not force and origin == self._origin:
            return False
        self._visible = compute_fov(self._grid, origin, radius, light_walls, algorithm)
        self._origin = origin
        for vx, vy in self._visible:
            self._grid.set_explored(vx, vy)
        logger.debug("Visibility recomputed from %s: %d visible", origin, len(self._visible))
        return True

    def is_visible(self, x: int, y: int) -> bool:
        if not self._grid.in_bounds(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y})")
        return (x, y) in self._visible

    def is_explored(self, x: int, y: int) -> bool:
        return self._grid.explored(x, y)

    def visible_cells(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset(self._visible)


__all__ = ["VisibilityTracker"]
