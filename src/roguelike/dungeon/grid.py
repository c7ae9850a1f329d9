from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from .rect import Rect
from .tiles import Tile

logger = logging.getLogger(__name__)


class TileGrid:
    """A bounds-checked, fixed-size 2D tile grid.

    Dimensions are fixed at construction. Every coordinate accessor raises
    IndexError for out-of-range input; callers are expected to stay in bounds
    through bounded iteration or a prior ``in_bounds`` check, so an IndexError
    always signals a programming error rather than a game situation.
    """

    __slots__ = ("_w", "_h", "_tiles")

    def __init__(self, width: int, height: int, fill_wall: bool = True) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("TileGrid dimensions must be positive")
        self._w = int(width)
        self._h = int(height)
        factory = Tile.wall if fill_wall else Tile.floor
        # tiles[y][x]
        self._tiles: List[List[Tile]] = [[factory() for _ in range(self._w)] for _ in range(self._h)]
        logger.debug("Initialized TileGrid %dx%d (%s)", self._w, self._h, "walls" if fill_wall else "open")

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    # ---- Safety / Bounds -------------------------------------------------
    def in_bounds(self, x: int, y: int) -> bool:
        """Never raises; the preferred guard before any cell access."""
        return 0 <= x < self._w and 0 <= y < self._h

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Coordinates out of bounds: ({x}, {y}) for grid {self._w}x{self._h}")

    def tile(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self._tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Replace the tile at (x, y). Only generation writes tiles.

        The explored flag survives replacement so exploration stays monotonic.
        """
        if not isinstance(tile, Tile):
            raise TypeError("tile must be a Tile")
        self._check(x, y)
        old = self._tiles[y][x]
        self._tiles[y][x] = Tile(tile.blocked, tile.block_sight, tile.explored or old.explored)

    # ---- Query -----------------------------------------------------------
    def blocked(self, x: int, y: int) -> bool:
        return self.tile(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        return self.tile(x, y).block_sight

    def explored(self, x: int, y: int) -> bool:
        return self.tile(x, y).explored

    def set_explored(self, x: int, y: int) -> None:
        """Mark (x, y) explored. Idempotent; there is no way to unexplore."""
        self.tile(x, y).explored = True

    def coords(self) -> Iterator[Tuple[int, int]]:
        """Row-major iteration over every in-bounds coordinate."""
        for y in range(self._h):
            for x in range(self._w):
                yield x, y

    # ---- Carving helpers -------------------------------------------------
    def carve_room(self, room: Rect) -> None:
        """Open the room interior, leaving its outermost border as wall."""
        xs, ys = room.interior()
        for y in ys:
            for x in xs:
                self.set_tile(x, y, Tile.floor())

    def carve_h_tunnel(self, x1: int, x2: int, y: int) -> None:
        for x in range(min(x1, x2), max(x1, x2) + 1):
            self.set_tile(x, y, Tile.floor())

    def carve_v_tunnel(self, y1: int, y2: int, x: int) -> None:
        for y in range(min(y1, y2), max(y1, y2) + 1):
            self.set_tile(x, y, Tile.floor())

    # ---- ASCII import / export --------------------------------------------
    @classmethod
    def from_lines(cls, lines: Sequence[str], wall_chars: Sequence[str] = ("#",)) -> "TileGrid":
        """Create a grid from rows of ASCII ('#' wall, anything else floor)."""
        if not lines:
            raise ValueError("lines must not be empty")
        width = len(lines[0])
        if width == 0:
            raise ValueError("line width must be positive")
        for i, row in enumerate(lines):
            if len(row) != width:
                raise ValueError(f"All rows must have equal width; row 0 has {width}, row {i} has {len(row)}")
        grid = cls(width, len(lines), fill_wall=False)
        for y, row in enumerate(lines):
            for x, ch in enumerate(row):
                if ch in wall_chars:
                    grid.set_tile(x, y, Tile.wall())
        return grid

    def to_lines(self, marker: Optional[Tuple[int, int]] = None) -> List[str]:
        rows: List[str] = []
        for y in range(self._h):
            row = []
            for x in range(self._w):
                if marker is not None and marker == (x, y):
                    row.append("@")
                else:
                    row.append(self._tiles[y][x].glyph)
            rows.append("".join(row))
        return rows

    def snapshot(self) -> Tuple[Tuple[bool, ...], ...]:
        """Hashable view of the blocked layer for equality tests."""
        return tuple(tuple(t.blocked for t in row) for row in self._tiles)

    def __repr__(self) -> str:
        return f"TileGrid(width={self._w}, height={self._h})"


__all__ = ["TileGrid"]
