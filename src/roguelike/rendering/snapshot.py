"""Read-only frame data for renderers.

Renderers depend only on these passive types; they never touch the grid,
registry or tracker directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Tuple

from ..dungeon.grid import TileGrid
from ..entities.entity import Color, EntitySnapshot
from ..fov.visibility import VisibilityTracker

if TYPE_CHECKING:
    from ..engine.session import GameSession

COLOR_DARK_WALL: Color = (0, 0, 100)
COLOR_LIGHT_WALL: Color = (130, 110, 50)
COLOR_DARK_GROUND: Color = (50, 50, 150)
COLOR_LIGHT_GROUND: Color = (200, 180, 50)


class CellState(Enum):
    UNEXPLORED = auto()  # draw nothing
    REMEMBERED = auto()  # explored but not in view: dim
    VISIBLE = auto()  # fully lit


@dataclass(frozen=True)
class CellView:
    state: CellState
    wall: bool

    @property
    def color(self) -> "Color | None":
        if self.state is CellState.UNEXPLORED:
            return None
        if self.state is CellState.VISIBLE:
            return COLOR_LIGHT_WALL if self.wall else COLOR_LIGHT_GROUND
        return COLOR_DARK_WALL if self.wall else COLOR_DARK_GROUND


@dataclass(frozen=True)
class FrameSnapshot:
    width: int
    height: int
    cells: Tuple[Tuple[CellView, ...], ...]  # cells[y][x]
    entities: Tuple[EntitySnapshot, ...]
    messages: Tuple[str, ...] = ()

    def cell(self, x: int, y: int) -> CellView:
        return self.cells[y][x]


def cell_state(grid: TileGrid, tracker: VisibilityTracker, x: int, y: int) -> CellState:
    if tracker.is_visible(x, y):
        return CellState.VISIBLE
    if grid.explored(x, y):
        return CellState.REMEMBERED
    return CellState.UNEXPLORED


def build_frame(session: "GameSession", message_count: int = 5) -> FrameSnapshot:
    """Capture everything a renderer needs for one frame.

    Entities are listed in registry order, restricted to living ones standing
    on visible cells, so the player (id 0) is drawn first.
    """
    grid = session.grid
    tracker = session.visibility
    cells = tuple(
        tuple(CellView(cell_state(grid, tracker, x, y), grid.blocks_sight(x, y)) for x in range(grid.width))
        for y in range(grid.height)
    )
    entities = tuple(
        e.snapshot() for e in session.entities.alive() if tracker.is_visible(e.x, e.y)
    )
    return FrameSnapshot(
        width=grid.width,
        height=grid.height,
        cells=cells,
        entities=entities,
        messages=session.messages.recent_text(message_count),
    )


__all__ = [
    "CellState",
    "CellView",
    "FrameSnapshot",
    "build_frame",
    "cell_state",
    "COLOR_DARK_WALL",
    "COLOR_LIGHT_WALL",
    "COLOR_DARK_GROUND",
    "COLOR_LIGHT_GROUND",
]
