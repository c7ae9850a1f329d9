from __future__ import annotations

from typing import List

from .snapshot import CellState, FrameSnapshot

# (wall, floor) characters per state
_GLYPHS = {
    CellState.UNEXPLORED: (" ", " "),
    CellState.REMEMBERED: ("+", ","),
    CellState.VISIBLE: ("#", "."),
}


def render_ascii(frame: FrameSnapshot) -> List[str]:
    """Render a frame as text lines, entities drawn over the terrain."""
    rows: List[List[str]] = []
    for y in range(frame.height):
        row = []
        for x in range(frame.width):
            view = frame.cell(x, y)
            wall, floor = _GLYPHS[view.state]
            row.append(wall if view.wall else floor)
        rows.append(row)
    # Later entities overwrite earlier ones; draw the player last
    for ent in reversed(frame.entities):
        rows[ent.y][ent.x] = ent.glyph
    return ["".join(r) for r in rows]


__all__ = ["render_ascii"]
