from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Tile:
    """A single map cell.

    - blocked: forbids entity occupancy
    - block_sight: terminates lines of sight
    - explored: has been visible at least once; never reset

    ``blocked`` and ``block_sight`` are only written during generation.
    """

    blocked: bool
    block_sight: bool
    explored: bool = False

    @classmethod
    def floor(cls) -> "Tile":
        return cls(blocked=False, block_sight=False)

    @classmethod
    def wall(cls) -> "Tile":
        return cls(blocked=True, block_sight=True)

    @property
    def glyph(self) -> str:
        """Single-character visualization for logs and ASCII output."""
        return "#" if self.block_sight else "."


__all__ = ["Tile"]
