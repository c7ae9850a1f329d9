"""
Dungeon layout: tiles, the bounds-checked grid, and the room/tunnel generator.
"""
from .generator import Dungeon, DungeonGenerator
from .grid import TileGrid
from .rect import Rect
from .tiles import Tile

__all__ = ["Dungeon", "DungeonGenerator", "Rect", "Tile", "TileGrid"]
