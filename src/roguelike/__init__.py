"""
Roguelike package root.

Pure simulation modules live under dungeon, entities, fov and engine. Window
and toolkit specifics (Arcade) stay in ``roguelike.app`` so the core can be
driven headless and tested without a display.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
