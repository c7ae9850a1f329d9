from __future__ import annotations

from enum import Enum, auto
from typing import Dict, Optional, Tuple


class Intent(Enum):
    """Logical player intents, independent of the physical input device."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    QUIT = auto()
    TOGGLE_FULLSCREEN = auto()  # handled by the window; no effect on the simulation


# y grows downwards, matching grid rows
MOVE_DELTAS: Dict[Intent, Tuple[int, int]] = {
    Intent.MOVE_UP: (0, -1),
    Intent.MOVE_DOWN: (0, 1),
    Intent.MOVE_LEFT: (-1, 0),
    Intent.MOVE_RIGHT: (1, 0),
}


def move_delta(intent: Intent) -> Optional[Tuple[int, int]]:
    """Return (dx, dy) for movement intents, None otherwise."""
    return MOVE_DELTAS.get(intent)


__all__ = ["Intent", "MOVE_DELTAS", "move_delta"]
