from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameSession to notify UI or systems."""

    PLAYER_MOVED = auto()
    INTERACTION = auto()
    FOV_RECOMPUTED = auto()
