"""
Turn engine: collision arbitration, per-turn resolution and the session that
ties the grid, entities and visibility together.
"""
from .collision import CollisionResolver, Interaction, StepOutcome, StepResult
from .events import GameEvent
from .messages import Message, MessageLog
from .session import GameSession
from .turn import TurnOutcome, TurnResult

__all__ = [
    "CollisionResolver",
    "GameEvent",
    "GameSession",
    "Interaction",
    "Message",
    "MessageLog",
    "StepOutcome",
    "StepResult",
    "TurnOutcome",
    "TurnResult",
]
