from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .collision import StepResult


class TurnOutcome(Enum):
    """What a resolved intent means for the outer loop."""

    TOOK_TURN = auto()  # non-player actors get to act
    NO_TURN = auto()
    EXIT = auto()


@dataclass(frozen=True)
class TurnResult:
    outcome: TurnOutcome
    step: Optional[StepResult] = None

    @property
    def took_turn(self) -> bool:
        return self.outcome is TurnOutcome.TOOK_TURN

    @property
    def exit(self) -> bool:
        return self.outcome is TurnOutcome.EXIT


__all__ = ["TurnOutcome", "TurnResult"]
