from .actions import Intent, move_delta
from .mapping import InputMapper

__all__ = ["Intent", "InputMapper", "move_delta"]
