class RoguelikeError(Exception):
    """Base exception for the roguelike project."""


class ConfigError(RoguelikeError, ValueError):
    """Raised when configuration values cannot produce a playable session."""
