from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional, Tuple

from .actions import Intent

logger = logging.getLogger(__name__)

# (canonical key name, alt held)
Binding = Tuple[str, bool]


class InputMapper:
    """Rebindable mapping from physical keys to player intents.

    Keys are canonical, case-insensitive names ("UP", "W", "ESCAPE"). A
    binding may require the Alt modifier, which is how the fullscreen chord
    (Alt+Enter) is expressed. Window backends translate their own key codes
    to names, optionally through ``set_alias``, before calling ``translate``.

    Example usage:
        mapper = InputMapper.default()
        mapper.translate("w")                # -> Intent.MOVE_UP
        mapper.translate("ENTER", alt=True)  # -> Intent.TOGGLE_FULLSCREEN
    """

    def __init__(self, bindings: Optional[Dict[Binding, Intent]] = None) -> None:
        self._bindings: Dict[Binding, Intent] = {}
        self._aliases: Dict[str, str] = {}
        if bindings:
            for (key, alt), intent in bindings.items():
                self.bind(key, intent, alt=alt)

    # ---------- Canonicalization ----------
    @staticmethod
    def _normalize(key: "str | int | None") -> Optional[str]:
        if key is None:
            return None
        if isinstance(key, int):
            return str(key)
        if not isinstance(key, str):
            return None
        k = key.strip()
        if not k:
            return None
        return k.upper()

    # ---------- Binding API ----------
    def bind(self, key: "str | int", intent: Intent, alt: bool = False) -> None:
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[(nk, alt)] = intent

    def bind_many(self, keys: Iterable["str | int"], intent: Intent, alt: bool = False) -> None:
        for k in keys:
            self.bind(k, intent, alt=alt)

    def unbind(self, key: "str | int", alt: bool = False) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop((nk, alt), None)

    def set_alias(self, physical: "str | int", canonical_name: str) -> None:
        """Map a backend-specific key (e.g. an Arcade key code) to a canonical name."""
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    # ---------- Translation ----------
    def translate(self, key: "str | int", alt: bool = False) -> Optional[Intent]:
        """Translate a key press into an intent, or None if unbound."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get((canonical, alt))

    # ---------- Defaults ----------
    @classmethod
    def default(cls) -> "InputMapper":
        """Arrows/WASD move, Escape quits, Alt+Enter toggles fullscreen."""
        mapper = cls()
        mapper.bind_many(["UP", "W"], Intent.MOVE_UP)
        mapper.bind_many(["DOWN", "S"], Intent.MOVE_DOWN)
        mapper.bind_many(["LEFT", "A"], Intent.MOVE_LEFT)
        mapper.bind_many(["RIGHT", "D"], Intent.MOVE_RIGHT)
        mapper.bind_many(["ESCAPE", "ESC"], Intent.QUIT)
        mapper.bind_many(["ENTER", "RETURN"], Intent.TOGGLE_FULLSCREEN, alt=True)
        return mapper


__all__ = ["InputMapper"]
