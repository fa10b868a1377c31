from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from .actions import InputAction, InputEvent

logger = logging.getLogger(__name__)


class InputMapper:
    """Rebindable mapping from physical keys to logical actions.

    Keys are strings normalized to uppercase, so any backend can feed it by
    translating its key constants to names. Integer key codes (e.g. Arcade's
    ``arcade.key.A``) can be registered as aliases of a canonical name.

    Example usage:
        mapper = InputMapper.default()
        action = mapper.translate_key("a")   # -> InputAction.MOVE_LEFT
        evt = mapper.on_key_event("D", pressed=True)
    """

    def __init__(self, bindings: Optional[Dict[str, InputAction]] = None) -> None:
        self._bindings: Dict[str, InputAction] = {}
        if bindings:
            for key, action in bindings.items():
                self.bind(key, action)
        # Backend specific keys (strings or ints) -> canonical key strings
        self._aliases: Dict[str, str] = {}

    @staticmethod
    def _normalize(key: str | int) -> Optional[str]:
        """Normalize a key into a canonical uppercase string, or None if unusable."""
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

    def bind(self, key: str | int, action: InputAction) -> None:
        """Bind a single key to an action."""
        nk = self._normalize(key)
        if nk is None:
            logger.warning("Attempted to bind invalid key: %r", key)
            return
        self._bindings[nk] = action

    def bind_many(self, keys: Iterable[str | int], action: InputAction) -> None:
        for k in keys:
            self.bind(k, action)

    def unbind(self, key: str | int) -> None:
        nk = self._normalize(key)
        if nk is not None:
            self._bindings.pop(nk, None)

    def set_alias(self, physical: str | int, canonical_name: str) -> None:
        """Register an alias from a backend-specific key to a canonical name.

        Example: set_alias(97, "A") or set_alias("RETURN", "ENTER").
        """
        nk = self._normalize(physical)
        cn = self._normalize(canonical_name)
        if nk and cn:
            self._aliases[nk] = cn

    def translate_key(self, key: str | int) -> Optional[InputAction]:
        """Translate a physical key into a logical action or None."""
        nk = self._normalize(key)
        if nk is None:
            return None
        canonical = self._aliases.get(nk, nk)
        return self._bindings.get(canonical)

    def on_key_event(self, key: str | int, pressed: bool, source: str = "keyboard") -> Optional[InputEvent]:
        """Produce an InputEvent from a key press/release, or None for unbound keys."""
        action = self.translate_key(key)
        if action is None:
            return None
        return InputEvent(action=action, pressed=pressed, source=source)

    @classmethod
    def default(cls) -> "InputMapper":
        """Default bindings.

        - A / Left arrow move left, D / Right arrow move right.
        - R, Enter/Return and Space reset after a game over.
        - Escape quits.
        """
        mapper = cls()
        mapper.bind_many(["A", "LEFT"], InputAction.MOVE_LEFT)
        mapper.bind_many(["D", "RIGHT"], InputAction.MOVE_RIGHT)
        mapper.bind_many(["R", "ENTER", "SPACE"], InputAction.RESET)
        mapper.set_alias("RETURN", "ENTER")
        mapper.bind_many(["ESCAPE", "ESC"], InputAction.QUIT)
        return mapper


__all__ = ["InputMapper"]
