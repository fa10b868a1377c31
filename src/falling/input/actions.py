from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class InputAction(Enum):
    """Logical input actions understood by the game.

    Only the two movement actions reach the player; RESET is honored while the
    session is over, and QUIT is left to the host window.
    """

    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    RESET = auto()
    QUIT = auto()


@dataclass(frozen=True)
class InputEvent:
    """Represents a press or release of a logical input action.

    Attributes:
        action: The logical action triggered.
        pressed: True for a key/button down event; False for up.
        source: Optional string describing the source device (e.g., "keyboard").
    """

    action: InputAction
    pressed: bool
    source: Optional[str] = None


__all__ = ["InputAction", "InputEvent"]
