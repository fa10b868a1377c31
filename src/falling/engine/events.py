from enum import Enum, auto


class GameEvent(Enum):
    """Events emitted by GameSession to notify UI or systems."""

    FALLERS_SPAWNED = auto()
    PLAYER_COLLIDED = auto()
    GAME_OVER = auto()
    RESET = auto()
