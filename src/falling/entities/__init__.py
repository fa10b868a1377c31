from .faller import Faller
from .player import Direction, Player

__all__ = ["Direction", "Faller", "Player"]
