from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from ..config import PlayerConfig, PlayfieldConfig
from ..geometry import Position, Square
from ..input.actions import InputAction

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = auto()
    RIGHT = auto()
    STILL = auto()


@dataclass
class Player:
    """The player-controlled square sliding along the bottom of the playfield.

    Direction is derived from the two press flags: left wins when both are
    held, otherwise the held side, otherwise STILL. Leaving the playfield on
    one side wraps the player to the opposite edge instead of clamping.
    """

    position: Position
    size: float
    speed: float
    playfield_width: float
    direction: Direction = Direction.STILL
    is_left_pressed: bool = False
    is_right_pressed: bool = False
    is_dead: bool = field(default=False)

    @classmethod
    def spawn(cls, player: PlayerConfig, playfield: PlayfieldConfig) -> "Player":
        """Create a player horizontally centered, resting above the bottom margin."""
        pos = Position(
            x=playfield.width / 2 - player.size / 2,
            y=playfield.height - player.size - player.bottom_margin,
        )
        return cls(position=pos, size=player.size, speed=player.speed, playfield_width=playfield.width)

    @property
    def square(self) -> Square:
        return Square.at(self.position, self.size)

    # ---------- Input ----------
    def handle_button(self, action: InputAction, pressed: bool) -> None:
        """Update press state from a movement action; other actions are ignored."""
        if action is InputAction.MOVE_LEFT:
            self.is_left_pressed = pressed
            if pressed:
                self.direction = Direction.LEFT
            else:
                self._recompute_direction()
        elif action is InputAction.MOVE_RIGHT:
            self.is_right_pressed = pressed
            if pressed:
                self.direction = Direction.RIGHT
            else:
                self._recompute_direction()

    def _recompute_direction(self) -> None:
        if self.is_left_pressed:
            self.direction = Direction.LEFT
        elif self.is_right_pressed:
            self.direction = Direction.RIGHT
        else:
            self.direction = Direction.STILL

    # ---------- Simulation ----------
    def advance(self, dt: float) -> None:
        if dt <= 0:
            return
        step = self.speed * dt
        if self.direction is Direction.RIGHT:
            if self.position.x + step > self.playfield_width - self.size:
                self.position.x = 0.0
            else:
                self.position.x += step
        elif self.direction is Direction.LEFT:
            if self.position.x - step < 0:
                self.position.x = self.playfield_width - self.size
            else:
                self.position.x -= step

    def mark_collided(self) -> None:
        if not self.is_dead:
            logger.debug("Player hit at (%.1f, %.1f)", self.position.x, self.position.y)
        self.is_dead = True


__all__ = ["Direction", "Player"]
