from __future__ import annotations

from dataclasses import dataclass

from ..geometry import Position, Square


@dataclass
class Faller:
    """A square obstacle falling straight down at a constant velocity (px/s)."""

    position: Position
    velocity: float
    size: float
    playfield_height: float
    is_dead: bool = False

    def __post_init__(self) -> None:
        if self.velocity < 0:
            raise ValueError(f"Faller velocity must not be negative, got {self.velocity}")

    @property
    def square(self) -> Square:
        return Square.at(self.position, self.size)

    def advance(self, dt: float) -> None:
        """Move down by velocity*dt; the faller dies once its top edge passes the bottom."""
        if dt <= 0:
            return
        self.position.y += self.velocity * dt
        if self.position.y > self.playfield_height:
            self.is_dead = True


__all__ = ["Faller"]
