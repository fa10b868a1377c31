from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Position:
    """Top-left corner of an entity in playfield pixels (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class Square:
    """Axis-aligned square given by its top-left corner and side length."""

    x: float
    y: float
    size: float

    @classmethod
    def at(cls, pos: Position, size: float) -> "Square":
        return cls(pos.x, pos.y, size)

    def corners(self) -> Tuple[Tuple[float, float], ...]:
        """Top-left, top-right, bottom-left, bottom-right."""
        right = self.x + self.size
        bottom = self.y + self.size
        return (
            (self.x, self.y),
            (right, self.y),
            (self.x, bottom),
            (right, bottom),
        )

    def contains(self, px: float, py: float) -> bool:
        """Closed-box containment; points on the edges count as inside."""
        return self.x <= px <= self.x + self.size and self.y <= py <= self.y + self.size


__all__ = ["Position", "Square"]
