from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..exceptions import ConfigError

logger = logging.getLogger(__name__)


class SpawnMode(Enum):
    """Which spawn strategy feeds fallers into a session."""

    STOCHASTIC = "stochastic"
    WAVE = "wave"

    @classmethod
    def parse(cls, value: "str | SpawnMode") -> "SpawnMode":
        if isinstance(value, SpawnMode):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigError(f"Unknown spawn mode: {value!r}") from None


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


@dataclass(frozen=True)
class PlayfieldConfig:
    """Logical playfield size in pixels. Origin is the top-left corner, y grows downwards."""

    width: float = 700.0
    height: float = 700.0

    def __post_init__(self) -> None:
        _require(self.width > 0 and self.height > 0, f"Playfield must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class PlayerConfig:
    size: float = 30.0
    speed: float = 500.0  # px/s
    # Gap between the player's bottom edge and the playfield bottom
    bottom_margin: float = 10.0

    def __post_init__(self) -> None:
        _require(self.size > 0, f"Player size must be positive, got {self.size}")
        _require(self.speed >= 0, f"Player speed must not be negative, got {self.speed}")


@dataclass(frozen=True)
class StochasticConfig:
    """Constants for random spawning and its difficulty ramp.

    Attributes:
        size_min / size_max: Faller side length range before the ramp offset is added.
        velocity_min / velocity_max: Faller fall speed range (px/s).
        initial_spawn_chance: Percent chance (0-100) of a spawn on the first tick.
        spawn_chance_step: Added to the spawn chance after every playing tick.
        size_offset_step: Added to the size offset after every playing tick.
    """

    size_min: float = 10.0
    size_max: float = 50.0
    velocity_min: float = 200.0
    velocity_max: float = 500.0
    initial_spawn_chance: float = 1.0
    spawn_chance_step: float = 0.001
    size_offset_step: float = 0.003

    def __post_init__(self) -> None:
        _require(0 < self.size_min <= self.size_max, f"Invalid faller size range [{self.size_min}, {self.size_max}]")
        _require(
            0 <= self.velocity_min <= self.velocity_max,
            f"Invalid faller velocity range [{self.velocity_min}, {self.velocity_max}]",
        )
        _require(self.initial_spawn_chance >= 0, "initial_spawn_chance must not be negative")
        _require(self.spawn_chance_step >= 0 and self.size_offset_step >= 0, "Ramp steps must not be negative")


@dataclass(frozen=True)
class WaveConfig:
    """Parameters of the scripted wave pattern."""

    size: float = 30.0
    velocity: float = 200.0
    # Horizontal distance between the two synchronized fallers of a step
    gap: float = 200.0
    spread: float = 3.0
    waits_per_step: int = 1

    def __post_init__(self) -> None:
        _require(self.size > 0, f"Wave faller size must be positive, got {self.size}")
        _require(self.velocity >= 0, f"Wave faller velocity must not be negative, got {self.velocity}")
        _require(math.isfinite(self.gap), f"Wave gap must be a finite number, got {self.gap}")
        _require(self.spread > 0, f"Wave spread must be positive, got {self.spread}")
        _require(self.waits_per_step >= 0, f"waits_per_step must not be negative, got {self.waits_per_step}")


@dataclass(frozen=True)
class GameConfig:
    """Aggregate configuration of a game session.

    Cross-field checks run on construction so a faller or player that cannot fit
    inside the playfield is rejected before any simulation happens.
    """

    playfield: PlayfieldConfig = field(default_factory=PlayfieldConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)
    stochastic: StochasticConfig = field(default_factory=StochasticConfig)
    wave: WaveConfig = field(default_factory=WaveConfig)
    spawn_mode: SpawnMode = SpawnMode.WAVE
    seed: Optional[int] = None
    # Reset on the tick after game over instead of waiting for the reset key
    auto_reset: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "spawn_mode", SpawnMode.parse(self.spawn_mode))
        width = self.playfield.width
        _require(self.player.size < width, f"Player size {self.player.size} does not fit playfield width {width}")
        _require(
            self.player.size + self.player.bottom_margin <= self.playfield.height,
            "Player does not fit playfield height",
        )
        _require(
            self.stochastic.size_max < width,
            f"Faller size_max {self.stochastic.size_max} leaves no placement range in width {width}",
        )
        _require(self.wave.size < width, f"Wave faller size {self.wave.size} does not fit playfield width {width}")
        logger.debug("Validated %s", self)


DEFAULT_CONFIG = GameConfig()

__all__ = [
    "DEFAULT_CONFIG",
    "GameConfig",
    "PlayerConfig",
    "PlayfieldConfig",
    "SpawnMode",
    "StochasticConfig",
    "WaveConfig",
]
