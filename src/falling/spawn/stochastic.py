from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..config import PlayfieldConfig, StochasticConfig
from ..core.seed import SeedManager
from ..entities.faller import Faller
from ..exceptions import ConfigError
from ..geometry import Position

logger = logging.getLogger(__name__)


@dataclass
class DifficultyRamp:
    """Spawn chance (percent) and faller size offset, both growing every playing tick.

    The ramp has no ceiling; only ``reset()`` brings it back to the starting constants.
    """

    initial_spawn_chance: float = 1.0
    spawn_chance_step: float = 0.001
    size_offset_step: float = 0.003
    spawn_percent_chance: float = 1.0
    size_offset: float = 0.0

    @classmethod
    def from_config(cls, cfg: StochasticConfig) -> "DifficultyRamp":
        return cls(
            initial_spawn_chance=cfg.initial_spawn_chance,
            spawn_chance_step=cfg.spawn_chance_step,
            size_offset_step=cfg.size_offset_step,
            spawn_percent_chance=cfg.initial_spawn_chance,
            size_offset=0.0,
        )

    def advance(self) -> None:
        self.spawn_percent_chance += self.spawn_chance_step
        self.size_offset += self.size_offset_step

    def reset(self) -> None:
        self.spawn_percent_chance = self.initial_spawn_chance
        self.size_offset = 0.0


class StochasticSpawner:
    """Spawns at most one randomly sized, placed and paced faller per tick."""

    def __init__(self, config: StochasticConfig, playfield: PlayfieldConfig, rng: SeedManager) -> None:
        self.config = config
        self.playfield = playfield
        self._rng = rng

    def spawn(self, ramp: DifficultyRamp) -> List[Faller]:
        if self._rng.random() * 100.0 >= ramp.spawn_percent_chance:
            return []
        cfg = self.config
        size = self._rng.uniform(cfg.size_min + ramp.size_offset, cfg.size_max + ramp.size_offset)
        x_max = self.playfield.width - size
        if x_max <= 0:
            raise ConfigError(
                f"Faller size {size:.2f} no longer fits playfield width {self.playfield.width} "
                f"(size offset {ramp.size_offset:.2f})"
            )
        faller = Faller(
            position=Position(self._rng.uniform(0.0, x_max), -size),
            velocity=self._rng.uniform(cfg.velocity_min, cfg.velocity_max),
            size=size,
            playfield_height=self.playfield.height,
        )
        logger.debug(
            "Random faller at x=%.1f size=%.1f v=%.1f (chance=%.3f%%)",
            faller.position.x,
            size,
            faller.velocity,
            ramp.spawn_percent_chance,
        )
        return [faller]

    def reset(self) -> None:
        """Nothing to clear; the RNG keeps running across sessions."""


__all__ = ["DifficultyRamp", "StochasticSpawner"]
