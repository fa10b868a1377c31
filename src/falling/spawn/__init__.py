from __future__ import annotations

from typing import List, Protocol, Union

from ..config import GameConfig, SpawnMode
from ..core.seed import SeedManager
from ..entities.faller import Faller
from .pattern import WaveSpawner
from .stochastic import DifficultyRamp, StochasticSpawner


class Spawner(Protocol):
    """Strategy injecting new fallers into a session once per playing tick."""

    def spawn(self, ramp: DifficultyRamp) -> List[Faller]: ...
    def reset(self) -> None: ...


def make_spawner(config: GameConfig, rng: SeedManager) -> Union[StochasticSpawner, WaveSpawner]:
    """Create the spawner selected by ``config.spawn_mode``."""
    if config.spawn_mode is SpawnMode.STOCHASTIC:
        return StochasticSpawner(config.stochastic, config.playfield, rng)
    if config.spawn_mode is SpawnMode.WAVE:
        return WaveSpawner(config.wave, config.playfield)
    raise ValueError(f"Unsupported spawn mode: {config.spawn_mode}")


__all__ = ["DifficultyRamp", "Spawner", "StochasticSpawner", "WaveSpawner", "make_spawner"]
