import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from falling.config import GameConfig, SpawnMode, StochasticConfig  # noqa: E402


@pytest.fixture
def quiet_config() -> GameConfig:
    """Stochastic mode with a zero spawn chance that never ramps: nothing spawns."""
    return GameConfig(
        spawn_mode=SpawnMode.STOCHASTIC,
        stochastic=StochasticConfig(initial_spawn_chance=0.0, spawn_chance_step=0.0),
        seed=1,
    )


@pytest.fixture
def wave_config() -> GameConfig:
    return GameConfig(spawn_mode=SpawnMode.WAVE, seed=1)
