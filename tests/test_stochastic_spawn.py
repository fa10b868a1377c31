import pytest

from falling.config import PlayfieldConfig, StochasticConfig
from falling.core.seed import SeedManager
from falling.exceptions import ConfigError
from falling.spawn.stochastic import DifficultyRamp, StochasticSpawner


def make_spawner(seed: int = 7) -> StochasticSpawner:
    return StochasticSpawner(StochasticConfig(), PlayfieldConfig(700, 700), SeedManager(seed))


def test_certain_chance_spawns_one_faller_within_ranges():
    spawner = make_spawner()
    ramp = DifficultyRamp(spawn_percent_chance=100.0)
    for _ in range(200):
        fallers = spawner.spawn(ramp)
        assert len(fallers) == 1
        f = fallers[0]
        assert 10.0 <= f.size <= 50.0
        assert 0.0 <= f.position.x <= 700.0 - f.size
        assert f.position.y == -f.size
        assert 200.0 <= f.velocity <= 500.0
        assert f.is_dead is False


def test_zero_chance_never_spawns():
    spawner = make_spawner()
    ramp = DifficultyRamp(spawn_percent_chance=0.0)
    assert all(spawner.spawn(ramp) == [] for _ in range(500))


def test_size_offset_shifts_size_range():
    spawner = make_spawner()
    ramp = DifficultyRamp(spawn_percent_chance=100.0, size_offset=100.0)
    for _ in range(50):
        (f,) = spawner.spawn(ramp)
        assert 110.0 <= f.size <= 150.0


def test_same_seed_same_fallers():
    ramp = DifficultyRamp(spawn_percent_chance=50.0)
    a, b = make_spawner(99), make_spawner(99)
    for _ in range(100):
        fa, fb = a.spawn(ramp), b.spawn(ramp)
        assert [(f.position, f.size, f.velocity) for f in fa] == [(f.position, f.size, f.velocity) for f in fb]


def test_ramp_grows_every_advance_and_resets_to_constants():
    ramp = DifficultyRamp.from_config(StochasticConfig())
    assert ramp.spawn_percent_chance == 1.0
    assert ramp.size_offset == 0.0
    previous = (ramp.spawn_percent_chance, ramp.size_offset)
    for _ in range(10):
        ramp.advance()
        current = (ramp.spawn_percent_chance, ramp.size_offset)
        assert current[0] > previous[0]
        assert current[1] > previous[1]
        previous = current
    assert ramp.spawn_percent_chance == pytest.approx(1.01)
    assert ramp.size_offset == pytest.approx(0.03)
    ramp.reset()
    assert ramp.spawn_percent_chance == 1.0
    assert ramp.size_offset == 0.0


def test_ramped_size_that_no_longer_fits_fails_fast():
    spawner = make_spawner()
    ramp = DifficultyRamp(spawn_percent_chance=100.0, size_offset=700.0)
    with pytest.raises(ConfigError):
        spawner.spawn(ramp)
