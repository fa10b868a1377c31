"""Scripted wave patterns.

A pattern is a precomputed list of steps. Each step is either ``Wait`` (spawn
nothing this tick) or ``Spawn`` (inject a fixed group of fallers). The wave
pattern sweeps a pair of fallers, ``gap`` pixels apart, across the playfield
from left to right, one small shift per spawn step.

Steps are stored in reverse so the next one is always popped from the end of
the list.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import PlayfieldConfig, WaveConfig
from ..entities.faller import Faller
from ..geometry import Position
from .stochastic import DifficultyRamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FallerSpec:
    """Immutable blueprint of a faller placed by a pattern."""

    x: float
    y: float
    size: float
    velocity: float

    def build(self, playfield_height: float) -> Faller:
        return Faller(
            position=Position(self.x, self.y),
            velocity=self.velocity,
            size=self.size,
            playfield_height=playfield_height,
        )


@dataclass(frozen=True)
class Wait:
    pass


@dataclass(frozen=True)
class Spawn:
    fallers: Tuple[FallerSpec, ...]


PatternStep = Union[Wait, Spawn]


def _round_half_up(value: float) -> int:
    # Halves round away from zero (2.5 -> 3), unlike round()
    return int(math.floor(value + 0.5))


def build_wave_steps(
    width: float,
    size: float,
    velocity: float,
    gap: float,
    spread: float = 3.0,
    waits_per_step: int = 1,
) -> Tuple[PatternStep, ...]:
    """Build wave steps in chronological order.

    For every index ``i`` one ``Spawn`` step holds two fallers starting just
    above the top edge, at ``i / spread * size`` and ``gap`` pixels further
    right, followed by ``waits_per_step`` ``Wait`` steps. The index range is
    sized so the first faller sweeps the playfield width.
    """
    count = _round_half_up(width / size)
    steps: List[PatternStep] = []
    for i in range(_round_half_up(count * spread)):
        x = i / spread * size
        steps.append(
            Spawn(
                (
                    FallerSpec(x, -size, size, velocity),
                    FallerSpec(x + gap, -size, size, velocity),
                )
            )
        )
        steps.extend(Wait() for _ in range(waits_per_step))
    return tuple(steps)


class Pattern:
    """Consumable sequence of pattern steps.

    The step data is immutable; consuming only moves the cursor, modeled as
    popping from the end of a reversed list.
    """

    def __init__(self, steps: Tuple[PatternStep, ...]) -> None:
        self._pending: List[PatternStep] = list(reversed(steps))

    @property
    def remaining(self) -> int:
        return len(self._pending)

    def next_step(self) -> Optional[PatternStep]:
        """Pop the next step, or return None once the pattern is exhausted."""
        if not self._pending:
            return None
        return self._pending.pop()


def build_wave_pattern(playfield: PlayfieldConfig, wave: WaveConfig) -> Pattern:
    steps = build_wave_steps(
        playfield.width,
        wave.size,
        wave.velocity,
        wave.gap,
        spread=wave.spread,
        waits_per_step=wave.waits_per_step,
    )
    logger.debug("Built wave pattern with %d steps", len(steps))
    return Pattern(steps)


class WaveSpawner:
    """Plays the wave pattern one step per tick, forever.

    Tick cadence: with no active pattern, a new one is built and nothing spawns
    that tick. Each following tick consumes one step. The tick that finds the
    pattern exhausted clears it, again spawning nothing, and the next tick
    starts an identical fresh pattern.
    """

    def __init__(self, config: WaveConfig, playfield: PlayfieldConfig) -> None:
        self.config = config
        self.playfield = playfield
        self.current_pattern: Optional[Pattern] = None
        self.patterns_started = 0

    def spawn(self, ramp: Optional[DifficultyRamp] = None) -> List[Faller]:
        if self.current_pattern is None:
            self.current_pattern = build_wave_pattern(self.playfield, self.config)
            self.patterns_started += 1
            return []
        step = self.current_pattern.next_step()
        if step is None:
            logger.debug("Wave pattern exhausted")
            self.current_pattern = None
            return []
        if isinstance(step, Spawn):
            return [spec.build(self.playfield.height) for spec in step.fallers]
        if isinstance(step, Wait):
            return []
        raise TypeError(f"Unknown pattern step: {step!r}")

    def reset(self) -> None:
        self.current_pattern = None


__all__ = [
    "FallerSpec",
    "Pattern",
    "PatternStep",
    "Spawn",
    "Wait",
    "WaveSpawner",
    "build_wave_pattern",
    "build_wave_steps",
]
