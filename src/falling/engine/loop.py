from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from .session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the fixed-rate update loop.

    Attributes:
        tick_rate: Target updates per second. If 0 or None, updates as fast as possible.
        max_steps: If provided and > 0, the loop stops after this many updates.
        step_dt: If set, every update receives this dt instead of the measured wall-clock delta.
        stop_on_game_over: Stop the loop as soon as the session is over.
    """

    tick_rate: float = 60.0
    max_steps: Optional[int] = None
    step_dt: Optional[float] = None
    stop_on_game_over: bool = False


class GameEngine:
    """Headless loop driving a GameSession.

    Keeps timing out of the session so the simulation can be stepped by tests,
    by this loop, or by a GUI framework's update callback (e.g., Arcade).
    """

    def __init__(self, session: GameSession, config: Optional[EngineConfig] = None) -> None:
        self.session = session
        self.config = config or EngineConfig()
        self._running: bool = False
        self._step: int = 0
        self._last_time: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running

    @property
    def step(self) -> int:
        return self._step

    def start(self) -> None:
        """Start the engine loop state.

        Safe to call multiple times; subsequent calls are no-ops.
        """
        if self._running:
            logger.debug("GameEngine.start() called while already running")
            return
        self._running = True
        self._step = 0
        self._last_time = time.perf_counter()
        logger.info("GameEngine started (tick_rate=%s, max_steps=%s)", self.config.tick_rate, self.config.max_steps)

    def stop(self) -> None:
        """Stop the loop gracefully."""
        if not self._running:
            return
        self._running = False
        logger.info("GameEngine stopped at step=%s", self._step)

    def update(self, dt: float) -> None:
        """Perform a single update tick.

        Args:
            dt: Delta time in seconds since last update.
        """
        if not self._running:
            logger.debug("update() called while not running; ignored")
            return
        if self.config.step_dt is not None:
            dt = self.config.step_dt
        self.session.update(dt)
        self._step += 1

        if self.config.stop_on_game_over and self.session.is_game_over:
            self.stop()
        elif self.config.max_steps is not None and self._step >= self.config.max_steps:
            self.stop()

    def run(self) -> None:
        """Run a blocking loop until stopped or max_steps reached.

        Throttles to tick_rate if configured.
        """
        self.start()
        target_dt = 0.0
        if self.config.tick_rate and self.config.tick_rate > 0:
            target_dt = 1.0 / float(self.config.tick_rate)

        while self._running:
            now = time.perf_counter()
            if self._last_time is None:
                dt = 0.0
            else:
                dt = now - self._last_time
            self._last_time = now

            self.update(dt)

            if target_dt > 0:
                elapsed = time.perf_counter() - now
                remaining = target_dt - elapsed
                if remaining > 0:
                    time.sleep(remaining)

        logger.info("Loop complete (steps=%d)", self._step)


__all__ = ["EngineConfig", "GameEngine"]
