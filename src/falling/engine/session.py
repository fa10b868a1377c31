from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List, Optional, Tuple

from ..collision import squares_collide
from ..config import DEFAULT_CONFIG, GameConfig
from ..core.seed import SeedManager
from ..entities.faller import Faller
from ..entities.player import Player
from ..geometry import Square
from ..input.actions import InputAction, InputEvent
from ..spawn import Spawner, make_spawner
from ..spawn.stochastic import DifficultyRamp
from .events import GameEvent

logger = logging.getLogger(__name__)


class SessionState(Enum):
    PLAYING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for renderers."""

    state: SessionState
    player: Square
    fallers: Tuple[Square, ...]
    elapsed: float
    ticks: int

    @property
    def is_game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER


def format_elapsed(seconds: float) -> str:
    """Digits shown on the game-over screen (whole seconds survived)."""
    return str(int(max(0.0, seconds)))


class GameSession:
    """Owns one game: the player, live fallers, spawner, difficulty ramp and clock.

    Each ``update(dt)`` while playing runs, in order: spawn, ramp advance,
    player move, faller moves, player-vs-faller collision, pruning of dead
    fallers, game-over check and elapsed time accrual. Once over, updates do
    nothing until ``reset()`` (or the next tick, with ``auto_reset``).
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[SeedManager] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.rng = rng or SeedManager(self.config.seed)
        self._listeners: List[Callable[[GameEvent, "GameSession"], None]] = []
        self.spawner: Spawner = make_spawner(self.config, self.rng)
        self.ramp = DifficultyRamp.from_config(self.config.stochastic)
        self.player = Player.spawn(self.config.player, self.config.playfield)
        self.fallers: List[Faller] = []
        self.state = SessionState.PLAYING
        self.elapsed = 0.0
        self.ticks = 0
        self.spawned_total = 0
        logger.info(
            "Session started (mode=%s, seed=%s, playfield=%sx%s)",
            self.config.spawn_mode.value,
            self.rng.seed,
            self.config.playfield.width,
            self.config.playfield.height,
        )

    # ---------- Events ----------
    def add_listener(self, listener: Callable[[GameEvent, "GameSession"], None]) -> None:
        """Subscribe to session events (spawns, collisions, game over, reset)."""
        self._listeners.append(listener)

    def _emit(self, event: GameEvent) -> None:
        for l in list(self._listeners):
            try:
                l(event, self)
            except Exception as ex:  # pragma: no cover - listeners shouldn't crash the session
                logger.exception("Listener errored on %s: %s", event, ex)

    # ---------- State ----------
    @property
    def is_game_over(self) -> bool:
        return self.state is SessionState.GAME_OVER

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            state=self.state,
            player=self.player.square,
            fallers=tuple(f.square for f in self.fallers),
            elapsed=self.elapsed,
            ticks=self.ticks,
        )

    # ---------- Input ----------
    def handle_input(self, event: InputEvent) -> None:
        if event.action in (InputAction.MOVE_LEFT, InputAction.MOVE_RIGHT):
            self.player.handle_button(event.action, event.pressed)
        elif event.action is InputAction.RESET and event.pressed and self.is_game_over:
            self.reset()

    def handle_button(self, action: InputAction, pressed: bool) -> None:
        self.handle_input(InputEvent(action=action, pressed=pressed))

    def inject_faller(self, faller: Faller) -> None:
        """Add a faller directly to the live set."""
        self.fallers.append(faller)
        self.spawned_total += 1

    # ---------- Simulation ----------
    def update(self, dt: float) -> None:
        """Advance the simulation by one tick of ``dt`` seconds.

        Raises ConfigError in stochastic mode once the difficulty ramp has grown
        the random faller size past the playfield width.
        """
        if self.is_game_over:
            if self.config.auto_reset:
                self.reset()
            return

        self.ticks += 1
        spawned = self.spawner.spawn(self.ramp)
        self.ramp.advance()
        if spawned:
            self.fallers.extend(spawned)
            self.spawned_total += len(spawned)
            self._emit(GameEvent.FALLERS_SPAWNED)

        self.player.advance(dt)
        for faller in self.fallers:
            faller.advance(dt)

        player_square = self.player.square
        for faller in self.fallers:
            if faller.is_dead:
                continue
            if squares_collide(player_square, faller.square):
                faller.is_dead = True
                self.player.mark_collided()

        self.fallers = [f for f in self.fallers if not f.is_dead]

        if self.player.is_dead:
            self.state = SessionState.GAME_OVER
            logger.info("Game over after %.2fs (%d ticks)", self.elapsed, self.ticks)
            self._emit(GameEvent.PLAYER_COLLIDED)
            self._emit(GameEvent.GAME_OVER)
            return

        if dt > 0:
            self.elapsed += dt

    def reset(self) -> None:
        """Return to a fresh game; the random source keeps its current stream."""
        self.player = Player.spawn(self.config.player, self.config.playfield)
        self.fallers = []
        self.spawner.reset()
        self.ramp.reset()
        self.elapsed = 0.0
        self.ticks = 0
        self.spawned_total = 0
        self.state = SessionState.PLAYING
        logger.info("Session reset")
        self._emit(GameEvent.RESET)


__all__ = ["GameSession", "SessionSnapshot", "SessionState", "format_elapsed"]
