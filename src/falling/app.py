from __future__ import annotations

import logging
import os
from typing import Optional

from .config import GameConfig
from .engine.loop import EngineConfig, GameEngine
from .engine.session import GameSession, format_elapsed
from .input import InputAction, InputMapper

logger = logging.getLogger(__name__)

PLAYER_COLOR = (255, 0, 0)
FALLER_COLOR = (0, 0, 255)
TEXT_COLOR = (230, 230, 230)


def _arcade_available() -> bool:
    try:
        import arcade  # noqa: F401
        return True
    except Exception:
        return False


def _arcade_key_mapper(arcade_key) -> InputMapper:
    """Default bindings plus aliases from Arcade's integer key codes."""
    mapper = InputMapper.default()
    for name in ("A", "D", "LEFT", "RIGHT", "R", "ENTER", "RETURN", "SPACE", "ESCAPE"):
        code = getattr(arcade_key, name, None)
        if code is not None:
            mapper.set_alias(code, name)
    return mapper


def run_gui(config: GameConfig, max_steps: Optional[int] = None, tick_rate: float = 60.0) -> int:
    """Run with an Arcade window if available, otherwise fall back to headless.

    The window only reads session snapshots when drawing; simulation happens in
    ``on_update`` at ``tick_rate`` updates per second.
    """
    if not _arcade_available():
        logger.warning("Arcade not available; falling back to headless mode")
        return run_headless(config, max_steps=max_steps, tick_rate=tick_rate)

    import arcade

    width = int(config.playfield.width)
    height = int(config.playfield.height)

    class GameWindow(arcade.Window):
        def __init__(self) -> None:
            update_rate = 1.0 / tick_rate if tick_rate and tick_rate > 0 else 1.0 / 60.0
            super().__init__(width, height, title="Falling", update_rate=update_rate)
            self.background_color = arcade.color.BLACK
            self.session = GameSession(config)
            self.engine = GameEngine(self.session, EngineConfig(tick_rate=tick_rate, max_steps=max_steps))
            self.engine.start()
            self.mapper = _arcade_key_mapper(arcade.key)

        def _draw_square(self, square, color) -> None:
            # Session y grows downwards; Arcade's origin is bottom-left
            top = height - square.y
            arcade.draw_lrbt_rectangle_filled(
                square.x, square.x + square.size, top - square.size, top, color
            )

        def on_draw(self):
            self.clear()
            snap = self.session.snapshot()
            if snap.is_game_over:
                arcade.draw_text(
                    format_elapsed(snap.elapsed),
                    width / 2,
                    height / 2,
                    TEXT_COLOR,
                    48,
                    anchor_x="center",
                    anchor_y="center",
                )
                return
            self._draw_square(snap.player, PLAYER_COLOR)
            for square in snap.fallers:
                self._draw_square(square, FALLER_COLOR)

        def on_update(self, delta_time: float):
            if self.engine.running:
                self.engine.update(delta_time)
            else:
                self.close()

        def _on_key(self, symbol: int, pressed: bool) -> None:
            event = self.mapper.on_key_event(symbol, pressed=pressed)
            if event is None:
                return
            if event.action is InputAction.QUIT:
                if pressed:
                    self.engine.stop()
                    self.close()
                return
            self.session.handle_input(event)

        def on_key_press(self, symbol: int, modifiers: int):
            self._on_key(symbol, True)

        def on_key_release(self, symbol: int, modifiers: int):
            self._on_key(symbol, False)

    window = GameWindow()
    try:
        logger.info("Launching Arcade window")
        arcade.run()
        logger.info("Arcade loop finished")
        return 0
    except Exception:
        logger.exception("Unhandled exception in GUI loop; exiting with code 1")
        return 1
    finally:
        window.close()


def run_headless(config: GameConfig, max_steps: Optional[int] = 600, tick_rate: float = 60.0) -> int:
    """Run an unattended session in the console until game over or max_steps.

    Every tick receives a fixed dt of ``1 / tick_rate`` so runs with the same
    seed are reproducible regardless of machine speed.
    """
    if max_steps is None:
        # Safety in CI/headless: always bound the loop
        max_steps = 600

    print("Falling (headless)")
    print("Press Ctrl+C to exit. Running...\n")

    step_dt = 1.0 / tick_rate if tick_rate and tick_rate > 0 else 1.0 / 60.0
    session = GameSession(config)
    engine = GameEngine(
        session,
        EngineConfig(tick_rate=tick_rate, max_steps=max_steps, step_dt=step_dt, stop_on_game_over=True),
    )
    try:
        engine.run()
        snap = session.snapshot()
        outcome = "game over" if snap.is_game_over else "alive"
        print(f"Loop complete (steps={engine.step}, {outcome}, survived={format_elapsed(snap.elapsed)}s)")
        return 0
    except KeyboardInterrupt:
        engine.stop()
        print("Interrupted by user")
        return 130
    except Exception:
        logger.exception("Unhandled exception in headless loop")
        return 1


def run_auto(config: GameConfig, max_steps: Optional[int] = None, tick_rate: float = 60.0) -> int:
    """Run GUI if available and not explicitly overridden, else headless.

    Honors environment overrides:
      - FALLING_HEADLESS=1 forces headless.
      - FALLING_GUI=1 forces GUI (if arcade importable).
    """
    if os.getenv("FALLING_HEADLESS") == "1":
        return run_headless(config, max_steps=max_steps, tick_rate=tick_rate)

    if os.getenv("FALLING_GUI") == "1":
        return run_gui(config, max_steps=max_steps, tick_rate=tick_rate)

    return run_gui(config, max_steps=max_steps, tick_rate=tick_rate)
