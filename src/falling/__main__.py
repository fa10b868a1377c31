from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys

from . import __version__
from .app import run_auto, run_gui, run_headless
from .config import GameConfig, SpawnMode
from .config.loader import default_config_path, load_config
from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    path = args.config
    if path is None:
        user_path = default_config_path()
        if user_path.is_file():
            path = user_path
    cfg = load_config(path)
    overrides = {}
    if args.mode is not None:
        overrides["spawn_mode"] = SpawnMode.parse(args.mode)
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.auto_reset:
        overrides["auto_reset"] = True
    return dataclasses.replace(cfg, **overrides) if overrides else cfg


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="falling",
        description="Falling - dodge the falling blocks",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (console)")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in SpawnMode],
        default=None,
        help="Spawn strategy (overrides config)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for random spawning")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument("--auto-reset", action="store_true", help="Restart right after game over")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N ticks (for testing)")
    parser.add_argument("--tick-rate", type=float, default=60.0, help="Target updates per second")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = _resolve_config(args)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2

    # Honor CLI over env vars
    if args.gui:
        os.environ["FALLING_GUI"] = "1"
        os.environ.pop("FALLING_HEADLESS", None)
        return run_gui(config, max_steps=args.max_steps, tick_rate=args.tick_rate)

    if args.headless:
        os.environ["FALLING_HEADLESS"] = "1"
        os.environ.pop("FALLING_GUI", None)
        return run_headless(config, max_steps=args.max_steps, tick_rate=args.tick_rate)

    return run_auto(config, max_steps=args.max_steps, tick_rate=args.tick_rate)


if __name__ == "__main__":
    sys.exit(main())
