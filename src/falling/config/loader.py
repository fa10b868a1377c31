from __future__ import annotations

import dataclasses
import logging
from importlib.resources import files as resource_files
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import yaml
from platformdirs import user_config_dir

from ..exceptions import ConfigError
from . import GameConfig, PlayerConfig, PlayfieldConfig, SpawnMode, StochasticConfig, WaveConfig

logger = logging.getLogger(__name__)

APP_NAME = "falling"
CONFIG_FILENAME = "config.yaml"

T = TypeVar("T")

_SECTIONS: Dict[str, type] = {
    "playfield": PlayfieldConfig,
    "player": PlayerConfig,
    "stochastic": StochasticConfig,
    "wave": WaveConfig,
}


def default_config_path() -> Path:
    """Per-user config file location (may not exist)."""
    return Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME


def _as_int(value: Any, name: str) -> int:
    # Integral floats (e.g. 3.0) are accepted; 1.7 or True are not
    if isinstance(value, bool):
        raise ConfigError(f"Config value {name} must be an integer, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ConfigError(f"Config value {name} must be an integer, got {value!r}")
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Config value {name} must be an integer, got {value!r}") from None


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"Config value {name} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"Config value {name} must be numeric, got {value!r}") from None


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"Config value {name} must be true or false, got {value!r}")
    return value


def _build_section(cls: Type[T], raw: Any, name: str) -> T:
    if raw is None:
        return cls()
    if not isinstance(raw, Mapping):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(raw).__name__}")
    known = {f.name: f for f in dataclasses.fields(cls)}
    kwargs: Dict[str, Any] = {}
    for key, value in raw.items():
        f = known.get(key)
        if f is None:
            logger.warning("Ignoring unknown config key %s.%s", name, key)
            continue
        if f.type in ("int", int):
            kwargs[key] = _as_int(value, f"{name}.{key}")
        else:
            kwargs[key] = _as_float(value, f"{name}.{key}")
    return cls(**kwargs)


def config_from_dict(raw: Mapping[str, Any]) -> GameConfig:
    """Create a GameConfig from a parsed mapping. Missing sections and keys fall back to defaults."""
    sections = {name: _build_section(cls, raw.get(name), name) for name, cls in _SECTIONS.items()}
    seed = raw.get("seed")
    return GameConfig(
        spawn_mode=SpawnMode.parse(raw.get("spawn_mode", SpawnMode.WAVE)),
        seed=_as_int(seed, "seed") if seed is not None else None,
        auto_reset=_as_bool(raw.get("auto_reset", False), "auto_reset"),
        **sections,
    )


def load_config(path: Optional[str | Path] = None) -> GameConfig:
    """Load session configuration from YAML.

    If path is None, loads the embedded default resource at
    falling/config/default.yaml.
    """
    if path is None:
        data = resource_files("falling.config").joinpath("default.yaml").read_text(encoding="utf-8")
        logger.debug("Loaded embedded default config resource")
    else:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = f.read()
        except OSError as exc:
            raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
        logger.debug("Loaded config from path: %s", path)

    try:
        raw = yaml.safe_load(data) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Malformed config YAML: {exc}") from exc
    if not isinstance(raw, Mapping):
        raise ConfigError("Config root must be a mapping")

    cfg = config_from_dict(raw)
    logger.info(
        "Config: mode=%s playfield=%sx%s seed=%s",
        cfg.spawn_mode.value,
        cfg.playfield.width,
        cfg.playfield.height,
        cfg.seed,
    )
    return cfg


__all__ = ["config_from_dict", "default_config_path", "load_config"]
