from __future__ import annotations

import hashlib
import random as _random
from typing import Any, Optional


class SeedManager:
    """
    Session-owned RNG to keep stochastic spawning reproducible.

    - Uses a dedicated instance of random.Random; does not touch global random state.
    - Accepts an int seed or any string via hashing.
    - Without a seed, draws from system entropy so separate runs differ.
    """

    def __init__(self, seed: Optional[Any] = None):
        self._rng = _random.Random()
        self._seed: Optional[int] = None
        if seed is not None:
            self.set_seed(seed)
        else:
            self._rng.seed()

    def derive_seed(self, source: str) -> int:
        """Derive a 32-bit integer seed from an arbitrary string using SHA256."""
        digest = hashlib.sha256(source.encode("utf-8")).digest()
        val = int.from_bytes(digest[:8], "big", signed=False)
        return val & 0xFFFFFFFF

    def set_seed(self, seed_or_str: Any) -> int:
        """
        Set the RNG seed. Accepts an int, a string, or any object convertible to string.
        Returns the effective integer seed used.
        """
        if isinstance(seed_or_str, int):
            seed = seed_or_str & 0xFFFFFFFF
        else:
            seed = self.derive_seed(str(seed_or_str))
        self._rng.seed(seed)
        self._seed = seed
        return seed

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)
