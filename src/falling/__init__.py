"""
Falling package root.

This package contains the simulation core of the Falling avoidance game.
Rendering and windowing (e.g., Arcade) stay outside of the domain modules;
they only read session snapshots and forward input events.
"""

__version__ = "0.3.0"

__all__ = [
    "__version__",
]
