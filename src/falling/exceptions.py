class FallingError(Exception):
    """Base exception for the Falling project."""


class ConfigError(FallingError):
    """Raised when a configuration violates a precondition (e.g., a faller wider than the playfield)."""
