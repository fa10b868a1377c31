"""
Input abstraction layer for Falling.

Exposes:
- InputAction: Logical input actions consumed by the session.
- InputEvent: A press/release event for a logical action.
- InputMapper: Rebindable mapping from physical keys to actions.
"""
from .actions import InputAction, InputEvent
from .mapping import InputMapper

__all__ = [
    "InputAction",
    "InputEvent",
    "InputMapper",
]
