"""Corner-containment collision between axis-aligned squares.

The test takes the four corners of the smaller square and reports a hit if any
of them lies inside the larger square's closed bounding box. Edge and corner
contact count as a hit.

This is a corner test, not a general rectangle-overlap test. Testing the
larger square's corners instead would miss a small square sitting wholly
inside it, and for non-square rectangles a cross-shaped overlap with no
contained corner would be missed either way. Only squares are supported.
"""
from __future__ import annotations

from .geometry import Position, Square


def _any_corner_inside(small: Square, large: Square) -> bool:
    return any(large.contains(cx, cy) for cx, cy in small.corners())


def squares_collide(a: Square, b: Square) -> bool:
    """Return True if a corner of the smaller square lies inside the larger one.

    With equal sizes the corners of ``a`` are tested; for equal squares this
    gives the same answer as testing ``b``'s corners.
    """
    if a.size <= b.size:
        return _any_corner_inside(a, b)
    return _any_corner_inside(b, a)


def collides(a_pos: Position, a_size: float, b_pos: Position, b_size: float) -> bool:
    """Symmetric collision predicate over positions and side lengths."""
    return squares_collide(Square.at(a_pos, a_size), Square.at(b_pos, b_size))


__all__ = ["collides", "squares_collide"]
