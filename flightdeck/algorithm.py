"""Geometric algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point within a cartesian coordinate system."""

    x: float
    y: float


def is_left_of_line(point: Point, start: Point, end: Point) -> float:
    """Return a positive value if ``point`` is left of the line, negative if right, 0 on it."""
    return (end.x - start.x) * (point.y - start.y) - (point.x - start.x) * (
        end.y - start.y
    )


def winding_number(point: Point, polygon: Sequence[Point]) -> int:
    """Return the winding number of ``polygon`` around ``point``; 0 means outside.

    The edges run between consecutive vertices; the polygon is not closed
    implicitly. Raises ``ValueError`` for a polygon without vertices.
    """
    if not polygon:
        raise ValueError("polygon has no vertices")

    wn = 0
    for start, end in zip(polygon, polygon[1:]):
        if start.y <= point.y:
            if end.y > point.y and is_left_of_line(point, start, end) > 0.0:
                wn += 1  # upward crossing
        elif end.y <= point.y and is_left_of_line(point, start, end) < 0.0:
            wn -= 1  # downward crossing
    return wn