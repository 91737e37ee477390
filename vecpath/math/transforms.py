"""Point transforms built on Vector2D."""

from __future__ import annotations

from .vec2 import PointLike, Vector2D


def translate(point: PointLike, vector: Vector2D) -> tuple[float, float]:
    """Return a new point offset from ``point`` by ``vector``."""
    return (float(point[0] + vector.x), float(point[1] + vector.y))
