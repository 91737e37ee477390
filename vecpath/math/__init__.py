"""Vector math for vecpath."""

from .transforms import translate
from .vec2 import Vector2D

__all__ = [
    "Vector2D",
    "translate",
]
