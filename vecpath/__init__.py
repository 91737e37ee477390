"""2D vector value type and box outline helpers."""

from .math import Vector2D, translate
from .paths import box_from_segment, box_with_center, outline_points

__all__ = [
    "Vector2D",
    "box_from_segment",
    "box_with_center",
    "outline_points",
    "translate",
]
