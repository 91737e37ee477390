"""Box outline paths built from Vector2D."""

from .boxes import box_from_segment, box_with_center, empty_path, outline_points

__all__ = [
    "box_from_segment",
    "box_with_center",
    "empty_path",
    "outline_points",
]
