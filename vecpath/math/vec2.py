"""Immutable 2D vector value type."""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, pi, sin, sqrt
from typing import Sequence

import numpy as np

from vecpath import config

PointLike = Sequence[float]


@dataclass(frozen=True, eq=False)
class Vector2D:
    """2D vector with x and y stored as floats.

    Operations that manipulate the vector return a new vector. ``length`` and
    ``angle`` are computed on every access.
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        # Widen ints and numpy scalars (e.g. float32) to Python floats.
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def from_point(cls, point: PointLike) -> "Vector2D":
        """Position vector of ``point`` measured from the origin."""
        return cls(point[0], point[1])

    @classmethod
    def from_points(cls, start: PointLike, end: PointLike) -> "Vector2D":
        """Offset between two points.

        The magnitude is the distance between the points and the direction is
        from ``start`` to ``end``.
        """
        return cls(end[0] - start[0], end[1] - start[1])

    @classmethod
    def from_array(cls, vector: np.ndarray) -> "Vector2D":
        """Copy the ``(dx, dy)`` components of a numpy vector."""
        return cls(vector[0], vector[1])

    @property
    def length(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y)

    @property
    def angle(self) -> float:
        """Direction in radians, in the range (-pi, pi]."""
        return atan2(self.y, self.x)

    @property
    def angle_degrees(self) -> float:
        return self.angle * 180 / pi

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def rotate(self, radians: float) -> "Vector2D":
        """Rotate counter-clockwise (y-up frame) by ``radians``."""
        x1 = self.x * cos(radians) - self.y * sin(radians)
        y1 = self.x * sin(radians) + self.y * cos(radians)
        return Vector2D(x1, y1)

    def rotate_degrees(self, degrees: float) -> "Vector2D":
        return self.rotate(degrees * pi / 180)

    def scale(self, factor: float) -> "Vector2D":
        """Multiply the vector's length by ``factor``."""
        return Vector2D(self.x * factor, self.y * factor)

    def normalize(self) -> "Vector2D":
        """Unit vector in the same direction.

        Vectors shorter than ``config.EPSILON`` normalize to the zero vector
        instead of being divided by a near-zero magnitude.
        """
        m = self.length
        if m < config.EPSILON:
            return Vector2D(0.0, 0.0)
        return self.scale(1 / m)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
