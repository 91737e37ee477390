"""Box outlines as matplotlib paths.

Both helpers return a closed ``matplotlib.path.Path``: four corners followed
by a ``CLOSEPOLY`` vertex that repeats the first corner.
"""

from __future__ import annotations

import logging

import numpy as np
from matplotlib.path import Path

from vecpath.math.transforms import translate
from vecpath.math.vec2 import PointLike, Vector2D

logger = logging.getLogger(__name__)

_CLOSED_BOX_CODES = [Path.MOVETO, Path.LINETO, Path.LINETO, Path.LINETO, Path.CLOSEPOLY]


def _as_point(point: PointLike) -> tuple[float, float]:
    return (float(point[0]), float(point[1]))


def _closed_box(corners: list[tuple[float, float]]) -> Path:
    vertices = np.array(corners + [corners[0]], dtype=np.float64)
    return Path(vertices, _CLOSED_BOX_CODES)


def empty_path() -> Path:
    return Path(np.empty((0, 2), dtype=np.float64))


def box_from_segment(start: PointLike, end: PointLike, width: float) -> Path:
    """Box surrounding the line from ``start`` to ``end``.

    The width is split evenly on either side of the line. A line with no
    length has no box, so an empty path is returned.

    Args:
        start: The starting point of the line.
        end: The ending point of the line.
        width: The width of the box.
    """
    start = _as_point(start)
    end = _as_point(end)
    # Componentwise so NaN coordinates never count as a zero-length segment.
    if start[0] == end[0] and start[1] == end[1]:
        logger.debug("Zero-length segment at %s; returning empty path", start)
        return empty_path()

    # Half-width offsets at +90 and -90 degrees from the line.
    v = Vector2D.from_points(start, end).normalize().rotate_degrees(90.0).scale(width / 2.0)
    v2 = v.rotate_degrees(180.0)

    p1 = translate(start, v)
    p2 = translate(start, v2)
    p3 = translate(end, v)
    p4 = translate(end, v2)
    return _closed_box([p1, p3, p4, p2])


def box_with_center(center: PointLike, angle: float, size: tuple[float, float]) -> Path:
    """Box centered on a point, rotated by ``angle`` degrees.

    Args:
        center: The center of the box.
        angle: The angle of the box, in degrees. It is projected along the width.
        size: ``(width, height)`` of the box.
    """
    center = _as_point(center)
    dx = size[0] / 2.0
    dy = size[1] / 2.0

    p1 = translate(center, Vector2D(dx, dy).rotate_degrees(angle))
    p2 = translate(center, Vector2D(dx, -dy).rotate_degrees(angle))
    p3 = translate(center, Vector2D(-dx, dy).rotate_degrees(angle))
    p4 = translate(center, Vector2D(-dx, -dy).rotate_degrees(angle))
    return _closed_box([p1, p3, p4, p2])


def outline_points(path: Path) -> list[tuple[float, float]]:
    """Drawable vertices of ``path``, skipping ``CLOSEPOLY`` entries."""
    if path.codes is None:
        return [(float(x), float(y)) for x, y in path.vertices]
    return [
        (float(x), float(y))
        for (x, y), code in zip(path.vertices, path.codes)
        if code != Path.CLOSEPOLY
    ]
