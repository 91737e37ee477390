"""Rendering overlays for the desktop viewer."""

from __future__ import annotations

from dataclasses import dataclass

import tkinter as tk
from matplotlib.path import Path

from vecpath.paths.boxes import outline_points

from .camera import Camera2D


@dataclass
class OverlayColors:
    axes: str = "#999999"
    segment_box: str = "#56C271"
    spinner_box: str = "#4C7AEF"
    outline: str = "#1E1E1E"
    sketch_line: str = "#FF5533"


def draw_axes(canvas: tk.Canvas, camera: Camera2D, colors: OverlayColors) -> None:
    left, bottom = camera.screen_to_world(0.0, float(camera.height))
    right, top = camera.screen_to_world(float(camera.width), 0.0)
    canvas.create_line(*camera.world_to_screen((left, 0.0)), *camera.world_to_screen((right, 0.0)), fill=colors.axes)
    canvas.create_line(*camera.world_to_screen((0.0, bottom)), *camera.world_to_screen((0.0, top)), fill=colors.axes)


def draw_path(canvas: tk.Canvas, camera: Camera2D, path: Path, fill: str, colors: OverlayColors) -> None:
    corners = outline_points(path)
    if not corners:
        return
    points = []
    for corner in corners:
        points.extend(camera.world_to_screen(corner))
    canvas.create_polygon(*points, fill=fill, outline="")
    canvas.create_polygon(*points, outline=colors.outline, fill="", width=2)


def draw_sketch(
    canvas: tk.Canvas,
    camera: Camera2D,
    start: tuple[float, float],
    end: tuple[float, float],
    colors: OverlayColors,
) -> None:
    canvas.create_line(
        *camera.world_to_screen(start),
        *camera.world_to_screen(end),
        fill=colors.sketch_line,
        width=1,
        dash=(4, 2),
    )
