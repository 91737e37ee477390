"""Camera utilities for the desktop viewer."""

from __future__ import annotations

from dataclasses import dataclass

from vecpath.math.transforms import translate
from vecpath.math.vec2 import PointLike, Vector2D


@dataclass
class Camera2D:
    """Simple 2D camera mapping y-up world points to y-down screen pixels."""

    width: int
    height: int
    zoom: float = 1.0
    center: tuple[float, float] = (0.0, 0.0)
    pixels_per_unit: float = 2.0

    @property
    def scale(self) -> float:
        return self.pixels_per_unit * self.zoom

    def world_to_screen(self, point: PointLike) -> tuple[float, float]:
        x = (point[0] - self.center[0]) * self.scale + self.width * 0.5
        y = self.height * 0.5 - (point[1] - self.center[1]) * self.scale
        return x, y

    def screen_to_world(self, x: float, y: float) -> tuple[float, float]:
        world_x = (x - self.width * 0.5) / self.scale + self.center[0]
        world_y = (self.height * 0.5 - y) / self.scale + self.center[1]
        return world_x, world_y

    def pan(self, dx_pixels: float, dy_pixels: float) -> None:
        self.center = translate(self.center, Vector2D(-dx_pixels, dy_pixels).scale(1.0 / self.scale))

    def zoom_at(self, factor: float, anchor: tuple[float, float]) -> None:
        if factor == 1.0:
            return
        anchor_world = self.screen_to_world(*anchor)
        self.zoom = max(0.05, min(self.zoom * factor, 50.0))
        updated_world = self.screen_to_world(*anchor)
        self.center = translate(self.center, Vector2D.from_points(updated_world, anchor_world))

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
