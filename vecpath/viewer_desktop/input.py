"""Input state for the desktop viewer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .camera import Camera2D

Segment = tuple[tuple[float, float], tuple[float, float]]


@dataclass
class InputState:
    """Tracks segment sketching (left button) and panning (right button).

    Mouse positions are in screen pixels; segments are stored in world units.
    """

    camera: Camera2D
    segments: list[Segment] = field(default_factory=list)
    sketch_start: tuple[float, float] | None = None
    sketch_end: tuple[float, float] | None = None
    is_panning: bool = False
    last_mouse: tuple[float, float] | None = None

    def start_segment(self, x: float, y: float) -> None:
        self.sketch_start = self.camera.screen_to_world(x, y)
        self.sketch_end = self.sketch_start

    def drag_segment(self, x: float, y: float) -> None:
        if self.sketch_start is None:
            return
        self.sketch_end = self.camera.screen_to_world(x, y)

    def finish_segment(self, x: float, y: float) -> Segment | None:
        """Commit the sketched segment and return it.

        Clicks without movement produce no segment.
        """
        if self.sketch_start is None:
            return None
        start = self.sketch_start
        end = self.camera.screen_to_world(x, y)
        self.sketch_start = None
        self.sketch_end = None
        if start == end:
            return None
        self.segments.append((start, end))
        return start, end

    @property
    def sketch(self) -> Segment | None:
        if self.sketch_start is None or self.sketch_end is None:
            return None
        return self.sketch_start, self.sketch_end

    def clear(self) -> None:
        self.segments.clear()
        self.sketch_start = None
        self.sketch_end = None

    def start_pan(self, x: float, y: float) -> None:
        self.is_panning = True
        self.last_mouse = (x, y)

    def end_pan(self) -> None:
        self.is_panning = False
        self.last_mouse = None

    def pan_to(self, x: float, y: float) -> None:
        if not self.is_panning or self.last_mouse is None:
            return
        last_x, last_y = self.last_mouse
        self.camera.pan(x - last_x, y - last_y)
        self.last_mouse = (x, y)

    def zoom(self, factor: float, x: float, y: float) -> None:
        self.camera.zoom_at(factor, (x, y))
