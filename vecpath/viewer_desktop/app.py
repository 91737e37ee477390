"""Tkinter-based viewer for sketching box outlines."""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import tkinter as tk
from tkinter import messagebox, ttk

from vecpath import config
from vecpath.paths.boxes import box_from_segment, box_with_center
from vecpath.settings_schema import ViewerSettings, coerce_box_width, load_last_used, save_last_used

from .camera import Camera2D
from .input import InputState
from .overlays import OverlayColors, draw_axes, draw_path, draw_sketch

logger = logging.getLogger(__name__)


class ViewerApp:
    def __init__(self, settings: ViewerSettings, settings_path: Path | None = None) -> None:
        self.settings = settings
        self.settings_path = settings_path
        self.root = tk.Tk()
        self.root.title("vecpath Viewer")
        self.root.geometry(f"{settings.window_width}x{settings.window_height}")

        self._build_layout()
        self.root.update_idletasks()

        self.camera = Camera2D(
            width=settings.window_width,
            height=self.canvas.winfo_height() or settings.window_height,
            zoom=settings.zoom,
            pixels_per_unit=settings.pixels_per_unit,
        )
        self.input_state = InputState(self.camera)

        self.paused = not settings.show_spinner
        self.spin_angle = 0.0
        self.last_time = time.perf_counter()
        self.colors = OverlayColors()

        self._bind_events()
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self._loop()

    def _build_layout(self) -> None:
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(1, weight=1)

        self.toolbar = ttk.Frame(self.root, padding=4)
        self.toolbar.grid(row=0, column=0, sticky="ew")
        self.toolbar.columnconfigure(10, weight=1)

        self.play_button = ttk.Button(self.toolbar, text="Pause", command=self._toggle_pause)
        self.play_button.grid(row=0, column=0, padx=4)
        ttk.Button(self.toolbar, text="Clear", command=self._clear).grid(row=0, column=1, padx=4)

        ttk.Label(self.toolbar, text="Box width").grid(row=0, column=2, padx=(12, 4))
        self.box_width_var = tk.StringVar(value=str(self.settings.box_width))
        ttk.Entry(self.toolbar, textvariable=self.box_width_var, width=8).grid(row=0, column=3, padx=4)

        self.stats_label = ttk.Label(self.toolbar, text="")
        self.stats_label.grid(row=0, column=11, sticky="e")

        self.canvas = tk.Canvas(self.root, bg="#F7F7F7", highlightthickness=0)
        self.canvas.grid(row=1, column=0, sticky="nsew")

    def _bind_events(self) -> None:
        self.canvas.bind("<ButtonPress-1>", self._on_mouse_down)
        self.canvas.bind("<ButtonRelease-1>", self._on_mouse_up)
        self.canvas.bind("<B1-Motion>", self._on_mouse_drag)
        self.canvas.bind("<ButtonPress-3>", self._on_pan_start)
        self.canvas.bind("<ButtonRelease-3>", self._on_pan_end)
        self.canvas.bind("<B3-Motion>", self._on_pan_drag)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        self.canvas.bind("<Button-4>", self._on_mouse_wheel)
        self.canvas.bind("<Button-5>", self._on_mouse_wheel)
        self.canvas.bind("<Configure>", self._on_resize)
        self.root.bind("<space>", lambda _event: self._toggle_pause())
        self.root.bind("<KeyPress-c>", lambda _event: self._clear())

    def _box_width(self) -> float:
        width = coerce_box_width(self.box_width_var.get(), self.settings.box_width)
        self.settings.box_width = width
        return width

    def _toggle_pause(self) -> None:
        self.paused = not self.paused
        self.play_button.configure(text="Play" if self.paused else "Pause")

    def _clear(self) -> None:
        self.input_state.clear()

    def _on_mouse_down(self, event: tk.Event) -> None:
        self.input_state.start_segment(event.x, event.y)

    def _on_mouse_up(self, event: tk.Event) -> None:
        segment = self.input_state.finish_segment(event.x, event.y)
        if segment is not None:
            logger.debug("Committed segment %s -> %s", *segment)

    def _on_mouse_drag(self, event: tk.Event) -> None:
        self.input_state.drag_segment(event.x, event.y)

    def _on_pan_start(self, event: tk.Event) -> None:
        self.input_state.start_pan(event.x, event.y)

    def _on_pan_end(self, _event: tk.Event) -> None:
        self.input_state.end_pan()

    def _on_pan_drag(self, event: tk.Event) -> None:
        self.input_state.pan_to(event.x, event.y)

    def _on_mouse_wheel(self, event: tk.Event) -> None:
        if hasattr(event, "delta") and event.delta:
            factor = 1.1 if event.delta > 0 else 0.9
        elif getattr(event, "num", None) == 4:
            factor = 1.1
        else:
            factor = 0.9
        self.input_state.zoom(factor, event.x, event.y)

    def _on_resize(self, event: tk.Event) -> None:
        self.camera.resize(event.width, event.height)

    def _loop(self) -> None:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        if not self.paused:
            self.spin_angle = (self.spin_angle + dt * self.settings.spin_degrees_per_second) % 360.0
        self._render()
        self.root.after(int(1000 / max(1, self.settings.fps)), self._loop)

    def _render(self) -> None:
        self.canvas.delete("all")
        if self.settings.show_axes:
            draw_axes(self.canvas, self.camera, self.colors)

        width = self._box_width()
        for start, end in self.input_state.segments:
            draw_path(self.canvas, self.camera, box_from_segment(start, end, width), self.colors.segment_box, self.colors)

        sketch = self.input_state.sketch
        if sketch is not None:
            start, end = sketch
            draw_path(self.canvas, self.camera, box_from_segment(start, end, width), "", self.colors)
            draw_sketch(self.canvas, self.camera, start, end, self.colors)

        if self.settings.show_spinner:
            spinner = box_with_center(
                (0.0, 0.0),
                self.spin_angle,
                (self.settings.spinner_width, self.settings.spinner_height),
            )
            draw_path(self.canvas, self.camera, spinner, self.colors.spinner_box, self.colors)

        self.stats_label.configure(
            text=(
                f"Boxes: {len(self.input_state.segments)}  "
                f"Angle: {self.spin_angle:0.1f}deg  "
                f"Zoom: {self.camera.zoom:0.2f}"
            )
        )

    def _on_close(self) -> None:
        self.settings.zoom = self.camera.zoom
        try:
            path = save_last_used(self.settings, self.settings_path)
        except OSError as exc:
            messagebox.showerror("Settings Save", f"Unable to save settings: {exc}")
        else:
            logger.info("Saved viewer settings to %s", path)
        self.root.destroy()


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sketch box outlines around line segments.")
    parser.add_argument(
        "--settings",
        type=str,
        default=str(config.DEFAULT_SETTINGS_PATH),
        help="Path to the viewer settings JSON.",
    )
    parser.add_argument("--width", type=float, default=None, help="Box width in world units.")
    parser.add_argument("--no-spinner", dest="show_spinner", action="store_false", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    settings_path = Path(args.settings)
    settings = load_last_used(settings_path)
    if args.width is not None:
        settings.box_width = coerce_box_width(args.width, settings.box_width)
    if args.show_spinner is not None:
        settings.show_spinner = args.show_spinner
    app = ViewerApp(settings, settings_path)
    app.root.mainloop()


if __name__ == "__main__":
    main()
