"""Schema and helpers for the desktop viewer's persisted settings."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from . import config

logger = logging.getLogger(__name__)


@dataclass
class ViewerSettings:
    box_width: float = config.DEFAULT_BOX_WIDTH
    spinner_width: float = config.DEFAULT_SPINNER_WIDTH
    spinner_height: float = config.DEFAULT_SPINNER_HEIGHT
    spin_degrees_per_second: float = config.DEFAULT_SPIN_DEGREES_PER_SECOND
    show_spinner: bool = config.DEFAULT_SHOW_SPINNER
    show_axes: bool = config.DEFAULT_SHOW_AXES
    window_width: int = config.DEFAULT_WINDOW_WIDTH
    window_height: int = config.DEFAULT_WINDOW_HEIGHT
    fps: int = config.DEFAULT_FPS
    zoom: float = config.DEFAULT_ZOOM
    pixels_per_unit: float = config.DEFAULT_PIXELS_PER_UNIT

    def to_json(self) -> dict[str, Any]:
        return {
            "box_width": self.box_width,
            "spinner_width": self.spinner_width,
            "spinner_height": self.spinner_height,
            "spin_degrees_per_second": self.spin_degrees_per_second,
            "show_spinner": self.show_spinner,
            "show_axes": self.show_axes,
            "window_width": self.window_width,
            "window_height": self.window_height,
            "fps": self.fps,
            "zoom": self.zoom,
            "pixels_per_unit": self.pixels_per_unit,
        }

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "ViewerSettings":
        return cls(
            box_width=coerce_box_width(payload.get("box_width"), config.DEFAULT_BOX_WIDTH),
            spinner_width=float(payload.get("spinner_width", config.DEFAULT_SPINNER_WIDTH)),
            spinner_height=float(payload.get("spinner_height", config.DEFAULT_SPINNER_HEIGHT)),
            spin_degrees_per_second=float(
                payload.get("spin_degrees_per_second", config.DEFAULT_SPIN_DEGREES_PER_SECOND)
            ),
            show_spinner=bool(payload.get("show_spinner", config.DEFAULT_SHOW_SPINNER)),
            show_axes=bool(payload.get("show_axes", config.DEFAULT_SHOW_AXES)),
            window_width=int(payload.get("window_width", config.DEFAULT_WINDOW_WIDTH)),
            window_height=int(payload.get("window_height", config.DEFAULT_WINDOW_HEIGHT)),
            fps=max(1, int(payload.get("fps", config.DEFAULT_FPS))),
            zoom=float(payload.get("zoom", config.DEFAULT_ZOOM)),
            pixels_per_unit=float(payload.get("pixels_per_unit", config.DEFAULT_PIXELS_PER_UNIT)),
        )


def coerce_box_width(value: Any, fallback: float) -> float:
    """Return ``value`` as a box width, or ``fallback`` if it is unusable.

    Widths must parse as finite, positive floats.
    """
    try:
        width = float(value)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(width) or width <= 0.0:
        return fallback
    return width


def _read_payload(settings_path: Path) -> dict[str, Any]:
    if not settings_path.exists():
        return {}
    try:
        data = json.loads(settings_path.read_text())
    except json.JSONDecodeError:
        logger.warning("Ignoring malformed viewer settings in %s", settings_path)
        return {}
    return data if isinstance(data, dict) else {}


def load_last_used(path: Path | None = None) -> ViewerSettings:
    """Load viewer settings, falling back to defaults for anything missing."""
    return ViewerSettings.from_json(_read_payload(path or config.DEFAULT_SETTINGS_PATH))


def save_last_used(settings: ViewerSettings, path: Path | None = None) -> Path:
    settings_path = path or config.DEFAULT_SETTINGS_PATH
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(settings.to_json(), indent=2, sort_keys=True) + "\n")
    return settings_path
