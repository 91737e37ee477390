"""Default configuration values for vecpath geometry and the desktop viewer."""

from __future__ import annotations

from pathlib import Path

# Any magnitude below this is treated as zero when normalizing. Compared against
# the length itself, not its square.
EPSILON = 1.0e-14

DEFAULT_BOX_WIDTH = 20.0
DEFAULT_SPINNER_WIDTH = 80.0
DEFAULT_SPINNER_HEIGHT = 30.0
DEFAULT_SPIN_DEGREES_PER_SECOND = 45.0
DEFAULT_SHOW_SPINNER = True
DEFAULT_SHOW_AXES = True

DEFAULT_WINDOW_WIDTH = 960
DEFAULT_WINDOW_HEIGHT = 640
DEFAULT_FPS = 60
DEFAULT_ZOOM = 1.0
DEFAULT_PIXELS_PER_UNIT = 2.0

DEFAULT_RENDER_DPI = 100

DEFAULT_SETTINGS_PATH = Path.home() / ".vecpath_viewer_settings.json"
