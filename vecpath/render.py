"""CLI that renders box outlines to an image file.

Run from repo root:
  python -m vecpath.render --segment 0,0,100,40 --box 50,-40,30,60,20 -o boxes.png

Segments are ``x0,y0,x1,y1``; centered boxes are ``cx,cy,angle_deg,width,height``.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from matplotlib.path import Path as MplPath

from vecpath import config
from vecpath.paths.boxes import box_from_segment, box_with_center, outline_points

logger = logging.getLogger(__name__)


def _float_tuple(count: int):
    def parse(text: str) -> tuple[float, ...]:
        parts = text.split(",")
        if len(parts) != count:
            raise argparse.ArgumentTypeError(f"expected {count} comma-separated numbers, got {text!r}")
        try:
            return tuple(float(part) for part in parts)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid number in {text!r}") from exc

    return parse


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render box outlines with matplotlib.")
    parser.add_argument(
        "--segment",
        type=_float_tuple(4),
        action="append",
        default=[],
        help="Line segment x0,y0,x1,y1 to surround with a box. Repeatable.",
    )
    parser.add_argument(
        "--box",
        type=_float_tuple(5),
        action="append",
        default=[],
        help="Centered box cx,cy,angle_deg,width,height. Repeatable.",
    )
    parser.add_argument("--width", type=float, default=config.DEFAULT_BOX_WIDTH, help="Width of segment boxes.")
    parser.add_argument("-o", "--output", type=str, default="boxes.png", help="Output image path.")
    parser.add_argument("--dpi", type=int, default=config.DEFAULT_RENDER_DPI)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    return parser.parse_args(argv)


def build_paths(
    segments: Sequence[tuple[float, float, float, float]],
    boxes: Sequence[tuple[float, float, float, float, float]],
    width: float,
) -> list[MplPath]:
    """Build box paths, dropping degenerate segments."""
    paths: list[MplPath] = []
    for x0, y0, x1, y1 in segments:
        path = box_from_segment((x0, y0), (x1, y1), width)
        if len(path) == 0:
            logger.info("Skipping zero-length segment at (%s, %s)", x0, y0)
            continue
        paths.append(path)
    for cx, cy, angle, box_w, box_h in boxes:
        paths.append(box_with_center((cx, cy), angle, (box_w, box_h)))
    return paths


def run(paths: Sequence[MplPath], output: Path, dpi: int = config.DEFAULT_RENDER_DPI) -> Path:
    """Draw ``paths`` as patches and save the figure to ``output``."""

    # Import here so the geometry helpers stay usable without a plotting backend.
    from matplotlib.figure import Figure
    from matplotlib.patches import PathPatch

    fig = Figure(figsize=(6, 6))
    ax = fig.add_subplot(111)
    all_x: list[float] = []
    all_y: list[float] = []
    for path in paths:
        ax.add_patch(PathPatch(path, facecolor="lightblue", edgecolor="blue", linewidth=1.5))
        for x, y in outline_points(path):
            all_x.append(x)
            all_y.append(y)

    if all_x and all_y:
        margin = 5.0
        ax.set_xlim(min(all_x) - margin, max(all_x) + margin)
        ax.set_ylim(min(all_y) - margin, max(all_y) + margin)
    ax.set_aspect("equal", adjustable="box")
    ax.grid(True, linestyle=":", linewidth=0.5)

    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=dpi)
    return output


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    paths = build_paths(args.segment, args.box, args.width)
    if not paths:
        logger.warning("No boxes to draw; writing an empty figure")
    output = run(paths, Path(args.output), dpi=args.dpi)
    print(f"Wrote {len(paths)} boxes to {output}")


if __name__ == "__main__":
    main()
