"""Drawing layer — Pillow canvas primitives and per-shape paint routines.

Pillow strokes whole-pixel widths only, so fractional widths are rounded up:
the road halo (2.2 under 2.0) stays one pixel wider than its core.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Callable

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont
from shapely.geometry import LineString
from shapely.ops import substring

from tilerender.engine.config import RenderConfig
from tilerender.engine.shapes import (
    Border,
    GeoFeature,
    PopulatedPlace,
    Railway,
    Road,
    Shape,
    Waterway,
)
from tilerender.errors import PaintError

# Stroke widths in pixels before rounding
_THIN = 1.2
_ROAD_CORE = 2.0
_ROAD_HALO = 2.2
_RAIL_BED = 2.0
_BORDER = 2.0

# Dash pattern as multiples of the stroke width: dash, gap, dash (repeats).
RAILWAY_DASH = (2.0, 4.0, 2.0)


def _pixel_width(width: float) -> int:
    return max(1, math.ceil(width))


def _as_xy(points: NDArray[np.float64]) -> list[tuple[float, float]]:
    return [(float(x), float(y)) for x, y in points]


def dash_segments(
    points: NDArray[np.float64],
    pattern: Sequence[float],
) -> list[NDArray[np.float64]]:
    """Split a polyline into its visible dashes.

    Odd-length patterns are doubled so dashes and gaps keep alternating.
    """
    if len(points) < 2 or not pattern or sum(pattern) <= 0:
        return []
    if len(pattern) % 2:
        pattern = list(pattern) * 2

    line = LineString(points)
    total = line.length
    dashes: list[NDArray[np.float64]] = []
    pos = 0.0
    i = 0
    while pos < total:
        step = pattern[i % len(pattern)]
        if i % 2 == 0 and step > 0:
            piece = substring(line, pos, min(pos + step, total))
            if piece.geom_type == "LineString" and len(piece.coords) >= 2:
                dashes.append(np.asarray(piece.coords, dtype=np.float64))
        pos += step
        i += 1
    return dashes


class Canvas:
    """RGBA raster plus the four drawing operations the painters rely on."""

    def __init__(self, width: int, height: int, background: str = "white") -> None:
        self.image = Image.new("RGBA", (width, height), background)
        self._draw = ImageDraw.Draw(self.image)
        self._fonts: dict[tuple[str, int], ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    def stroke_line(self, color: str, width: float, points: NDArray[np.float64]) -> None:
        if len(points) < 2:
            return
        self._draw.line(_as_xy(points), fill=color, width=_pixel_width(width), joint="curve")

    def stroke_dashed_line(
        self,
        color: str,
        width: float,
        pattern: Sequence[float],
        points: NDArray[np.float64],
    ) -> None:
        scaled = [p * width for p in pattern]
        for dash in dash_segments(points, scaled):
            self._draw.line(_as_xy(dash), fill=color, width=_pixel_width(width))

    def fill_polygon(self, color: str, points: NDArray[np.float64]) -> None:
        if len(points) < 3:
            return
        self._draw.polygon(_as_xy(points), fill=color)

    def draw_text(
        self,
        text: str,
        font: ImageFont.ImageFont | ImageFont.FreeTypeFont,
        color: str,
        anchor: tuple[float, float],
    ) -> None:
        self._draw.text(anchor, text, fill=color, font=font)

    def font(self, path: str, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        """Load (once) the label font. A bad path is fatal to the pass."""
        key = (path, size)
        if key not in self._fonts:
            if path:
                try:
                    self._fonts[key] = ImageFont.truetype(path, size)
                except OSError as e:
                    raise PaintError("font", f"cannot load {path!r}: {e}") from e
            else:
                self._fonts[key] = ImageFont.load_default(size=size)
        return self._fonts[key]


# ---------------------------------------------------------------------------
# Per-shape paint routines
# ---------------------------------------------------------------------------


def _paint_road(shape: Road, canvas: Canvas, config: RenderConfig) -> None:
    if shape.is_polygon:
        return
    canvas.stroke_line("yellow", _ROAD_HALO, shape.screen_coordinates)
    canvas.stroke_line("coral", _ROAD_CORE, shape.screen_coordinates)


def _paint_waterway(shape: Waterway, canvas: Canvas, config: RenderConfig) -> None:
    if shape.is_polygon:
        canvas.fill_polygon("lightblue", shape.screen_coordinates)
    else:
        canvas.stroke_line("lightblue", _THIN, shape.screen_coordinates)


def _paint_railway(shape: Railway, canvas: Canvas, config: RenderConfig) -> None:
    canvas.stroke_line("darkgray", _RAIL_BED, shape.screen_coordinates)
    canvas.stroke_dashed_line("lightgray", _THIN, RAILWAY_DASH, shape.screen_coordinates)


def _paint_border(shape: Border, canvas: Canvas, config: RenderConfig) -> None:
    canvas.stroke_line("gray", _BORDER, shape.screen_coordinates)


def _paint_populated_place(shape: PopulatedPlace, canvas: Canvas, config: RenderConfig) -> None:
    if not shape.should_render or shape.num_points == 0:
        return
    font = canvas.font(config.font_path, config.font_size)
    x, y = shape.screen_coordinates[0]
    canvas.draw_text(shape.name, font, "black", (float(x), float(y)))


def _paint_geo_feature(shape: GeoFeature, canvas: Canvas, config: RenderConfig) -> None:
    if shape.is_polygon:
        canvas.fill_polygon(shape.color, shape.screen_coordinates)
    else:
        canvas.stroke_line(shape.color, _THIN, shape.screen_coordinates)


_PAINTERS: dict[type[Shape], Callable[..., None]] = {
    Road: _paint_road,
    Waterway: _paint_waterway,
    Railway: _paint_railway,
    Border: _paint_border,
    PopulatedPlace: _paint_populated_place,
    GeoFeature: _paint_geo_feature,
}


def paint(shape: Shape, canvas: Canvas, config: RenderConfig | None = None) -> None:
    """Paint one already-transformed shape onto ``canvas``."""
    painter = _PAINTERS.get(type(shape))
    if painter is None:
        raise TypeError(f"No painter for shape type {type(shape).__name__}")
    painter(shape, canvas, config or RenderConfig())
