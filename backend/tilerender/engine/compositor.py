"""Compositor — normalize every shape into pixel space and paint back to front."""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from tilerender.engine.bounds import BoundingBox
from tilerender.engine.config import RenderConfig
from tilerender.engine.painter import Canvas, paint
from tilerender.engine.queue import DrawQueue
from tilerender.errors import PaintError

logger = logging.getLogger(__name__)


def compute_scale(bounds: BoundingBox, width: int, height: int) -> float | None:
    """Uniform scale that fits ``bounds`` inside width × height.

    A box flat in one axis (a lone east-west road) scales by the other axis.
    Returns None when the box is empty or collapses to a single point.
    """
    if bounds.is_empty:
        return None
    scales = [
        size / span
        for size, span in ((width, bounds.width), (height, bounds.height))
        if math.isfinite(span) and span > 0.0
    ]
    if not scales:
        return None
    return min(scales)


def to_screen(
    points: NDArray[np.float64],
    min_x: float,
    min_y: float,
    scale: float,
    height: float,
) -> NDArray[np.float64]:
    """Translate, scale and flip Y (north is up, raster rows grow downward)."""
    out = np.empty_like(points)
    out[:, 0] = (points[:, 0] - min_x) * scale
    out[:, 1] = height - (points[:, 1] - min_y) * scale
    return out


def composite(
    queue: DrawQueue,
    bounds: BoundingBox,
    width: int,
    height: int,
    config: RenderConfig | None = None,
) -> Image.Image:
    """Drain ``queue`` in paint order onto a fresh width × height canvas."""
    config = config or RenderConfig(width=width, height=height)
    canvas = Canvas(width, height, config.background)

    scale = compute_scale(bounds, width, height)
    if scale is None:
        dropped = len(queue)
        for _ in queue.drain():
            pass
        logger.warning(
            "No scale for bounds %s; rendering background only (%d shapes skipped)",
            bounds.as_tuple(),
            dropped,
        )
        return canvas.image

    painted = 0
    for shape in queue.drain():
        coords = shape.screen_coordinates
        if len(coords):
            coords[:] = to_screen(coords, bounds.min_x, bounds.min_y, scale, height)
        try:
            paint(shape, canvas, config)
        except PaintError:
            logger.error("Paint failed on %s", type(shape).__name__)
            raise
        except Exception as e:
            logger.error("Paint failed on %s: %s", type(shape).__name__, e)
            raise PaintError(type(shape).__name__, str(e)) from e
        painted += 1

    logger.debug("Composited %d shapes at scale %.6g", painted, scale)
    return canvas.image
