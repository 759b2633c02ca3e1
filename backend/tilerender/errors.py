"""Exceptions raised by the render pass."""

from __future__ import annotations


class TileRenderError(Exception):
    """Base class for tilerender failures."""


class PaintError(TileRenderError):
    """The drawing layer failed; the current render pass is abandoned."""

    def __init__(self, shape_name: str, reason: str) -> None:
        super().__init__(f"failed to paint {shape_name}: {reason}")
        self.shape_name = shape_name
        self.reason = reason
