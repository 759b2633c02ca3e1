"""Running axis-aligned bounding box over projected shape coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass
class BoundingBox:
    """Starts as the empty box (+inf/-inf) and grows with ``include``."""

    min_x: float = math.inf
    max_x: float = -math.inf
    min_y: float = math.inf
    max_y: float = -math.inf

    def include(self, points: NDArray[np.float64]) -> None:
        """Fold an (N, 2) array of points into the box. Empty arrays are a no-op."""
        if len(points) == 0:
            return
        self.min_x = min(self.min_x, float(np.min(points[:, 0])))
        self.max_x = max(self.max_x, float(np.max(points[:, 0])))
        self.min_y = min(self.min_y, float(np.min(points[:, 1])))
        self.max_y = max(self.max_y, float(np.max(points[:, 1])))

    def merge(self, other: BoundingBox) -> None:
        self.min_x = min(self.min_x, other.min_x)
        self.max_x = max(self.max_x, other.max_x)
        self.min_y = min(self.min_y, other.min_y)
        self.max_y = max(self.max_y, other.max_y)

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    @property
    def is_degenerate(self) -> bool:
        """True when the box is empty or flat in either axis."""
        if self.is_empty:
            return True
        spans = (self.width, self.height)
        return any(not math.isfinite(s) or s <= 0.0 for s in spans)

    def as_tuple(self) -> tuple[float, float, float, float]:
        """(xmin, ymin, xmax, ymax), matching the geometry helpers' order."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
