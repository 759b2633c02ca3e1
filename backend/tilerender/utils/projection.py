"""Geographic → planar projection. Leaf module, no engine imports."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Protocol

import numpy as np
from numpy.typing import NDArray

EARTH_RADIUS_M = 6378137.0

# Web Mercator cuts off at the latitude where the map becomes square.
MAX_LATITUDE = 85.05112878


class Projection(Protocol):
    def lon_to_x(self, lon: float) -> float: ...

    def lat_to_y(self, lat: float) -> float: ...


class MercatorProjection:
    """Spherical Mercator in metres. Y grows northward."""

    def lon_to_x(self, lon: float) -> float:
        return EARTH_RADIUS_M * math.radians(lon)

    def lat_to_y(self, lat: float) -> float:
        lat = max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))
        return EARTH_RADIUS_M * math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))


def project(
    coordinates: Sequence[tuple[float, float]],
    projection: Projection,
) -> NDArray[np.float64]:
    """Project (lon, lat) pairs to an (N, 2) array of planar (x, y)."""
    points = np.empty((len(coordinates), 2), dtype=np.float64)
    for i, (lon, lat) in enumerate(coordinates):
        points[i, 0] = projection.lon_to_x(lon)
        points[i, 1] = projection.lat_to_y(lat)
    return points
