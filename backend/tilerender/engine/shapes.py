"""Drawable shape variants produced by classification.

Every shape holds projected coordinates as an (N, 2) float64 array. The array
is rewritten in place once, by the compositor's screen transform; nothing else
about a shape changes after construction.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from tilerender.models.tags import Natural


def _empty_points() -> NDArray[np.float64]:
    return np.empty((0, 2), dtype=np.float64)


class GeoFeatureKind(enum.Enum):
    PLAIN = "plain"
    HILLS = "hills"
    MOUNTAINS = "mountains"
    FOREST = "forest"
    DESERT = "desert"
    # Natural tags with no mapping. Painted magenta so they stand out.
    UNKNOWN = "unknown"
    WATER = "water"
    RESIDENTIAL = "residential"

    @property
    def z_index(self) -> int:
        return _GEO_Z_INDEX[self]

    @property
    def color(self) -> str:
        return _GEO_COLOR[self]


_GEO_Z_INDEX: dict[GeoFeatureKind, int] = {
    GeoFeatureKind.UNKNOWN: 8,
    GeoFeatureKind.DESERT: 9,
    GeoFeatureKind.PLAIN: 10,
    GeoFeatureKind.FOREST: 11,
    GeoFeatureKind.HILLS: 12,
    GeoFeatureKind.MOUNTAINS: 13,
    GeoFeatureKind.WATER: 40,
    GeoFeatureKind.RESIDENTIAL: 41,
}

_GEO_COLOR: dict[GeoFeatureKind, str] = {
    GeoFeatureKind.PLAIN: "lightgreen",
    GeoFeatureKind.HILLS: "darkgreen",
    GeoFeatureKind.MOUNTAINS: "lightgray",
    GeoFeatureKind.FOREST: "green",
    GeoFeatureKind.DESERT: "sandybrown",
    GeoFeatureKind.UNKNOWN: "magenta",
    GeoFeatureKind.WATER: "lightblue",
    GeoFeatureKind.RESIDENTIAL: "lightcoral",
}

_NATURAL_KINDS: dict[Natural, GeoFeatureKind] = {
    Natural.FELL: GeoFeatureKind.PLAIN,
    Natural.GRASSLAND: GeoFeatureKind.PLAIN,
    Natural.HEATH: GeoFeatureKind.PLAIN,
    Natural.MOOR: GeoFeatureKind.PLAIN,
    Natural.SCRUB: GeoFeatureKind.PLAIN,
    Natural.WETLAND: GeoFeatureKind.PLAIN,
    Natural.WOOD: GeoFeatureKind.FOREST,
    Natural.TREE_ROW: GeoFeatureKind.FOREST,
    Natural.BARE_ROCK: GeoFeatureKind.MOUNTAINS,
    Natural.ROCK: GeoFeatureKind.MOUNTAINS,
    Natural.SCREE: GeoFeatureKind.MOUNTAINS,
    Natural.BEACH: GeoFeatureKind.DESERT,
    Natural.SAND: GeoFeatureKind.DESERT,
    Natural.WATER: GeoFeatureKind.WATER,
}


def kind_for_natural(natural: Natural) -> GeoFeatureKind:
    """Sub-classify a natural tag. Unmapped values land on UNKNOWN."""
    return _NATURAL_KINDS.get(natural, GeoFeatureKind.UNKNOWN)


@dataclass(frozen=True, eq=False)
class Shape:
    """Common shape fields. ``z_index``: lower paints first."""

    screen_coordinates: NDArray[np.float64] = field(default_factory=_empty_points)
    is_polygon: bool = False

    Z_INDEX: ClassVar[int] = 0

    @property
    def z_index(self) -> int:
        return self.Z_INDEX

    @property
    def num_points(self) -> int:
        return len(self.screen_coordinates)


@dataclass(frozen=True, eq=False)
class Road(Shape):
    Z_INDEX: ClassVar[int] = 50


@dataclass(frozen=True, eq=False)
class Waterway(Shape):
    Z_INDEX: ClassVar[int] = 40


@dataclass(frozen=True, eq=False)
class Railway(Shape):
    Z_INDEX: ClassVar[int] = 45


@dataclass(frozen=True, eq=False)
class Border(Shape):
    Z_INDEX: ClassVar[int] = 30


@dataclass(frozen=True, eq=False)
class PopulatedPlace(Shape):
    """A labelled point. ``should_render`` is False when there is no label."""

    name: str = "Unknown"
    should_render: bool = False

    Z_INDEX: ClassVar[int] = 60


@dataclass(frozen=True, eq=False)
class GeoFeature(Shape):
    kind: GeoFeatureKind = GeoFeatureKind.UNKNOWN

    @property
    def z_index(self) -> int:
        return self.kind.z_index

    @property
    def color(self) -> str:
        return self.kind.color
