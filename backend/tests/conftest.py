"""Shared test fixtures."""

from __future__ import annotations

import pytest

from tilerender.engine.classifier import Classifier
from tilerender.models.feature import GeometryType, MapFeature


class IdentityProjection:
    """x = lon, y = lat — keeps expected coordinates readable."""

    def lon_to_x(self, lon: float) -> float:
        return lon

    def lat_to_y(self, lat: float) -> float:
        return lat


SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]
DIAGONAL = [(0.0, 0.0), (5.0, 5.0), (10.0, 10.0)]


def point(lon: float, lat: float, tags: dict[str, str], label: str = "") -> MapFeature:
    return MapFeature.from_tags(GeometryType.POINT, [(lon, lat)], tags, label=label)


def line(coords: list[tuple[float, float]], tags: dict[str, str]) -> MapFeature:
    return MapFeature.from_tags(GeometryType.LINE, coords, tags)


def polygon(coords: list[tuple[float, float]], tags: dict[str, str]) -> MapFeature:
    return MapFeature.from_tags(GeometryType.POLYGON, coords, tags)


# A small tile: woodland, a town, a river, a railway and a road on top.
def sample_tile() -> list[MapFeature]:
    return [
        polygon(SQUARE, {"natural": "wood"}),
        point(5.0, 5.0, {"place": "town", "name": "Springfield"}, label="Springfield"),
        line([(0.0, 2.0), (10.0, 3.0)], {"waterway": "river"}),
        line([(0.0, 8.0), (10.0, 8.0)], {"railway": "rail"}),
        line(DIAGONAL, {"highway": "primary"}),
        line([(1.0, 1.0), (2.0, 2.0)], {"highway": "footway"}),
    ]


@pytest.fixture
def classifier() -> Classifier:
    return Classifier(projection=IdentityProjection())


@pytest.fixture
def tile() -> list[MapFeature]:
    return sample_tile()
