"""Default feature categories, registered on import in priority order.

Earlier ranks pre-empt later ones: a line tagged both highway=primary and
waterway=river is a Road.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from tilerender.engine.registry import category
from tilerender.engine.shapes import (
    Border,
    GeoFeature,
    GeoFeatureKind,
    PopulatedPlace,
    Railway,
    Road,
    Waterway,
    kind_for_natural,
)
from tilerender.models.feature import MapFeature
from tilerender.models.tags import AdminLevel, Boundary, Highway, Landuse, Natural, Place, Water
from tilerender.models.tags import Railway as RailwayTag

_NOT_ROADS = frozenset({Highway.UNSET, Highway.OTHER})

_PLACES = frozenset({Place.CITY, Place.TOWN, Place.LOCALITY, Place.HAMLET})

_LANDUSE_FOREST = frozenset({Landuse.FOREST, Landuse.ORCHARD})

_LANDUSE_RESIDENTIAL = frozenset({
    Landuse.RESIDENTIAL,
    Landuse.CEMETERY,
    Landuse.INDUSTRIAL,
    Landuse.COMMERCIAL,
    Landuse.SQUARE,
    Landuse.CONSTRUCTION,
    Landuse.MILITARY,
    Landuse.QUARRY,
    Landuse.BROWNFIELD,
})

_LANDUSE_PLAIN = frozenset({
    Landuse.FARM,
    Landuse.MEADOW,
    Landuse.GRASS,
    Landuse.GREENFIELD,
    Landuse.RECREATION_GROUND,
    Landuse.WINTER_SPORTS,
    Landuse.ALLOTMENTS,
})

_LANDUSE_WATER = frozenset({Landuse.RESERVOIR, Landuse.BASIN})


# ── Predicates ──


def is_road(feature: MapFeature) -> bool:
    return feature.properties.highway not in _NOT_ROADS


def is_waterway(feature: MapFeature) -> bool:
    return feature.properties.water != Water.UNSET and not feature.is_point


def is_border(feature: MapFeature) -> bool:
    props = feature.properties
    return props.boundary == Boundary.ADMINISTRATIVE and props.admin_level == AdminLevel.LEVEL_2


def is_populated_place(feature: MapFeature) -> bool:
    # https://wiki.openstreetmap.org/wiki/Key:place
    return feature.is_point and feature.properties.place in _PLACES


def is_railway(feature: MapFeature) -> bool:
    return feature.properties.railway != RailwayTag.UNSET


def is_natural(feature: MapFeature) -> bool:
    return feature.is_polygon and feature.properties.natural != Natural.UNSET


def is_boundary_forest(feature: MapFeature) -> bool:
    return feature.properties.boundary == Boundary.FOREST


def is_landuse_forest(feature: MapFeature) -> bool:
    return feature.properties.landuse in _LANDUSE_FOREST


def is_landuse_residential(feature: MapFeature) -> bool:
    return feature.is_polygon and feature.properties.landuse in _LANDUSE_RESIDENTIAL


def is_landuse_plain(feature: MapFeature) -> bool:
    return feature.properties.landuse in _LANDUSE_PLAIN


def is_landuse_water(feature: MapFeature) -> bool:
    return feature.properties.landuse in _LANDUSE_WATER


def is_building(feature: MapFeature) -> bool:
    return feature.is_polygon and feature.properties.building is not None


def is_leisure(feature: MapFeature) -> bool:
    return feature.is_polygon and feature.properties.leisure is not None


def is_amenity(feature: MapFeature) -> bool:
    return feature.is_polygon and feature.properties.amenity is not None


# ── Builders ──


@category(id="road", rank=1, when=is_road, description="Highway of a known class")
def build_road(feature: MapFeature, points: NDArray[np.float64]) -> Road:
    return Road(screen_coordinates=points)


@category(id="waterway", rank=2, when=is_waterway, description="River, canal or water body")
def build_waterway(feature: MapFeature, points: NDArray[np.float64]) -> Waterway:
    return Waterway(screen_coordinates=points, is_polygon=feature.is_polygon)


@category(id="border", rank=3, when=is_border, description="Country-level boundary")
def build_border(feature: MapFeature, points: NDArray[np.float64]) -> Border:
    return Border(screen_coordinates=points)


@category(id="populated_place", rank=4, when=is_populated_place, description="City, town, locality or hamlet")
def build_populated_place(feature: MapFeature, points: NDArray[np.float64]) -> PopulatedPlace:
    if not feature.label:
        return PopulatedPlace(screen_coordinates=points, name="Unknown", should_render=False)
    name = feature.properties.name
    if name is None or not name.strip():
        name = feature.label
    return PopulatedPlace(screen_coordinates=points, name=name, should_render=True)


@category(id="railway", rank=5, when=is_railway, description="Any railway tag")
def build_railway(feature: MapFeature, points: NDArray[np.float64]) -> Railway:
    return Railway(screen_coordinates=points)


@category(id="natural", rank=6, when=is_natural, description="Natural area, sub-classified by kind")
def build_natural(feature: MapFeature, points: NDArray[np.float64]) -> GeoFeature:
    return GeoFeature(
        screen_coordinates=points,
        is_polygon=feature.is_polygon,
        kind=kind_for_natural(feature.properties.natural),
    )


def _area(kind: GeoFeatureKind):
    def build(feature: MapFeature, points: NDArray[np.float64]) -> GeoFeature:
        return GeoFeature(screen_coordinates=points, is_polygon=True, kind=kind)

    build.__name__ = f"build_{kind.value}_area"
    return build


category(id="boundary_forest", rank=7, when=is_boundary_forest)(_area(GeoFeatureKind.FOREST))
category(id="landuse_forest", rank=8, when=is_landuse_forest)(_area(GeoFeatureKind.FOREST))
category(id="landuse_residential", rank=9, when=is_landuse_residential)(_area(GeoFeatureKind.RESIDENTIAL))
category(id="landuse_plain", rank=10, when=is_landuse_plain)(_area(GeoFeatureKind.PLAIN))
category(id="landuse_water", rank=11, when=is_landuse_water)(_area(GeoFeatureKind.WATER))
category(id="building", rank=12, when=is_building)(_area(GeoFeatureKind.RESIDENTIAL))
category(id="leisure", rank=13, when=is_leisure)(_area(GeoFeatureKind.RESIDENTIAL))
category(id="amenity", rank=14, when=is_amenity)(_area(GeoFeatureKind.RESIDENTIAL))
