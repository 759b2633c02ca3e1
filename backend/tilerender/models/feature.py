"""Tagged map feature — the read-only input to classification."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from tilerender.models.tags import (
    AdminLevel,
    Boundary,
    Highway,
    Landuse,
    Natural,
    Place,
    Railway,
    Water,
    coerce_tag,
)


class GeometryType(str, enum.Enum):
    POINT = "point"
    LINE = "line"
    POLYGON = "polygon"


_KEYED_TAGS: dict[str, type[enum.Enum]] = {
    "highway": Highway,
    "water": Water,
    "railway": Railway,
    "natural": Natural,
    "landuse": Landuse,
    "boundary": Boundary,
    "admin_level": AdminLevel,
    "place": Place,
}

# Presence-only keys: any non-empty value counts.
_PRESENCE_TAGS = ("building", "leisure", "amenity")


class FeatureProperties(BaseModel):
    """Sparse attribute bag. Absent keys hold their UNSET sentinel."""

    highway: Highway = Highway.UNSET
    water: Water = Water.UNSET
    railway: Railway = Railway.UNSET
    natural: Natural = Natural.UNSET
    landuse: Landuse = Landuse.UNSET
    boundary: Boundary = Boundary.UNSET
    admin_level: AdminLevel = AdminLevel.UNSET
    place: Place = Place.UNSET
    building: str | None = None
    leisure: str | None = None
    amenity: str | None = None
    name: str | None = None

    model_config = {"frozen": True}

    @field_validator(*_KEYED_TAGS, mode="before")
    @classmethod
    def _coerce_keyed(cls, value: Any, info) -> enum.Enum:
        return coerce_tag(_KEYED_TAGS[info.field_name], value)

    @field_validator(*_PRESENCE_TAGS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if value is None:
            return None
        text = str(value).strip()
        if not text or text.lower() == "no":
            return None
        return text


class MapFeature(BaseModel):
    """One point, line or polygon with its tags, consumed once per pass."""

    geometry_type: GeometryType
    # (longitude, latitude) pairs in input order
    coordinates: list[tuple[float, float]] = Field(default_factory=list)
    properties: FeatureProperties = Field(default_factory=FeatureProperties)
    # Optional free text; a missing label is stored as ""
    label: str = ""

    model_config = {"frozen": True}

    @field_validator("label", mode="before")
    @classmethod
    def _none_label_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("coordinates")
    @classmethod
    def _check_ranges(cls, value: list[tuple[float, float]]) -> list[tuple[float, float]]:
        for lon, lat in value:
            if not -180.0 <= lon <= 180.0:
                raise ValueError(f"longitude out of range: {lon}")
            if not -90.0 <= lat <= 90.0:
                raise ValueError(f"latitude out of range: {lat}")
        return value

    @property
    def is_point(self) -> bool:
        return self.geometry_type == GeometryType.POINT

    @property
    def is_polygon(self) -> bool:
        return self.geometry_type == GeometryType.POLYGON

    @classmethod
    def from_tags(
        cls,
        geometry_type: GeometryType | str,
        coordinates: list[tuple[float, float]],
        tags: dict[str, str],
        label: str | None = "",
    ) -> MapFeature:
        """Build a feature from raw OSM tags.

        Waterway kind is read from ``waterway`` and falls back to ``water``.
        Tags the classifier never reads are ignored.
        """
        fields: dict[str, Any] = {}
        for key in _KEYED_TAGS:
            if key in tags:
                fields[key] = tags[key]
        water = tags.get("waterway") or tags.get("water")
        if water:
            fields["water"] = water
        for key in _PRESENCE_TAGS:
            if key in tags:
                fields[key] = tags[key]
        if tags.get("name"):
            fields["name"] = tags["name"]
        return cls(
            geometry_type=geometry_type,
            coordinates=coordinates,
            properties=FeatureProperties(**fields),
            label=label,
        )
