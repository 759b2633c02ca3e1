"""OpenStreetMap tag vocabularies read by the classifier.

Every keyed vocabulary carries two sentinels: ``UNSET`` when the tag is absent
or empty, ``OTHER`` when the tag is present with a value outside the list.
"""

from __future__ import annotations

import enum
from typing import TypeVar


class Highway(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    MOTORWAY = "motorway"
    TRUNK = "trunk"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    UNCLASSIFIED = "unclassified"
    RESIDENTIAL = "residential"
    ROAD = "road"


class Water(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    RIVER = "river"
    STREAM = "stream"
    CANAL = "canal"
    DITCH = "ditch"
    DRAIN = "drain"
    RIVERBANK = "riverbank"
    LAKE = "lake"
    POND = "pond"
    RESERVOIR = "reservoir"
    BASIN = "basin"
    LAGOON = "lagoon"


class Railway(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    RAIL = "rail"
    LIGHT_RAIL = "light_rail"
    SUBWAY = "subway"
    TRAM = "tram"
    NARROW_GAUGE = "narrow_gauge"
    ABANDONED = "abandoned"
    DISUSED = "disused"


class Natural(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    FELL = "fell"
    GRASSLAND = "grassland"
    HEATH = "heath"
    MOOR = "moor"
    SCRUB = "scrub"
    WETLAND = "wetland"
    WOOD = "wood"
    TREE_ROW = "tree_row"
    BARE_ROCK = "bare_rock"
    ROCK = "rock"
    SCREE = "scree"
    BEACH = "beach"
    SAND = "sand"
    WATER = "water"
    GLACIER = "glacier"
    CLIFF = "cliff"


class Landuse(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    FOREST = "forest"
    ORCHARD = "orchard"
    RESIDENTIAL = "residential"
    CEMETERY = "cemetery"
    INDUSTRIAL = "industrial"
    COMMERCIAL = "commercial"
    SQUARE = "square"
    CONSTRUCTION = "construction"
    MILITARY = "military"
    QUARRY = "quarry"
    BROWNFIELD = "brownfield"
    FARM = "farm"
    MEADOW = "meadow"
    GRASS = "grass"
    GREENFIELD = "greenfield"
    RECREATION_GROUND = "recreation_ground"
    WINTER_SPORTS = "winter_sports"
    ALLOTMENTS = "allotments"
    RESERVOIR = "reservoir"
    BASIN = "basin"


class Boundary(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    ADMINISTRATIVE = "administrative"
    FOREST = "forest"


class AdminLevel(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    LEVEL_2 = "2"
    LEVEL_3 = "3"
    LEVEL_4 = "4"
    LEVEL_5 = "5"
    LEVEL_6 = "6"
    LEVEL_7 = "7"
    LEVEL_8 = "8"
    LEVEL_9 = "9"
    LEVEL_10 = "10"


class Place(str, enum.Enum):
    UNSET = "unset"
    OTHER = "other"
    CITY = "city"
    TOWN = "town"
    VILLAGE = "village"
    HAMLET = "hamlet"
    LOCALITY = "locality"
    SUBURB = "suburb"


_E = TypeVar("_E", bound=enum.Enum)


def coerce_tag(vocabulary: type[_E], raw: object) -> _E:
    """Map a raw tag value onto ``vocabulary``, falling back to UNSET/OTHER."""
    if isinstance(raw, vocabulary):
        return raw
    if raw is None:
        return vocabulary["UNSET"]
    text = str(raw).strip().lower()
    if not text:
        return vocabulary["UNSET"]
    try:
        return vocabulary(text)
    except ValueError:
        return vocabulary["OTHER"]
