"""Tests for the category registry."""

import numpy as np
import pytest

import tilerender.engine.categories  # noqa: F401
from tilerender.engine.registry import CategoryRegistry, CategorySpec, category, get_registry
from tilerender.engine.shapes import Border, Road
from tests.conftest import line


def _always(feature) -> bool:
    return True


def _never(feature) -> bool:
    return False


def _road(feature, points):
    return Road(screen_coordinates=points)


def _border(feature, points):
    return Border(screen_coordinates=points)


def test_register_and_get():
    reg = CategoryRegistry()
    spec = CategorySpec(id="road", rank=1, predicate=_always, build=_road)
    reg.register(spec)
    assert reg.get("road") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="road", rank=1, predicate=_always, build=_road))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(CategorySpec(id="road", rank=2, predicate=_always, build=_road))


def test_duplicate_rank_rejected():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="road", rank=1, predicate=_always, build=_road))
    with pytest.raises(ValueError, match="rank"):
        reg.register(CategorySpec(id="border", rank=1, predicate=_always, build=_border))


def test_ordered_by_rank_not_registration():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="late", rank=9, predicate=_always, build=_road))
    reg.register(CategorySpec(id="early", rank=2, predicate=_always, build=_road))
    assert [s.id for s in reg.ordered()] == ["early", "late"]


def test_first_match_wins():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="border", rank=2, predicate=_always, build=_border))
    reg.register(CategorySpec(id="road", rank=1, predicate=_always, build=_road))
    reg.register(CategorySpec(id="never", rank=0, predicate=_never, build=_road))
    assert reg.match(line([(0.0, 0.0), (1.0, 1.0)], {})).id == "road"


def test_no_match_returns_none():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="never", rank=1, predicate=_never, build=_road))
    assert reg.match(line([(0.0, 0.0), (1.0, 1.0)], {})) is None


def test_decorator_targets_given_registry():
    reg = CategoryRegistry()

    @category(id="road", rank=1, when=_always, registry=reg)
    def build(feature, points):
        return Road(screen_coordinates=points)

    spec = reg.get("road")
    assert spec.build is build
    shape = spec.build(None, np.zeros((2, 2)))
    assert isinstance(shape, Road)


def test_default_categories_in_priority_order():
    ids = [s.id for s in get_registry().ordered()]
    assert ids == [
        "road",
        "waterway",
        "border",
        "populated_place",
        "railway",
        "natural",
        "boundary_forest",
        "landuse_forest",
        "landuse_residential",
        "landuse_plain",
        "landuse_water",
        "building",
        "leisure",
        "amenity",
    ]


def test_ordered_tracks_later_registrations():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="late", rank=9, predicate=_always, build=_road))
    assert [s.id for s in reg.ordered()] == ["late"]
    reg.register(CategorySpec(id="early", rank=2, predicate=_always, build=_border))
    assert [s.id for s in reg.ordered()] == ["early", "late"]
    assert reg.match(line([(0.0, 0.0), (1.0, 1.0)], {})).id == "early"


def test_ordered_returns_a_copy():
    reg = CategoryRegistry()
    reg.register(CategorySpec(id="road", rank=1, predicate=_always, build=_road))
    reg.ordered().clear()
    assert reg.match(line([(0.0, 0.0), (1.0, 1.0)], {})).id == "road"
