"""Tests for the bounding box accumulator and the draw-order queue."""

import math

import numpy as np
import pytest

from tilerender.engine.bounds import BoundingBox
from tilerender.engine.queue import DrawQueue
from tilerender.engine.shapes import Border, GeoFeature, GeoFeatureKind, PopulatedPlace, Road, Waterway


def test_new_box_is_empty_sentinel():
    box = BoundingBox()
    assert box.is_empty
    assert box.is_degenerate
    assert box.min_x == math.inf
    assert box.max_x == -math.inf
    assert box.width == 0.0


def test_include_folds_min_max():
    box = BoundingBox()
    box.include(np.array([[1.0, 5.0], [3.0, -2.0]]))
    box.include(np.array([[-4.0, 0.0]]))
    assert box.as_tuple() == (-4.0, -2.0, 3.0, 5.0)
    assert box.width == 7.0
    assert box.height == 7.0
    assert not box.is_degenerate


def test_include_empty_array_is_noop():
    box = BoundingBox()
    box.include(np.empty((0, 2)))
    assert box.is_empty


def test_single_point_is_degenerate_but_not_empty():
    box = BoundingBox()
    box.include(np.array([[2.0, 2.0]]))
    assert not box.is_empty
    assert box.is_degenerate


def test_flat_in_one_axis_is_degenerate():
    box = BoundingBox()
    box.include(np.array([[0.0, 1.0], [10.0, 1.0]]))
    assert box.is_degenerate


def test_merge_unions_boxes():
    a = BoundingBox()
    a.include(np.array([[0.0, 0.0], [1.0, 1.0]]))
    b = BoundingBox()
    b.include(np.array([[5.0, -3.0]]))
    a.merge(b)
    assert a.as_tuple() == (0.0, -3.0, 5.0, 1.0)


def test_merge_with_empty_keeps_box():
    a = BoundingBox()
    a.include(np.array([[0.0, 0.0], [1.0, 1.0]]))
    a.merge(BoundingBox())
    assert a.as_tuple() == (0.0, 0.0, 1.0, 1.0)


def test_queue_pops_by_z_index():
    q = DrawQueue()
    road = Road()
    border = Border()
    forest = GeoFeature(kind=GeoFeatureKind.FOREST)
    place = PopulatedPlace()
    for shape in (place, road, forest, border):
        q.push(shape)
    assert [s.z_index for s in q.drain()] == [11, 30, 50, 60]
    assert len(q) == 0


def test_queue_ties_keep_insertion_order():
    q = DrawQueue()
    first, second, third = Road(), Road(), Road()
    q.push(second)
    q.push(first)
    q.push(third)
    assert list(q.drain()) == [second, first, third]


def test_water_area_and_waterway_share_priority():
    q = DrawQueue()
    area = GeoFeature(kind=GeoFeatureKind.WATER)
    river = Waterway()
    q.push(river)
    q.push(area)
    assert list(q.drain()) == [river, area]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        DrawQueue().pop()


def test_merge_orders_other_after_self_on_ties():
    a, b = DrawQueue(), DrawQueue()
    a1, a2 = Road(), Road()
    b1, b2 = Road(), Border()
    a.push(a1)
    b.push(b1)
    b.push(b2)
    a.push(a2)
    a.merge(b)
    assert len(b) == 0
    assert list(a.drain()) == [b2, a1, a2, b1]
