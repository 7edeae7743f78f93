import math

import pytest

from planar_hitscan import MISS, AbstractEntity, DistancedHit, StaticPoint, scan_entities


def test_abstract_entity_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractEntity(0, 0)


def test_position_and_movement(unit_square):
    assert unit_square.position == StaticPoint(0, 0)
    snap = unit_square.position
    unit_square.move_to(2, 3)
    assert snap == StaticPoint(0, 0)
    assert (unit_square.x, unit_square.y) == (2.0, 3.0)
    unit_square.move_by(-1, 1)
    assert unit_square.position == StaticPoint(1, 4)
    unit_square.x = 10
    assert unit_square.top_left_corner() == StaticPoint(10, 4)


@pytest.mark.parametrize("x, y, w, h", [
    (0, 0, 1, 1),
    (-3.5, 2.0, 4.0, 0.5),
    (5, 5, 0, 0),
])
def test_corner_invariants(box_types, x, y, w, h):
    for cls in box_types:
        e = cls(x, y, w, h)
        tl, tr = e.top_left_corner(), e.top_right_corner()
        bl, br = e.bottom_left_corner(), e.bottom_right_corner()
        assert tl.x == bl.x <= tr.x == br.x
        assert tl.y == tr.y
        assert bl.y == br.y
        assert e.width == pytest.approx(tr.x - tl.x)
        assert e.height == pytest.approx(abs(tl.y - bl.y))
        # y grows downward: top edge has the smaller y
        assert tl.y <= bl.y


def test_centered_box_corners(box_types):
    _, centered = box_types
    e = centered(0, 0, 2, 4)
    assert e.top_left_corner() == StaticPoint(-1, -2)
    assert e.bottom_right_corner() == StaticPoint(1, 2)


def test_hit_scan_unit_square(unit_square):
    hit = unit_square.hit_scan(-1, 0.5, 2, 0.5)
    assert not hit.is_miss
    assert hit.point.x == pytest.approx(0.0)
    assert hit.point.y == pytest.approx(0.5)
    assert hit.distance == pytest.approx(1.0)
    assert hit.entity is unit_square


def test_hit_scan_miss(unit_square):
    assert unit_square.hit_scan_points(StaticPoint(2, 2), StaticPoint(3, 3)) is MISS


def test_hit_scan_points_overload(unit_square):
    a = unit_square.hit_scan(-1, 0.5, 2, 0.5)
    b = unit_square.hit_scan_points(StaticPoint(-1, 0.5), StaticPoint(2, 0.5))
    assert a.point == b.point
    assert a.distance == b.distance


def test_distance_is_euclidean_not_parametric(unit_square):
    # t at entry is 0.25 along a segment of length 8, distance is 2
    hit = unit_square.hit_scan(-2, 0.5, 6, 0.5)
    assert hit.distance == pytest.approx(2.0)

    hit = unit_square.hit_scan(-3, -3, 1, 1)
    assert hit.point.x == pytest.approx(0.0)
    assert hit.point.y == pytest.approx(0.0)
    assert hit.distance == pytest.approx(3 * math.sqrt(2))


def test_scan_from_the_other_side(unit_square):
    hit = unit_square.hit_scan(3, 0.25, -1, 0.25)
    assert hit.point.x == pytest.approx(1.0)
    assert hit.distance == pytest.approx(2.0)


def test_segment_is_bounded(unit_square):
    # Ray would hit at distance 1, but the segment stops short.
    assert unit_square.hit_scan(-1, 0.5, -0.5, 0.5).is_miss
    # Segment starting past the box, pointing away.
    assert unit_square.hit_scan(2, 0.5, 3, 0.5).is_miss


def test_segment_ending_on_boundary(unit_square):
    hit = unit_square.hit_scan(-1, 0.5, 0, 0.5)
    assert hit.distance == pytest.approx(1.0)


def test_origin_inside_hits_at_origin(unit_square):
    hit = unit_square.hit_scan(0.25, 0.75, 5, 5)
    assert hit.distance == 0.0
    assert hit.point == StaticPoint(0.25, 0.75)
    assert hit.entity is unit_square


def test_degenerate_segment(unit_square):
    inside = unit_square.hit_scan(0.5, 0.5, 0.5, 0.5)
    assert inside.distance == 0.0
    assert inside.point == StaticPoint(0.5, 0.5)
    on_edge = unit_square.hit_scan(1.0, 0.5, 1.0, 0.5)
    assert on_edge.distance == 0.0
    assert unit_square.hit_scan(4, 4, 4, 4) is MISS


def test_nan_segment_misses(unit_square):
    assert unit_square.hit_scan(math.nan, 0.5, 2, 0.5) is MISS


def test_scan_is_pure(unit_square):
    before = unit_square.position
    first = unit_square.hit_scan(-1, 0.5, 2, 0.5)
    second = unit_square.hit_scan(-1, 0.5, 2, 0.5)
    assert first.point == second.point
    assert first.distance == second.distance
    assert unit_square.position == before


def test_moving_changes_scan(unit_square):
    assert unit_square.hit_scan(-1, 0.5, 2, 0.5).distance == pytest.approx(1.0)
    unit_square.move_by(0.5, 0)
    assert unit_square.hit_scan(-1, 0.5, 2, 0.5).distance == pytest.approx(1.5)
    unit_square.move_to(0, 10)
    assert unit_square.hit_scan(-1, 0.5, 2, 0.5) is MISS


def test_hit_scan_rejects_foreign_hits(box_types):
    box, _ = box_types

    class Liar(box):
        def _intersect(self, x1, y1, x2, y2):
            return DistancedHit(StaticPoint(x1, y1), object(), 0.0)

    class WrongType(box):
        def _intersect(self, x1, y1, x2, y2):
            return None

    with pytest.raises(ValueError):
        Liar(0, 0, 1, 1).hit_scan(0, 0, 1, 1)
    with pytest.raises(TypeError):
        WrongType(0, 0, 1, 1).hit_scan(0, 0, 1, 1)


def test_scan_entities_picks_nearest(box_types):
    box, centered = box_types
    near = box(2, 0, 1, 1)
    far = box(5, 0, 1, 1)
    off = centered(0, 10, 1, 1)
    hit = scan_entities([far, off, near], StaticPoint(0, 0.5), StaticPoint(10, 0.5))
    assert hit.entity is near
    assert hit.distance == pytest.approx(2.0)


def test_scan_entities_all_miss(box_types):
    box, _ = box_types
    hit = scan_entities([box(0, 5, 1, 1)], StaticPoint(0, 0), StaticPoint(1, 0))
    assert hit is MISS
    assert scan_entities([], StaticPoint(0, 0), StaticPoint(1, 0)) is MISS


def test_scan_entities_tie_is_deterministic(box_types):
    box, _ = box_types
    a = box(1, 0, 1, 1)
    b = box(1, 0, 1, 1)
    for _ in range(3):
        assert scan_entities([a, b], StaticPoint(0, 0.5), StaticPoint(5, 0.5)).entity is a
        assert scan_entities([b, a], StaticPoint(0, 0.5), StaticPoint(5, 0.5)).entity is b


def test_huge_finite_segment_measures_euclidean_distance(unit_square):
    hit = unit_square.hit_scan(-1e308, 0.5, 1e308, 0.5)
    assert not hit.is_miss
    assert hit.point.x == pytest.approx(0.0)
    assert hit.point.y == pytest.approx(0.5)
    assert hit.distance == pytest.approx(1e308)


def test_infinite_origin_misses(unit_square):
    assert unit_square.hit_scan(-math.inf, 0.5, math.inf, 0.5) is MISS
    assert unit_square.hit_scan(0.5, math.inf, 0.5, 0.0) is MISS


def test_infinite_end_scans_as_ray(unit_square):
    hit = unit_square.hit_scan(-1, 0.5, math.inf, 0.5)
    assert hit.point == StaticPoint(0.0, 0.5)
    assert hit.distance == pytest.approx(1.0)

    hit = unit_square.hit_scan(2, 0.5, -math.inf, 0.5)
    assert hit.point == StaticPoint(1.0, 0.5)
    assert hit.distance == pytest.approx(1.0)

    assert unit_square.hit_scan(-1, 0.5, -math.inf, 0.5) is MISS
    # The finite end coordinate does not tilt the ray.
    assert unit_square.hit_scan(-1, 5.0, math.inf, 0.5) is MISS


def test_infinite_end_from_inside(unit_square):
    hit = unit_square.hit_scan(0.5, 0.5, math.inf, math.inf)
    assert hit.distance == 0.0
    assert hit.point == StaticPoint(0.5, 0.5)


def test_distance_zero_only_from_inside(unit_square):
    for x1, y1, x2, y2 in [(-2, 0.5, 2, 0.5), (-1e300, 0.5, 1e300, 0.5),
                           (0.5, -3, 0.5, 3)]:
        hit = unit_square.hit_scan(x1, y1, x2, y2)
        assert hit.distance > 0.0
