import pytest

from xnakit.geometry import (
    BoundingBox,
    BoundingSphere,
    Matrix,
    Plane,
    Point,
    Quaternion,
    Ray,
    Rectangle,
    Vector2,
    Vector3,
    Vector4,
)


def test_point_zero():
    assert Point.zero() == Point()
    assert Point(3, 4).x == 3


def test_from_ltrb_round_trip():
    r = Rectangle.from_ltrb(1, 2, 7, 9)
    assert (r.left, r.top, r.right, r.bottom) == (1, 2, 7, 9)


@pytest.mark.parametrize("rect", [Rectangle(10, 20, 30, 40), Rectangle(-5, 3, 8, 2)])
def test_edges_consistent(rect):
    assert rect.right - rect.left == rect.width
    assert rect.bottom - rect.top == rect.height
    assert rect.location == Point(rect.x, rect.y)


def test_center_truncates_toward_zero():
    assert Rectangle(0, 0, -3, -3).center == Point(-1, -1)


def test_empty():
    assert Rectangle().is_empty
    assert not Rectangle(0, 0, 1, 0).is_empty


def test_offset_moves_location_only():
    r = Rectangle(1, 2, 3, 4)
    r.offset(10, 20)
    assert r.location == Point(1 + 10, 2 + 20)
    assert (r.width, r.height) == (3, 4)


def test_inflate_keeps_center_and_contains_original():
    original = Rectangle(10, 10, 6, 8)
    r = Rectangle(10, 10, 6, 8)
    r.inflate(2, 3)
    assert r.center == original.center
    assert r.contains_rectangle(original)
    assert not original.contains_rectangle(r)


def test_contains_is_half_open():
    r = Rectangle(10, 20, 30, 40)
    assert r.contains(r.left, r.top)
    assert not r.contains(r.right, r.top)
    assert not r.contains(r.left, r.bottom)
    assert r.contains(r.right - 1, r.bottom - 1)


def test_intersects_and_intersect():
    a = Rectangle(0, 0, 10, 10)
    b = Rectangle(5, 5, 10, 10)
    assert a.intersects(b) and b.intersects(a)
    inter = Rectangle.intersect(a, b)
    assert a.contains_rectangle(inter)
    assert b.contains_rectangle(inter)
    assert inter == Rectangle.intersect(b, a)


def test_intersect_disjoint_is_empty():
    a = Rectangle(0, 0, 2, 2)
    b = Rectangle(5, 5, 2, 2)
    assert not a.intersects(b)
    assert Rectangle.intersect(a, b).is_empty


def test_union_at_origin_covers_both():
    a = Rectangle(0, 0, 4, 2)
    b = Rectangle(1, 1, 5, 5)
    u = Rectangle.union(a, b)
    assert u.contains_rectangle(a)
    assert u.contains_rectangle(b)


def test_union_width_is_right_edge():
    assert Rectangle.union(Rectangle(5, 5, 1, 1), Rectangle(6, 6, 1, 1)) == Rectangle(5, 5, 7, 2)


def test_rectangle_equality():
    assert Rectangle(1, 2, 3, 4) == Rectangle(1, 2, 3, 4)
    assert Rectangle(1, 2, 3, 4) != Rectangle(1, 2, 3, 5)


def test_vector2_constants():
    assert Vector2.zero() == Vector2(0.0, 0.0)
    assert Vector2.one() == Vector2(1.0, 1.0)
    assert Vector2.unit_x() == Vector2(1.0, 0.0)
    assert Vector2.unit_y() == Vector2(0.0, 1.0)


def test_vector3_directions():
    assert Vector3.up() == Vector3.unit_y()
    assert Vector3.right() == Vector3.unit_x()
    assert Vector3.backward() == Vector3.unit_z()
    assert Vector3.down() == Vector3(0.0, -1.0, 0.0)
    assert Vector3.left() == Vector3(-1.0, 0.0, 0.0)
    assert Vector3.forward() == Vector3(0.0, 0.0, -1.0)
    assert Vector3.one() == Vector3(1.0, 1.0, 1.0)
    assert Vector3.zero() == Vector3()


def test_vector4_constants():
    assert Vector4.zero() == Vector4()
    assert Vector4.one() == Vector4(1.0, 1.0, 1.0, 1.0)
    assert Vector4.unit_x() == Vector4(1.0, 0.0, 0.0, 1.0)
    assert Vector4.unit_y() == Vector4(0.0, 1.0, 0.0, 1.0)
    assert Vector4.unit_z() == Vector4(0.0, 0.0, 1.0, 1.0)
    assert Vector4.unit_w() == Vector4(0.0, 0.0, 1.0, 1.0)


def test_vectors_are_immutable():
    v = Vector3.one()
    with pytest.raises(AttributeError):
        v.x = 2.0  # type: ignore[misc]
    assert v == Vector3(1.0, 1.0, 1.0)
    assert Vector3.one().x == 1.0


def test_composite_defaults():
    assert Ray().position == Vector3.zero()
    assert Ray(Vector3.one(), Vector3.up()).direction == Vector3.unit_y()
    assert Plane().d == 0.0
    assert BoundingSphere(Vector3.one(), 2.0).radius == 2.0
    assert BoundingBox().max == Vector3()
    assert Matrix().m44 == 0.0
    assert Quaternion(w=1.0).w == 1.0