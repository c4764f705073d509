import pytest

from brush3d.geom import Pt, Plane
from brush3d.predicates import is_in_hull, plane_intersection, signed_distance

from brushes import X, Y, Z, cube


# =============================================================================
# plane_intersection
# =============================================================================

@pytest.mark.parametrize(
    "dx, dy, dz",
    [
        (0.0, 0.0, 0.0),
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
    ],
)
def test_axis_planes_intersect_at_distances(dx, dy, dz):
    p = plane_intersection(Plane(X, dx), Plane(Y, dy), Plane(Z, dz))
    assert p == Pt(dx, dy, dz)


def test_parallel_planes_have_no_intersection():
    assert plane_intersection(Plane(X, 0.0), Plane(X, 0.0), Plane(Z, 0.0)) is None
    assert plane_intersection(Plane(X, 0.0), Plane(X, 1.0), Plane(Z, 0.0)) is None


def test_planes_sharing_a_line_have_no_intersection():
    # all three normals lie in the XY plane -> common line along Z
    diag = Plane(Pt(0.6, 0.8, 0.0), 0.0)
    assert plane_intersection(Plane(X, 0.0), Plane(Y, 0.0), diag) is None


def test_intersection_lies_on_all_three_planes():
    a = Plane.from_point((1.0, 2.0, 0.5), (0.3, 0.1, -0.2))
    b = Plane.from_point((-0.4, 1.0, 2.0), (1.0, 0.0, 0.0))
    c = Plane.from_point((0.0, -1.0, 1.0), (0.0, 2.0, 1.0))
    p = plane_intersection(a, b, c)
    assert p is not None
    for plane in (a, b, c):
        assert signed_distance(plane, p) == pytest.approx(0.0, abs=1e-12)


def test_intersection_does_not_depend_on_plane_order():
    a, b, c = Plane(X, 1.0), Plane(Y, 2.0), Plane(Z, 3.0)
    assert plane_intersection(a, b, c) == plane_intersection(c, a, b) == Pt(1.0, 2.0, 3.0)


# =============================================================================
# is_in_hull
# =============================================================================

def test_point_on_plane_is_inside():
    planes = cube()
    assert is_in_hull(planes, Pt(0.5, 0.0, 0.0))
    assert is_in_hull(planes, Pt(0.5, 0.5, 0.5))
    assert is_in_hull(planes, Pt(-0.5, -0.5, -0.5))


def test_point_beyond_any_plane_is_outside():
    planes = cube()
    assert is_in_hull(planes, Pt(0.0, 0.0, 0.0))
    assert not is_in_hull(planes, Pt(0.5000001, 0.0, 0.0))
    assert not is_in_hull(planes, Pt(0.0, -0.75, 0.0))
    assert not is_in_hull(planes, Pt(0.0, 0.0, 10.0))


def test_exact_comparison_rejects_smallest_excess():
    planes = [Plane(X, 0.5)]
    assert not is_in_hull(planes, Pt(0.5 + 1e-15, 0.0, 0.0))


def test_eps_tolerates_small_excess_only():
    planes = [Plane(X, 0.5)]
    assert is_in_hull(planes, Pt(0.5 + 1e-12, 0.0, 0.0), eps=1e-9)
    assert not is_in_hull(planes, Pt(0.5 + 1e-6, 0.0, 0.0), eps=1e-9)


def test_empty_plane_list_contains_everything():
    assert is_in_hull([], Pt(1e9, -1e9, 0.0))


# =============================================================================
# signed_distance / Plane helpers
# =============================================================================

def test_signed_distance_sign():
    plane = Plane(X, 0.5)
    assert signed_distance(plane, Pt(1.0, 0.0, 0.0)) == pytest.approx(0.5)
    assert signed_distance(plane, Pt(0.0, 3.0, 0.0)) == pytest.approx(-0.5)


def test_plane_from_point_normalizes():
    plane = Plane.from_point((0.0, 0.0, 2.0), (5.0, 5.0, 1.5))
    assert plane.normal == Pt(0.0, 0.0, 1.0)
    assert plane.distance == pytest.approx(1.5)


def test_flipped_plane_is_complementary():
    plane = Plane(X, 0.5)
    flipped = plane.flipped()
    assert flipped.normal == Pt(-1.0, 0.0, 0.0)
    assert flipped.distance == -0.5
    p = Pt(0.7, 0.0, 0.0)
    assert signed_distance(plane, p) == pytest.approx(-signed_distance(flipped, p))
