import pytest

from geopointindex.core.box import CartesianBox
from geopointindex.core.geo import EARTH_RADIUS_M, CartesianPoint, from_lat_lon


def test_distance_around_expands_by_unit_sphere_distance():
    # One earth radius is exactly one unit on the unit sphere.
    box = CartesianBox.distance_around(CartesianPoint(1, 2, 3), EARTH_RADIUS_M)
    assert box == CartesianBox(CartesianPoint(0, 1, 2), CartesianPoint(2, 3, 4))


@pytest.mark.parametrize("distance", [0, 1, 500, 100_000, 20_000_000])
def test_distance_around_contains_its_centre(distance):
    # Zero distance gives a degenerate box that still holds its own centre.
    p = from_lat_lon(51.4706, -0.461941)
    assert CartesianBox.distance_around(p, distance).contains(p)


def test_negative_distance_gives_a_box_that_contains_nothing():
    # lower ends up above upper on every axis, so no point can satisfy both bounds.
    p = from_lat_lon(10, 10)
    assert not CartesianBox.distance_around(p, -1).contains(p)


@pytest.mark.parametrize("x, y, z", [(1, 2, 3), (4, 5, 6), (3, 4, 5)])
def test_contains_is_boundary_inclusive(x, y, z):
    # Both corners and an interior point.
    box = CartesianBox(CartesianPoint(1, 2, 3), CartesianPoint(4, 5, 6))
    assert box.contains(CartesianPoint(x, y, z))


@pytest.mark.parametrize(
    "x, y, z",
    [
        # ordinate too low
        (0, 2, 3),
        (1, 1, 3),
        (1, 2, 2),
        # ordinate too high
        (5, 5, 6),
        (4, 6, 6),
        (4, 5, 7),
    ],
)
def test_contains_rejects_points_outside(x, y, z):
    box = CartesianBox(CartesianPoint(1, 2, 3), CartesianPoint(4, 5, 6))
    assert not box.contains(CartesianPoint(x, y, z))
