from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt

from geopointindex.core.errors import InvalidCoordinate, InvalidDimension

"""
Geospatial helpers.

Latitude/longitude pairs are mapped onto the unit sphere as x/y/z so the index can
work with axis-aligned boxes that never wrap at the antimeridian or the poles.
Distances are spherical (mean earth radius), not spheroidal.
"""

# Mean earth radius as used by WGS84 spherical approximations.
EARTH_RADIUS_M = 6_371_000.0

# Number of ordinates in a cartesian point.
DIMENSIONS = 3


@dataclass(frozen=True)
class CartesianPoint:
    """A location on the unit sphere (or an arbitrary x/y/z for box bounds)."""

    x: float
    y: float
    z: float

    @classmethod
    def from_lat_lon(cls, latitude: float, longitude: float) -> "CartesianPoint":
        return from_lat_lon(latitude, longitude)

    def distance_m(self, other: "CartesianPoint") -> float:
        return distance_m(self, other)

    def ordinate(self, dimension: int) -> float:
        return ordinate(self, dimension)


def _to_degrees(value: object, *, name: str) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinate(f"{name} is not a number: {value!r}") from exc


def from_lat_lon(latitude: float, longitude: float) -> CartesianPoint:
    """Convert decimal degrees to a cartesian point on the unit sphere.

    Anything `float()` accepts is taken, so numeric strings read from CSV rows work.
    Raises `InvalidCoordinate` when a value is not a number, latitude is outside
    [-90, 90], longitude is outside [-180, 180], or either value is NaN.
    """
    latitude = _to_degrees(latitude, name="Latitude")
    longitude = _to_degrees(longitude, name="Longitude")

    # Negated so NaN (which fails every comparison) is rejected too.
    if not (-90 <= latitude <= 90):
        raise InvalidCoordinate(f"Latitude out of range: {latitude}")
    if not (-180 <= longitude <= 180):
        raise InvalidCoordinate(f"Longitude out of range: {longitude}")

    lat = radians(latitude)
    lon = radians(longitude)
    cos_lat = cos(lat)
    return CartesianPoint(x=cos_lat * cos(lon), y=cos_lat * sin(lon), z=sin(lat))


def distance_m(a: CartesianPoint, b: CartesianPoint) -> float:
    """Compute great-circle distance in meters between two unit-sphere points."""
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    chord = sqrt(dx * dx + dy * dy + dz * dz)

    # Near-antipodal rounding can push chord/2 just past 1.
    return 2 * EARTH_RADIUS_M * asin(min(chord / 2, 1.0))


def ordinate(point: CartesianPoint, dimension: int) -> float:
    """Return x, y or z for dimension 0, 1 or 2."""
    if dimension == 0:
        return point.x
    if dimension == 1:
        return point.y
    if dimension == 2:
        return point.z
    raise InvalidDimension(f"Dimension index out of range: {dimension}")
