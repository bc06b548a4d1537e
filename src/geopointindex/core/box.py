"""
Axis-aligned x/y/z boxes used to prune the k-d tree.

A box built around a search point is a cube, not a sphere, so it always lets
through some points that are too far away; the index drops those afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from geopointindex.core.geo import EARTH_RADIUS_M, CartesianPoint


@dataclass(frozen=True)
class CartesianBox:
    """An axis-aligned x/y/z range; `contains` is inclusive on every boundary."""

    lower: CartesianPoint
    upper: CartesianPoint

    @classmethod
    def distance_around(cls, point: CartesianPoint, distance_m: float) -> "CartesianBox":
        """Expand `point` by `distance_m` on all sides.

        The result is a cube that over-approximates the spherical cap, so callers
        must re-check candidates with an exact distance.
        """
        d = distance_m / EARTH_RADIUS_M
        return cls(
            lower=CartesianPoint(x=point.x - d, y=point.y - d, z=point.z - d),
            upper=CartesianPoint(x=point.x + d, y=point.y + d, z=point.z + d),
        )

    def contains(self, point: CartesianPoint) -> bool:
        return (
            self.lower.x <= point.x <= self.upper.x
            and self.lower.y <= point.y <= self.upper.y
            and self.lower.z <= point.z <= self.upper.z
        )
