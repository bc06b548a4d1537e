"""
Distance queries over items located by latitude/longitude.

The approach follows PostGIS geography indexing: the query point is converted to
unit-sphere x/y/z, expanded into a 3-d box by the search distance, and the box is
used to prune a k-d tree. The box over-approximates the spherical cap, so every
candidate is re-checked with the exact great-circle distance before it is reported.
Unlike PostGIS no 1% spheroid fudge factor is applied, because only spherical
distances are ever computed.

Spherical distances differ from spheroid (WGS84 ellipsoid) ones by up to ~0.56% at
extremes. Callers needing more precision can pad the distance and re-filter.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Iterable, TypeVar

from geopointindex.core.box import CartesianBox
from geopointindex.core.geo import CartesianPoint, from_lat_lon
from geopointindex.core.kdtree import KDTree

T = TypeVar("T")

logger = logging.getLogger(__name__)


class GeoPointIndex(Generic[T]):
    """Immutable spatial index answering "items within N meters of a point" queries."""

    def __init__(self, tree: KDTree[T]):
        self._tree = tree

    @classmethod
    def build_from(
        cls,
        items: Iterable[T],
        latitude_of: Callable[[T], float],
        longitude_of: Callable[[T], float],
    ) -> "GeoPointIndex[T]":
        """Index `items`, locating each via the two extractor callables.

        Each extractor is called once per item and must return decimal degrees
        (latitude in [-90, 90], longitude in [-180, 180]). Any invalid coordinate
        raises `InvalidCoordinate` and no index is produced.
        """
        if items is None:
            raise TypeError("items must not be None")
        if not callable(latitude_of):
            raise TypeError("latitude_of must be callable")
        if not callable(longitude_of):
            raise TypeError("longitude_of must be callable")

        def to_point(item: T) -> CartesianPoint:
            return from_lat_lon(latitude_of(item), longitude_of(item))

        tree = KDTree.create(items, to_point)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Built geo point index: items=%s height=%s", len(tree), tree.height)
        return cls(tree)

    def __len__(self) -> int:
        return len(self._tree)

    def query_within_distance(
        self,
        latitude: float,
        longitude: float,
        distance_m: float,
        on_found: Callable[[T, float], None],
    ) -> bool:
        """Call `on_found(item, distance_m)` for every item within `distance_m` of the point.

        Each matching item is reported exactly once, in no particular order, with its
        great-circle distance in meters. Returns True if anything was reported.
        A negative distance matches nothing.
        """
        if not callable(on_found):
            raise TypeError("on_found must be callable")

        origin = from_lat_lon(latitude, longitude)
        box = CartesianBox.distance_around(origin, distance_m)
        found = False
        candidates = 0

        def visit(item: T, point: CartesianPoint) -> None:
            nonlocal found, candidates
            candidates += 1
            d = point.distance_m(origin)
            if d <= distance_m:
                on_found(item, d)
                found = True

        self._tree.range_search(box, visit)
        logger.debug(
            "Distance query lat=%s lon=%s radius_m=%s candidates=%s found=%s",
            latitude,
            longitude,
            distance_m,
            candidates,
            found,
        )
        return found

    def query_within(self, latitude: float, longitude: float, distance_m: float) -> list[tuple[T, float]]:
        """Return `(item, distance_m)` pairs within `distance_m` of the point."""
        out: list[tuple[T, float]] = []
        self.query_within_distance(latitude, longitude, distance_m, lambda item, d: out.append((item, d)))
        return out
