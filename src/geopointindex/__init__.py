"""
Read-only spatial index over latitude/longitude points with great-circle distance queries.
"""

from geopointindex.core.errors import GeoIndexError, InvalidCoordinate, InvalidDimension
from geopointindex.index import GeoPointIndex

__all__ = ["GeoIndexError", "GeoPointIndex", "InvalidCoordinate", "InvalidDimension"]
