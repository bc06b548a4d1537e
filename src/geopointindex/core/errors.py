"""
Exception types raised by the index.

Both concrete errors subclass `ValueError` so callers that already guard numeric
input with `except ValueError` keep working.
"""

from __future__ import annotations


class GeoIndexError(Exception):
    """Base class for all errors raised by geopointindex."""


class InvalidCoordinate(GeoIndexError, ValueError):
    """A latitude/longitude was NaN, out of range, or not a number."""


class InvalidDimension(GeoIndexError, ValueError):
    """An axis index outside {0, 1, 2} was requested (internal programming error)."""
