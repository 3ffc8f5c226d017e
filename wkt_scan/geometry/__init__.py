"""Geometry value types for wkt-scan."""

from .types import (
    Coordinate,
    DimensionOption,
    Geometry,
    Point,
    MultiPoint,
    LineString,
    Polygon,
    MultiPolygon,
)

__all__ = [
    "Coordinate",
    "DimensionOption",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "Polygon",
    "MultiPolygon",
]
