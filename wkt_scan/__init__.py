"""wkt-scan: a small Well-Known Text geometry parser."""

__version__ = "0.1.0"

from .scanner import parse, parse_all
from .shapely_io import to_shapely
from .errors import (
    WKTError,
    UnexpectedEndError,
    WKTSyntaxError,
    UnknownGeometryError,
    MalformedNumberError,
    StructureError,
)
from .geometry import (
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
    "parse",
    "parse_all",
    "to_shapely",
    "WKTError",
    "UnexpectedEndError",
    "WKTSyntaxError",
    "UnknownGeometryError",
    "MalformedNumberError",
    "StructureError",
    "Coordinate",
    "DimensionOption",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "Polygon",
    "MultiPolygon",
]
