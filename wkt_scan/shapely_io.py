"""Shapely conversion for parsed wkt-scan geometries."""

from typing import List, Sequence, Tuple

from shapely import geometry as sg
from shapely.geometry.base import BaseGeometry

from .geometry import (
    Coordinate,
    Geometry,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


def coords_to_tuples(coords: Sequence[Coordinate], with_z: bool) -> List[Tuple[float, ...]]:
    """Convert coordinates to plain tuples.

    Shapely has no measure channel, so M is always dropped.
    """
    if with_z:
        return [(c.x, c.y, c.z) for c in coords]
    return [(c.x, c.y) for c in coords]


def _rings_to_shapely(rings, with_z: bool) -> sg.Polygon:
    if not rings:
        return sg.Polygon()
    shell = coords_to_tuples(rings[0], with_z)
    holes = [coords_to_tuples(r, with_z) for r in rings[1:]]
    return sg.Polygon(shell, holes)


def to_shapely(geom: Geometry) -> BaseGeometry:
    """Convert a parsed geometry into its shapely equivalent.

    Args:
        geom: Any of the five wkt-scan geometry variants

    Returns:
        The matching shapely geometry, 3D when the geometry declares Z
    """
    if not isinstance(geom, Geometry):
        raise TypeError(f"cannot convert {type(geom).__name__} to shapely")
    with_z = geom.is_3d

    if isinstance(geom, Point):
        return sg.Point(*coords_to_tuples([geom.coord], with_z)[0])
    elif isinstance(geom, MultiPoint):
        return sg.MultiPoint(coords_to_tuples(geom.coords, with_z))
    elif isinstance(geom, LineString):
        return sg.LineString(coords_to_tuples(geom.coords, with_z))
    elif isinstance(geom, Polygon):
        return _rings_to_shapely(geom.rings, with_z)
    elif isinstance(geom, MultiPolygon):
        return sg.MultiPolygon([_rings_to_shapely(rings, with_z) for rings in geom.polygons])

    raise TypeError(f"unsupported geometry {type(geom).__name__}")
