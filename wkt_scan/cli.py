"""Command-line interface for wkt-scan."""

import sys
import time
from typing import Optional

import click

from . import __version__
from .errors import WKTError
from .geometry import Geometry, LineString, MultiPoint, MultiPolygon, Point, Polygon
from .scanner import DIMENSION_SUFFIXES, GEOMETRY_TYPES, parse, parse_all
from .shapely_io import to_shapely


def read_wkt(path: Optional[str] = None) -> bytes:
    """Read raw WKT from file or stdin.

    Args:
        path: File path, or None to read from stdin

    Returns:
        Input content as bytes
    """
    if path is None or path == '-':
        return sys.stdin.buffer.read()
    else:
        with open(path, 'rb') as f:
            return f.read()


def _count(n: int, noun: str) -> str:
    return f"{n} {noun}" if n == 1 else f"{n} {noun}s"


def bounds(geom: Geometry) -> str:
    """Bounding box as 'minx miny maxx maxy', computed by shapely."""
    minx, miny, maxx, maxy = to_shapely(geom).bounds
    return f"{minx} {miny} {maxx} {maxy}"


def describe(geom: Geometry) -> str:
    """One-line summary of a geometry: type, dimensions and sizes."""
    name = type(geom).__name__
    if geom.dim:
        name = f"{name} {geom.dim.name}"

    if isinstance(geom, Point):
        c = geom.coord
        return f"{name}: ({c.x} {c.y} {c.z} {c.m})"
    elif isinstance(geom, (MultiPoint, LineString)):
        return f"{name}: {_count(len(geom.coords), 'coordinate')}"
    elif isinstance(geom, Polygon):
        return f"{name}: {_count(len(geom.rings), 'ring')}, {_count(len(geom.holes), 'hole')}"
    elif isinstance(geom, MultiPolygon):
        rings = sum(len(p) for p in geom.polygons)
        return f"{name}: {_count(len(geom.polygons), 'polygon')}, {_count(rings, 'ring')}"

    return name


@click.group()
@click.version_option(version=__version__)
def main():
    """wkt-scan: Well-Known Text geometry parser.

    Parse POINT, MULTIPOINT, LINESTRING, POLYGON and MULTIPOLYGON text,
    with optional Z, M or ZM coordinates.

    Examples:

        wkt-scan parse shape.wkt

        echo 'POINT(1 2)' | wkt-scan parse

        wkt-scan compare 'MULTIPOINT(1 2, 3 4)' 'MULTIPOINT((1 2), (3 4))'
    """
    pass


@main.command('parse')
@click.argument('input', default='-', required=False)
@click.option('--bounds', 'show_bounds', is_flag=True,
              help='Also print each bounding box (via shapely)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def parse_cmd(input, show_bounds, verbose):
    """Parse WKT geometries and print a summary of each.

    INPUT: WKT file path, or - for stdin (default)

    The input may hold several geometries separated by whitespace or
    newlines; each one gets its own summary line.
    """
    start_time = time.time()

    try:
        data = read_wkt(input if input != '-' else None)
    except OSError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(data)} bytes", err=True)

    count = 0
    try:
        for geom in parse_all(data):
            count += 1
            click.echo(describe(geom))
            if show_bounds:
                click.echo(f"  bounds: {bounds(geom)}")
    except WKTError as e:
        click.echo(f"Error parsing input: {e}", err=True)
        sys.exit(1)

    if count == 0:
        click.echo("No geometries found in input", err=True)
        sys.exit(1)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Parsed {count} geometries", err=True)
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
@click.argument('first')
@click.argument('second')
def compare(first, second):
    """Check two WKT geometries for structural equality.

    Exits 0 when equal, 1 when not, 2 when either fails to parse.
    """
    try:
        a = parse(first)
        b = parse(second)
    except WKTError as e:
        click.echo(f"Error parsing input: {e}", err=True)
        sys.exit(2)

    if a == b:
        click.echo("equal")
        return
    click.echo("not equal")
    sys.exit(1)


@main.command()
def types():
    """List supported geometry keywords and dimension suffixes."""
    click.echo("Geometry types:")
    click.echo()
    for keyword in GEOMETRY_TYPES:
        click.echo(f"  {keyword}")
    click.echo()
    click.echo(f"Dimension suffixes: {', '.join(DIMENSION_SUFFIXES)}")
    click.echo()
    click.echo("Use: echo 'POINT ZM(1 2 3 4)' | wkt-scan parse")


if __name__ == '__main__':
    main()
