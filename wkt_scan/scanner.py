"""Cursor and recursive-descent parser for Well-Known Text.

The grammar is small enough to scan by hand: a keyword, an optional
dimension suffix, then nested parenthesized coordinate lists. Every
routine raises the first error it meets; nothing is recovered except
the one bounded lookahead for MULTIPOINT's optional inner parentheses.
"""

import re
from typing import Iterator, List, Tuple

from .errors import (
    MalformedNumberError,
    StructureError,
    UnexpectedEndError,
    UnknownGeometryError,
    WKTError,
    WKTSyntaxError,
)
from .geometry import (
    Coordinate,
    DimensionOption,
    Geometry,
    LineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .geometry.types import Ring

WHITESPACE = b" \t\r\n"
MAX_COMPONENTS = 4
MIN_RING_SIZE = 4

_NUMBER = re.compile(rb'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')
_NUMBER_START = b"+-.0123456789"


def _show(c: bytes) -> str:
    return repr(c.decode("latin-1"))


class Cursor:
    """A read position over an immutable input buffer.

    One cursor lives for exactly one parse call.
    """

    def __init__(self, raw: bytes):
        self.raw = raw
        self.pos = 0

    def peek(self) -> bytes:
        """Return the byte at the read position without consuming it."""
        if self.pos >= len(self.raw):
            raise UnexpectedEndError()
        return self.raw[self.pos:self.pos + 1]

    def at_end(self) -> bool:
        return self.pos >= len(self.raw)

    def skip_whitespace(self):
        n = len(self.raw)
        while self.pos < n and self.raw[self.pos] in WHITESPACE:
            self.pos += 1

    def expect_open(self):
        self.skip_whitespace()
        c = self.peek()
        if c != b"(":
            raise WKTSyntaxError(f"expect '(' got {_show(c)}")
        self.pos += 1

    def expect_comma_or_close(self) -> bool:
        """Consume ',' or ')' and report whether it was a comma."""
        self.skip_whitespace()
        c = self.peek()
        comma = c == b","
        if not comma and c != b")":
            raise WKTSyntaxError(f"expect ',' or ')' got {_show(c)}")
        self.pos += 1
        return comma

    def scan_identifier(self) -> str:
        """Consume a run of ASCII letters, upper-casing as it goes.

        The first non-letter ends the run and is left in place. Nothing
        but leading whitespace is consumed when no letter is found.
        """
        self.skip_whitespace()
        c = self.peek()
        ident = bytearray()
        n = len(self.raw)
        while self.pos < n:
            b = self.raw[self.pos]
            if 0x61 <= b <= 0x7a:
                b -= 0x20
            elif not 0x41 <= b <= 0x5a:
                c = self.raw[self.pos:self.pos + 1]
                break
            ident.append(b)
            self.pos += 1
        if not ident:
            raise WKTSyntaxError(f"no identifier, got {_show(c)}")
        return ident.decode("ascii")

    def scan_number(self) -> float:
        self.skip_whitespace()
        if self.pos >= len(self.raw):
            raise UnexpectedEndError()
        match = _NUMBER.match(self.raw, self.pos)
        if match is None:
            raise MalformedNumberError(
                f"malformed number at offset {self.pos}: {_show(self.peek())}"
            )
        self.pos = match.end()
        return float(match.group())

    def scan_coordinate(self, dim: DimensionOption) -> Tuple[Coordinate, bool]:
        """Read one coordinate tuple and the delimiter that follows it.

        Returns the coordinate and whether a comma (more coordinates)
        rather than ')' ended it. Components past what ``dim`` declares
        are read, up to four in total, and dropped.
        """
        x = self.scan_number()
        y = self.scan_number()
        z = m = 0.0
        if dim.is_3d:
            z = self.scan_number()
        if dim.is_measured:
            m = self.scan_number()

        extra = dim.component_count
        while extra < MAX_COMPONENTS:
            self.skip_whitespace()
            if self.peek() not in _NUMBER_START:
                break
            self.scan_number()
            extra += 1

        return Coordinate(x, y, z, m), self.expect_comma_or_close()

    def scan_coordinate_sequence(self, dim: DimensionOption, nested_per_point: bool = False) -> List[Coordinate]:
        """Read a parenthesized coordinate list.

        With ``nested_per_point`` each coordinate may sit in its own
        parentheses, as in ``((1 2), (3 4))``. Whether it does is decided
        by the byte after the outer '(' and holds for the whole list.
        """
        self.expect_open()
        nested = False
        if nested_per_point:
            mark = self.pos
            try:
                self.expect_open()
                nested = True
            except WKTError:
                self.pos = mark

        coords = []
        while True:
            coord, comma = self.scan_coordinate(dim)
            coords.append(coord)
            if not nested:
                if comma:
                    continue
                return coords
            if comma:
                raise WKTSyntaxError("expect ')' got ','")
            if not self.expect_comma_or_close():
                return coords
            self.expect_open()

    def scan_ring_sequence(self, dim: DimensionOption) -> List[Ring]:
        """Read a parenthesized list of closed rings."""
        self.expect_open()
        rings = []
        while True:
            ring = self.scan_coordinate_sequence(dim)
            if len(ring) < MIN_RING_SIZE:
                raise StructureError(
                    f"ring too short: a polygon ring must have at least "
                    f"{MIN_RING_SIZE} points, got {len(ring)}"
                )
            if ring[0] != ring[-1]:
                raise StructureError("ring not closed: first and last points differ")
            rings.append(ring)
            if not self.expect_comma_or_close():
                return rings

    def scan_multi_polygon(self, dim: DimensionOption) -> List[List[Ring]]:
        self.expect_open()
        polygons = []
        while True:
            polygons.append(self.scan_ring_sequence(dim))
            if not self.expect_comma_or_close():
                return polygons

    def scan_dimension(self) -> DimensionOption:
        """Read an optional Z, M or ZM suffix.

        A missing suffix is not an error; the failed identifier scan
        leaves the next byte in place.
        """
        try:
            suffix = self.scan_identifier()
        except WKTError:
            return DimensionOption.NONE
        return DimensionOption.from_suffix(suffix)

    def parse_geometry(self) -> Geometry:
        keyword = self.scan_identifier()
        if keyword not in GEOMETRY_TYPES:
            raise UnknownGeometryError(f"unknown geometry type {keyword!r}")
        dim = self.scan_dimension()

        if keyword == "POINT":
            coords = self.scan_coordinate_sequence(dim)
            if len(coords) != 1:
                raise StructureError(f"expected 1 point, got {len(coords)}")
            return Point(coords[0], dim)
        if keyword == "MULTIPOINT":
            return MultiPoint(self.scan_coordinate_sequence(dim, nested_per_point=True), dim)
        if keyword == "LINESTRING":
            return LineString(self.scan_coordinate_sequence(dim), dim)
        if keyword == "POLYGON":
            return Polygon(self.scan_ring_sequence(dim), dim)
        return MultiPolygon(self.scan_multi_polygon(dim), dim)


GEOMETRY_TYPES = ("POINT", "MULTIPOINT", "LINESTRING", "POLYGON", "MULTIPOLYGON")
DIMENSION_SUFFIXES = ("Z", "M", "ZM")


def _as_bytes(data) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def parse(data) -> Geometry:
    """Parse one WKT geometry from ``data``.

    Args:
        data: WKT text as bytes (str is encoded as UTF-8)

    Returns:
        The parsed Point, MultiPoint, LineString, Polygon or MultiPolygon

    Raises:
        WKTError: on the first problem found; no partial result is kept
        TypeError: if ``data`` is neither bytes-like nor str
    """
    return Cursor(_as_bytes(data)).parse_geometry()


def parse_all(data) -> Iterator[Geometry]:
    """Parse consecutive whitespace-separated geometries from ``data``.

    Geometries are yielded as they are read, so an error in a later
    geometry surfaces only after the earlier ones have been consumed.
    """
    cur = Cursor(_as_bytes(data))
    while True:
        cur.skip_whitespace()
        if cur.at_end():
            return
        yield cur.parse_geometry()
