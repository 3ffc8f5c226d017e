"""Type definitions for wkt-scan geometry."""

import abc
import enum
from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


class DimensionOption(enum.IntFlag):
    """Which of the Z and M channels a geometry declares."""
    NONE = 0
    Z = 1
    M = 2
    ZM = 3

    @classmethod
    def from_suffix(cls, suffix: str) -> "DimensionOption":
        """Resolve a dimension suffix such as ``Z`` or ``ZM``.

        Anything that is not a recognized suffix resolves to NONE.
        """
        return _SUFFIXES.get(suffix.upper(), cls.NONE)

    @property
    def is_3d(self) -> bool:
        return bool(self & DimensionOption.Z)

    @property
    def is_measured(self) -> bool:
        return bool(self & DimensionOption.M)

    @property
    def component_count(self) -> int:
        """Numeric components a coordinate carries under this option."""
        return 2 + int(self.is_3d) + int(self.is_measured)


_SUFFIXES = {
    "Z": DimensionOption.Z,
    "M": DimensionOption.M,
    "ZM": DimensionOption.ZM,
}


@dataclass(frozen=True)
class Coordinate:
    """A single location; z and m stay 0.0 unless declared."""
    x: float
    y: float
    z: float = 0.0
    m: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
        yield self.m


Ring = Sequence[Coordinate]


@dataclass(frozen=True)
class Geometry(abc.ABC):
    """Base of the five geometry variants.

    Equality comes from the dataclass machinery, which only compares
    instances of the exact same class, so a Point never equals a
    MultiPoint with the same single coordinate.
    """
    dim: DimensionOption

    @property
    def is_3d(self) -> bool:
        return self.dim.is_3d

    @property
    def is_measured(self) -> bool:
        return self.dim.is_measured

    @property
    @abc.abstractmethod
    def coordinates(self) -> Iterator[Coordinate]:
        """Every coordinate of the geometry, in input order."""


@dataclass(frozen=True)
class Point(Geometry):
    """Exactly one coordinate."""
    coord: Coordinate

    def __init__(self, coord: Coordinate, dim: DimensionOption = DimensionOption.NONE):
        object.__setattr__(self, "coord", coord)
        object.__setattr__(self, "dim", DimensionOption(dim))

    @property
    def coordinates(self) -> Iterator[Coordinate]:
        yield self.coord


@dataclass(frozen=True)
class MultiPoint(Geometry):
    """Unconnected points."""
    coords: Tuple[Coordinate, ...]

    def __init__(self, coords, dim: DimensionOption = DimensionOption.NONE):
        object.__setattr__(self, "coords", tuple(coords))
        object.__setattr__(self, "dim", DimensionOption(dim))

    @property
    def coordinates(self) -> Iterator[Coordinate]:
        return iter(self.coords)


@dataclass(frozen=True)
class LineString(Geometry):
    """Connected points forming a path."""
    coords: Tuple[Coordinate, ...]

    def __init__(self, coords, dim: DimensionOption = DimensionOption.NONE):
        object.__setattr__(self, "coords", tuple(coords))
        object.__setattr__(self, "dim", DimensionOption(dim))

    @property
    def coordinates(self) -> Iterator[Coordinate]:
        return iter(self.coords)


@dataclass(frozen=True)
class Polygon(Geometry):
    """A list of rings; the first is the exterior, the rest are holes."""
    rings: Tuple[Ring, ...]

    def __init__(self, rings, dim: DimensionOption = DimensionOption.NONE):
        object.__setattr__(self, "rings", tuple(tuple(r) for r in rings))
        object.__setattr__(self, "dim", DimensionOption(dim))

    @property
    def exterior(self) -> Ring:
        return self.rings[0] if self.rings else ()

    @property
    def holes(self) -> Tuple[Ring, ...]:
        return self.rings[1:]

    @property
    def coordinates(self) -> Iterator[Coordinate]:
        for ring in self.rings:
            yield from ring


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    """A list of polygon ring lists."""
    polygons: Tuple[Tuple[Ring, ...], ...]

    def __init__(self, polygons, dim: DimensionOption = DimensionOption.NONE):
        object.__setattr__(
            self,
            "polygons",
            tuple(tuple(tuple(r) for r in rings) for rings in polygons),
        )
        object.__setattr__(self, "dim", DimensionOption(dim))

    @property
    def coordinates(self) -> Iterator[Coordinate]:
        for rings in self.polygons:
            for ring in rings:
                yield from ring
