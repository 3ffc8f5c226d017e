"""Errors raised while parsing WKT."""


class WKTError(ValueError):
    """Base error for every parse failure."""


class UnexpectedEndError(WKTError):
    """The input ended where a byte or number was still required."""

    def __init__(self, message: str = "unexpected end of input"):
        super().__init__(message)


class WKTSyntaxError(WKTError):
    """An unexpected byte where '(', ',', ')' or a letter was required."""


class UnknownGeometryError(WKTError):
    """The leading keyword is not a supported geometry type."""


class MalformedNumberError(WKTError):
    """A coordinate component is not a valid floating point literal."""


class StructureError(WKTError):
    """A ring is open or too short, or a POINT holds more than one coordinate."""
