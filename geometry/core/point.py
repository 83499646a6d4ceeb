"""
Point / Vector value type for 3D geometry.

A Point is used interchangeably as a spatial position and as a displacement
(Vector is an alias). Arithmetic never mutates its operands and never raises:
NaN and Inf coordinates propagate like any other float.

TEXT FORMAT
-----------
Writing and reading are intentionally asymmetric:
- str(point) produces "Point[x, y, z]"
- Point.parse() reads three whitespace-separated scalars "x y z"
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO
import logging
import math
import re

import numpy as np

from ..utils.scale import PRECISION, is_near_zero, nearly_equal

logger = logging.getLogger(__name__)

# Decimal scalar as read by a numeric stream extraction: optional sign, digits
# with an optional fraction, optional exponent. No "_", "nan" or "inf".
_SCALAR = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPACE = re.compile(r"\s*")


class PointParseError(ValueError):
    """Raised when text cannot be read as three whitespace-separated scalars."""
    pass


@dataclass(eq=False)
class Point:
    """
    Point or vector in 3D space.

    Coordinates are double-precision floats and default to zero. Each
    coordinate can be read and assigned independently.

    Equality is tolerant (see geometry.utils.scale.nearly_equal), so Points
    are not hashable.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    __hash__ = None

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def magnitude(self) -> float:
        """Euclidean norm sqrt(x^2 + y^2 + z^2)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self, tolerance: Optional[float] = None) -> "Point":
        """
        Unit vector in the same direction.

        If the magnitude is at or below the tolerance (default PRECISION),
        the zero vector is returned instead of dividing.
        """
        if tolerance is None:
            tolerance = PRECISION

        mag = self.magnitude()
        if is_near_zero(mag, tolerance):
            return Point()
        return Point(self.x / mag, self.y / mag, self.z / mag)

    def distance(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Point") -> "Point":
        """Right-handed cross product self x other."""
        return Point(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def is_close(self, other: "Point", tolerance: Optional[float] = None) -> bool:
        """Coordinate-wise relative comparison with an explicit tolerance."""
        if tolerance is None:
            tolerance = PRECISION
        return (
            nearly_equal(self.x, other.x, tolerance)
            and nearly_equal(self.y, other.y, tolerance)
            and nearly_equal(self.z, other.z, tolerance)
        )

    def copy(self) -> "Point":
        return Point(self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Coordinates as a float64 array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, values: Iterable[float]) -> "Point":
        """
        Create a Point from any length-3 sequence or array.

        Raises
        ------
        ValueError
            If the input does not hold exactly three values.
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 coordinates, got {arr.size}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    @classmethod
    def parse(cls, text: str, strict: bool = True) -> "Point":
        """
        Read a Point from three whitespace-separated scalars "x y z".

        Parameters
        ----------
        text : str
            Input text. No brackets or commas.
        strict : bool
            If True (default), anything other than exactly three decimal
            scalars raises PointParseError ("nan", "inf" and "1_000" are
            rejected). If False, text is consumed like a numeric stream: the
            longest numeric prefix at each position is taken, reading stops
            at the first position without one, and the remaining
            coordinates are left at 0.0; no error is raised.

        Returns
        -------
        Point
        """
        if strict:
            tokens = text.split()
            if len(tokens) != 3:
                raise PointParseError(
                    f"Expected 3 coordinates, got {len(tokens)}: {text!r}"
                )
            for tok in tokens:
                if not _SCALAR.fullmatch(tok):
                    raise PointParseError(f"Invalid coordinate {tok!r} in {text!r}")
            return cls(*(float(tok) for tok in tokens))

        values = _read_leading_floats(text)
        if len(values) < 3:
            logger.warning(
                f"Lenient parse of {text!r} read {len(values)} of 3 coordinates; "
                f"missing coordinates set to 0.0"
            )
        values.extend([0.0] * (3 - len(values)))
        return cls(*values)

    @classmethod
    def read(cls, stream: TextIO, strict: bool = True) -> "Point":
        """Read one line from a text stream and parse it (see parse())."""
        return cls.parse(stream.readline(), strict=strict)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.is_close(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Point":
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return self.__mul__(scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y, -self.z)

    def __iter__(self):
        return iter((self.x, self.y, self.z))

    def __str__(self) -> str:
        return format_point(self)


# Points double as displacement vectors
Vector = Point


def format_point(point: Point) -> str:
    """Format a point as "Point[x, y, z]" using the shortest %g form."""
    return f"Point[{point.x:g}, {point.y:g}, {point.z:g}]"


def _read_leading_floats(text: str, count: int = 3) -> List[float]:
    # Scan like successive stream extractions: skip whitespace, take the
    # longest scalar prefix, stop at the first position where none matches.
    # "1.5abc" yields 1.5 and stops at "abc"; "2.5.3" yields 2.5 then .3
    values = []
    pos = 0
    while len(values) < count:
        pos = _SPACE.match(text, pos).end()
        match = _SCALAR.match(text, pos)
        if match is None:
            break
        values.append(float(match.group()))
        pos = match.end()
    return values


__all__ = [
    "Point",
    "Vector",
    "PointParseError",
    "format_point",
]
