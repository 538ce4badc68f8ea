"""Homogeneous 4-tuples for points and vectors.

A tuple carries ``(x, y, z, w)`` where ``w`` distinguishes its kind:
``w == 1.0`` is a point, ``w == 0.0`` is a vector. Arithmetic follows the
usual homogeneous rules, so subtracting two points gives a vector and adding
a vector to a point gives a point. Any other ``w`` is rejected.

Example:
    >>> from src.whitted.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> p + v
    Tuple(x=1.0, y=2.0, z=4.0, w=1.0)
"""

import math
from dataclasses import dataclass

# Tolerance used for tuple, colour and matrix equality
EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    """Return True if two floats differ by less than EPSILON."""
    return abs(a - b) < EPSILON


@dataclass(frozen=True, eq=False)
class Tuple:
    """A point or vector in homogeneous coordinates.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
        w: 1.0 for a point, 0.0 for a vector.
    """

    x: float
    y: float
    z: float
    w: float

    def __post_init__(self) -> None:
        if self.w != 0.0 and self.w != 1.0:
            raise ValueError(
                f"Tuple w component = {self.w} is invalid. "
                "Use w = 1.0 for a point or w = 0.0 for a vector."
            )

    @property
    def is_point(self) -> bool:
        return self.w == 1.0

    @property
    def is_vector(self) -> bool:
        return self.w == 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __add__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple(-self.x, -self.y, -self.z, self.w)

    def __mul__(self, scalar: float) -> "Tuple":
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Tuple":
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w)

    def magnitude(self) -> float:
        """Euclidean length of the (x, y, z) part."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> "Tuple":
        """Return the unit vector pointing the same way as this tuple.

        Raises:
            ValueError: If the tuple has zero length.
        """
        length = self.magnitude()
        if length == 0.0:
            raise ValueError("Cannot normalize a zero-length tuple")
        return vector(self.x / length, self.y / length, self.z / length)

    def dot(self, other: "Tuple") -> float:
        """Dot product of two vectors.

        Raises:
            ValueError: If either operand is a point.
        """
        _require_vectors("dot", self, other)
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Tuple") -> "Tuple":
        """Cross product of two vectors.

        Raises:
            ValueError: If either operand is a point.
        """
        _require_vectors("cross", self, other)
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: "Tuple") -> "Tuple":
        """Reflect this vector about a normal: v - 2 * n * (n . v)."""
        return self - normal * (2.0 * self.dot(normal))

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.z, self.w]

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


def _require_vectors(operation: str, *operands: Tuple) -> None:
    for operand in operands:
        if not operand.is_vector:
            raise ValueError(f"{operation} is only defined for vectors, got {operand!r}")


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w = 1.0)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w = 0.0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
