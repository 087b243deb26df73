"""Point and vector value types for affine geometry.

Points and vectors are deliberately separate types. A point has homogeneous
weight 1 and is moved by translations; a vector has weight 0 and is not.
Subtracting two points gives a vector, adding a vector to a point gives a
point, and adding two points is rejected.

Equality compares components within EPSILON, so points and vectors are not
hashable.

Example:
    >>> from raytracer.core.tuples import Point, Vector, normalize
    >>> Point(3.0, 2.0, 1.0) - Point(5.0, 6.0, 7.0)
    Vector(x=-2.0, y=-4.0, z=-6.0)
    >>> normalize(Vector(4.0, 0.0, 0.0))
    Vector(x=1.0, y=0.0, z=0.0)
"""

import math
from dataclasses import dataclass
from typing import ClassVar, TypeVar

from raytracer.core.numeric import approx_equal

T = TypeVar("T", "Point", "Vector")


class _HomogeneousTuple:
    """Conversion to and from homogeneous 4-component coordinates.

    Shared by Point and Vector so both can be multiplied by 4x4 matrices.
    """

    x: float
    y: float
    z: float
    weight: ClassVar[float]

    def to_homogeneous(self) -> tuple[float, float, float, float]:
        """Return (x, y, z, w) with the type's homogeneous weight."""
        return (self.x, self.y, self.z, self.weight)

    @classmethod
    def from_homogeneous(cls: type[T], values: tuple[float, ...]) -> T:
        """Build an instance from the first three homogeneous components."""
        return cls(values[0], values[1], values[2])

    def _approx_eq(self, other: "_HomogeneousTuple") -> bool:
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
        )


@dataclass(frozen=True, eq=False)
class Vector(_HomogeneousTuple):
    """A direction in 3D space (homogeneous weight 0)."""

    x: float
    y: float
    z: float

    weight: ClassVar[float] = 0.0

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "Vector | float") -> "Vector":
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, (int, float)):
            return Vector(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(scalar * self.x, scalar * self.y, scalar * self.z)

    def __truediv__(self, scalar: float) -> "Vector":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._approx_eq(other)


@dataclass(frozen=True, eq=False)
class Point(_HomogeneousTuple):
    """A location in 3D space (homogeneous weight 1)."""

    x: float
    y: float
    z: float

    weight: ClassVar[float] = 1.0

    def __add__(self, other: Vector) -> "Point":
        if not isinstance(other, Vector):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point | Vector") -> "Point | Vector":
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar: float) -> "Point":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Point":
        return self.__mul__(scalar)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self._approx_eq(other)


ORIGIN = Point(0.0, 0.0, 0.0)


def point(x: float, y: float, z: float) -> Point:
    """Create a point from three coordinates."""
    return Point(float(x), float(y), float(z))


def vector(x: float, y: float, z: float) -> Vector:
    """Create a vector from three components."""
    return Vector(float(x), float(y), float(z))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vector, b: Vector) -> float:
    """Compute the dot product a . b."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector, b: Vector) -> Vector:
    """Compute the cross product a x b."""
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def magnitude(v: Vector) -> float:
    """Compute the Euclidean length of a vector."""
    return math.sqrt(dot(v, v))


def magnitude_squared(v: Vector) -> float:
    """Compute the squared length of a vector, avoiding the square root."""
    return dot(v, v)


def normalize(v: Vector) -> Vector:
    """Scale a vector to unit length.

    Args:
        v: The input vector. Must not be zero-length.

    Returns:
        A unit vector in the same direction as v.
    """
    return v / magnitude(v)


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Reflect a vector about a normal.

    Args:
        incident: The incoming vector.
        normal: The surface normal (should be normalized).

    Returns:
        The reflected vector: incident - 2 * (incident . normal) * normal.
    """
    return incident - 2.0 * dot(incident, normal) * normal
