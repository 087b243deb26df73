"""Affine transforms as first-class values with closed-form inverses.

A transform is one of a closed set of variants (translation, scaling,
reflection, rotation, shearing, combination). Each variant can produce its
4x4 matrix and, without any general matrix inversion, its own inverse
transform. Combinations list transforms in application order: the first
element is applied first, so the combined matrix is the product of the
element matrices from last to first.

Example:
    >>> import math
    >>> from raytracer.core.transform import (
    ...     Axis, Combination, Rotation, Scaling, Translation, apply,
    ... )
    >>> from raytracer.core.tuples import Point
    >>> t = Combination([Rotation(Axis.X, math.pi / 2), Scaling(5, 5, 5),
    ...                  Translation(10, 5, 7)])
    >>> apply(t, Point(1.0, 0.0, 1.0)) == Point(15.0, 0.0, 7.0)
    True
"""

import math
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Sequence, TypeVar, Union

from raytracer.core.matrix import Matrix
from raytracer.core.numeric import reciprocal
from raytracer.core.tuples import Point, Vector, cross, normalize

T = TypeVar("T", Point, Vector)


class Axis(Enum):
    """One of the three coordinate axes."""

    X = "x"
    Y = "y"
    Z = "z"


class ShearComponent(Enum):
    """A single shear term.

    The first letter is the coordinate that moves, the second the coordinate
    it moves in proportion to. XY shears x in proportion to y.
    """

    XY = "xy"
    XZ = "xz"
    YX = "yx"
    YZ = "yz"
    ZX = "zx"
    ZY = "zy"


# Row and column of each shear term in the 4x4 matrix
_SHEAR_POSITIONS = {
    ShearComponent.XY: (0, 1),
    ShearComponent.XZ: (0, 2),
    ShearComponent.YX: (1, 0),
    ShearComponent.YZ: (1, 2),
    ShearComponent.ZX: (2, 0),
    ShearComponent.ZY: (2, 1),
}


# =============================================================================
# Transform Variants
# =============================================================================


@dataclass(frozen=True)
class Translation:
    """Move points by (x, y, z). Vectors are unaffected."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Scaling:
    """Scale each axis by its own factor."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Reflection:
    """Mirror across the plane perpendicular to the axis."""

    axis: Axis


@dataclass(frozen=True)
class Rotation:
    """Rotate about an axis by an angle in radians (left-handed)."""

    axis: Axis
    angle: float


@dataclass(frozen=True)
class Shearing:
    """Shear one coordinate in proportion to another."""

    component: ShearComponent
    proportion: float


@dataclass(frozen=True)
class Combination:
    """An ordered sequence of transforms, applied first to last."""

    transforms: tuple["Transform", ...]

    def __init__(self, transforms: Sequence["Transform"]) -> None:
        object.__setattr__(self, "transforms", tuple(transforms))


Transform = Union[Translation, Scaling, Reflection, Rotation, Shearing, Combination]

# The empty combination is the identity transform
IDENTITY = Combination(())


def uniform_scaling(factor: float) -> Scaling:
    """Create a scaling with the same factor on every axis."""
    return Scaling(factor, factor, factor)


# =============================================================================
# Matrix Generation
# =============================================================================


def _rotation_matrix(axis: Axis, angle: float) -> Matrix:
    c = math.cos(angle)
    s = math.sin(angle)
    if axis is Axis.X:
        rows = [[1.0, 0.0, 0.0, 0.0], [0.0, c, -s, 0.0], [0.0, s, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    elif axis is Axis.Y:
        rows = [[c, 0.0, s, 0.0], [0.0, 1.0, 0.0, 0.0], [-s, 0.0, c, 0.0], [0.0, 0.0, 0.0, 1.0]]
    else:
        rows = [[c, -s, 0.0, 0.0], [s, c, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0.0, 0.0, 0.0, 1.0]]
    return Matrix(rows)


@lru_cache(maxsize=1024)
def matrix_of(transform: Transform) -> Matrix:
    """Build the 4x4 matrix equivalent to a transform.

    Args:
        transform: Any transform variant.

    Returns:
        The homogeneous 4x4 matrix.

    Raises:
        TypeError: If transform is not a known variant.
    """
    if isinstance(transform, Translation):
        return Matrix(
            [
                [1.0, 0.0, 0.0, transform.x],
                [0.0, 1.0, 0.0, transform.y],
                [0.0, 0.0, 1.0, transform.z],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
    if isinstance(transform, Scaling):
        return Matrix(
            [
                [transform.x, 0.0, 0.0, 0.0],
                [0.0, transform.y, 0.0, 0.0],
                [0.0, 0.0, transform.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
    if isinstance(transform, Reflection):
        sx, sy, sz = {
            Axis.X: (-1.0, 1.0, 1.0),
            Axis.Y: (1.0, -1.0, 1.0),
            Axis.Z: (1.0, 1.0, -1.0),
        }[transform.axis]
        return Matrix(
            [
                [sx, 0.0, 0.0, 0.0],
                [0.0, sy, 0.0, 0.0],
                [0.0, 0.0, sz, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
    if isinstance(transform, Rotation):
        return _rotation_matrix(transform.axis, transform.angle)
    if isinstance(transform, Shearing):
        rows = Matrix.identity(4).tolist()
        row, column = _SHEAR_POSITIONS[transform.component]
        rows[row][column] = transform.proportion
        return Matrix(rows)
    if isinstance(transform, Combination):
        result = Matrix.identity(4)
        for element in transform.transforms:
            result = matrix_of(element) @ result
        return result
    raise TypeError(f"Unknown transform variant: {transform!r}")


@lru_cache(maxsize=1024)
def _transposed_matrix_of(transform: Transform) -> Matrix:
    # Transpose only the linear 3x3 block; row and column 3 stay in place
    m = matrix_of(transform)
    return m.replace_submatrix(3, 3, m.submatrix(3, 3).transpose())


# =============================================================================
# Inversion
# =============================================================================


def inverse(transform: Transform) -> Transform:
    """Return the transform that undoes the given transform.

    Args:
        transform: Any transform variant.

    Returns:
        The closed-form inverse. Scaling uses `reciprocal`, so a zero factor
        inverts to zero rather than infinity.

    Raises:
        TypeError: If transform is not a known variant.
    """
    if isinstance(transform, Translation):
        return Translation(-transform.x, -transform.y, -transform.z)
    if isinstance(transform, Scaling):
        return Scaling(reciprocal(transform.x), reciprocal(transform.y), reciprocal(transform.z))
    if isinstance(transform, Reflection):
        return transform
    if isinstance(transform, Rotation):
        return Rotation(transform.axis, -transform.angle)
    if isinstance(transform, Shearing):
        return Shearing(transform.component, -transform.proportion)
    if isinstance(transform, Combination):
        return Combination([inverse(t) for t in reversed(transform.transforms)])
    raise TypeError(f"Unknown transform variant: {transform!r}")


# =============================================================================
# Application
# =============================================================================


def apply_matrix(matrix: Matrix, value: T) -> T:
    """Multiply a point or vector by a 4x4 matrix, preserving its type."""
    return type(value).from_homogeneous(matrix.multiply_tuple(value.to_homogeneous()))


def apply(transform: Transform, value: T) -> T:
    """Apply a transform to a point or vector, preserving its type."""
    return apply_matrix(matrix_of(transform), value)


def apply_transposed(transform: Transform, value: T) -> T:
    """Apply the transform with its upper-left 3x3 block transposed.

    Used to carry normals from object space to world space: pass the inverse
    of the object's transform to get the inverse-transpose rule.
    """
    return apply_matrix(_transposed_matrix_of(transform), value)


def translate(value: T, x: float, y: float, z: float) -> T:
    """Translate a point or vector by (x, y, z)."""
    return apply(Translation(x, y, z), value)


def scale(value: T, x: float, y: float, z: float) -> T:
    """Scale a point or vector by (x, y, z)."""
    return apply(Scaling(x, y, z), value)


def reflect_across(value: T, axis: Axis) -> T:
    """Reflect a point or vector across the plane perpendicular to axis."""
    return apply(Reflection(axis), value)


def rotate(value: T, axis: Axis, angle: float) -> T:
    """Rotate a point or vector about an axis by angle radians."""
    return apply(Rotation(axis, angle), value)


def shear(value: T, component: ShearComponent, proportion: float) -> T:
    """Shear a point or vector by a single shear term."""
    return apply(Shearing(component, proportion), value)


# =============================================================================
# Camera Orientation
# =============================================================================


def view_transform(from_point: Point, to_point: Point, up: Vector) -> Matrix:
    """Build the matrix that orients the world relative to an eye.

    Args:
        from_point: Eye position.
        to_point: Point the eye looks at.
        up: Approximate up direction (need not be normalized or orthogonal).

    Returns:
        The 4x4 view matrix: orientation times translation by -from_point.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ matrix_of(Translation(-from_point.x, -from_point.y, -from_point.z))
