"""Core module with the value types and algebra the renderer is built on.

Components:
    numeric: EPSILON and tolerant float helpers
    matrix: Immutable dense matrices with determinant and inverse
    tuples: Point and Vector value types and vector utilities
    color: RGB colors and the named palette
    transform: Affine transform variants, their matrices and inverses
    ray: Ray data structure and ray-space conversions
    integrator: Whitted-style shading and the row-parallel render loop

Points, vectors, colors and matrices compare with a tolerance of EPSILON on
every component, so values produced by chained transforms still compare
equal to their exact counterparts.
"""

from .color import BLACK, BLUE, GREEN, RED, WHITE, Color, blend, hadamard_product
from .matrix import InvalidDimensionError, Matrix, SingularMatrixError
from .numeric import EPSILON, approx_equal, floor_int, is_even, reciprocal
from .ray import Ray, position, transform_ray
from .transform import (
    IDENTITY,
    Axis,
    Combination,
    Reflection,
    Rotation,
    Scaling,
    ShearComponent,
    Shearing,
    Transform,
    Translation,
    apply,
    apply_matrix,
    apply_transposed,
    inverse,
    matrix_of,
    uniform_scaling,
    view_transform,
)
from .tuples import ORIGIN, Point, Vector, cross, dot, magnitude, normalize, reflect

# Note: integrator is NOT imported here to avoid circular imports with the
# scene module. Import it directly from raytracer.core.integrator.

__all__ = [
    "EPSILON",
    "approx_equal",
    "reciprocal",
    "floor_int",
    "is_even",
    "Matrix",
    "InvalidDimensionError",
    "SingularMatrixError",
    "Point",
    "Vector",
    "ORIGIN",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "reflect",
    "Color",
    "blend",
    "hadamard_product",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Axis",
    "ShearComponent",
    "Translation",
    "Scaling",
    "Reflection",
    "Rotation",
    "Shearing",
    "Combination",
    "Transform",
    "IDENTITY",
    "uniform_scaling",
    "matrix_of",
    "inverse",
    "apply",
    "apply_matrix",
    "apply_transposed",
    "view_transform",
    "Ray",
    "position",
    "transform_ray",
]
