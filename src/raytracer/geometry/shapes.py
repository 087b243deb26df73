"""Shape variants and dispatch to the per-shape local routines."""

from enum import Enum

from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector
from raytracer.geometry.plane import intersect_plane, plane_normal
from raytracer.geometry.sphere import intersect_sphere, sphere_normal


class Shape(Enum):
    """Canonical unit shapes, always positioned at the local origin."""

    SPHERE = "sphere"
    PLANE = "plane"


def local_intersect(shape: Shape, local_ray: Ray) -> list[float]:
    """Intersect an object-space ray with a shape.

    Args:
        shape: The shape to test.
        local_ray: The ray already transformed into object space.

    Returns:
        The intersection times, unsorted for callers that merge lists.

    Raises:
        TypeError: If shape is not a known variant.
    """
    if shape is Shape.SPHERE:
        return intersect_sphere(local_ray)
    if shape is Shape.PLANE:
        return intersect_plane(local_ray)
    raise TypeError(f"Unknown shape: {shape!r}")


def local_normal_at(shape: Shape, object_point: Point) -> Vector:
    """Surface normal of a shape at an object-space point (not normalized)."""
    if shape is Shape.SPHERE:
        return sphere_normal(object_point)
    if shape is Shape.PLANE:
        return plane_normal(object_point)
    raise TypeError(f"Unknown shape: {shape!r}")
