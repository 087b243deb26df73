"""Ray data structure and ray-space conversions.

A ray is a parametric line `origin + t * direction`. Rays are carried into an
object's local space by applying the inverse of the object's transform to
both the origin and the direction.

Example:
    >>> from raytracer.core.ray import Ray, position
    >>> from raytracer.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> position(ray, 2.5) == Point(4.5, 3.0, 4.0)
    True
"""

from dataclasses import dataclass

from raytracer.core.transform import Transform, apply
from raytracer.core.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Not required to be normalized;
            intersection times are measured in multiples of this vector.
    """

    origin: Point
    direction: Vector


def position(ray: Ray, t: float) -> Point:
    """Compute the point along the ray at parameter t.

    Args:
        ray: The ray to evaluate.
        t: The parameter value. Negative values lie behind the origin.

    Returns:
        The point ray.origin + t * ray.direction.
    """
    return ray.origin + t * ray.direction


def transform_ray(ray: Ray, transform: Transform) -> Ray:
    """Apply a transform to both the origin and direction of a ray."""
    return Ray(apply(transform, ray.origin), apply(transform, ray.direction))
