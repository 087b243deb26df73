"""Unit sphere primitive with ray-sphere intersection in object space.

The sphere is always centred at the local origin with radius 1; its size and
position in the world come only from the owning object's transform. The ray
passed here must already be expressed in object space.

The intersection solves |O + tD|^2 = 1, i.e. the quadratic

    a*t^2 + b*t + c = 0

with
    a = D . D
    b = 2 * D . (O - center)
    c = (O - center) . (O - center) - 1
"""

import math

from raytracer.core.numeric import approx_equal
from raytracer.core.ray import Ray
from raytracer.core.tuples import ORIGIN, Point, Vector, dot


def intersect_sphere(ray: Ray) -> list[float]:
    """Find the ray parameters where a local-space ray meets the unit sphere.

    Args:
        ray: The ray in the sphere's object space.

    Returns:
        The intersection times in ascending order. Empty when the ray misses
        or its direction is degenerate (a within EPSILON of 0), a single time
        when the ray is tangent (discriminant within EPSILON of 0), and two
        times otherwise. Times may be negative.
    """
    sphere_to_ray = ray.origin - ORIGIN
    a = dot(ray.direction, ray.direction)
    b = 2.0 * dot(ray.direction, sphere_to_ray)
    c = dot(sphere_to_ray, sphere_to_ray) - 1.0
    discriminant = b * b - 4.0 * a * c

    if approx_equal(a, 0.0):
        return []
    if discriminant < 0.0:
        return []
    if approx_equal(discriminant, 0.0):
        return [-b / (2.0 * a)]

    sqrt_d = math.sqrt(discriminant)
    return [(-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a)]


def sphere_normal(object_point: Point) -> Vector:
    """Outward normal of the unit sphere at a point on its surface.

    Args:
        object_point: A point on the sphere in object space.

    Returns:
        The (unnormalized) vector from the centre to the point.
    """
    return object_point - ORIGIN
