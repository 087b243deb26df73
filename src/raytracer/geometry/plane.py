"""Infinite plane primitive in object space.

The local plane is the XZ plane through the origin with normal +Y. Rays whose
direction has no Y component are parallel to (or lie in) the plane and are
treated as missing it.
"""

from raytracer.core.numeric import EPSILON
from raytracer.core.ray import Ray
from raytracer.core.tuples import Point, Vector

# The plane's normal is constant everywhere in object space
PLANE_NORMAL = Vector(0.0, 1.0, 0.0)


def intersect_plane(ray: Ray) -> list[float]:
    """Find where a local-space ray crosses the XZ plane.

    Args:
        ray: The ray in the plane's object space.

    Returns:
        An empty list for parallel or coplanar rays, otherwise the single
        time t solving origin.y + t * direction.y = 0.
    """
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def plane_normal(object_point: Point) -> Vector:
    """Normal of the local plane, which does not depend on the point."""
    return PLANE_NORMAL
