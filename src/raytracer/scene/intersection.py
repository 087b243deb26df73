"""Ray-object intersection records, hit selection and shading preparation.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.scene.intersection import hit, intersect
    >>> from raytracer.scene.objects import sphere
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> [i.time for i in intersect(ray, sphere())]
    [4.0, 6.0]
    >>> hit(intersect(ray, sphere())).time
    4.0
"""

from dataclasses import dataclass
from typing import Iterable

from raytracer.core.numeric import EPSILON
from raytracer.core.ray import Ray, position, transform_ray
from raytracer.core.transform import inverse
from raytracer.core.tuples import Point, Vector, dot
from raytracer.geometry.shapes import local_intersect
from raytracer.scene.objects import SceneObject, normal_at


@dataclass(frozen=True)
class Intersection:
    """A ray crossing an object's surface.

    Attributes:
        object: The object that was hit.
        time: Ray parameter of the crossing. Negative values lie behind
            the ray origin.
    """

    object: SceneObject
    time: float


def intersect(ray: Ray, obj: SceneObject) -> list[Intersection]:
    """Intersect a world-space ray with an object.

    Args:
        ray: The ray in world space.
        obj: The object to test.

    Returns:
        The intersections in the order the shape reports them. A sphere
        yields up to two, a plane at most one.
    """
    local_ray = ray if obj.transform is None else transform_ray(ray, inverse(obj.transform))
    return [Intersection(obj, t) for t in local_intersect(obj.shape, local_ray)]


def sort_intersections(intersections: Iterable[Intersection]) -> list[Intersection]:
    """Sort intersections by ascending time."""
    return sorted(intersections, key=lambda i: i.time)


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the nearest intersection at or in front of the ray origin.

    Args:
        intersections: Intersections in any order.

    Returns:
        The intersection with the lowest non-negative time, or None when
        every intersection lies behind the origin.
    """
    for intersection in sort_intersections(intersections):
        if intersection.time >= 0.0:
            return intersection
    return None


# =============================================================================
# Shading Preparation
# =============================================================================


@dataclass(frozen=True)
class Computation:
    """Precomputed values used to shade a hit.

    Attributes:
        time: Ray parameter of the hit.
        object: The object that was hit.
        point: World-space hit point.
        over_point: The hit point nudged along the normal by EPSILON, used
            as the origin of shadow rays.
        eye: Unit vector from the point toward the eye.
        normal: Unit normal, flipped to face the eye when inside.
        inside: Whether the hit is on the inside of the surface.
    """

    time: float
    object: SceneObject
    point: Point
    over_point: Point
    eye: Vector
    normal: Vector
    inside: bool


def prepare_computation(intersection: Intersection, ray: Ray) -> Computation:
    """Derive the shading state for an intersection.

    Args:
        intersection: The intersection to shade.
        ray: The world-space ray that produced it.

    Returns:
        The computation record for the hit.
    """
    point = position(ray, intersection.time)
    eye = -ray.direction
    normal = normal_at(intersection.object, point)
    inside = dot(normal, eye) < 0.0
    if inside:
        normal = -normal

    return Computation(
        time=intersection.time,
        object=intersection.object,
        point=point,
        over_point=point + EPSILON * normal,
        eye=eye,
        normal=normal,
        inside=inside,
    )
