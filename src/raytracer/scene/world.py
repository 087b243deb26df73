"""World container: scene objects plus a single point light.

Example:
    >>> from raytracer.core.ray import Ray
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.scene.world import default_world, intersect_world
    >>> ray = Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0))
    >>> [i.time for i in intersect_world(default_world(), ray)]
    [4.0, 4.5, 5.5, 6.0]
"""

from dataclasses import dataclass, replace
from typing import Sequence

from raytracer.core.color import WHITE, Color
from raytracer.core.numeric import EPSILON
from raytracer.core.ray import Ray
from raytracer.core.transform import uniform_scaling
from raytracer.core.tuples import Point, magnitude, normalize
from raytracer.materials.material import Material
from raytracer.scene.intersection import Intersection, hit, intersect, sort_intersections
from raytracer.scene.objects import SceneObject, sphere


@dataclass(frozen=True)
class PointLight:
    """A light with no size, radiating equally in all directions.

    Attributes:
        position: World-space position of the light.
        intensity: Color and brightness of the light.
    """

    position: Point
    intensity: Color


@dataclass(frozen=True)
class World:
    """Objects to render and the light that illuminates them.

    Attributes:
        objects: The scene objects, stored as a tuple.
        light: The single point light.
    """

    objects: tuple[SceneObject, ...]
    light: PointLight

    def __init__(self, objects: Sequence[SceneObject], light: PointLight) -> None:
        object.__setattr__(self, "objects", tuple(objects))
        object.__setattr__(self, "light", light)


def with_light(world: World, light: PointLight) -> World:
    """Return a copy of the world lit by a different light."""
    return replace(world, light=light)


def intersect_world(world: World, ray: Ray) -> list[Intersection]:
    """Intersect a ray with every object in the world.

    Args:
        world: The world to test.
        ray: The world-space ray.

    Returns:
        All intersections, sorted by ascending time.
    """
    intersections: list[Intersection] = []
    for obj in world.objects:
        intersections.extend(intersect(ray, obj))
    return sort_intersections(intersections)


def is_shadowed(world: World, point: Point) -> bool:
    """Check whether any object lies between a point and the light.

    Args:
        world: The world containing the light and occluders.
        point: The world-space point to test, usually an over point.

    Returns:
        True when the nearest hit along the ray toward the light is strictly
        closer than the light itself. A point at the light is never in
        shadow.
    """
    to_light = world.light.position - point
    distance = magnitude(to_light)
    if distance < EPSILON:
        return False
    shadow_hit = hit(intersect_world(world, Ray(point, normalize(to_light))))
    return shadow_hit is not None and shadow_hit.time < distance


def default_world() -> World:
    """Build the two-sphere reference world.

    The light sits at (-10, 10, -10). The outer unit sphere has color
    (0.8, 1.0, 0.6) with diffuse 0.7 and specular 0.2; the inner sphere is
    the default sphere scaled by 0.5.
    """
    light = PointLight(Point(-10.0, 10.0, -10.0), WHITE)
    outer = sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = sphere(transform=uniform_scaling(0.5))
    return World([outer, inner], light)
