"""Phong reflection model with a single point light.

The color at a surface point is the sum of three terms:

    ambient  = ambient * effective
    diffuse  = diffuse * (light . normal) * effective
    specular = specular * (reflect(-light, normal) . eye) ^ shininess * intensity

where ``effective`` is the surface color (pattern color when the material has
a pattern) multiplied by the light intensity. Diffuse and specular vanish when
the point is in shadow or the light is behind the surface. The result is not
clamped.

Example:
    >>> from raytracer.core.color import WHITE, Color
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.materials.material import DEFAULT_MATERIAL
    >>> from raytracer.materials.phong import lighting
    >>> from raytracer.scene.objects import sphere
    >>> from raytracer.scene.world import PointLight
    >>> light = PointLight(Point(0.0, 0.0, -10.0), WHITE)
    >>> lighting(DEFAULT_MATERIAL, sphere(), light, Point(0.0, 0.0, 0.0),
    ...          Vector(0.0, 0.0, -1.0), Vector(0.0, 0.0, -1.0)) == Color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from raytracer.core.color import BLACK, Color
from raytracer.core.tuples import Point, Vector, dot, normalize, reflect
from raytracer.materials.material import Material
from raytracer.materials.pattern import pattern_at_object

if TYPE_CHECKING:
    from raytracer.scene.objects import SceneObject
    from raytracer.scene.world import PointLight


def surface_color(material: Material, obj: SceneObject, world_point: Point) -> Color:
    """Return the pattern color at the point, or the flat material color."""
    if material.pattern is None:
        return material.color
    return pattern_at_object(material.pattern, obj, world_point)


def lighting(
    material: Material,
    obj: SceneObject,
    light: PointLight,
    point: Point,
    eye: Vector,
    normal: Vector,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point with the Phong reflection model.

    Args:
        material: The surface material.
        obj: The object being shaded, used to place its pattern.
        light: The point light.
        point: The world-space point being shaded.
        eye: Unit vector from the point toward the eye.
        normal: Unit surface normal at the point.
        in_shadow: Whether the point is occluded from the light.

    Returns:
        The unclamped sum of ambient, diffuse and specular terms.
    """
    effective = surface_color(material, obj, point) * light.intensity
    ambient = material.ambient * effective

    lightv = normalize(light.position - point)
    light_dot_normal = dot(lightv, normal)
    if in_shadow or light_dot_normal < 0.0:
        return ambient

    diffuse = material.diffuse * light_dot_normal * effective

    reflect_dot_eye = dot(reflect(-lightv, normal), eye)
    if reflect_dot_eye <= 0.0:
        specular = BLACK
    else:
        factor = reflect_dot_eye**material.shininess
        specular = material.specular * factor * light.intensity

    return ambient + diffuse + specular
