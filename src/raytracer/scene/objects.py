"""Scene objects: a shape with an optional transform and material.

Objects are immutable values. ``with_transform`` and ``with_material``
return new objects and leave the original untouched.

Example:
    >>> from raytracer.core.transform import Translation
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.scene.objects import normal_at, sphere, with_transform
    >>> s = with_transform(sphere(), Translation(0.0, 1.0, 0.0))
    >>> normal_at(s, Point(0.0, 1.70711, -0.70711)) == Vector(0.0, 0.70711, -0.70711)
    True
"""

from dataclasses import dataclass, replace

from raytracer.core.transform import Transform, apply, apply_transposed, inverse
from raytracer.core.tuples import Point, Vector, normalize
from raytracer.geometry.shapes import Shape, local_normal_at
from raytracer.materials.material import DEFAULT_MATERIAL, Material


@dataclass(frozen=True)
class SceneObject:
    """A renderable object.

    Attributes:
        shape: The unit shape at the local origin.
        transform: Object-to-world transform. None means identity.
        material: Surface material. None means DEFAULT_MATERIAL.
    """

    shape: Shape
    transform: Transform | None = None
    material: Material | None = None

    @property
    def effective_material(self) -> Material:
        """The object's material, falling back to the default material."""
        if self.material is None:
            return DEFAULT_MATERIAL
        return self.material


def sphere(transform: Transform | None = None, material: Material | None = None) -> SceneObject:
    """Create a unit sphere object."""
    return SceneObject(Shape.SPHERE, transform, material)


def plane(transform: Transform | None = None, material: Material | None = None) -> SceneObject:
    """Create an XZ plane object."""
    return SceneObject(Shape.PLANE, transform, material)


def with_transform(obj: SceneObject, transform: Transform | None) -> SceneObject:
    """Return a copy of the object with a different transform."""
    return replace(obj, transform=transform)


def with_material(obj: SceneObject, material: Material | None) -> SceneObject:
    """Return a copy of the object with a different material."""
    return replace(obj, material=material)


def world_to_object(obj: SceneObject, world_point: Point) -> Point:
    """Carry a world-space point into the object's space."""
    if obj.transform is None:
        return world_point
    return apply(inverse(obj.transform), world_point)


def normal_at(obj: SceneObject, world_point: Point) -> Vector:
    """Compute the unit surface normal of an object at a world point.

    The point is carried into object space, the shape's local normal is
    taken there, and the normal is carried back to world space by the
    inverse-transpose of the object's transform.

    Args:
        obj: The object.
        world_point: A point on the object's surface in world space.

    Returns:
        The normalized world-space normal.
    """
    object_point = world_to_object(obj, world_point)
    object_normal = local_normal_at(obj.shape, object_point)
    if obj.transform is None:
        return normalize(object_normal)
    return normalize(apply_transposed(inverse(obj.transform), object_normal))
