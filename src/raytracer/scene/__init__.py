"""Scene module for objects, intersections and the world.

Components:
    objects: Scene objects (shape, transform, material) and world-space normals
    intersection: Intersection records, hit selection and shading preparation
    world: Point light, world container, world intersection and shadow test
    showcase: The pattern showcase scene and its parameters

All scene values are immutable. Objects are aggregated into a World by
value, and the World is read-only input to rendering.
"""

from .intersection import (
    Computation,
    Intersection,
    hit,
    intersect,
    prepare_computation,
    sort_intersections,
)
from .objects import (
    SceneObject,
    normal_at,
    plane,
    sphere,
    with_material,
    with_transform,
    world_to_object,
)
from .showcase import ShowcaseParams, create_showcase_scene
from .world import (
    PointLight,
    World,
    default_world,
    intersect_world,
    is_shadowed,
    with_light,
)

__all__ = [
    # Objects module
    "SceneObject",
    "sphere",
    "plane",
    "with_transform",
    "with_material",
    "world_to_object",
    "normal_at",
    # Intersection module
    "Intersection",
    "Computation",
    "intersect",
    "sort_intersections",
    "hit",
    "prepare_computation",
    # World module
    "PointLight",
    "World",
    "intersect_world",
    "is_shadowed",
    "default_world",
    "with_light",
    # Showcase module
    "ShowcaseParams",
    "create_showcase_scene",
]
