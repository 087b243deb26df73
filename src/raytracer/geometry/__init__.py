"""Geometry module for shape primitives and local intersection.

Components:
    sphere: Unit sphere at the origin with ray-sphere intersection
    plane: Infinite XZ plane with ray-plane intersection
    shapes: Shape variants and dispatch to the local routines

All routines work in object space. Carrying rays and normals between world
and object space is the job of the scene module.
"""

from .plane import PLANE_NORMAL, intersect_plane, plane_normal
from .shapes import Shape, local_intersect, local_normal_at
from .sphere import intersect_sphere, sphere_normal

__all__ = [
    "Shape",
    "local_intersect",
    "local_normal_at",
    "intersect_sphere",
    "sphere_normal",
    "intersect_plane",
    "plane_normal",
    "PLANE_NORMAL",
]
