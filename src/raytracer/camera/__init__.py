"""Camera module for primary ray generation.

Components:
    pinhole: Pinhole camera with field-of-view projection and a view matrix
"""

from .pinhole import Camera, ray_for_pixel

__all__ = [
    "Camera",
    "ray_for_pixel",
]
