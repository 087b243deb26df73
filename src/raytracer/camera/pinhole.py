"""Pinhole camera model for per-pixel ray generation.

The camera sits at the origin of its own space looking toward -z, with the
canvas one unit in front of it at z = -1. The view matrix (usually built
with ``view_transform``) orients the world relative to the camera; rays are
carried back into world space with its inverse.

The canvas half extents come from the field of view and the aspect ratio:

    half_view = tan(field_of_view / 2)
    aspect = hsize / vsize

The longer canvas side spans half_view on each side of the centre; the
shorter side is scaled by the aspect ratio.

Example:
    >>> import math
    >>> from raytracer.camera.pinhole import Camera, ray_for_pixel
    >>> from raytracer.core.tuples import Point, Vector
    >>> camera = Camera(201, 101, math.pi / 2)
    >>> ray = ray_for_pixel(camera, 100, 50)
    >>> ray.origin == Point(0.0, 0.0, 0.0), ray.direction == Vector(0.0, 0.0, -1.0)
    (True, True)
"""

import math
from dataclasses import dataclass, field
from functools import cached_property

from raytracer.core.matrix import Matrix
from raytracer.core.ray import Ray
from raytracer.core.transform import apply_matrix
from raytracer.core.tuples import ORIGIN, Point, normalize

# =============================================================================
# Camera Data Structure
# =============================================================================


@dataclass(frozen=True)
class Camera:
    """A pinhole camera.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle in radians covered by the longer canvas side.
        transform: View matrix orienting the world relative to the camera.
            Defaults to the 4x4 identity.
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Matrix = field(default_factory=lambda: Matrix.identity(4))

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(
                f"Camera dimensions must be positive, got {self.hsize}x{self.vsize}"
            )

    @property
    def aspect_ratio(self) -> float:
        """Horizontal size over vertical size."""
        return self.hsize / self.vsize

    @property
    def half_width(self) -> float:
        """Half the width of the canvas in world units."""
        half_view = math.tan(self.field_of_view / 2.0)
        if self.aspect_ratio >= 1.0:
            return half_view
        return half_view * self.aspect_ratio

    @property
    def half_height(self) -> float:
        """Half the height of the canvas in world units."""
        half_view = math.tan(self.field_of_view / 2.0)
        if self.aspect_ratio >= 1.0:
            return half_view / self.aspect_ratio
        return half_view

    @property
    def pixel_size(self) -> float:
        """Width of one (square) pixel in world units."""
        return self.half_width * 2.0 / self.hsize

    @cached_property
    def inverse_transform(self) -> Matrix:
        """Inverse of the view matrix, computed once per camera."""
        return self.transform.inverse()


# =============================================================================
# Ray Generation
# =============================================================================


def ray_for_pixel(camera: Camera, x: float, y: float) -> Ray:
    """Build the world-space ray through the centre of a pixel.

    Args:
        camera: The camera.
        x: Pixel column, 0 at the left edge.
        y: Pixel row, 0 at the top edge.

    Returns:
        A ray from the camera position with a normalized direction.
    """
    # Offset from the canvas edge to the pixel centre
    x_offset = (x + 0.5) * camera.pixel_size
    y_offset = (y + 0.5) * camera.pixel_size

    # The camera looks toward -z, so +x is to the left
    world_x = camera.half_width - x_offset
    world_y = camera.half_height - y_offset

    inverse = camera.inverse_transform
    pixel = apply_matrix(inverse, Point(world_x, world_y, -1.0))
    origin = apply_matrix(inverse, ORIGIN)
    return Ray(origin, normalize(pixel - origin))
