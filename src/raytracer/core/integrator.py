"""Whitted-style shading and the render loop.

This module ties the pipeline together: for each pixel the camera produces a
ray, the ray is intersected with every object in the world, the nearest hit
is prepared and shaded with Phong lighting and a hard shadow test, and the
color is written into the image.

Every pixel is an independent pure function of (camera, world, x, y), so
rows are distributed over a thread pool. Each row writes only its own slice
of a preallocated buffer, which is copied into the canvas once at the end.

Example:
    >>> import math
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raytracer.camera.pinhole import Camera
    >>> from raytracer.core.color import Color
    >>> from raytracer.core.integrator import render
    >>> from raytracer.core.transform import view_transform
    >>> from raytracer.core.tuples import Point, Vector
    >>> from raytracer.scene.world import default_world
    >>>
    >>> view = view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0))
    >>> camera = Camera(11, 11, math.pi / 2, view)
    >>> image = render(camera, default_world())
    >>> image.get(5, 5) == Color(0.38066, 0.47583, 0.2855)
    True
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import numpy.typing as npt

from raytracer.camera.pinhole import Camera, ray_for_pixel
from raytracer.core.color import BLACK, Color
from raytracer.core.ray import Ray
from raytracer.materials.phong import lighting
from raytracer.preview.canvas import Canvas
from raytracer.scene.intersection import Computation, hit, prepare_computation
from raytracer.scene.world import World, intersect_world, is_shadowed

logger = logging.getLogger(__name__)


# =============================================================================
# Render Configuration
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Settings for a render that do not belong to the scene.

    Attributes:
        workers: Number of worker threads. None lets the executor choose.
        background: Color of pixels whose ray hits nothing.

    Example:
        >>> RenderConfig(workers=4).to_dict()
        {'workers': 4, 'background': [0.0, 0.0, 0.0]}
    """

    workers: int | None = None
    background: Color = field(default_factory=lambda: BLACK)

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            "workers": self.workers,
            "background": list(self.background.as_tuple()),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderConfig":
        """Build a config from a dictionary produced by to_dict.

        Missing keys take their default values.
        """
        background = data.get("background")
        return cls(
            workers=data.get("workers"),
            background=BLACK if background is None else Color(*background),
        )


# =============================================================================
# Shading
# =============================================================================


def shade_hit(world: World, comps: Computation) -> Color:
    """Shade a prepared hit, including the shadow test.

    Lighting and the shadow ray both use the over point.
    """
    shadowed = is_shadowed(world, comps.over_point)
    return lighting(
        comps.object.effective_material,
        comps.object,
        world.light,
        comps.over_point,
        comps.eye,
        comps.normal,
        shadowed,
    )


def color_at(world: World, ray: Ray, background: Color = BLACK) -> Color:
    """Trace a ray into the world and return the color it sees.

    Args:
        world: The world to render.
        ray: A world-space ray.
        background: Color returned when nothing is hit.

    Returns:
        The shaded color of the nearest hit, or the background color.
    """
    nearest = hit(intersect_world(world, ray))
    if nearest is None:
        return background
    return shade_hit(world, prepare_computation(nearest, ray))


# =============================================================================
# Render Loop
# =============================================================================


def render_row(
    camera: Camera, world: World, y: int, background: Color = BLACK
) -> npt.NDArray[np.float64]:
    """Compute every pixel in one row of the image.

    Args:
        camera: The camera.
        world: The world to render.
        y: The row index, 0 at the top.
        background: Color of pixels whose ray hits nothing.

    Returns:
        Array of shape (camera.hsize, 3) with the row's colors.
    """
    row = np.zeros((camera.hsize, 3), dtype=np.float64)
    for x in range(camera.hsize):
        color = color_at(world, ray_for_pixel(camera, x, y), background)
        row[x] = color.as_tuple()
    return row


def render(camera: Camera, world: World, config: RenderConfig | None = None) -> Canvas:
    """Render the world as seen by the camera.

    Requires Taichi to be initialized, since the result is a Canvas.

    Args:
        camera: The camera; its hsize and vsize set the image size.
        world: The world to render.
        config: Optional render settings. Defaults to RenderConfig().

    Returns:
        A canvas of size camera.hsize x camera.vsize.
    """
    if config is None:
        config = RenderConfig()

    logger.debug(
        "Rendering %dx%d image with %s workers",
        camera.hsize,
        camera.vsize,
        config.workers if config.workers is not None else "default",
    )
    start = time.perf_counter()

    # Computed once here so worker threads only read the cached inverse
    _ = camera.inverse_transform

    image = np.zeros((camera.vsize, camera.hsize, 3), dtype=np.float64)

    def _fill_row(y: int) -> None:
        image[y] = render_row(camera, world, y, config.background)

    with ThreadPoolExecutor(max_workers=config.workers) as executor:
        # Consuming the iterator re-raises any worker exception
        for _ in executor.map(_fill_row, range(camera.vsize)):
            pass

    canvas = Canvas(camera.hsize, camera.vsize)
    canvas.from_numpy(image)

    logger.debug(
        "Rendered %d pixels in %.2fs",
        camera.hsize * camera.vsize,
        time.perf_counter() - start,
    )
    return canvas
