"""Pattern showcase scene.

A checkered ground plane, a back wall with a perturbed blend of two crossed
stripe patterns, and three spheres with ring, gradient and checker patterns,
lit by one white light above and to the left of the camera.

Example:
    >>> from raytracer.scene.showcase import ShowcaseParams, create_showcase_scene
    >>> world, camera = create_showcase_scene(ShowcaseParams(width=100, height=50))
    >>> len(world.objects)
    5
    >>> camera.hsize, camera.vsize
    (100, 50)
"""

import math
from dataclasses import dataclass

from raytracer.camera.pinhole import Camera
from raytracer.core.color import (
    BLUE,
    DEEP_PINK,
    GRAY,
    HOT_PINK,
    PALE_GREEN,
    POWDER_BLUE,
    PURPLE,
    SKY_BLUE,
    WHITE,
    YELLOW,
    Color,
)
from raytracer.core.transform import (
    Axis,
    Combination,
    Rotation,
    Scaling,
    Translation,
    uniform_scaling,
    view_transform,
)
from raytracer.core.tuples import Point, Vector
from raytracer.materials.material import Material
from raytracer.materials.pattern import Blend, Perturb, checker, gradient, ring, stripe
from raytracer.scene.objects import SceneObject, plane, sphere
from raytracer.scene.world import PointLight, World

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Parameters for configuring the showcase scene.

    Attributes:
        width: Image width in pixels. Default is 200.
        height: Image height in pixels. Default is 100.
        field_of_view: Camera field of view in radians. Default is pi/3.
        light_position: World-space light position.
            Default is (-10.0, 10.0, -10.0).
        light_color: RGB intensity of the light. Default is white.

    Example:
        >>> params = ShowcaseParams()
        >>> params.width, params.height
        (200, 100)
        >>> custom = ShowcaseParams(width=800, height=400, light_color=(1.0, 0.9, 0.8))
    """

    width: int = 200
    height: int = 100
    field_of_view: float = math.pi / 3.0
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_color: tuple[float, float, float] = (1.0, 1.0, 1.0)


# Camera placement
CAMERA_FROM = Point(0.0, 1.5, -5.0)
CAMERA_TO = Point(0.0, 1.0, 0.0)
CAMERA_UP = Vector(0.0, 1.0, 0.0)


# =============================================================================
# Scene Objects
# =============================================================================


def _ground() -> SceneObject:
    return plane(
        transform=Rotation(Axis.Z, 0.0),
        material=Material(pattern=checker(SKY_BLUE, GRAY, uniform_scaling(0.9))),
    )


def _wall() -> SceneObject:
    # Two stripe sets crossed at right angles, blended and perturbed
    crossed_stripes = Blend(
        stripe(
            WHITE,
            HOT_PINK,
            Combination([Rotation(Axis.Y, math.pi / 4.0), uniform_scaling(0.7)]),
        ),
        stripe(
            WHITE,
            HOT_PINK,
            Combination([Rotation(Axis.Y, 3.0 * math.pi / 4.0), uniform_scaling(0.7)]),
        ),
    )
    # Stand the floor plane up, turn it to face the camera diagonally, push it back
    return plane(
        transform=Combination(
            [
                Rotation(Axis.Z, math.pi / 2.0),
                Rotation(Axis.Y, -math.pi / 4.0),
                Translation(0.0, 0.0, 5.0),
            ]
        ),
        material=Material(pattern=Perturb(crossed_stripes)),
    )


def _middle_sphere() -> SceneObject:
    rings = ring(
        PALE_GREEN,
        PURPLE,
        Combination(
            [
                uniform_scaling(0.09),
                Rotation(Axis.X, math.pi / 4.0),
                Rotation(Axis.Z, math.pi / 4.0),
            ]
        ),
    )
    return sphere(
        transform=Translation(-0.5, 1.0, 0.5),
        material=Material(diffuse=0.7, specular=0.3, shininess=30.0, pattern=Perturb(rings)),
    )


def _right_sphere() -> SceneObject:
    ramp = gradient(
        DEEP_PINK,
        BLUE,
        Combination(
            [
                Translation(1.5, 0.0, 0.0),
                Scaling(2.0, 0.0, 0.0),
                Rotation(Axis.Y, math.pi / 6.0),
            ]
        ),
    )
    return sphere(
        transform=Combination([uniform_scaling(0.5), Translation(1.5, 0.5, -0.5)]),
        material=Material(diffuse=0.7, specular=0.3, shininess=40.0, pattern=ramp),
    )


def _left_sphere() -> SceneObject:
    return sphere(
        transform=Combination([uniform_scaling(0.33), Translation(-1.5, 0.33, -0.75)]),
        material=Material(
            diffuse=1.0,
            specular=0.3,
            shininess=10.0,
            pattern=checker(POWDER_BLUE, YELLOW, uniform_scaling(0.4)),
        ),
    )


# =============================================================================
# Showcase Factory
# =============================================================================


def create_showcase_scene(params: ShowcaseParams | None = None) -> tuple[World, Camera]:
    """Create the pattern showcase world and its camera.

    Args:
        params: Optional ShowcaseParams for image size, field of view and
            light. If None, uses default ShowcaseParams().

    Returns:
        A tuple of (World, Camera).
    """
    if params is None:
        params = ShowcaseParams()

    light = PointLight(Point(*params.light_position), Color(*params.light_color))
    objects = [_ground(), _wall(), _middle_sphere(), _left_sphere(), _right_sphere()]
    world = World(objects, light)

    camera = Camera(
        params.width,
        params.height,
        params.field_of_view,
        view_transform(CAMERA_FROM, CAMERA_TO, CAMERA_UP),
    )
    return world, camera
