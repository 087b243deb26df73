"""Procedural color patterns evaluated as a recursive tree.

Leaf patterns (stripe, gradient, ring, checker) color a point from a pair of
colors and may carry their own transform. Combinators build trees from them:
``Blend`` averages two sub-patterns and ``Perturb`` jitters the lookup point
with Perlin noise before delegating.

Three coordinate spaces are involved. A world point is first carried into the
owning object's space, then each leaf carries the point into its own pattern
space with the inverse of its transform.

Perturbing a blend perturbs each branch independently, inside that branch's
own pattern space, and averages the results.

Example:
    >>> from raytracer.core.color import BLACK, WHITE
    >>> from raytracer.core.tuples import Point
    >>> from raytracer.materials.pattern import pattern_at, stripe
    >>> pattern_at(stripe(WHITE, BLACK), Point(0.9, 0.0, 0.0)) == WHITE
    True
    >>> pattern_at(stripe(WHITE, BLACK), Point(1.0, 0.0, 0.0)) == BLACK
    True
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from raytracer.core.color import Color, blend
from raytracer.core.numeric import floor_int, is_even
from raytracer.core.transform import Transform, apply, inverse
from raytracer.core.tuples import Point
from raytracer.materials.perlin import perturb_point

if TYPE_CHECKING:
    from raytracer.scene.objects import SceneObject


# =============================================================================
# Pattern Variants
# =============================================================================


@dataclass(frozen=True)
class Stripe:
    """Alternates between two colors at every integer step in x.

    Attributes:
        color_a: Color where floor(x) is even.
        color_b: Color where floor(x) is odd.
        transform: Optional pattern transform, relative to the object.
    """

    color_a: Color
    color_b: Color
    transform: Transform | None = None


@dataclass(frozen=True)
class Gradient:
    """Linear ramp from color_a to color_b over every unit interval in x."""

    color_a: Color
    color_b: Color
    transform: Transform | None = None


@dataclass(frozen=True)
class Ring:
    """Concentric rings in the XZ plane alternating at integer radii."""

    color_a: Color
    color_b: Color
    transform: Transform | None = None


@dataclass(frozen=True)
class Checker:
    """3D checkerboard of unit cubes."""

    color_a: Color
    color_b: Color
    transform: Transform | None = None


@dataclass(frozen=True)
class Blend:
    """Average of two sub-patterns evaluated at the same point."""

    first: Pattern
    second: Pattern


@dataclass(frozen=True)
class Perturb:
    """A sub-pattern looked up at a noise-displaced point."""

    pattern: Pattern


Leaf = Union[Stripe, Gradient, Ring, Checker]
Pattern = Union[Stripe, Gradient, Ring, Checker, Blend, Perturb]


def stripe(color_a: Color, color_b: Color, transform: Transform | None = None) -> Stripe:
    """Create a stripe pattern."""
    return Stripe(color_a, color_b, transform)


def gradient(color_a: Color, color_b: Color, transform: Transform | None = None) -> Gradient:
    """Create a gradient pattern."""
    return Gradient(color_a, color_b, transform)


def ring(color_a: Color, color_b: Color, transform: Transform | None = None) -> Ring:
    """Create a ring pattern."""
    return Ring(color_a, color_b, transform)


def checker(color_a: Color, color_b: Color, transform: Transform | None = None) -> Checker:
    """Create a checker pattern."""
    return Checker(color_a, color_b, transform)


# =============================================================================
# Evaluation
# =============================================================================


def _to_pattern_space(leaf: Leaf, object_point: Point) -> Point:
    if leaf.transform is None:
        return object_point
    return apply(inverse(leaf.transform), object_point)


def leaf_color(leaf: Leaf, pattern_point: Point) -> Color:
    """Color of a leaf pattern at a point already in its pattern space.

    Args:
        leaf: A stripe, gradient, ring or checker pattern.
        pattern_point: The point in the leaf's own pattern space.

    Returns:
        The color the leaf rule assigns to the point.

    Raises:
        TypeError: If leaf is not a leaf pattern variant.
    """
    p = pattern_point
    if isinstance(leaf, Stripe):
        return leaf.color_a if is_even(floor_int(p.x)) else leaf.color_b
    if isinstance(leaf, Gradient):
        fraction = p.x - math.floor(p.x)
        return leaf.color_a + (leaf.color_b - leaf.color_a) * fraction
    if isinstance(leaf, Ring):
        radius = math.sqrt(p.x * p.x + p.z * p.z)
        return leaf.color_a if is_even(floor_int(radius)) else leaf.color_b
    if isinstance(leaf, Checker):
        total = floor_int(p.x) + floor_int(p.y) + floor_int(p.z)
        return leaf.color_a if is_even(total) else leaf.color_b
    raise TypeError(f"Unknown leaf pattern: {leaf!r}")


def _perturbed_at(pattern: Pattern, object_point: Point) -> Color:
    # Leaves are perturbed after their own transform, so the noise is
    # sampled in pattern space
    if isinstance(pattern, (Stripe, Gradient, Ring, Checker)):
        return leaf_color(pattern, perturb_point(_to_pattern_space(pattern, object_point)))
    if isinstance(pattern, Blend):
        return blend(
            _perturbed_at(pattern.first, object_point),
            _perturbed_at(pattern.second, object_point),
        )
    if isinstance(pattern, Perturb):
        return _perturbed_at(pattern.pattern, perturb_point(object_point))
    raise TypeError(f"Unknown pattern variant: {pattern!r}")


def pattern_at(pattern: Pattern, object_point: Point) -> Color:
    """Evaluate a pattern tree at a point in the owning object's space.

    Args:
        pattern: Any pattern variant.
        object_point: The point in object space. Leaf transforms are applied
            here, not by the caller.

    Returns:
        The pattern color at the point.

    Raises:
        TypeError: If pattern (or any sub-pattern) is not a known variant.
    """
    if isinstance(pattern, (Stripe, Gradient, Ring, Checker)):
        return leaf_color(pattern, _to_pattern_space(pattern, object_point))
    if isinstance(pattern, Blend):
        return blend(
            pattern_at(pattern.first, object_point),
            pattern_at(pattern.second, object_point),
        )
    if isinstance(pattern, Perturb):
        return _perturbed_at(pattern.pattern, object_point)
    raise TypeError(f"Unknown pattern variant: {pattern!r}")


def pattern_at_object(pattern: Pattern, obj: SceneObject, world_point: Point) -> Color:
    """Evaluate a pattern for an object at a world-space point.

    Args:
        pattern: The pattern to evaluate.
        obj: The object the pattern is attached to; its transform carries
            the world point into object space.
        world_point: The point in world space.

    Returns:
        The pattern color at the point.
    """
    if obj.transform is None:
        object_point = world_point
    else:
        object_point = apply(inverse(obj.transform), world_point)
    return pattern_at(pattern, object_point)
