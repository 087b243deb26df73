"""Materials module for surface appearance.

Components:
    material: Phong material parameters and the default material
    pattern: Procedural pattern tree (stripe, gradient, ring, checker,
        blend, perturb) and its evaluator
    perlin: Improved Perlin noise with a fixed permutation table
    phong: Phong lighting with ambient, diffuse and specular terms

Patterns are evaluated in their own pattern space, nested inside the
owning object's space.
"""

from .material import DEFAULT_MATERIAL, Material
from .pattern import (
    Blend,
    Checker,
    Gradient,
    Pattern,
    Perturb,
    Ring,
    Stripe,
    checker,
    gradient,
    leaf_color,
    pattern_at,
    pattern_at_object,
    ring,
    stripe,
)
from .perlin import PERMUTATION, noise, perturb_point
from .phong import lighting, surface_color

__all__ = [
    "Material",
    "DEFAULT_MATERIAL",
    "Pattern",
    "Stripe",
    "Gradient",
    "Ring",
    "Checker",
    "Blend",
    "Perturb",
    "stripe",
    "gradient",
    "ring",
    "checker",
    "leaf_color",
    "pattern_at",
    "pattern_at_object",
    "PERMUTATION",
    "noise",
    "perturb_point",
    "lighting",
    "surface_color",
]
