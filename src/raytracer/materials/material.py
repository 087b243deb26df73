"""Surface material parameters for Phong shading."""

from dataclasses import dataclass, field

from raytracer.core.color import WHITE, Color
from raytracer.materials.pattern import Pattern


@dataclass(frozen=True)
class Material:
    """Phong reflectance parameters for a surface.

    Attributes:
        color: Flat surface color, used when no pattern is set.
        ambient: Fraction of light reflected from the environment.
            Typical values range between 0 and 1.
        diffuse: Fraction of light reflected from a matte surface.
            Typical values range between 0 and 1.
        specular: Strength of the highlight reflected from the light itself.
            Typical values range between 0 and 1.
        shininess: Tightness of the specular highlight. Typical values range
            from 10 (large highlight) to 200 (small highlight).
        pattern: Optional pattern that overrides the flat color.
    """

    color: Color = field(default_factory=lambda: WHITE)
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    pattern: Pattern | None = None


DEFAULT_MATERIAL = Material()
