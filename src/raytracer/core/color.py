"""RGB color values and the named palette used by scenes.

Colors are unbounded floats; components above 1.0 or below 0.0 are allowed
during shading and only clamped when an image is encoded. Equality compares
components within EPSILON, so colors are not hashable.
"""

from dataclasses import dataclass

from raytracer.core.numeric import approx_equal


@dataclass(frozen=True, eq=False)
class Color:
    """A color as red, green and blue components.

    Attributes:
        red: Red component (1.0 is full intensity).
        green: Green component.
        blue: Blue component.
    """

    red: float
    green: float
    blue: float

    def __add__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: "Color | float") -> "Color":
        # Color * Color is the Hadamard (component-wise) product
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> "Color":
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Color(scalar * self.red, scalar * self.green, scalar * self.blue)

    def __neg__(self) -> "Color":
        return Color(-self.red, -self.green, -self.blue)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_equal(self.red, other.red)
            and approx_equal(self.green, other.green)
            and approx_equal(self.blue, other.blue)
        )

    def clamp(self, low: float = 0.0, high: float = 1.0) -> "Color":
        """Clamp every component into [low, high]."""
        return Color(
            min(max(self.red, low), high),
            min(max(self.green, low), high),
            min(max(self.blue, low), high),
        )

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the color as an (r, g, b) tuple."""
        return (self.red, self.green, self.blue)


def hadamard_product(c1: Color, c2: Color) -> Color:
    """Multiply two colors component by component."""
    return c1 * c2


def blend(c1: Color, c2: Color) -> Color:
    """Average two colors."""
    return 0.5 * (c1 + c2)


# =============================================================================
# Named Colors
# =============================================================================

BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)

# Palette for the showcase scene (sRGB byte values / 255)
SKY_BLUE = Color(135 / 255, 206 / 255, 235 / 255)
GRAY = Color(128 / 255, 128 / 255, 128 / 255)
HOT_PINK = Color(255 / 255, 105 / 255, 180 / 255)
PALE_GREEN = Color(152 / 255, 251 / 255, 152 / 255)
PURPLE = Color(128 / 255, 0 / 255, 128 / 255)
DEEP_PINK = Color(255 / 255, 20 / 255, 147 / 255)
POWDER_BLUE = Color(176 / 255, 224 / 255, 230 / 255)
YELLOW = Color(255 / 255, 255 / 255, 0 / 255)
