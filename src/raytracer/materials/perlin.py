"""Improved Perlin noise over a fixed permutation table.

The noise function is Ken Perlin's 2002 reference algorithm: the unit cube
containing the point is hashed through a doubled 256-entry permutation table,
each corner contributes a gradient chosen from the low four bits of its hash,
and the contributions are blended with a quintic fade curve.

Using a fixed table makes every render of the same scene bit-identical.

Example:
    >>> from raytracer.core.tuples import Point
    >>> from raytracer.materials.perlin import noise, perturb_point
    >>> noise(0.0, 0.0, 0.0) == 0.0
    True
    >>> perturb_point(Point(0.0, 0.0, 0.0))
    Point(x=-0.5, y=-0.5, z=-0.5)
"""

import math

from raytracer.core.numeric import floor_int
from raytracer.core.tuples import Point, Vector

# =============================================================================
# Permutation Table
# =============================================================================

PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)  # fmt: skip

# Doubled so corner lookups up to index 511 never wrap
_P = PERMUTATION + PERMUTATION


# =============================================================================
# Noise Helpers
# =============================================================================


def fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def lerp(t: float, a: float, b: float) -> float:
    """Linear interpolation from a to b."""
    return a + t * (b - a)


def grad(hash_code: int, x: float, y: float, z: float) -> float:
    """Dot the offset (x, y, z) with one of 12 gradient directions.

    Args:
        hash_code: Permutation value for a cube corner; only the low four
            bits are used.
        x: Offset from the corner along x.
        y: Offset from the corner along y.
        z: Offset from the corner along z.

    Returns:
        The gradient contribution of the corner.
    """
    h = hash_code & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (u if h & 1 == 0 else -u) + (v if h & 2 == 0 else -v)


def noise(x: float, y: float, z: float) -> float:
    """Evaluate 3D Perlin noise at a point.

    Args:
        x: X coordinate.
        y: Y coordinate.
        z: Z coordinate.

    Returns:
        A smoothly varying value, zero at every integer lattice point.
    """
    # Unit cube that contains the point
    xi = floor_int(x) & 255
    yi = floor_int(y) & 255
    zi = floor_int(z) & 255

    # Relative position inside the cube
    x -= math.floor(x)
    y -= math.floor(y)
    z -= math.floor(z)

    u = fade(x)
    v = fade(y)
    w = fade(z)

    # Hash the 8 cube corners
    a = _P[xi] + yi
    aa = _P[a] + zi
    ab = _P[a + 1] + zi
    b = _P[xi + 1] + yi
    ba = _P[b] + zi
    bb = _P[b + 1] + zi

    return lerp(
        w,
        lerp(
            v,
            lerp(u, grad(_P[aa], x, y, z), grad(_P[ba], x - 1.0, y, z)),
            lerp(u, grad(_P[ab], x, y - 1.0, z), grad(_P[bb], x - 1.0, y - 1.0, z)),
        ),
        lerp(
            v,
            lerp(u, grad(_P[aa + 1], x, y, z - 1.0), grad(_P[ba + 1], x - 1.0, y, z - 1.0)),
            lerp(
                u,
                grad(_P[ab + 1], x, y - 1.0, z - 1.0),
                grad(_P[bb + 1], x - 1.0, y - 1.0, z - 1.0),
            ),
        ),
    )


def perturb_point(point: Point) -> Point:
    """Displace a point by its noise value minus 0.5 along every axis."""
    offset = noise(point.x, point.y, point.z) - 0.5
    return point + Vector(offset, offset, offset)
