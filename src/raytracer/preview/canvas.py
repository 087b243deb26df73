"""Pixel buffer backed by a Taichi vector field.

The canvas stores one float64 RGB triple per pixel in a Taichi field of shape
(width, height), indexed as (x, y) with (0, 0) at the top-left corner.
Colors are stored unclamped.

Taichi must be initialized (``ti.init``) before a canvas is created.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raytracer.core.color import RED
    >>> from raytracer.preview.canvas import Canvas
    >>> canvas = Canvas(10, 20)
    >>> canvas.set(2, 3, RED)
    >>> canvas.get(2, 3) == RED
    True
"""

import numpy as np
import numpy.typing as npt
import taichi as ti

from raytracer.core.color import BLACK, Color


class Canvas:
    """A width x height grid of colors.

    Attributes:
        pixels: The Taichi Vector.field of shape (width, height) holding the
            pixel colors.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a black canvas.

        Args:
            width: Number of pixel columns.
            height: Number of pixel rows.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        # Fields are zero-initialized, i.e. black
        self.pixels: ti.MatrixField = ti.Vector.field(3, dtype=ti.f64, shape=(width, height))

    @property
    def width(self) -> int:
        """Number of pixel columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of pixel rows."""
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def get(self, x: int, y: int) -> Color:
        """Read the color of a pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        value = self.pixels[x, y]
        return Color(float(value[0]), float(value[1]), float(value[2]))

    def set(self, x: int, y: int, color: Color) -> None:
        """Write the color of a pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self.pixels[x, y] = [color.red, color.green, color.blue]

    def fill(self, color: Color = BLACK) -> None:
        """Set every pixel to the same color."""
        image = np.empty((self._height, self._width, 3), dtype=np.float64)
        image[:, :] = color.as_tuple()
        self.from_numpy(image)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Copy the pixels into an array of shape (height, width, 3)."""
        # Fields are indexed (x, y); images are (row, column)
        return np.ascontiguousarray(np.transpose(self.pixels.to_numpy(), (1, 0, 2)))

    def from_numpy(self, image: npt.NDArray[np.floating]) -> None:
        """Overwrite every pixel from an array of shape (height, width, 3).

        Raises:
            ValueError: If the array shape does not match the canvas.
        """
        expected_shape = (self._height, self._width, 3)
        if image.shape != expected_shape:
            raise ValueError(
                f"Image shape {image.shape} doesn't match expected {expected_shape}"
            )
        transposed = np.ascontiguousarray(np.transpose(image, (1, 0, 2)), dtype=np.float64)
        self.pixels.from_numpy(transposed)
