"""Image export for rendered canvases.

Supported formats:
    - PPM (plain-text P3, 8-bit channels)
    - PNG (8-bit RGB via Pillow)

Both formats quantize each channel the same way: the component is scaled to
0..255, clamped, and rounded half to even, so 126.5 becomes 126 and 127.5
becomes 128. Scaling and clamping run as a Taichi kernel over the canvas
field; rounding is done by numpy on the host.

A PPM file consists of the header ``P3``, the dimensions and the maximum
channel value, followed by one block of lines per canvas row. Values are
separated by single spaces, no line is longer than 70 characters, and the
file ends with a newline.

Example:
    >>> from raytracer.preview.canvas import Canvas
    >>> from raytracer.preview.export import canvas_to_ppm
    >>> canvas_to_ppm(Canvas(1, 1))
    'P3\\n1 1\\n255\\n0 0 0\\n'
"""

from pathlib import Path
from typing import Any

import numpy as np
import numpy.typing as npt
import taichi as ti
from PIL import Image as PILImage

from raytracer.preview.canvas import Canvas

# Maximum channel value written to the PPM header
MAX_COLOR_VALUE = 255

# Maximum length of a line of pixel data in a PPM file
MAX_LINE_LENGTH = 70


# Lazy kernel holder - kernel is created on first use after Taichi is initialized
_quantize_kernel: Any = None


def _get_quantize_kernel() -> Any:
    """Get or create the quantization kernel."""
    global _quantize_kernel
    if _quantize_kernel is None:

        @ti.kernel
        def _kernel(pixels: ti.template(), out: ti.types.ndarray()):
            for x, y in pixels:
                for c in ti.static(range(3)):
                    out[y, x, c] = ti.min(ti.max(pixels[x, y][c] * 255.0, 0.0), 255.0)

        _quantize_kernel = _kernel
    return _quantize_kernel


def quantize(canvas: Canvas) -> npt.NDArray[np.int32]:
    """Convert canvas colors to integer channel values.

    Args:
        canvas: The canvas to convert.

    Returns:
        Array of shape (height, width, 3) with values in 0..255.
    """
    scaled = np.zeros((canvas.height, canvas.width, 3), dtype=np.float64)
    _get_quantize_kernel()(canvas.pixels, scaled)
    # np.rint rounds half to even
    return np.rint(scaled).astype(np.int32)


# =============================================================================
# PPM
# =============================================================================


def _wrap_values(values: list[str]) -> list[str]:
    lines: list[str] = []
    current = ""
    for value in values:
        if not current:
            current = value
        elif len(current) + 1 + len(value) > MAX_LINE_LENGTH:
            lines.append(current)
            current = value
        else:
            current = f"{current} {value}"
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """Encode a canvas as plain PPM (P3) text.

    Args:
        canvas: The canvas to encode.

    Returns:
        The complete file contents, ending with a newline.
    """
    channels = quantize(canvas)
    lines = ["P3", f"{canvas.width} {canvas.height}", str(MAX_COLOR_VALUE)]
    for row in channels:
        # Each canvas row starts a new line
        lines.extend(_wrap_values([str(int(v)) for v in row.reshape(-1)]))
    return "\n".join(lines) + "\n"


def write_ppm(canvas: Canvas, filepath: str | Path) -> Path:
    """Write a canvas to a PPM file, creating parent directories.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path that was written.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(canvas_to_ppm(canvas), encoding="ascii")
    return path


# =============================================================================
# PNG
# =============================================================================


def save_png(canvas: Canvas, filepath: str | Path) -> Path:
    """Save a canvas as an 8-bit RGB PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).

    Returns:
        The path that was written.
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    image_uint8 = quantize(canvas).astype(np.uint8)
    pil_image = PILImage.fromarray(image_uint8)
    pil_image.save(path)
    return path
