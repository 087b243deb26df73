"""Preview module for pixel storage and image output.

Components:
    canvas: Taichi-backed pixel buffer with numpy conversion
    export: PPM (P3) encoding and PPM/PNG writers

Taichi must be initialized before a Canvas is created.
"""

from .canvas import Canvas
from .export import MAX_LINE_LENGTH, canvas_to_ppm, quantize, save_png, write_ppm

__all__ = [
    "Canvas",
    "canvas_to_ppm",
    "quantize",
    "write_ppm",
    "save_png",
    "MAX_LINE_LENGTH",
]
