"""Whitted-style ray caster with Phong shading and procedural patterns.

This package renders still images by casting one ray per pixel through a
scene of transformed spheres and planes, shading the nearest hit with the
Phong model and hard shadows from a single point light.

Subpackages:
    core: Matrices, points and vectors, colors, transforms, rays and the render driver
    geometry: Unit shape primitives and local intersection
    materials: Materials, procedural patterns, Perlin noise and Phong lighting
    scene: Scene objects, intersections, the world and the showcase scene
    camera: Pinhole camera with per-pixel ray generation
    preview: Taichi-backed canvas and PPM/PNG export
"""

__version__ = "0.1.0"
