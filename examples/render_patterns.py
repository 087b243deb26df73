#!/usr/bin/env python3
"""Render the pattern showcase scene.

This script renders the showcase scene (checkered floor, perturbed striped
wall and three patterned spheres) with the Whitted-style ray caster and
writes the result as a PPM or PNG image, chosen by the output file suffix.

Usage:
    python -m examples.render_patterns [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --workers WORKERS   Number of render threads (default: executor default)
    --output OUTPUT     Output file path, .ppm or .png (default: patterns.ppm)
    --verbose           Enable debug logging from the renderer
    --quiet             Suppress progress output

Example:
    python -m examples.render_patterns --width 400 --height 200 --output patterns.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

import taichi as ti


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the pattern showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=200,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of render threads (default: executor default)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="patterns.ppm",
        help="Output file path, .ppm or .png (default: patterns.ppm)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging from the renderer",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_patterns(
    width: int = 200,
    height: int = 100,
    workers: int | None = None,
    output_path: str = "patterns.ppm",
    quiet: bool = False,
) -> Path:
    """Render the showcase scene and save it to a file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        workers: Number of render threads, or None for the executor default.
        output_path: Output file path. A .png suffix writes PNG, anything
            else writes PPM.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from raytracer.core.integrator import RenderConfig, render
    from raytracer.preview.export import save_png, write_ppm
    from raytracer.scene.showcase import ShowcaseParams, create_showcase_scene

    if not quiet:
        print(f"Creating showcase scene ({width}x{height})...")

    world, camera = create_showcase_scene(ShowcaseParams(width=width, height=height))
    config = RenderConfig(workers=workers)

    if not quiet:
        print(f"Rendering {width * height} pixels...")

    start_time = time.time()
    canvas = render(camera, world, config)

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".png":
        save_png(canvas, output_file)
    else:
        write_ppm(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Canvas storage uses f64 fields, so stay on the CPU backend
    ti.init(arch=ti.cpu)

    try:
        render_patterns(
            width=args.width,
            height=args.height,
            workers=args.workers,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
