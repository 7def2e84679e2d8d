#!/usr/bin/env python3
"""Render the default two-sphere world on a checkered floor.

This script demonstrates end-to-end rendering with phongray. It builds the
default world, adds a floor plane with a checkers pattern, positions the
camera with a view transform and writes the image as PPM or PNG (chosen by
the output file extension).

Usage:
    python -m examples.render_default_world [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --fov DEGREES       Field of view in degrees (default: 60)
    --output OUTPUT     Output file path, .ppm or .png (default: default_world.png)
    --backend BACKEND   Taichi backend, cpu or gpu (default: cpu)
    --log-level LEVEL   Logging level (default: INFO)
    --quiet             Suppress progress output

Example:
    python -m examples.render_default_world --width 400 --height 200 --output world.ppm
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

logger = logging.getLogger("render_default_world")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the default world on a checkered floor.",
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
        "--fov",
        type=float,
        default=60.0,
        help="Field of view in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="default_world.png",
        help="Output file path, .ppm or .png (default: default_world.png)",
    )
    parser.add_argument(
        "--backend",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_default_world(
    width: int = 200,
    height: int = 100,
    fov_degrees: float = 60.0,
    output_path: str = "default_world.png",
    quiet: bool = False,
) -> Path:
    """Render the scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        output_path: Output file path; ".ppm" writes PPM, anything else PNG.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    # Lazy imports to allow Taichi initialization first
    from phongray.camera.camera import Camera
    from phongray.core.color import Color
    from phongray.core.matrix import Matrix4, view_transform
    from phongray.core.tuples import Point, Vector
    from phongray.materials.material import Material
    from phongray.patterns.banded import Checkers
    from phongray.preview.export import save_png, save_ppm
    from phongray.scene.builder import SceneBuilder
    from phongray.scene.default_world import create_default_world

    builder = SceneBuilder()
    world = create_default_world(builder=builder)
    floor = builder.plane(
        transform=Matrix4.identity().translate(0, -1, 0),
        material=Material(
            pattern=Checkers(Color(0.9, 0.9, 0.9), Color(0.2, 0.3, 0.4)),
            specular=0.0,
        ),
    )
    world.add(floor)

    camera = Camera(
        width,
        height,
        math.radians(fov_degrees),
        view_transform(Point(0, 1.5, -5), Point(0, 0, 0), Vector(0, 1, 0)),
    )

    start_time = time.time()

    def progress_callback(current: int, target: int) -> None:
        if not quiet:
            progress_pct = (current / target) * 100 if target > 0 else 0
            print(
                f"\r  Progress: {current}/{target} rows ({progress_pct:.1f}%)",
                end="",
                flush=True,
            )

    canvas = camera.render(world, progress=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    from phongray.backend import init_backend

    init_backend(args.backend)

    try:
        render_default_world(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        logger.error("Render failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
