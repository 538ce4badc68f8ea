#!/usr/bin/env python3
"""Render a scene to a PPM or PNG image.

Renders either a YAML scene file or, without --scene, the built-in showcase
scene (a sphere in the corner of two walls). The output format follows the
file suffix.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene PATH            YAML scene file (default: built-in showcase scene)
    --output OUTPUT         Output file path, .ppm or .png (default: render.ppm)
    --width WIDTH           Override the camera's image width in pixels
    --height HEIGHT         Override the camera's image height in pixels
    --workers N             Worker processes (default: CPU count)
    --max-recursion DEPTH   Reflection/refraction depth (default: 5)
    --preview               Show the result in a Matplotlib window
    --quiet                 Suppress progress output
    --verbose               Enable debug logging

Example:
    python -m examples.render_scene --scene examples/scenes/glass.yaml --output glass.png
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from src.whitted.camera.pinhole import Camera
from src.whitted.core.integrator import MAX_RECURSION
from src.whitted.core.renderer import RenderSettings, render
from src.whitted.preview.export import save_image
from src.whitted.scene.loader import load_scene
from src.whitted.scene.showcase import create_showcase_scene


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render a scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="YAML scene file (default: built-in showcase scene)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.ppm",
        help="Output file path, .ppm or .png (default: render.ppm)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Override the camera's image width in pixels",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=None,
        help="Override the camera's image height in pixels",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--max-recursion",
        type=int,
        default=MAX_RECURSION,
        help=f"Reflection/refraction depth (default: {MAX_RECURSION})",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def resize_camera(camera: Camera, width: int | None, height: int | None) -> Camera:
    """Return a camera with the same view but a different image size."""
    if width is None and height is None:
        return camera
    return Camera(
        hsize=width if width is not None else camera.hsize,
        vsize=height if height is not None else camera.vsize,
        field_of_view=camera.field_of_view,
        transform=camera.transform,
    )


def render_scene(
    scene_path: str | None = None,
    output_path: str = "render.ppm",
    width: int | None = None,
    height: int | None = None,
    settings: RenderSettings | None = None,
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene and save it to file.

    Args:
        scene_path: YAML scene file, or None for the showcase scene.
        output_path: Output file path (.ppm or .png).
        width: Optional image width override.
        height: Optional image height override.
        settings: Render settings (recursion depth, workers).
        preview: If True, display the image after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    if scene_path is None:
        if not quiet:
            print("Creating showcase scene...")
        world, camera = create_showcase_scene()
    else:
        if not quiet:
            print(f"Loading scene from {scene_path}...")
        world, camera = load_scene(scene_path)

    camera = resize_camera(camera, width, height)

    if not quiet:
        print(
            f"Rendering {camera.hsize}x{camera.vsize}, "
            f"{len(world.objects)} object(s), {len(world.lights)} light(s)..."
        )

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (done / total) * 100 if total > 0 else 0
            pixels_per_sec = done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {done}/{total} pixels "
                f"({progress_pct:.1f}%) - {pixels_per_sec:.0f} px/s",
                end="",
                flush=True,
            )

    image = render(camera, world, settings=settings, callback=progress_callback)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_image(image, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if preview:
        from src.whitted.preview.display import show_preview

        show_preview(image, title=output_file.name)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        settings = RenderSettings(max_recursion=args.max_recursion, workers=args.workers)
        render_scene(
            scene_path=args.scene,
            output_path=args.output,
            width=args.width,
            height=args.height,
            settings=settings,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
