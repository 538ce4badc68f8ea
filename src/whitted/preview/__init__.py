"""Preview module for output and visualization.

Components:
    display: Matplotlib-based preview display
    export: PPM and PNG image export

Example:
    >>> from src.whitted.preview import save_image, show_preview
    >>> save_image(image, "render.png")
    >>> show_preview(image)
"""

from src.whitted.preview.display import apply_gamma, show_preview
from src.whitted.preview.export import (
    image_to_ppm,
    image_to_uint8,
    ppm_header,
    ppm_pixel_data,
    save_image,
    save_png,
    save_ppm,
)

__all__ = [
    "show_preview",
    "apply_gamma",
    "image_to_uint8",
    "image_to_ppm",
    "ppm_header",
    "ppm_pixel_data",
    "save_ppm",
    "save_png",
    "save_image",
]
