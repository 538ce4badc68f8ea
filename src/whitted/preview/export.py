"""Image export utilities for rendered images.

Rendered images are float arrays of shape (H, W, 3) holding linear colours.
Each channel is quantized to a byte by truncation, ``int(c * 255)``, then
clamped to [0, 255]; a channel of 0.5 therefore becomes 127.

Supported formats:
    - PPM (plain-text P3, one pixel per line)
    - PNG (8-bit via Pillow)

Example:
    >>> from src.whitted.preview.export import save_image
    >>> save_image(image, "render.ppm")
    >>> save_image(image, "render.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from src.whitted.preview.display import apply_gamma

PPM_MAX_VALUE = 255


def _check_image(image: npt.NDArray[np.floating]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")


def image_to_uint8(
    image: npt.NDArray[np.floating],
    *,
    gamma: float = 1.0,
) -> npt.NDArray[np.uint8]:
    """Convert a linear float image to uint8.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma encoding applied before quantization (default 1.0, none).

    Returns:
        8-bit image array of shape (H, W, 3).
    """
    _check_image(image)
    if gamma != 1.0:
        image = apply_gamma(image, gamma)
    scaled = np.trunc(np.asarray(image, dtype=np.float64) * PPM_MAX_VALUE)
    return np.clip(scaled, 0, PPM_MAX_VALUE).astype(np.uint8)


def ppm_header(width: int, height: int) -> str:
    """Plain PPM header: magic, dimensions, maximum channel value."""
    return f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n"


def ppm_pixel_data(image: npt.NDArray[np.floating]) -> str:
    """Pixel section of a plain PPM, rows top to bottom, one ``r g b`` per line."""
    pixels = image_to_uint8(image).reshape(-1, 3)
    return "".join(f"{r} {g} {b}\n" for r, g, b in pixels)


def image_to_ppm(image: npt.NDArray[np.floating]) -> str:
    """Encode an image as a complete plain PPM document."""
    _check_image(image)
    height, width = image.shape[:2]
    return ppm_header(width, height) + ppm_pixel_data(image)


def save_ppm(image: npt.NDArray[np.floating], filepath: str | Path) -> None:
    """Save an image as a plain-text (P3) PPM file."""
    Path(filepath).write_text(image_to_ppm(image), encoding="ascii")


def save_png(
    image: npt.NDArray[np.floating],
    filepath: str | Path,
    *,
    gamma: float = 1.0,
) -> None:
    """Save an image as an 8-bit RGB PNG.

    Args:
        image: Linear image array of shape (H, W, 3).
        filepath: Output file path.
        gamma: Gamma encoding applied before quantization (default 1.0).
    """
    pil_image = PILImage.fromarray(image_to_uint8(image, gamma=gamma))
    pil_image.save(filepath)


def save_image(image: npt.NDArray[np.floating], filepath: str | Path) -> None:
    """Save an image, choosing the format from the file suffix.

    Raises:
        ValueError: If the suffix is neither ``.ppm`` nor ``.png``.
    """
    suffix = Path(filepath).suffix.lower()
    if suffix == ".ppm":
        save_ppm(image, filepath)
    elif suffix == ".png":
        save_png(image, filepath)
    else:
        raise ValueError(f"Unsupported image format: {suffix!r} (use .ppm or .png)")
