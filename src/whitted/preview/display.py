"""Matplotlib-based preview display for rendered images.

Rendered images are linear colours with unclamped channels. For display they
are clamped to [0, 1] and, optionally, gamma encoded.

Example:
    >>> from src.whitted.preview.display import show_preview
    >>> from src.whitted.core.renderer import render
    >>> from src.whitted.scene.showcase import create_showcase_scene
    >>>
    >>> world, camera = create_showcase_scene()
    >>> show_preview(render(camera, world), gamma=2.2)
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt


def apply_gamma(
    image: npt.NDArray[np.floating],
    gamma: float = 2.2,
) -> npt.NDArray[np.float64]:
    """Clamp an image to [0, 1] and apply gamma encoding.

    Args:
        image: Linear image array of shape (H, W, 3).
        gamma: Gamma value. 1.0 only clamps.

    Returns:
        Display-ready image in [0, 1] range.

    Raises:
        ValueError: If gamma is not positive.
    """
    if gamma <= 0.0:
        raise ValueError(f"Gamma = {gamma} must be positive")

    # Clamp before gamma to avoid NaN from negative values
    result = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    if gamma == 1.0:
        return result
    return np.power(result, 1.0 / gamma)


def show_preview(
    image: npt.NDArray[np.floating],
    *,
    gamma: float = 1.0,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 6),
    block: bool = True,
) -> None:
    """Display a rendered image in a Matplotlib figure.

    Args:
        image: Linear image array of shape (H, W, 3), as returned by render().
        gamma: Gamma correction value (default 1.0, matching the exported files).
        title: Custom title (default shows the image size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until figure is closed.
    """
    import matplotlib.pyplot as plt

    display_image = apply_gamma(image, gamma)
    height, width = display_image.shape[:2]

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    # Nearest-neighbour keeps small renders crisp when scaled up
    ax.imshow(display_image, interpolation="nearest")
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {width}x{height}")

    plt.tight_layout()
    plt.show(block=block)
