"""Parallel render loop.

Every pixel is an independent task: its index ``i`` in ``[0, hsize * vsize)``
maps to ``(x, y) = (i % hsize, i // hsize)``, the camera builds the primary
ray, and ``colour_at`` resolves it. Pixel indices are split into contiguous
chunks and handed to a ``multiprocessing.Pool``; the read-only World and
Camera reach each worker once, through the pool initializer, and every chunk
writes a disjoint slice of the output array.

A render either completes or raises. Partial images are never returned.

Example:
    >>> from src.whitted.core.renderer import render
    >>> from src.whitted.scene.showcase import create_showcase_scene
    >>> world, camera = create_showcase_scene(width=64, height=32)
    >>> image = render(camera, world, workers=4)
    >>> image.shape
    (32, 64, 3)
"""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable
from dataclasses import dataclass
from multiprocessing import Pool

import numpy as np
import numpy.typing as npt

from src.whitted.camera.pinhole import Camera
from src.whitted.core.integrator import MAX_RECURSION, colour_at
from src.whitted.scene.world import World

logger = logging.getLogger(__name__)

# Callback receives (pixels_done, pixels_total)
ProgressCallback = Callable[[int, int], None]

# Pixels per task handed to a worker
DEFAULT_CHUNK_SIZE = 256


@dataclass(frozen=True)
class RenderSettings:
    """Knobs for a render pass.

    Attributes:
        max_recursion: Reflection/refraction depth budget per camera ray.
        workers: Number of worker processes. 1 renders in-process; None uses
            the machine's CPU count.
        chunk_size: Number of consecutive pixel indices per task.
    """

    max_recursion: int = MAX_RECURSION
    workers: int | None = None
    chunk_size: int = DEFAULT_CHUNK_SIZE

    def __post_init__(self) -> None:
        if self.max_recursion < 0:
            raise ValueError(f"max_recursion = {self.max_recursion} must be >= 0")
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers = {self.workers} must be >= 1")
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size = {self.chunk_size} must be >= 1")

    def resolved_workers(self) -> int:
        return self.workers if self.workers is not None else (os.cpu_count() or 1)


# =============================================================================
# Per-pixel Work
# =============================================================================


def pixel_colour(
    camera: Camera, world: World, index: int, max_recursion: int = MAX_RECURSION
) -> tuple[float, float, float]:
    """Resolve the colour of the pixel with flat index ``index``."""
    x = index % camera.hsize
    y = index // camera.hsize
    return colour_at(world, camera.ray_for_pixel(x, y), max_recursion).as_tuple()


def render_chunk(
    camera: Camera, world: World, start: int, stop: int, max_recursion: int
) -> npt.NDArray[np.float64]:
    """Render pixel indices ``[start, stop)`` into a ``(stop - start, 3)`` array."""
    out = np.empty((stop - start, 3), dtype=np.float64)
    for offset, index in enumerate(range(start, stop)):
        out[offset] = pixel_colour(camera, world, index, max_recursion)
    return out


# Worker-process state, populated once per worker by _init_worker
_worker_camera: Camera | None = None
_worker_world: World | None = None
_worker_max_recursion: int = MAX_RECURSION


def _init_worker(camera: Camera, world: World, max_recursion: int) -> None:
    global _worker_camera, _worker_world, _worker_max_recursion
    _worker_camera = camera
    _worker_world = world
    _worker_max_recursion = max_recursion


def _render_chunk_in_worker(
    bounds: tuple[int, int],
) -> tuple[int, npt.NDArray[np.float64]]:
    if _worker_camera is None or _worker_world is None:
        raise RuntimeError("Render worker used before initialization")
    start, stop = bounds
    return start, render_chunk(_worker_camera, _worker_world, start, stop, _worker_max_recursion)


def _chunk_bounds(total: int, chunk_size: int) -> list[tuple[int, int]]:
    return [(start, min(start + chunk_size, total)) for start in range(0, total, chunk_size)]


# =============================================================================
# Public Rendering API
# =============================================================================


def render(
    camera: Camera,
    world: World,
    *,
    settings: RenderSettings | None = None,
    max_recursion: int | None = None,
    workers: int | None = None,
    chunk_size: int | None = None,
    callback: ProgressCallback | None = None,
) -> npt.NDArray[np.float64]:
    """Render the world as seen by the camera.

    Keyword overrides take precedence over the matching ``settings`` fields.

    Args:
        camera: The camera; its size determines the output shape.
        world: The scene. Must not be modified while rendering.
        settings: Base render settings. Defaults to RenderSettings().
        max_recursion: Override for settings.max_recursion.
        workers: Override for settings.workers.
        chunk_size: Override for settings.chunk_size.
        callback: Optional callback called after each finished chunk with
            (pixels_done, pixels_total).

    Returns:
        Linear colours as a float64 array of shape (vsize, hsize, 3), rows
        top to bottom. Values are unclamped.
    """
    base = settings if settings is not None else RenderSettings()
    settings = RenderSettings(
        max_recursion=base.max_recursion if max_recursion is None else max_recursion,
        workers=base.workers if workers is None else workers,
        chunk_size=base.chunk_size if chunk_size is None else chunk_size,
    )

    total = camera.hsize * camera.vsize
    chunks = _chunk_bounds(total, settings.chunk_size)
    num_workers = min(settings.resolved_workers(), len(chunks))
    pixels = np.zeros((total, 3), dtype=np.float64)

    logger.info(
        "Rendering %dx%d with %d worker(s), %d chunk(s), max recursion %d",
        camera.hsize,
        camera.vsize,
        num_workers,
        len(chunks),
        settings.max_recursion,
    )
    start_time = time.perf_counter()
    done = 0

    if num_workers <= 1:
        for start, stop in chunks:
            pixels[start:stop] = render_chunk(camera, world, start, stop, settings.max_recursion)
            done += stop - start
            if callback is not None:
                callback(done, total)
    else:
        init_args = (camera, world, settings.max_recursion)
        with Pool(processes=num_workers, initializer=_init_worker, initargs=init_args) as pool:
            for start, block in pool.imap_unordered(_render_chunk_in_worker, chunks):
                pixels[start : start + len(block)] = block
                done += len(block)
                if callback is not None:
                    callback(done, total)

    logger.info("Rendered %d pixels in %.2fs", total, time.perf_counter() - start_time)
    return pixels.reshape(camera.vsize, camera.hsize, 3)
