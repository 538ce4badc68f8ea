"""Pinhole camera model for perspective ray generation.

The camera sits at the origin of its own space looking down -z, with the
image plane at z = -1. Its ``transform`` is the world-to-camera (view)
transform; primary rays are built in camera space and carried into the world
by its inverse.

The derived quantities ``half_width``, ``half_height`` and ``pixel_size``
depend only on the image size and field of view. They are computed once at
construction, so a Camera is safe to share read-only across render workers.

Example:
    >>> import math
    >>> from src.whitted.camera.pinhole import Camera, view_transform
    >>> from src.whitted.core.tuples import point, vector
    >>> camera = Camera(
    ...     hsize=160,
    ...     vsize=120,
    ...     field_of_view=math.pi / 3,
    ...     transform=view_transform(point(0, 1.5, -5), point(0, 1, 0), vector(0, 1, 0)),
    ... )
    >>> ray = camera.ray_for_pixel(80, 60)  # Ray through the image centre
"""

import math
from dataclasses import dataclass, field

from src.whitted.core.ray import Ray
from src.whitted.core.transform import IDENTITY, Transform, translation
from src.whitted.core.tuples import ORIGIN, Tuple, point

# =============================================================================
# View Transform
# =============================================================================


def view_transform(from_point: Tuple, to_point: Tuple, up: Tuple) -> Transform:
    """Build a look-at world-to-camera transform.

    Args:
        from_point: Eye position in world space.
        to_point: Point the camera looks at.
        up: Approximate up direction; need not be exactly perpendicular.

    Returns:
        The transform that moves the world so the eye sits at the origin
        looking down -z with ``up`` toward +y.
    """
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Transform(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation @ translation(-from_point.x, -from_point.y, -from_point.z)


# =============================================================================
# Camera
# =============================================================================


@dataclass(frozen=True)
class Camera:
    """A pinhole camera.

    Attributes:
        hsize: Horizontal image size in pixels.
        vsize: Vertical image size in pixels.
        field_of_view: Angle in radians spanned by the larger image dimension.
        transform: World-to-camera view transform.
        half_width: Half the image plane width at z = -1 (derived).
        half_height: Half the image plane height at z = -1 (derived).
        pixel_size: World-space size of one pixel on the image plane (derived).
    """

    hsize: int
    vsize: int
    field_of_view: float
    transform: Transform = field(default_factory=lambda: IDENTITY)
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.hsize <= 0 or self.vsize <= 0:
            raise ValueError(
                f"Camera dimensions ({self.hsize}x{self.vsize}) must be positive"
            )
        if not 0.0 < self.field_of_view < math.pi:
            raise ValueError(f"Field of view = {self.field_of_view} must be in (0, pi)")

        half_view = math.tan(self.field_of_view / 2.0)
        aspect = self.hsize / self.vsize
        if aspect >= 1.0:
            half_width = half_view
            half_height = half_view / aspect
        else:
            half_width = half_view * aspect
            half_height = half_view

        # Frozen dataclass: derived fields are set once, here
        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", half_width * 2.0 / self.hsize)
        # Fails now rather than per pixel if the view transform is singular
        self.transform.inverse()

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        """Generate the primary ray through the centre of pixel (x, y).

        Args:
            x: Column index, 0 at the left edge.
            y: Row index, 0 at the top edge.

        Returns:
            A world-space ray with a unit direction.
        """
        # Camera looks toward -z, so +x in camera space is to the left
        world_x = self.half_width - (x + 0.5) * self.pixel_size
        world_y = self.half_height - (y + 0.5) * self.pixel_size

        inverse = self.transform.inverse()
        pixel = inverse.apply(point(world_x, world_y, -1.0))
        origin = inverse.apply(ORIGIN)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)
