"""Demo scene: a sphere standing in the corner of two walls.

The scene is built entirely from the two primitives: an infinite floor
plane, two spheres squashed flat to act as walls meeting at a right angle
behind the subject, and a single green sphere in front of them, lit by one
white light from the upper left.

Example:
    >>> from src.whitted.scene.showcase import create_showcase_scene
    >>> from src.whitted.core.renderer import render
    >>>
    >>> world, camera = create_showcase_scene(width=160, height=80)
    >>> image = render(camera, world)
"""

import math
from dataclasses import dataclass

from src.whitted.camera.pinhole import Camera, view_transform
from src.whitted.core.colour import Colour
from src.whitted.core.transform import scaling, translation
from src.whitted.core.tuples import point, vector
from src.whitted.geometry.shapes import plane, sphere
from src.whitted.materials.material import Material
from src.whitted.scene.world import PointLight, World

# =============================================================================
# Showcase Parameters
# =============================================================================


@dataclass
class ShowcaseParams:
    """Tunable parts of the showcase scene.

    Attributes:
        wall_colour: RGB colour of the floor and both walls.
        sphere_colour: RGB colour of the centre sphere.
        sphere_reflectivity: Mirror fraction of the centre sphere.
        light_position: World-space position of the single light.
        light_colour: RGB intensity of the light.

    Example:
        >>> params = ShowcaseParams(sphere_reflectivity=0.4)
        >>> world, camera = create_showcase_scene(params=params)
    """

    wall_colour: tuple[float, float, float] = (1.0, 0.9, 0.9)
    sphere_colour: tuple[float, float, float] = (0.1, 1.0, 0.5)
    sphere_reflectivity: float = 0.0
    light_position: tuple[float, float, float] = (-10.0, 10.0, -10.0)
    light_colour: tuple[float, float, float] = (1.0, 1.0, 1.0)


# =============================================================================
# Showcase Constants
# =============================================================================

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 40
FIELD_OF_VIEW = math.pi / 3

# Walls are unit spheres flattened to 0.01 along y, then stood upright
WALL_SCALE = (10.0, 0.01, 10.0)
WALL_DISTANCE = 5.0

CAMERA_FROM = (0.0, 1.5, -5.0)
CAMERA_TO = (0.0, 1.0, 0.0)
CAMERA_UP = (0.0, 1.0, 0.0)


# =============================================================================
# Showcase Factory
# =============================================================================


def create_showcase_scene(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    params: ShowcaseParams | None = None,
) -> tuple[World, Camera]:
    """Create the showcase world and a camera looking into the corner.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        params: Optional colour and light overrides.

    Returns:
        Tuple of (world, camera). Objects are ordered floor, left wall,
        right wall, sphere.
    """
    if params is None:
        params = ShowcaseParams()

    wall_material = Material(colour=Colour(*params.wall_colour), specular=0.0)

    floor = plane(wall_material)

    left_wall = sphere(
        wall_material,
        scaling(*WALL_SCALE)
        .rotate_x(math.pi / 2)
        .rotate_y(-math.pi / 4)
        .translate(0.0, 0.0, WALL_DISTANCE),
    )
    right_wall = sphere(
        wall_material,
        scaling(*WALL_SCALE)
        .rotate_x(math.pi / 2)
        .rotate_y(math.pi / 4)
        .translate(0.0, 0.0, WALL_DISTANCE),
    )

    middle = sphere(
        Material(
            colour=Colour(*params.sphere_colour),
            diffuse=0.7,
            specular=0.3,
            reflectivity=params.sphere_reflectivity,
        ),
        translation(-0.5, 1.0, 0.5),
    )

    world = World(
        objects=[floor, left_wall, right_wall, middle],
        lights=[PointLight(Colour(*params.light_colour), point(*params.light_position))],
    )

    camera = Camera(
        hsize=width,
        vsize=height,
        field_of_view=FIELD_OF_VIEW,
        transform=view_transform(point(*CAMERA_FROM), point(*CAMERA_TO), vector(*CAMERA_UP)),
    )
    return world, camera
