"""World container for shapes and point lights.

The World is the flat arena of a scene: shapes are referenced by their
position in ``objects``. It is built once and treated as read-only while a
render is running.

Example:
    >>> from src.whitted.scene.world import World, PointLight
    >>> from src.whitted.geometry.shapes import sphere
    >>> world = World()
    >>> world.add_object(sphere())
    0
"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.whitted.core.colour import WHITE, Colour
from src.whitted.core.transform import scaling
from src.whitted.core.tuples import Tuple, point
from src.whitted.geometry.shapes import Shape, sphere
from src.whitted.materials.material import Material


@dataclass(frozen=True)
class PointLight:
    """A light source with no size, radiating equally in all directions.

    Attributes:
        intensity: Colour and brightness of the light.
        position: Location of the light in world space (a point).
    """

    intensity: Colour
    position: Tuple

    def __post_init__(self) -> None:
        if not self.position.is_point:
            raise ValueError(f"Light position must be a point, got {self.position!r}")


@dataclass
class World:
    """Ordered collections of shapes and lights.

    Attributes:
        objects: Shapes in insertion order.
        lights: Point lights in insertion order. Shadow tests consult only
            the first one.
    """

    objects: list[Shape] = field(default_factory=list)
    lights: list[PointLight] = field(default_factory=list)

    def add_object(self, shape: Shape) -> int:
        """Append a shape and return its index in ``objects``."""
        self.objects.append(shape)
        return len(self.objects) - 1

    def add_light(self, light: PointLight) -> int:
        """Append a light and return its index in ``lights``."""
        self.lights.append(light)
        return len(self.lights) - 1

    def index_of(self, shape: Shape) -> int:
        """Position of a shape in ``objects``, by identity.

        Raises:
            ValueError: If the shape is not part of this world.
        """
        for index, candidate in enumerate(self.objects):
            if candidate is shape:
                return index
        raise ValueError("Shape is not part of this world")


def default_world() -> World:
    """The reference two-sphere world used throughout the test-suite.

    An outer unit sphere with a green-ish diffuse material, a concentric
    default sphere of radius 0.5, and a white light at (-10, 10, -10).
    """
    outer = sphere(Material(colour=Colour(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(WHITE, point(-10.0, 10.0, -10.0))
    return World(objects=[outer, inner], lights=[light])
