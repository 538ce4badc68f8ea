"""Ray and intersection data structures.

This module provides the Ray dataclass, the Intersection record produced by
ray/shape tests, world-wide intersection aggregation and hit selection.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> ray = Ray(origin=point(0, 0, -5), direction=vector(0, 0, 1))
    >>> ray.position(5.0)  # Point 5 units along the ray
    Tuple(x=0.0, y=0.0, z=0.0, w=1.0)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.whitted.core.tuples import Tuple

if TYPE_CHECKING:
    from src.whitted.core.transform import Transform
    from src.whitted.geometry.shapes import Shape
    from src.whitted.scene.world import World


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be
            normalized; object-space rays are generally not unit length.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, m: Transform) -> Ray:
        """Return this ray with both origin and direction mapped through m."""
        return Ray(m.apply(self.origin), m.apply(self.direction))


@dataclass(frozen=True)
class Intersection:
    """A ray parameter at which a ray crosses a shape's surface.

    Attributes:
        t: The ray parameter of the crossing.
        object: The shape that was crossed. Borrowed from the world's object
            list; compared by identity.
    """

    t: float
    object: Shape

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.object is other.object

    __hash__ = None  # type: ignore[assignment]


def intersect_world(world: World, ray: Ray) -> list[Intersection]:
    """Intersect a ray with every shape in the world.

    Args:
        world: The world whose objects are tested, in list order.
        ray: The world-space ray.

    Returns:
        All intersections, sorted ascending by t. The sort is stable, so ties
        keep object order.
    """
    intersections: list[Intersection] = []
    for shape in world.objects:
        intersections.extend(shape.intersect(ray))
    intersections.sort(key=lambda i: i.t)
    return intersections


def hit(intersections: Iterable[Intersection]) -> Intersection | None:
    """Select the visible intersection.

    Intersections with negative t lie behind the ray origin and are ignored.

    Returns:
        The intersection with the smallest non-negative t, or None.
    """
    best: Intersection | None = None
    for candidate in intersections:
        if candidate.t < 0.0:
            continue
        if best is None or candidate.t < best.t:
            best = candidate
    return best
