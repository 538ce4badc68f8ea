"""Shape primitives: the unit sphere and the y = 0 plane.

A Shape is a closed tagged union over ``ShapeKind``. Both kinds live in
object space (a unit sphere at the origin, an infinite plane through the
origin with normal +y) and are placed in the world solely by their
transform. Intersection and normal computation dispatch on the kind to pure
per-kind functions.

Example:
    >>> from src.whitted.core.ray import Ray
    >>> from src.whitted.core.tuples import point, vector
    >>> from src.whitted.geometry.shapes import sphere
    >>> s = sphere()
    >>> [i.t for i in s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))]
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from src.whitted.core.ray import Intersection, Ray
from src.whitted.core.transform import IDENTITY, Transform
from src.whitted.core.tuples import EPSILON, ORIGIN, Tuple, vector
from src.whitted.materials.material import Material


class ShapeKind(Enum):
    """Enumeration of supported geometric primitives."""

    SPHERE = "sphere"
    PLANE = "plane"


@dataclass(eq=False)
class Shape:
    """A geometric primitive with a material and a world placement.

    Shapes compare by identity, which is what the refractive-index
    containment walk relies on. A shape must not be modified once it has
    been added to a world that is being rendered.

    Attributes:
        kind: Which primitive this is.
        material: Surface properties used for shading.
        transform: Object-to-world transform. Must be invertible.
    """

    kind: ShapeKind = ShapeKind.SPHERE
    material: Material = field(default_factory=Material)
    transform: Transform = field(default_factory=lambda: IDENTITY)

    def __post_init__(self) -> None:
        # Fail at construction rather than mid-render on a singular transform
        self.transform.normal_matrix()

    def intersect(self, ray: Ray) -> list[Intersection]:
        return intersect(self, ray)

    def normal_at(self, world_point: Tuple) -> Tuple:
        return normal_at(self, world_point)


def intersect(shape: Shape, ray: Ray) -> list[Intersection]:
    """Intersect a world-space ray with a shape.

    The ray is carried into object space by the inverse transform and tested
    against the canonical primitive.

    Returns:
        The intersections in ascending t order, possibly empty.
    """
    local_ray = ray.transform(shape.transform.inverse())
    if shape.kind is ShapeKind.SPHERE:
        ts = _intersect_sphere(local_ray)
    elif shape.kind is ShapeKind.PLANE:
        ts = _intersect_plane(local_ray)
    else:
        raise ValueError(f"Unknown shape kind: {shape.kind}")
    return [Intersection(t, shape) for t in ts]


def _intersect_sphere(ray: Ray) -> list[float]:
    sphere_to_ray = ray.origin - ORIGIN
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0
    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []
    root = math.sqrt(discriminant)
    return [(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)]


def _intersect_plane(ray: Ray) -> list[float]:
    # A ray lying in the plane also counts as parallel and misses
    if abs(ray.direction.y) < EPSILON:
        return []
    return [-ray.origin.y / ray.direction.y]


def normal_at(shape: Shape, world_point: Tuple) -> Tuple:
    """Compute the unit surface normal at a world-space point on a shape.

    The point is taken into object space, the canonical normal is computed
    there, and it is carried back by the inverse-transpose. Re-normalizing is
    required because non-uniform scaling changes its length.
    """
    local_point = shape.transform.inverse().apply(world_point)
    if shape.kind is ShapeKind.SPHERE:
        local_normal = local_point - ORIGIN
    elif shape.kind is ShapeKind.PLANE:
        local_normal = vector(0.0, 1.0, 0.0)
    else:
        raise ValueError(f"Unknown shape kind: {shape.kind}")
    world_normal = shape.transform.normal_matrix().apply_linear(local_normal)
    return world_normal.normalize()


def sphere(material: Material | None = None, transform: Transform = IDENTITY) -> Shape:
    """Create a unit sphere, placed by transform."""
    return Shape(ShapeKind.SPHERE, material if material is not None else Material(), transform)


def plane(material: Material | None = None, transform: Transform = IDENTITY) -> Shape:
    """Create the y = 0 plane, placed by transform."""
    return Shape(ShapeKind.PLANE, material if material is not None else Material(), transform)


def glass_sphere(transform: Transform = IDENTITY, refractive_index: float = 1.5) -> Shape:
    """Create a fully transparent sphere, handy for refraction scenes."""
    return sphere(Material(transparency=1.0, refractive_index=refractive_index), transform)
