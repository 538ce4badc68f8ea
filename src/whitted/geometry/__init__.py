"""Geometry module: the unit sphere and the y = 0 plane."""

from .shapes import Shape, ShapeKind, glass_sphere, intersect, normal_at, plane, sphere

__all__ = [
    "Shape",
    "ShapeKind",
    "intersect",
    "normal_at",
    "sphere",
    "plane",
    "glass_sphere",
]
