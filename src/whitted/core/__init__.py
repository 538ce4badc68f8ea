"""Core rendering module.

Components:
    tuples: Points and vectors in homogeneous coordinates
    colour: RGB colour arithmetic
    transform: 4x4 affine transforms with cached inverses
    ray: Rays, intersection records and hit selection
    integrator: Recursive Whitted shading
    renderer: Parallel per-pixel render loop
"""

from .colour import BLACK, WHITE, Colour
from .ray import Intersection, Ray, hit, intersect_world
from .transform import (
    IDENTITY,
    SingularMatrixError,
    Transform,
    identity,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
)
from .tuples import EPSILON, ORIGIN, Tuple, approx_equal, point, vector

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from src.whitted.core.integrator or src.whitted.core.renderer.

__all__ = [
    "Tuple",
    "point",
    "vector",
    "approx_equal",
    "EPSILON",
    "ORIGIN",
    "Colour",
    "BLACK",
    "WHITE",
    "Transform",
    "SingularMatrixError",
    "IDENTITY",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "Ray",
    "Intersection",
    "intersect_world",
    "hit",
]
