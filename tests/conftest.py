"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules: the reference
two-sphere world and the nested glass-sphere arrangement used by the
refractive-index tests.
"""

import pytest


@pytest.fixture
def world():
    """Fresh reference world: two concentric spheres and one light."""
    from src.whitted.scene.world import default_world

    return default_world()


@pytest.fixture
def nested_glass():
    """Three overlapping glass spheres and the sorted intersections of a ray through them.

    Sphere A (radius 2, n = 1.5) contains B (n = 2.0, shifted toward the
    camera) and C (n = 2.5, shifted away). The ray starts at z = -4 and runs
    along +z, crossing A, B, C, B, C, A.
    """
    from src.whitted.core.ray import Intersection, Ray
    from src.whitted.core.transform import scaling, translation
    from src.whitted.core.tuples import point, vector
    from src.whitted.geometry.shapes import glass_sphere

    a = glass_sphere(scaling(2.0, 2.0, 2.0), refractive_index=1.5)
    b = glass_sphere(translation(0.0, 0.0, -0.25), refractive_index=2.0)
    c = glass_sphere(translation(0.0, 0.0, 0.25), refractive_index=2.5)
    ray = Ray(point(0.0, 0.0, -4.0), vector(0.0, 0.0, 1.0))
    intersections = [
        Intersection(2.0, a),
        Intersection(2.75, b),
        Intersection(3.25, c),
        Intersection(4.75, b),
        Intersection(5.25, c),
        Intersection(6.0, a),
    ]
    return ray, intersections
