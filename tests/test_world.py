"""Unit tests for the world container and point lights.

Tests cover:
- Empty world construction
- Adding shapes and lights, and looking shapes up by identity
- The reference default world
- Point light validation
"""

import pytest


class TestWorld:
    """Tests for World."""

    def test_empty_world(self):
        """Test that a new world has no objects and no lights."""
        from src.whitted.scene.world import World

        world = World()
        assert world.objects == []
        assert world.lights == []

    def test_add_object_returns_index(self):
        """Test that shapes are appended and addressed by position."""
        from src.whitted.geometry.shapes import plane, sphere
        from src.whitted.scene.world import World

        world = World()
        s = sphere()
        p = plane()
        assert world.add_object(s) == 0
        assert world.add_object(p) == 1
        assert world.objects[0] is s
        assert world.objects[1] is p

    def test_add_light_returns_index(self):
        """Test that lights are appended in order."""
        from src.whitted.core.colour import WHITE
        from src.whitted.core.tuples import point
        from src.whitted.scene.world import PointLight, World

        world = World()
        assert world.add_light(PointLight(WHITE, point(0, 0, 0))) == 0
        assert world.add_light(PointLight(WHITE, point(1, 1, 1))) == 1
        assert len(world.lights) == 2

    def test_index_of_uses_identity(self):
        """Test that lookup distinguishes equal-looking shapes."""
        from src.whitted.geometry.shapes import sphere
        from src.whitted.scene.world import World

        world = World()
        s1 = sphere()
        s2 = sphere()
        world.add_object(s1)
        world.add_object(s2)
        assert world.index_of(s2) == 1
        with pytest.raises(ValueError, match="not part of this world"):
            world.index_of(sphere())


class TestDefaultWorld:
    """Tests for the reference two-sphere world."""

    def test_contents(self, world):
        """Test the light and both spheres of the default world."""
        from src.whitted.core.colour import WHITE, Colour
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point

        assert len(world.lights) == 1
        assert world.lights[0].intensity == WHITE
        assert world.lights[0].position == point(-10, 10, -10)

        outer, inner = world.objects
        assert outer.material.colour == Colour(0.8, 1.0, 0.6)
        assert outer.material.diffuse == 0.7
        assert outer.material.specular == 0.2
        assert inner.transform == scaling(0.5, 0.5, 0.5)

    def test_each_call_is_independent(self):
        """Test that default_world builds fresh shapes every time."""
        from src.whitted.scene.world import default_world

        assert default_world().objects[0] is not default_world().objects[0]


class TestPointLight:
    """Tests for PointLight."""

    def test_position_must_be_point(self):
        """Test that a light cannot be placed at a vector."""
        from src.whitted.core.colour import WHITE
        from src.whitted.core.tuples import vector
        from src.whitted.scene.world import PointLight

        with pytest.raises(ValueError, match="must be a point"):
            PointLight(WHITE, vector(0, 0, 0))
