"""Unit tests for materials and patterns.

Tests cover:
- Material defaults and validation
- Stripe, 3D checker and debug pattern evaluation
- Patterns placed by object and pattern transforms
"""

import pytest


class TestMaterial:
    """Tests for the Material dataclass."""

    def test_defaults(self):
        """Test the default Phong coefficients."""
        from src.whitted.core.colour import WHITE
        from src.whitted.materials.material import Material

        m = Material()
        assert m.colour == WHITE
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflectivity == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0
        assert m.pattern is None

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"reflectivity": 1.5}, "Reflectivity"),
            ({"reflectivity": -0.1}, "Reflectivity"),
            ({"transparency": 2.0}, "Transparency"),
            ({"refractive_index": 0.5}, "Index of refraction"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs, message):
        """Test that out-of-range coefficients are rejected."""
        from src.whitted.materials.material import Material

        with pytest.raises(ValueError, match=message):
            Material(**kwargs)

    def test_colour_default_is_white(self):
        """Test that each Material gets the shared white default colour."""
        from src.whitted.core.colour import WHITE
        from src.whitted.materials.material import Material

        assert Material().colour is WHITE
        assert Material(colour=WHITE * 0.5).colour == WHITE * 0.5


class TestStripePattern:
    """Tests for the stripe pattern."""

    def test_constant_in_y_and_z(self):
        """Test that stripes do not vary along y or z."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.tuples import point
        from src.whitted.materials.patterns import pattern_at, stripe_pattern

        p = stripe_pattern(WHITE, BLACK)
        for y in (0, 1, 2):
            assert pattern_at(p, point(0, y, 0)) == WHITE
        for z in (0, 1, 2):
            assert pattern_at(p, point(0, 0, z)) == WHITE

    @pytest.mark.parametrize(
        "x, is_white",
        [(0, True), (0.9, True), (1, False), (-0.1, False), (-1, False), (-1.1, True)],
    )
    def test_alternates_in_x(self, x, is_white):
        """Test that stripes alternate on floor(x) parity."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.tuples import point
        from src.whitted.materials.patterns import pattern_at, stripe_pattern

        p = stripe_pattern(WHITE, BLACK)
        assert pattern_at(p, point(x, 0, 0)) == (WHITE if is_white else BLACK)

    def test_object_transform(self):
        """Test a stripe pattern on a scaled object."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import pattern_at_object, stripe_pattern

        shape = sphere(transform=scaling(2, 2, 2))
        p = stripe_pattern(WHITE, BLACK)
        assert pattern_at_object(p, shape, point(1.5, 0, 0)) == WHITE

    def test_pattern_transform(self):
        """Test a scaled stripe pattern."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import pattern_at_object, stripe_pattern

        p = stripe_pattern(WHITE, BLACK, scaling(2, 2, 2))
        assert pattern_at_object(p, sphere(), point(1.5, 0, 0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test a translated pattern on a scaled object."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.transform import scaling, translation
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import pattern_at_object, stripe_pattern

        shape = sphere(transform=scaling(2, 2, 2))
        p = stripe_pattern(WHITE, BLACK, translation(0.5, 0, 0))
        assert pattern_at_object(p, shape, point(2.5, 0, 0)) == WHITE


class TestCheckersPattern:
    """Tests for the 3D checker pattern."""

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_repeats_along_each_axis(self, axis):
        """Test that checkers alternate along x, y and z."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.tuples import point
        from src.whitted.materials.patterns import checkers_pattern, pattern_at

        p = checkers_pattern(WHITE, BLACK)
        coords = [0.0, 0.0, 0.0]
        assert pattern_at(p, point(*coords)) == WHITE
        coords[axis] = 0.99
        assert pattern_at(p, point(*coords)) == WHITE
        coords[axis] = 1.01
        assert pattern_at(p, point(*coords)) == BLACK


class TestDebugPattern:
    """Tests for the diagnostic pattern that returns its input point."""

    def test_returns_pattern_space_point(self):
        """Test that the colour encodes the point."""
        from src.whitted.core.colour import Colour
        from src.whitted.core.tuples import point
        from src.whitted.materials.patterns import debug_pattern, pattern_at

        assert pattern_at(debug_pattern(), point(1, 2, 3)) == Colour(1, 2, 3)

    def test_object_transform(self):
        """Test the debug pattern on a scaled object."""
        from src.whitted.core.colour import Colour
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import debug_pattern, pattern_at_object

        shape = sphere(transform=scaling(2, 2, 2))
        c = pattern_at_object(debug_pattern(), shape, point(2, 3, 4))
        assert c == Colour(1, 1.5, 2)

    def test_pattern_transform(self):
        """Test a scaled debug pattern."""
        from src.whitted.core.colour import Colour
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import debug_pattern, pattern_at_object

        p = debug_pattern(scaling(2, 2, 2))
        assert pattern_at_object(p, sphere(), point(2, 3, 4)) == Colour(1, 1.5, 2)

    def test_object_and_pattern_transform(self):
        """Test a translated debug pattern on a scaled object."""
        from src.whitted.core.colour import Colour
        from src.whitted.core.transform import scaling, translation
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere
        from src.whitted.materials.patterns import debug_pattern, pattern_at_object

        shape = sphere(transform=scaling(2, 2, 2))
        p = debug_pattern(translation(0.5, 1, 1.5))
        assert pattern_at_object(p, shape, point(2.5, 3, 3.5)) == Colour(0.75, 0.5, 0.25)


class TestPatternConstruction:
    """Tests for Pattern defaults and validation."""

    def test_defaults(self):
        """Test that a bare pattern is white/black with the identity transform."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.transform import IDENTITY
        from src.whitted.materials.patterns import Pattern, PatternKind

        p = Pattern(PatternKind.STRIPE)
        assert p.colour_a == WHITE
        assert p.colour_b == BLACK
        assert p.transform == IDENTITY

    def test_singular_transform_rejected(self):
        """Test that a pattern cannot be placed with a non-invertible transform."""
        from src.whitted.core.colour import BLACK, WHITE
        from src.whitted.core.transform import SingularMatrixError, scaling
        from src.whitted.materials.patterns import stripe_pattern

        with pytest.raises(SingularMatrixError):
            stripe_pattern(WHITE, BLACK, scaling(0, 1, 1))
