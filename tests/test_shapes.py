"""Unit tests for the sphere and plane primitives.

Tests cover:
- Ray-sphere intersection (through, tangent, miss, inside, behind)
- Intersection with transformed spheres
- Sphere normals, including under non-uniform scaling and rotation
- Ray-plane intersection and the constant plane normal
- Construction-time validation of the transform
"""

import math

import pytest

SQRT2_2 = math.sqrt(2) / 2
SQRT3_3 = math.sqrt(3) / 3


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    @pytest.mark.parametrize(
        "origin, expected",
        [
            ((0, 0, -5), [4.0, 6.0]),
            ((0, 1, -5), [5.0, 5.0]),
            ((0, 2, -5), []),
            ((0, 0, 0), [-1.0, 1.0]),
            ((0, 0, 5), [-6.0, -4.0]),
        ],
        ids=["through", "tangent", "miss", "inside", "behind"],
    )
    def test_unit_sphere(self, origin, expected):
        """Test intersections of rays along +z with the unit sphere."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import sphere

        s = sphere()
        xs = s.intersect(Ray(point(*origin), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx(expected)
        assert all(i.object is s for i in xs)

    def test_scaled_sphere(self):
        """Test that the ray is carried into object space."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import scaling
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import sphere

        s = sphere(transform=scaling(2, 2, 2))
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        """Test that a sphere moved out of the ray's path is missed."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import translation
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import sphere

        s = sphere(transform=translation(5, 0, 0))
        assert s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []


class TestSphereNormal:
    """Tests for sphere surface normals."""

    @pytest.mark.parametrize(
        "at, expected",
        [
            ((1, 0, 0), (1, 0, 0)),
            ((0, 1, 0), (0, 1, 0)),
            ((0, 0, 1), (0, 0, 1)),
            ((SQRT3_3, SQRT3_3, SQRT3_3), (SQRT3_3, SQRT3_3, SQRT3_3)),
        ],
    )
    def test_unit_sphere_normal(self, at, expected):
        """Test normals on the untransformed sphere."""
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import sphere

        n = sphere().normal_at(point(*at))
        assert n == vector(*expected)
        assert n.magnitude() == pytest.approx(1.0)

    def test_translated_sphere_normal(self):
        """Test a normal on a translated sphere."""
        from src.whitted.core.transform import translation
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import sphere

        s = sphere(transform=translation(0, 1, 0))
        n = s.normal_at(point(0, 1.70711, -0.70711))
        assert n.as_list() == pytest.approx([0, 0.70711, -0.70711, 0], abs=1e-4)

    def test_transformed_sphere_normal(self):
        """Test a normal under non-uniform scaling after a rotation."""
        from src.whitted.core.transform import rotation_z, scaling
        from src.whitted.core.tuples import point
        from src.whitted.geometry.shapes import sphere

        s = sphere(transform=scaling(1, 0.5, 1) @ rotation_z(math.pi / 5))
        n = s.normal_at(point(0, SQRT2_2, -SQRT2_2))
        assert n.as_list() == pytest.approx([0, 0.97014, -0.24254, 0], abs=1e-4)
        assert n.is_vector


class TestPlane:
    """Tests for the y = 0 plane."""

    def test_parallel_ray_misses(self):
        """Test a ray parallel to the plane."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import plane

        assert plane().intersect(Ray(point(0, 10, 0), vector(0, 0, 1))) == []

    def test_coplanar_ray_misses(self):
        """Test a ray lying in the plane."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import plane

        assert plane().intersect(Ray(point(0, 0, 0), vector(0, 0, 1))) == []

    @pytest.mark.parametrize("y, dy", [(1, -1), (-1, 1)], ids=["above", "below"])
    def test_ray_crossing_plane(self, y, dy):
        """Test rays reaching the plane from above and below."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import plane

        p = plane()
        xs = p.intersect(Ray(point(0, y, 0), vector(0, dy, 0)))
        assert len(xs) == 1
        assert xs[0].t == pytest.approx(1.0)
        assert xs[0].object is p

    def test_normal_is_constant(self):
        """Test that the plane normal is +y everywhere."""
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import plane

        p = plane()
        for at in [(0, 0, 0), (10, 0, -10), (-5, 0, 150)]:
            assert p.normal_at(point(*at)) == vector(0, 1, 0)

    def test_transformed_plane(self):
        """Test that a plane stood upright faces along -z."""
        from src.whitted.core.ray import Ray
        from src.whitted.core.transform import rotation_x, translation
        from src.whitted.core.tuples import point, vector
        from src.whitted.geometry.shapes import plane

        wall = plane(transform=translation(0, 0, 5) @ rotation_x(-math.pi / 2))
        xs = wall.intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([5.0])
        assert wall.normal_at(point(0, 0, 5)) == vector(0, 0, -1)


class TestShapeConstruction:
    """Tests for shape factories and validation."""

    def test_defaults(self):
        """Test that a default sphere has the identity transform and default material."""
        from src.whitted.core.transform import IDENTITY
        from src.whitted.geometry.shapes import ShapeKind, sphere
        from src.whitted.materials.material import Material

        s = sphere()
        assert s.kind is ShapeKind.SPHERE
        assert s.transform == IDENTITY
        assert s.material == Material()

    def test_glass_sphere(self):
        """Test the glass sphere helper."""
        from src.whitted.geometry.shapes import glass_sphere

        s = glass_sphere()
        assert s.material.transparency == 1.0
        assert s.material.refractive_index == 1.5

    def test_shapes_compare_by_identity(self):
        """Test that two identical-looking shapes are distinct."""
        from src.whitted.geometry.shapes import sphere

        s1 = sphere()
        s2 = sphere()
        assert s1 == s1
        assert s1 != s2

    def test_singular_transform_rejected(self):
        """Test that a non-invertible transform fails at construction."""
        from src.whitted.core.transform import SingularMatrixError, scaling
        from src.whitted.geometry.shapes import sphere

        with pytest.raises(SingularMatrixError):
            sphere(transform=scaling(1, 0, 1))
