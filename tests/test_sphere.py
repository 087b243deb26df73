"""Unit tests for the sphere and plane primitives in object space.

Tests cover:
- Ray-sphere intersection: two hits, tangent, miss, inside and behind
- Sphere normals
- Ray-plane intersection and the constant plane normal
- Shape dispatch
"""

import math

import pytest


class TestSphereIntersection:
    """Tests for intersect_sphere."""

    @pytest.mark.parametrize(
        "origin,expected",
        [
            ((0.0, 0.0, -5.0), [4.0, 6.0]),
            ((0.0, 1.0, -5.0), [5.0]),
            ((0.0, 2.0, -5.0), []),
            ((0.0, 0.0, 0.0), [-1.0, 1.0]),
            ((0.0, 0.0, 5.0), [-6.0, -4.0]),
        ],
    )
    def test_intersect_along_z(self, origin, expected):
        """Test rays travelling along +z from various origins."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.sphere import intersect_sphere

        times = intersect_sphere(Ray(Point(*origin), Vector(0.0, 0.0, 1.0)))
        assert times == pytest.approx(expected)

    def test_times_ascending(self):
        """Test that two intersection times are returned smallest first."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.sphere import intersect_sphere

        times = intersect_sphere(Ray(Point(0.3, 0.2, 4.0), Vector(0.0, 0.0, -1.0)))
        assert len(times) == 2
        assert times[0] < times[1]

    def test_unnormalized_direction(self):
        """Test that times are measured in multiples of the direction."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.sphere import intersect_sphere

        times = intersect_sphere(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 2.0)))
        assert times == pytest.approx([2.0, 3.0])

    def test_zero_direction_misses(self):
        """Test that a degenerate direction gives no intersections."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.sphere import intersect_sphere

        assert intersect_sphere(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 0.0))) == []


class TestSphereNormal:
    """Tests for sphere_normal."""

    @pytest.mark.parametrize(
        "point,expected",
        [
            ((1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
            ((0.0, 1.0, 0.0), (0.0, 1.0, 0.0)),
            ((0.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
        ],
    )
    def test_normal_on_axis(self, point, expected):
        """Test normals at points on each axis."""
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.sphere import sphere_normal

        assert sphere_normal(Point(*point)) == Vector(*expected)

    def test_normal_at_nonaxial_point(self):
        """Test the normal at a point off the axes is already unit length."""
        from raytracer.core.tuples import Point, Vector, normalize
        from raytracer.geometry.sphere import sphere_normal

        k = math.sqrt(3.0) / 3.0
        n = sphere_normal(Point(k, k, k))
        assert n == Vector(k, k, k)
        assert n == normalize(n)


class TestPlane:
    """Tests for intersect_plane and plane_normal."""

    def test_normal_is_constant(self):
        """Test that the normal is +y everywhere."""
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.plane import plane_normal

        for p in (Point(0.0, 0.0, 0.0), Point(10.0, 0.0, -10.0), Point(-5.0, 0.0, 150.0)):
            assert plane_normal(p) == Vector(0.0, 1.0, 0.0)

    def test_parallel_ray_misses(self):
        """Test that a ray parallel to the plane misses."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0.0, 10.0, 0.0), Vector(0.0, 0.0, 1.0))) == []

    def test_coplanar_ray_misses(self):
        """Test that a ray lying in the plane misses."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0))) == []

    def test_ray_from_above(self):
        """Test a ray hitting the plane from above."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0.0, 1.0, 0.0), Vector(0.0, -1.0, 0.0))) == [1.0]

    def test_ray_from_below(self):
        """Test a ray hitting the plane from below."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.plane import intersect_plane

        assert intersect_plane(Ray(Point(0.0, -1.0, 0.0), Vector(0.0, 1.0, 0.0))) == [1.0]


class TestShapeDispatch:
    """Tests for local_intersect and local_normal_at."""

    def test_dispatch_to_sphere_and_plane(self):
        """Test that each shape routes to its own routine."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.shapes import Shape, local_intersect, local_normal_at

        ray = Ray(Point(0.0, 2.0, 0.0), Vector(0.0, -1.0, 0.0))
        assert local_intersect(Shape.SPHERE, ray) == pytest.approx([1.0, 3.0])
        assert local_intersect(Shape.PLANE, ray) == pytest.approx([2.0])
        assert local_normal_at(Shape.PLANE, Point(3.0, 0.0, 1.0)) == Vector(0.0, 1.0, 0.0)
        assert local_normal_at(Shape.SPHERE, Point(0.0, -1.0, 0.0)) == Vector(0.0, -1.0, 0.0)

    def test_unknown_shape_rejected(self):
        """Test that an unknown shape raises TypeError."""
        from raytracer.core.ray import Ray
        from raytracer.core.tuples import Point, Vector
        from raytracer.geometry.shapes import local_intersect, local_normal_at

        ray = Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0))
        with pytest.raises(TypeError):
            local_intersect("cube", ray)
        with pytest.raises(TypeError):
            local_normal_at("cube", Point(0.0, 0.0, 0.0))
