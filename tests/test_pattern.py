"""Unit tests for procedural patterns.

Tests cover:
- Stripe, gradient, ring and checker leaf rules
- Object and pattern transforms
- Blend and Perturb combinators
"""

import pytest


class TestStripe:
    """Tests for the stripe pattern."""

    def test_constant_in_y_and_z(self):
        """Test that a stripe only varies along x."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at, stripe

        p = stripe(WHITE, BLACK)
        for y in (0.0, 1.0, 2.0):
            assert pattern_at(p, Point(0.0, y, 0.0)) == WHITE
        for z in (0.0, 1.0, 2.0):
            assert pattern_at(p, Point(0.0, 0.0, z)) == WHITE

    @pytest.mark.parametrize(
        "x,expect_first",
        [(0.0, True), (0.9, True), (1.0, False), (-0.1, False), (-1.0, False), (-1.1, True)],
    )
    def test_alternates_in_x(self, x, expect_first):
        """Test that stripes alternate at every integer x, including negatives."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at, stripe

        expected = WHITE if expect_first else BLACK
        assert pattern_at(stripe(WHITE, BLACK), Point(x, 0.0, 0.0)) == expected


class TestLeafPatterns:
    """Tests for gradient, ring and checker."""

    def test_gradient_interpolates(self):
        """Test that a gradient ramps linearly over the unit interval."""
        from raytracer.core.color import BLACK, WHITE, Color
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import gradient, pattern_at

        p = gradient(WHITE, BLACK)
        assert pattern_at(p, Point(0.0, 0.0, 0.0)) == WHITE
        assert pattern_at(p, Point(0.25, 0.0, 0.0)) == Color(0.75, 0.75, 0.75)
        assert pattern_at(p, Point(0.5, 0.0, 0.0)) == Color(0.5, 0.5, 0.5)
        assert pattern_at(p, Point(0.75, 0.0, 0.0)) == Color(0.25, 0.25, 0.25)

    def test_gradient_repeats(self):
        """Test that the gradient restarts at every integer x."""
        from raytracer.core.color import BLACK, WHITE, Color
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import gradient, pattern_at

        assert pattern_at(gradient(WHITE, BLACK), Point(1.25, 0.0, 0.0)) == Color(0.75, 0.75, 0.75)

    def test_ring_extends_in_x_and_z(self):
        """Test that rings alternate with the distance from the y axis."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at, ring

        p = ring(WHITE, BLACK)
        assert pattern_at(p, Point(0.0, 0.0, 0.0)) == WHITE
        assert pattern_at(p, Point(1.0, 0.0, 0.0)) == BLACK
        assert pattern_at(p, Point(0.0, 0.0, 1.0)) == BLACK
        assert pattern_at(p, Point(0.708, 0.0, 0.708)) == BLACK
        assert pattern_at(p, Point(0.0, 5.0, 0.5)) == WHITE

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_checker_repeats_on_each_axis(self, axis):
        """Test that checkers alternate along every axis."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import checker, pattern_at

        def along(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return Point(*coords)

        p = checker(WHITE, BLACK)
        assert pattern_at(p, along(0.0)) == WHITE
        assert pattern_at(p, along(0.99)) == WHITE
        assert pattern_at(p, along(1.01)) == BLACK

    def test_checker_negative_cells(self):
        """Test checker parity for negative coordinates."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import checker, pattern_at

        p = checker(WHITE, BLACK)
        assert pattern_at(p, Point(-0.5, 0.5, 0.5)) == BLACK
        assert pattern_at(p, Point(-0.5, -0.5, 0.5)) == WHITE

    def test_leaf_color_rejects_combinators(self):
        """Test that leaf_color only accepts leaf patterns."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, leaf_color, stripe

        with pytest.raises(TypeError):
            leaf_color(Blend(stripe(WHITE, BLACK), stripe(BLACK, WHITE)), Point(0.0, 0.0, 0.0))

    def test_unknown_pattern_rejected(self):
        """Test that pattern_at rejects unknown variants."""
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at

        with pytest.raises(TypeError):
            pattern_at("polka dots", Point(0.0, 0.0, 0.0))


class TestPatternTransforms:
    """Tests for object and pattern space conversion."""

    def test_object_transform(self):
        """Test that the object's transform affects the pattern."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.transform import uniform_scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at_object, stripe
        from raytracer.scene.objects import sphere

        obj = sphere(transform=uniform_scaling(2.0))
        assert pattern_at_object(stripe(WHITE, BLACK), obj, Point(1.5, 0.0, 0.0)) == WHITE

    def test_pattern_transform(self):
        """Test that the pattern's own transform affects the pattern."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.transform import uniform_scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at_object, stripe
        from raytracer.scene.objects import sphere

        p = stripe(WHITE, BLACK, uniform_scaling(2.0))
        assert pattern_at_object(p, sphere(), Point(1.5, 0.0, 0.0)) == WHITE

    def test_object_and_pattern_transform(self):
        """Test that both transforms compose."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.transform import Translation, uniform_scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at_object, stripe
        from raytracer.scene.objects import sphere

        obj = sphere(transform=uniform_scaling(2.0))
        p = stripe(WHITE, BLACK, Translation(0.5, 0.0, 0.0))
        assert pattern_at_object(p, obj, Point(2.5, 0.0, 0.0)) == WHITE

    def test_untransformed_object_uses_world_point(self):
        """Test that an object without a transform passes the point through."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import pattern_at_object, stripe
        from raytracer.scene.objects import plane

        assert pattern_at_object(stripe(WHITE, BLACK), plane(), Point(1.5, 0.0, 0.0)) == BLACK


class TestCombinators:
    """Tests for Blend and Perturb."""

    def test_blend_averages(self):
        """Test that a blend averages its two sub-patterns."""
        from raytracer.core.color import BLACK, WHITE, Color
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, pattern_at, stripe

        p = Blend(stripe(WHITE, BLACK), stripe(BLACK, WHITE))
        assert pattern_at(p, Point(0.5, 0.0, 0.0)) == Color(0.5, 0.5, 0.5)

    def test_blend_uses_each_branch_transform(self):
        """Test that each branch of a blend keeps its own transform."""
        from raytracer.core.color import BLACK, RED, WHITE, Color
        from raytracer.core.transform import Translation
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, pattern_at, stripe

        p = Blend(stripe(WHITE, BLACK), stripe(RED, BLACK, Translation(0.5, 0.0, 0.0)))
        # First branch sees x=0.75 (WHITE), second sees x=0.25 (RED)
        assert pattern_at(p, Point(0.75, 0.0, 0.0)) == Color(1.0, 0.5, 0.5)

    def test_nested_blend(self):
        """Test that blends nest."""
        from raytracer.core.color import BLACK, WHITE, Color
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, pattern_at, stripe

        inner = Blend(stripe(WHITE, BLACK), stripe(WHITE, BLACK))
        p = Blend(inner, stripe(BLACK, WHITE))
        assert pattern_at(p, Point(0.5, 0.0, 0.0)) == Color(0.5, 0.5, 0.5)

    def test_perturb_shifts_lattice_point(self):
        """Test that noise is zero at lattice points, so they shift by -0.5."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Perturb, pattern_at, stripe

        p = stripe(WHITE, BLACK)
        assert pattern_at(p, Point(1.0, 0.0, 0.0)) == BLACK
        # (1, 0, 0) is perturbed to (0.5, -0.5, -0.5)
        assert pattern_at(Perturb(p), Point(1.0, 0.0, 0.0)) == WHITE

    def test_perturbed_blend_perturbs_each_branch(self):
        """Test that perturbing a blend perturbs both branches."""
        from raytracer.core.color import BLACK, BLUE, RED, WHITE, Color
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, Perturb, pattern_at, stripe

        p = Perturb(Blend(stripe(WHITE, BLACK), stripe(RED, BLUE)))
        assert pattern_at(p, Point(1.0, 0.0, 0.0)) == Color(1.0, 0.5, 0.5)

    def test_perturbed_blend_uses_branch_pattern_space(self):
        """Test that each branch is perturbed after its own transform."""
        from raytracer.core.color import BLACK, BLUE, RED, WHITE, Color
        from raytracer.core.transform import Scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Blend, Perturb, pattern_at, stripe
        from raytracer.materials.perlin import perturb_point

        mixed = Blend(stripe(WHITE, BLACK, Scaling(0.25, 1.0, 1.0)), stripe(RED, BLUE))
        point = Point(1.0, 0.0, 0.0)
        # First branch: pattern point (4, 0, 0) is perturbed to x=3.5 (BLACK);
        # second branch: (1, 0, 0) is perturbed to x=0.5 (RED)
        per_branch = pattern_at(Perturb(mixed), point)
        assert per_branch == Color(0.5, 0.0, 0.0)
        # Perturbing once in object space gives x=0.5, i.e. x=2 in the
        # scaled branch (WHITE)
        perturbed_once = pattern_at(mixed, perturb_point(point))
        assert perturbed_once == Color(1.0, 0.5, 0.5)
        assert per_branch != perturbed_once

    def test_perturbed_leaf_uses_pattern_space(self):
        """Test that a transformed leaf is displaced in its own pattern space."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.transform import Scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Perturb, pattern_at, stripe
        from raytracer.materials.perlin import perturb_point

        leaf = stripe(WHITE, BLACK, Scaling(0.25, 1.0, 1.0))
        point = Point(1.0, 0.0, 0.0)
        assert pattern_at(Perturb(leaf), point) == BLACK
        assert pattern_at(leaf, perturb_point(point)) == WHITE

    def test_perturb_is_deterministic(self):
        """Test that perturbed patterns give the same color every time."""
        from raytracer.core.color import BLACK, WHITE
        from raytracer.core.transform import uniform_scaling
        from raytracer.core.tuples import Point
        from raytracer.materials.pattern import Perturb, pattern_at, ring

        p = Perturb(Perturb(ring(WHITE, BLACK, uniform_scaling(0.1))))
        point = Point(0.37, 1.21, -2.5)
        assert pattern_at(p, point) == pattern_at(p, point)
