"""Unit tests for colors and numeric helpers."""

import pytest


class TestColorArithmetic:
    """Tests for color operators."""

    def test_components(self):
        """Test that colors expose red, green and blue."""
        from raytracer.core.color import Color

        c = Color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)

    def test_add(self):
        """Test adding colors."""
        from raytracer.core.color import Color

        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtract(self):
        """Test subtracting colors."""
        from raytracer.core.color import Color

        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_scalar_multiply(self):
        """Test multiplying a color by a scalar on either side."""
        from raytracer.core.color import Color

        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        """Test the component-wise product of two colors."""
        from raytracer.core.color import Color, hadamard_product

        expected = Color(0.9, 0.2, 0.04)
        assert Color(1.0, 0.2, 0.4) * Color(0.9, 1.0, 0.1) == expected
        assert hadamard_product(Color(1.0, 0.2, 0.4), Color(0.9, 1.0, 0.1)) == expected

    def test_negate(self):
        """Test negating a color."""
        from raytracer.core.color import Color

        assert -Color(0.1, -0.2, 0.3) == Color(-0.1, 0.2, -0.3)

    def test_blend(self):
        """Test averaging two colors."""
        from raytracer.core.color import BLACK, WHITE, Color, blend

        assert blend(WHITE, BLACK) == Color(0.5, 0.5, 0.5)

    def test_clamp(self):
        """Test clamping components into a range."""
        from raytracer.core.color import Color

        assert Color(1.5, -0.5, 0.5).clamp() == Color(1.0, 0.0, 0.5)
        assert Color(1.5, -0.5, 0.5).clamp(0.25, 0.75) == Color(0.75, 0.25, 0.5)

    def test_equality_tolerance(self):
        """Test that colors compare within EPSILON."""
        from raytracer.core.color import Color

        assert Color(0.1, 0.2, 0.3) == Color(0.100001, 0.2, 0.3)
        assert Color(0.1, 0.2, 0.3) != Color(0.11, 0.2, 0.3)

    def test_unhashable(self):
        """Test that tolerant equality leaves colors unhashable."""
        from raytracer.core.color import Color

        with pytest.raises(TypeError):
            hash(Color(0.1, 0.2, 0.3))

    def test_palette_values(self):
        """Test that palette colors are byte values scaled to 0..1."""
        from raytracer.core.color import GRAY, SKY_BLUE, YELLOW, Color

        assert SKY_BLUE == Color(135 / 255, 206 / 255, 235 / 255)
        assert GRAY.red == pytest.approx(128 / 255)
        assert YELLOW == Color(1.0, 1.0, 0.0)


class TestNumericHelpers:
    """Tests for EPSILON-based float helpers."""

    def test_approx_equal(self):
        """Test tolerant float comparison at the EPSILON boundary."""
        from raytracer.core.numeric import approx_equal

        assert approx_equal(1.0, 1.000009)
        assert not approx_equal(1.0, 1.00002)

    def test_reciprocal(self):
        """Test that near-zero input maps to zero instead of infinity."""
        from raytracer.core.numeric import reciprocal

        assert reciprocal(4.0) == 0.25
        assert reciprocal(0.0) == 0.0
        assert reciprocal(1e-7) == 0.0

    def test_floor_int_and_is_even(self):
        """Test flooring negatives and parity of negative integers."""
        from raytracer.core.numeric import floor_int, is_even

        assert floor_int(-0.5) == -1
        assert floor_int(2.7) == 2
        assert is_even(-2)
        assert not is_even(-1)
