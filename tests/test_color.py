"""Tests for Color class."""

import pytest

from phongtracer.color import Color, BLACK, WHITE


class TestColorCreation:
    """Test Color construction."""

    def test_channels(self):
        c = Color(-0.5, 0.4, 1.7)
        assert c.red == -0.5
        assert c.green == 0.4
        assert c.blue == 1.7

    def test_aliases(self):
        c = Color(0.5, 0.6, 0.7)
        assert c.r == 0.5
        assert c.g == 0.6
        assert c.b == 0.7

    def test_constants(self):
        assert BLACK == Color(0, 0, 0)
        assert WHITE == Color(1, 1, 1)


class TestColorArithmetic:
    """Test Color operations."""

    def test_add(self):
        assert Color(0.9, 0.6, 0.75) + Color(0.7, 0.1, 0.25) == Color(1.6, 0.7, 1.0)

    def test_subtract(self):
        assert Color(0.9, 0.6, 0.75) - Color(0.7, 0.1, 0.25) == Color(0.2, 0.5, 0.5)

    def test_multiply_by_scalar(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

    def test_values_are_not_clamped(self):
        c = Color(0.8, 0.8, 0.8) + Color(0.8, 0.8, 0.8)
        assert c.red == pytest.approx(1.6)


class TestColorOutput:
    """Test clamping and byte mapping."""

    def test_clamp(self):
        assert Color(-0.5, 0.5, 1.5).clamp() == Color(0, 0.5, 1)

    def test_to_rgb8_clamps_and_scales(self):
        assert Color(1.5, 0, 0).to_rgb8() == (255, 0, 0)
        assert Color(-0.5, 0, 1.5).to_rgb8() == (0, 0, 255)

    def test_to_rgb8_rounds_half_up(self):
        assert Color(0, 0.5, 0).to_rgb8() == (0, 128, 0)

    def test_to_rgb8_values(self):
        assert Color(0.2, 1.0, -10.1).to_rgb8() == (51, 255, 0)
