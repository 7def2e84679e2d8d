"""Unit tests for the patterns package.

Tests cover:
- Parity patterns (stripe, ring, checkers) and their nested forms
- Gradients and radial gradients
- Space mapping through shape and pattern transforms
- Blended and Perturb composites
- Perlin noise properties
"""

import math

import pytest

from phongray.core.color import BLACK, WHITE, Color
from phongray.core.matrix import Matrix4
from phongray.core.tuples import Point
from phongray.patterns.banded import (
    Checkers,
    NestedCheckers,
    NestedRing,
    NestedStripe,
    Ring,
    Stripe,
)
from phongray.patterns.base import Pattern, Solid
from phongray.patterns.composite import PERTURB_SCALE, Blended, Perturb
from phongray.patterns.gradient import (
    Gradient,
    NestedGradient,
    NestedRadialGradient,
    RadialGradient,
)
from phongray.patterns.noise import PerlinNoise, noise3

RED = Color(1, 0, 0)
GREEN = Color(0, 1, 0)
BLUE = Color(0, 0, 1)


class CoordinatePattern(Pattern):
    """Pattern whose color is the pattern-space point itself."""

    def at(self, point):
        return Color(point.x, point.y, point.z)


class TestPatternBase:
    """Tests for the Pattern base class."""

    def test_default_transform(self):
        """Test a new pattern has the identity transform."""
        assert CoordinatePattern().transform == Matrix4.identity()

    def test_assign_transform(self):
        """Test assigning a transform updates the inverse."""
        pattern = CoordinatePattern()
        assert pattern.inverse_transform == Matrix4.identity()
        pattern.transform = Matrix4.translation(1, 2, 3)
        assert pattern.transform == Matrix4.translation(1, 2, 3)
        assert pattern.inverse_transform == Matrix4.translation(-1, -2, -3)

    def test_in_place_transform_edit(self):
        """Test writing a transform entry shifts where the pattern is sampled."""
        pattern = Stripe(WHITE, BLACK)
        assert pattern.at_local(Point(0.5, 0, 0)) == WHITE
        pattern.transform[0, 3] = 1.0
        assert pattern.at_local(Point(0.5, 0, 0)) == BLACK

    def test_object_transform(self, builder):
        """Test the shape transform is applied before sampling."""
        shape = builder.sphere(transform=Matrix4.scaling(2, 2, 2))
        assert CoordinatePattern().at_object(shape, Point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_pattern_transform(self, builder):
        """Test the pattern transform is applied before sampling."""
        shape = builder.sphere()
        pattern = CoordinatePattern(transform=Matrix4.scaling(2, 2, 2))
        assert pattern.at_object(shape, Point(2, 3, 4)) == Color(1, 1.5, 2)

    def test_object_and_pattern_transform(self, builder):
        """Test both transforms compose."""
        shape = builder.sphere(transform=Matrix4.scaling(2, 2, 2))
        pattern = CoordinatePattern(transform=Matrix4.translation(0.5, 1, 1.5))
        assert pattern.at_object(shape, Point(2.5, 3, 3.5)) == Color(0.75, 0.5, 0.25)

    def test_solid(self):
        """Test a solid pattern is constant."""
        solid = Solid(RED)
        assert solid.at(Point(0, 0, 0)) == RED
        assert solid.at(Point(-7.3, 12, 0.5)) == RED


class TestStripe:
    """Tests for Stripe."""

    def test_defaults_white_and_black(self):
        """Test a stripe created without colors."""
        pattern = Stripe()
        assert pattern.a == WHITE
        assert pattern.b == BLACK

    def test_constant_in_y_and_z(self):
        """Test stripes only vary along x."""
        pattern = Stripe()
        for point in (Point(0, 0, 0), Point(0, 1, 0), Point(0, 2, 0), Point(0, 0, 1), Point(0, 0, 2)):
            assert pattern.at(point) == WHITE

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, WHITE),
            (0.9, WHITE),
            (1.0, BLACK),
            (-0.1, BLACK),
            (-1.0, BLACK),
            (-1.1, WHITE),
        ],
    )
    def test_alternates_in_x(self, x, expected):
        """Test bands alternate across zero without a seam."""
        assert Stripe().at(Point(x, 0, 0)) == expected

    def test_with_object_transform(self, builder):
        """Test stripes on a scaled sphere."""
        shape = builder.sphere(transform=Matrix4.scaling(2, 2, 2))
        assert Stripe().at_object(shape, Point(1.5, 0, 0)) == WHITE

    def test_with_pattern_transform(self, builder):
        """Test stripes with a scaled pattern."""
        shape = builder.sphere()
        pattern = Stripe(transform=Matrix4.scaling(2, 2, 2))
        assert pattern.at_object(shape, Point(1.5, 0, 0)) == WHITE

    def test_with_both_transforms(self, builder):
        """Test stripes with object and pattern transforms."""
        shape = builder.sphere(transform=Matrix4.scaling(2, 2, 2))
        pattern = Stripe(transform=Matrix4.translation(0.5, 0, 0))
        assert pattern.at_object(shape, Point(2.5, 0, 0)) == WHITE


class TestGradient:
    """Tests for Gradient and RadialGradient."""

    @pytest.mark.parametrize(
        "x,expected",
        [
            (0.0, Color(1, 1, 1)),
            (0.25, Color(0.75, 0.75, 0.75)),
            (0.5, Color(0.5, 0.5, 0.5)),
            (0.75, Color(0.25, 0.25, 0.25)),
        ],
    )
    def test_linear_interpolation(self, x, expected):
        """Test a gradient blends from A to B along x."""
        assert Gradient(WHITE, BLACK).at(Point(x, 0, 0)) == expected

    def test_repeats_every_unit(self):
        """Test the ramp restarts at each integer."""
        pattern = Gradient(WHITE, BLACK)
        assert pattern.at(Point(1.25, 0, 0)) == pattern.at(Point(0.25, 0, 0))

    def test_radial_gradient(self):
        """Test the radial ramp depends on distance from the y axis."""
        pattern = RadialGradient(WHITE, BLACK)
        assert pattern.at(Point(0, 0, 0)) == WHITE
        assert pattern.at(Point(0.5, 0, 0)) == Color(0.5, 0.5, 0.5)
        assert pattern.at(Point(0, 0, 0.25)) == Color(0.75, 0.75, 0.75)
        assert pattern.at(Point(0.3, 5, 0.4)) == Color(0.5, 0.5, 0.5)


class TestRing:
    """Tests for Ring."""

    def test_extends_in_x_and_z(self):
        """Test rings spread out from the y axis."""
        pattern = Ring()
        assert pattern.at(Point(0, 0, 0)) == WHITE
        assert pattern.at(Point(1, 0, 0)) == BLACK
        assert pattern.at(Point(0, 0, 1)) == BLACK
        assert pattern.at(Point(0.708, 0, 0.708)) == BLACK


class TestCheckers:
    """Tests for Checkers."""

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_repeats_along_each_axis(self, axis):
        """Test checkers alternate along x, y and z."""
        pattern = Checkers()

        def along(value):
            coords = [0.0, 0.0, 0.0]
            coords[axis] = value
            return Point(*coords)

        assert pattern.at(along(0.0)) == WHITE
        assert pattern.at(along(0.99)) == WHITE
        assert pattern.at(along(1.01)) == BLACK

    def test_custom_colors(self):
        """Test checkers with explicit colors."""
        pattern = Checkers(RED, BLUE)
        assert pattern.at(Point(0.5, 0.5, 0.5)) == RED
        assert pattern.at(Point(1.5, 0.5, 0.5)) == BLUE
        assert pattern.at(Point(1.5, 1.5, 0.5)) == RED


class TestNestedPatterns:
    """Tests for the nested variants."""

    def test_default_operands_are_solid(self):
        """Test nested variants default to solid white and black."""
        pattern = NestedStripe()
        assert isinstance(pattern.a, Solid)
        assert isinstance(pattern.b, Solid)
        assert pattern.at(Point(0.5, 0, 0)) == WHITE
        assert pattern.at(Point(1.5, 0, 0)) == BLACK

    def test_nested_stripe_samples_child(self):
        """Test each band is filled by its child pattern."""
        pattern = NestedStripe(Solid(RED), Stripe(GREEN, BLUE))
        assert pattern.at(Point(0.5, 0, 0)) == RED
        assert pattern.at(Point(1.5, 0, 0)) == BLUE
        assert pattern.at(Point(2.5, 0, 0)) == RED

    def test_nested_ring(self):
        """Test rings of child patterns."""
        pattern = NestedRing(Solid(RED), Checkers(GREEN, BLUE))
        assert pattern.at(Point(0.5, 0, 0)) == RED
        assert pattern.at(Point(1.5, 0, 0)) == BLUE

    def test_nested_checkers_uses_child_transform(self):
        """Test children are sampled through their own transform."""
        child = Stripe(RED, BLUE, transform=Matrix4.scaling(0.5, 1, 1))
        pattern = NestedCheckers(child, Solid(GREEN))
        assert pattern.at(Point(0.25, 0, 0)) == RED
        assert pattern.at(Point(0.75, 0, 0)) == BLUE
        assert pattern.at(Point(1.25, 0, 0)) == GREEN

    def test_nested_gradient(self):
        """Test a gradient between two child patterns."""
        pattern = NestedGradient(Solid(WHITE), Solid(BLACK))
        assert pattern.at(Point(0.25, 0, 0)) == Color(0.75, 0.75, 0.75)

    def test_nested_radial_gradient(self):
        """Test a radial gradient between two child patterns."""
        pattern = NestedRadialGradient(Solid(RED), Solid(BLUE))
        assert pattern.at(Point(0.5, 0, 0)) == Color(0.5, 0, 0.5)

    def test_nesting_depth(self):
        """Test patterns nest more than one level deep."""
        inner = NestedStripe(Solid(RED), Solid(GREEN))
        outer = NestedCheckers(inner, Solid(BLUE))
        assert outer.at(Point(0.5, 0.5, 0.5)) == RED
        assert outer.at(Point(1.5, 0.5, 0.5)) == BLUE
        assert outer.at(Point(1.5, 1.5, 0.5)) == GREEN


class TestBlended:
    """Tests for Blended."""

    def test_averages_children(self):
        """Test the result is the mean of both children."""
        pattern = Blended(Solid(RED), Solid(BLUE))
        assert pattern.at(Point(3, 4, 5)) == Color(0.5, 0, 0.5)

    def test_crossed_stripes(self):
        """Test blending perpendicular stripes."""
        pattern = Blended(Stripe(), Stripe(transform=Matrix4.rotation_y(math.pi / 2)))
        assert pattern.at(Point(0.5, 0, 0.5)) == Color(0.5, 0.5, 0.5)
        assert pattern.at(Point(0.5, 0, -0.5)) == WHITE


class TestPerturb:
    """Tests for Perturb."""

    def test_offsets_every_axis_by_scaled_noise(self):
        """Test the same displacement is added to x, y and z."""
        pattern = Perturb(CoordinatePattern(), noise=lambda x, y, z: 1.0)
        expected = Color(1 + PERTURB_SCALE, 2 + PERTURB_SCALE, 3 + PERTURB_SCALE)
        assert pattern.at(Point(1, 2, 3)) == expected

    def test_custom_scale(self):
        """Test the displacement multiplier can be changed."""
        pattern = Perturb(CoordinatePattern(), noise=lambda x, y, z: -0.5, scale=1.0)
        assert pattern.at(Point(1, 2, 3)) == Color(0.5, 1.5, 2.5)

    def test_displacement_can_cross_band(self):
        """Test a perturbed stripe changes band near an edge."""
        pattern = Perturb(Stripe(), noise=lambda x, y, z: -1.0)
        assert pattern.at(Point(0.1, 0, 0)) == BLACK

    def test_default_noise_is_zero_on_lattice(self):
        """Test integer points are not displaced by Perlin noise."""
        pattern = Perturb(CoordinatePattern())
        assert pattern.at(Point(1, 2, 3)) == Color(1, 2, 3)


class TestPerlinNoise:
    """Tests for PerlinNoise."""

    def test_zero_at_lattice_points(self):
        """Test noise vanishes at integer coordinates."""
        noise = PerlinNoise(seed=3)
        for point in ((0, 0, 0), (1, 2, 3), (-4, 7, 255), (300, -1, 2)):
            assert noise(*point) == pytest.approx(0.0)

    def test_output_in_range(self):
        """Test samples stay within [-1, 1]."""
        noise = PerlinNoise(seed=1)
        for i in range(200):
            value = noise(i * 0.37, i * 0.11 - 5, i * 0.73 + 0.5)
            assert -1.0 <= value <= 1.0

    def test_same_seed_is_deterministic(self):
        """Test two fields with the same seed agree."""
        a = PerlinNoise(seed=5)
        b = PerlinNoise(seed=5)
        assert a(0.3, 1.7, -2.2) == b(0.3, 1.7, -2.2)

    def test_different_seeds_differ(self):
        """Test different seeds give different fields."""
        a = PerlinNoise(seed=1)
        b = PerlinNoise(seed=2)
        samples = [(i * 0.31 + 0.1, i * 0.17 + 0.2, i * 0.53 + 0.3) for i in range(20)]
        assert any(a(*p) != b(*p) for p in samples)

    def test_not_constant_between_lattice_points(self):
        """Test the field varies away from the lattice."""
        values = {round(noise3(i * 0.29 + 0.13, 0.41, 0.77), 6) for i in range(20)}
        assert len(values) > 1

    def test_seed_wraps_at_table_size(self):
        """Test seeds a table length apart select the same field."""
        from phongray.patterns.noise import TABLE_SIZE

        a = PerlinNoise(seed=4)
        b = PerlinNoise(seed=4 + TABLE_SIZE)
        assert a(0.3, 1.7, -2.2) == b(0.3, 1.7, -2.2)

    def test_repr(self):
        """Test repr shows the seed."""
        assert repr(PerlinNoise(seed=9)) == "PerlinNoise(seed=9)"
