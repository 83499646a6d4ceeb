"""
Unit tests for the Point/Vector value type.

Covers construction, arithmetic, dot/cross products, normalization,
tolerant equality and the textual read/write format.
"""

import io
import math

import numpy as np
import pytest

from geometry.core.point import Point, Vector, PointParseError, format_point
from geometry.utils.scale import PRECISION


EPSILON = PRECISION


class TestPointConstruction:
    """Tests for construction and coordinate access."""

    def test_default_constructor_is_origin(self):
        p = Point()
        assert p.x == pytest.approx(0.0, abs=EPSILON)
        assert p.y == pytest.approx(0.0, abs=EPSILON)
        assert p.z == pytest.approx(0.0, abs=EPSILON)

    def test_parameterized_constructor(self):
        p = Point(1.0, 2.0, 3.0)
        assert p.x == 1.0
        assert p.y == 2.0
        assert p.z == 3.0

    def test_integer_coordinates_stored_as_float(self):
        p = Point(1, 2, 3)
        assert isinstance(p.x, float)
        assert isinstance(p.z, float)

    def test_coordinates_are_independently_settable(self):
        p = Point(1.0, 2.0, 3.0)
        p.x = 10.0
        p.z = -4.0
        assert p == Point(10.0, 2.0, -4.0)

    def test_copy_is_independent(self):
        p1 = Point(4.0, 5.0, 6.0)
        p2 = p1.copy()
        assert p1 == p2

        p2.x = 100.0
        assert p1.x == 4.0

    def test_vector_is_point_alias(self):
        assert Vector is Point
        assert Vector(1, 0, 0) == Point(1, 0, 0)

    def test_unpacking(self):
        x, y, z = Point(7.0, 8.0, 9.0)
        assert (x, y, z) == (7.0, 8.0, 9.0)

    def test_not_hashable(self):
        with pytest.raises(TypeError):
            hash(Point(1.0, 2.0, 3.0))


class TestPointMetrics:
    """Tests for magnitude, normalize and distance."""

    def test_magnitude(self):
        assert Point(3.0, 4.0, 0.0).magnitude() == pytest.approx(5.0, abs=EPSILON)

    def test_magnitude_of_zero_vector(self):
        assert Point().magnitude() == 0.0

    def test_normalize_has_unit_length(self):
        norm = Point(1.0, 2.0, 2.0).normalize()
        assert norm.magnitude() == pytest.approx(1.0, abs=EPSILON)
        assert norm.x == pytest.approx(1.0 / 3.0)
        assert norm.y == pytest.approx(2.0 / 3.0)

    @pytest.mark.parametrize("coords", [
        (1e6, -2e6, 3e6),
        (1e-3, 0.0, 0.0),
        (-0.5, 0.25, 0.125),
    ])
    def test_normalize_unit_length_across_scales(self, coords):
        assert Point(*coords).normalize().magnitude() == pytest.approx(1.0, abs=1e-15)

    def test_normalize_zero_vector_returns_zero(self):
        norm = Point().normalize()
        assert norm == Point()

    def test_normalize_below_precision_returns_zero(self):
        tiny = Point(PRECISION / 4, 0.0, 0.0)
        norm = tiny.normalize()
        assert norm.x == 0.0 and norm.y == 0.0 and norm.z == 0.0

    def test_normalize_with_explicit_tolerance(self):
        small = Point(1e-3, 0.0, 0.0)
        assert small.normalize(tolerance=1e-2) == Point()
        assert small.normalize(tolerance=1e-4) == Point(1.0, 0.0, 0.0)

    def test_normalize_nan_propagates(self):
        assert math.isnan(Point(float("nan"), 1.0, 0.0).normalize().x)

    def test_normalize_does_not_modify_original(self):
        p = Point(3.0, 4.0, 0.0)
        p.normalize()
        assert p == Point(3.0, 4.0, 0.0)

    def test_distance(self):
        p1 = Point(1.0, 1.0, 1.0)
        p2 = Point(4.0, 5.0, 1.0)
        assert p1.distance(p2) == pytest.approx(5.0, abs=EPSILON)

    def test_distance_matches_difference_magnitude(self):
        p1 = Point(-1.5, 2.0, 7.25)
        p2 = Point(3.0, -4.0, 0.5)
        assert p1.distance(p2) == pytest.approx((p2 - p1).magnitude())
        assert p1.distance(p2) == pytest.approx(p2.distance(p1))


class TestPointArithmetic:
    """Tests for vector arithmetic and products."""

    def test_addition(self):
        p3 = Point(1.0, 2.0, 3.0) + Point(4.0, 5.0, 6.0)
        assert p3.x == pytest.approx(5.0, abs=EPSILON)
        assert p3.y == pytest.approx(7.0, abs=EPSILON)
        assert p3.z == pytest.approx(9.0, abs=EPSILON)

    def test_subtraction(self):
        assert Point(4.0, 5.0, 6.0) - Point(1.0, 2.0, 3.0) == Point(3.0, 3.0, 3.0)

    def test_operands_unmodified(self):
        a = Point(1.0, 2.0, 3.0)
        b = Point(4.0, 5.0, 6.0)
        _ = a + b
        _ = a - b
        _ = a * 3.0
        assert a == Point(1.0, 2.0, 3.0)
        assert b == Point(4.0, 5.0, 6.0)

    def test_scalar_multiplication_both_sides(self):
        a = Point(1.0, -2.0, 0.5)
        assert a * 2.0 == Point(2.0, -4.0, 1.0)
        assert 2.0 * a == Point(2.0, -4.0, 1.0)

    def test_negation(self):
        assert -Point(1.0, -2.0, 3.0) == Point(-1.0, 2.0, -3.0)

    def test_point_times_point_unsupported(self):
        with pytest.raises(TypeError):
            Point(1, 2, 3) * Point(4, 5, 6)

    def test_dot_product(self):
        assert Point(1.0, 2.0, 3.0).dot(Point(4.0, -5.0, 6.0)) == pytest.approx(12.0, abs=EPSILON)

    def test_cross_product_unit_axes(self):
        cross = Point(1.0, 0.0, 0.0).cross(Point(0.0, 1.0, 0.0))
        assert cross.x == pytest.approx(0.0, abs=EPSILON)
        assert cross.y == pytest.approx(0.0, abs=EPSILON)
        assert cross.z == pytest.approx(1.0, abs=EPSILON)

    def test_cross_product_right_hand_rule(self):
        assert Point(0, 1, 0).cross(Point(0, 0, 1)) == Point(1, 0, 0)
        assert Point(0, 0, 1).cross(Point(1, 0, 0)) == Point(0, 1, 0)

    @pytest.mark.parametrize("a, b", [
        ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)),
        ((-1.5, 0.0, 2.0), (3.0, -7.0, 0.25)),
        ((1e3, 1e-3, 0.0), (0.0, 2.0, -5.0)),
    ])
    def test_cross_product_anticommutative(self, a, b):
        pa, pb = Point(*a), Point(*b)
        assert pa.cross(pb) == -(pb.cross(pa))

    def test_cross_product_perpendicular_to_operands(self):
        a = Point(1.0, 2.0, 3.0)
        b = Point(-2.0, 0.5, 4.0)
        c = a.cross(b)
        assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
        assert c.dot(b) == pytest.approx(0.0, abs=1e-12)

    def test_nan_propagates_without_error(self):
        p = Point(float("nan"), 1.0, 2.0) + Point(1.0, 1.0, 1.0)
        assert math.isnan(p.x)
        assert math.isnan(p.magnitude())


class TestPointEquality:
    """Tests for relative-tolerance equality."""

    def test_equal_points(self):
        assert Point(1.0, 2.0, 3.0) == Point(1.0, 2.0, 3.0)

    def test_within_relative_tolerance(self):
        assert Point(1.0, 2.0, 3.0) == Point(1.0 + PRECISION, 2.0, 3.0)

    def test_outside_relative_tolerance(self):
        assert Point(1.0, 2.0, 3.0) != Point(1.0 + 1e-9, 2.0, 3.0)

    def test_tolerance_scales_with_magnitude(self):
        # One ulp apart at 1e20 is tens of thousands in absolute terms
        big = 1e20
        assert Point(big, 0.0, 0.0) == Point(np.nextafter(big, np.inf), 0.0, 0.0)
        assert Point(big, 0.0, 0.0) != Point(big * (1 + 1e-12), 0.0, 0.0)

    def test_near_zero_comparison_is_exact(self):
        assert Point(0.0, 0.0, 0.0) != Point(1e-300, 0.0, 0.0)
        assert Point(0.0, 0.0, 0.0) == Point(-0.0, 0.0, 0.0)

    def test_inequality_is_negation(self):
        a = Point(1.0, 2.0, 3.0)
        b = Point(1.0, 2.0, 3.5)
        assert (a != b) is not (a == b)

    def test_is_close_with_explicit_tolerance(self):
        a = Point(1.0, 2.0, 3.0)
        b = Point(1.001, 2.0, 3.0)
        assert not a.is_close(b)
        assert a.is_close(b, tolerance=1e-2)

    def test_compare_with_non_point(self):
        assert Point(1.0, 2.0, 3.0) != (1.0, 2.0, 3.0)


class TestPointText:
    """Tests for textual write ("Point[x, y, z]") and read ("x y z")."""

    def test_str_format(self):
        assert str(Point(1.0, 2.0, 3.0)) == "Point[1, 2, 3]"

    def test_str_format_fractional_and_negative(self):
        assert format_point(Point(1.5, -0.25, 1e-7)) == "Point[1.5, -0.25, 1e-07]"

    def test_parse_whitespace_separated(self):
        assert Point.parse("1.5 -2 3e2") == Point(1.5, -2.0, 300.0)

    def test_parse_tolerates_extra_whitespace(self):
        assert Point.parse("  1\t2\n 3 ") == Point(1.0, 2.0, 3.0)

    def test_written_form_is_not_readable(self):
        with pytest.raises(PointParseError):
            Point.parse(str(Point(1.0, 2.0, 3.0)))

    def test_strict_parse_missing_values(self):
        with pytest.raises(PointParseError):
            Point.parse("1 2")

    def test_strict_parse_extra_values(self):
        with pytest.raises(PointParseError):
            Point.parse("1 2 3 4")

    def test_strict_parse_non_numeric(self):
        with pytest.raises(PointParseError):
            Point.parse("1 abc 3")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Point.parse("")

    def test_lenient_parse_keeps_leading_values(self):
        p = Point.parse("1.5 abc 3", strict=False)
        assert p.x == 1.5
        assert p.y == 0.0
        assert p.z == 0.0

    def test_lenient_parse_keeps_numeric_prefix(self):
        assert Point.parse("1.5abc 2 3", strict=False) == Point(1.5, 0.0, 0.0)

    def test_lenient_parse_continues_after_prefix(self):
        # "2.5.3" is read as 2.5 followed by .3
        assert Point.parse("1 2.5.3", strict=False) == Point(1.0, 2.5, 0.3)

    def test_lenient_parse_stops_at_underscore(self):
        assert Point.parse("1_000 2 3", strict=False) == Point(1.0, 0.0, 0.0)

    @pytest.mark.parametrize("text", ["1_000 2 3", "nan 1 2", "1 inf 2", "1 2 0x10"])
    def test_strict_parse_rejects_non_decimal_forms(self, text):
        with pytest.raises(PointParseError):
            Point.parse(text)

    @pytest.mark.parametrize("text, expected", [
        ("+1 -2. .5", (1.0, -2.0, 0.5)),
        ("1e3 2E-1 -3e+0", (1000.0, 0.2, -3.0)),
    ])
    def test_strict_parse_accepts_decimal_forms(self, text, expected):
        assert Point.parse(text) == Point(*expected)

    def test_lenient_parse_partial_input(self):
        assert Point.parse("4 5", strict=False) == Point(4.0, 5.0, 0.0)

    def test_lenient_parse_empty_input(self):
        assert Point.parse("", strict=False) == Point()

    def test_lenient_parse_logs_warning(self, caplog):
        with caplog.at_level("WARNING", logger="geometry.core.point"):
            Point.parse("1", strict=False)
        assert "1 of 3 coordinates" in caplog.text

    def test_read_from_stream(self):
        stream = io.StringIO("1 2 3\n4 5 6\n")
        assert Point.read(stream) == Point(1.0, 2.0, 3.0)
        assert Point.read(stream) == Point(4.0, 5.0, 6.0)


class TestPointArrays:
    """Tests for numpy interop."""

    def test_to_array(self):
        arr = Point(1.0, 2.0, 3.0).to_array()
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, np.array([1.0, 2.0, 3.0]))

    def test_from_array(self):
        assert Point.from_array(np.array([4.0, 5.0, 6.0])) == Point(4.0, 5.0, 6.0)
        assert Point.from_array([1, 2, 3]) == Point(1.0, 2.0, 3.0)

    def test_from_array_wrong_length(self):
        with pytest.raises(ValueError):
            Point.from_array([1.0, 2.0])
