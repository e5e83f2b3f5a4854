import math
import random

import pytest

from pathtracer import vectors as v


TEST_PLANE = ((0.0, 0.0, 1.0), 10.0)


def test_overloads_match_scalar_arithmetic():
    rng = random.Random(5489)
    for _ in range(100):
        num1 = rng.randint(-9999, 9999)
        num2 = rng.randint(-9999, 9999)
        if num2 == 0:
            continue
        assert v.add((num1,), (num2,)) == (num1 + num2,)
        assert v.subtract((num1,), (num2,)) == (num1 - num2,)
        assert v.multiply((num1,), (num2,)) == (num1 * num2,)
        (quotient,) = v.divide((num1,), (num2,))
        remainder = num1 - quotient * num2
        assert abs(remainder) < abs(num2)
        assert remainder == 0 or (remainder > 0) == (num1 > 0)


def test_integer_division_truncates_toward_zero():
    assert v.divide((7,), (2,)) == (3,)
    assert v.divide((-7,), (2,)) == (-3,)
    assert v.divide((7.0,), (2.0,)) == (3.5,)


def test_mixed_length_keeps_longer_tail():
    assert v.add((1, 2, 3), (10,)) == (11, 2, 3)
    assert v.subtract((1,), (10, 20)) == (-9, 20)


def test_magnitude_of_integer_vectors():
    assert v.magnitude((3, 4)) == 5
    assert v.magnitude((3, 4, 0)) == 5
    assert v.magnitude_squared((3, 4)) == 25


@pytest.mark.parametrize("vec", [(3.0, 4.0), (3.0, 4.0, 0.0)])
def test_normalise_and_scale(vec):
    assert abs(v.magnitude(v.normalise(vec)) - 1.0) < 1e-09
    assert v.magnitude(v.scale(vec, 4)) == 5 * 4


def test_normalise_zero_vector_raises():
    with pytest.raises(ValueError):
        v.normalise((0.0, 0.0, 0.0))


def test_dot_and_cross():
    assert abs(v.dot((1.0, 2.0, 3.0), (4.0, 5.0, 6.0)) - 32.0) < 1e-09
    assert abs(v.dot((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))) < 1e-09
    cross_non = v.cross((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert abs(v.magnitude(cross_non) - 1) < 1e-09
    assert v.vectors_equal(cross_non, (0.0, 0.0, 1.0))
    cross_zero = v.cross((2.0, 2.0, 2.0), (4.0, 4.0, 4.0))
    assert abs(v.magnitude(cross_zero)) < 1e-09


def test_distances_and_equality():
    assert v.vector_distance((1, 1, 1), (4, 5, 1)) == (3, 4, 0)
    assert v.scalar_distance((1, 1, 1), (4, 5, 1)) == 5
    assert v.vectors_equal((1.0, 2.0), (1.0, 2.0 + 1e-12))
    assert not v.vectors_equal((1.0, 2.0), (1.0, 2.1))
    assert v.as_abs((-1.0, 2.0, -3.0)) == (1.0, 2.0, 3.0)


def test_line_intersects_plane():
    hit = v.line_intersects_plane(((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), TEST_PLANE)
    assert hit is not None
    lam, point = hit
    assert lam == pytest.approx(10.0)
    assert v.vectors_equal(point, (0.0, 0.0, 10.0))
    assert v.line_intersects_plane(((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)), TEST_PLANE) is None


def test_point_on_plane():
    assert v.is_point_on_plane((0.0, 0.0, 10.0), TEST_PLANE)
    assert not v.is_point_on_plane((10.0, 0.0, 0.0), TEST_PLANE)


def test_point_to_line_distance():
    lam, offset = v.point_to_line_distance(
        ((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)), (5.0, 5.0, 0.0)
    )
    assert lam == pytest.approx(5.0)
    assert abs(v.magnitude(offset) - 5.0) < 1e-09


def test_point_to_degenerate_line():
    assert v.point_to_line_distance(
        ((1.0, 1.0, 1.0), (0.0, 0.0, 0.0)), (5.0, 5.0, 0.0)
    ) == (0.0, (0.0, 0.0, 0.0))


def test_reflect_point_across_plane():
    reflected = v.reflect_point_across_plane((0.0, 0.0, 0.0), TEST_PLANE)
    assert abs(reflected[2] - 20.0) < 1e-09


def test_angle_between_line_and_plane():
    perp = v.angle_between_line_and_plane(((0.0, 0.0, 0.0), (0.0, 0.0, 1.0)), TEST_PLANE)
    assert abs(perp - math.pi / 2) < 1e-09
    assert v.angle_between_line_and_plane(((0.0, 0.0, 0.0), (1.0, 2.0, 0.0)), TEST_PLANE) is None


def test_angle_between_lines():
    acute = v.angle_between_lines((1.0, 0.0, 0.0), (-1.0, 1.0, 0.0))
    obtuse = v.angle_between_lines((1.0, 0.0, 0.0), (-1.0, 1.0, 0.0), acute=False)
    assert acute == pytest.approx(math.pi / 4)
    assert acute + obtuse == pytest.approx(math.pi)