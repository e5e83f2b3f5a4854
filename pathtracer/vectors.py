"""Vector, line and plane algebra on plain tuples of numbers."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from typing import Optional

Vec = tuple[float, ...]
Line = tuple[Sequence[float], Sequence[float]]
Plane = tuple[Sequence[float], float]

PI = math.pi
EPSILON = 1e-09


def _elementwise(
    a: Sequence[float], b: Sequence[float], op: Callable[[float, float], float]
) -> Vec:
    """Combine paired components; the longer vector's tail is kept unchanged."""
    combined = tuple(op(x, y) for x, y in zip(a, b))
    longer = a if len(a) > len(b) else b
    return combined + tuple(longer[len(combined):])


def _divide_scalar(x: float, y: float) -> float:
    if isinstance(x, int) and isinstance(y, int):
        quotient = abs(x) // abs(y)
        return quotient if (x >= 0) == (y >= 0) else -quotient
    return x / y


def add(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise sum."""
    return _elementwise(a, b, lambda x, y: x + y)


def subtract(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise difference a - b."""
    return _elementwise(a, b, lambda x, y: x - y)


def multiply(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise product."""
    return _elementwise(a, b, lambda x, y: x * y)


def divide(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise quotient; integer pairs divide truncating toward zero."""
    return _elementwise(a, b, _divide_scalar)


def vector_distance(vec1: Sequence[float], vec2: Sequence[float]) -> Vec:
    """The vector leading from vec1 to vec2."""
    return subtract(vec2, vec1)


def vectors_equal(v1: Sequence[float], v2: Sequence[float]) -> bool:
    """True when both vectors have the same size and every component matches."""
    if len(v1) != len(v2):
        return False
    return all(abs(c1 - c2) < EPSILON for c1, c2 in zip(v1, v2))


def scale(vec: Sequence[float], factor: float) -> Vec:
    """Multiply every component by a scalar."""
    return tuple(coef * factor for coef in vec)


def magnitude_squared(vec: Sequence[float]) -> float:
    """Sum of the squared components."""
    return sum(coef * coef for coef in vec)


def magnitude(vec: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(magnitude_squared(vec))


def scalar_distance(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return magnitude(vector_distance(vec1, vec2))


def normalise(vec: Sequence[float]) -> Vec:
    """Return the unit vector in the direction of vec."""
    mag = magnitude(vec)
    if mag == 0:
        raise ValueError("cannot normalise a zero-length vector")
    return tuple(val / mag for val in vec)


def as_abs(vec: Sequence[float]) -> Vec:
    """Absolute value of every component."""
    return tuple(abs(val) for val in vec)


def dot(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Dot product."""
    return sum(x * y for x, y in zip(vec1, vec2))


def cross(vec1: Sequence[float], vec2: Sequence[float]) -> Vec:
    """Cross product of two 3-vectors."""
    a0, a1, a2 = vec1
    b0, b1, b2 = vec2
    return (
        a1 * b2 - a2 * b1,
        -1 * (a0 * b2 - a2 * b0),
        a0 * b1 - a1 * b0,
    )


def line_intersects_plane(line: Line, plane: Plane) -> Optional[tuple[float, Vec]]:
    """Return (lambda, point) where the line meets the plane, or None if parallel."""
    origin, direction = line
    normal, dval = plane
    discriminant = dot(normal, direction)
    if abs(discriminant) < EPSILON:
        return None
    lam = (dval - dot(normal, origin)) / discriminant
    return lam, add(origin, scale(direction, lam))


def is_point_on_plane(point: Sequence[float], plane: Plane) -> bool:
    """True when the point lies on the plane."""
    result = line_intersects_plane((point, plane[0]), plane)
    if result is None:
        return False
    return abs(result[0]) < EPSILON


def angle_between_lines(
    v1: Sequence[float], v2: Sequence[float], acute: bool = True
) -> float:
    """Acute (or, when acute is False, obtuse) angle between two directions."""
    dot_product = dot(v1, v2)
    if dot_product < 0:
        dot_product = dot(v1, scale(v2, -1))
    acute_angle = math.acos(dot_product / (magnitude(v1) * magnitude(v2)))
    return acute_angle if acute else PI - acute_angle


def point_to_line_distance(
    line: Line, point: Sequence[float]
) -> tuple[float, Vec]:
    """Return (lambda, vector from the point to the nearest point on the line)."""
    origin, direction = line
    determinant = magnitude(direction) ** 2
    if determinant < EPSILON:
        return 0.0, tuple(0.0 for _ in point)
    lam = (
        direction[0] * (point[0] - origin[0])
        + direction[1] * (point[1] - origin[1])
        + direction[2] * (point[2] - origin[2]) / determinant
    )
    return lam, add(subtract(origin, point), scale(direction, lam))


def angle_between_line_and_plane(line: Line, plane: Plane) -> Optional[float]:
    """Angle between a line and a plane, or None when they are parallel."""
    direction = line[1]
    normal = plane[0]
    dot_product = dot(direction, normal)
    if abs(dot_product) < EPSILON:
        return None
    cos_angle = dot_product / (magnitude(direction) * magnitude(normal))
    angle = math.acos(max(-1.0, min(1.0, cos_angle)))
    if angle >= PI / 2:
        return angle - PI / 2
    return PI / 2 - angle


def reflect_point_across_plane(point: Sequence[float], plane: Plane) -> Vec:
    """Mirror a point through the plane."""
    normal, dval = plane
    normal_magnitude = magnitude(normal)
    if abs(normal_magnitude) < EPSILON:
        return tuple(point)
    lam = (dval - point[0] - point[1] - point[2]) / normal_magnitude**2
    return add(point, scale(normal, 2 * lam))