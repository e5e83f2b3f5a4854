"""Renderable shapes and their ray intersection tests."""

from __future__ import annotations

import abc
import math
from collections.abc import Sequence
from dataclasses import dataclass

from pathtracer import vectors
from pathtracer.colour import BasicColour
from pathtracer.vectors import Line, Vec

CUTOFF = 1e-09
SPHERE_TOLERANCE = 1e-07

_ZERO_VEC: Vec = (0.0, 0.0, 0.0)
_ZERO_COLOUR: BasicColour = (0.0,) * 8


@dataclass(frozen=True)
class IntersectionData:
    """Outcome of testing a ray against a shape.

    ``lam`` is the ray parameter of the hit and stays -1.0 on a miss.
    """

    intersects: bool = False
    lam: float = -1.0
    normal: Vec = _ZERO_VEC
    point_of_intersection: Vec = _ZERO_VEC
    colour: BasicColour = _ZERO_COLOUR


class Shape(abc.ABC):
    """Anything a ray can hit."""

    @abc.abstractmethod
    def check_intersection(self, ray: Line) -> IntersectionData:
        """Test the ray (origin, direction) against the shape."""


class Sphere(Shape):
    """A sphere with a centre, a radius and surface colour properties."""

    def __init__(
        self, centre: Sequence[float], radius: float, colour: Sequence[float]
    ) -> None:
        self.centre: Vec = tuple(centre)
        self.radius = radius
        self.colour: BasicColour = tuple(colour)

    def check_intersection(self, ray: Line) -> IntersectionData:
        origin, direction = ray
        unit_direction = vectors.normalise(direction)
        lam, offset_vec = vectors.point_to_line_distance(
            (origin, unit_direction), self.centre
        )
        dist_mag = vectors.magnitude(offset_vec)

        if not (dist_mag - self.radius < SPHERE_TOLERANCE and lam >= 0.0):
            return IntersectionData()

        # Half-chord length by Pythagoras; clamp for grazing rays.
        lambda_offset = math.sqrt(
            max(0.0, self.radius * self.radius - dist_mag * dist_mag)
        )
        hit_lambda = lam - lambda_offset
        point = vectors.add(origin, vectors.scale(unit_direction, hit_lambda))
        normal = vectors.normalise(vectors.subtract(point, self.centre))

        return IntersectionData(
            intersects=True,
            lam=hit_lambda,
            normal=normal,
            point_of_intersection=point,
            colour=self.colour,
        )


def _count_near_zero(vec: Sequence[float]) -> int:
    return sum(1 for coef in vec if abs(coef) < CUTOFF)


class Triangle(Shape):
    """A flat triangle given by three corners."""

    def __init__(
        self,
        v1: Sequence[float],
        v2: Sequence[float],
        v3: Sequence[float],
        colour: Sequence[float],
    ) -> None:
        self._corners: tuple[Vec, Vec, Vec] = (tuple(v1), tuple(v2), tuple(v3))
        self.colour: BasicColour = tuple(colour)
        self._choose_vectors()

        normal = vectors.cross(self._vectors[0], self._vectors[1])
        self.plane: tuple[Vec, float] = (normal, vectors.dot(normal, self._corners[1]))

    @property
    def corners(self) -> tuple[Vec, Vec, Vec]:
        """The three corners as given."""
        return self._corners

    @property
    def vectors(self) -> tuple[Vec, Vec]:
        """The two edge vectors used for barycentric coordinates."""
        return self._vectors

    def _choose_vectors(self) -> None:
        """Pick two edges so the barycentric equations stay solvable."""
        a, b, c = self._corners
        ab = vectors.subtract(b, a)
        ac = vectors.subtract(c, a)

        self._origin_index = 0
        if _count_near_zero(ab) < 2:
            self._vectors = (ab, ac)
        elif _count_near_zero(ac) < 2:
            self._vectors = (ac, ab)
        else:
            self._origin_index = 2
            self._vectors = (vectors.subtract(b, c), vectors.subtract(a, c))

        first, second = self._vectors
        if abs(first[0]) < CUTOFF and abs(second[0]) < CUTOFF:
            self._baryc_indices = (1, 2)
        elif abs(first[1]) < CUTOFF and abs(second[1]) < CUTOFF:
            self._baryc_indices = (0, 2)
        else:
            self._baryc_indices = (0, 1)

    def _barycentric(self, point: Sequence[float]) -> tuple[float, float]:
        i1, i2 = self._baryc_indices
        corner = self._corners[self._origin_index]
        first, second = self._vectors

        lam = (
            point[i2] * first[i1]
            - point[i1] * first[i2]
            - corner[i2] * first[i1]
            + corner[i1] * first[i2]
        ) / (second[i2] * first[i1] - second[i1] * first[i2])
        mu = (point[i1] - corner[i1] - lam * second[i1]) / first[i1]
        return lam, mu

    def check_intersection(self, ray: Line) -> IntersectionData:
        hit = vectors.line_intersects_plane(ray, self.plane)
        if hit is None:
            return IntersectionData()
        ray_lambda, point = hit
        if ray_lambda < 0:
            return IntersectionData()

        try:
            lam, mu = self._barycentric(point)
        except ZeroDivisionError:
            return IntersectionData()

        inside = (
            -CUTOFF < lam < 1 + CUTOFF
            and -CUTOFF < mu < 1 + CUTOFF
            and lam + mu < 1 + CUTOFF
        )
        if not inside:
            return IntersectionData()

        return IntersectionData(
            intersects=True,
            lam=ray_lambda,
            normal=self.plane[0],
            point_of_intersection=point,
            colour=self.colour,
        )