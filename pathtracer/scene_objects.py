"""The collection of shapes that make up a scene."""

from __future__ import annotations

from collections.abc import Sequence

from pathtracer.geometry import Shape, Sphere, Triangle


class SceneObjects:
    """Holds every shape a ray may be tested against."""

    def __init__(self) -> None:
        self.shapes: list[Shape] = []

    def add_triangle(self, triangle: Triangle) -> None:
        """Add a triangle to the scene."""
        self.shapes.append(triangle)

    def add_sphere(self, sphere: Sphere) -> None:
        """Add a sphere to the scene."""
        self.shapes.append(sphere)

    def add_cuboid(
        self,
        corners: Sequence[Sequence[float]],
        colours: Sequence[Sequence[float]],
    ) -> None:
        """Add a cuboid as twelve triangles.

        ``corners`` are the eight corners in the order LDB, RDB, RDF, LDF,
        LUB, RUB, RUF, LUF (left/right, down/up, back/front).
        ``colours`` are twelve colours in the order D1, D2, L1, L2, R1, R2,
        B1, B2, F1, F2, U1, U2. The down face is coloured with B1 and B2.
        """
        if len(corners) != 8:
            raise ValueError(f"a cuboid needs 8 corners, got {len(corners)}")
        if len(colours) != 12:
            raise ValueError(f"a cuboid needs 12 colours, got {len(colours)}")

        ldb, rdb, rdf, ldf, lub, rub, ruf, luf = corners
        _d1, _d2, l1, l2, r1, r2, b1, b2, f1, f2, u1, u2 = colours

        faces = [
            (ldb, rdb, rdf, b1),  # down
            (ldb, ldf, rdf, b2),
            (lub, rub, ruf, u1),  # up
            (lub, luf, ruf, u2),
            (ldb, lub, luf, l1),  # left
            (ldb, ldf, luf, l2),
            (rdb, rub, ruf, r1),  # right
            (rdb, rdf, ruf, r2),
            (ldb, rdb, rub, b1),  # back
            (ldb, lub, rub, b2),
            (ldf, rdf, ruf, f1),  # front
            (ldf, luf, ruf, f2),
        ]
        for a, b, c, colour in faces:
            self.add_triangle(Triangle(a, b, c, colour))