"""Choosing the direction a ray takes after it hits a surface."""

from __future__ import annotations

import random
from collections.abc import Sequence

from pathtracer import vectors
from pathtracer.vectors import Line, Vec

BIAS = 1e-09
EPSILON = 1e-07


def new_ray_direction(
    ray: Line,
    point_of_intersection: Sequence[float],
    normal: Sequence[float],
    object_colour: Sequence[float],
    rng: random.Random,
) -> tuple[Vec, Vec]:
    """Return the bounced ray (origin, unit direction).

    The direction blends a random diffuse direction with the mirror
    reflection, weighted by the colour's specular fraction (index 7).
    The new origin is nudged off the surface along the normal.
    """
    ray_dir = ray[1]

    facing_normal = (
        vectors.scale(normal, -1.0) if vectors.dot(ray_dir, normal) > 0 else normal
    )
    facing_normal = vectors.normalise(facing_normal)

    diffuse = (rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
    if vectors.dot(diffuse, facing_normal) < 0:
        diffuse = vectors.scale(diffuse, -1)
    diffuse = vectors.normalise(diffuse)

    specular = vectors.subtract(
        ray_dir,
        vectors.scale(facing_normal, 2 * vectors.dot(facing_normal, ray_dir)),
    )
    if not vectors.dot(specular, facing_normal) > EPSILON:
        specular = vectors.scale(specular, -1)
    specular = vectors.normalise(specular)

    blended = vectors.add(
        diffuse,
        vectors.scale(vectors.subtract(specular, diffuse), object_colour[7]),
    )
    direction = vectors.normalise(blended)

    origin = vectors.add(point_of_intersection, vectors.scale(facing_normal, BIAS))
    return origin, direction