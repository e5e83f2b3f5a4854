"""Pinhole camera producing one ray direction per pixel."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Optional

from pathtracer import vectors
from pathtracer.vectors import Vec

_PINHOLE: Vec = (0.0, 0.0, -1.0)


class Camera:
    """A pinhole camera one unit behind its screen, rotated then offset."""

    def __init__(
        self,
        width: int,
        aspect_ratio: float,
        fov_degrees: float,
        horiz_rotation: float,
        vert_rotation: float,
        camera_rotation: float,
        offset: Sequence[float],
    ) -> None:
        self.width = width
        self.aspect_ratio = aspect_ratio
        self.fov_degrees = fov_degrees
        self.xz_angle = horiz_rotation
        self.y_xz_angle = vert_rotation
        self.camera_angle = camera_rotation
        self.offset: Vec = tuple(offset)
        self.height = int(width / aspect_ratio)
        self.pinhole_pos: Vec = vectors.add(_PINHOLE, self.offset)
        self._directions: list[list[Vec]] = [
            [(0.0, 0.0, 0.0)] * width for _ in range(self.height)
        ]

    def _rotate(self, vec: Vec) -> Vec:
        x, y, z = vec
        roll, pitch, yaw = self.camera_angle, self.y_xz_angle, self.xz_angle

        rx = x * math.cos(roll) - y * math.sin(roll)
        ry = x * math.sin(roll) + y * math.cos(roll)
        rz = z

        py = ry * math.cos(pitch) - rz * math.sin(pitch)
        pz = ry * math.sin(pitch) + rz * math.cos(pitch)
        px = rx

        return (
            px * math.cos(yaw) + pz * math.sin(yaw),
            py,
            pz * math.cos(yaw) - px * math.sin(yaw),
        )

    def populate_pixel_directions(self) -> None:
        """Compute the rotated direction from the pinhole through every pixel."""
        fov = math.radians(self.fov_degrees)
        screen_width = math.tan(fov / 2) * 2
        screen_height = screen_width / self.aspect_ratio
        x_offset = screen_width / 2.0
        y_offset = screen_height / 2.0
        x_scale = screen_width / self.width
        y_scale = screen_height / self.height

        self._directions = [
            [
                self._rotate(
                    vectors.subtract(
                        (x_scale * x - x_offset, y_scale * y - y_offset, 0.0),
                        _PINHOLE,
                    )
                )
                for x in range(self.width)
            ]
            for y in range(self.height)
        ]
        self.pinhole_pos = vectors.add(_PINHOLE, self.offset)

    def pixel(self, x: int, y: int) -> Optional[Vec]:
        """The direction for pixel (x, y), or None when out of range."""
        if 0 <= y < len(self._directions) and 0 <= x < len(self._directions[y]):
            return self._directions[y][x]
        return None

    def row(self, y: int) -> Optional[list[Vec]]:
        """A copy of the directions of row y, or None when out of range."""
        if 0 <= y < len(self._directions):
            return list(self._directions[y])
        return None