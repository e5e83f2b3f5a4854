"""Rendering a scene into an RGBA pixel buffer across worker threads."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from pathtracer import vectors
from pathtracer.camera import Camera
from pathtracer.colour import BasicColour, ColourData, average_of_colours
from pathtracer.geometry import IntersectionData, Shape
from pathtracer.raylogic import new_ray_direction
from pathtracer.scene_objects import SceneObjects
from pathtracer.vectors import Line, Vec

CHANNELS = 4
OPAQUE = 255


@dataclass(frozen=True)
class RowSpan:
    """The rows one worker renders and the buffer bytes they fill (inclusive)."""

    first_row: int
    last_row: int
    buffer_start: int
    buffer_end: int


def partition_rows(num_threads: int, row_width: int, num_rows: int) -> list[RowSpan]:
    """Share the rows between workers; the first workers take any extra rows."""
    if num_threads < 1:
        raise ValueError("at least one thread is needed")
    extra = num_rows % num_threads
    base = num_rows // num_threads
    row_bytes = row_width * CHANNELS

    spans = []
    accounted = 0
    for thread_id in range(num_threads):
        start = thread_id * base + accounted
        if accounted != extra:
            accounted += 1
        end = (thread_id + 1) * base - 1 + accounted
        spans.append(
            RowSpan(start, end, start * row_bytes, (end + 1) * row_bytes - 1)
        )
    return spans


def _closest_hit(shapes: Sequence[Shape], ray: Line) -> IntersectionData:
    closest = IntersectionData()
    for shape in shapes:
        data = shape.check_intersection(ray)
        if data.intersects and (data.lam < closest.lam or closest.lam < 0):
            closest = data
    return closest


def _trace_pixel(
    origin: Vec,
    direction: Vec,
    shapes: Sequence[Shape],
    num_rays: int,
    num_bounces: int,
    rng: random.Random,
    contribution: float,
) -> BasicColour:
    colours: list[BasicColour] = []
    for _ in range(num_rays):
        ray: Line = (origin, vectors.normalise(direction))
        ray_colour = ColourData()
        missed_at_once = False
        for bounce in range(num_bounces):
            closest = _closest_hit(shapes, ray)
            if not closest.intersects:
                missed_at_once = bounce == 0
                break
            ray = new_ray_direction(
                ray,
                closest.point_of_intersection,
                closest.normal,
                closest.colour,
                rng,
            )
            ray_colour.combine_colour_as_average(closest.colour, bounce, contribution)
        colours.append(ray_colour.total_colour)
        # A primary ray that hits nothing means every other ray misses too.
        if missed_at_once:
            break
    return average_of_colours(colours)


def _to_byte(value: float) -> int:
    if math.isnan(value):
        return 0
    return max(0, min(OPAQUE, int(255.0 * value)))


def render(
    width: int,
    height: int,
    objects: SceneObjects,
    num_threads: int,
    camera: Camera,
    num_rays: int,
    num_bounces: int,
    rng: random.Random,
    stat_log_every: int,
    contribution: float,
) -> bytes:
    """Trace every pixel and return the image as RGBA bytes, row by row."""
    if num_threads < 1:
        raise ValueError("at least one thread is needed")
    if num_rays < 1:
        raise ValueError("at least one ray per pixel is needed")

    buffer = bytearray(width * height * CHANNELS)
    threads_needed = min(num_threads, height)
    if threads_needed == 0:
        return bytes(buffer)

    spans = partition_rows(threads_needed, width, height)
    origin = camera.pinhole_pos
    shapes = list(objects.shapes)

    def render_span(thread_id: int, span: RowSpan) -> None:
        pixels_done = 0
        lowest_passed = 0
        for row in range(span.first_row, span.last_row + 1):
            directions = camera.row(row)
            if directions is None:
                return
            if thread_id == 0 and span.last_row > 0:
                percent = 100.0 * row / span.last_row
                if int(percent) > lowest_passed:
                    lowest_passed += stat_log_every
                    print(f">>> Approximate Completion: {percent:g}%")
            for direction in directions:
                colour = _trace_pixel(
                    origin, direction, shapes, num_rays, num_bounces, rng, contribution
                )
                index = span.buffer_start + pixels_done * CHANNELS
                buffer[index : index + CHANNELS] = bytes(
                    (
                        _to_byte(colour[3]),
                        _to_byte(colour[4]),
                        _to_byte(colour[5]),
                        OPAQUE,
                    )
                )
                pixels_done += 1

    print(">>> Beginning Computation")
    with ThreadPoolExecutor(max_workers=threads_needed) as pool:
        futures = [
            pool.submit(render_span, thread_id, span)
            for thread_id, span in enumerate(spans)
        ]
        for future in futures:
            future.result()
    print(">>> Computation Finished")

    return bytes(buffer)