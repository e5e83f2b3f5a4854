"""Reading spheres, triangles and cuboids from the object configuration file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from os import PathLike
from typing import Union

from pathtracer.colour import BasicColour
from pathtracer.file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
)
from pathtracer.geometry import Sphere, Triangle
from pathtracer.scene_objects import SceneObjects
from pathtracer.vectors import Vec

HEADER_START = "["
SPHERE_TOKENS = 6
SPHERE_NUMBERS = 4
CUBOID_LINES = 14
CUBOID_CORNERS = 8
TRIANGLE_LINES = 4
TRIANGLE_CORNERS = 3


def read_config(file_path: Union[str, PathLike]) -> list[str]:
    """Return the non-empty lines of the object file.

    Raises ConfigError when the file cannot be opened.
    """
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> list[str]:
    """Drop section headers."""
    return filter_desired_lines(lines, HEADER_START)


def _try_float(token: str) -> float | None:
    try:
        return float(generalised_cast(token, float))
    except ConfigError:
        return None


def _vector(line: str) -> Vec:
    tokens = line.split()
    if len(tokens) != 3:
        raise ConfigError(f"expected three coordinates: {line!r}")
    coords = [_try_float(token) for token in tokens]
    if any(coord is None for coord in coords):
        raise ConfigError(f"invalid coordinate in {line!r}")
    return tuple(coords)


def _colour(name: str, colours: Mapping[str, BasicColour]) -> BasicColour:
    try:
        return colours[name]
    except KeyError:
        raise ConfigError(f"unknown colour {name!r}") from None


def _colour_pair(
    line: str, colours: Mapping[str, BasicColour]
) -> tuple[BasicColour, BasicColour]:
    tokens = line.split()
    if len(tokens) != 2:
        raise ConfigError(f"expected two colour names: {line!r}")
    return _colour(tokens[0], colours), _colour(tokens[1], colours)


def _block(lines: Sequence[str], start: int, length: int, kind: str) -> Sequence[str]:
    if start + length >= len(lines):
        raise ConfigError(f"{kind} at line {start} is missing its data lines")
    return lines[start + 1 : start + length + 1]


def _sphere(line: str, colours: Mapping[str, BasicColour]) -> Sphere:
    tokens = line.split()
    if len(tokens) != SPHERE_TOKENS:
        raise ConfigError(f"a sphere needs {SPHERE_TOKENS} fields: {line!r}")
    numbers = [n for n in map(_try_float, tokens) if n is not None]
    if len(numbers) != SPHERE_NUMBERS:
        raise ConfigError(f"a sphere needs {SPHERE_NUMBERS} numbers: {line!r}")
    colour = _colour(tokens[5], colours)
    return Sphere(tuple(numbers[:3]), numbers[3], colour)


def _add_cuboid(
    scene_objects: SceneObjects,
    block: Sequence[str],
    colours: Mapping[str, BasicColour],
) -> None:
    corners = [_vector(line) for line in block[:CUBOID_CORNERS]]
    pairs = [_colour_pair(line, colours) for line in block[CUBOID_CORNERS:]]
    scene_objects.add_cuboid(corners, [c for pair in pairs for c in pair])


def _triangle(block: Sequence[str], colours: Mapping[str, BasicColour]) -> Triangle:
    corners = [_vector(line) for line in block[:TRIANGLE_CORNERS]]
    names = block[TRIANGLE_CORNERS].split()
    if len(names) != 1:
        raise ConfigError(f"a triangle needs one colour name: {block[3]!r}")
    return Triangle(*corners, _colour(names[0], colours))


def interpret_lines(
    scene_objects: SceneObjects,
    lines: Sequence[str],
    colours: Mapping[str, BasicColour],
) -> None:
    """Add every object described by the lines to scene_objects.

    A line containing ``sphere`` holds ``sphere x y z radius colour``.
    A line containing ``cuboid`` is followed by eight corner lines and six
    lines of colour pairs; one containing ``triangle`` by three corner
    lines and a colour name. Objects read before an error stay added;
    the error raises ConfigError.
    """
    lines = list(lines)
    for index, line in enumerate(lines):
        if "sphere" in line:
            scene_objects.add_sphere(_sphere(line, colours))
        if "cuboid" in line:
            block = _block(lines, index, CUBOID_LINES, "cuboid")
            _add_cuboid(scene_objects, block, colours)
        if "triangle" in line:
            block = _block(lines, index, TRIANGLE_LINES, "triangle")
            scene_objects.add_triangle(_triangle(block, colours))