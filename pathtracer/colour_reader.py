"""Reading named colours from the colour configuration file."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Union

from pathtracer.colour import COLOUR_SIZE, BasicColour
from pathtracer.file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
    split_lines_across_equals,
)

HEADER_START = "["
INVALID_CHANNEL = -1.0


def read_config(file_path: Union[str, PathLike]) -> list[str]:
    """Return the non-empty lines of the colour file.

    Raises ConfigError when the file cannot be opened.
    """
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> dict[str, str]:
    """Drop section headers and map colour names to their value text."""
    return split_lines_across_equals(filter_desired_lines(lines, HEADER_START))


def _channel(token: str) -> float:
    try:
        return float(generalised_cast(token, float))
    except ConfigError:
        return INVALID_CHANNEL


def _parse_colour(name: str, text: str) -> BasicColour:
    tokens = text.split()
    if len(tokens) != COLOUR_SIZE:
        raise ConfigError(
            f"colour {name!r} needs {COLOUR_SIZE} values, got {len(tokens)}"
        )
    return tuple(_channel(token) for token in tokens)


def interpret_lines(lines: Mapping[str, str]) -> dict[str, BasicColour]:
    """Turn ``name -> "r g b er eg eb strength specular"`` into colours.

    A value that is not a number becomes -1.0. A colour without exactly
    eight values raises ConfigError.
    """
    return {name: _parse_colour(name, text) for name, text in lines.items()}