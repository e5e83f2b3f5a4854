"""Reading the scene settings file into a SceneConfig."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from os import PathLike
from typing import Union

from pathtracer.file_reader import (
    ConfigError,
    filter_desired_lines,
    generalised_cast,
    read_file_lines,
    split_lines_across_equals,
)
from pathtracer.scene_config import SceneConfig

HEADER_START = "["
_SEED_MODULUS = 2**32

# Required keys, the attribute each fills and the type it is read as.
_REQUIRED: tuple[tuple[str, str, type], ...] = (
    ("WindowTitle", "window_title", str),
    ("Width", "width", int),
    ("AspectRatio", "aspect_ratio", float),
    ("NumRays", "num_rays", int),
    ("NumBounces", "num_bounces", int),
    ("ContributionPerBounce", "contribution_per_bounce", float),
    ("FieldOfView", "field_of_view", int),
    ("HorizontalRotation", "horizontal_rotation", float),
    ("VerticalRotation", "vertical_rotation", float),
    ("CameraRotation", "camera_rotation", float),
    ("CameraOffset_X", "camera_x", float),
    ("CameraOffset_Y", "camera_y", float),
    ("CameraOffset_Z", "camera_z", float),
    ("PrintPercentStatusEvery", "print_percent_status_every", int),
    ("StoreResultToFile", "store_result_to_file", bool),
)


def read_config(file_path: Union[str, PathLike]) -> list[str]:
    """Return the non-empty lines of the scene file.

    Raises ConfigError when the file cannot be opened.
    """
    return read_file_lines(file_path)


def clean_up_lines(lines: Iterable[str]) -> dict[str, str]:
    """Drop section headers and map keys to their value text."""
    return split_lines_across_equals(filter_desired_lines(lines, HEADER_START))


def _optional_int(lines: Mapping[str, str], key: str) -> int | None:
    if key not in lines:
        return None
    try:
        return int(generalised_cast(lines[key], int))
    except ConfigError:
        return None


def interpret_lines(scene_config: SceneConfig, lines: Mapping[str, str]) -> None:
    """Fill scene_config from the key/value pairs.

    Every required key must be present and valid, otherwise ConfigError is
    raised and scene_config is left untouched. RandomSeed, NumThreads and
    FileName are optional; an unreadable seed or thread count is ignored.
    """
    missing = [key for key, _, _ in _REQUIRED if key not in lines]
    if missing:
        raise ConfigError(f"missing settings: {', '.join(missing)}")

    values = {
        attribute: generalised_cast(lines[key], kind)
        for key, attribute, kind in _REQUIRED
    }

    camera_position = (
        values.pop("camera_x"),
        values.pop("camera_y"),
        values.pop("camera_z"),
    )
    for attribute, value in values.items():
        setattr(scene_config, attribute, value)
    scene_config.camera_position = camera_position

    seed = _optional_int(lines, "RandomSeed")
    if seed is not None:
        scene_config.scene_seed = seed % _SEED_MODULUS
    threads = _optional_int(lines, "NumThreads")
    if threads is not None:
        scene_config.num_threads = threads
    if "FileName" in lines:
        scene_config.file_name = lines["FileName"]