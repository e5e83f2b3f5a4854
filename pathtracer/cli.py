"""Command that reads the scene files, renders the scene and saves a BMP."""

from __future__ import annotations

import argparse
import os
import random
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from pathtracer import colour_reader, config_reader, object_reader
from pathtracer.bmp import write_bmp
from pathtracer.camera import Camera
from pathtracer.file_reader import ConfigError
from pathtracer.render import render
from pathtracer.scene_config import FILE_NAME_DEFAULT, SceneConfig
from pathtracer.timer import MILLISECONDS, MINUTES, SECONDS, Timer, log_context

SCENE_FILE = "scene_config.ini"
COLOUR_FILE = "colour_data.ini"
OBJECT_FILE = "object_config.ini"
OUTPUT_ID_MIN = 1
OUTPUT_ID_MAX = 999999
SECONDS_TO_MINUTES_CUTOFF = 300.0


def save_image(
    file_name: Union[str, PathLike], width: int, height: int, pixel_buffer: bytes
) -> bool:
    """Write the buffer as a BMP file and report the outcome on stdout."""
    try:
        write_bmp(file_name, pixel_buffer, width, height)
    except OSError:
        print("There was an error trying to save the file")
        return False
    print(f"File saved successfully to {file_name}")
    return True


def set_scene_configuration(
    scene_setup: SceneConfig, directory: Union[str, PathLike] = "."
) -> None:
    """Fill scene_setup from the three configuration files in directory.

    Raises ConfigError listing every file that is missing or invalid.
    """
    base = Path(directory)
    sources = (
        ("scene", config_reader.read_config, SCENE_FILE, "scene_config.ini"),
        ("colour", colour_reader.read_config, COLOUR_FILE, "colour_config.ini"),
        ("object", object_reader.read_config, OBJECT_FILE, "object_config.ini"),
    )
    lines: dict[str, list[str]] = {}
    errors: list[str] = []
    for key, reader, file_name, shown in sources:
        try:
            lines[key] = reader(base / file_name)
        except ConfigError:
            errors.append(f"Could not find {shown}")
    if errors:
        raise ConfigError("\n".join(errors))

    try:
        config_reader.interpret_lines(
            scene_setup, config_reader.clean_up_lines(lines["scene"])
        )
    except ConfigError:
        errors.append("Some values were invalid or missing in scene_config.ini")

    colours = {}
    try:
        colours = colour_reader.interpret_lines(
            colour_reader.clean_up_lines(lines["colour"])
        )
    except ConfigError:
        errors.append("Some values were invalid in colour.ini")

    try:
        object_reader.interpret_lines(
            scene_setup.scene_setup,
            object_reader.clean_up_lines(lines["object"]),
            colours,
        )
    except ConfigError:
        errors.append("Something went wrong interpreting object config")

    if errors:
        raise ConfigError("\n".join(errors))


def _log_duration(name: str, seconds_timer: Timer, minutes_timer: Timer) -> None:
    seconds = seconds_timer.elapsed()
    if seconds < SECONDS_TO_MINUTES_CUTOFF:
        log_context(name, "s", seconds)
    else:
        log_context(name, "min", minutes_timer.elapsed())


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the configured scene; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render the scene described by the configuration files.",
    )
    parser.add_argument(
        "--config-dir",
        default=".",
        help="directory holding the three configuration files",
    )
    args = parser.parse_args(argv)

    program_minutes = Timer(MINUTES)
    program_seconds = Timer(SECONDS)

    scene_setup = SceneConfig()
    try:
        set_scene_configuration(scene_setup, args.config_dir)
    except ConfigError as error:
        print(error)
        return 1

    if scene_setup.scene_seed is not None:
        rng = random.Random(scene_setup.scene_seed)
    else:
        rng = random.Random()

    if not scene_setup.num_threads:
        scene_setup.num_threads = os.cpu_count() or 1

    scene_setup.display()

    camera = Camera(
        scene_setup.width,
        scene_setup.aspect_ratio,
        scene_setup.field_of_view,
        scene_setup.horizontal_rotation,
        scene_setup.vertical_rotation,
        scene_setup.camera_rotation,
        scene_setup.camera_position,
    )
    camera.populate_pixel_directions()
    scene_setup.height = camera.height

    render_minutes = Timer(MINUTES)
    render_seconds = Timer(SECONDS)
    pixel_buffer = render(
        scene_setup.width,
        scene_setup.height,
        scene_setup.scene_setup,
        scene_setup.num_threads,
        camera,
        scene_setup.num_rays,
        scene_setup.num_bounces,
        rng,
        scene_setup.print_percent_status_every,
        scene_setup.contribution_per_bounce,
    )
    render_minutes.stop()
    render_seconds.stop()

    saver_timer = Timer(MILLISECONDS)
    if scene_setup.store_result_to_file:
        if scene_setup.file_name != FILE_NAME_DEFAULT:
            output_name = scene_setup.file_name
        else:
            output_name = f"OutputScene_{rng.randint(OUTPUT_ID_MIN, OUTPUT_ID_MAX)}"
        save_image(
            f"{output_name}.bmp", scene_setup.width, scene_setup.height, pixel_buffer
        )
    saver_timer.stop()
    program_minutes.stop()
    program_seconds.stop()

    print()
    _log_duration("Ray Simulations", render_seconds, render_minutes)
    log_context("Writing BMP File", "ms", saver_timer.elapsed())
    _log_duration("Program Duration", program_seconds, program_minutes)
    return 0