"""Reading simple ``key = value`` configuration files."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable
from os import PathLike
from typing import Union

_TRIM = " \t\r\n"
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ConfigError(ValueError):
    """A configuration file is missing or holds an unusable value."""


def read_file_lines(filename: Union[str, PathLike]) -> list[str]:
    """Return the non-empty lines of a file, without line endings."""
    try:
        with open(filename, encoding="utf-8") as handle:
            return [line for line in handle.read().split("\n") if line]
    except OSError as error:
        raise ConfigError(f"could not open {filename}") from error


def filter_desired_lines(lines: Iterable[str], invalid_line_start: str) -> list[str]:
    """Drop empty lines and lines starting with invalid_line_start."""
    return [line for line in lines if line and line[0] != invalid_line_start]


def split_lines_across_equals(lines: Iterable[str]) -> dict[str, str]:
    """Map trimmed keys to trimmed values for every ``key=value`` line.

    Lines without ``=`` or ending in ``=`` are skipped; later keys win.
    """
    pairs: dict[str, str] = {}
    for line in lines:
        key, sep, value = line.partition("=")
        if sep and value:
            pairs[key.strip(_TRIM)] = value.strip(_TRIM)
    return pairs


def _parse_int(value: str) -> int:
    match = _INT_PREFIX.match(value)
    if match is None:
        raise ConfigError(f"not an integer: {value!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ConfigError(f"integer out of range: {value!r}")
    return number


def _parse_float(value: str) -> float:
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        raise ConfigError(f"not a number: {value!r}")
    text = match.group(1)
    number = float(text)
    if math.isinf(number) and "inf" not in text.lower():
        raise ConfigError(f"number out of range: {value!r}")
    return number


def _parse_bool(value: str) -> bool:
    if value == "true":
        return True
    if value == "false":
        return False
    raise ConfigError(f"not a boolean: {value!r}")


def generalised_cast(value: str, kind: type) -> Union[str, bool, int, float]:
    """Convert a configuration value to str, bool, int or float.

    Numbers are read from the start of the text and any trailing text is
    ignored; booleans must be exactly ``true`` or ``false``.
    """
    if kind is str:
        return value
    if kind is bool:
        return _parse_bool(value)
    if kind is int:
        return _parse_int(value)
    if kind is float:
        return _parse_float(value)
    raise TypeError(f"unsupported kind: {kind!r}")