"""Colour records and per-ray colour accumulation.

A colour is eight floats: R, G, B, emission R, G, B, emission strength
and specular fraction.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

BasicColour = tuple[float, ...]

GAMMA = 1.0 / 2.2
COLOUR_SIZE = 8


def _tone_map(value: float) -> float:
    ratio = value / (1.0 + value)
    if ratio < 0:
        return math.nan
    return ratio**GAMMA


def average_of_colours(colours: Iterable[Sequence[float]]) -> BasicColour:
    """Average the colours, then tone map and gamma correct every channel."""
    colours = list(colours)
    if not colours:
        raise ValueError("cannot average an empty collection of colours")
    sums = [sum(channel) for channel in zip(*colours)]
    return tuple(_tone_map(total / len(colours)) for total in sums)


class ColourData:
    """The colour gathered by one ray as it bounces through the scene."""

    def __init__(self) -> None:
        self._total = [1.0, 1.0, 1.0, 0.0, 0.0, 0.0, 0.0, 0.0]
        self.previous_colours: list[BasicColour] = []
        self.count = 0

    def combine_colour_as_average(
        self, new_colour: Sequence[float], bounce_info: int, contribution: float
    ) -> None:
        """Fold the colour of the surface just hit into the running total."""
        self.previous_colours.append(tuple(new_colour))
        strength = new_colour[6]
        for channel in range(3):
            self._total[channel + 3] += self._total[channel] * (
                new_colour[channel + 3] * strength
            )
        for channel in range(3):
            self._total[channel] *= new_colour[channel] * contribution
        self.count += 1

    @property
    def total_colour(self) -> BasicColour:
        """The accumulated colour so far."""
        return tuple(self._total)