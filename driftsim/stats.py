"""Spread statistics of particle clouds and their CSV output."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from driftsim.particles import Particle


@dataclass(frozen=True)
class SpreadStats:
    """Mean and population variance of particle coordinates."""

    mean_x: float
    mean_y: float
    variance_x: float
    variance_y: float

    @property
    def std_x(self) -> float:
        return math.sqrt(self.variance_x)

    @property
    def std_y(self) -> float:
        return math.sqrt(self.variance_y)


def spread_stats(particles: Sequence[Particle]) -> SpreadStats:
    """Compute the means and population variances of x and y."""
    count = len(particles)
    if count == 0:
        raise ValueError("cannot compute statistics of no particles")
    mean_x = sum(p.x for p in particles) / count
    mean_y = sum(p.y for p in particles) / count
    variance_x = sum((p.x - mean_x) ** 2 for p in particles) / count
    variance_y = sum((p.y - mean_y) ** 2 for p in particles) / count
    return SpreadStats(mean_x, mean_y, variance_x, variance_y)


def format_number(value: float) -> str:
    """Format a number with six significant digits in general notation."""
    return f"{value:g}"


def write_variance_row(
    stream: TextIO, time: float, stats: SpreadStats, with_dispersion: bool = False
) -> None:
    """Write 'time,var_x,var_y' and, if asked, ',std_x,std_y'."""
    values = [time, stats.variance_x, stats.variance_y]
    if with_dispersion:
        values += [stats.std_x, stats.std_y]
    stream.write(",".join(format_number(v) for v in values) + "\n")


def write_positions_row(
    stream: TextIO, time: float, particles: Sequence[Particle]
) -> None:
    """Write one line: the time followed by every particle's x and y."""
    fields = [format_number(time)]
    for p in particles:
        fields += [format_number(p.x), format_number(p.y)]
    stream.write(",".join(fields) + "\n")


def write_positions(stream: TextIO, particles: Sequence[Particle]) -> None:
    """Write one 'x,y' line per particle."""
    for p in particles:
        stream.write(f"{format_number(p.x)},{format_number(p.y)}\n")