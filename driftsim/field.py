"""Random-mode divergence-free velocity fields."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from driftsim.vector import Vector2D

VELOCITY_SCALE = 0.05


def velocity_at(
    x: float,
    y: float,
    wave_vectors: Sequence[Vector2D],
    phases: Sequence[float],
    scale: float = VELOCITY_SCALE,
) -> Vector2D:
    """Sum the modes' contributions at (x, y), each orthogonal to its wave vector."""
    if len(wave_vectors) != len(phases):
        raise ValueError("wave_vectors and phases must have the same length")
    velocity = Vector2D()
    for k, phase in zip(wave_vectors, phases):
        magnitude = math.sqrt(k.x * k.x + k.y * k.y)
        if magnitude > 0.0:
            unit = k * (1.0 / magnitude)
            orthogonal = Vector2D(-unit.y, unit.x)
            contribution = math.cos(k.x * x + k.y * y + phase)
            velocity = velocity + orthogonal * contribution
    return velocity * scale


def random_unit_modes(
    count: int, rng: np.random.Generator
) -> tuple[list[Vector2D], list[float]]:
    """Draw unit wave vectors in random directions with uniform phases in [0, 2*pi)."""
    wave_vectors: list[Vector2D] = []
    phases: list[float] = []
    for _ in range(count):
        angle = float(rng.uniform(0.0, 2.0 * math.pi))
        wave_vectors.append(Vector2D(math.cos(angle), math.sin(angle)))
        phases.append(float(rng.uniform(0.0, 2.0 * math.pi)))
    return wave_vectors, phases


def gaussian_modes(
    count: int, stddev: float, phase_limit: float, rng: np.random.Generator
) -> tuple[list[Vector2D], list[float]]:
    """Draw wave vectors with normal components and phases uniform in [0, phase_limit)."""
    wave_vectors: list[Vector2D] = []
    phases: list[float] = []
    for _ in range(count):
        kx = float(rng.normal(0.0, stddev))
        ky = float(rng.normal(0.0, stddev))
        wave_vectors.append(Vector2D(kx, ky))
        phases.append(float(rng.uniform(0.0, phase_limit)))
    return wave_vectors, phases