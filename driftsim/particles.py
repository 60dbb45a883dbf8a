"""Tracer particles moved by Brownian steps and a velocity field."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from driftsim.field import velocity_at
from driftsim.vector import Vector2D


@dataclass
class Particle:
    """A particle position with its own diffusion coefficient."""

    x: float = 0.0
    y: float = 0.0
    diffusion: float = 0.1

    @property
    def position(self) -> Vector2D:
        return Vector2D(self.x, self.y)

    @position.setter
    def position(self, value: Vector2D) -> None:
        self.x = value.x
        self.y = value.y

    def apply_brownian_step(
        self,
        step_std: float,
        time_step: float,
        diffusion: float,
        rng: np.random.Generator,
        constant_velocity_x: float = 0.0,
    ) -> None:
        """Add a random step, plus drift along x at constant_velocity_x."""
        amplitude = math.sqrt(2.0 * diffusion * time_step)
        self.x += (
            float(rng.normal(0.0, step_std)) * amplitude
            + constant_velocity_x * time_step
        )
        self.y += float(rng.normal(0.0, step_std)) * amplitude

    def apply_velocity_field(
        self,
        wave_vectors: Sequence[Vector2D],
        phases: Sequence[float],
        time_step: float,
    ) -> None:
        """Advect the particle one explicit Euler step through the field."""
        velocity = velocity_at(self.x, self.y, wave_vectors, phases)
        self.x += velocity.x * time_step
        self.y += velocity.y * time_step


def generate_gaussian_particles(
    n: int, mean: float, stddev: float, rng: np.random.Generator
) -> list[Particle]:
    """Place n particles with both coordinates drawn from N(mean, stddev)."""
    particles = []
    for _ in range(n):
        x = float(rng.normal(mean, stddev))
        y = float(rng.normal(mean, stddev))
        particles.append(Particle(x, y))
    return particles