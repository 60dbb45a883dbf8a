"""Particle dispersion integrated with a stochastic three-stage Runge-Kutta scheme."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from driftsim.field import VELOCITY_SCALE, random_unit_modes, velocity_at
from driftsim.particles import Particle, generate_gaussian_particles
from driftsim.stats import spread_stats, write_positions_row, write_variance_row
from driftsim.vector import Vector2D

ALPHA = (0.66275881, 0.00733232, 0.24997509)
BETA = (0.81410000, 0.66311191, 0.37079131)

PARTICLE_COUNT = 1000
MEAN_POSITION = 0.0
STDDEV_POSITION = 1.0
DIFFUSION = 0.1
CONSTANT_VELOCITY_X = 1.0
TIME_STEP = 0.01
END_TIME = 10.0
WAVE_VECTOR_COUNT = 20
BROWNIAN_STEP_STD = VELOCITY_SCALE

VARIANCE_FILE = "variance_dataRunge.csv"
POSITIONS_FILE = "particle_positionsRunge.csv"


def _times(end: float, step: float) -> Iterator[float]:
    t = 0.0
    while t <= end:
        yield t
        t += step


def apply_extended_runge_kutta(
    particle: Particle,
    wave_vectors: Sequence[Vector2D],
    phases: Sequence[float],
    time_step: float,
    rng: np.random.Generator,
) -> None:
    """Advance the particle through three weighted stages of drift and x-noise."""
    x, y = particle.x, particle.y
    amplitude = math.sqrt(2.0 * particle.diffusion * time_step)
    for alpha, beta in zip(ALPHA, BETA):
        velocity = velocity_at(x, y, wave_vectors, phases)
        noise = float(rng.normal(0.0, 1.0)) * amplitude
        x += alpha * velocity.x * time_step + beta * noise
        y += alpha * velocity.y * time_step
    particle.position = Vector2D(x, y)


def run_simulation(
    variance_path: str | Path = VARIANCE_FILE,
    positions_path: str | Path = POSITIONS_FILE,
    rng: np.random.Generator | None = None,
) -> list[Particle]:
    """Run the full simulation, logging every step, and return the final particles."""
    rng = rng if rng is not None else np.random.default_rng()
    wave_vectors, phases = random_unit_modes(WAVE_VECTOR_COUNT, rng)
    particles = generate_gaussian_particles(
        PARTICLE_COUNT, MEAN_POSITION, STDDEV_POSITION, rng
    )
    with open(variance_path, "w") as variance_out, open(
        positions_path, "w"
    ) as positions_out:
        for t in _times(END_TIME, TIME_STEP):
            for particle in particles:
                particle.apply_brownian_step(
                    BROWNIAN_STEP_STD, TIME_STEP, DIFFUSION, rng, CONSTANT_VELOCITY_X
                )
                particle.apply_velocity_field(wave_vectors, phases, TIME_STEP)
                apply_extended_runge_kutta(
                    particle, wave_vectors, phases, TIME_STEP, rng
                )
            write_positions_row(positions_out, t, particles)
            write_variance_row(
                variance_out, t, spread_stats(particles), with_dispersion=True
            )
    return particles


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate particle dispersion with a stochastic Runge-Kutta scheme."
    )
    parser.add_argument("--variance", default=VARIANCE_FILE, help="variance CSV path")
    parser.add_argument(
        "--positions", default=POSITIONS_FILE, help="particle positions CSV path"
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        run_simulation(args.variance, args.positions, np.random.default_rng(args.seed))
    except OSError as exc:
        print(f"Failed to open output file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())