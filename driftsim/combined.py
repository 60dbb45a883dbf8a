"""Brownian particles drifting through a random velocity field, with snapshots."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from driftsim.field import VELOCITY_SCALE, gaussian_modes
from driftsim.particles import generate_gaussian_particles
from driftsim.stats import spread_stats, write_positions, write_variance_row

PARTICLE_COUNT = 1000
MEAN = 0.0
PARTICLE_STDDEV = VELOCITY_SCALE
MODE_STDDEV = VELOCITY_SCALE
DIFFUSION = 0.1
TIME_STEP = 0.05
END_TIME = 10.0
CONSTANT_VELOCITY_X = 1.0
CHECK_INTERVAL = 2.0
PI = 3.14
MODES = 20

VARIANCE_FILE = "variance_data.csv"


def _times(end: float, step: float) -> Iterator[float]:
    t = 0.0
    while t <= end:
        yield t
        t += step


def run_simulation(
    output_dir: str | Path = ".", rng: np.random.Generator | None = None
) -> list[Path]:
    """Run the simulation and return the paths of the snapshot files written."""
    rng = rng if rng is not None else np.random.default_rng()
    directory = Path(output_dir)
    particles = generate_gaussian_particles(PARTICLE_COUNT, MEAN, PARTICLE_STDDEV, rng)
    wave_vectors, phases = gaussian_modes(MODES, MODE_STDDEV, 2.0 * PI, rng)
    step_std = math.sqrt(2.0 * DIFFUSION * TIME_STEP)

    snapshots: list[Path] = []
    next_check = CHECK_INTERVAL
    with open(directory / VARIANCE_FILE, "w") as variance_out:
        for t in _times(END_TIME, TIME_STEP):
            for particle in particles:
                particle.apply_brownian_step(
                    step_std, TIME_STEP, DIFFUSION, rng, CONSTANT_VELOCITY_X
                )
                particle.apply_velocity_field(wave_vectors, phases, TIME_STEP)

            if t >= next_check or abs(t - END_TIME) < 1e-6:
                path = directory / f"particlesWithBrownian{t:.2f}.csv"
                try:
                    with open(path, "w") as snapshot:
                        write_positions(snapshot, particles)
                    snapshots.append(path)
                except OSError:
                    print(f"Unable to open file {path} for writing.", file=sys.stderr)
                write_variance_row(variance_out, t, spread_stats(particles))
                next_check += CHECK_INTERVAL
    return snapshots


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate Brownian particles advected by a random velocity field."
    )
    parser.add_argument("--output-dir", default=".", help="directory for CSV output")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        run_simulation(args.output_dir, np.random.default_rng(args.seed))
    except OSError as exc:
        print(f"Failed to open output file: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())