"""Pure Brownian dispersion of a particle cloud, compared with a theoretical sample."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

import numpy as np

from driftsim.particles import Particle, generate_gaussian_particles
from driftsim.stats import SpreadStats, format_number, spread_stats, write_positions

PARTICLE_COUNT = 1000
MEAN = 0.0
STDDEV = 0.05
DIFFUSION = 0.1
TIME_STEP = 0.05
END_TIME = 10.0
CHECK_INTERVAL = 2.0


def _times(end: float, step: float) -> Iterator[float]:
    t = 0.0
    while t <= end:
        yield t
        t += step


def run_simulation(
    output_dir: str | Path = ".",
    rng: np.random.Generator | None = None,
    out: TextIO | None = None,
) -> list[tuple[float, SpreadStats]]:
    """Run the simulation; return the time and statistics of each snapshot."""
    rng = rng if rng is not None else np.random.default_rng()
    out = out if out is not None else sys.stdout
    directory = Path(output_dir)
    step_std = math.sqrt(2.0 * DIFFUSION * TIME_STEP)
    particles = generate_gaussian_particles(PARTICLE_COUNT, MEAN, STDDEV, rng)

    snapshots: list[tuple[float, SpreadStats]] = []
    next_check = CHECK_INTERVAL
    for t in _times(END_TIME, TIME_STEP):
        for particle in particles:
            particle.apply_brownian_step(step_std, TIME_STEP, DIFFUSION, rng)

        if t >= next_check or abs(t - END_TIME) < 1e-6:
            theoretical = [
                Particle(float(rng.normal(0.0, step_std)), float(rng.normal(0.0, step_std)))
                for _ in range(PARTICLE_COUNT)
            ]
            with open(
                directory / f"theoreticalParticlesWithBrownian{t:.2f}.csv", "w"
            ) as theoretical_out:
                write_positions(theoretical_out, theoretical)

            stats = spread_stats(particles)
            print(f"Time = {format_number(t)}", file=out)
            print(
                f"Average X: {format_number(stats.mean_x)}, "
                f"Average Y: {format_number(stats.mean_y)}",
                file=out,
            )
            print(
                f"StdDev X: {format_number(stats.std_x)}, "
                f"StdDev Y: {format_number(stats.std_y)}",
                file=out,
            )

            with open(directory / f"particlesWithBrownian{t:.2f}.csv", "w") as snapshot:
                write_positions(snapshot, particles)

            snapshots.append((t, stats))
            next_check += CHECK_INTERVAL
    return snapshots


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate Brownian particle dispersion.")
    parser.add_argument("--output-dir", default=".", help="directory for CSV output")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    try:
        run_simulation(args.output_dir, np.random.default_rng(args.seed))
    except OSError as exc:
        print(f"Failed to write output: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())