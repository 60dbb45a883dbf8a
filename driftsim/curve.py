"""Random-mode velocity fields on a grid and their numerical divergence."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TextIO

import numpy as np

from driftsim.field import gaussian_modes
from driftsim.stats import format_number
from driftsim.vector import Vector2D

GRID_SIZE = 500
LENGTH_SCALE = 5.0
MEAN_VELOCITY_U = 1.0
SD = 1.0 / LENGTH_SCALE
K_THRESHOLD = 1e-10
DELTA_X = 30.0
DELTA_Y = 30.0
DIVERGENCE_THRESHOLD = 0.001


def velocity_grid(
    wave_vectors: Sequence[Vector2D],
    phases: Sequence[float],
    modes: int,
    grid_size: int = GRID_SIZE,
) -> np.ndarray:
    """Velocity at integer grid points from the first `modes` modes; shape (n, n, 2)."""
    if modes <= 0:
        raise ValueError("the number of modes must be positive")
    if modes > len(wave_vectors) or modes > len(phases):
        raise ValueError("not enough wave vectors or phases for the requested modes")
    rows = np.arange(grid_size, dtype=float)[:, None]
    cols = np.arange(grid_size, dtype=float)[None, :]
    vx = np.full((grid_size, grid_size), MEAN_VELOCITY_U)
    vy = np.zeros((grid_size, grid_size))
    for k, phase in list(zip(wave_vectors, phases))[:modes]:
        magnitude_squared = k.x * k.x + k.y * k.y
        if magnitude_squared > K_THRESHOLD:
            weight = np.cos(k.x * rows + k.y * cols + phase) / math.sqrt(magnitude_squared)
            vx = vx - k.y * weight
            vy = vy + k.x * weight
    scale = SD * MEAN_VELOCITY_U * math.sqrt(2.0 / modes)
    return np.stack((vx, vy), axis=-1) * scale


def divergence_at(field: np.ndarray, i: int, j: int, dx: float, dy: float) -> float:
    """Central-difference divergence at (i, j); zero on the boundary."""
    rows, cols = field.shape[:2]
    if i == 0 or j == 0 or i == rows - 1 or j == cols - 1:
        return 0.0
    du_dx = (field[i + 1, j, 0] - field[i - 1, j, 0]) / (2.0 * dx)
    dv_dy = (field[i, j + 1, 1] - field[i, j - 1, 1]) / (2.0 * dy)
    return float(du_dx + dv_dy)


def divergence_grid(field: np.ndarray, dx: float, dy: float) -> np.ndarray:
    """Divergence at every grid point, zero on the boundary."""
    rows, cols = field.shape[:2]
    divergence = np.zeros((rows, cols))
    if rows >= 3 and cols >= 3:
        du_dx = (field[2:, 1:-1, 0] - field[:-2, 1:-1, 0]) / (2.0 * dx)
        dv_dy = (field[1:-1, 2:, 1] - field[1:-1, :-2, 1]) / (2.0 * dy)
        divergence[1:-1, 1:-1] = du_dx + dv_dy
    return divergence


def mass_conservation(
    divergence: np.ndarray, threshold: float = DIVERGENCE_THRESHOLD
) -> tuple[float, float, bool]:
    """Return (max |div|, sum |div|, conserved) over the interior points."""
    interior = np.abs(divergence[1:-1, 1:-1])
    if interior.size == 0:
        return 0.0, 0.0, True
    return (
        float(interior.max()),
        float(interior.sum()),
        not bool((interior > threshold).any()),
    )


def _write_csv(path: Path, rows: Iterable[str]) -> None:
    try:
        with open(path, "w") as handle:
            for row in rows:
                handle.write(row + "\n")
    except OSError:
        print(f"Unable to open file {path} for writing.", file=sys.stderr)


def _velocity_rows(field: np.ndarray) -> Iterable[str]:
    for row in field:
        yield ",".join(f"{format_number(vx)},{format_number(vy)}" for vx, vy in row)


def _divergence_rows(divergence: np.ndarray) -> Iterable[str]:
    for row in divergence:
        yield ",".join(format_number(value) for value in row)


def run(
    mode_count: int,
    output_dir: str | Path = ".",
    rng: np.random.Generator | None = None,
    out: TextIO | None = None,
) -> list[tuple[float, float, bool]]:
    """Build the field for 1..mode_count modes, write CSVs, and report divergence."""
    if mode_count <= 0:
        raise ValueError("the number of modes must be positive")
    rng = rng if rng is not None else np.random.default_rng()
    out = out if out is not None else sys.stdout
    directory = Path(output_dir)
    wave_vectors, phases = gaussian_modes(
        mode_count, 1.0 / LENGTH_SCALE**2, 2.0 * math.pi, rng
    )

    summaries: list[tuple[float, float, bool]] = []
    for mode in range(1, mode_count + 1):
        field = velocity_grid(wave_vectors, phases, mode, GRID_SIZE)
        _write_csv(directory / f"velocityField_mode_{mode}.csv", _velocity_rows(field))

        divergence = divergence_grid(field, DELTA_X, DELTA_Y)
        summary = mass_conservation(divergence)
        max_divergence, total_divergence, conserved = summary
        print(f"Maximum divergence in the field: {format_number(max_divergence)}", file=out)
        print(f"Total divergence in the field: {format_number(total_divergence)}", file=out)
        if conserved:
            print("Mass is conserved in the velocity field.", file=out)
        else:
            print("Mass is not conserved in the velocity field.", file=out)

        _write_csv(
            directory / f"divergenceField_mode_{mode}.csv", _divergence_rows(divergence)
        )
        summaries.append(summary)
    return summaries


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build random-mode velocity fields and check their divergence."
    )
    parser.add_argument("modes", nargs="?", type=int, help="number of modes")
    parser.add_argument("--output-dir", default=".", help="directory for CSV output")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    modes = args.modes
    if modes is None:
        try:
            modes = int(input("Enter the number of modes: "))
        except (ValueError, EOFError):
            print("The number of modes must be an integer.", file=sys.stderr)
            return 1
    try:
        run(modes, args.output_dir, np.random.default_rng(args.seed))
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())