# driftsim

Simulations of particle clouds spreading under Brownian motion and a random,
divergence-free velocity field made from Fourier modes. There are also tools
that build such a field on a grid and check its numerical divergence.

## Install

    pip install .

To install the test suite's dependencies as well, add the `test` extra:

    pip install ".[test]"

## Commands

Every command takes `--seed N` for reproducible runs. Without it, each run
draws a fresh random seed.

### `driftsim-rk`

Advances 1000 particles from t = 0 to t = 10 with a time step of 0.01. Each
step does three things: a Brownian step with drift 1.0 along x, an explicit
step through a 20-mode field of unit wave vectors, and an extended
three-stage stochastic Runge-Kutta step. After every step the command writes:

- a row `time,var_x,var_y,std_x,std_y` to the variance file, which is
  `variance_dataRunge.csv` by default (`--variance PATH` changes it);
- a row `time,x1,y1,x2,y2,...` to the positions file, which is
  `particle_positionsRunge.csv` by default (`--positions PATH` changes it).

### `driftsim-combined`

Runs 1000 Brownian particles with drift along x through a 20-mode field of
Gaussian wave vectors, with a time step of 0.05. Every 2 time units, and at the
end time, it writes `particlesWithBrownian<t>.csv` (one `x,y` line per
particle). It also adds a `time,var_x,var_y` row to `variance_data.csv`. By
default the files go to the current directory; `--output-dir DIR` sends them
elsewhere.

### `driftsim-brownian`

Runs pure Brownian motion of 1000 particles. At each checkpoint it prints the
time and the mean and standard deviation of x and y. It also writes
`particlesWithBrownian<t>.csv` and a sample drawn from the theoretical step
distribution, `theoreticalParticlesWithBrownian<t>.csv`. Output goes to the
current directory unless you give `--output-dir DIR`.

### `driftsim-curve [MODES]`

Draws `MODES` random modes. If `MODES` is not given, the command asks for it.
For each partial sum of 1, 2, …, `MODES` modes, it builds the velocity field
on a 500×500 grid and writes two files: `velocityField_mode_<n>.csv` (x and y
components, side by side for each point) and `divergenceField_mode_<n>.csv`
(central-difference divergence, zero on the boundary). It then prints the
maximum and total absolute divergence and says whether mass is conserved,
meaning no interior point exceeds 0.001. `--output-dir DIR` chooses where
the files go. A mode count that is not a positive integer makes the command
exit with status 1.

The field is rebuilt and written out for every partial sum. A large number
of modes therefore takes a long time and produces many large files.

## Library use

```python
import numpy as np
from driftsim.field import random_unit_modes, velocity_at
from driftsim.particles import generate_gaussian_particles
from driftsim.stats import spread_stats

rng = np.random.default_rng(1)
wave_vectors, phases = random_unit_modes(20, rng)
particles = generate_gaussian_particles(1000, 0.0, 1.0, rng)
for p in particles:
    p.apply_velocity_field(wave_vectors, phases, 0.01)
print(spread_stats(particles))
```

Modules:

- `driftsim.vector`: the frozen `Vector2D` with `+`, `-` and scalar `*`.
- `driftsim.field`: `velocity_at`, `random_unit_modes` and `gaussian_modes`.
- `driftsim.particles`: `Particle`, which has `apply_brownian_step`,
  `apply_velocity_field` and a `position` property, and
  `generate_gaussian_particles`.
- `driftsim.stats`: `spread_stats` returns a `SpreadStats` with means,
  population variances and `std_x` / `std_y`. It raises `ValueError` for an
  empty list. This module also has `format_number`, `write_variance_row`,
  `write_positions_row` and `write_positions`.
- `driftsim.runge_kutta`: `apply_extended_runge_kutta` and `run_simulation`.
- `driftsim.combined` and `driftsim.brownian`: `run_simulation`.
- `driftsim.curve`: `velocity_grid`, `divergence_at`, `divergence_grid`,
  `mass_conservation` and `run`.

## What it does not do

The package writes only CSV data. It draws no plots, streamlines or quiver
diagrams. To visualise the output, load the CSV files into a plotting tool of
your choice.