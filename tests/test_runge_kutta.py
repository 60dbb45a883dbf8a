import math

import numpy as np
import pytest

from driftsim import runge_kutta
from driftsim.particles import Particle
from driftsim.vector import Vector2D


@pytest.fixture
def small(monkeypatch):
    monkeypatch.setattr(runge_kutta, "PARTICLE_COUNT", 5)
    monkeypatch.setattr(runge_kutta, "END_TIME", 0.05)
    monkeypatch.setattr(runge_kutta, "WAVE_VECTOR_COUNT", 3)


def _rows(path):
    return [line.split(",") for line in path.read_text().splitlines()]


def test_no_field_and_no_diffusion_leaves_particle_in_place():
    p = Particle(0.5, -1.5, diffusion=0.0)
    runge_kutta.apply_extended_runge_kutta(p, [], [], 0.01, np.random.default_rng(0))
    assert (p.x, p.y) == (0.5, -1.5)


def test_noise_acts_only_along_x():
    p = Particle(1.0, 2.0, diffusion=0.1)
    runge_kutta.apply_extended_runge_kutta(p, [], [], 0.01, np.random.default_rng(1))
    assert p.y == 2.0
    assert p.x != 1.0


def test_zero_time_step_does_not_move():
    p = Particle(0.25, 0.75, diffusion=0.3)
    runge_kutta.apply_extended_runge_kutta(
        p, [Vector2D(1.0, 1.0)], [0.4], 0.0, np.random.default_rng(2)
    )
    assert (p.x, p.y) == (0.25, 0.75)


def test_zero_diffusion_is_deterministic():
    a = Particle(0.2, 0.1, diffusion=0.0)
    b = Particle(0.2, 0.1, diffusion=0.0)
    modes = [Vector2D(1.0, 0.0)]
    runge_kutta.apply_extended_runge_kutta(a, modes, [0.3], 0.1, np.random.default_rng(1))
    runge_kutta.apply_extended_runge_kutta(b, modes, [0.3], 0.1, np.random.default_rng(2))
    assert (a.x, a.y) == (b.x, b.y)
    # a wave vector along x gives a velocity along y only
    assert a.x == 0.2
    assert a.y != 0.1


def test_run_simulation_writes_matching_rows(tmp_path, small):
    var_path = tmp_path / "var.csv"
    pos_path = tmp_path / "pos.csv"
    particles = runge_kutta.run_simulation(var_path, pos_path, np.random.default_rng(5))
    var_rows = _rows(var_path)
    pos_rows = _rows(pos_path)
    assert len(particles) == 5
    assert len(var_rows) == len(pos_rows)
    assert len(var_rows) >= 5
    assert pos_rows[0][0] == "0"
    assert all(len(row) == 11 for row in pos_rows)
    assert all(len(row) == 5 for row in var_rows)
    for var_row, pos_row in zip(var_rows, pos_rows):
        assert var_row[0] == pos_row[0]
        xs = [float(v) for v in pos_row[1::2]]
        mean = sum(xs) / len(xs)
        variance = sum((x - mean) ** 2 for x in xs) / len(xs)
        assert float(var_row[1]) == pytest.approx(variance, rel=1e-3, abs=1e-4)
        assert float(var_row[3]) == pytest.approx(math.sqrt(float(var_row[1])), rel=1e-4)


def test_last_row_holds_final_positions(tmp_path, small):
    pos_path = tmp_path / "pos.csv"
    particles = runge_kutta.run_simulation(
        tmp_path / "var.csv", pos_path, np.random.default_rng(9)
    )
    last = [float(v) for v in _rows(pos_path)[-1][1:]]
    expected = [c for p in particles for c in (p.x, p.y)]
    assert last == pytest.approx(expected, rel=1e-5, abs=1e-5)


def test_same_seed_reproduces_output(tmp_path, small):
    for name in ("a", "b"):
        runge_kutta.run_simulation(
            tmp_path / f"{name}_var.csv",
            tmp_path / f"{name}_pos.csv",
            np.random.default_rng(7),
        )
    assert (tmp_path / "a_pos.csv").read_text() == (tmp_path / "b_pos.csv").read_text()
    assert (tmp_path / "a_var.csv").read_text() == (tmp_path / "b_var.csv").read_text()


def test_main_succeeds(tmp_path, small):
    var_path = tmp_path / "v.csv"
    code = runge_kutta.main(
        ["--variance", str(var_path), "--positions", str(tmp_path / "p.csv"), "--seed", "3"]
    )
    assert code == 0
    assert var_path.read_text().startswith("0,")


def test_main_reports_unwritable_output(tmp_path, small):
    missing = tmp_path / "missing" / "v.csv"
    code = runge_kutta.main(
        ["--variance", str(missing), "--positions", str(tmp_path / "p.csv")]
    )
    assert code == 1