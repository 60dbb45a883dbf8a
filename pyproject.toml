[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "driftsim"
version = "0.1.0"
description = "Particle dispersion in random divergence-free velocity fields with Brownian motion"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["brownian motion", "dispersion", "random velocity field", "runge-kutta", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
driftsim-rk = "driftsim.runge_kutta:main"
driftsim-combined = "driftsim.combined:main"
driftsim-brownian = "driftsim.brownian:main"
driftsim-curve = "driftsim.curve:main"

[tool.hatch.build.targets.wheel]
packages = ["driftsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
