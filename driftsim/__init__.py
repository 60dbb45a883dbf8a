"""Particle dispersion in random divergence-free velocity fields with Brownian motion."""

__version__ = "0.1.0"
__all__ = ["__version__"]