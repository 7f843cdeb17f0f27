"""Exact simulation of fractional Gaussian noise and fractional Brownian motion."""

from .noise import Motion, Noise, generate_fbm_paths
from .utils.seed import get_generator

__version__ = "0.1.0"

__all__ = ["Motion", "Noise", "generate_fbm_paths", "get_generator"]
