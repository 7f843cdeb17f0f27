"""Fractional Gaussian noise and fractional Brownian motion samplers."""

from .covariance import Process, Stationary, fbm_covariance, fgn_autocovariance
from .embedding import circulant_eigenvalues, circulant_embedding, embedding_size
from .fbm import Motion, Noise, generate_fbm_paths

__all__ = [
    "Motion",
    "Noise",
    "generate_fbm_paths",
    "circulant_embedding",
    "circulant_eigenvalues",
    "embedding_size",
    "fgn_autocovariance",
    "fbm_covariance",
    "Process",
    "Stationary",
]
