"""
Gaussian sources and seeding for reproducibility.

Samplers never touch global random state: every ``sample`` call receives a
generator exposing ``standard_normal(size)``. ``numpy.random.Generator``
satisfies this directly; ``TorchGenerator`` adapts a seeded ``torch.Generator``.
"""

import logging
from typing import Protocol

import numpy as np

logger = logging.getLogger(__name__)


class Generator(Protocol):
    """Source of independent standard normal draws."""

    def standard_normal(self, size) -> np.ndarray:
        ...


def get_generator(seed: int = 42) -> np.random.Generator:
    """
    Get a seeded numpy generator.

    Parameters
    ----------
    seed : int
        Random seed value.

    Returns
    -------
    np.random.Generator
        PCG64 generator; the same seed reproduces the same draws.
    """
    logger.debug(f"Created numpy generator with seed {seed}")
    return np.random.default_rng(seed)


def get_torch_generator(seed: int = 42):
    """
    Get a seeded PyTorch generator.

    Parameters
    ----------
    seed : int
        Random seed value.

    Returns
    -------
    torch.Generator
        Seeded CPU generator.
    """
    import torch

    gen = torch.Generator()
    gen.manual_seed(seed)
    return gen


class TorchGenerator:
    """
    Draw standard normals from a ``torch.Generator``.

    Lets fBM paths share a random stream with torch models. Draws are made in
    float64 on the CPU and returned as numpy arrays.

    Parameters
    ----------
    seed : int, optional
        Seed for a fresh generator. Ignored if ``generator`` is given.
    generator : torch.Generator, optional
        Existing generator to draw from.
    """

    def __init__(self, seed: int = 42, generator=None):
        import torch

        self._torch = torch
        self.generator = generator if generator is not None else get_torch_generator(seed)

    def standard_normal(self, size) -> np.ndarray:
        shape = (size,) if np.isscalar(size) else tuple(size)
        draws = self._torch.randn(*shape, generator=self.generator, dtype=self._torch.float64)
        return draws.numpy()
