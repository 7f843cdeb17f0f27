"""
Fractional Brownian motion and fractional Gaussian noise samplers.

Paths are generated exactly with the Davies-Harte circulant embedding (see
``embedding.py``). The noise sampler draws stationary increments; the motion
sampler prepends the origin and accumulates them.

Example
-------
>>> from fracnoise.utils.seed import get_generator
>>> rng = get_generator(42)
>>> path = Motion(hurst=0.7).sample(points=5, step=1.0, generator=rng)
>>> float(path[0])
0.0
"""

import logging
from dataclasses import dataclass

import numpy as np

from .covariance import fbm_covariance, fgn_autocovariance
from .embedding import circulant_embedding

logger = logging.getLogger(__name__)


def _check_hurst(hurst: float) -> float:
    if not 0 < hurst < 1:
        raise ValueError(f"Hurst exponent H must be in (0, 1), got {hurst}")
    return float(hurst)


def _check_step(step: float) -> float:
    if not (step > 0 and np.isfinite(step)):
        raise ValueError(f"Step size must be positive and finite, got {step}")
    return float(step)


def _check_points(points: int) -> int:
    if points < 0:
        raise ValueError(f"Number of points must be non-negative, got {points}")
    return int(points)


@dataclass(frozen=True)
class Noise:
    """
    Fractional Gaussian noise: the stationary increments of fBM.

    Parameters
    ----------
    hurst : float
        Hurst exponent H ∈ (0, 1). H = 0.5 gives white noise.
    step : float
        Time step δ > 0 between consecutive values; γ(0) = δ^{2H}.
    """

    hurst: float
    step: float

    def __post_init__(self):
        object.__setattr__(self, "hurst", _check_hurst(self.hurst))
        object.__setattr__(self, "step", _check_step(self.step))
        logger.debug(f"Initialized fGN: H={self.hurst}, step={self.step}")

    def autocov(self, tau):
        """Stationary autocovariance γ(τ) for lag(s) τ ≥ 0."""
        return fgn_autocovariance(tau, self.hurst, self.step)

    def cov(self, t: int, s: int) -> float:
        """Covariance between the noise values at indices ``t`` and ``s``."""
        return self.autocov(abs(t - s))

    def sample(self, points: int, generator) -> np.ndarray:
        """
        Generate a sample path of ``points`` noise values.

        Parameters
        ----------
        points : int
            Length of the path.
        generator : Generator
            Source of standard normals exposing ``standard_normal(size)``.

        Returns
        -------
        np.ndarray
            Array of shape (points,). A single point is one standard normal
            draw, since there is no correlation structure to embed.
        """
        points = _check_points(points)
        if points == 0:
            return np.empty(0)
        if points == 1:
            return np.asarray(generator.standard_normal(1), dtype=np.float64)

        n = points - 1
        scale = (1.0 / n) ** self.hurst
        data = circulant_embedding(self, n, generator)
        return scale * data[:points].real


@dataclass(frozen=True)
class Motion:
    """
    Fractional Brownian motion started at the origin.

    Parameters
    ----------
    hurst : float
        Hurst exponent H ∈ (0, 1). H < 0.5 gives rough paths, H > 0.5
        persistent ones, H = 0.5 standard Brownian motion.
    """

    hurst: float

    def __post_init__(self):
        object.__setattr__(self, "hurst", _check_hurst(self.hurst))
        logger.debug(f"Initialized fBM: H={self.hurst}")

    def cov(self, t: float, s: float) -> float:
        """Covariance between B^H_t and B^H_s for t, s ≥ 0."""
        return fbm_covariance(t, s, self.hurst)

    def sample(self, points: int, step: float, generator) -> np.ndarray:
        """
        Generate a sample path of ``points`` values starting at 0.

        The increments are drawn from ``Noise(hurst, step)`` and accumulated,
        so ``path[i] = path[i - 1] + e_i``.

        Parameters
        ----------
        points : int
            Length of the path, origin included.
        step : float
            Time step passed to the increment sampler.
        generator : Generator
            Source of standard normals exposing ``standard_normal(size)``.

        Returns
        -------
        np.ndarray
            Array of shape (points,) with ``path[0] == 0.0``.
        """
        points = _check_points(points)
        step = _check_step(step)
        if points == 0:
            return np.empty(0)
        if points == 1:
            return np.zeros(1)

        data = np.empty(points)
        data[0] = 0.0
        data[1:] = Noise(self.hurst, step).sample(points - 1, generator)
        return np.cumsum(data, out=data)


def generate_fbm_paths(
    points: int,
    batch_size: int,
    hurst: float,
    step: float = 1.0,
    generator=None,
) -> np.ndarray:
    """
    Convenience function to generate a batch of independent fBM paths.

    Parameters
    ----------
    points : int
        Points per path, origin included.
    batch_size : int
        Number of paths to generate.
    hurst : float
        Hurst exponent.
    step : float
        Time step passed to the increment sampler.
    generator : Generator, optional
        Shared source of standard normals; paths are drawn from it in order.
        Defaults to a fresh, unseeded numpy generator.

    Returns
    -------
    np.ndarray
        Array of shape (batch_size, points) with all paths starting at 0.
    """
    points = _check_points(points)
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    if generator is None:
        generator = np.random.default_rng()

    motion = Motion(hurst)
    paths = np.zeros((batch_size, points))
    for b in range(batch_size):
        paths[b] = motion.sample(points, step, generator)

    return paths
