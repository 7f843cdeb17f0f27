"""
Circulant embedding (Davies-Harte) for stationary Gaussian sequences.

The n×n Toeplitz covariance matrix of a stationary sequence is embedded into a
circulant matrix of size m ≥ 2n. A circulant matrix is diagonalised by the
discrete Fourier transform, so its eigenvalues are the FFT of its first row and
a correlated Gaussian vector can be synthesised with one inverse FFT of scaled
white noise. The cost is O(m log m).

See Davies & Harte (1987); Dietrich & Newsam (1997); Dieker (2004).
"""

import logging

import numpy as np
from numpy.fft import fft, ifft

from .covariance import Stationary

logger = logging.getLogger(__name__)


def embedding_size(n: int) -> int:
    """
    Size of the circulant embedding for ``n`` lags.

    Returns the smallest power of two m with m ≥ 2n, so that lags 0..n are
    all represented in the first row and the FFTs run on a fast length.
    """
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    return 1 << (2 * n - 1).bit_length()


def circulant_eigenvalues(process: Stationary, n: int) -> np.ndarray:
    """
    Eigenvalues of the circulant matrix embedding ``process`` for ``n`` lags.

    The first row is [γ(0), γ(1), ..., γ(m/2), γ(m/2 - 1), ..., γ(1)], an even
    sequence, so its FFT is real. Exact autocovariances give non-negative
    eigenvalues; rounding in the closed-form covariance can push a few slightly
    below zero, and those are clipped to zero.

    Parameters
    ----------
    process : Stationary
        Object exposing ``autocov(tau)`` for integer lag arrays.
    n : int
        Number of lags the embedding must reproduce exactly.

    Returns
    -------
    np.ndarray
        Non-negative eigenvalues, length m = embedding_size(n).
    """
    m = embedding_size(n)
    half = m // 2

    gamma = np.asarray(process.autocov(np.arange(half + 1)), dtype=np.float64)
    first_row = np.concatenate([gamma, gamma[-2:0:-1]])

    eigenvalues = fft(first_row).real

    negative = eigenvalues < 0
    if np.any(negative):
        logger.debug(
            f"Clipping {int(negative.sum())} negative eigenvalue(s) of {m}, "
            f"min={eigenvalues.min():.3e}"
        )
        eigenvalues = np.maximum(eigenvalues, 0.0)

    return eigenvalues


def circulant_embedding(process: Stationary, n: int, generator) -> np.ndarray:
    """
    Synthesise one realisation of a stationary Gaussian sequence.

    Uses the Davies-Harte algorithm:
    1. Compute the eigenvalues λ of the circulant embedding
    2. Draw m standard normals and build a Hermitian spectrum:
       W[0] and W[m/2] are real with scale sqrt(λ/m); for 0 < k < m/2,
       W[k] = sqrt(λ_k / 2m) * (a + ib) and W[m-k] = conj(W[k])
    3. Apply the inverse FFT (without numpy's 1/m factor)

    Parameters
    ----------
    process : Stationary
        Object exposing ``autocov(tau)``.
    n : int
        Number of lags to reproduce; must be at least 1.
    generator : Generator
        Source of standard normals exposing ``standard_normal(size)``.

    Returns
    -------
    np.ndarray
        Complex sequence of length m. The real parts of the first n + 1
        entries are a zero-mean Gaussian vector with Cov(X_j, X_l) = γ(|j - l|);
        the imaginary parts vanish up to rounding.
    """
    eigenvalues = circulant_eigenvalues(process, n)
    m = len(eigenvalues)
    half = m // 2

    z = np.asarray(generator.standard_normal(m), dtype=np.float64)

    spectrum = np.zeros(m, dtype=np.complex128)
    spectrum[0] = np.sqrt(eigenvalues[0] / m) * z[0]
    spectrum[half] = np.sqrt(eigenvalues[half] / m) * z[1]

    k = np.arange(1, half)
    spectrum[k] = np.sqrt(eigenvalues[k] / (2 * m)) * (z[2 * k] + 1j * z[2 * k + 1])
    spectrum[m - k] = np.conj(spectrum[k])

    return ifft(spectrum) * m
