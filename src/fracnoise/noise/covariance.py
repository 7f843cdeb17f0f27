"""
Covariance functions of fractional Brownian motion and fractional Gaussian noise.

Both processes are parametrized by the Hurst exponent H ∈ (0, 1):

    fBM:  Cov(B^H_t, B^H_s) = 0.5 * (t^{2H} + s^{2H} - |t - s|^{2H})
    fGN:  γ(τ) = 0.5 * δ^{2H} * (|τ+1|^{2H} - 2|τ|^{2H} + |τ-1|^{2H})

where δ is the time step between consecutive noise values. The fGN form is
stationary (it depends on the lag τ only) and is what the circulant embedding
consumes; the fBM form is used to verify simulated paths.
"""

from typing import Protocol, Union

import numpy as np

ArrayOrFloat = Union[float, np.ndarray]


class Process(Protocol):
    """Anything with a two-time covariance ``cov(t, s)``."""

    def cov(self, t, s) -> float:
        ...


class Stationary(Protocol):
    """Anything with a lag-only autocovariance ``autocov(tau)``."""

    def autocov(self, tau) -> ArrayOrFloat:
        ...


def fgn_autocovariance(tau, hurst: float, step: float = 1.0) -> ArrayOrFloat:
    """
    Autocovariance of fractional Gaussian noise at lag ``tau``.

    Parameters
    ----------
    tau : int or np.ndarray
        Non-negative lag(s).
    hurst : float
        Hurst exponent in (0, 1).
    step : float
        Time step δ between noise values.

    Returns
    -------
    float or np.ndarray
        γ(τ), with the same shape as ``tau``. Note γ(0) = δ^{2H}.
    """
    tau = np.asarray(tau, dtype=np.float64)
    power = 2.0 * hurst
    gamma = 0.5 * step ** power * (
        (tau + 1.0) ** power - 2.0 * tau ** power + np.abs(tau - 1.0) ** power
    )
    if gamma.ndim == 0:
        return float(gamma)
    return gamma


def fbm_covariance(t, s, hurst: float) -> ArrayOrFloat:
    """
    Covariance of fractional Brownian motion between times ``t`` and ``s``.

    Raises
    ------
    ValueError
        If either time is negative.
    """
    t = np.asarray(t, dtype=np.float64)
    s = np.asarray(s, dtype=np.float64)
    if np.any(t < 0) or np.any(s < 0):
        raise ValueError(f"Times must be non-negative, got t={t}, s={s}")

    power = 2.0 * hurst
    cov = 0.5 * (t ** power + s ** power - np.abs(t - s) ** power)
    if cov.ndim == 0:
        return float(cov)
    return cov
