"""
Statistical utilities for checking simulated paths.

This module provides:
- Empirical covariance and autocovariance estimates over batches of paths
- Relative error against analytic covariances
- Bootstrap confidence intervals
- Normality testing
"""

import logging
from typing import Callable, Tuple

import numpy as np
from scipy import stats

logger = logging.getLogger(__name__)


def empirical_covariance(paths: np.ndarray) -> np.ndarray:
    """
    Covariance matrix across a batch of paths.

    Parameters
    ----------
    paths : np.ndarray
        Array of shape (n_paths, points); each row is one realisation.

    Returns
    -------
    np.ndarray
        Matrix of shape (points, points) with entry (i, j) estimating
        Cov(X_i, X_j). Constant columns (e.g. the origin) give zeros.
    """
    paths = np.atleast_2d(paths)
    if paths.shape[0] < 2:
        raise ValueError(f"Need at least 2 paths, got {paths.shape[0]}")
    return np.cov(paths, rowvar=False)


def empirical_autocovariance(samples: np.ndarray, max_lag: int) -> np.ndarray:
    """
    Autocovariance of stationary sequences, pooled over a batch.

    Assumes zero mean, as is the case for fractional Gaussian noise.

    Parameters
    ----------
    samples : np.ndarray
        Array of shape (n_paths, n) or (n,).
    max_lag : int
        Largest lag to estimate; must be smaller than n.

    Returns
    -------
    np.ndarray
        Estimates for lags 0..max_lag.
    """
    samples = np.atleast_2d(samples)
    n = samples.shape[1]
    if not 0 <= max_lag < n:
        raise ValueError(f"max_lag must be in [0, {n}), got {max_lag}")

    acov = np.empty(max_lag + 1)
    for lag in range(max_lag + 1):
        acov[lag] = np.mean(samples[:, : n - lag] * samples[:, lag:])
    return acov


def relative_error(empirical, theoretical) -> np.ndarray:
    """
    Elementwise |empirical - theoretical| / |theoretical|.

    Entries where the theoretical value is zero are reported as absolute error.
    """
    empirical = np.asarray(empirical, dtype=np.float64)
    theoretical = np.asarray(theoretical, dtype=np.float64)
    scale = np.where(theoretical == 0, 1.0, np.abs(theoretical))
    return np.abs(empirical - theoretical) / scale


def bootstrap_ci(
    values: np.ndarray,
    stat_fn: Callable[[np.ndarray], float],
    n_bootstrap: int = 1000,
    alpha: float = 0.05,
    seed: int = 42,
    method: str = "percentile"
) -> Tuple[float, float, float]:
    """
    Compute bootstrap confidence interval for a statistic.

    Parameters
    ----------
    values : np.ndarray
        Sample values; resampling is along the first axis, so rows of a
        batch of paths are resampled as whole paths.
    stat_fn : Callable
        Statistic function to apply to each bootstrap sample.
    n_bootstrap : int
        Number of bootstrap samples.
    alpha : float
        Significance level (default 5% for 95% CI).
    seed : int
        Random seed for reproducibility.
    method : str
        CI method: 'percentile' or 'bc' (bias-corrected).

    Returns
    -------
    lower : float
        Lower bound of CI.
    mean : float
        Point estimate (mean of bootstrap distribution).
    upper : float
        Upper bound of CI.
    """
    rng = np.random.RandomState(seed)
    n = len(values)

    boot_stats = []
    for _ in range(n_bootstrap):
        idx = rng.randint(0, n, size=n)
        boot_stats.append(stat_fn(values[idx]))

    boot_stats = np.array(boot_stats)

    if method == "percentile":
        lower = np.percentile(boot_stats, alpha / 2 * 100)
        upper = np.percentile(boot_stats, (1 - alpha / 2) * 100)
    elif method == "bc":
        point_est = stat_fn(values)
        z0 = stats.norm.ppf(np.mean(boot_stats < point_est))
        za = stats.norm.ppf(alpha / 2)
        zb = stats.norm.ppf(1 - alpha / 2)

        p_lower = stats.norm.cdf(2 * z0 + za)
        p_upper = stats.norm.cdf(2 * z0 + zb)

        lower = np.percentile(boot_stats, p_lower * 100)
        upper = np.percentile(boot_stats, p_upper * 100)
    else:
        raise ValueError(f"Unknown method: {method}")

    mean = float(np.mean(boot_stats))
    logger.debug(f"Bootstrap CI ({method}): [{lower:.4g}, {upper:.4g}]")

    return float(lower), mean, float(upper)


def ks_test_normality(samples: np.ndarray) -> Tuple[float, float]:
    """
    Kolmogorov-Smirnov test for normality.

    Parameters
    ----------
    samples : np.ndarray
        Sample values to test.

    Returns
    -------
    statistic : float
        KS statistic.
    p_value : float
        P-value (reject normality if p < alpha).
    """
    samples = np.ravel(samples)
    standardized = (samples - np.mean(samples)) / np.std(samples)
    statistic, p_value = stats.kstest(standardized, 'norm')
    return float(statistic), float(p_value)
