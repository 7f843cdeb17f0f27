"""Metrics package."""

from .statistics import (
    empirical_covariance,
    empirical_autocovariance,
    relative_error,
    bootstrap_ci,
    ks_test_normality,
)

__all__ = [
    "empirical_covariance",
    "empirical_autocovariance",
    "relative_error",
    "bootstrap_ci",
    "ks_test_normality",
]
