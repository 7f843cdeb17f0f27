"""Validation utilities package."""

from .covariance_test import (
    run_covariance_analysis,
    compute_covariance_error,
    plot_covariance
)

__all__ = [
    "run_covariance_analysis",
    "compute_covariance_error",
    "plot_covariance"
]
