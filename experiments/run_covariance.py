#!/usr/bin/env python
"""
Run covariance experiments for simulated fractional Brownian motion.

For each Hurst parameter this script simulates many paths, compares the
empirical covariance matrix with the analytic fBM covariance, and records the
worst relative error together with a bootstrap CI for the terminal variance.

Usage:
    python experiments/run_covariance.py --out outputs/covariance_results.csv
    python experiments/run_covariance.py --quick --paths 200
"""

import sys
import logging
import argparse
from pathlib import Path

import numpy as np
import pandas as pd
from tqdm import tqdm

# Add repo root and src to path
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from experiments.config import (
    SEED,
    COVARIANCE_H_VALUES,
    COVARIANCE_POINTS,
    COVARIANCE_STEP,
    COVARIANCE_N_PATHS,
    COVARIANCE_QUICK_PATHS,
    COVARIANCE_QUICK_H_VALUES,
    COVARIANCE_TOLERANCE,
    FIGURES_DIR,
)
from fracnoise.metrics.statistics import (
    bootstrap_ci,
    empirical_covariance,
    ks_test_normality,
    relative_error,
)
from fracnoise.validation.covariance_test import (
    motion_time_grid,
    plot_covariance,
    sample_paths,
    theoretical_covariance,
)

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(description="Run fBM covariance validation")
    parser.add_argument("--out", type=str, default="outputs/covariance_results.csv",
                        help="Output CSV path")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode for CI")
    parser.add_argument("--paths", type=int, default=None,
                        help="Number of simulated paths per H")
    parser.add_argument("--points", type=int, default=COVARIANCE_POINTS,
                        help="Points per path")
    parser.add_argument("--seed", type=int, default=SEED,
                        help="Random seed")
    parser.add_argument("--plot", action="store_true",
                        help="Save a covariance heat map per H")
    args = parser.parse_args()

    if args.quick:
        n_paths = args.paths or COVARIANCE_QUICK_PATHS
        H_values = COVARIANCE_QUICK_H_VALUES
        logger.info("Running in QUICK mode for CI")
    else:
        n_paths = args.paths or COVARIANCE_N_PATHS
        H_values = COVARIANCE_H_VALUES

    points = args.points
    step = COVARIANCE_STEP
    times = motion_time_grid(points, step)

    results = []

    for H in tqdm(H_values, desc="Hurst parameters"):
        paths = sample_paths(H, points, step, n_paths, seed=args.seed, progress=True)

        empirical = empirical_covariance(paths)
        theoretical = theoretical_covariance(H, times)
        errors = relative_error(empirical[1:, 1:], theoretical[1:, 1:])
        max_error = float(errors.max())
        mean_error = float(errors.mean())

        terminal = paths[:, -1]
        var_lower, var_mean, var_upper = bootstrap_ci(
            terminal, np.var, n_bootstrap=200, seed=args.seed
        )
        _, ks_p = ks_test_normality(np.diff(paths, axis=1))

        passed = max_error < COVARIANCE_TOLERANCE
        log = logger.info if passed else logger.warning
        log(f"H={H}: max error={max_error:.2%}, mean error={mean_error:.2%}, "
            f"Var(B_T)={var_mean:.4f} [{var_lower:.4f}, {var_upper:.4f}] "
            f"vs {theoretical[-1, -1]:.4f}, KS p={ks_p:.3f}")

        if args.plot:
            Path(FIGURES_DIR).mkdir(parents=True, exist_ok=True)
            plot_covariance(empirical, theoretical, H,
                            save_path=f"{FIGURES_DIR}/covariance_H{H}.png", show=False)

        results.append({
            "H": H,
            "points": points,
            "step": step,
            "n_paths": n_paths,
            "max_relative_error": max_error,
            "mean_relative_error": mean_error,
            "terminal_var": var_mean,
            "terminal_var_lower": var_lower,
            "terminal_var_upper": var_upper,
            "terminal_var_theory": theoretical[-1, -1],
            "ks_p_value": ks_p,
            "passed": passed,
        })

    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    df = pd.DataFrame(results)
    df.to_csv(args.out, index=False)
    logger.info(f"Saved results to {args.out}")


if __name__ == "__main__":
    main()
