"""
Experiment configuration.

Central location for all experiment parameters and seeds.
"""

# =============================================================================
# SEED POLICY
# =============================================================================
# Default seed for reproducibility. Override with --seed in CLI.
SEED = 42

# =============================================================================
# COVARIANCE EXPERIMENT
# =============================================================================
COVARIANCE_H_VALUES = [0.1, 0.3, 0.5, 0.7, 0.9]
COVARIANCE_POINTS = 50
COVARIANCE_STEP = 1.0
COVARIANCE_N_PATHS = 10_000

# Quick mode (for CI)
COVARIANCE_QUICK_PATHS = 500
COVARIANCE_QUICK_H_VALUES = [0.3, 0.7]

# Relative error above which a run is reported as failing
COVARIANCE_TOLERANCE = 0.05

# =============================================================================
# PATHS
# =============================================================================
OUTPUT_DIR = "outputs"
FIGURES_DIR = "figures"
