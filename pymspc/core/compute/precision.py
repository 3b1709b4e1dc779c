"""
Numerical constants shared by the kernels and the density estimators.

The epsilon floors are a stability policy: Cholesky and
Gauss-Jordan inversion never fail on degenerate input, they clamp and
report where they did so.
"""

import numpy as np


# Floor applied to Cholesky diagonal divisors and Gauss-Jordan pivots
PIVOT_FLOOR: float = 1e-10

# Smallest positive float64; lower bound for the Box-Muller u1 draw
UNIFORM_FLOOR: float = float(np.finfo(np.float64).tiny)

# Silverman's rule of thumb: h = 1.06 * sigma * n^(-1/5)
SILVERMAN_FACTOR: float = 1.06

# Default grid and bin counts used by the explorer
KDE_GRID_SIZE: int = 100
MARGINAL_BINS: int = 30
DISTANCE_BINS: int = 40
