"""
Gaussian kernel density estimation on a fixed grid.
"""

from __future__ import annotations

import math
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.compute.precision import KDE_GRID_SIZE, SILVERMAN_FACTOR
from pymspc.core.validation import check_array, check_finite, check_positive_int
from pymspc.density._common import DensityCurve


_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def silverman_bandwidth(std: float, n: int) -> float:
    """Silverman's rule of thumb, 1.06 * std * n^(-1/5)."""
    return SILVERMAN_FACTOR * float(std) * float(n) ** (-0.2)


def _as_data(data: ArrayLike) -> NDArray[np.floating[Any]]:
    x = check_array(data, "data").ravel()
    check_finite(x, "data")
    return x


def kde(
    data: ArrayLike,
    bandwidth: float | None = None,
    grid_size: int = KDE_GRID_SIZE,
) -> DensityCurve:
    """
    Gaussian KDE evaluated at grid_size + 1 points spanning [min, max].

        f(x) = 1/(n h) * sum_i phi((x - x_i) / h)

    Parameters
    ----------
    data : array-like
        Observations (flattened).
    bandwidth : float, optional
        Kernel bandwidth h. Defaults to Silverman's rule with the sample
        standard deviation (ddof=1).
    grid_size : int
        Number of grid intervals.

    Returns
    -------
    DensityCurve. Empty for empty data or a non-positive bandwidth.
    """
    grid_size = check_positive_int(grid_size, "grid_size")
    x = _as_data(data)
    n = x.shape[0]
    if n == 0:
        return DensityCurve.empty(bandwidth)

    if bandwidth is None:
        std = float(np.std(x, ddof=1)) if n > 1 else 0.0
        bandwidth = silverman_bandwidth(std, n)
    bandwidth = float(bandwidth)
    if not (bandwidth > 0 and math.isfinite(bandwidth)):
        return DensityCurve.empty(bandwidth)

    lo, hi = float(np.min(x)), float(np.max(x))
    step = (hi - lo) / grid_size
    grid = lo + step * np.arange(grid_size + 1)

    u = (grid[:, None] - x[None, :]) / bandwidth
    density = np.exp(-0.5 * u * u).sum(axis=1) * _INV_SQRT_2PI / (n * bandwidth)

    return DensityCurve(x=grid, density=density, bandwidth=bandwidth)


def normal_pdf_curve(x: ArrayLike, mean: float, std: float) -> DensityCurve:
    """
    Theoretical normal density on a given grid.

    Used as the reference curve drawn next to a KDE. A zero std gives an
    empty curve.
    """
    grid = check_array(x, "x").ravel()
    std = float(std)
    if not std > 0:
        return DensityCurve.empty()
    z = (grid - mean) / std
    density = np.exp(-0.5 * z * z) * _INV_SQRT_2PI / std
    return DensityCurve(x=grid, density=density)
