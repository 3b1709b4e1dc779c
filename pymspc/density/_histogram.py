"""
Equal-width histograms normalized to a density.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymspc.core.compute.precision import MARGINAL_BINS
from pymspc.core.exceptions import ValidationError
from pymspc.core.validation import check_array, check_finite, check_positive_int
from pymspc.density._common import HistogramBins


def histogram(
    data: ArrayLike,
    bins: int = MARGINAL_BINS,
    lower: float | None = None,
) -> HistogramBins:
    """
    Histogram over [lower, max(data)] with density normalization.

    Each value v goes to bin floor((v - lower) / width), clamped to
    bins - 1 so the maximum lands in the last bin. density = count /
    (n * width), so sum(density * width) == 1.

    Parameters
    ----------
    data : array-like
        Observations (flattened).
    bins : int
        Number of bins.
    lower : float, optional
        Left edge. Defaults to min(data); pass 0.0 for non-negative data
        such as Mahalanobis distances.

    Returns
    -------
    HistogramBins. Empty for empty data or a zero-width range.

    Raises
    ------
    ValidationError
        If lower exceeds min(data).
    """
    bins = check_positive_int(bins, "bins")
    x = check_array(data, "data").ravel()
    check_finite(x, "data")
    n = x.shape[0]
    if n == 0:
        return HistogramBins.empty()

    lo = float(np.min(x)) if lower is None else float(lower)
    if lo > float(np.min(x)):
        raise ValidationError(
            f"lower={lo} exceeds the smallest observation {float(np.min(x))}"
        )
    width = (float(np.max(x)) - lo) / bins
    if not width > 0:
        return HistogramBins.empty()

    idx = np.minimum(np.floor((x - lo) / width).astype(np.int64), bins - 1)
    counts = np.bincount(idx, minlength=bins)

    return HistogramBins(
        centers=lo + (np.arange(bins) + 0.5) * width,
        density=counts / (n * width),
        counts=counts,
        bin_width=width,
        lower=lo,
    )
