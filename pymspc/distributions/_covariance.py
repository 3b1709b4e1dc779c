"""
Covariance construction from variances and pairwise correlations.

Correlations are stored flat, one per unordered pair (i, j) with i < j,
enumerated row by row through the upper triangle:

    p = 3:  (0,1) -> 0, (0,2) -> 1, (1,2) -> 2
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.exceptions import DimensionError
from pymspc.core.validation import check_array, check_1d, check_length


def n_pairs(p: int) -> int:
    """Number of unordered variable pairs, p(p-1)/2."""
    return p * (p - 1) // 2


def pair_index(i: int, j: int, p: int) -> int:
    """
    Flat index of pair (i, j), i < j, in the correlation vector.

        idx = i*p + j - (i+1)(i+2)/2
    """
    if not 0 <= i < j < p:
        raise DimensionError(f"pair ({i}, {j}) invalid for p={p}; need 0 <= i < j < p")
    return i * p + j - ((i + 1) * (i + 2)) // 2


def build_covariance(
    variances: ArrayLike,
    correlations: ArrayLike = (),
    p: int | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Build a symmetric covariance matrix.

    Parameters
    ----------
    variances : array-like, shape (p,)
        Diagonal of the covariance.
    correlations : array-like
        Flat pairwise correlations in pair_index order. Missing trailing
        entries are treated as 0. Not range-checked: out-of-range values
        give a non-PSD matrix.
    p : int, optional
        Dimension. Defaults to len(variances).

    Returns
    -------
    ndarray, shape (p, p)

    Raises
    ------
    DimensionError
        If variances has the wrong length or more correlations than pairs
        are supplied.
    """
    var = check_array(variances, "variances")
    check_1d(var, "variances")
    if p is None:
        p = var.shape[0]
    check_length(var, p, "variances")

    corr = check_array(correlations, "correlations").ravel()
    if corr.shape[0] > n_pairs(p):
        raise DimensionError(
            f"correlations: got {corr.shape[0]} values but p={p} has only "
            f"{n_pairs(p)} pairs"
        )

    cov = np.diag(var)
    for i in range(p):
        for j in range(i + 1, p):
            idx = pair_index(i, j, p)
            rho = corr[idx] if idx < corr.shape[0] else 0.0
            cov[i, j] = cov[j, i] = rho * np.sqrt(var[i] * var[j])

    return cov
