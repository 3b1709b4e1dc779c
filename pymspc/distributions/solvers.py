"""
Solver dispatch for multivariate normal sampling.

Public API: rmvnorm(mean, variances, correlations, n, seed) -> SamplingSolution
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymspc.core import diagnostics
from pymspc.distributions.design import EllipticalDesign
from pymspc.distributions.solution import SamplingSolution
from pymspc.distributions.backends.cpu import CPUSamplingBackend


def rmvnorm(
    mean: ArrayLike | EllipticalDesign,
    variances: ArrayLike | None = None,
    correlations: ArrayLike = (),
    n: int = 500,
    *,
    seed: int | np.random.Generator | None = None,
) -> SamplingSolution:
    """
    Draw samples from a multivariate normal distribution.

    Accepts EITHER:
        1. An EllipticalDesign object (other arguments ignored)
        2. Raw mean / variances / correlations (convenience)

    Parameters
    ----------
    mean : array-like or EllipticalDesign
        Mean vector of length p, or a prepared design.
    variances : array-like
        Per-dimension variances (required unless a design is given).
    correlations : array-like
        Flat pairwise correlations in (0,1), (0,2), ..., (1,2), ... order.
    n : int
        Number of draws.
    seed : int, Generator or None
        Random source; the same seed gives identical samples.

    Returns
    -------
    SamplingSolution

    Warns
    -----
    DegenerateMatrixWarning
        If the covariance is not positive definite or a correlation lies
        outside [-1, 1]. Samples are still returned.

    Examples
    --------
    >>> sol = rmvnorm([0, 0], [1, 1], [0.5], n=500, seed=42)
    >>> sol.samples.shape
    (500, 2)
    """
    if isinstance(mean, EllipticalDesign):
        design = mean
    else:
        if variances is None:
            raise TypeError("rmvnorm() missing required argument: 'variances'")
        design = EllipticalDesign.from_params(
            mean, variances, correlations, n=n, seed=seed,
        )

    result = CPUSamplingBackend().solve(design)
    diagnostics.emit(result)

    return SamplingSolution(_result=result, _design=design)
