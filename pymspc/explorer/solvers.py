"""
Solver dispatch for the explorer.

Public API: explore(mean, variances, correlations, ...) -> ExplorerSolution
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from pymspc.core import diagnostics
from pymspc.core.compute.precision import DISTANCE_BINS, KDE_GRID_SIZE, MARGINAL_BINS
from pymspc.explorer.design import ExplorerDesign
from pymspc.explorer.solution import ExplorerSolution
from pymspc.explorer.backends.cpu import CPUExplorerBackend
from pymspc.monitoring._statistics import UCLMethod


def explore(
    mean: ArrayLike | ExplorerDesign,
    variances: ArrayLike | None = None,
    correlations: ArrayLike = (),
    *,
    n: int = 500,
    alpha: float = 0.05,
    kde_vars=None,
    marginal_vars=None,
    seed: int | np.random.Generator | None = None,
    ucl_method: UCLMethod = 'chisq',
    kde_grid_size: int = KDE_GRID_SIZE,
    marginal_bins: int = MARGINAL_BINS,
    distance_bins: int = DISTANCE_BINS,
    verbose: bool = False,
) -> ExplorerSolution:
    """
    Run one full recomputation of the elliptical distribution explorer.

    Builds the covariance, draws n correlated samples, scores them with
    Hotelling T2 against the known mean and covariance, flags samples above
    the UCL, and estimates the densities a viewer would plot.

    Accepts EITHER:
        1. An ExplorerDesign object (other arguments ignored)
        2. Raw parameters (convenience)

    Parameters
    ----------
    mean : array-like or ExplorerDesign
        Mean vector (length p), or a prepared design.
    variances : array-like
        Per-dimension variances.
    correlations : array-like
        Flat pairwise correlations, (0,1), (0,2), ..., (1,2), ... order.
    n : int
        Number of samples.
    alpha : float
        Significance level for the UCL.
    kde_vars, marginal_vars : sequence of bool, optional
        Per-dimension selection for KDE curves and marginal histograms.
    seed : int, Generator or None
        Random source.
    ucl_method : str
        'chisq' (default) or 'f'.
    kde_grid_size, marginal_bins, distance_bins : int
        Density resolution (defaults 100, 30, 40).
    verbose : bool
        Print a one-line summary of the recomputation.

    Returns
    -------
    ExplorerSolution

    Warns
    -----
    DegenerateMatrixWarning
        If the covariance had to be clamped during factorization or
        inversion, or a correlation lies outside [-1, 1].

    Examples
    --------
    >>> sol = explore([0, 0], [1, 1], [0.5], n=500, alpha=0.05, seed=1)
    >>> sol.covariance
    array([[1. , 0.5],
           [0.5, 1. ]])
    """
    if isinstance(mean, ExplorerDesign):
        design = mean
    else:
        if variances is None:
            raise TypeError("explore() missing required argument: 'variances'")
        design = ExplorerDesign.from_params(
            mean,
            variances,
            correlations,
            n=n,
            alpha=alpha,
            kde_vars=kde_vars,
            marginal_vars=marginal_vars,
            seed=seed,
            ucl_method=ucl_method,
            kde_grid_size=kde_grid_size,
            marginal_bins=marginal_bins,
            distance_bins=distance_bins,
        )

    if verbose:
        print(f"Explorer: p={design.p}, n={design.n}, alpha={design.alpha}, "
              f"UCL method={design.ucl_method}")

    result = CPUExplorerBackend().solve(design)
    diagnostics.emit(result)

    if verbose:
        print(f"UCL: {result.params.ucl:.4f}, "
              f"outliers: {result.info['n_outliers']}/{design.n} "
              f"({result.timing['total_seconds'] * 1000:.1f} ms)")

    return ExplorerSolution(_result=result, _design=design)
