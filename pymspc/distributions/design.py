"""
EllipticalDesign: validated parameters of a multivariate normal.

Holds the mean vector, variances, flat pairwise correlations, the number
of draws and the random seed. Immutable after construction; every change
of a parameter means building a new design and recomputing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.exceptions import DimensionError, ValidationError
from pymspc.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_length,
    check_non_negative,
    check_positive_int,
)
from pymspc.distributions._covariance import n_pairs


@dataclass(frozen=True)
class EllipticalDesign:
    """
    Design for multivariate normal sampling.

    Construction:
        EllipticalDesign.from_params(mean, variances, correlations, n=500, seed=1)
    """
    mean: NDArray[np.floating[Any]]
    variances: NDArray[np.floating[Any]]
    correlations: NDArray[np.floating[Any]]
    n: int
    seed: int | np.random.Generator | None

    @classmethod
    def from_params(
        cls,
        mean: ArrayLike,
        variances: ArrayLike,
        correlations: ArrayLike = (),
        *,
        n: int = 500,
        seed: int | np.random.Generator | None = None,
    ) -> EllipticalDesign:
        """
        Build and validate an EllipticalDesign.

        Parameters
        ----------
        mean : array-like, shape (p,)
            Mean vector, p >= 1.
        variances : array-like, shape (p,)
            Per-dimension variances, each >= 0.
        correlations : array-like
            Flat pairwise correlations (at most p(p-1)/2). Missing trailing
            pairs are uncorrelated. Values outside [-1, 1] are accepted.
        n : int
            Number of samples, >= 1.
        seed : int, Generator or None
            Random source. None draws fresh OS entropy.

        Raises
        ------
        ValidationError
            Non-finite values, negative variances, n < 1.
        DimensionError
            Length mismatches.
        """
        mu = check_array(mean, "mean").copy()
        check_1d(mu, "mean")
        check_finite(mu, "mean")
        p = mu.shape[0]
        if p < 1:
            raise DimensionError("mean: need at least 1 dimension, got 0")

        var = check_array(variances, "variances").copy()
        check_1d(var, "variances")
        check_length(var, p, "variances")
        check_finite(var, "variances")
        check_non_negative(var, "variances")

        corr = check_array(correlations, "correlations").ravel().copy()
        check_finite(corr, "correlations")
        if corr.shape[0] > n_pairs(p):
            raise DimensionError(
                f"correlations: got {corr.shape[0]} values but p={p} has only "
                f"{n_pairs(p)} pairs"
            )

        n = check_positive_int(n, "n")

        if seed is not None and not isinstance(seed, (int, np.integer, np.random.Generator)):
            raise ValidationError(
                f"seed: expected int, numpy Generator or None, got {type(seed).__name__}"
            )

        for arr in (mu, var, corr):
            arr.flags.writeable = False

        return cls(mean=mu, variances=var, correlations=corr, n=n, seed=seed)

    @property
    def p(self) -> int:
        """Number of dimensions."""
        return self.mean.shape[0]

    def __repr__(self) -> str:
        return f"EllipticalDesign(p={self.p}, n={self.n}, seed={self.seed!r})"
