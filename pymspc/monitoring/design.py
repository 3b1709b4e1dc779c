"""
MonitoringDesign: inputs to a Hotelling T2 control chart.

Samples are scored against a known (theoretical) mean and covariance,
not against estimates from the samples themselves.
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
    check_2d,
    check_square,
    check_open_unit,
)
from pymspc.monitoring._statistics import UCLMethod


@dataclass(frozen=True)
class MonitoringDesign:
    """
    Design for Hotelling T2 monitoring.

    Construction:
        MonitoringDesign.from_arrays(samples, mean, covariance, alpha=0.05)
    """
    samples: NDArray[np.floating[Any]]
    mean: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]
    alpha: float
    ucl_method: UCLMethod

    @classmethod
    def from_arrays(
        cls,
        samples: ArrayLike,
        mean: ArrayLike,
        covariance: ArrayLike,
        *,
        alpha: float = 0.05,
        ucl_method: UCLMethod = 'chisq',
    ) -> MonitoringDesign:
        """
        Build and validate a MonitoringDesign.

        Parameters
        ----------
        samples : array-like, shape (n, p)
            1D input is treated as n observations of a single variable.
        mean : array-like, shape (p,)
        covariance : array-like, shape (p, p)
        alpha : float
            Significance level in (0, 1).
        ucl_method : str
            'chisq' (default) or 'f'.
        """
        x = check_array(samples, "samples")
        if x.ndim == 1:
            x = x.reshape(-1, 1)
        check_2d(x, "samples")
        check_finite(x, "samples")
        n, p = x.shape
        if n < 1:
            raise ValidationError("samples: need at least 1 observation, got 0")
        if p < 1:
            raise DimensionError("samples: need at least 1 variable, got 0")

        mu = check_array(mean, "mean")
        check_1d(mu, "mean")
        check_finite(mu, "mean")
        if mu.shape[0] != p:
            raise DimensionError(
                f"mean has length {mu.shape[0]} but samples have {p} columns"
            )

        cov = check_array(covariance, "covariance")
        check_square(cov, "covariance")
        check_finite(cov, "covariance")
        if cov.shape[0] != p:
            raise DimensionError(
                f"covariance has shape {cov.shape} but samples have {p} columns"
            )

        alpha = check_open_unit(alpha, "alpha")

        if ucl_method not in ('chisq', 'f'):
            raise ValidationError(
                f"Unknown UCL method: {ucl_method!r}. Must be 'chisq' or 'f'."
            )

        return cls(samples=x, mean=mu, covariance=cov, alpha=alpha, ucl_method=ucl_method)

    @property
    def n(self) -> int:
        """Number of samples."""
        return self.samples.shape[0]

    @property
    def p(self) -> int:
        """Number of variables."""
        return self.samples.shape[1]

    def __repr__(self) -> str:
        return (
            f"MonitoringDesign(n={self.n}, p={self.p}, alpha={self.alpha}, "
            f"ucl_method={self.ucl_method!r})"
        )
