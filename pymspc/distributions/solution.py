"""
Sampling solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymspc.core.result import Result

if TYPE_CHECKING:
    from pymspc.distributions.design import EllipticalDesign


@dataclass(frozen=True)
class SamplingParams:
    """
    Parameter payload for multivariate normal sampling.

    samples:     (n, p) draws in draw order
    covariance:  (p, p) covariance built from variances and correlations
    cholesky:    (p, p) lower triangular factor used for the draws
    """
    samples: NDArray[np.floating[Any]]
    covariance: NDArray[np.floating[Any]]
    cholesky: NDArray[np.floating[Any]]


@dataclass
class SamplingSolution:
    """
    User-facing sampling results.

    Wraps Result[SamplingParams] and provides convenient accessors.
    """
    _result: Result[SamplingParams]
    _design: 'EllipticalDesign'

    @property
    def samples(self) -> NDArray[np.floating[Any]]:
        """Samples, shape (n, p)."""
        return self._result.params.samples

    @property
    def covariance(self) -> NDArray[np.floating[Any]]:
        """Covariance matrix, shape (p, p)."""
        return self._result.params.covariance

    @property
    def cholesky(self) -> NDArray[np.floating[Any]]:
        """Cholesky factor L, shape (p, p)."""
        return self._result.params.cholesky

    @property
    def mean(self) -> NDArray[np.floating[Any]]:
        """Mean vector the samples were drawn around."""
        return self._design.mean

    @property
    def design(self) -> 'EllipticalDesign':
        return self._design

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    @property
    def is_degenerate(self) -> bool:
        """True if the covariance had to be clamped during factorization."""
        return self._result.is_degenerate

    def __repr__(self) -> str:
        n, p = self.samples.shape
        flag = ", degenerate" if self.is_degenerate else ""
        return f"SamplingSolution(n={n}, p={p}{flag})"
