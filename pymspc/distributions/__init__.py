"""
Multivariate normal (elliptical) distributions.

Public API:
    rmvnorm(mean, variances, correlations, n, seed)  - Correlated samples
    build_covariance(variances, correlations)        - Covariance matrix
    pair_index(i, j, p)                              - Flat correlation index
    normal_quantile(p)                               - Inverse normal CDF
    chisq_quantile(p, df)                            - Wilson-Hilferty quantile
    standard_normal(rng, size)                       - Box-Muller variates
    sample_multivariate_normal(mean, cov, n, seed)   - Draws from a covariance
"""

from pymspc.distributions._covariance import build_covariance, n_pairs, pair_index
from pymspc.distributions._quantiles import chisq_quantile, normal_quantile
from pymspc.distributions._sampling import (
    sample_multivariate_normal,
    sample_mvn,
    standard_normal,
)
from pymspc.distributions.design import EllipticalDesign
from pymspc.distributions.solution import SamplingParams, SamplingSolution
from pymspc.distributions.solvers import rmvnorm

__all__ = [
    "rmvnorm",
    "build_covariance",
    "n_pairs",
    "pair_index",
    "normal_quantile",
    "chisq_quantile",
    "sample_multivariate_normal",
    "sample_mvn",
    "standard_normal",
    "EllipticalDesign",
    "SamplingParams",
    "SamplingSolution",
]
