"""
Multivariate statistical process control.

Public API:
    hotelling(samples, mean, covariance, alpha)  - T2 chart with UCL and flags
    mahalanobis_distance(x, mean, cov_inv)       - Distance from the mean
    hotelling_t2_statistic(x, mean, cov_inv)     - Squared distance
    hotelling_ucl(p, n, alpha, method)           - Upper control limit
"""

from pymspc.monitoring._statistics import (
    UCLMethod,
    flag_outliers,
    hotelling_t2_statistic,
    hotelling_ucl,
    mahalanobis_distance,
)
from pymspc.monitoring.design import MonitoringDesign
from pymspc.monitoring.solution import MonitoringParams, MonitoringSolution
from pymspc.monitoring.solvers import hotelling

__all__ = [
    "hotelling",
    "mahalanobis_distance",
    "hotelling_t2_statistic",
    "hotelling_ucl",
    "flag_outliers",
    "UCLMethod",
    "MonitoringDesign",
    "MonitoringParams",
    "MonitoringSolution",
]
