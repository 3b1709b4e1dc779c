"""
Solver dispatch for Hotelling T2 monitoring.

Public API: hotelling(samples, mean, covariance, alpha, ucl_method) -> MonitoringSolution
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pymspc.core import diagnostics
from pymspc.monitoring._statistics import UCLMethod
from pymspc.monitoring.design import MonitoringDesign
from pymspc.monitoring.solution import MonitoringSolution
from pymspc.monitoring.backends.cpu import CPUMonitoringBackend


def hotelling(
    samples: ArrayLike | MonitoringDesign,
    mean: ArrayLike | None = None,
    covariance: ArrayLike | None = None,
    *,
    alpha: float = 0.05,
    ucl_method: UCLMethod = 'chisq',
) -> MonitoringSolution:
    """
    Hotelling T2 control chart against a known mean and covariance.

    Parameters
    ----------
    samples : array-like (n, p) or MonitoringDesign
        Observations to score, or a prepared design.
    mean : array-like, shape (p,)
        In-control mean.
    covariance : array-like, shape (p, p)
        In-control covariance. Inverted by Gauss-Jordan with pivot floor;
        a singular matrix yields a warning, not an error.
    alpha : float
        Significance level in (0, 1).
    ucl_method : str
        'chisq' (default) uses chisq_quantile(1 - alpha, p) regardless of n.
        'f' uses the exact F-based limit and requires n > p.

    Returns
    -------
    MonitoringSolution

    Examples
    --------
    >>> sol = hotelling(x, [0, 0], [[1, 0.5], [0.5, 1]], alpha=0.05)
    >>> sol.ucl
    5.99...
    """
    if isinstance(samples, MonitoringDesign):
        design = samples
    else:
        if mean is None or covariance is None:
            raise TypeError("hotelling() requires 'mean' and 'covariance'")
        design = MonitoringDesign.from_arrays(
            samples, mean, covariance, alpha=alpha, ucl_method=ucl_method,
        )

    result = CPUMonitoringBackend().solve(design)
    diagnostics.emit(result)

    return MonitoringSolution(_result=result, _design=design)
