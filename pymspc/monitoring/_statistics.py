"""
Mahalanobis distance, Hotelling T2 and its upper control limit.

The default UCL is the large-sample chi-square approximation
chisq_quantile(1 - alpha, p), independent of n. The exact Phase II limit

    UCL = ((n - 1) p / (n - p)) * F_{1-alpha}(p, n - p)

is available with method='f' and needs n > p.
"""

from __future__ import annotations

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy import stats

from pymspc.core.exceptions import DimensionError, ValidationError
from pymspc.core.validation import check_open_unit, check_positive_int
from pymspc.distributions._quantiles import chisq_quantile


UCLMethod = Literal['chisq', 'f']


def _quadratic_form(
    points: ArrayLike,
    mean: ArrayLike,
    cov_inv: ArrayLike,
) -> tuple[NDArray[np.floating[Any]], bool]:
    """d' S d per row, clamped at 0. Returns (values, was_1d)."""
    x = np.asarray(points, dtype=np.float64)
    mu = np.asarray(mean, dtype=np.float64)
    S = np.asarray(cov_inv, dtype=np.float64)

    single = x.ndim == 1
    x2 = np.atleast_2d(x)
    p = mu.shape[0]
    if x2.shape[1] != p or S.shape != (p, p):
        raise DimensionError(
            f"points have {x2.shape[1]} columns, mean has length {p}, "
            f"cov_inv has shape {S.shape}"
        )

    diff = x2 - mu
    q = np.einsum('ij,jk,ik->i', diff, S, diff)
    return np.maximum(q, 0.0), single


def hotelling_t2_statistic(
    points: ArrayLike,
    mean: ArrayLike,
    cov_inv: ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """
    Hotelling T2 = (x - mu)' S^-1 (x - mu).

    Parameters
    ----------
    points : array-like, shape (p,) or (n, p)
    mean : array-like, shape (p,)
    cov_inv : array-like, shape (p, p)

    Returns
    -------
    float for a single point, ndarray (n,) otherwise.
    """
    q, single = _quadratic_form(points, mean, cov_inv)
    return float(q[0]) if single else q


def mahalanobis_distance(
    points: ArrayLike,
    mean: ArrayLike,
    cov_inv: ArrayLike,
) -> float | NDArray[np.floating[Any]]:
    """
    Mahalanobis distance sqrt(T2).

    The quadratic form is clamped at 0 before the square root, so round-off
    never produces NaN. A point equal to the mean has distance exactly 0.
    """
    q, single = _quadratic_form(points, mean, cov_inv)
    d = np.sqrt(q)
    return float(d[0]) if single else d


def hotelling_ucl(
    p: int,
    n: int,
    alpha: float,
    method: UCLMethod = 'chisq',
) -> float:
    """
    Upper control limit for Hotelling T2.

    Parameters
    ----------
    p : int
        Number of variables.
    n : int
        Number of samples. Unused by the chi-square approximation.
    alpha : float
        Significance level in (0, 1).
    method : str
        'chisq' (default): chisq_quantile(1 - alpha, p).
        'f': exact F-based limit; requires n > p.

    Raises
    ------
    ValidationError
        If p or n is not a positive integer, alpha is outside (0, 1), or
        method is unknown.
    """
    p = check_positive_int(p, "p")
    n = check_positive_int(n, "n")
    alpha = check_open_unit(alpha, "alpha")

    if method == 'chisq':
        return float(chisq_quantile(1.0 - alpha, p))

    if method == 'f':
        if n <= p:
            raise ValidationError(
                f"F-based UCL requires n > p, got n={n}, p={p}"
            )
        f_value = stats.f.ppf(1.0 - alpha, p, n - p)
        return float((n - 1) * p / (n - p) * f_value)

    raise ValidationError(
        f"Unknown UCL method: {method!r}. Must be 'chisq' or 'f'."
    )


def flag_outliers(t2: ArrayLike, ucl: float) -> NDArray[np.bool_]:
    """Outlier iff T2 > UCL (strict)."""
    return np.asarray(t2, dtype=np.float64) > ucl
