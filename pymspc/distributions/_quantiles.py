"""
Closed-form quantile approximations.

normal_quantile: Acklam's rational approximation to the inverse standard
normal CDF (relative error ~1.15e-9, no Newton refinement).

chisq_quantile: Wilson-Hilferty cube-root transform of the normal quantile.
Approximate; loses accuracy for df < 5 and extreme probabilities.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


# Central region numerator / denominator
_A = (
    -3.969683028665376e+01,
    2.209460984245205e+02,
    -2.759285104469687e+02,
    1.383577518672690e+02,
    -3.066479806614716e+01,
    2.506628277459239e+00,
)
_B = (
    -5.447609879822406e+01,
    1.615858368580409e+02,
    -1.556989798598866e+02,
    6.680131188771972e+01,
    -1.328068155288572e+01,
)

# Tail numerator / denominator
_C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e+00,
    -2.549732539343734e+00,
    4.374664141464968e+00,
    2.938163982698783e+00,
)
_D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e+00,
    3.754408661907416e+00,
)

P_LOW = 0.02425
P_HIGH = 1.0 - P_LOW


def _horner(coefs: tuple[float, ...], x: NDArray, tail: float) -> NDArray:
    """Evaluate ((c0*x + c1)*x + ...)*x + tail."""
    acc = np.full_like(x, coefs[0])
    for c in coefs[1:]:
        acc = acc * x + c
    if tail:
        acc = acc * x + tail
    return acc


def _tail(q: NDArray) -> NDArray:
    return _horner(_C, q, 0.0) / _horner(_D, q, 1.0)


def normal_quantile(p: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Inverse CDF of the standard normal distribution.

    Parameters
    ----------
    p : float or array-like
        Probabilities. Values <= 0 map to -inf, values >= 1 to +inf.

    Returns
    -------
    float for scalar input, ndarray otherwise.
    """
    p_arr = np.asarray(p, dtype=np.float64)
    scalar = p_arr.ndim == 0
    p_arr = np.atleast_1d(p_arr)

    z = np.empty_like(p_arr)

    low = (p_arr > 0) & (p_arr < P_LOW)
    central = (p_arr >= P_LOW) & (p_arr <= P_HIGH)
    high = (p_arr > P_HIGH) & (p_arr < 1)

    z[p_arr <= 0] = -np.inf
    z[p_arr >= 1] = np.inf
    z[np.isnan(p_arr)] = np.nan

    if np.any(low):
        q = np.sqrt(-2.0 * np.log(p_arr[low]))
        z[low] = _tail(q)

    if np.any(central):
        q = p_arr[central] - 0.5
        r = q * q
        z[central] = _horner(_A, r, 0.0) * q / _horner(_B, r, 1.0)

    if np.any(high):
        q = np.sqrt(-2.0 * np.log(1.0 - p_arr[high]))
        z[high] = -_tail(q)

    if scalar:
        return float(z[0])
    return z


def chisq_quantile(p: ArrayLike, df: ArrayLike) -> float | NDArray[np.floating[Any]]:
    """
    Chi-square quantile by the Wilson-Hilferty approximation.

        df * (1 - 2/(9 df) + z sqrt(2/(9 df)))^3,   z = normal_quantile(p)

    Parameters
    ----------
    p : float or array-like
        Lower-tail probability.
    df : float or array-like
        Degrees of freedom (> 0). Broadcasts against p.

    The cube goes negative for small p and low df; the result is clamped
    at 0, the lower edge of the support.
    """
    z = np.asarray(normal_quantile(p), dtype=np.float64)
    df_arr = np.asarray(df, dtype=np.float64)
    k = 2.0 / (9.0 * df_arr)
    result = np.maximum(df_arr * (1.0 - k + z * np.sqrt(k)) ** 3, 0.0)
    if np.ndim(result) == 0:
        return float(result)
    return result
