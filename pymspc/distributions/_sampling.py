"""
Box-Muller normal variates and correlated multivariate normal draws.

Each standard normal consumes an adjacent (u1, u2) pair from the
generator's uniform stream, so vectorized draws reproduce the sequence of
repeated scalar draws exactly.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.compute.linalg import cholesky
from pymspc.core.compute.precision import UNIFORM_FLOOR
from pymspc.core.exceptions import DimensionError
from pymspc.core.validation import check_array, check_positive_int, check_square


def as_generator(seed: int | np.random.Generator | None) -> np.random.Generator:
    """Return seed unchanged if it is already a Generator, else seed a new one."""
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def standard_normal(
    rng: np.random.Generator,
    size: int | tuple[int, ...] | None = None,
) -> float | NDArray[np.floating[Any]]:
    """
    Box-Muller transform: sqrt(-2 ln u1) * cos(2 pi u2).

    Parameters
    ----------
    rng : numpy.random.Generator
        Uniform source.
    size : int or tuple, optional
        Output shape. None returns a Python float.
    """
    if size is None:
        shape: tuple[int, ...] = ()
    elif isinstance(size, tuple):
        shape = size
    else:
        shape = (int(size),)

    u = rng.random(shape + (2,))
    u1 = np.maximum(u[..., 0], UNIFORM_FLOOR)
    u2 = u[..., 1]
    z = np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

    if size is None:
        return float(z)
    return z


def sample_mvn(
    mean: ArrayLike,
    chol_factor: ArrayLike,
    n: int,
    rng: np.random.Generator,
) -> NDArray[np.floating[Any]]:
    """
    Draw n samples x = L z + mean.

    Parameters
    ----------
    mean : array-like, shape (p,)
    chol_factor : array-like, shape (p, p)
        Lower triangular L with L L' ~= covariance, computed once by the
        caller.
    n : int
        Number of draws.
    rng : numpy.random.Generator

    Returns
    -------
    ndarray, shape (n, p), rows in draw order.
    """
    mu = np.asarray(mean, dtype=np.float64)
    L = np.asarray(chol_factor, dtype=np.float64)
    z = standard_normal(rng, (n, mu.shape[0]))
    return z @ L.T + mu


def sample_multivariate_normal(
    mean: ArrayLike,
    covariance: ArrayLike,
    n: int,
    seed: int | np.random.Generator | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Draw n samples from N(mean, covariance).

    The covariance is factored once with the clamped Cholesky kernel, so a
    non-PD matrix still yields samples. Use rmvnorm for the clamping
    diagnostics and warnings.

    Parameters
    ----------
    mean : array-like, shape (p,)
    covariance : array-like, shape (p, p)
    n : int
        Number of draws, >= 1.
    seed : int, Generator or None
        Random source.

    Returns
    -------
    ndarray, shape (n, p), rows in draw order.

    Raises
    ------
    DimensionError
        If covariance is not square or does not match the mean.
    ValidationError
        If n is not a positive integer.
    """
    mu = check_array(mean, "mean").ravel()
    cov = check_array(covariance, "covariance")
    check_square(cov, "covariance")
    if cov.shape[0] != mu.shape[0]:
        raise DimensionError(
            f"covariance has shape {cov.shape} but mean has length {mu.shape[0]}"
        )
    n = check_positive_int(n, "n")
    return sample_mvn(mu, cholesky(cov).L, n, as_generator(seed))
