"""
Degenerate-matrix diagnostics.

Backends collect plain-text warnings into Result.warnings; solvers re-issue
them through the warnings module so interactive users see them too.
"""

import warnings

import numpy as np

from pymspc.core.compute.linalg import CholeskyResult, InverseResult
from pymspc.core.exceptions import DegenerateMatrixWarning
from pymspc.core.result import Result


def cholesky_warning(chol: CholeskyResult, matrix_name: str = "covariance") -> str | None:
    """Message for a clamped factorization, or None if it was exact."""
    if chol.is_exact:
        return None
    return (
        f"Cholesky of {matrix_name} clamped at diagonal indices "
        f"{list(chol.clamped)}; matrix is not positive definite, "
        f"samples are drawn from the nearest factorable approximation"
    )


def inverse_warning(inv: InverseResult, matrix_name: str = "covariance") -> str | None:
    """Message for an inversion with floored pivots, or None."""
    if inv.is_exact:
        return None
    return (
        f"Inversion of {matrix_name} floored pivots at columns "
        f"{list(inv.clamped_pivots)}; matrix is singular or nearly so, "
        f"Mahalanobis distances may be unreliable"
    )


def correlation_warning(correlations: np.ndarray) -> str | None:
    """Message for correlations outside [-1, 1], or None."""
    bad = np.where(np.abs(correlations) > 1.0)[0]
    if len(bad) == 0:
        return None
    return (
        f"correlations at indices {bad.tolist()} lie outside [-1, 1] "
        f"(values {correlations[bad].tolist()}); covariance will not be "
        f"positive semi-definite"
    )


def emit(result: Result, stacklevel: int = 3) -> None:
    """Re-issue every warning recorded in a Result as DegenerateMatrixWarning."""
    for message in result.warnings:
        warnings.warn(DegenerateMatrixWarning(message), stacklevel=stacklevel)
