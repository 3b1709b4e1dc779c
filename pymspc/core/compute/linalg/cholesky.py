"""
Cholesky factorization with silent clamping.

Unlike LAPACK's potrf, this factorization never fails: a negative radicand
on the diagonal is clamped to zero and a vanishing diagonal divisor is
floored to PIVOT_FLOOR. The indices where either happened are returned so
callers can report a degenerate covariance.
"""

import math
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.compute.precision import PIVOT_FLOOR
from pymspc.core.validation import check_array, check_square


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of a clamped Cholesky factorization.

    Attributes:
        L: Lower triangular factor with L @ L.T ~= A
        clamped: Diagonal indices where the radicand was negative (set to 0)
            or the divisor fell below PIVOT_FLOOR
    """
    L: NDArray[np.floating[Any]]
    clamped: tuple[int, ...]

    @property
    def is_exact(self) -> bool:
        """True if no clamping occurred."""
        return len(self.clamped) == 0


def cholesky(matrix: ArrayLike) -> CholeskyResult:
    """
    Cholesky-Banachiewicz factorization A = L L'.

    For i = 0..p-1, j = 0..i with s = sum_{k<j} L[i,k] L[j,k]:
        L[i,i] = sqrt(max(0, A[i,i] - s))
        L[i,j] = (A[i,j] - s) / max(L[j,j], eps)

    Only the lower triangle of A is read.

    Args:
        matrix: Square matrix (p x p), nominally symmetric PSD

    Returns:
        CholeskyResult with the factor and clamping diagnostics

    Raises:
        DimensionError: If matrix is not square
    """
    A = check_array(matrix, "matrix")
    check_square(A, "matrix")

    p = A.shape[0]
    L = np.zeros((p, p), dtype=np.float64)
    clamped: list[int] = []

    for i in range(p):
        for j in range(i + 1):
            s = float(L[i, :j] @ L[j, :j])
            if i == j:
                radicand = A[i, i] - s
                if radicand < 0:
                    clamped.append(i)
                L[i, i] = math.sqrt(max(0.0, radicand))
            else:
                L[i, j] = (A[i, j] - s) / max(L[j, j], PIVOT_FLOOR)

    # Columns whose divisor was floored (the last column is never a divisor)
    for j in range(p - 1):
        if L[j, j] < PIVOT_FLOOR and j not in clamped:
            clamped.append(j)

    return CholeskyResult(L=L, clamped=tuple(sorted(clamped)))
