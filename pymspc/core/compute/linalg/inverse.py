"""
Gauss-Jordan matrix inversion with partial pivoting.

The pivot floor trades exactness for stability: a (near-)zero pivot is
replaced by PIVOT_FLOOR with the pivot's sign, so a singular covariance
yields a huge but finite inverse instead of an exception.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.compute.precision import PIVOT_FLOOR
from pymspc.core.validation import check_array, check_square


@dataclass(frozen=True)
class InverseResult:
    """
    Result of Gauss-Jordan inversion.

    Attributes:
        inverse: Approximate inverse (p x p)
        clamped_pivots: Elimination steps (column indices) whose pivot was
            floored to PIVOT_FLOOR
    """
    inverse: NDArray[np.floating[Any]]
    clamped_pivots: tuple[int, ...]

    @property
    def is_exact(self) -> bool:
        """True if no pivot was floored."""
        return len(self.clamped_pivots) == 0


def invert(matrix: ArrayLike) -> InverseResult:
    """
    Invert a square matrix by Gauss-Jordan elimination on [A | I].

    At each column i the row with the largest |A[k, i]| (k >= i) is swapped
    into the pivot position, the pivot row is scaled, and column i is
    eliminated from every other row.

    Args:
        matrix: Square matrix (p x p). Not modified.

    Returns:
        InverseResult with the inverse and floored pivot indices

    Raises:
        DimensionError: If matrix is not square
    """
    A = check_array(matrix, "matrix").copy()
    check_square(A, "matrix")

    p = A.shape[0]
    inv = np.eye(p, dtype=np.float64)
    clamped: list[int] = []

    for i in range(p):
        max_row = i + int(np.argmax(np.abs(A[i:, i])))
        if max_row != i:
            A[[i, max_row]] = A[[max_row, i]]
            inv[[i, max_row]] = inv[[max_row, i]]

        pivot = A[i, i]
        if abs(pivot) < PIVOT_FLOOR:
            clamped.append(i)
            pivot = PIVOT_FLOOR if pivot >= 0 else -PIVOT_FLOOR

        A[i] /= pivot
        inv[i] /= pivot

        for k in range(p):
            if k != i:
                factor = A[k, i]
                A[k] -= factor * A[i]
                inv[k] -= factor * inv[i]

    return InverseResult(inverse=inv, clamped_pivots=tuple(clamped))
