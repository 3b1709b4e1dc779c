"""
Dense linear algebra kernels.

cholesky and invert are hand-written rather than delegated to LAPACK so
that degenerate covariances degrade instead of raising.
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymspc.core.compute.linalg.cholesky import CholeskyResult, cholesky
from pymspc.core.compute.linalg.inverse import InverseResult, invert
from pymspc.core.exceptions import DimensionError
from pymspc.core.validation import check_array, check_1d, check_2d


def mat_vec(matrix: ArrayLike, vector: ArrayLike) -> NDArray[np.floating[Any]]:
    """
    Dense matrix-vector product A @ x.

    Raises:
        DimensionError: If A is not 2D, x is not 1D, or their sizes disagree
    """
    A = check_array(matrix, "matrix")
    x = check_array(vector, "vector")
    check_2d(A, "matrix")
    check_1d(x, "vector")
    if A.shape[1] != x.shape[0]:
        raise DimensionError(
            f"matrix has {A.shape[1]} columns but vector has length {x.shape[0]}"
        )
    return A @ x


__all__ = [
    "CholeskyResult",
    "InverseResult",
    "cholesky",
    "invert",
    "mat_vec",
]
