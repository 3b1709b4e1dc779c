"""
Exception hierarchy for PyMSPC.

All exceptions inherit from PyMSPCError so callers can catch any
library-specific error with a single clause. Numerical edge cases inside
the kernels (near-singular pivots, negative Cholesky radicands) are NOT
raised: they are clamped and reported through DegenerateMatrixWarning and
the Result envelope instead.

Design principles:
    - Only structurally invalid calls surface as exceptions
    - Error messages carry actual vs expected values
    - Warnings carry the indices that were clamped
"""


class PyMSPCError(Exception):
    """Base exception for all PyMSPC errors."""
    pass


class ValidationError(PyMSPCError):
    """
    Input validation failed.

    Raised for invalid configuration: p < 1, n < 1, alpha outside (0, 1),
    negative variances, non-finite values, unknown options.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a matrix is not square, when vector lengths disagree with
    the dimension, or when more correlations are supplied than there are
    variable pairs.
    """
    pass


class DegenerateMatrixWarning(UserWarning):
    """
    A matrix was degenerate and the computation degraded gracefully.

    Issued when Cholesky clamps a negative radicand to zero, when Gauss-Jordan
    inversion floors a pivot to epsilon, or when a correlation lies outside
    [-1, 1]. The result is still returned but may be inexact.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        indices: Diagonal or pivot indices where clamping occurred
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        indices: tuple[int, ...] = (),
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.indices = tuple(indices)
