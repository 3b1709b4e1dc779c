"""
Shared compute infrastructure for PyMSPC.

IMPORTANT: This is NOT where domain-specific backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Stage timing for Result.timing
    precision: Epsilon floors and default grid/bin counts
    linalg: Clamped Cholesky, Gauss-Jordan inversion, mat_vec
"""

from pymspc.core.compute.timing import Timer
from pymspc.core.compute.linalg import (
    CholeskyResult,
    InverseResult,
    cholesky,
    invert,
    mat_vec,
)

__all__ = [
    # Timing
    "Timer",
    # Linear algebra
    "CholeskyResult",
    "InverseResult",
    "cholesky",
    "invert",
    "mat_vec",
]
