"""
Core infrastructure for PyMSPC.

Shared abstractions used by all domain sub-packages (distributions,
monitoring, density, explorer).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy and DegenerateMatrixWarning
    validation: Input validators
    compute: Timing, precision constants, linear algebra kernels
"""

from pymspc.core.result import Result
from pymspc.core.exceptions import (
    PyMSPCError,
    ValidationError,
    DimensionError,
    DegenerateMatrixWarning,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyMSPCError",
    "ValidationError",
    "DimensionError",
    "DegenerateMatrixWarning",
]
