"""
Generic result container for all PyMSPC computations.

Every solver returns its domain payload wrapped in a Result. The envelope
carries the diagnostics the engine produces instead of logging: an info
dict (clamped indices, sizes, options), per-stage timing, and the tuple of
non-fatal warnings raised while computing.

Design decisions:
    - Generic over parameter payload P
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True); the caller owns the result after return
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (samples, T2 values, curves, ...)
        info: Structured metadata (sizes, options, clamped indices)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SamplingParams(samples=x, covariance=cov, ...),
        ...     info={'p': 2, 'n': 500, 'cholesky_clamped': ()},
        ...     timing={'total_seconds': 0.002, 'cholesky': 0.0001},
        ...     backend_name='cpu_box_muller'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)

    @property
    def is_degenerate(self) -> bool:
        """True if any kernel clamped a value while producing this result."""
        return any(
            bool(value) for key, value in self.info.items()
            if key.endswith('_clamped')
        )
