"""
Monitoring solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymspc.core.result import Result

if TYPE_CHECKING:
    from pymspc.monitoring.design import MonitoringDesign


@dataclass(frozen=True)
class MonitoringParams:
    """
    Parameter payload for Hotelling T2 monitoring.

    All per-sample arrays have shape (n,) and follow sample order.
    """
    t2: NDArray[np.floating[Any]]
    distances: NDArray[np.floating[Any]]
    ucl: float
    outliers: NDArray[np.bool_]
    covariance_inverse: NDArray[np.floating[Any]]


@dataclass
class MonitoringSolution:
    """
    User-facing Hotelling T2 results.

    Wraps Result[MonitoringParams] and provides convenient accessors.
    """
    _result: Result[MonitoringParams]
    _design: 'MonitoringDesign'

    @property
    def t2(self) -> NDArray[np.floating[Any]]:
        """Hotelling T2 per sample, shape (n,)."""
        return self._result.params.t2

    @property
    def distances(self) -> NDArray[np.floating[Any]]:
        """Mahalanobis distance per sample, shape (n,)."""
        return self._result.params.distances

    @property
    def ucl(self) -> float:
        """Upper control limit."""
        return self._result.params.ucl

    @property
    def outliers(self) -> NDArray[np.bool_]:
        """True where T2 > UCL, shape (n,)."""
        return self._result.params.outliers

    @property
    def n_outliers(self) -> int:
        return int(np.sum(self._result.params.outliers))

    @property
    def outlier_rate(self) -> float:
        """Fraction of samples beyond the UCL."""
        return self.n_outliers / self._design.n

    @property
    def covariance_inverse(self) -> NDArray[np.floating[Any]]:
        """Inverse covariance used as the Mahalanobis metric, shape (p, p)."""
        return self._result.params.covariance_inverse

    @property
    def alpha(self) -> float:
        return self._design.alpha

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def table(self) -> tuple[tuple[str, ...], NDArray[np.floating[Any]]]:
        """
        Per-sample table in export column order.

        Columns: X1..Xp, T2, Mahalanobis_Distance, Is_Outlier (1/0).

        Returns
        -------
        (columns, rows) where rows has shape (n, p + 3).
        """
        p = self._design.p
        columns = tuple(f"X{i + 1}" for i in range(p)) + (
            "T2", "Mahalanobis_Distance", "Is_Outlier",
        )
        rows = np.column_stack([
            self._design.samples,
            self.t2,
            self.distances,
            self.outliers.astype(np.float64),
        ])
        return columns, rows

    def summary(self) -> str:
        """Human-readable control chart summary."""
        lines = [
            "Hotelling T2 Control Chart",
            f"  samples: {self._design.n}, variables: {self._design.p}",
            f"  alpha: {self.alpha}, UCL ({self._design.ucl_method}): {self.ucl:.4f}",
            f"  outliers: {self.n_outliers} ({self.outlier_rate:.2%})",
            f"  max T2: {float(np.max(self.t2)):.4f}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"MonitoringSolution(n={self._design.n}, p={self._design.p}, "
            f"ucl={self.ucl:.4f}, n_outliers={self.n_outliers})"
        )
